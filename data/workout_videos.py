VIDEOS_DATA = [
    {"title": "15-Minute Arm Workout for Beginners", "description": "A beginner-friendly arm workout targeting biceps, triceps, and shoulders.", "thumbnail_url": "https://images.unsplash.com/photo-1581009146145-b5ef050c2e1e", "video_id": "UyTR2EjTAXU", "category": "arms", "duration": "15:24"},
    {"title": "30-Minute Leg Strength Training", "description": "Complete leg workout focusing on quads, hamstrings, and glutes.", "thumbnail_url": "https://images.unsplash.com/photo-1434608519344-49d77a699e1d", "video_id": "RjexvOAsVtI", "category": "legs", "duration": "30:12"},
    {"title": "10-Minute Ab Workout", "description": "Quick core workout you can do anywhere without equipment.", "thumbnail_url": "https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b", "video_id": "pMmU4z-edOw", "category": "core", "duration": "10:45"},
    {"title": "20-Minute HIIT Cardio", "description": "High-intensity interval training to burn calories and improve cardiovascular health.", "thumbnail_url": "https://images.unsplash.com/photo-1538805060514-97d9cc17730c", "video_id": "ml6cT4AZdqI", "category": "cardio", "duration": "21:33"},
    {"title": "45-Minute Full Body Workout", "description": "Complete workout targeting all major muscle groups for total body conditioning.", "thumbnail_url": "https://images.unsplash.com/photo-1517836357463-d25dfeac3438", "video_id": "5PoEVZH8OP4", "category": "fullbody", "duration": "45:17"},
]

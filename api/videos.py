"""Workout video API router.

Exposes the seeded workout catalogue, optionally filtered by category.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from database.deps import get_db_read
from core.logger import get_logger
from services.video_catalog import get_video, list_videos
from schemas import VideoListResponse, VideoResponse, WorkoutVideoDetail

logger = get_logger("api.videos")
router = APIRouter(prefix="/api/videos", tags=["videos"])


@router.get("", response_model=VideoListResponse)
def get_workout_videos(category: Optional[str] = None, db: Session = Depends(get_db_read)):
    """Return all workout videos, or only those in `category`."""
    videos = list_videos(db, category)
    return VideoListResponse(videos=[WorkoutVideoDetail.model_validate(v) for v in videos])


@router.get("/{video_id}", response_model=VideoResponse)
def get_workout_video(video_id: int, db: Session = Depends(get_db_read)):
    """Return a single workout video.

    Raises:
        NotFoundError: If the video does not exist.
    """
    video = get_video(db, video_id)
    return VideoResponse(video=WorkoutVideoDetail.model_validate(video))

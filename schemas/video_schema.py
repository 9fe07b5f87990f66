"""Schemas for workout video responses."""

from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class WorkoutVideoDetail(BaseModel):
    """Representation of a workout video in responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    video_id: str
    category: str
    duration: Optional[str] = None


class VideoListResponse(BaseModel):
    videos: List[WorkoutVideoDetail]


class VideoResponse(BaseModel):
    video: WorkoutVideoDetail

"""Workout video catalogue lookups."""

from typing import List, Optional

from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.logger import get_logger
from core.repository import BaseRepository
from database.models import WorkoutVideo

logger = get_logger("services.video_catalog")

ALL_CATEGORIES = "all"


def list_videos(db: Session, category: Optional[str] = None) -> List[WorkoutVideo]:
    """Return catalogue videos, optionally restricted to one category.

    A missing category or ``"all"`` returns the whole catalogue.
    """
    repo = BaseRepository(WorkoutVideo, db)
    q = repo.query()
    if category and category != ALL_CATEGORIES:
        q = q.filter(WorkoutVideo.category == category)
    videos = q.order_by(WorkoutVideo.id).all()
    logger.debug("Listed %s videos (category=%s)", len(videos), category)
    return videos


def get_video(db: Session, video_id: int) -> WorkoutVideo:
    """Fetch one video by id.

    Raises:
        NotFoundError: If no video has that id.
    """
    video = BaseRepository(WorkoutVideo, db).get_by_id(video_id)
    if video is None:
        raise NotFoundError("WorkoutVideo", video_id)
    return video

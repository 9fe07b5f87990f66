"""SQLAlchemy ORM models for the fitness calculator service.

`UserCalculation` keeps one row per calculation a known user ran, and
`WorkoutVideo` holds the seeded workout catalogue. Models carry no business
logic; calculation details are stored as JSON-encoded text.
"""

from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


class UserCalculation(Base):
    """ORM model for a single stored calculation.

    `value` is the headline number as text (BMI, calories or body fat %),
    `details` the JSON-encoded inputs and category or full result.
    """

    __tablename__ = "user_calculations"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    type = Column(String, nullable=False)  # bmi, calories, bodyfat
    value = Column(String, nullable=False)
    details = Column(Text, nullable=True)
    date = Column(DateTime, default=datetime.utcnow, index=True)


class WorkoutVideo(Base):
    """ORM model for a workout video in the catalogue."""

    __tablename__ = "workout_videos"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    thumbnail_url = Column(String, nullable=True)
    video_id = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)
    duration = Column(String, nullable=True)

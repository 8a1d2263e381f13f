# app/db/models/image.py
import enum

from sqlalchemy import Column, DateTime, Integer, String, Index, func
from app.db.base import Base


class ImageableType(str, enum.Enum):
    SPOT = "Spot"
    REVIEW = "Review"


class Image(Base):
    """
    An image attached to either a Spot or a Review.
    The owner is (imageable_type, imageable_id); there is no foreign key,
    so owners load their images through explicit join conditions.
    """
    __tablename__ = "images"
    __table_args__ = (
        Index("ix_images_imageable", "imageable_type", "imageable_id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    imageable_id = Column(Integer, nullable=False)
    imageable_type = Column(String(20), nullable=False)
    url = Column(String, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

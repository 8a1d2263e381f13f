# app/db/models/review.py
from sqlalchemy import (
    CheckConstraint, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint, and_, func,
)
from sqlalchemy.orm import foreign, relationship
from app.db.base import Base
from app.db.models.image import Image, ImageableType


class Review(Base):
    __tablename__ = "reviews"
    __table_args__ = (
        # one review per user per spot
        UniqueConstraint("user_id", "spot_id", name="uq_reviews_user_spot"),
        CheckConstraint("stars BETWEEN 1 AND 5", name="ck_reviews_stars"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    spot_id = Column(Integer, ForeignKey("spots.id", ondelete="CASCADE"), nullable=False, index=True)

    review = Column(String, nullable=False)
    stars = Column(Integer, nullable=False)   # 1..5

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="reviews")
    spot = relationship("Spot", back_populates="reviews")
    images = relationship(
        Image,
        primaryjoin=lambda: and_(
            Review.id == foreign(Image.imageable_id),
            Image.imageable_type == ImageableType.REVIEW.value,
        ),
        viewonly=True,
        lazy="selectin",
        order_by=Image.id,
    )

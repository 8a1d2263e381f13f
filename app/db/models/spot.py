# app/db/models/spot.py
from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, and_, func
from sqlalchemy.orm import foreign, relationship
from app.db.base import Base
from app.db.models.image import Image, ImageableType


class Spot(Base):
    __tablename__ = "spots"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Location
    address = Column(String, nullable=False)
    city = Column(String, nullable=False)
    state = Column(String, nullable=False)
    country = Column(String, nullable=False)
    lat = Column(Float, nullable=False)
    lng = Column(Float, nullable=False)

    # Listing
    name = Column(String(50), nullable=False)
    description = Column(String, nullable=False)
    price = Column(Float, nullable=False)  # per day
    preview_image = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    owner = relationship("User", back_populates="spots")
    reviews = relationship(
        "Review",
        back_populates="spot",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    images = relationship(
        Image,
        primaryjoin=lambda: and_(
            Spot.id == foreign(Image.imageable_id),
            Image.imageable_type == ImageableType.SPOT.value,
        ),
        viewonly=True,
        lazy="selectin",
        order_by=Image.id,
    )

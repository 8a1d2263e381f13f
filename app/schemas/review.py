# app/schemas/review.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from app.schemas.image import ImageResponse
from app.schemas.user import UserSummary


class ReviewCreate(BaseModel):
    review: str
    stars: int


class ReviewResponse(BaseModel):
    id: int
    user_id: int
    spot_id: int
    review: str
    stars: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class ReviewDetailResponse(ReviewResponse):
    user: Optional[UserSummary] = Field(default=None, alias="User")
    images: List[ImageResponse] = Field(default_factory=list, alias="Images")


class ReviewListResponse(BaseModel):
    reviews: List[ReviewDetailResponse] = Field(alias="Reviews")

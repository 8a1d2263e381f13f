# app/schemas/spot.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from app.schemas.image import ImageResponse
from app.schemas.user import UserSummary


class _CamelModel(BaseModel):
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
        extra = "ignore"
        allow_inf_nan = False


# Request bodies, built only after the rule sets in app.core.validation pass
class SpotEdit(_CamelModel):
    address: str
    city: str
    state: str
    country: str
    lat: float
    lng: float
    name: str
    description: str
    price: float


class SpotCreate(SpotEdit):
    preview_image: str


# Responses
class SpotEditResponse(_CamelModel):
    id: int
    owner_id: int
    address: str
    city: str
    state: str
    country: str
    lat: float
    lng: float
    name: str
    description: str
    price: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SpotResponse(SpotEditResponse):
    preview_image: Optional[str] = None


class SpotListResponse(BaseModel):
    spots: List[SpotResponse] = Field(alias="Spots")


class SpotDetailResponse(SpotResponse):
    images: List[ImageResponse] = Field(default_factory=list, alias="Images")
    owner: Optional[UserSummary] = Field(default=None, alias="Owner")
    num_reviews: int = 0
    # None when the spot has no reviews
    avg_star_rating: Optional[float] = None


class DeleteResponse(BaseModel):
    message: str
    status_code: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True

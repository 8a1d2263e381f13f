# app/schemas/image.py
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ImageResponse(BaseModel):
    id: int
    imageable_id: int
    url: str

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

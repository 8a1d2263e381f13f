from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel


class UserCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    username: str = Field(..., min_length=4, max_length=30)
    password: str = Field(..., min_length=6, max_length=128)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class UserLogin(BaseModel):
    # email or username
    credential: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserSummary(BaseModel):
    id: int
    first_name: str
    last_name: str

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class UserResponse(UserSummary):
    email: str
    username: str


class SessionResponse(BaseModel):
    user: UserResponse
    access_token: str
    token_type: str = "bearer"

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CurrentUserResponse(BaseModel):
    user: UserResponse

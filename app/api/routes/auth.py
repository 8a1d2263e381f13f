import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.config import get_settings
from app.db.base import get_db
from app.db.models.user import User
from app.core.errors import UnauthorizedError, ValidationFailedError
from app.core.security import (
    TOKEN_COOKIE,
    create_access_token,
    get_current_user,
    hash_password,
    verify_password,
)
from app.schemas.user import CurrentUserResponse, SessionResponse, UserCreate, UserLogin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _start_session(response: Response, user: User) -> dict:
    token = create_access_token(user.id)
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        max_age=get_settings().access_token_expire_minutes * 60,
        httponly=True,
        samesite="lax",
    )
    return {"user": user, "access_token": token}


@router.post("/register", response_model=SessionResponse)
def register(user: UserCreate, response: Response, db: Session = Depends(get_db)):
    errors = {}
    if db.query(User).filter(func.lower(User.email) == user.email.lower()).first():
        errors["email"] = "User with that email already exists"
    if db.query(User).filter(User.username == user.username).first():
        errors["username"] = "User with that username already exists"
    if errors:
        raise ValidationFailedError(errors, message="User already exists")

    new_user = User(
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email.lower(),
        username=user.username,
        password_hash=hash_password(user.password),
    )

    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    logger.info("User registered", extra={"user_id": new_user.id})
    return _start_session(response, new_user)


@router.post("/login", response_model=SessionResponse)
def login(credentials: UserLogin, response: Response, db: Session = Depends(get_db)):
    credential = credentials.credential.strip()
    user = db.query(User).filter(
        or_(func.lower(User.email) == credential.lower(), User.username == credential)
    ).first()

    if not user or not verify_password(credentials.password, user.password_hash):
        raise UnauthorizedError("Invalid credentials")

    return _start_session(response, user)


@router.get("/me", response_model=CurrentUserResponse)
def me(current_user: User = Depends(get_current_user)):
    return {"user": current_user}

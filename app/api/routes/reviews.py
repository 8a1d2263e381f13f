# app/api/routes/reviews.py
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from app.db.base import get_db
from app.db.models.review import Review
from app.db.models.spot import Spot
from app.db.models.user import User
from app.core.errors import ForbiddenError, NotFoundError
from app.core.security import get_current_user
from app.core.validation import REVIEW_CREATE_RULES, enforce
from app.schemas.review import ReviewCreate, ReviewListResponse, ReviewResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/spots/{spot_id}/reviews", tags=["reviews"])

DUPLICATE_REVIEW = "User already has a review for this spot"

# postgres reports the constraint name, sqlite the column list
_DUPLICATE_MARKERS = ("uq_reviews_user_spot", "reviews.user_id, reviews.spot_id")


def _get_spot_or_404(db: Session, spot_id: int) -> Spot:
    spot = db.query(Spot).filter(Spot.id == spot_id).first()
    if not spot:
        raise NotFoundError("Spot")
    return spot


def is_duplicate_review(exc: IntegrityError) -> bool:
    detail = str(exc.orig)
    return any(marker in detail for marker in _DUPLICATE_MARKERS)


def find_user_review(db: Session, user_id: int, spot_id: int):
    return db.query(Review).filter(Review.user_id == user_id, Review.spot_id == spot_id).first()


# List reviews for a spot (public)
@router.get("", response_model=ReviewListResponse)
def list_spot_reviews(spot_id: int, db: Session = Depends(get_db)):
    spot = _get_spot_or_404(db, spot_id)

    reviews = (
        db.query(Review)
        .options(selectinload(Review.user))
        .filter(Review.spot_id == spot.id)
        .order_by(Review.id)
        .all()
    )
    return {"Reviews": reviews}


# Create a review for a spot
@router.post("", response_model=ReviewResponse)
def create_review(
    spot_id: int,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    data = enforce(REVIEW_CREATE_RULES, payload, ReviewCreate)

    spot = _get_spot_or_404(db, spot_id)

    # Enforce one review per user per spot (db unique + check)
    if find_user_review(db, current_user.id, spot.id):
        raise ForbiddenError(DUPLICATE_REVIEW)

    review = Review(
        user_id=current_user.id,
        spot_id=spot.id,
        review=data.review,
        stars=data.stars,
    )

    db.add(review)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if not is_duplicate_review(exc):
            raise
        # a concurrent request inserted the same (user, spot) pair first
        raise ForbiddenError(DUPLICATE_REVIEW) from exc
    db.refresh(review)

    logger.info(
        "Review created",
        extra={"review_id": review.id, "spot_id": spot.id, "user_id": current_user.id},
    )
    return review

# app/api/routes/spots.py
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Optional, Tuple

from fastapi import APIRouter, Body, Depends
from sqlalchemy import and_, func, or_, select
from sqlalchemy.orm import Session, selectinload

from app.db.base import get_db
from app.db.models.spot import Spot
from app.db.models.review import Review
from app.db.models.image import Image, ImageableType
from app.db.models.user import User
from app.core.errors import NotFoundError
from app.core.security import get_current_user
from app.core.validation import SPOT_CREATE_RULES, SPOT_EDIT_RULES, enforce
from app.schemas.spot import (
    DeleteResponse,
    SpotCreate,
    SpotDetailResponse,
    SpotEdit,
    SpotEditResponse,
    SpotListResponse,
    SpotResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/spots", tags=["spots"])


# Helper: review count and average rating for one spot
def get_review_stats(db: Session, spot_id: int) -> Tuple[int, Optional[float]]:
    count, total = (
        db.query(func.count(Review.id), func.coalesce(func.sum(Review.stars), 0))
        .filter(Review.spot_id == spot_id)
        .one()
    )
    count = int(count or 0)
    if count == 0:
        return 0, None

    avg = (Decimal(int(total)) / Decimal(count)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return count, float(avg)


# Helper: load a spot the requester owns; anything else looks like a missing spot
def get_owned_spot(db: Session, spot_id: int, user: User) -> Spot:
    spot = db.query(Spot).filter(Spot.id == spot_id).first()
    if not spot or spot.owner_id != user.id:
        raise NotFoundError("Spot")
    return spot


# Return all spots

@router.get("", response_model=SpotListResponse)
def list_spots(db: Session = Depends(get_db)):
    spots = db.query(Spot).order_by(Spot.id).all()
    return {"Spots": spots}


# Return spot details by id

@router.get("/{spot_id}", response_model=SpotDetailResponse)
def get_spot(spot_id: int, db: Session = Depends(get_db)):
    spot = (
        db.query(Spot)
        .options(selectinload(Spot.owner))
        .filter(Spot.id == spot_id)
        .first()
    )
    if not spot:
        raise NotFoundError("Spot")

    num_reviews, avg_star_rating = get_review_stats(db, spot.id)

    return SpotDetailResponse.model_validate(spot).model_copy(
        update={"num_reviews": num_reviews, "avg_star_rating": avg_star_rating}
    )


# Create a new spot

@router.post("", response_model=SpotResponse)
def create_spot(
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    data = enforce(SPOT_CREATE_RULES, payload, SpotCreate)

    spot = Spot(owner_id=current_user.id, **data.model_dump())

    db.add(spot)
    db.commit()
    db.refresh(spot)

    logger.info("Spot created", extra={"spot_id": spot.id, "user_id": current_user.id})
    return spot


# Edit a spot (owner only)

@router.put("/{spot_id}", response_model=SpotEditResponse)
def update_spot(
    spot_id: int,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    data = enforce(SPOT_EDIT_RULES, payload, SpotEdit)

    spot = get_owned_spot(db, spot_id, current_user)

    for field, value in data.model_dump().items():
        setattr(spot, field, value)

    db.commit()
    db.refresh(spot)

    logger.info("Spot updated", extra={"spot_id": spot.id, "user_id": current_user.id})
    return spot


# Delete a spot (owner only)

@router.delete("/{spot_id}", response_model=DeleteResponse)
def delete_spot(
    spot_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    spot = get_owned_spot(db, spot_id, current_user)

    # images have no foreign key, so they are not cascaded with the spot
    review_ids = select(Review.id).where(Review.spot_id == spot.id)
    db.query(Image).filter(
        or_(
            and_(Image.imageable_type == ImageableType.SPOT.value, Image.imageable_id == spot.id),
            and_(Image.imageable_type == ImageableType.REVIEW.value, Image.imageable_id.in_(review_ids)),
        )
    ).delete(synchronize_session=False)

    db.delete(spot)
    db.commit()

    logger.info("Spot deleted", extra={"spot_id": spot_id, "user_id": current_user.id})
    return {"message": "Successfully deleted", "statusCode": 200}

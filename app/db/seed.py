# app/db/seed.py
"""
Demo data loader.

    python -m app.db.seed

Creates the tables if needed and inserts a few users, spots, reviews and
images. Does nothing when the users table already has rows.
"""
import logging

from sqlalchemy.orm import Session

from app.config import get_settings
from app.core.observability import setup_logging
from app.core.security import hash_password
from app.db.base import SessionLocal, engine
from app.db.init_db import create_tables
from app.db.models.image import Image, ImageableType
from app.db.models.review import Review
from app.db.models.spot import Spot
from app.db.models.user import User

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password"

USERS = [
    {"first_name": "Demo", "last_name": "Lition", "email": "demo@user.io", "username": "Demo-lition"},
    {"first_name": "Fake", "last_name": "User", "email": "user1@user.io", "username": "FakeUser1"},
    {"first_name": "Another", "last_name": "Fake", "email": "user2@user.io", "username": "FakeUser2"},
]

# owner is an index into USERS
SPOTS = [
    {
        "owner": 0,
        "address": "123 Disney Lane",
        "city": "San Francisco",
        "state": "California",
        "country": "United States of America",
        "lat": 37.7645358,
        "lng": -122.4730327,
        "name": "App Academy",
        "description": "Place where web developers are created",
        "price": 123,
        "preview_image": "https://example.com/spots/app-academy.jpg",
    },
    {
        "owner": 1,
        "address": "742 Evergreen Terrace",
        "city": "Springfield",
        "state": "Oregon",
        "country": "United States of America",
        "lat": 44.0462362,
        "lng": -123.0220289,
        "name": "Family Home",
        "description": "Two-storey house with a large backyard",
        "price": 95,
        "preview_image": "https://example.com/spots/evergreen.jpg",
    },
    {
        "owner": 2,
        "address": "1 Beach Road",
        "city": "Malibu",
        "state": "California",
        "country": "United States of America",
        "lat": 34.0259216,
        "lng": -118.7797620,
        "name": "Ocean View Cottage",
        "description": "Small cottage a short walk from the beach",
        "price": 240,
        "preview_image": "https://example.com/spots/ocean-view.jpg",
    },
]

# (user index, spot index, text, stars)
REVIEWS = [
    (0, 1, "This place rocks", 5),
    (1, 2, "This owner is a jerk", 1),
    (2, 0, "This place is okay", 3),
]


def seed(db: Session) -> bool:
    """Insert the demo rows. Returns False when the database was already seeded."""
    if db.query(User).first():
        logger.info("Database already seeded, skipping")
        return False

    password_hash = hash_password(DEMO_PASSWORD)
    users = [User(password_hash=password_hash, **fields) for fields in USERS]
    db.add_all(users)
    db.flush()

    spots = []
    for fields in SPOTS:
        fields = dict(fields)
        owner = users[fields.pop("owner")]
        spots.append(Spot(owner_id=owner.id, **fields))
    db.add_all(spots)
    db.flush()

    reviews = [
        Review(user_id=users[u].id, spot_id=spots[s].id, review=text, stars=stars)
        for u, s, text, stars in REVIEWS
    ]
    db.add_all(reviews)
    db.flush()

    images = [
        Image(imageable_id=spot.id, imageable_type=ImageableType.SPOT.value, url=spot.preview_image)
        for spot in spots
    ]
    images.append(
        Image(
            imageable_id=reviews[0].id,
            imageable_type=ImageableType.REVIEW.value,
            url="https://example.com/reviews/family-home.jpg",
        )
    )
    db.add_all(images)
    db.commit()

    logger.info(
        "Seeded %d users, %d spots, %d reviews, %d images",
        len(users), len(spots), len(reviews), len(images),
    )
    return True


def main():
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    create_tables(engine)

    db = SessionLocal()
    try:
        seed(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()

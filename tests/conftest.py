"""Root conftest: in-memory database, API client and data factories."""

import os

# must be set before app.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import create_access_token, hash_password
from app.db.base import Base, get_db, make_engine
from app.db.init_db import create_tables
from app.db.models.image import Image, ImageableType
from app.db.models.review import Review
from app.db.models.spot import Spot
from app.db.models.user import User
from app.main import app

PASSWORD = "secret-password"


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    create_tables(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    """Session for arranging and inspecting rows; always commit before calling the API."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(scope="session")
def password_hash():
    # bcrypt is slow; hash once for every factory-made user
    return hash_password(PASSWORD)


@pytest.fixture
def make_user(db, password_hash):
    counter = {"n": 0}

    def _make_user(**overrides):
        counter["n"] += 1
        n = counter["n"]
        fields = {
            "first_name": f"First{n}",
            "last_name": f"Last{n}",
            "email": f"user{n}@spots.io",
            "username": f"user{n}",
            "password_hash": password_hash,
        }
        fields.update(overrides)
        user = User(**fields)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_spot(db):
    def _make_spot(owner, **overrides):
        fields = {
            "address": "123 Disney Lane",
            "city": "San Francisco",
            "state": "California",
            "country": "United States of America",
            "lat": 37.7645358,
            "lng": -122.4730327,
            "name": "App Academy",
            "description": "Place where web developers are created",
            "price": 123.0,
            "preview_image": "https://example.com/spot.jpg",
        }
        fields.update(overrides)
        spot = Spot(owner_id=owner.id, **fields)
        db.add(spot)
        db.commit()
        db.refresh(spot)
        return spot

    return _make_spot


@pytest.fixture
def make_review(db):
    def _make_review(user, spot, stars=5, text="Great stay"):
        review = Review(user_id=user.id, spot_id=spot.id, review=text, stars=stars)
        db.add(review)
        db.commit()
        db.refresh(review)
        return review

    return _make_review


@pytest.fixture
def make_image(db):
    def _make_image(owner, url="https://example.com/image.jpg"):
        kind = ImageableType.SPOT if isinstance(owner, Spot) else ImageableType.REVIEW
        image = Image(imageable_id=owner.id, imageable_type=kind.value, url=url)
        db.add(image)
        db.commit()
        db.refresh(image)
        return image

    return _make_image


@pytest.fixture
def auth_headers():
    def _auth_headers(user):
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}

    return _auth_headers


@pytest.fixture
def owner(make_user):
    return make_user(first_name="Olive", last_name="Owner")


@pytest.fixture
def guest(make_user):
    return make_user(first_name="Gus", last_name="Guest")


@pytest.fixture
def spot_payload():
    return {
        "address": "742 Evergreen Terrace",
        "city": "Springfield",
        "state": "Oregon",
        "country": "United States of America",
        "lat": 44.0462362,
        "lng": -123.0220289,
        "name": "Family Home",
        "description": "Two-storey house with a large backyard",
        "price": 95,
        "previewImage": "https://example.com/evergreen.jpg",
    }

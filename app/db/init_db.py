# app/db/init_db.py
import logging

from app.db.base import Base

# every model has to be imported before create_all / mapper configuration
from app.db.models.user import User  # noqa: F401
from app.db.models.spot import Spot  # noqa: F401
from app.db.models.review import Review  # noqa: F401
from app.db.models.image import Image  # noqa: F401

logger = logging.getLogger(__name__)


def create_tables(engine) -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready: %s", ", ".join(sorted(Base.metadata.tables)))

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.core.observability import setup_logging
from app.db.base import engine
from app.db.init_db import create_tables
from app.api.error_handlers import register_error_handlers
from app.api.routes import auth
from app.api.routes import spots as spots_router
from app.api.routes import reviews as reviews_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    create_tables(engine)
    logger.info("Spot Rental API started")
    yield
    logger.info("Spot Rental API shutting down")


app = FastAPI(title="Spot Rental API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.get("/")
def root():
    return {"message": "Spot Rental API running"}


app.include_router(auth.router)
app.include_router(spots_router.router)
app.include_router(reviews_router.router)


def run():
    """Console entry point: serve the app with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, reload=settings.reload)


if __name__ == "__main__":
    run()

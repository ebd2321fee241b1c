import logging

from fastapi import FastAPI

from app.api.health import router as health_router
from app.api.review import router as review_router
from app.core.config import settings

logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(title=settings.app_title)
app.include_router(health_router)
app.include_router(review_router)

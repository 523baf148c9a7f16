"""FastAPI routers and dependencies."""

from app.api.deps import get_scraper
from app.api.raised_total import router as raised_total_router

__all__ = [
    "get_scraper",
    "raised_total_router",
]

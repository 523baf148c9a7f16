"""FastAPI dependencies for dependency injection."""

import logging

from fastapi import Depends

from app.core.config import Settings, get_settings
from app.core.factory import get_factory
from app.core.scraper import RaisedTotalScraper

logger = logging.getLogger(__name__)


def get_scraper(settings: Settings = Depends(get_settings)) -> RaisedTotalScraper:
    """Dependency building the scraper from the configured strategies.

    Args:
        settings: Application settings.

    Returns:
        A scraper for the configured campaign page.

    Raises:
        ValueError: If a configured strategy name is unknown.
    """
    factory = get_factory()
    return RaisedTotalScraper(
        source=factory.get_source(),
        selector=factory.get_selector(),
        url=settings.target_url,
    )

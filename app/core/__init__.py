"""Core configuration, factory and scraping pipeline."""

from app.core.config import Settings, get_settings
from app.core.factory import ComponentFactory, get_factory
from app.core.scraper import RaisedTotalScraper, ScrapeOutcome

__all__ = [
    "Settings",
    "get_settings",
    "ComponentFactory",
    "get_factory",
    "RaisedTotalScraper",
    "ScrapeOutcome",
]

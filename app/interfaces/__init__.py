"""Abstract base classes for scraping strategies."""

from app.interfaces.selector import BaseAmountSelector, Candidate, Selection
from app.interfaces.source import (
    BasePageSource,
    PageContent,
    PageFetchError,
    UpstreamStatusError,
)

__all__ = [
    "BasePageSource",
    "PageContent",
    "PageFetchError",
    "UpstreamStatusError",
    "BaseAmountSelector",
    "Candidate",
    "Selection",
]

"""Concrete page source implementations."""

from app.strategies.sources.rendered import RenderedPageSource
from app.strategies.sources.static_html import StaticHtmlSource

__all__ = [
    "RenderedPageSource",
    "StaticHtmlSource",
]

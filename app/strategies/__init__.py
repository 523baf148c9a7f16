"""Concrete strategy implementations."""

from app.strategies.selectors import (
    LargestAmountSelector,
    ScoredAmountSelector,
    ThresholdAmountSelector,
)
from app.strategies.sources import (
    RenderedPageSource,
    StaticHtmlSource,
)

__all__ = [
    "LargestAmountSelector",
    "ScoredAmountSelector",
    "ThresholdAmountSelector",
    "RenderedPageSource",
    "StaticHtmlSource",
]

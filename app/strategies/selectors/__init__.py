"""Concrete amount selector implementations."""

from app.strategies.selectors.largest import LargestAmountSelector
from app.strategies.selectors.scored import ScoredAmountSelector
from app.strategies.selectors.threshold import ThresholdAmountSelector

__all__ = [
    "LargestAmountSelector",
    "ScoredAmountSelector",
    "ThresholdAmountSelector",
]

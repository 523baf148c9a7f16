"""Candidate extraction, scoring and formatting shared by all selectors."""

from app.strategies.extraction.attributes import (
    LEGACY_ATTRIBUTE_PATTERNS,
    SCORED_ATTRIBUTE_PATTERNS,
    find_attribute_amount,
)
from app.strategies.extraction.candidates import (
    CURRENCY_PATTERN,
    extract_candidates,
    parse_amount,
)
from app.strategies.extraction.formatting import format_amount, json_number
from app.strategies.extraction.scoring import rank_candidates, score_candidate

__all__ = [
    "CURRENCY_PATTERN",
    "LEGACY_ATTRIBUTE_PATTERNS",
    "SCORED_ATTRIBUTE_PATTERNS",
    "extract_candidates",
    "find_attribute_amount",
    "format_amount",
    "json_number",
    "parse_amount",
    "rank_candidates",
    "score_candidate",
]

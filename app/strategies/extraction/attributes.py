"""Attribute fallbacks.

When no usable dollar amount is visible in the markup, the total is often
still present in embedded JSON or data attributes.
"""

import logging
import re

from app.strategies.extraction.candidates import parse_amount

logger = logging.getLogger(__name__)

_VALUE = r"\"?([\d.,]+)\"?"

SCORED_ATTRIBUTE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(rf"\"{key}\"\s*:\s*{_VALUE}", re.IGNORECASE)
    for key in ("amountRaised", "totalRaised", "raisedAmount", "raised")
)

LEGACY_ATTRIBUTE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"\"total_raised\"\s*:\s*{_VALUE}", re.IGNORECASE),
    re.compile(rf"\"raised\"\s*:\s*{_VALUE}", re.IGNORECASE),
    re.compile(r"data-total-raised\s*=\s*\"([\d.,]+)\"", re.IGNORECASE),
)


def find_attribute_amount(
    text: str,
    patterns: tuple[re.Pattern[str], ...] = SCORED_ATTRIBUTE_PATTERNS,
    minimum: float = 100,
) -> tuple[float, str] | None:
    """Return the first positive attribute value at or above ``minimum``.

    Patterns are tried in order; within a pattern, matches are tried in
    page order.

    Returns:
        ``(value, matched_text)``, or None if nothing qualifies.
    """
    for pattern in patterns:
        for match in pattern.finditer(text or ""):
            value = parse_amount(match.group(1))
            if value is not None and value > 0 and value >= minimum:
                logger.debug(f"Attribute fallback matched {match.group(0)!r}")
                return value, match.group(0)
    return None

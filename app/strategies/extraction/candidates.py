"""Currency candidate extraction.

Finds dollar amounts such as "$186,000" or "$ 1,234.50" in page text and
parses them into numbers.
"""

import math
import re

from app.interfaces.selector import Candidate

CURRENCY_PATTERN = re.compile(r"\$\s?\d{1,3}(?:,\d{3})*(?:\.\d{2})?")

_NON_NUMERIC = re.compile(r"[^\d.]")


def parse_amount(raw: str | None) -> float | None:
    """Parse "$186,000.00" into 186000.0.

    Returns None for text that leaves nothing numeric once symbols and
    separators are stripped, or that does not parse to a finite number.
    """
    cleaned = _NON_NUMERIC.sub("", raw or "")
    if not cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def extract_candidates(text: str, radius: int = 140) -> list[Candidate]:
    """Return every parseable currency amount in ``text``, in page order.

    Args:
        text: Raw markup or rendered page text.
        radius: Characters of context kept either side of each match.

    Returns:
        Candidates carrying their case-folded context window.
    """
    candidates: list[Candidate] = []
    for match in CURRENCY_PATTERN.finditer(text or ""):
        value = parse_amount(match.group(0))
        if value is None:
            continue
        start = max(0, match.start() - radius)
        end = match.end() + radius
        candidates.append(
            Candidate(
                raw=match.group(0),
                value=value,
                index=match.start(),
                context=text[start:end].casefold(),
            )
        )
    return candidates

"""Largest-amount selector.

Picks the largest dollar amount on the page, on the basis that the
campaign total is usually the biggest figure shown.
"""

import logging

from app.interfaces.selector import BaseAmountSelector, Selection
from app.interfaces.source import PageContent
from app.strategies.extraction import (
    LEGACY_ATTRIBUTE_PATTERNS,
    extract_candidates,
    find_attribute_amount,
    format_amount,
)

logger = logging.getLogger(__name__)


class LargestAmountSelector(BaseAmountSelector):
    """Selects the largest currency candidate, falling back to attributes."""

    def select(self, page: PageContent) -> Selection | None:
        candidates = [
            c
            for c in extract_candidates(page.text, self._context_radius)
            if c.value > 0
        ]
        ranked = sorted(candidates, key=lambda c: c.value, reverse=True)

        if ranked:
            top = ranked[0]
            logger.info(f"Largest candidate {top.raw} out of {len(ranked)}")
            return Selection(
                value=top.value,
                raw=top.raw,
                tier="largest",
                candidate_count=len(ranked),
                ranked=tuple(ranked[:5]),
            )

        found = find_attribute_amount(page.text, LEGACY_ATTRIBUTE_PATTERNS, minimum=0)
        if found is not None:
            value, _ = found
            logger.info(f"No currency candidates, attribute fallback found {value}")
            return Selection(value=value, raw=format_amount(value), tier="attribute")

        logger.warning("No currency candidates or attribute values found")
        return None

    @property
    def name(self) -> str:
        return "largest"

"""Threshold selector for rendered page text.

Rendered text carries no markup noise, so the largest realistic amount is
taken directly.
"""

import logging

from app.interfaces.selector import BaseAmountSelector, Selection
from app.interfaces.source import PageContent
from app.strategies.extraction import extract_candidates

logger = logging.getLogger(__name__)


class ThresholdAmountSelector(BaseAmountSelector):
    """Selects the largest candidate at or above ``min_amount``."""

    def __init__(self, context_radius: int = 140, min_amount: float = 1_000) -> None:
        super().__init__(context_radius=context_radius)
        self.min_amount = min_amount

    def select(self, page: PageContent) -> Selection | None:
        candidates = extract_candidates(page.text, self._context_radius)
        realistic = sorted(
            (c for c in candidates if c.value >= self.min_amount),
            key=lambda c: c.value,
            reverse=True,
        )
        if not realistic:
            logger.warning(
                f"No amount of at least {self.min_amount} among {len(candidates)} candidates"
            )
            return None

        top = realistic[0]
        logger.info(f"Selected {top.raw} out of {len(realistic)} realistic candidates")
        return Selection(
            value=top.value,
            raw=top.raw,
            tier="threshold",
            candidate_count=len(candidates),
            ranked=tuple(realistic[:5]),
        )

    @property
    def name(self) -> str:
        return "threshold"

"""Context-scored selector.

Ranks every currency candidate by the keywords around it and by its
magnitude, then falls back through two further tiers when the best
ranked candidate is not a plausible total:

1. Embedded JSON attributes such as ``"amountRaised": "42000"``.
2. The largest candidate of at least $1,000, whatever its score.
"""

import logging

from app.interfaces.selector import BaseAmountSelector, Selection
from app.interfaces.source import PageContent
from app.strategies.extraction import (
    SCORED_ATTRIBUTE_PATTERNS,
    extract_candidates,
    find_attribute_amount,
    format_amount,
    rank_candidates,
)

logger = logging.getLogger(__name__)

ATTRIBUTE_SCORE = 1000.0


class ScoredAmountSelector(BaseAmountSelector):
    """Selects the best scored candidate with attribute and magnitude fallbacks.

    Attributes:
        min_amount: Smallest amount accepted from the ranking or attributes.
        fallback_min_amount: Smallest amount accepted by the magnitude tier.
    """

    def __init__(
        self,
        context_radius: int = 140,
        min_amount: float = 100,
        fallback_min_amount: float = 1_000,
    ) -> None:
        """Initialize the selector.

        Args:
            context_radius: Characters of context scored around each amount.
            min_amount: Top ranked candidates below this are rejected.
            fallback_min_amount: Threshold for the last-resort magnitude tier.
        """
        super().__init__(context_radius=context_radius)
        self.min_amount = min_amount
        self.fallback_min_amount = fallback_min_amount

    def select(self, page: PageContent) -> Selection | None:
        ranked = rank_candidates(extract_candidates(page.text, self._context_radius))
        count = len(ranked)
        top = ranked[0] if ranked else None

        if top is not None and top.value >= self.min_amount:
            logger.info(f"Selected {top.raw} with score {top.score} out of {count}")
            return Selection(
                value=top.value,
                raw=top.raw,
                tier="scored",
                score=top.score,
                candidate_count=count,
                ranked=tuple(ranked[:5]),
            )

        found = find_attribute_amount(
            page.text, SCORED_ATTRIBUTE_PATTERNS, minimum=self.min_amount
        )
        if found is not None:
            value, _ = found
            logger.info(f"Top candidate rejected, attribute fallback found {value}")
            return Selection(
                value=value,
                raw=format_amount(value),
                tier="attribute",
                score=ATTRIBUTE_SCORE,
                candidate_count=count,
                ranked=tuple(ranked[:5]),
            )

        large = [c for c in ranked if c.value >= self.fallback_min_amount]
        if large:
            best = max(large, key=lambda c: c.value)
            logger.info(f"Falling back to largest amount {best.raw}")
            return Selection(
                value=best.value,
                raw=best.raw,
                tier="magnitude",
                score=best.score,
                candidate_count=count,
                ranked=tuple(ranked[:5]),
            )

        logger.warning(f"No acceptable amount among {count} candidates")
        return None

    @property
    def name(self) -> str:
        return "scored"

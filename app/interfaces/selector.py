"""Amount selection interfaces.

Defines the abstract base class for picking the "amount raised" figure
out of page text, and the selection it produces.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from app.interfaces.source import PageContent


@dataclass(frozen=True)
class Candidate:
    """A currency-looking substring found in page text.

    Attributes:
        raw: The matched text, e.g. "$186,000.00".
        value: Parsed numeric amount.
        index: Offset of the match in the page text.
        context: Case-folded text window around the match.
        score: Relevance score, set only by scored ranking.
    """

    raw: str
    value: float
    index: int
    context: str = ""
    score: float | None = None


@dataclass(frozen=True)
class Selection:
    """The amount accepted by a selector.

    Attributes:
        value: Parsed numeric amount.
        raw: Text the amount was read from.
        tier: Which rule produced it ("largest", "scored", "attribute",
            "magnitude" or "threshold").
        score: Relevance score, when the selector ranks candidates.
        candidate_count: Number of currency candidates found on the page.
        ranked: Leading candidates in selection order, kept for debugging.
    """

    value: float
    raw: str
    tier: str
    score: float | None = None
    candidate_count: int = 0
    ranked: tuple[Candidate, ...] = field(default_factory=tuple)


class BaseAmountSelector(ABC):
    """Abstract base class for amount selection strategies.

    A selector returns ``None`` when no candidate qualifies. That is a
    normal outcome, not an error.
    """

    def __init__(self, context_radius: int = 140) -> None:
        self._context_radius = context_radius

    @abstractmethod
    def select(self, page: PageContent) -> Selection | None:
        """Pick the amount raised from the page.

        Args:
            page: Text retrieved by a page source.

        Returns:
            The accepted selection, or None if nothing qualifies.
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the short strategy name used in configuration."""
        pass

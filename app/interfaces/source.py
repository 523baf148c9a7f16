"""Abstract base class for page sources.

The Strategy Pattern allows the static HTTP fetch and the headless
browser render to be interchangeable at runtime.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PageContent:
    """Text retrieved from the campaign page.

    Attributes:
        text: Raw markup for static fetches, visible text for rendered pages.
        source: The URL the text was retrieved from.
        kind: Either "markup" or "rendered".
        metadata: Source-specific details (status code, length, elapsed time).
    """

    text: str
    source: str
    kind: str = "markup"
    metadata: dict[str, Any] = field(default_factory=dict)


class BasePageSource(ABC):
    """Abstract base class for page retrieval strategies.

    Example:
        ```python
        class StaticHtmlSource(BasePageSource):
            async def fetch(self, url: str) -> PageContent:
                # Implementation here
                pass
        ```
    """

    @abstractmethod
    async def fetch(self, url: str) -> PageContent:
        """Retrieve the page at ``url``.

        Args:
            url: The campaign page URL.

        Returns:
            The page text and metadata.

        Raises:
            UpstreamStatusError: If the upstream answered with a non-2xx status.
            PageFetchError: If the page could not be retrieved.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the short strategy name used in configuration."""
        ...


class PageFetchError(Exception):
    """Exception raised when the campaign page cannot be retrieved."""

    pass


class UpstreamStatusError(PageFetchError):
    """Exception raised when the upstream returns a non-success status."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Upstream returned {status_code}")

"""Raised-total scraping pipeline.

Fetch the campaign page, pick the amount raised, and record when it was
fetched. One scraper call handles one request; nothing is kept between
calls.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from app.interfaces.selector import BaseAmountSelector, Selection
from app.interfaces.source import BasePageSource, PageContent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScrapeOutcome:
    """Result of one scrape.

    Attributes:
        page: The retrieved page.
        selection: The accepted amount, or None if nothing qualified.
        fetched_at: When the page was retrieved, in UTC.
    """

    page: PageContent
    selection: Selection | None
    fetched_at: datetime

    @property
    def found(self) -> bool:
        return self.selection is not None

    @property
    def fetched_at_iso(self) -> str:
        """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
        return self.fetched_at.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RaisedTotalScraper:
    """Runs a page source and an amount selector against one URL."""

    def __init__(
        self,
        source: BasePageSource,
        selector: BaseAmountSelector,
        url: str,
    ) -> None:
        self.source = source
        self.selector = selector
        self.url = url

    async def scrape(self) -> ScrapeOutcome:
        """Fetch the page and select the amount raised.

        Raises:
            UpstreamStatusError: If the upstream status is not 2xx. No
                extraction is attempted in that case.
            PageFetchError: If the page could not be retrieved.
        """
        logger.info(
            f"Scraping {self.url} with source={self.source.name} "
            f"selector={self.selector.name}"
        )
        page = await self.source.fetch(self.url)
        fetched_at = datetime.now(timezone.utc)

        selection = self.selector.select(page)
        if selection is None:
            logger.warning(f"No raised amount found on {self.url}")
        else:
            logger.info(f"Raised amount {selection.value} via {selection.tier}")

        return ScrapeOutcome(page=page, selection=selection, fetched_at=fetched_at)

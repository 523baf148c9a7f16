"""Static HTML page source.

Fetches the campaign page markup with a plain HTTP GET, presenting a
desktop browser User-Agent so the page is served as it would be to a
visitor.
"""

import logging

import httpx

from app.interfaces.source import (
    BasePageSource,
    PageContent,
    PageFetchError,
    UpstreamStatusError,
)

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
)
ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"


class StaticHtmlSource(BasePageSource):
    """Page source returning the raw markup from an HTTP GET.

    Attributes:
        headers: Request headers sent with every fetch.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        accept_language: str = "en-CA,en-US;q=0.9,en;q=0.8",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the static source.

        Args:
            user_agent: User-Agent header value.
            accept_language: Accept-Language header value.
            timeout: Request timeout in seconds. None disables the client
                timeout and leaves it to the hosting platform.
            transport: Optional httpx transport, used to stub the upstream.
        """
        self.headers = {
            "User-Agent": user_agent,
            "Accept": ACCEPT,
            "Accept-Language": accept_language,
        }
        self._timeout = timeout
        self._transport = transport

    async def fetch(self, url: str) -> PageContent:
        """Fetch the page markup.

        Raises:
            UpstreamStatusError: If the upstream status is not 2xx.
            PageFetchError: If the request fails at the network level.
        """
        logger.info(f"Fetching {url}")

        try:
            async with httpx.AsyncClient(
                headers=self.headers,
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise PageFetchError(f"Request failed: {e}") from e

        if not response.is_success:
            logger.warning(f"Upstream {url} returned {response.status_code}")
            raise UpstreamStatusError(response.status_code)

        html = response.text
        logger.info(f"Fetched {len(html)} characters from {url}")
        return PageContent(
            text=html,
            source=url,
            kind="markup",
            metadata={
                "status_code": response.status_code,
                "length": len(html),
                "elapsed_ms": int(response.elapsed.total_seconds() * 1000),
            },
        )

    @property
    def name(self) -> str:
        return "static"

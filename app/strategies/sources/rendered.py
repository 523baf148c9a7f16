"""Headless browser page source.

Some campaign pages fill in their totals client-side, so the static
markup never contains the figure. This source drives headless Chromium
through Playwright, waits for the network to go idle and for rendering to
settle, then reads the visible text of the page.
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

from app.interfaces.source import BasePageSource, PageContent, UpstreamStatusError

logger = logging.getLogger(__name__)


class RenderedPageSource(BasePageSource):
    """Page source returning the rendered body text of the page.

    Attributes:
        navigation_timeout_ms: Timeout for the page navigation.
        settle_delay_ms: Extra wait after network idle.
    """

    def __init__(
        self,
        navigation_timeout_ms: int = 60_000,
        settle_delay_ms: int = 2_500,
        playwright_factory: Callable[[], Any] | None = None,
    ) -> None:
        """Initialize the rendered source.

        Args:
            navigation_timeout_ms: Navigation timeout in milliseconds.
            settle_delay_ms: Delay after network idle in milliseconds.
            playwright_factory: Callable returning an async Playwright
                context manager. Defaults to ``async_playwright``.
        """
        self.navigation_timeout_ms = navigation_timeout_ms
        self.settle_delay_ms = settle_delay_ms
        self._playwright_factory = playwright_factory

    def _get_playwright_factory(self) -> Callable[[], Any]:
        """Lazy-load the Playwright entry point.

        Returns:
            The callable used to start Playwright.
        """
        if self._playwright_factory is None:
            try:
                from playwright.async_api import async_playwright

                self._playwright_factory = async_playwright
            except ImportError as e:
                raise ImportError(
                    "playwright is not installed. "
                    "Install it with: pip install playwright && playwright install chromium"
                ) from e
        return self._playwright_factory

    @asynccontextmanager
    async def launch_browser(self) -> AsyncIterator[Any]:
        """Launch headless Chromium and close it when the scope exits.

        The browser is closed exactly once, whether the body completes,
        returns early or raises.
        """
        async with self._get_playwright_factory()() as playwright:
            browser = await playwright.chromium.launch(headless=True)
            logger.debug("Headless browser launched")
            try:
                yield browser
            finally:
                await browser.close()
                logger.debug("Headless browser closed")

    async def fetch(self, url: str) -> PageContent:
        """Render the page and return its visible text.

        Raises:
            UpstreamStatusError: If the navigation response is not 2xx.
        """
        logger.info(f"Rendering {url}")

        async with self.launch_browser() as browser:
            page = await browser.new_page()
            response = await page.goto(
                url,
                wait_until="networkidle",
                timeout=self.navigation_timeout_ms,
            )
            if response is not None and not response.ok:
                logger.warning(f"Upstream {url} returned {response.status}")
                raise UpstreamStatusError(response.status)

            await page.wait_for_timeout(self.settle_delay_ms)
            text = await page.inner_text("body")

        logger.info(f"Rendered {len(text)} characters of text from {url}")
        return PageContent(
            text=text,
            source=url,
            kind="rendered",
            metadata={
                "status_code": response.status if response is not None else None,
                "length": len(text),
            },
        )

    @property
    def name(self) -> str:
        return "rendered"

"""One-shot scrape of the campaign page.

Runs the configured source and selector once and prints the response
envelope, without starting the web server. Strategy overrides are read
from the environment (SOURCE_TYPE, SELECTOR_TYPE, INCLUDE_DEBUG).

Usage:
    python -m scripts.fetch_total
    or
    python scripts/fetch_total.py (after pip install -e .)
"""

import asyncio
import json
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.api.raised_total import build_response
from app.api.schemas import RaisedTotalResponse
from app.core.config import get_settings
from app.core.factory import get_factory
from app.core.logging_config import get_logger
from app.core.scraper import RaisedTotalScraper
from app.interfaces.source import PageFetchError

logger = get_logger(__name__)


async def main(scraper: RaisedTotalScraper | None = None) -> int:
    """Scrape once and print the envelope. Returns the process exit code.

    Fetch failures print the same ok=false envelope the API returns.
    """
    settings = get_settings()
    if scraper is None:
        factory = get_factory()
        scraper = RaisedTotalScraper(
            source=factory.get_source(),
            selector=factory.get_selector(),
            url=settings.target_url,
        )

    try:
        outcome = await scraper.scrape()
    except PageFetchError as e:
        logger.error(f"Fetching {scraper.url} failed: {e}")
        print(json.dumps(RaisedTotalResponse(ok=False, error=str(e)).to_content(), indent=2))
        return 2

    payload = build_response(outcome, scraper, settings)
    if not payload.ok:
        logger.warning(f"No raised amount found on {settings.target_url}")
    print(json.dumps(payload.to_content(), indent=2))
    return 0 if payload.ok else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

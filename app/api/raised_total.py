"""Score-total API route.

Scrapes the campaign page on every request and reports the amount raised.
Edge caches absorb repeat traffic through the Cache-Control header.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.deps import get_scraper
from app.api.schemas import RaisedTotalResponse
from app.core.config import Settings, get_settings
from app.core.scraper import RaisedTotalScraper, ScrapeOutcome
from app.interfaces.source import UpstreamStatusError
from app.strategies.extraction import format_amount, json_number

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["score-total"])

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
UNEXPECTED_ERROR = "Unexpected server error"


class JSONUTF8Response(JSONResponse):
    """JSON response declaring its charset explicitly."""

    media_type = "application/json; charset=utf-8"


def envelope_response(
    payload: RaisedTotalResponse,
    status_code: int,
    settings: Settings,
) -> JSONResponse:
    """Wrap an envelope with the CORS and cache headers every response carries."""
    return JSONUTF8Response(
        content=payload.to_content(),
        status_code=status_code,
        headers={
            "Access-Control-Allow-Origin": "*",
            "Cache-Control": settings.cache_control,
        },
    )


def build_debug(outcome: ScrapeOutcome, scraper: RaisedTotalScraper) -> dict[str, Any]:
    """Describe how the amount was (or was not) selected."""
    debug: dict[str, Any] = {
        "source": scraper.source.name,
        "selector": scraper.selector.name,
        "length": len(outcome.page.text),
    }
    selection = outcome.selection
    if selection is not None:
        debug["tier"] = selection.tier
        debug["score"] = selection.score
        debug["candidateCount"] = selection.candidate_count
        debug["top"] = [
            {"raw": c.raw, "value": json_number(c.value), "score": c.score}
            for c in selection.ranked
        ]
    return debug


def build_response(
    outcome: ScrapeOutcome,
    scraper: RaisedTotalScraper,
    settings: Settings,
) -> RaisedTotalResponse:
    """Turn a scrape outcome into the success or not-found envelope."""
    debug = build_debug(outcome, scraper) if settings.include_debug else None

    if outcome.selection is None:
        where = "rendered page" if outcome.page.kind == "rendered" else "page markup"
        return RaisedTotalResponse(
            ok=False,
            error=f"Could not locate raised amount in {where}",
            source=outcome.page.source,
            fetched_at=outcome.fetched_at_iso,
            debug=debug,
        )

    # amount and formatted must agree, so round to cents once
    value = round(outcome.selection.value, 2)
    return RaisedTotalResponse(
        ok=True,
        campaign=settings.campaign_name,
        amount=json_number(value),
        formatted=format_amount(value),
        source=outcome.page.source,
        fetched_at=outcome.fetched_at_iso,
        debug=debug,
    )


@router.api_route("/score-total", methods=ALL_METHODS)
async def score_total(
    scraper: RaisedTotalScraper = Depends(get_scraper),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Scrape the campaign page and return the amount raised.

    Status codes:
        200: Amount found, or page fetched but no amount found (ok=false).
        502: Upstream answered with a non-2xx status.
        500: Anything else went wrong.
    """
    try:
        outcome = await scraper.scrape()
    except UpstreamStatusError as e:
        logger.warning(f"Upstream failure: {e}")
        return envelope_response(
            RaisedTotalResponse(ok=False, error=str(e)),
            status.HTTP_502_BAD_GATEWAY,
            settings,
        )
    except Exception as e:
        logger.error(f"Scrape failed: {e}", exc_info=True)
        return envelope_response(
            RaisedTotalResponse(ok=False, error=str(e) or UNEXPECTED_ERROR),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            settings,
        )

    return envelope_response(
        build_response(outcome, scraper, settings),
        status.HTTP_200_OK,
        settings,
    )

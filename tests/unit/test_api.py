"""Unit tests for the score-total endpoint."""

import re
from unittest.mock import Mock

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_scraper
from app.core.config import Settings, get_settings
from app.core.scraper import RaisedTotalScraper
from app.interfaces.source import BasePageSource, PageContent
from app.main import create_app
from app.strategies.selectors import ScoredAmountSelector, ThresholdAmountSelector
from app.strategies.sources import StaticHtmlSource

URL = "https://fundraisemyway.cancer.ca/campaigns/scoreforcancer"


def make_client(html: str = "", status: int = 200, include_debug: bool = False, selector=None):
    """Build a test client whose upstream serves ``html`` with ``status``."""
    settings = Settings(include_debug=include_debug)
    transport = httpx.MockTransport(lambda request: httpx.Response(status, text=html))
    scraper = RaisedTotalScraper(
        source=StaticHtmlSource(transport=transport),
        selector=selector or ScoredAmountSelector(),
        url=URL,
    )

    app = create_app(settings)
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_scraper] = lambda: scraper
    return TestClient(app, raise_server_exceptions=False)


class RenderedTextSource(BasePageSource):
    """Stands in for the headless browser with fixed rendered text."""

    def __init__(self, text: str) -> None:
        self.text = text

    async def fetch(self, url: str) -> PageContent:
        return PageContent(text=self.text, source=url, kind="rendered")

    @property
    def name(self) -> str:
        return "rendered"


def make_rendered_client(text: str) -> TestClient:
    """Build a test client running the rendered source with the threshold selector."""
    settings = Settings(source_type="rendered", selector_type="threshold")
    scraper = RaisedTotalScraper(
        source=RenderedTextSource(text),
        selector=ThresholdAmountSelector(),
        url=URL,
    )

    app = create_app(settings)
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_scraper] = lambda: scraper
    return TestClient(app)


# =============================================================================
# Success Tests
# =============================================================================


class TestScoreTotalSuccess:
    """Test suite for successful scrapes."""

    def test_success_payload(self):
        """Test the envelope for a page with a raised total."""
        client = make_client("<p>Goal: $500 Raised so far: $186,000.00 (thanks!)</p>")

        response = client.get("/api/score-total")

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert body["campaign"] == "Score For Cancer"
        assert body["amount"] == 186000
        assert body["formatted"] == "$186,000"
        assert body["source"] == URL
        assert re.match(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", body["fetchedAt"])
        assert "error" not in body
        assert "debug" not in body

    def test_response_headers(self):
        """Test CORS, caching and content type headers."""
        client = make_client("Raised $2,000")

        response = client.get("/api/score-total")

        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["cache-control"] == "s-maxage=300, stale-while-revalidate=600"
        assert response.headers["content-type"] == "application/json; charset=utf-8"

    @pytest.mark.parametrize("method", ["post", "put", "delete", "patch"])
    def test_method_agnostic(self, method):
        """Test that any method runs the scrape."""
        client = make_client("Raised $2,000")

        response = getattr(client, method)("/api/score-total")

        assert response.status_code == 200
        assert response.json()["amount"] == 2000

    def test_attribute_fallback_amount(self):
        """Test that embedded JSON yields the amount without a currency symbol."""
        client = make_client('<script>window.data = {"amountRaised": "42000"};</script>')

        body = client.get("/api/score-total").json()

        assert body["ok"] is True
        assert body["amount"] == 42000
        assert body["formatted"] == "$42,000"

    def test_attribute_amount_rounded_to_cents(self):
        """Test that long attribute decimals are rounded once for both fields."""
        client = make_client('<script>{"amountRaised": "186000.4567"}</script>')

        body = client.get("/api/score-total").json()

        assert body["amount"] == 186000.46
        assert body["formatted"] == "$186,000.46"
        assert float(re.sub(r"[^\d.]", "", body["formatted"])) == body["amount"]

    def test_rendered_threshold_success(self):
        """Test the rendered source and threshold selector through the endpoint."""
        client = make_rendered_client("Raised\n$186,000\nGoal\n$150,000")

        body = client.get("/api/score-total").json()

        assert body["ok"] is True
        assert body["amount"] == 186000
        assert body["formatted"] == "$186,000"

    def test_formatted_matches_amount(self):
        """Test that the formatted digits equal the amount."""
        client = make_client("Total raised $1,234.50")

        body = client.get("/api/score-total").json()

        assert body["amount"] == 1234.5
        assert float(re.sub(r"[^\d.]", "", body["formatted"])) == body["amount"]

    def test_debug_payload(self):
        """Test the debug object when enabled."""
        client = make_client("Goal: $500 Raised so far: $186,000.00", include_debug=True)

        debug = client.get("/api/score-total").json()["debug"]

        assert debug["source"] == "static"
        assert debug["selector"] == "scored"
        assert debug["tier"] == "scored"
        assert debug["candidateCount"] == 2
        assert debug["top"][0] == {"raw": "$186,000.00", "value": 186000, "score": 18.0}


# =============================================================================
# Failure Tests
# =============================================================================


class TestScoreTotalFailures:
    """Test suite for the failure envelopes."""

    def test_not_found_is_200(self):
        """Test that only tiny amounts yields ok=false with status 200."""
        client = make_client("<p>Buy a pin for $1 or a sticker for $5</p>")

        response = client.get("/api/score-total")

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is False
        assert body["error"] == "Could not locate raised amount in page markup"
        assert body["source"] == URL
        assert "fetchedAt" in body
        assert "amount" not in body

    def test_rendered_not_found_message(self):
        """Test the not-found message for rendered pages with only small amounts."""
        client = make_rendered_client("Pins $5\nStickers $20")

        response = client.get("/api/score-total")

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is False
        assert body["error"] == "Could not locate raised amount in rendered page"
        assert body["source"] == URL

    def test_upstream_error_is_502_without_extraction(self):
        """Test that a 503 upstream maps to 502 and skips extraction."""
        selector = Mock(spec=ScoredAmountSelector)
        client = make_client("Raised $2,000", status=503, selector=selector)

        response = client.get("/api/score-total")

        assert response.status_code == 502
        assert response.json() == {"ok": False, "error": "Upstream returned 503"}
        assert response.headers["access-control-allow-origin"] == "*"
        selector.select.assert_not_called()

    def test_unexpected_exception_is_500(self):
        """Test that a crash inside a strategy maps to 500 with its message."""
        selector = Mock(spec=ScoredAmountSelector)
        selector.name = "scored"
        selector.select.side_effect = RuntimeError("parser exploded")
        client = make_client("Raised $2,000", selector=selector)

        response = client.get("/api/score-total")

        assert response.status_code == 500
        assert response.json() == {"ok": False, "error": "parser exploded"}

    def test_exception_without_message_uses_fallback(self):
        """Test the generic message for exceptions without text."""
        selector = Mock(spec=ScoredAmountSelector)
        selector.name = "scored"
        selector.select.side_effect = RuntimeError()
        client = make_client("Raised $2,000", selector=selector)

        response = client.get("/api/score-total")

        assert response.status_code == 500
        assert response.json()["error"] == "Unexpected server error"

    def test_network_error_is_500(self):
        """Test that a transport failure maps to 500."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        settings = Settings()
        scraper = RaisedTotalScraper(
            source=StaticHtmlSource(transport=httpx.MockTransport(handler)),
            selector=ScoredAmountSelector(),
            url=URL,
        )
        app = create_app(settings)
        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_scraper] = lambda: scraper

        response = TestClient(app).get("/api/score-total")

        assert response.status_code == 500
        assert response.json()["ok"] is False
        assert "connection refused" in response.json()["error"]


# =============================================================================
# Health Tests
# =============================================================================


def test_health():
    """Test the health check endpoint."""
    client = TestClient(create_app(Settings()))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_cors_preflight_answered_by_middleware():
    """Test that CORS preflights are answered without running a scrape."""
    selector = Mock(spec=ScoredAmountSelector)
    client = make_client("Raised $2,000", selector=selector)

    response = client.options(
        "/api/score-total",
        headers={
            "Origin": "https://framer.example",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    selector.select.assert_not_called()

"""API response schemas.

Pydantic v2 models for API serialization.
"""

from typing import Any

from pydantic import BaseModel, Field


class RaisedTotalResponse(BaseModel):
    """Envelope returned by the score-total endpoint.

    Serialised with camelCase aliases and without unset fields, so a
    failure carries only ``ok`` and ``error`` plus whatever context is known.
    """

    ok: bool = Field(description="Whether the amount raised was found")
    campaign: str | None = Field(default=None, description="Campaign label")
    amount: int | float | None = Field(default=None, description="Amount raised")
    formatted: str | None = Field(default=None, description='Amount as "$186,000"')
    source: str | None = Field(default=None, description="Page the amount was read from")
    fetched_at: str | None = Field(
        default=None,
        alias="fetchedAt",
        description="ISO-8601 UTC time the page was fetched",
    )
    error: str | None = Field(default=None, description="Failure description")
    debug: dict[str, Any] | None = Field(default=None, description="Selection details")

    model_config = {"populate_by_name": True}

    def to_content(self) -> dict[str, Any]:
        """Return the JSON-ready payload."""
        return self.model_dump(by_alias=True, exclude_none=True)


class HealthResponse(BaseModel):
    """Response for the health check endpoint."""

    status: str = "healthy"
    service: str
    version: str

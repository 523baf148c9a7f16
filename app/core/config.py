"""Application configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables
and provides type-safe access throughout the application.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.strategies.sources.static_html import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Campaign
    target_url: str = Field(
        default="https://fundraisemyway.cancer.ca/campaigns/scoreforcancer",
        description="Campaign page the raised amount is scraped from.",
    )
    campaign_name: str = Field(
        default="Score For Cancer",
        description="Campaign label echoed back in successful responses.",
    )

    # Strategy Selection
    source_type: str = Field(
        default="static",
        description="Page source strategy to use: 'static' or 'rendered'.",
    )
    selector_type: str = Field(
        default="scored",
        description="Amount selector strategy to use: 'largest', 'scored' or 'threshold'.",
    )

    # Upstream fetch
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="Desktop browser User-Agent sent with static fetches.",
    )
    accept_language: str = Field(
        default="en-CA,en-US;q=0.9,en;q=0.8",
        description="Accept-Language header sent with static fetches.",
    )
    fetch_timeout: float | None = Field(
        default=None,
        description="Static fetch timeout in seconds. None leaves it to the platform.",
    )
    navigation_timeout_ms: int = Field(
        default=60_000,
        description="Headless browser navigation timeout in milliseconds.",
    )
    settle_delay_ms: int = Field(
        default=2_500,
        description="Delay after network idle before reading rendered text.",
    )

    # Extraction
    context_radius: int = Field(
        default=140,
        description="Characters of page text kept either side of a candidate.",
    )

    # Response
    cache_control: str = Field(
        default="s-maxage=300, stale-while-revalidate=600",
        description="Cache-Control header for edge caches.",
    )
    include_debug: bool = Field(
        default=False,
        description="Attach a debug object describing the selection to responses.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_dir: Path | None = Field(
        default=None,
        description="Optional directory for info.log and error.log files.",
    )

    @field_validator("source_type", "selector_type")
    @classmethod
    def normalize_strategy_name(cls, v: str) -> str:
        """Normalize strategy names to lowercase."""
        return v.strip().lower()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    def configure_logging(self) -> None:
        """Configure global logging based on settings."""
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=level,
        )

        logger.setLevel(level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.configure_logging()
    return _settings

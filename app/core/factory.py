"""Component Factory for strategy instantiation.

The Factory Pattern allows the application to instantiate
different strategy implementations at runtime based on
configuration or environment variables.
"""

import logging

from app.core.config import Settings, get_settings
from app.interfaces.selector import BaseAmountSelector
from app.interfaces.source import BasePageSource
from app.strategies.selectors import (
    LargestAmountSelector,
    ScoredAmountSelector,
    ThresholdAmountSelector,
)
from app.strategies.sources import RenderedPageSource, StaticHtmlSource

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating component instances based on configuration.

    Example:
        ```python
        settings = get_settings()
        factory = ComponentFactory(settings)

        source = factory.get_source()
        selector = factory.get_selector()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Application settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._source_cache: BasePageSource | None = None
        self._selector_cache: BaseAmountSelector | None = None

    @property
    def settings(self) -> Settings:
        """Settings the components are built from."""
        return self._settings

    def get_source(self, source_type: str | None = None) -> BasePageSource:
        """Get a page source instance based on the specified type.

        Args:
            source_type: The source type to instantiate. If None, uses settings.

        Returns:
            A BasePageSource implementation instance.

        Raises:
            ValueError: If the source type is unknown.
        """
        if self._source_cache is None or source_type is not None:
            source_type = source_type or self._settings.source_type

            logger.info(f"Instantiating page source: {source_type}")

            match source_type:
                case "static":
                    self._source_cache = StaticHtmlSource(
                        user_agent=self._settings.user_agent,
                        accept_language=self._settings.accept_language,
                        timeout=self._settings.fetch_timeout,
                    )
                case "rendered":
                    self._source_cache = RenderedPageSource(
                        navigation_timeout_ms=self._settings.navigation_timeout_ms,
                        settle_delay_ms=self._settings.settle_delay_ms,
                    )
                case _:
                    raise ValueError(
                        f"Unknown source type: {source_type}. "
                        f"Valid options: 'static', 'rendered'"
                    )

        return self._source_cache

    def get_selector(self, selector_type: str | None = None) -> BaseAmountSelector:
        """Get an amount selector instance based on the specified type.

        Args:
            selector_type: The selector type to instantiate. If None, uses settings.

        Returns:
            A BaseAmountSelector implementation instance.

        Raises:
            ValueError: If the selector type is unknown.
        """
        if self._selector_cache is None or selector_type is not None:
            selector_type = selector_type or self._settings.selector_type
            radius = self._settings.context_radius

            logger.info(f"Instantiating amount selector: {selector_type}")

            match selector_type:
                case "largest":
                    self._selector_cache = LargestAmountSelector(context_radius=radius)
                case "scored":
                    self._selector_cache = ScoredAmountSelector(context_radius=radius)
                case "threshold":
                    self._selector_cache = ThresholdAmountSelector(context_radius=radius)
                case _:
                    raise ValueError(
                        f"Unknown selector type: {selector_type}. "
                        f"Valid options: 'largest', 'scored', 'threshold'"
                    )

        return self._selector_cache

    def clear_cache(self) -> None:
        """Clear all cached component instances.

        This forces new instances to be created on next access.
        Useful for testing or when settings change.
        """
        self._source_cache = None
        self._selector_cache = None
        logger.debug("Component factory cache cleared")


# Global factory instance
_factory: ComponentFactory | None = None


def get_factory() -> ComponentFactory:
    """Get or create the global ComponentFactory instance.

    Returns:
        The singleton ComponentFactory instance.
    """
    global _factory
    if _factory is None:
        _factory = ComponentFactory()
    return _factory

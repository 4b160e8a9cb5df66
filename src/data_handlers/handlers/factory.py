# src/data_handlers/handlers/factory.py

import logging

from data_handlers.errors import ConfigurationError
from data_handlers.observability.base import MetricsHook, NoOpMetricsHook

from .base import DataHandler
from .config import HandlerConfig
from .registry import HandlerRegistry

logger = logging.getLogger(__name__)


def default_registry() -> HandlerRegistry:
    """Build a registry holding the handlers shipped with data-handlers."""
    from data_handlers.xml import XmlHandler

    registry = HandlerRegistry()
    registry.register("xml", XmlHandler)
    return registry


def create_handler(
    config: HandlerConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
    registry: HandlerRegistry | None = None,
) -> DataHandler:
    """Create and configure a handler from config.

    Args:
        config: Handler type tag and its configuration options.
        metrics_hook: Optional metrics hook for observability.
        registry: Registry to resolve the type tag in. Defaults to
            `default_registry()`.

    Returns:
        A configured DataHandler implementation.

    Raises:
        ConfigurationError: If the type tag is unknown or the options are
            rejected by the handler.

    Example:
        >>> config = HandlerConfig(type="xml", options={"iterator": "//book"})
        >>> handler = create_handler(config)
        >>> books = handler.iterate(catalog_xml)
    """
    registry = registry if registry is not None else default_registry()
    if config.type not in registry:
        raise ConfigurationError(
            f"Unknown handler type: {config.type} "
            f"(registered: {', '.join(registry.list()) or 'none'})"
        )

    handler = registry.get(config.type)(metrics_hook=metrics_hook)
    handler.configure(config.options)
    logger.info("Created %s handler", config.type)
    return handler

# src/data_handlers/handlers/registry.py

import logging
from collections.abc import Callable

from .base import DataHandler

logger = logging.getLogger(__name__)

HandlerFactory = Callable[..., DataHandler]


class HandlerRegistry:
    """Maps a document type tag (e.g. "xml") to the factory of its handler."""

    def __init__(self) -> None:
        self._factories: dict[str, HandlerFactory] = {}

    def register(self, type_tag: str, factory: HandlerFactory) -> None:
        if type_tag in self._factories:
            raise ValueError(f"Handler type '{type_tag}' already registered")

        self._factories[type_tag] = factory
        logger.debug("Registered handler type: %s", type_tag)

    def get(self, type_tag: str) -> HandlerFactory:
        try:
            return self._factories[type_tag]
        except KeyError:
            logger.error("Handler type not found: %s", type_tag)
            raise KeyError(f"Handler type '{type_tag}' not found")

    def __contains__(self, type_tag: str) -> bool:
        return type_tag in self._factories

    def list(self) -> list[str]:
        return sorted(self._factories)

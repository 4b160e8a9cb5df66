# src/data_handlers/handlers/__init__.py

"""Handler contract and dispatch for data-handlers.

A host pipeline picks a handler by the type tag in its configuration and
talks to it only through the DataHandler protocol.

Example:
    >>> from data_handlers.handlers import HandlerConfig, create_handler
    >>>
    >>> handler = create_handler(
    ...     HandlerConfig(type="xml", options={"iterator": "//book"})
    ... )
    >>> for book in handler.iterate(catalog_xml):
    ...     titles = handler.filter("/book/title/text()", book)
"""

from .base import DataHandler
from .config import HandlerConfig
from .factory import create_handler, default_registry
from .registry import HandlerFactory, HandlerRegistry

__all__ = [
    # Factory
    "create_handler",
    "default_registry",
    # Protocol
    "DataHandler",
    # Config
    "HandlerConfig",
    # Registry
    "HandlerFactory",
    "HandlerRegistry",
]

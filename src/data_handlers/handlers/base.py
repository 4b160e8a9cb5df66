# src/data_handlers/handlers/base.py

from collections.abc import Mapping
from typing import Any, Protocol

from data_handlers.observability.base import MetricsHook


class DataHandler(Protocol):
    """Protocol shared by every document-type handler.

    Design principles:
    - Configure once: `configure` is the only call allowed to raise
    - Self-contained calls: `iterate` and `filter` parse, evaluate and
      serialize from scratch, sharing nothing but the configuration
    - Degrade, don't throw: a failing call returns an empty list
    """

    metrics_hook: MetricsHook

    def configure(self, config: Mapping[str, Any]) -> None:
        """Validate and store the handler configuration.

        Raises:
            ConfigurationError: If a mandatory key is missing or invalid.
        """
        ...

    def iterate(self, data_chunk: str) -> list[str]:
        """Split a document into independent sub-documents."""
        ...

    def filter(self, expression: str, data_chunk: str) -> list[str]:
        """Extract the values an ad-hoc query selects from a document."""
        ...

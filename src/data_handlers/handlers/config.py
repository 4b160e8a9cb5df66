# src/data_handlers/handlers/config.py

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class HandlerConfig:
    """Selects a handler by type tag and carries its configuration.

    Immutable. Explicit. No defaults from the environment.
    """

    type: str
    options: Mapping[str, Any] = field(default_factory=dict)

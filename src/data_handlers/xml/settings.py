# src/data_handlers/xml/settings.py

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from data_handlers.errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIGURATION_KEY = "iterator"


class XmlHandlerSettings(BaseModel):
    """Validated configuration of an XmlHandler.

    Unknown keys are ignored so a host pipeline can share one configuration
    object between several components.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    iterator: str = Field(min_length=1)
    namespaces: dict[str, str] = Field(default_factory=dict)

    @field_validator("namespaces")
    @classmethod
    def prefixes_not_empty(cls, value: dict[str, str]) -> dict[str, str]:
        if any(not prefix for prefix in value):
            raise ValueError("namespace prefixes must be non empty")
        return value


def load_settings(config: Mapping[str, Any]) -> XmlHandlerSettings:
    """Validate a configuration mapping.

    Raises:
        ConfigurationError: If `iterator` is missing, empty or not a string,
            or if `namespaces` is malformed.
    """
    if not isinstance(config, Mapping):
        raise ConfigurationError(
            f"XmlHandler needs a mapping configuration, got {type(config).__name__}"
        )

    try:
        settings = XmlHandlerSettings.model_validate(dict(config))
    except ValidationError as exc:
        message = "; ".join(_describe(error) for error in exc.errors())
        logger.error("Rejected XmlHandler configuration: %s", message)
        raise ConfigurationError(message) from exc

    logger.debug("Loaded XmlHandler settings: iterator=%r", settings.iterator)
    return settings


def _describe(error: Any) -> str:
    field = error["loc"][0] if error["loc"] else None
    if field == CONFIGURATION_KEY and error["type"] == "missing":
        return (
            "XmlHandler needs to receive a configuration with the mandatory "
            f"key '{CONFIGURATION_KEY}'"
        )
    if field == CONFIGURATION_KEY and error["type"] == "string_too_short":
        return f"XmlHandler needs to receive a non empty value for the key '{CONFIGURATION_KEY}'"
    return f"Invalid value for '{field}': {error['msg']}"

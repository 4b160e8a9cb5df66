# Errors
from .errors import (
    CompileError,
    ConfigurationError,
    EvaluationError,
    HandlerError,
    ParseError,
    SerializationError,
)

# Handlers
from .handlers import (
    DataHandler,
    HandlerConfig,
    HandlerRegistry,
    create_handler,
    default_registry,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Results
from .results import HandlerResult

# XML
from .xml import XmlHandler, XmlHandlerSettings

__all__ = [
    # Errors
    "CompileError",
    "ConfigurationError",
    "EvaluationError",
    "HandlerError",
    "ParseError",
    "SerializationError",
    # Handlers
    "DataHandler",
    "HandlerConfig",
    "HandlerRegistry",
    "create_handler",
    "default_registry",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Results
    "HandlerResult",
    # XML
    "XmlHandler",
    "XmlHandlerSettings",
]

# src/data_handlers/errors.py

"""Error taxonomy for data handlers.

Only ConfigurationError is meant to reach the caller of a handler. Every
other kind is caught at the iterate/filter boundary and carried inside a
HandlerResult instead.
"""


class HandlerError(Exception):
    """Base class for all handler errors."""

    kind = "handler"


class ConfigurationError(HandlerError, ValueError):
    """Missing or invalid handler configuration."""

    kind = "configuration"


class ParseError(HandlerError):
    """Input text is not a well-formed document."""

    kind = "parse"


class CompileError(HandlerError):
    """Query expression has malformed syntax."""

    kind = "compile"


class EvaluationError(HandlerError):
    """Query could not be evaluated against a document."""

    kind = "evaluation"


class SerializationError(HandlerError):
    """A matched node could not be rendered back to text."""

    kind = "serialization"

# src/data_handlers/results.py

from dataclasses import dataclass, field

from .errors import HandlerError


@dataclass(frozen=True)
class HandlerResult:
    """Outcome of a single iterate/filter call.

    `values` is what the plain operations hand back to the pipeline. `error`
    is set when the call degraded, so an empty `values` can be told apart
    from a query that simply matched nothing.
    """

    values: list[str] = field(default_factory=list)
    error: HandlerError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> str | None:
        return self.error.kind if self.error is not None else None

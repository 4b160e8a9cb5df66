# src/data_handlers/observability/base.py

from collections.abc import Iterator
from contextlib import contextmanager
from time import monotonic
from typing import Protocol


class MetricsHook(Protocol):
    """Sink for handler metrics. Implementations must be thread-safe."""

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


@contextmanager
def timed(
    metrics_hook: MetricsHook,
    name: str,
    labels: dict[str, str] | None = None,
) -> Iterator[None]:
    """Record the wall time of the enclosed block in milliseconds.

    The latency is recorded even when the block raises.
    """
    start = monotonic()
    try:
        yield
    finally:
        elapsed_ms = 1000 * (monotonic() - start)
        metrics_hook.record_latency(name, elapsed_ms, labels=labels)

import pytest

CATALOG = """<?xml version="1.0" encoding="UTF-8"?>
<catalog>
  <book id="b1"><title>Dune</title><author>Herbert</author></book>
  <book id="b2"><title>Emma</title><author>Austen</author></book>
  <book id="b3"><title>Ulysses</title><author>Joyce</author></book>
</catalog>
"""

NAMESPACED_CATALOG = """<c:catalog xmlns:c="urn:example:catalog">
  <c:book id="n1"><c:title>Dune</c:title></c:book>
  <c:book id="n2"><c:title>Emma</c:title></c:book>
</c:catalog>
"""


class RecordingMetricsHook:
    """Collects every metric call for assertions."""

    def __init__(self) -> None:
        self.latencies: list[tuple[str, dict | None]] = []
        self.counters: list[tuple[str, int, dict | None]] = []
        self.gauges: list[tuple[str, float, dict | None]] = []

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies.append((name, labels))

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters.append((name, value, labels))

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges.append((name, value, labels))

    def counted(self, name: str) -> int:
        return sum(value for n, value, _ in self.counters if n == name)


@pytest.fixture
def catalog() -> str:
    return CATALOG


@pytest.fixture
def namespaced_catalog() -> str:
    return NAMESPACED_CATALOG


@pytest.fixture
def metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()

# src/data_handlers/xml/extractor.py

import logging

from data_handlers.errors import SerializationError
from data_handlers.observability import names
from data_handlers.observability.base import MetricsHook, NoOpMetricsHook

from .parser import Document
from .query import Query, evaluate_nodes, evaluate_string
from .serializer import SerializationMode, serialize_node

logger = logging.getLogger(__name__)

LABELS = {"handler": "xml"}


def extract(
    document: Document,
    query: Query,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[str]:
    """Extract the values selected by `query`, in document order.

    Matched nodes are rendered in canonical form. When nothing matches, the
    query is re-read as a scalar and its string value is the single result,
    so `count(//item)` yields e.g. `["3"]`.

    Raises:
        EvaluationError: If the query cannot be evaluated, or nothing matches
            and the scalar fallback fails too.
    """
    nodes = evaluate_nodes(query, document)
    if not nodes:
        value = evaluate_string(query, document)
        logger.debug("Filter %r answered by scalar value", query.expression)
        metrics_hook.increment(names.HANDLER_SCALAR_FALLBACKS_TOTAL, labels=LABELS)
        return [value]

    values: list[str] = []
    for node in nodes:
        try:
            values.append(serialize_node(node, SerializationMode.CANONICAL))
        except SerializationError as exc:
            logger.warning("Skipping filter value: %s", exc)
            metrics_hook.increment(
                names.HANDLER_ERRORS_TOTAL, labels={**LABELS, "kind": exc.kind}
            )

    metrics_hook.increment(
        names.HANDLER_FILTER_VALUES_EMITTED, len(values), labels=LABELS
    )
    return values

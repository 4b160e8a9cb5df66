# src/data_handlers/xml/segmenter.py

import logging

from data_handlers.errors import SerializationError
from data_handlers.observability import names
from data_handlers.observability.base import MetricsHook, NoOpMetricsHook

from .parser import Document
from .query import Query, evaluate_nodes
from .serializer import SerializationMode, serialize_node

logger = logging.getLogger(__name__)

LABELS = {"handler": "xml"}


def segment(
    document: Document,
    query: Query,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[str]:
    """Split a document into one sub-document per node matched by `query`.

    Sub-documents come back last match first. A node that cannot be
    serialized is logged and skipped; the remaining ones are still returned.

    Raises:
        EvaluationError: If the query cannot be evaluated.
    """
    nodes = evaluate_nodes(query, document)
    metrics_hook.record_gauge(names.HANDLER_ITERATE_MATCHES, len(nodes), LABELS)
    if not nodes:
        logger.warning(
            "Iterator %r does not match in the document", query.expression
        )
        metrics_hook.increment(names.HANDLER_EMPTY_MATCHES_TOTAL, labels=LABELS)
        return []

    logger.debug("Iterator %r matched %d nodes", query.expression, len(nodes))
    sub_documents: list[str] = []
    for node in reversed(nodes):
        try:
            sub_documents.append(serialize_node(node, SerializationMode.RAW))
        except SerializationError as exc:
            logger.warning("Skipping sub-document: %s", exc)
            metrics_hook.increment(
                names.HANDLER_ERRORS_TOTAL, labels={**LABELS, "kind": exc.kind}
            )

    metrics_hook.increment(
        names.HANDLER_SUBDOCUMENTS_EMITTED, len(sub_documents), labels=LABELS
    )
    return sub_documents

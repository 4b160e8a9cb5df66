# src/data_handlers/xml/query.py

"""XPath compilation and evaluation on top of lxml.

A Query is compiled once and may then be shared between threads: lxml
does not promise that one compiled XPath can run concurrently, so every
Query serialises its own evaluations. Evaluation has no timeout; an
expensive expression holds the calling thread until libxml2 returns.
"""

import logging
import math
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any

from lxml import etree

from data_handlers.errors import CompileError, EvaluationError

from .parser import Document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Query:
    expression: str
    namespaces: Mapping[str, str]
    compiled: etree.XPath = field(repr=False, compare=False)
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )


def compile_query(
    expression: str, namespaces: Mapping[str, str] | None = None
) -> Query:
    """Compile an XPath expression.

    Args:
        expression: XPath 1.0 expression.
        namespaces: Prefix to URI bindings visible to the expression.

    Raises:
        CompileError: If the expression is empty or syntactically invalid.
    """
    if not isinstance(expression, str) or not expression.strip():
        raise CompileError("Query expression must be a non empty string")

    bindings = dict(namespaces or {})
    try:
        compiled = etree.XPath(expression, namespaces=bindings or None)
    except (etree.XPathError, ValueError, TypeError) as exc:
        raise CompileError(f"Malformed query {expression!r}: {exc}") from exc

    logger.debug("Compiled query %r with %d namespaces", expression, len(bindings))
    return Query(
        expression=expression,
        namespaces=MappingProxyType(bindings),
        compiled=compiled,
    )


def evaluate_nodes(query: Query, context: Document | etree._Element) -> list[Any]:
    """Evaluate a query as a node-set, in document order.

    A scalar result (number, boolean, string) is an empty node-set.

    Raises:
        EvaluationError: If libxml2 rejects the expression at run time.
    """
    result = _evaluate(query, context)
    if isinstance(result, list):
        return result
    logger.debug("Query %r yields a scalar, not a node-set", query.expression)
    return []


def evaluate_string(query: Query, context: Document | etree._Element) -> str:
    """Evaluate a query and coerce the result with XPath string() rules.

    Raises:
        EvaluationError: If evaluation fails or the result is not coercible.
    """
    return xpath_string(_evaluate(query, context))


def xpath_string(value: Any) -> str:
    """Convert an lxml XPath result to its XPath string value."""
    if isinstance(value, list):
        return _node_string(value[0]) if value else ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _number_string(value)
    if isinstance(value, (str, int)):
        return str(value)
    raise EvaluationError(f"Cannot convert {type(value).__name__} to a string")


def _evaluate(query: Query, context: Document | etree._Element) -> Any:
    target = context.tree if isinstance(context, Document) else context
    with query.lock:
        try:
            return query.compiled(target)
        except etree.XPathError as exc:
            raise EvaluationError(
                f"Cannot evaluate query {query.expression!r}: {exc}"
            ) from exc


def _node_string(node: Any) -> str:
    # attribute and text results are already smart strings
    if isinstance(node, str):
        return str(node)
    if isinstance(node, tuple):
        # namespace axis: (prefix, uri)
        return str(node[1])
    if isinstance(node, etree._Element):
        return node.xpath("string()")
    raise EvaluationError(f"Cannot convert node {node!r} to a string")


def _number_string(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")

# src/data_handlers/xml/serializer.py

import copy
import logging
from enum import Enum
from typing import Any

from lxml import etree

from data_handlers.errors import SerializationError

logger = logging.getLogger(__name__)

INDENT = "  "


class SerializationMode(str, Enum):
    """How a matched node is rendered back to text."""

    RAW = "raw"
    CANONICAL = "canonical"


def serialize_node(node: Any, mode: SerializationMode) -> str:
    """Render a node and its subtree as a self-contained fragment.

    RAW reproduces the node as parsed. CANONICAL re-indents a copy of it.
    Neither mode emits an XML declaration or the text following the node.
    Attribute and text results render as their string value.

    Raises:
        SerializationError: If the node cannot be rendered.
    """
    if isinstance(node, str):
        return str(node)
    if not isinstance(node, etree._Element):
        raise SerializationError(
            f"Cannot serialize {type(node).__name__} result {node!r}"
        )

    try:
        if mode is SerializationMode.RAW:
            return etree.tostring(node, encoding="unicode", with_tail=False)
        return _canonical(node)
    except (ValueError, TypeError, etree.LxmlError) as exc:
        raise SerializationError(f"Cannot serialize node {node.tag!r}: {exc}") from exc


def _canonical(node: etree._Element) -> str:
    # indent a detached copy; the parsed document stays untouched
    fragment = copy.deepcopy(node)
    fragment.tail = None
    if isinstance(fragment.tag, str):
        etree.indent(fragment, space=INDENT)
    text = etree.tostring(fragment, encoding="unicode", pretty_print=True)
    return text.rstrip("\n")

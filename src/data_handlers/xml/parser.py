# src/data_handlers/xml/parser.py

import logging
from dataclasses import dataclass
from pathlib import Path

from lxml import etree

from data_handlers.errors import ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """One parsed input chunk.

    Built fresh per call and never mutated after parsing. Nodes reach back to
    it through `getroottree()` when they are serialized.
    """

    tree: etree._ElementTree
    namespace_aware: bool

    @property
    def root(self) -> etree._Element:
        return self.tree.getroot()


def parse_document(text: str | bytes, *, namespace_aware: bool = False) -> Document:
    """Parse well-formed XML text into a Document.

    Args:
        text: XML as `str` or `bytes`. A `str` is always read as UTF-8, whatever
            its declaration says; `bytes` honour the declared encoding.
        namespace_aware: Keep namespace URIs on element and attribute names.
            When False, names are reduced to their local part so unprefixed
            queries match regardless of namespace. A namespaced attribute
            whose local name is already taken keeps its qualified name.

    Raises:
        ParseError: If the text is not well-formed or not encodable.
    """
    if isinstance(text, str):
        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ParseError(f"Text is not encodable as UTF-8: {exc}") from exc
        parser = _make_parser(encoding="utf-8")
    else:
        data = text
        parser = _make_parser()

    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as exc:
        raise ParseError(f"Malformed XML document: {exc}") from exc

    logger.debug(
        "Parsed document: root=%s, namespace_aware=%s", root.tag, namespace_aware
    )
    return _finish(root.getroottree(), namespace_aware)


def parse_resource(
    locator: str | Path, *, namespace_aware: bool = False
) -> Document:
    """Parse the XML document found at a local path or `file://` URL.

    Network access is disabled; remote locators fail with ParseError.

    Raises:
        ParseError: If the resource cannot be read or is not well-formed.
    """
    try:
        tree = etree.parse(str(locator), _make_parser())
    except etree.XMLSyntaxError as exc:
        raise ParseError(f"Malformed XML document at {locator}: {exc}") from exc
    except OSError as exc:
        raise ParseError(f"Cannot read XML resource {locator}: {exc}") from exc

    logger.debug("Parsed resource: %s, namespace_aware=%s", locator, namespace_aware)
    return _finish(tree, namespace_aware)


def _make_parser(encoding: str | None = None) -> etree.XMLParser:
    # lxml parsers keep per-parse state; never share one between calls
    return etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
    )


def _finish(tree: etree._ElementTree, namespace_aware: bool) -> Document:
    if not namespace_aware:
        _strip_namespaces(tree.getroot())
    return Document(tree=tree, namespace_aware=namespace_aware)


def _strip_namespaces(root: etree._Element) -> None:
    for element in root.iter():
        # comments, PIs and entities carry a callable tag
        if not isinstance(element.tag, str):
            continue
        element.tag = etree.QName(element).localname
        for name in [n for n in element.attrib if n.startswith("{")]:
            local = etree.QName(name).localname
            # an attribute already holding the local name keeps it
            if local in element.attrib:
                continue
            element.attrib[local] = element.attrib.pop(name)
    etree.cleanup_namespaces(root)

# src/data_handlers/xml/handler.py

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from data_handlers.errors import ConfigurationError, HandlerError
from data_handlers.handlers.base import DataHandler
from data_handlers.observability import names, timed
from data_handlers.observability.base import MetricsHook, NoOpMetricsHook
from data_handlers.results import HandlerResult

from .extractor import extract
from .parser import Document, parse_document, parse_resource
from .query import Query, compile_query
from .segmenter import segment
from .settings import XmlHandlerSettings, load_settings

logger = logging.getLogger(__name__)

LABELS = {"handler": "xml"}


@dataclass(frozen=True)
class _Configured:
    settings: XmlHandlerSettings
    query: Query


class XmlHandler(DataHandler):
    """Splits XML documents with an XPath iterator and extracts XPath values.

    Without `namespaces`, `iterate` parses without namespace awareness, so an
    iterator such as `//book` matches `book` elements whatever their
    namespace. With `namespaces`, `iterate` keeps namespaces and prefixed
    iterators resolve through the bindings. `filter` always parses
    namespace-aware and uses the same bindings.

    Both operations take inline XML text. `iterate_resource` reads the
    document from a local path instead.

    Example:
        >>> handler = XmlHandler(iterator="/catalog/book")
        >>> handler.iterate("<catalog><book id='1'/><book id='2'/></catalog>")
        ['<book id="2"/>', '<book id="1"/>']
        >>> handler.filter("count(//book)", "<catalog><book/></catalog>")
        ['1']
    """

    def __init__(
        self,
        iterator: str | None = None,
        namespaces: Mapping[str, str] | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.metrics_hook = metrics_hook
        self._configured: _Configured | None = None
        if iterator is not None:
            self.configure({"iterator": iterator, "namespaces": dict(namespaces or {})})
        logger.info("Initialized XmlHandler with iterator=%r", iterator)

    @property
    def settings(self) -> XmlHandlerSettings | None:
        return self._configured.settings if self._configured else None

    def configure(self, config: Mapping[str, Any]) -> None:
        """Validate the configuration and compile its iterator.

        Raises:
            ConfigurationError: If `iterator` is missing, empty or not a string.
            CompileError: If `iterator` is not a valid XPath expression.
        """
        settings = load_settings(config)
        query = compile_query(settings.iterator, settings.namespaces)
        # single assignment: concurrent iterate calls see old or new, never a mix
        self._configured = _Configured(settings=settings, query=query)
        logger.info("Configured XmlHandler with iterator=%r", settings.iterator)

    def iterate(self, data_chunk: str | bytes | None) -> list[str]:
        """Split inline XML into sub-documents, last match first.

        Returns an empty list on malformed input or a failing iterator.
        """
        return self.iterate_result(data_chunk).values

    def iterate_result(self, data_chunk: str | bytes | None) -> HandlerResult:
        """Like `iterate`, but keeps the error that emptied the result."""
        if data_chunk is None:
            logger.debug("No data chunk to iterate")
            return HandlerResult()
        return self._iterate(
            lambda aware: parse_document(data_chunk, namespace_aware=aware)
        )

    def iterate_resource(self, locator: str | Path) -> list[str]:
        """Split the XML document stored at a local path or `file://` URL."""
        return self._iterate(
            lambda aware: parse_resource(locator, namespace_aware=aware)
        ).values

    def filter(self, expression: str, data_chunk: str | bytes | None) -> list[str]:
        """Extract the values `expression` selects from inline XML.

        Matched nodes come back indented, in document order. When nothing
        matches, the expression's string value is the single result.
        Returns an empty list on any failure.
        """
        return self.filter_result(expression, data_chunk).values

    def filter_result(
        self, expression: str, data_chunk: str | bytes | None
    ) -> HandlerResult:
        """Like `filter`, but keeps the error that emptied the result."""
        if data_chunk is None:
            logger.debug("No data chunk to filter")
            return HandlerResult()

        namespaces = self.settings.namespaces if self.settings else {}
        self.metrics_hook.increment(names.HANDLER_FILTER_TOTAL, labels=LABELS)
        with timed(self.metrics_hook, names.HANDLER_FILTER_DURATION, LABELS):
            try:
                document = parse_document(data_chunk, namespace_aware=True)
                query = compile_query(expression, namespaces)
                values = extract(document, query, metrics_hook=self.metrics_hook)
            except HandlerError as exc:
                logger.error("Cannot filter document with %r: %s", expression, exc)
                self._record_error(exc)
                return HandlerResult(error=exc)

        return HandlerResult(values=values)

    def _iterate(self, load: Callable[[bool], Document]) -> HandlerResult:
        configured = self._configured
        if configured is None:
            error = ConfigurationError(
                "XmlHandler must be configured with an 'iterator' before iterating"
            )
            logger.warning("Cannot iterate document: %s", error)
            self._record_error(error)
            return HandlerResult(error=error)

        # prefixed iterators need the namespaces that default parsing strips
        namespace_aware = bool(configured.settings.namespaces)
        self.metrics_hook.increment(names.HANDLER_ITERATE_TOTAL, labels=LABELS)
        with timed(self.metrics_hook, names.HANDLER_ITERATE_DURATION, LABELS):
            try:
                document = load(namespace_aware)
                values = segment(
                    document, configured.query, metrics_hook=self.metrics_hook
                )
            except HandlerError as exc:
                logger.warning("Cannot iterate document: %s", exc)
                self._record_error(exc)
                return HandlerResult(error=exc)

        logger.debug("Iterated document into %d sub-documents", len(values))
        return HandlerResult(values=values)

    def _record_error(self, exc: HandlerError) -> None:
        self.metrics_hook.increment(
            names.HANDLER_ERRORS_TOTAL, labels={**LABELS, "kind": exc.kind}
        )

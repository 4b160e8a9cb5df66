from .extractor import extract
from .handler import XmlHandler
from .parser import Document, parse_document, parse_resource
from .query import Query, compile_query, evaluate_nodes, evaluate_string, xpath_string
from .segmenter import segment
from .serializer import SerializationMode, serialize_node
from .settings import XmlHandlerSettings, load_settings

__all__ = [
    # Handler
    "XmlHandler",
    "XmlHandlerSettings",
    "load_settings",
    # Parsing
    "Document",
    "parse_document",
    "parse_resource",
    # Queries
    "Query",
    "compile_query",
    "evaluate_nodes",
    "evaluate_string",
    "xpath_string",
    # Serialization
    "SerializationMode",
    "serialize_node",
    # Operations
    "extract",
    "segment",
]

from pathlib import Path

from lxml import etree

from data_handlers.xml import XmlHandler

ATOM = "http://www.w3.org/2005/Atom"
DC = "http://purl.org/dc/elements/1.1/"

# --- Iteration ---


def test_iterates_entries_last_first(feed_handler: XmlHandler, feed_path: Path) -> None:
    entries = feed_handler.iterate_resource(feed_path)

    positions = [etree.fromstring(e).get("position") for e in entries]
    assert positions == ["5", "4", "3", "2", "1"]


def test_inline_and_resource_iteration_agree(
    feed_handler: XmlHandler, feed_path: Path
) -> None:
    text = feed_path.read_text(encoding="utf-8")

    assert feed_handler.iterate(text) == feed_handler.iterate_resource(feed_path)


def test_sub_documents_keep_feed_namespaces(
    feed_handler: XmlHandler, feed_path: Path
) -> None:
    entry = feed_handler.iterate_resource(feed_path)[-1]

    element = etree.fromstring(entry)
    assert element.tag == f"{{{ATOM}}}entry"
    assert element.nsmap["dc"] == DC
    assert "<title>Entry 1</title>" in entry


def test_handler_without_namespaces_drops_them(feed_path: Path) -> None:
    entry = XmlHandler(iterator="/feed/entry").iterate_resource(feed_path)[-1]

    assert etree.fromstring(entry).tag == "entry"
    assert "xmlns" not in entry


# --- Filtering ---


def test_filters_whole_feed_with_prefixes(
    feed_handler: XmlHandler, feed_path: Path
) -> None:
    text = feed_path.read_text(encoding="utf-8")

    titles = feed_handler.filter("/atom:feed/atom:entry/atom:title/text()", text)

    assert titles == [f"Entry {i}" for i in range(1, 6)]


def test_counts_entries_by_author(feed_handler: XmlHandler, feed_path: Path) -> None:
    text = feed_path.read_text(encoding="utf-8")

    assert feed_handler.filter("count(//dc:creator[. = 'Author 1'])", text) == ["2"]


def test_filters_each_sub_document(
    feed_handler: XmlHandler, feed_path: Path
) -> None:
    ids = [
        feed_handler.filter("/atom:entry/atom:id/text()", entry)
        for entry in feed_handler.iterate_resource(feed_path)
    ]

    assert ids == [[f"urn:entry:{i}"] for i in range(5, 0, -1)]


# --- Determinism ---


def test_iteration_is_deterministic(feed_handler: XmlHandler, feed_path: Path) -> None:
    first = feed_handler.iterate_resource(feed_path)
    second = feed_handler.iterate_resource(feed_path)

    assert first == second

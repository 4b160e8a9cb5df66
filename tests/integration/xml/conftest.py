from pathlib import Path

import pytest

from data_handlers.handlers import HandlerConfig, create_handler
from data_handlers.xml import XmlHandler

ATOM = "http://www.w3.org/2005/Atom"


def _create_feed(path: Path, entries: int) -> None:
    """Writes a deterministic Atom feed with `entries` entries."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<feed xmlns="{ATOM}" xmlns:dc="http://purl.org/dc/elements/1.1/">',
        "  <title>Library updates</title>",
    ]
    for i in range(1, entries + 1):
        lines += [
            f'  <entry position="{i}">',
            f"    <id>urn:entry:{i}</id>",
            f"    <title>Entry {i}</title>",
            f"    <dc:creator>Author {i % 3}</dc:creator>",
            "  </entry>",
        ]
    lines.append("</feed>")
    path.write_text("\n".join(lines), encoding="utf-8")


@pytest.fixture(scope="session")
def feed_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    directory = tmp_path_factory.mktemp("feeds")
    _create_feed(directory / "feed.xml", entries=5)
    return directory


@pytest.fixture
def feed_path(feed_dir: Path) -> Path:
    return feed_dir / "feed.xml"


@pytest.fixture
def feed_handler() -> XmlHandler:
    handler = create_handler(
        HandlerConfig(
            type="xml",
            options={
                "iterator": "/atom:feed/atom:entry",
                "namespaces": {
                    "atom": ATOM,
                    "dc": "http://purl.org/dc/elements/1.1/",
                },
            },
        )
    )
    assert isinstance(handler, XmlHandler)
    return handler

from __future__ import annotations

from io import BytesIO
from pathlib import Path

import pytest

from syndikit.detection import ContentFormat, detect, detect_stream, format_version, parse_version
from syndikit.errors import DocumentLoadError
from syndikit.navigation import load_document

_SAMPLES = [
    ('<feed xmlns="http://www.w3.org/2005/Atom"><title>t</title></feed>', ContentFormat.ATOM, (1, 0)),
    ('<entry xmlns="http://www.w3.org/2005/Atom"><title>t</title></entry>', ContentFormat.ATOM, (1, 0)),
    ('<feed version="0.3" xmlns="http://purl.org/atom/ns#"><title>t</title></feed>', ContentFormat.ATOM, (0, 3)),
    ('<rss version="2.0"><channel><title>t</title></channel></rss>', ContentFormat.RSS, (2, 0)),
    ('<rss version="0.92"><channel><title>t</title></channel></rss>', ContentFormat.RSS, (0, 92)),
    ('<rss version="0.91"><channel><title>t</title></channel></rss>', ContentFormat.RSS, (0, 91)),
    (
        '<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#" '
        'xmlns="http://purl.org/rss/1.0/"><channel/></rdf:RDF>',
        ContentFormat.RSS,
        (1, 0),
    ),
    (
        '<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#" '
        'xmlns="http://my.netscape.com/rdf/simple/0.9/"><channel/></rdf:RDF>',
        ContentFormat.RSS,
        (0, 9),
    ),
    ('<opml version="1.0"><head/><body/></opml>', ContentFormat.OPML, (1, 0)),
    ('<opml version="1.1"><head/><body/></opml>', ContentFormat.OPML, (1, 1)),
    ('<opml version="2.0"><head/><body/></opml>', ContentFormat.OPML, (2, 0)),
    ('<APML version="0.6" xmlns="http://www.apml.org/apml-0.6"><Head/></APML>', ContentFormat.APML, (0, 6)),
    ('<blog xmlns="http://www.blogml.com/2006/09/BlogML"><title>t</title></blog>', ContentFormat.BLOGML, (2, 0)),
    ('<rsd version="1.0" xmlns="http://archipelago.phrasewise.com/rsd"><service/></rsd>', ContentFormat.RSD, (1, 0)),
    ('<rsd version="0.6"><service/></rsd>', ContentFormat.RSD, (0, 6)),
    (
        '<service xmlns="http://www.w3.org/2007/app"><workspace/></service>',
        ContentFormat.ATOM_SERVICE_DOCUMENT,
        (1, 0),
    ),
    (
        '<categories xmlns="http://www.w3.org/2007/app"/>',
        ContentFormat.ATOM_CATEGORY_DOCUMENT,
        (1, 0),
    ),
]


@pytest.mark.parametrize(("payload", "expected_format", "expected_version"), _SAMPLES)
def test_detect_identifies_every_supported_dialect(
    payload: str, expected_format: ContentFormat, expected_version: tuple[int, ...]
) -> None:
    metadata = detect(load_document(payload))

    assert metadata.format is expected_format
    assert metadata.version == expected_version
    assert metadata.recognized


@pytest.mark.parametrize(("payload", "expected_format", "expected_version"), _SAMPLES)
def test_stream_detection_agrees_with_tree_detection(
    payload: str, expected_format: ContentFormat, expected_version: tuple[int, ...]
) -> None:
    metadata = detect_stream(payload.encode("utf-8"))

    assert metadata.format is expected_format
    assert metadata.version == expected_version


def test_unrecognized_root_is_reported_as_none_not_an_error() -> None:
    metadata = detect(load_document("<html><body/></html>"))

    assert metadata.format is ContentFormat.NONE
    assert metadata.version is None
    assert not metadata.recognized
    assert metadata.root_name == "html"


def test_atom_root_without_atom_namespace_is_not_atom() -> None:
    metadata = detect(load_document("<feed><title>t</title></feed>"))

    assert metadata.format is ContentFormat.NONE


def test_stream_detection_stops_at_root_start_tag() -> None:
    # Truncated payload: sniffing must not need the rest of the document.
    payload = b'<rss version="2.0"><channel><title>unfinished'

    metadata = detect_stream(BytesIO(payload))

    assert metadata.format is ContentFormat.RSS
    assert metadata.version == (2, 0)


def test_stream_detection_reads_from_path(tmp_path: Path) -> None:
    path = tmp_path / "feed.xml"
    path.write_text('<opml version="2.0"><head/></opml>', encoding="utf-8")

    assert detect_stream(path).format is ContentFormat.OPML


def test_stream_detection_rejects_non_xml() -> None:
    with pytest.raises(DocumentLoadError, match="not well-formed"):
        detect_stream(b"this is not xml")


def test_namespaces_in_scope_are_reported() -> None:
    metadata = detect(
        load_document(
            '<rss version="2.0" xmlns:dc="http://purl.org/dc/elements/1.1/"><channel/></rss>'
        )
    )

    assert metadata.namespaces == {"dc": "http://purl.org/dc/elements/1.1/"}


def test_version_parsing_accepts_dotted_digits_only() -> None:
    assert parse_version("2.0") == (2, 0)
    assert parse_version(" 0.91 ") == (0, 91)
    assert parse_version("1.0.2") == (1, 0, 2)
    assert parse_version("2") is None
    assert parse_version("2.x") is None
    assert parse_version(None) is None
    assert format_version((0, 92)) == "0.92"
    assert format_version(None) is None


def test_stream_detection_reports_root_namespace_scope() -> None:
    payload = (
        b'<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#" '
        b'xmlns="http://purl.org/rss/1.0/" xmlns:dc="http://purl.org/dc/elements/1.1/">'
        b"<channel><title>t</title></channel></rdf:RDF>"
    )

    metadata = detect_stream(payload)

    assert metadata.format is ContentFormat.RSS
    assert metadata.namespaces == {
        "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
        "": "http://purl.org/rss/1.0/",
        "dc": "http://purl.org/dc/elements/1.1/",
    }

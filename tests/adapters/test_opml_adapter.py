from __future__ import annotations

from datetime import datetime, timezone

from syndikit.adapters import OpmlAdapter
from syndikit.config import LoadSettings
from syndikit.extensions import DublinCoreExtension
from syndikit.models import OpmlDocument
from syndikit.navigation import load_document

_OPML = """<?xml version="1.0" encoding="ISO-8859-1"?>
<opml version="2.0" xmlns:dc="http://purl.org/dc/elements/1.1/">
  <head>
    <title>mySubscriptions.opml</title>
    <dateCreated>Sat, 18 Jun 2005 12:11:52 GMT</dateCreated>
    <ownerName>Dave Winer</ownerName>
    <ownerEmail>dave@scripting.com</ownerEmail>
    <expansionState>1, 6, 13</expansionState>
    <vertScrollState>1</vertScrollState>
    <windowTop>61</windowTop>
    <windowLeft>304</windowLeft>
    <dc:rights>Public domain</dc:rights>
  </head>
  <body>
    <outline text="CNET News.com" type="rss" xmlUrl="http://news.com.com/2547-1_3-0-5.xml"
             htmlUrl="http://news.com.com/" category="/tech, /news" isComment="false" language="unknown"/>
    <outline TEXT="Scripting News" isBreakpoint="true">
      <outline text="Nested one" url="child.opml"/>
      <outline text="Nested two"/>
      <outline text="Nested three"/>
    </outline>
    <outline text="Third" created="Mon, 31 Oct 2005 19:23:00 GMT"/>
    <outline/>
  </body>
</opml>
"""


def _fill(payload: str, settings: LoadSettings | None = None) -> OpmlDocument:
    document = OpmlDocument()
    OpmlAdapter(load_document(payload), settings or LoadSettings()).fill(document)
    return document


def test_opml_adapter_fills_head() -> None:
    document = _fill(_OPML)
    head = document.head

    assert document.version == (2, 0)
    assert head.title == "mySubscriptions.opml"
    assert head.created_on == datetime(2005, 6, 18, 12, 11, 52, tzinfo=timezone.utc)
    assert head.owner.name == "Dave Winer"
    assert head.owner.email == "dave@scripting.com"
    assert head.expansion_state == [1, 6, 13]
    assert head.vertical_scroll_state == 1
    assert (head.window.top, head.window.left, head.window.bottom) == (61, 304, None)
    assert head.find_extension(DublinCoreExtension).context.rights == "Public domain"


def test_opml_adapter_reads_outline_attributes() -> None:
    first, second, third = _fill(_OPML).outlines

    assert first.text == "CNET News.com"
    assert first.content_type == "rss"
    assert first.categories == ["/tech", "/news"]
    assert first.is_comment is False
    assert first.attributes == {
        "xmlUrl": "http://news.com.com/2547-1_3-0-5.xml",
        "htmlUrl": "http://news.com.com/",
        "language": "unknown",
    }
    assert second.text == "Scripting News"
    assert second.is_breakpoint is True
    assert third.created_on == datetime(2005, 10, 31, 19, 23, tzinfo=timezone.utc)


def test_outline_without_attributes_is_skipped() -> None:
    assert len(_fill(_OPML).outlines) == 3


def test_retrieval_limit_caps_top_level_outlines_only() -> None:
    document = _fill(_OPML, LoadSettings(retrieval_limit=2))

    assert [outline.text for outline in document.outlines] == ["CNET News.com", "Scripting News"]
    assert len(document.outlines[1].outlines) == 3


def test_opml11_outline_count_respects_limit() -> None:
    payload = (
        '<opml version="1.1"><head><title>t</title></head><body>'
        '<outline text="a"/><outline text="b"/><outline text="c"/>'
        "</body></opml>"
    )

    document = _fill(payload, LoadSettings(retrieval_limit=2))

    assert document.version == (1, 1)
    assert [outline.text for outline in document.outlines] == ["a", "b"]


def test_outline_urls_resolve_against_xml_base_when_enabled() -> None:
    payload = (
        '<opml version="2.0"><body xml:base="http://example.com/lists/">'
        '<outline text="x" url="child.opml"/></body></opml>'
    )

    resolved = _fill(payload, LoadSettings(resolve_relative_uris=True))
    untouched = _fill(payload)

    assert resolved.outlines[0].attributes["url"] == "http://example.com/lists/child.opml"
    assert untouched.outlines[0].attributes["url"] == "child.opml"

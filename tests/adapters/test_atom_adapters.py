from __future__ import annotations

from datetime import datetime, timezone

import pytest

from syndikit.adapters import Atom03Adapter, Atom10Adapter
from syndikit.config import LoadSettings
from syndikit.extensions import DublinCoreExtension, PublishingControlExtension
from syndikit.models import AtomEntry, AtomFeed, AtomTextType, RssFeed
from syndikit.navigation import load_document

_ATOM_10_FEED = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom" xmlns:dc="http://purl.org/dc/elements/1.1/"
      xml:lang="en" xml:base="http://example.org/">
  <title type="text">dive into mark</title>
  <subtitle type="html">A &lt;em&gt;lot&lt;/em&gt; of effort</subtitle>
  <updated>2005-07-31T12:29:29Z</updated>
  <id>tag:example.org,2003:3</id>
  <link rel="alternate" type="text/html" hreflang="en" href="http://example.org/"/>
  <link rel="self" type="application/atom+xml" href="feed.atom" length="12"/>
  <rights>Copyright (c) 2003, Mark Pilgrim</rights>
  <generator uri="http://www.example.com/" version="1.0">Example Toolkit</generator>
  <icon>/icon.png</icon>
  <dc:publisher>Example Press</dc:publisher>
  <entry>
    <title>Atom draft-07 snapshot</title>
    <link rel="enclosure" type="audio/mpeg" length="1337" href="http://example.org/audio/ph34r_my_podcast.mp3"/>
    <id>tag:example.org,2003:3.2397</id>
    <updated>2005-07-31T12:29:29Z</updated>
    <published>2003-12-13T08:29:29-04:00</published>
    <author>
      <name>Mark Pilgrim</name>
      <uri>http://example.org/</uri>
      <email>f8dy@example.com</email>
    </author>
    <contributor><name>Sam Ruby</name></contributor>
    <category term="atom" scheme="http://example.org/tags/" label="Atom"/>
    <content type="xhtml" xml:lang="en">
      <div xmlns="http://www.w3.org/1999/xhtml"><p><i>[Update: The Atom draft is finished.]</i></p></div>
    </content>
  </entry>
  <entry>
    <id>tag:example.org,2003:3.2398</id>
    <title type="xhtml"><div xmlns="http://www.w3.org/1999/xhtml">Second <b>entry</b></div></title>
    <updated>2005-08-01T00:00:00Z</updated>
    <source>
      <id>tag:other.example,2005:1</id>
      <title>Other feed</title>
      <updated>2005-07-01T00:00:00Z</updated>
    </source>
  </entry>
</feed>
"""


def _fill_feed(payload: str, settings: LoadSettings | None = None) -> AtomFeed:
    feed = AtomFeed()
    Atom10Adapter(load_document(payload), settings or LoadSettings()).fill(feed)
    return feed


def test_atom10_adapter_fills_feed_fields() -> None:
    feed = _fill_feed(_ATOM_10_FEED)

    assert feed.id == "tag:example.org,2003:3"
    assert feed.title is not None and feed.title.content == "dive into mark"
    assert feed.title.text_type is AtomTextType.TEXT
    assert feed.subtitle is not None and feed.subtitle.text_type is AtomTextType.HTML
    assert feed.subtitle.content == "A <em>lot</em> of effort"
    assert feed.updated_on == datetime(2005, 7, 31, 12, 29, 29, tzinfo=timezone.utc)
    assert feed.language == "en"
    assert feed.base_uri == "http://example.org/"
    assert feed.rights is not None and feed.rights.content.startswith("Copyright")
    assert feed.generator is not None
    assert feed.generator.content == "Example Toolkit"
    assert feed.generator.uri == "http://www.example.com/"
    assert feed.generator.version == "1.0"
    assert feed.icon == "/icon.png"
    assert [link.relation for link in feed.links] == ["alternate", "self"]
    assert feed.links[0].content_language == "en"
    assert feed.links[1].length == 12


def test_atom10_adapter_fills_entries_in_document_order() -> None:
    feed = _fill_feed(_ATOM_10_FEED)

    assert [entry.id for entry in feed.entries] == ["tag:example.org,2003:3.2397", "tag:example.org,2003:3.2398"]
    first, second = feed.entries
    assert first.authors[0].name == "Mark Pilgrim"
    assert first.authors[0].uri == "http://example.org/"
    assert first.authors[0].email == "f8dy@example.com"
    assert first.contributors[0].name == "Sam Ruby"
    assert (first.categories[0].term, first.categories[0].scheme, first.categories[0].label) == (
        "atom",
        "http://example.org/tags/",
        "Atom",
    )
    assert first.links[0].length == 1337
    assert first.published_on is not None and first.published_on.utcoffset() is not None
    assert first.content is not None
    assert first.content.content_type == "xhtml"
    assert "[Update: The Atom draft is finished.]" in first.content.content
    assert second.title is not None and second.title.text_type is AtomTextType.XHTML
    assert second.title.content == "Second entry"
    assert second.source is not None
    assert second.source.id == "tag:other.example,2005:1"
    assert second.source.title is not None and second.source.title.content == "Other feed"


def test_atom10_adapter_attaches_feed_level_extensions() -> None:
    feed = _fill_feed(_ATOM_10_FEED)

    extension = feed.find_extension(DublinCoreExtension)
    assert extension is not None
    assert extension.context.publisher == "Example Press"
    assert not feed.entries[0].has_extensions


def test_atom10_adapter_resolves_relative_uris_when_enabled() -> None:
    feed = _fill_feed(_ATOM_10_FEED, LoadSettings(resolve_relative_uris=True))

    assert feed.links[1].href == "http://example.org/feed.atom"
    assert feed.icon == "http://example.org/icon.png"


def test_atom10_adapter_keeps_relative_uris_by_default() -> None:
    feed = _fill_feed(_ATOM_10_FEED)

    assert feed.links[1].href == "feed.atom"


def test_atom10_adapter_honours_retrieval_limit() -> None:
    feed = _fill_feed(_ATOM_10_FEED, LoadSettings(retrieval_limit=1))

    assert [entry.id for entry in feed.entries] == ["tag:example.org,2003:3.2397"]


def test_atom10_adapter_fills_standalone_entry_with_unknown_extension() -> None:
    payload = (
        '<entry xmlns="http://www.w3.org/2005/Atom" xmlns:app="http://www.w3.org/2007/app">'
        "<id>urn:uuid:1225c695</id><title>Draft</title><updated>2003-12-13T18:30:02Z</updated>"
        '<foo:bar xmlns:foo="urn:x">baz</foo:bar>'
        "<app:control><app:draft>yes</app:draft></app:control>"
        "</entry>"
    )
    entry = AtomEntry()

    Atom10Adapter(load_document(payload), LoadSettings()).fill(entry)

    assert entry.id == "urn:uuid:1225c695"
    assert [type(extension) for extension in entry.extensions] == [PublishingControlExtension]
    assert entry.extensions[0].context.is_draft is True


def test_unknown_namespace_leaves_entry_without_extensions() -> None:
    payload = (
        '<feed xmlns="http://www.w3.org/2005/Atom"><entry><id>1</id>'
        '<foo:bar xmlns:foo="urn:x">baz</foo:bar></entry></feed>'
    )

    feed = _fill_feed(payload)

    assert feed.entries[0].extensions == []


def test_malformed_values_are_skipped_not_fatal() -> None:
    payload = (
        '<feed xmlns="http://www.w3.org/2005/Atom"><id>1</id><updated>not a date</updated>'
        '<link href="http://example.org/" length="huge"/></feed>'
    )

    feed = _fill_feed(payload)

    assert feed.id == "1"
    assert feed.updated_on is None
    assert feed.links[0].href == "http://example.org/"
    assert feed.links[0].length is None


def test_adapter_rejects_missing_inputs_and_wrong_targets() -> None:
    document = load_document(_ATOM_10_FEED)

    with pytest.raises(ValueError, match="document"):
        Atom10Adapter(None, LoadSettings())  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="settings"):
        Atom10Adapter(document, None)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="AtomFeed"):
        Atom10Adapter(document, LoadSettings()).fill(RssFeed())
    with pytest.raises(ValueError, match="None"):
        Atom10Adapter(document, LoadSettings()).fill(None)


def test_missing_dialect_root_leaves_target_untouched() -> None:
    feed = AtomFeed()

    filled = Atom10Adapter(load_document('<rss version="2.0"><channel/></rss>'), LoadSettings()).fill(feed)

    assert filled is False
    assert feed == AtomFeed()
    assert Atom10Adapter(load_document(_ATOM_10_FEED), LoadSettings()).fill(AtomFeed()) is True


def test_filling_fresh_targets_is_idempotent() -> None:
    assert _fill_feed(_ATOM_10_FEED) == _fill_feed(_ATOM_10_FEED)


_ATOM_03_FEED = """<feed version="0.3" xmlns="http://purl.org/atom/ns#">
  <title mode="escaped" type="text/html">dive into &lt;b&gt;mark&lt;/b&gt;</title>
  <tagline mode="xml" type="application/xhtml+xml">
    <div xmlns="http://www.w3.org/1999/xhtml">A <em>lot</em> of effort</div>
  </tagline>
  <modified>2003-12-13T18:30:02Z</modified>
  <copyright>Copyright (c) 2003</copyright>
  <generator url="http://www.example.com/" version="1.0">Example Toolkit</generator>
  <entry>
    <title>Atom 0.3 snapshot</title>
    <id>tag:diveintomark.org,2003:3.2397</id>
    <issued>2003-12-13T08:29:29-04:00</issued>
    <modified>2003-12-13T18:30:02Z</modified>
    <author><name>Mark Pilgrim</name><url>http://diveintomark.org/</url></author>
    <summary type="text/plain">Summary text</summary>
    <content type="application/xhtml+xml" mode="xml">
      <div xmlns="http://www.w3.org/1999/xhtml"><p>Body</p></div>
    </content>
  </entry>
</feed>
"""


def test_atom03_adapter_maps_legacy_elements_onto_atom10_model() -> None:
    feed = AtomFeed()

    Atom03Adapter(load_document(_ATOM_03_FEED), LoadSettings()).fill(feed)

    assert feed.title is not None and feed.title.text_type is AtomTextType.HTML
    assert feed.title.content == "dive into <b>mark</b>"
    assert feed.subtitle is not None and feed.subtitle.text_type is AtomTextType.XHTML
    assert feed.subtitle.content == "A lot of effort"
    assert feed.updated_on == datetime(2003, 12, 13, 18, 30, 2, tzinfo=timezone.utc)
    assert feed.rights is not None and feed.rights.content == "Copyright (c) 2003"
    assert feed.generator is not None and feed.generator.uri == "http://www.example.com/"

    entry = feed.entries[0]
    assert entry.id == "tag:diveintomark.org,2003:3.2397"
    assert entry.published_on is not None and entry.published_on.hour == 8
    assert entry.authors[0].uri == "http://diveintomark.org/"
    assert entry.summary is not None and entry.summary.content == "Summary text"
    assert entry.content is not None and entry.content.content == "Body"


def test_entries_without_recognised_children_are_still_listed() -> None:
    payload = (
        '<feed xmlns="http://www.w3.org/2005/Atom"><id>urn:f</id>'
        "<entry/><entry><updated>garbage</updated></entry><entry><id>urn:3</id></entry></feed>"
    )

    feed = _fill_feed(payload)

    assert [entry.id for entry in feed.entries] == [None, None, "urn:3"]

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from syndikit.config import LoadSettings
from syndikit.detection import ContentFormat
from syndikit.generic import GenericCategory, GenericFeed, GenericItem, load_generic_feed
from syndikit.models import AtomFeed, RssCategory, RssFeed, RssItem

_ATOM = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom" xml:lang="en">
  <title>Example Feed</title>
  <subtitle>A subtitle.</subtitle>
  <id>urn:uuid:60a76c80-d399-11d9-b93C-0003939e0af6</id>
  <updated>2003-12-13T18:30:02Z</updated>
  <category term="news" scheme="http://example.org/cats"/>
  <entry>
    <title>  Atom-Powered Robots Run Amok  </title>
    <id>urn:uuid:1225c695-cfb8-4ebb-aaaa-80da344efa6a</id>
    <updated>2003-12-13T18:30:02Z</updated>
    <summary>Some text.</summary>
    <category label="Robots"/>
  </entry>
  <entry>
    <id>urn:2</id>
    <updated>2004-01-01T00:00:00Z</updated>
    <published>2003-12-31T00:00:00Z</published>
    <content type="text">Full content</content>
  </entry>
</feed>
"""

_RSS = """<?xml version="1.0"?>
<rss version="2.0">
  <channel>
    <title>Liftoff News</title>
    <description>Liftoff to Space Exploration.</description>
    <language>en-us</language>
    <lastBuildDate>Tue, 10 Jun 2003 09:41:01 GMT</lastBuildDate>
    <category domain="http://www.fool.com/cusips">MSFT</category>
    <item>
      <title>Star City</title>
      <description>How do Americans get ready?</description>
      <pubDate>Tue, 03 Jun 2003 09:39:21 GMT</pubDate>
      <category>Space</category>
    </item>
    <item/>
  </channel>
</rss>
"""


def test_atom_feed_maps_onto_generic_view() -> None:
    feed = load_generic_feed(_ATOM)

    assert feed.format is ContentFormat.ATOM
    assert feed.title == "Example Feed"
    assert feed.description == "A subtitle."
    assert feed.language == "en"
    assert feed.last_updated_on == datetime(2003, 12, 13, 18, 30, 2, tzinfo=timezone.utc)
    assert feed.categories == [GenericCategory(term="news", scheme="http://example.org/cats")]
    assert isinstance(feed.resource, AtomFeed)

    first, second = feed.items
    assert first.title == "Atom-Powered Robots Run Amok"
    assert first.summary == "Some text."
    assert first.published_on == datetime(2003, 12, 13, 18, 30, 2, tzinfo=timezone.utc)
    assert first.categories == [GenericCategory(term="Robots")]
    # Content stands in for a missing summary and published wins over updated.
    assert second.summary == "Full content"
    assert second.published_on == datetime(2003, 12, 31, tzinfo=timezone.utc)


def test_rss_feed_maps_onto_generic_view(tmp_path: Path) -> None:
    path = tmp_path / "feed.xml"
    path.write_text(_RSS, encoding="utf-8")

    feed = load_generic_feed(path)

    assert feed.format is ContentFormat.RSS
    assert feed.title == "Liftoff News"
    assert feed.description == "Liftoff to Space Exploration."
    assert feed.language == "en-us"
    assert feed.last_updated_on == datetime(2003, 6, 10, 9, 41, 1, tzinfo=timezone.utc)
    assert feed.categories == [GenericCategory(term="MSFT", scheme="http://www.fool.com/cusips")]
    assert isinstance(feed.resource, RssFeed)

    assert len(feed.items) == 2
    assert feed.items[0] == GenericItem(
        title="Star City",
        summary="How do Americans get ready?",
        published_on=datetime(2003, 6, 3, 9, 39, 21, tzinfo=timezone.utc),
        categories=[GenericCategory(term="Space")],
    )
    assert feed.items[1] == GenericItem()


def test_opml_document_keeps_head_metadata_without_items() -> None:
    feed = load_generic_feed(
        '<opml version="2.0"><head><title>mySubscriptions.opml</title>'
        "<dateModified>Thu, 02 Jun 2005 05:02:05 GMT</dateModified></head>"
        '<body><outline text="CNET News.com"/></body></opml>'
    )

    assert feed.format is ContentFormat.OPML
    assert feed.title == "mySubscriptions.opml"
    assert feed.last_updated_on == datetime(2005, 6, 2, 5, 2, 5, tzinfo=timezone.utc)
    assert feed.items == []
    assert len(feed.resource.outlines) == 1


def test_standalone_atom_entry_becomes_single_item_feed() -> None:
    feed = load_generic_feed(
        '<entry xmlns="http://www.w3.org/2005/Atom"><id>urn:e</id><title>Solo</title>'
        "<updated>2005-07-31T12:29:29Z</updated></entry>"
    )

    assert feed.format is ContentFormat.ATOM
    assert [item.title for item in feed.items] == ["Solo"]


def test_retrieval_limit_flows_through_to_generic_items() -> None:
    feed = load_generic_feed(_ATOM, LoadSettings(retrieval_limit=1))

    assert [item.title for item in feed.items] == ["Atom-Powered Robots Run Amok"]


def test_non_feed_dialects_yield_an_empty_generic_feed() -> None:
    feed = load_generic_feed(
        '<rsd version="1.0" xmlns="http://archipelago.phrasewise.com/rsd">'
        "<service><engineName>WordPress</engineName></service></rsd>"
    )

    assert feed == GenericFeed()


def test_unsupported_version_yields_format_only() -> None:
    feed = load_generic_feed('<rss version="0.93"><channel><title>Old</title></channel></rss>')

    assert feed.format is ContentFormat.RSS
    assert feed.title is None
    assert feed.resource is None


def test_from_resource_maps_prebuilt_objects_and_rejects_others() -> None:
    rss = RssFeed()
    rss.channel.title = "  Built by hand "
    rss.channel.items.append(RssItem(title="one", categories=[RssCategory(value=" tag ", domain="")]))

    feed = GenericFeed.from_resource(rss)

    assert feed.title == "Built by hand"
    assert feed.items[0].categories == [GenericCategory(term="tag", scheme=None)]

    with pytest.raises(ValueError, match="None"):
        GenericFeed.from_resource(None)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="LoadSettings"):
        GenericFeed.from_resource(LoadSettings())  # type: ignore[arg-type]

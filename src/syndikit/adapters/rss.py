"""RSS adapters: the ``rss``-rooted family (0.91, 0.92, 2.0) and the RDF family (0.90, 1.0)."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from lxml import etree

from syndikit import namespaces as ns
from syndikit.adapters.base import DialectAdapter, Field
from syndikit.coercion import as_bool, as_int, as_text, as_uri, enum_by_value, parse_rfc822
from syndikit.detection import ContentFormat, parse_version
from syndikit.models.rss import (
    RssCategory,
    RssChannel,
    RssCloud,
    RssCloudProtocol,
    RssEnclosure,
    RssFeed,
    RssGuid,
    RssImage,
    RssItem,
    RssSource,
    RssTextInput,
    SkipDay,
)
from syndikit.navigation import string_value

logger = logging.getLogger(__name__)

_IMAGE_FIELDS = (
    Field("url", "url", as_uri),
    Field("title", "title"),
    Field("link", "link", as_uri),
    Field("description", "description"),
    Field("width", "width", as_int),
    Field("height", "height", as_int),
)
_TEXT_INPUT_FIELDS = (
    Field("title", "title"),
    Field("description", "description"),
    Field("name", "name"),
    Field("link", "link", as_uri),
)
_CLOUD_FIELDS = (
    Field("@domain", "domain"),
    Field("@port", "port", as_int),
    Field("@path", "path"),
    Field("@registerProcedure", "register_procedure"),
    Field("@protocol", "protocol", lambda raw: enum_by_value(RssCloudProtocol, raw)),
)
_ENCLOSURE_FIELDS = (
    Field("@url", "url", as_uri),
    Field("@length", "length", as_int),
    Field("@type", "content_type"),
)


class _RssAdapter(DialectAdapter):
    """Channel-nested RSS: everything hangs off ``rss/channel``."""

    format = ContentFormat.RSS
    target_types = (RssFeed,)

    CHANNEL_FIELDS: ClassVar[tuple[Field, ...]] = (
        Field("title", "title"),
        Field("link", "link", as_uri),
        Field("description", "description"),
        Field("language", "language"),
        Field("copyright", "copyright"),
        Field("managingEditor", "managing_editor"),
        Field("webMaster", "web_master"),
        Field("rating", "rating"),
        Field("pubDate", "publication_date", parse_rfc822),
        Field("lastBuildDate", "last_build_date", parse_rfc822),
        Field("docs", "docs", as_uri),
    )
    ITEM_FIELDS: ClassVar[tuple[Field, ...]] = (
        Field("title", "title"),
        Field("link", "link", as_uri),
        Field("description", "description"),
    )
    # Hours in 0.91/0.92 are 1-based on the wire and stored 0-based.
    SKIP_HOUR_OFFSET: ClassVar[int] = 0
    CLAMP_IMAGE: ClassVar[bool] = False
    HAS_CLOUD: ClassVar[bool] = False
    HAS_CHANNEL_CATEGORIES: ClassVar[bool] = False

    def _fill(self, feed: RssFeed) -> bool:
        root = self._locate("rss")
        if root is None:
            return False
        channel_element = self._select(root, "channel")
        if channel_element is None:
            logger.debug("RSS document has no channel element")
            return False

        feed.version = parse_version(root.get("version")) or self.versions[0]
        self._load_channel(feed.channel, channel_element)
        self._fill_extensions(feed, root)
        return True

    def _load_channel(self, channel: RssChannel, element: etree._Element) -> None:
        self._fill_fields(channel, element, self.CHANNEL_FIELDS)

        image = self._select(element, "image")
        if image is not None:
            channel.image = self._build_image(image)

        text_input = self._select(element, "textInput | textinput")
        if text_input is not None:
            channel.text_input = self._build_simple(RssTextInput(), text_input, _TEXT_INPUT_FIELDS)

        if self.HAS_CLOUD:
            cloud = self._select(element, "cloud")
            if cloud is not None:
                channel.cloud = self._build_simple(RssCloud(), cloud, _CLOUD_FIELDS)

        if self.HAS_CHANNEL_CATEGORIES:
            self._load_categories(channel.categories, element)

        self._load_skip_days(channel, element)
        self._load_skip_hours(channel, element)

        self._fill_collection(channel.items, self._select_all(element, "item"), self._build_item)
        self._fill_extensions(channel, element)

    def _build_simple(self, item: Any, element: etree._Element, fields: tuple[Field, ...]) -> Any:
        loaded = self._fill_fields(item, element, fields)
        self._fill_extensions(item, element)
        return item if loaded or item.has_extensions else None

    def _build_image(self, element: etree._Element) -> RssImage | None:
        image = self._build_simple(RssImage(), element, _IMAGE_FIELDS)
        if image is None or not self.CLAMP_IMAGE:
            return image
        if image.height is not None and image.height > RssImage.HEIGHT_MAXIMUM:
            image.height = RssImage.HEIGHT_MAXIMUM
        if image.width is not None and image.width > RssImage.WIDTH_MAXIMUM:
            image.width = RssImage.WIDTH_MAXIMUM
        return image

    def _load_skip_days(self, channel: RssChannel, element: etree._Element) -> None:
        for day_element in self._select_all(element, "skipDays/day"):
            day = enum_by_value(SkipDay, string_value(day_element))
            if day is None:
                continue
            if day in channel.skip_days:
                logger.warning("Ignoring duplicate skip day %s", day.value)
                continue
            channel.skip_days.append(day)

    def _load_skip_hours(self, channel: RssChannel, element: etree._Element) -> None:
        for hour_element in self._select_all(element, "skipHours/hour"):
            raw = string_value(hour_element)
            hour = as_int(raw)
            if hour is None:
                continue
            hour -= self.SKIP_HOUR_OFFSET
            if not 0 <= hour <= 23:
                logger.warning("Ignoring skip hour %r outside the 0-23 range", raw.strip())
                continue
            if hour in channel.skip_hours:
                logger.warning("Ignoring duplicate skip hour %r", raw.strip())
                continue
            channel.skip_hours.append(hour)

    def _load_categories(self, collection: list[RssCategory], element: etree._Element) -> bool:
        was_loaded = False
        for category_element in self._select_all(element, "category"):
            category = RssCategory(
                value=as_text(string_value(category_element)),
                domain=as_text(category_element.get("domain")),
            )
            self._fill_extensions(category, category_element)
            if category.value is not None or category.domain is not None or category.has_extensions:
                collection.append(category)
                was_loaded = True
        return was_loaded

    def _build_item(self, element: etree._Element) -> RssItem:
        item = RssItem()
        self._fill_fields(item, element, self.ITEM_FIELDS)
        self._load_item_extras(item, element)
        self._fill_extensions(item, element)
        return item

    def _load_item_extras(self, item: RssItem, element: etree._Element) -> bool:
        return False

    def _load_source_and_enclosures(self, item: RssItem, element: etree._Element) -> bool:
        was_loaded = self._load_categories(item.categories, element)

        for enclosure_element in self._select_all(element, "enclosure"):
            enclosure = self._build_simple(RssEnclosure(), enclosure_element, _ENCLOSURE_FIELDS)
            if enclosure is not None:
                item.enclosures.append(enclosure)
                was_loaded = True

        source_element = self._select(element, "source")
        if source_element is not None:
            source = RssSource(
                url=as_uri(source_element.get("url")),
                title=as_text(string_value(source_element)),
            )
            self._fill_extensions(source, source_element)
            if source.url is not None or source.title is not None or source.has_extensions:
                item.source = source
                was_loaded = True
        return was_loaded


class Rss091Adapter(_RssAdapter):
    """Netscape/UserLand RSS 0.91."""

    versions = ((0, 91),)
    SKIP_HOUR_OFFSET = 1
    CLAMP_IMAGE = True


class Rss092Adapter(_RssAdapter):
    """UserLand RSS 0.92: adds cloud, enclosures, item categories and sources."""

    versions = ((0, 92),)
    SKIP_HOUR_OFFSET = 1
    CLAMP_IMAGE = True
    HAS_CLOUD = True

    def _load_item_extras(self, item: RssItem, element: etree._Element) -> bool:
        return self._load_source_and_enclosures(item, element)


class Rss20Adapter(_RssAdapter):
    """RSS 2.0 (Harvard/RSS Advisory Board)."""

    versions = ((2, 0),)
    HAS_CLOUD = True
    HAS_CHANNEL_CATEGORIES = True

    CHANNEL_FIELDS = _RssAdapter.CHANNEL_FIELDS + (
        Field("generator", "generator"),
        Field("ttl", "time_to_live", as_int),
    )
    ITEM_FIELDS = _RssAdapter.ITEM_FIELDS + (
        Field("author", "author"),
        Field("comments", "comments", as_uri),
        Field("pubDate", "publication_date", parse_rfc822),
    )

    def _load_item_extras(self, item: RssItem, element: etree._Element) -> bool:
        was_loaded = self._load_source_and_enclosures(item, element)

        guid_element = self._select(element, "guid")
        if guid_element is not None:
            guid = RssGuid(value=as_text(string_value(guid_element)))
            permalink = as_bool(guid_element.get("isPermaLink"))
            if permalink is not None:
                guid.is_permalink = permalink
            self._fill_extensions(guid, guid_element)
            if guid.value is not None or guid.has_extensions:
                item.guid = guid
                was_loaded = True
        return was_loaded


class _RdfSiteSummaryAdapter(DialectAdapter):
    """RDF-wrapped RSS: channel, image, textinput and items are siblings under ``rdf:RDF``."""

    format = ContentFormat.RSS
    target_types = (RssFeed,)

    CHANNEL_FIELDS: ClassVar[tuple[Field, ...]] = (
        Field("rss:title", "title"),
        Field("rss:link", "link", as_uri),
        Field("rss:description", "description"),
    )
    IMAGE_FIELDS: ClassVar[tuple[Field, ...]] = (
        Field("rss:title", "title"),
        Field("rss:link", "link", as_uri),
        Field("rss:url", "url", as_uri),
    )
    TEXT_INPUT_FIELDS: ClassVar[tuple[Field, ...]] = (
        Field("rss:title", "title"),
        Field("rss:description", "description"),
        Field("rss:name", "name"),
        Field("rss:link", "link", as_uri),
    )
    ITEM_FIELDS: ClassVar[tuple[Field, ...]] = (
        Field("rss:title", "title"),
        Field("rss:link", "link", as_uri),
        Field("rss:description", "description"),
    )

    def _fill(self, feed: RssFeed) -> bool:
        root = self._locate("rdf:RDF")
        if root is None:
            return False
        feed.version = self.versions[0]
        channel = feed.channel

        channel_element = self._select(root, "rss:channel")
        if channel_element is not None:
            self._fill_fields(channel, channel_element, self.CHANNEL_FIELDS)
            self._fill_extensions(channel, channel_element)

        image_element = self._select(root, "rss:image")
        if image_element is not None:
            channel.image = self._build_simple(RssImage(), image_element, self.IMAGE_FIELDS)

        text_input_element = self._select(root, "rss:textinput")
        if text_input_element is not None:
            channel.text_input = self._build_simple(RssTextInput(), text_input_element, self.TEXT_INPUT_FIELDS)

        self._fill_collection(
            channel.items,
            self._select_all(root, "rss:item"),
            self._build_item,
        )
        self._fill_extensions(feed, root)
        return True

    def _build_simple(self, item: Any, element: etree._Element, fields: tuple[Field, ...]) -> Any:
        loaded = self._fill_fields(item, element, fields)
        self._fill_extensions(item, element)
        return item if loaded or item.has_extensions else None

    def _build_item(self, element: etree._Element) -> RssItem:
        item = RssItem()
        self._fill_fields(item, element, self.ITEM_FIELDS)
        self._fill_extensions(item, element)
        return item


class Rss10Adapter(_RdfSiteSummaryAdapter):
    """RDF Site Summary 1.0."""

    versions = ((1, 0),)
    namespaces = {"rdf": ns.RDF, "rss": ns.RSS_10}
    native_namespaces = frozenset({ns.RDF, ns.RSS_10})


class Rss090Adapter(_RdfSiteSummaryAdapter):
    """Netscape RSS 0.90, the original RDF-based dialect."""

    versions = ((0, 9),)
    namespaces = {"rdf": ns.RDF, "rss": ns.RSS_090}
    native_namespaces = frozenset({ns.RDF, ns.RSS_090})

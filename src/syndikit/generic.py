"""Format-neutral view over Atom, RSS and OPML resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
import logging
from pathlib import Path
from typing import Any

from syndikit.config import LoadSettings
from syndikit.detection import ContentFormat, detect
from syndikit.dispatch import ResourceDispatcher
from syndikit.extensions import ExtensionRegistry
from syndikit.models import AtomCategory, AtomEntry, AtomFeed, OpmlDocument, RssCategory, RssFeed, RssItem
from syndikit.navigation import load_document

logger = logging.getLogger(__name__)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True, slots=True)
class GenericCategory:
    term: str | None = None
    scheme: str | None = None

    @classmethod
    def from_atom(cls, category: AtomCategory) -> "GenericCategory":
        # Atom allows a label without a term; fall back to it.
        return cls(term=_clean(category.term) or _clean(category.label), scheme=category.scheme)

    @classmethod
    def from_rss(cls, category: RssCategory) -> "GenericCategory":
        return cls(term=_clean(category.value), scheme=_clean(category.domain))


@dataclass(slots=True)
class GenericItem:
    title: str | None = None
    summary: str | None = None
    published_on: datetime | None = None
    categories: list[GenericCategory] = field(default_factory=list)

    @classmethod
    def from_atom(cls, entry: AtomEntry) -> "GenericItem":
        """Summary prefers ``atom:summary`` and falls back to the entry content."""

        summary = _clean(entry.summary.content) if entry.summary else None
        if summary is None and entry.content is not None:
            summary = _clean(entry.content.content)
        return cls(
            title=_clean(entry.title.content) if entry.title else None,
            summary=summary,
            published_on=entry.published_on or entry.updated_on,
            categories=[GenericCategory.from_atom(category) for category in entry.categories],
        )

    @classmethod
    def from_rss(cls, item: RssItem) -> "GenericItem":
        return cls(
            title=_clean(item.title),
            summary=_clean(item.description),
            published_on=item.publication_date,
            categories=[GenericCategory.from_rss(category) for category in item.categories],
        )


@dataclass(slots=True)
class GenericFeed:
    """Title, description, dates, categories and items shared by every feed dialect.

    ``resource`` keeps the dialect object the view was built from.
    """

    format: ContentFormat = ContentFormat.NONE
    title: str | None = None
    description: str | None = None
    language: str | None = None
    last_updated_on: datetime | None = None
    categories: list[GenericCategory] = field(default_factory=list)
    items: list[GenericItem] = field(default_factory=list)
    resource: Any = None

    @classmethod
    def from_resource(cls, resource: AtomFeed | AtomEntry | RssFeed | OpmlDocument) -> "GenericFeed":
        if resource is None:
            raise ValueError("Resource to parse cannot be None")
        if isinstance(resource, AtomFeed):
            return cls._from_atom_feed(resource)
        if isinstance(resource, AtomEntry):
            return cls(format=ContentFormat.ATOM, items=[GenericItem.from_atom(resource)], resource=resource)
        if isinstance(resource, RssFeed):
            return cls._from_rss_feed(resource)
        if isinstance(resource, OpmlDocument):
            return cls(
                format=ContentFormat.OPML,
                title=_clean(resource.head.title),
                last_updated_on=resource.head.modified_on or resource.head.created_on,
                resource=resource,
            )
        raise TypeError(f"Cannot build a generic feed from {type(resource).__name__}")

    @classmethod
    def _from_atom_feed(cls, feed: AtomFeed) -> "GenericFeed":
        return cls(
            format=ContentFormat.ATOM,
            title=_clean(feed.title.content) if feed.title else None,
            description=_clean(feed.subtitle.content) if feed.subtitle else None,
            language=feed.language,
            last_updated_on=feed.updated_on,
            categories=[GenericCategory.from_atom(category) for category in feed.categories],
            items=[GenericItem.from_atom(entry) for entry in feed.entries],
            resource=feed,
        )

    @classmethod
    def _from_rss_feed(cls, feed: RssFeed) -> "GenericFeed":
        channel = feed.channel
        return cls(
            format=ContentFormat.RSS,
            title=_clean(channel.title),
            description=_clean(channel.description),
            language=channel.language,
            last_updated_on=channel.last_build_date,
            categories=[GenericCategory.from_rss(category) for category in channel.categories],
            items=[GenericItem.from_rss(item) for item in channel.items],
            resource=feed,
        )


def load_generic_feed(
    source: bytes | str | Path,
    settings: LoadSettings | None = None,
    registry: ExtensionRegistry | None = None,
) -> GenericFeed:
    """Sniff ``source``, fill the matching Atom, RSS or OPML object and wrap it.

    Documents in any other dialect yield an empty feed whose format is NONE.
    """

    settings = settings or LoadSettings()
    document = load_document(source, encoding=settings.character_encoding)
    metadata = detect(document)

    if metadata.format is ContentFormat.ATOM:
        resource: Any = AtomEntry() if metadata.root_name == "entry" else AtomFeed()
    elif metadata.format is ContentFormat.RSS:
        resource = RssFeed()
    elif metadata.format is ContentFormat.OPML:
        resource = OpmlDocument()
    else:
        logger.info("Document format %s has no generic feed view", metadata.format.value)
        return GenericFeed()

    outcome = ResourceDispatcher(document, settings, registry=registry).fill(resource, metadata.format)
    if not outcome.filled:
        return GenericFeed(format=metadata.format)
    return GenericFeed.from_resource(resource)

"""Atom 1.0 and legacy Atom 0.3 adapters."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from lxml import etree

from syndikit import namespaces as ns
from syndikit.adapters.base import DialectAdapter, Field
from syndikit.coercion import as_int, as_text, as_uri, enum_by_value, parse_rfc3339
from syndikit.detection import ContentFormat
from syndikit.models.atom import (
    AtomCategory,
    AtomCommonObject,
    AtomContent,
    AtomEntry,
    AtomFeed,
    AtomGenerator,
    AtomLink,
    AtomPersonConstruct,
    AtomSource,
    AtomTextConstruct,
    AtomTextType,
)
from syndikit.navigation import string_value, xml_base

logger = logging.getLogger(__name__)


class _AtomAdapter(DialectAdapter):
    """Walk shared by both Atom generations; subclasses supply the vocabulary."""

    format = ContentFormat.ATOM
    target_types = (AtomFeed, AtomEntry)

    FEED_FIELDS: ClassVar[tuple[Field, ...]] = ()
    ENTRY_FIELDS: ClassVar[tuple[Field, ...]] = ()
    FEED_TEXT: ClassVar[dict[str, str]] = {}
    ENTRY_TEXT: ClassVar[dict[str, str]] = {}
    CATEGORY_FIELDS: ClassVar[tuple[Field, ...]] = ()
    LINK_FIELDS: ClassVar[tuple[Field, ...]] = ()
    PERSON_FIELDS: ClassVar[tuple[Field, ...]] = ()
    GENERATOR_FIELDS: ClassVar[tuple[Field, ...]] = ()

    def _fill(self, target: Any) -> bool:
        if isinstance(target, AtomFeed):
            element = self._locate("atom:feed")
            if element is not None:
                self._load_feed(target, element)
        else:
            element = self._locate("atom:entry")
            if element is not None:
                self._load_entry(target, element)
        return element is not None

    def _load_common(self, target: AtomCommonObject, element: etree._Element) -> bool:
        was_loaded = False
        base = as_uri(xml_base(element))
        if base is not None:
            target.base_uri = base
            was_loaded = True
        self._fill_language(target, element)
        return was_loaded or target.language is not None

    def _load_feed(self, feed: AtomFeed, element: etree._Element) -> None:
        self._load_common(feed, element)
        self._fill_fields(feed, element, self.FEED_FIELDS)
        self._load_text_constructs(feed, element, self.FEED_TEXT)
        self._load_generator(feed, element)
        self._load_people_and_links(feed, element)
        self._fill_collection(feed.entries, self._select_all(element, "atom:entry"), self._build_entry)
        self._fill_extensions(feed, element)

    def _build_entry(self, element: etree._Element) -> AtomEntry:
        entry = AtomEntry()
        self._load_entry(entry, element)
        return entry

    def _load_entry(self, entry: AtomEntry, element: etree._Element) -> bool:
        was_loaded = self._load_common(entry, element)
        was_loaded |= self._fill_fields(entry, element, self.ENTRY_FIELDS)
        was_loaded |= self._load_text_constructs(entry, element, self.ENTRY_TEXT)
        was_loaded |= self._load_people_and_links(entry, element)

        content_element = self._select(element, "atom:content")
        if content_element is not None:
            content = self._build_content(content_element)
            if content is not None:
                entry.content = content
                was_loaded = True

        was_loaded |= self._load_source(entry, element)
        self._fill_extensions(entry, element)
        return was_loaded or entry.has_extensions

    def _load_source(self, entry: AtomEntry, element: etree._Element) -> bool:
        return False

    def _load_text_constructs(self, target: Any, element: etree._Element, mapping: dict[str, str]) -> bool:
        was_loaded = False
        for path, attr in mapping.items():
            child = self._select(element, path)
            if child is None:
                continue
            construct = self._build_text(child)
            if construct is not None:
                setattr(target, attr, construct)
                was_loaded = True
        return was_loaded

    def _load_generator(self, target: Any, element: etree._Element) -> bool:
        child = self._select(element, "atom:generator")
        if child is None:
            return False
        generator = AtomGenerator()
        loaded = self._load_common(generator, child)
        loaded |= self._fill_fields(generator, child, self.GENERATOR_FIELDS)
        content = as_text(string_value(child))
        if content is not None:
            generator.content = content
            loaded = True
        self._fill_extensions(generator, child)
        if loaded:
            target.generator = generator
        return loaded

    def _load_people_and_links(self, target: Any, element: etree._Element) -> bool:
        was_loaded = False
        for person in self._select_all(element, "atom:author"):
            author = self._build_person(person)
            if author is not None:
                target.authors.append(author)
                was_loaded = True
        for person in self._select_all(element, "atom:contributor"):
            contributor = self._build_person(person)
            if contributor is not None:
                target.contributors.append(contributor)
                was_loaded = True
        for category in self._select_all(element, "atom:category"):
            built = self._build_simple(AtomCategory(), category, self.CATEGORY_FIELDS)
            if built is not None:
                target.categories.append(built)
                was_loaded = True
        for link in self._select_all(element, "atom:link"):
            built = self._build_simple(AtomLink(), link, self.LINK_FIELDS)
            if built is not None:
                target.links.append(built)
                was_loaded = True
        return was_loaded

    def _build_person(self, element: etree._Element) -> AtomPersonConstruct | None:
        return self._build_simple(AtomPersonConstruct(), element, self.PERSON_FIELDS)

    def _build_simple(self, item: AtomCommonObject, element: etree._Element, fields: tuple[Field, ...]) -> Any:
        loaded = self._load_common(item, element)
        loaded |= self._fill_fields(item, element, fields)
        self._fill_extensions(item, element)
        return item if loaded or item.has_extensions else None

    def _build_text(self, element: etree._Element) -> AtomTextConstruct | None:
        raise NotImplementedError

    def _build_content(self, element: etree._Element) -> AtomContent | None:
        raise NotImplementedError

    def _xhtml_value(self, element: etree._Element) -> str:
        div = self._select(element, "xhtml:div")
        return string_value(div) if div is not None else string_value(element)


class Atom10Adapter(_AtomAdapter):
    """RFC 4287 feeds and standalone entries."""

    versions = ((1, 0),)
    namespaces = {"atom": ns.ATOM_10, "xhtml": ns.XHTML}
    native_namespaces = frozenset({ns.ATOM_10})

    FEED_FIELDS = (
        Field("atom:id", "id"),
        Field("atom:updated", "updated_on", parse_rfc3339),
        Field("atom:icon", "icon", as_uri),
        Field("atom:logo", "logo", as_uri),
    )
    ENTRY_FIELDS = (
        Field("atom:id", "id"),
        Field("atom:updated", "updated_on", parse_rfc3339),
        Field("atom:published", "published_on", parse_rfc3339),
    )
    SOURCE_FIELDS = FEED_FIELDS
    FEED_TEXT = {"atom:title": "title", "atom:rights": "rights", "atom:subtitle": "subtitle"}
    ENTRY_TEXT = {"atom:title": "title", "atom:rights": "rights", "atom:summary": "summary"}
    CATEGORY_FIELDS = (
        Field("@term", "term"),
        Field("@scheme", "scheme", as_uri),
        Field("@label", "label"),
    )
    LINK_FIELDS = (
        Field("@href", "href", as_uri),
        Field("@rel", "relation"),
        Field("@type", "content_type"),
        Field("@hreflang", "content_language"),
        Field("@title", "title"),
        Field("@length", "length", as_int),
    )
    PERSON_FIELDS = (
        Field("atom:name", "name"),
        Field("atom:uri", "uri", as_uri),
        Field("atom:email", "email"),
    )
    GENERATOR_FIELDS = (
        Field("@uri", "uri", as_uri),
        Field("@version", "version"),
    )

    def _load_source(self, entry: AtomEntry, element: etree._Element) -> bool:
        child = self._select(element, "atom:source")
        if child is None:
            return False
        source = AtomSource()
        loaded = self._load_common(source, child)
        loaded |= self._fill_fields(source, child, self.SOURCE_FIELDS)
        loaded |= self._load_text_constructs(source, child, self.FEED_TEXT)
        loaded |= self._load_generator(source, child)
        loaded |= self._load_people_and_links(source, child)
        self._fill_extensions(source, child)
        if loaded:
            entry.source = source
        return loaded

    def _build_text(self, element: etree._Element) -> AtomTextConstruct | None:
        construct = AtomTextConstruct()
        self._load_common(construct, element)
        construct.text_type = enum_by_value(AtomTextType, element.get("type")) or AtomTextType.TEXT
        if construct.text_type is AtomTextType.XHTML:
            construct.content = self._xhtml_value(element)
        else:
            construct.content = string_value(element)
        self._fill_extensions(construct, element)
        return construct if construct.content or construct.has_extensions else None

    def _build_content(self, element: etree._Element) -> AtomContent | None:
        content = AtomContent()
        loaded = self._load_common(content, element)
        content_type = as_text(element.get("type"))
        if content_type is not None:
            content.content_type = content_type
            loaded = True
        src = as_uri(element.get("src"))
        if src is not None:
            content.source = self._resolve(element, src)
            loaded = True

        value = self._xhtml_value(element) if content_type == "xhtml" else string_value(element)
        if value:
            content.content = value
            loaded = True
        self._fill_extensions(content, element)
        return content if loaded else None


class Atom03Adapter(_AtomAdapter):
    """Pre-standard Atom 0.3 documents mapped onto the Atom 1.0 model."""

    versions = ((0, 3),)
    namespaces = {"atom": ns.ATOM_03, "xhtml": ns.XHTML}
    native_namespaces = frozenset({ns.ATOM_03})

    FEED_FIELDS = (
        Field("atom:id", "id"),
        Field("atom:modified", "updated_on", parse_rfc3339),
    )
    ENTRY_FIELDS = (
        Field("atom:id", "id"),
        Field("atom:issued", "published_on", parse_rfc3339),
        Field("atom:created", "published_on", parse_rfc3339),
        Field("atom:modified", "updated_on", parse_rfc3339),
    )
    FEED_TEXT = {"atom:title": "title", "atom:copyright": "rights", "atom:tagline": "subtitle"}
    ENTRY_TEXT = {"atom:title": "title", "atom:summary": "summary"}
    LINK_FIELDS = (
        Field("@href", "href", as_uri),
        Field("@rel", "relation"),
        Field("@type", "content_type"),
        Field("@title", "title"),
    )
    PERSON_FIELDS = (
        Field("atom:name", "name"),
        Field("atom:url", "uri", as_uri),
        Field("atom:email", "email"),
    )
    GENERATOR_FIELDS = (
        Field("@url", "uri", as_uri),
        Field("@version", "version"),
    )

    def _text_type(self, element: etree._Element) -> AtomTextType:
        mode = (as_text(element.get("mode")) or "").lower()
        if mode == "xml":
            return AtomTextType.XHTML
        if mode == "escaped":
            return AtomTextType.HTML
        if mode:
            return AtomTextType.TEXT

        media_type = (as_text(element.get("type")) or "").lower()
        if media_type == "text/html":
            return AtomTextType.HTML
        if media_type == "application/xhtml+xml":
            return AtomTextType.XHTML
        return AtomTextType.TEXT

    def _build_text(self, element: etree._Element) -> AtomTextConstruct | None:
        construct = AtomTextConstruct()
        self._load_common(construct, element)
        construct.text_type = self._text_type(element)
        if construct.text_type is AtomTextType.XHTML:
            construct.content = self._xhtml_value(element)
        else:
            construct.content = string_value(element)
        self._fill_extensions(construct, element)
        return construct if construct.content or construct.has_extensions else None

    def _build_content(self, element: etree._Element) -> AtomContent | None:
        content = AtomContent()
        loaded = self._load_common(content, element)
        content_type = as_text(element.get("type"))
        if content_type is not None:
            content.content_type = content_type
            loaded = True

        if (as_text(element.get("mode")) or "").lower() == "xml":
            value = self._xhtml_value(element)
        else:
            value = string_value(element)
        if value:
            content.content = value
            loaded = True
        self._fill_extensions(content, element)
        return content if loaded else None

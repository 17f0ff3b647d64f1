"""Atom 1.0 object model; Atom 0.3 documents are filled into the same types."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from syndikit.models.base import Extensible


class AtomTextType(Enum):
    TEXT = "text"
    HTML = "html"
    XHTML = "xhtml"


@dataclass(slots=True)
class AtomCommonObject(Extensible):
    """Fields every Atom construct carries from ``xml:base`` and ``xml:lang``."""

    base_uri: str | None = None
    language: str | None = None


@dataclass(slots=True)
class AtomTextConstruct(AtomCommonObject):
    content: str | None = None
    text_type: AtomTextType = AtomTextType.TEXT


@dataclass(slots=True)
class AtomPersonConstruct(AtomCommonObject):
    name: str | None = None
    uri: str | None = None
    email: str | None = None


@dataclass(slots=True)
class AtomCategory(AtomCommonObject):
    term: str | None = None
    scheme: str | None = None
    label: str | None = None


@dataclass(slots=True)
class AtomLink(AtomCommonObject):
    href: str | None = None
    relation: str | None = None
    content_type: str | None = None
    content_language: str | None = None
    title: str | None = None
    length: int | None = None


@dataclass(slots=True)
class AtomGenerator(AtomCommonObject):
    content: str | None = None
    uri: str | None = None
    version: str | None = None


@dataclass(slots=True)
class AtomContent(AtomCommonObject):
    content: str | None = None
    content_type: str | None = None
    source: str | None = None


@dataclass(slots=True)
class AtomSource(AtomCommonObject):
    id: str | None = None
    title: AtomTextConstruct | None = None
    updated_on: datetime | None = None
    generator: AtomGenerator | None = None
    icon: str | None = None
    logo: str | None = None
    rights: AtomTextConstruct | None = None
    subtitle: AtomTextConstruct | None = None
    authors: list[AtomPersonConstruct] = field(default_factory=list)
    categories: list[AtomCategory] = field(default_factory=list)
    contributors: list[AtomPersonConstruct] = field(default_factory=list)
    links: list[AtomLink] = field(default_factory=list)


@dataclass(slots=True)
class AtomEntry(AtomCommonObject):
    id: str | None = None
    title: AtomTextConstruct | None = None
    updated_on: datetime | None = None
    content: AtomContent | None = None
    published_on: datetime | None = None
    rights: AtomTextConstruct | None = None
    source: AtomSource | None = None
    summary: AtomTextConstruct | None = None
    authors: list[AtomPersonConstruct] = field(default_factory=list)
    categories: list[AtomCategory] = field(default_factory=list)
    contributors: list[AtomPersonConstruct] = field(default_factory=list)
    links: list[AtomLink] = field(default_factory=list)


@dataclass(slots=True)
class AtomFeed(AtomCommonObject):
    id: str | None = None
    title: AtomTextConstruct | None = None
    updated_on: datetime | None = None
    generator: AtomGenerator | None = None
    icon: str | None = None
    logo: str | None = None
    rights: AtomTextConstruct | None = None
    subtitle: AtomTextConstruct | None = None
    authors: list[AtomPersonConstruct] = field(default_factory=list)
    categories: list[AtomCategory] = field(default_factory=list)
    contributors: list[AtomPersonConstruct] = field(default_factory=list)
    links: list[AtomLink] = field(default_factory=list)
    entries: list[AtomEntry] = field(default_factory=list)

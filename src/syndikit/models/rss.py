"""RSS object model shared by the 0.90 through 2.0 adapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar

from syndikit.models.base import Extensible


class SkipDay(Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class RssCloudProtocol(Enum):
    HTTP_POST = "http-post"
    SOAP = "soap"
    XML_RPC = "xml-rpc"


@dataclass(slots=True)
class RssCategory(Extensible):
    value: str | None = None
    domain: str | None = None


@dataclass(slots=True)
class RssCloud(Extensible):
    domain: str | None = None
    port: int | None = None
    path: str | None = None
    register_procedure: str | None = None
    protocol: RssCloudProtocol | None = None


@dataclass(slots=True)
class RssImage(Extensible):
    HEIGHT_MAXIMUM: ClassVar[int] = 400
    WIDTH_MAXIMUM: ClassVar[int] = 144
    HEIGHT_DEFAULT: ClassVar[int] = 31
    WIDTH_DEFAULT: ClassVar[int] = 88

    url: str | None = None
    title: str | None = None
    link: str | None = None
    description: str | None = None
    height: int | None = None
    width: int | None = None


@dataclass(slots=True)
class RssTextInput(Extensible):
    title: str | None = None
    description: str | None = None
    name: str | None = None
    link: str | None = None


@dataclass(slots=True)
class RssEnclosure(Extensible):
    url: str | None = None
    length: int | None = None
    content_type: str | None = None


@dataclass(slots=True)
class RssGuid(Extensible):
    value: str | None = None
    is_permalink: bool = True


@dataclass(slots=True)
class RssSource(Extensible):
    url: str | None = None
    title: str | None = None


@dataclass(slots=True)
class RssItem(Extensible):
    title: str | None = None
    link: str | None = None
    description: str | None = None
    author: str | None = None
    comments: str | None = None
    guid: RssGuid | None = None
    publication_date: datetime | None = None
    source: RssSource | None = None
    categories: list[RssCategory] = field(default_factory=list)
    enclosures: list[RssEnclosure] = field(default_factory=list)


@dataclass(slots=True)
class RssChannel(Extensible):
    title: str | None = None
    link: str | None = None
    description: str | None = None
    language: str | None = None
    copyright: str | None = None
    managing_editor: str | None = None
    web_master: str | None = None
    rating: str | None = None
    publication_date: datetime | None = None
    last_build_date: datetime | None = None
    docs: str | None = None
    generator: str | None = None
    time_to_live: int | None = None
    cloud: RssCloud | None = None
    image: RssImage | None = None
    text_input: RssTextInput | None = None
    categories: list[RssCategory] = field(default_factory=list)
    skip_days: list[SkipDay] = field(default_factory=list)
    skip_hours: list[int] = field(default_factory=list)
    items: list[RssItem] = field(default_factory=list)


@dataclass(slots=True)
class RssFeed(Extensible):
    version: tuple[int, ...] | None = None
    channel: RssChannel = field(default_factory=RssChannel)

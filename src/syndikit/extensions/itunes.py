"""iTunes podcast extension."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
import logging

from lxml import etree

from syndikit.coercion import as_text, as_uri, as_yes_no, enum_by_value, split_list
from syndikit.extensions.base import ExtensionIdentity, SyndicationExtension

logger = logging.getLogger(__name__)

ITUNES_NAMESPACE = "http://www.itunes.com/dtds/podcast-1.0.dtd"


class ExplicitMaterial(Enum):
    NO = "no"
    YES = "yes"
    CLEAN = "clean"


@dataclass(slots=True)
class ITunesCategory:
    text: str
    categories: list[ITunesCategory] = field(default_factory=list)


@dataclass(slots=True)
class ITunesOwner:
    name: str | None = None
    email: str | None = None


@dataclass(slots=True)
class ITunesContext:
    author: str | None = None
    is_blocked: bool | None = None
    categories: list[ITunesCategory] = field(default_factory=list)
    image: str | None = None
    duration: timedelta | None = None
    explicit: ExplicitMaterial | None = None
    keywords: list[str] = field(default_factory=list)
    new_feed_url: str | None = None
    owner: ITunesOwner | None = None
    subtitle: str | None = None
    summary: str | None = None


def parse_duration(raw: str | None) -> timedelta | None:
    """Parse ``HH:MM:SS``, ``MM:SS`` or a plain number of seconds."""

    value = as_text(raw)
    if value is None:
        return None
    parts = value.split(":")
    if len(parts) > 3:
        logger.debug("Ignoring malformed iTunes duration %r", value)
        return None
    try:
        numbers = [int(part) for part in parts]
    except ValueError:
        logger.debug("Ignoring malformed iTunes duration %r", value)
        return None
    if any(number < 0 for number in numbers):
        return None

    seconds = 0
    for number in numbers:
        seconds = seconds * 60 + number
    return timedelta(seconds=seconds)


def _format_duration(duration: timedelta) -> str:
    total = int(duration.total_seconds())
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


class ITunesExtension(SyndicationExtension):
    identity = ExtensionIdentity(
        prefix="itunes",
        namespace=ITUNES_NAMESPACE,
        version="1.0",
        documentation="https://help.apple.com/itc/podcasts_connect/#/itcb54353390",
        name="iTunes",
        description="Extends syndication feeds to describe podcast episodes and channels.",
    )
    context_type = ITunesContext

    def load(self, element: etree._Element) -> bool:
        context: ITunesContext = self.context
        was_loaded = False

        for name, attr in (("author", "author"), ("subtitle", "subtitle"), ("summary", "summary")):
            value = as_text(self._child_text(element, name))
            if value is not None:
                setattr(context, attr, value)
                was_loaded = True

        blocked = as_yes_no(self._child_text(element, "block"))
        if blocked is not None:
            context.is_blocked = blocked
            was_loaded = True

        explicit = enum_by_value(ExplicitMaterial, self._child_text(element, "explicit"))
        if explicit is not None:
            context.explicit = explicit
            was_loaded = True

        duration = parse_duration(self._child_text(element, "duration"))
        if duration is not None:
            context.duration = duration
            was_loaded = True

        keywords = split_list(self._child_text(element, "keywords"))
        if keywords:
            context.keywords = keywords
            was_loaded = True

        new_feed_url = as_uri(self._child_text(element, "new-feed-url"))
        if new_feed_url is not None:
            context.new_feed_url = new_feed_url
            was_loaded = True

        image = self._child(element, "image")
        if image is not None:
            href = as_uri(image.get("href"))
            if href is not None:
                context.image = href
                was_loaded = True

        owner = self._child(element, "owner")
        if owner is not None:
            loaded_owner = ITunesOwner(
                name=as_text(self._child_text(owner, "name")),
                email=as_text(self._child_text(owner, "email")),
            )
            if loaded_owner.name or loaded_owner.email:
                context.owner = loaded_owner
                was_loaded = True

        for category_element in self._children(element, "category"):
            category = self._load_category(category_element)
            if category is not None:
                context.categories.append(category)
                was_loaded = True

        return was_loaded

    def _load_category(self, element: etree._Element) -> ITunesCategory | None:
        text = as_text(element.get("text"))
        if text is None:
            return None
        category = ITunesCategory(text=text)
        for child in self._children(element, "category"):
            nested = self._load_category(child)
            if nested is not None:
                category.categories.append(nested)
        return category

    def write_to(self, parent: etree._Element) -> None:
        context: ITunesContext = self.context
        if context.author:
            self._append(parent, "author", context.author)
        if context.is_blocked is not None:
            self._append(parent, "block", "yes" if context.is_blocked else "no")
        for category in context.categories:
            self._write_category(parent, category)
        if context.image:
            self._append(parent, "image").set("href", context.image)
        if context.duration is not None:
            self._append(parent, "duration", _format_duration(context.duration))
        if context.explicit is not None:
            self._append(parent, "explicit", context.explicit.value)
        if context.keywords:
            self._append(parent, "keywords", ",".join(context.keywords))
        if context.new_feed_url:
            self._append(parent, "new-feed-url", context.new_feed_url)
        if context.owner is not None:
            owner = self._append(parent, "owner")
            if context.owner.name:
                self._append(owner, "name", context.owner.name)
            if context.owner.email:
                self._append(owner, "email", context.owner.email)
        if context.subtitle:
            self._append(parent, "subtitle", context.subtitle)
        if context.summary:
            self._append(parent, "summary", context.summary)

    def _write_category(self, parent: etree._Element, category: ITunesCategory) -> None:
        node = self._append(parent, "category")
        node.set("text", category.text)
        for nested in category.categories:
            self._write_category(node, nested)

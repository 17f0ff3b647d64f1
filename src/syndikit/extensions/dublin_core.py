"""Dublin Core Metadata Element Set, version 1.1."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime

from lxml import etree

from syndikit.coercion import as_text, parse_rfc3339
from syndikit.extensions.base import ExtensionIdentity, SyndicationExtension


@dataclass(slots=True)
class DublinCoreContext:
    contributor: str | None = None
    coverage: str | None = None
    creator: str | None = None
    date: datetime | None = None
    description: str | None = None
    format: str | None = None
    identifier: str | None = None
    language: str | None = None
    publisher: str | None = None
    relation: str | None = None
    rights: str | None = None
    source: str | None = None
    subject: str | None = None
    title: str | None = None
    type: str | None = None


_TEXT_ELEMENTS = tuple(item.name for item in fields(DublinCoreContext) if item.name != "date")


class DublinCoreExtension(SyndicationExtension):
    identity = ExtensionIdentity(
        prefix="dc",
        namespace="http://purl.org/dc/elements/1.1/",
        version="1.1",
        documentation="https://www.dublincore.org/specifications/dublin-core/dces/",
        name="Dublin Core Metadata Element Set",
        description="Fifteen generic properties for describing resources.",
    )
    context_type = DublinCoreContext

    def load(self, element: etree._Element) -> bool:
        context: DublinCoreContext = self.context
        was_loaded = False

        for name in _TEXT_ELEMENTS:
            value = as_text(self._child_text(element, name))
            if value is not None:
                setattr(context, name, value)
                was_loaded = True

        date = parse_rfc3339(self._child_text(element, "date"))
        if date is not None:
            context.date = date
            was_loaded = True

        return was_loaded

    def write_to(self, parent: etree._Element) -> None:
        context: DublinCoreContext = self.context
        for item in fields(DublinCoreContext):
            value = getattr(context, item.name)
            if value is None:
                continue
            self._append(parent, item.name, value.isoformat() if isinstance(value, datetime) else value)

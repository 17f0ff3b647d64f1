"""RSS 1.0 Site Summary modules: syndication update schedule and Slash."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from lxml import etree

from syndikit.coercion import as_int, as_text, enum_by_value, parse_rfc3339, split_list
from syndikit.extensions.base import ExtensionIdentity, SyndicationExtension


class UpdatePeriod(Enum):
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(slots=True)
class SiteSummaryUpdateContext:
    period: UpdatePeriod | None = None
    frequency: int | None = None
    base: datetime | None = None


class SiteSummaryUpdateExtension(SyndicationExtension):
    identity = ExtensionIdentity(
        prefix="sy",
        namespace="http://purl.org/rss/1.0/modules/syndication/",
        version="1.0",
        documentation="https://web.resource.org/rss/1.0/modules/syndication/",
        name="RDF Site Summary Syndication",
        description="How often a feed is updated.",
    )
    context_type = SiteSummaryUpdateContext

    def load(self, element: etree._Element) -> bool:
        context: SiteSummaryUpdateContext = self.context
        context.period = enum_by_value(UpdatePeriod, self._child_text(element, "updatePeriod"))

        frequency = as_int(self._child_text(element, "updateFrequency"))
        context.frequency = frequency if frequency is not None and frequency > 0 else None
        context.base = parse_rfc3339(self._child_text(element, "updateBase"))
        return any(value is not None for value in (context.period, context.frequency, context.base))

    def write_to(self, parent: etree._Element) -> None:
        context: SiteSummaryUpdateContext = self.context
        if context.period is not None:
            self._append(parent, "updatePeriod", context.period.value)
        if context.frequency is not None:
            self._append(parent, "updateFrequency", context.frequency)
        if context.base is not None:
            self._append(parent, "updateBase", context.base.isoformat())


@dataclass(slots=True)
class SlashContext:
    section: str | None = None
    department: str | None = None
    comments: int | None = None
    hit_parade: list[int] = field(default_factory=list)


class SlashExtension(SyndicationExtension):
    identity = ExtensionIdentity(
        prefix="slash",
        namespace="http://purl.org/rss/1.0/modules/slash/",
        version="1.0",
        documentation="https://web.resource.org/rss/1.0/modules/slash/",
        name="RDF Site Summary Slash",
        description="Slashdot-style section, department and comment counts.",
    )
    context_type = SlashContext

    def load(self, element: etree._Element) -> bool:
        context: SlashContext = self.context
        context.section = as_text(self._child_text(element, "section"))
        context.department = as_text(self._child_text(element, "department"))

        comments = as_int(self._child_text(element, "comments"))
        context.comments = comments if comments is not None and comments >= 0 else None

        for part in split_list(self._child_text(element, "hit_parade")):
            count = as_int(part)
            if count is not None:
                context.hit_parade.append(count)

        return bool(
            context.section is not None
            or context.department is not None
            or context.comments is not None
            or context.hit_parade
        )

    def write_to(self, parent: etree._Element) -> None:
        context: SlashContext = self.context
        if context.section:
            self._append(parent, "section", context.section)
        if context.department:
            self._append(parent, "department", context.department)
        if context.comments is not None:
            self._append(parent, "comments", context.comments)
        if context.hit_parade:
            self._append(parent, "hit_parade", ",".join(str(count) for count in context.hit_parade))

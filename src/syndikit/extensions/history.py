"""Feed paging and archiving extension (RFC 5005)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from lxml import etree

from syndikit.coercion import as_text, as_uri, enum_by_value
from syndikit.extensions.base import ExtensionIdentity, SyndicationExtension
from syndikit.navigation import child_elements, local_name, namespace_of

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"


class FeedHistoryRelation(Enum):
    CURRENT = "current"
    NEXT_ARCHIVE = "next-archive"
    PREVIOUS_ARCHIVE = "prev-archive"


@dataclass(slots=True)
class FeedHistoryLink:
    relation: FeedHistoryRelation
    href: str


@dataclass(slots=True)
class FeedHistoryContext:
    is_archive: bool = False
    is_complete: bool = False
    links: list[FeedHistoryLink] = field(default_factory=list)


class FeedHistoryExtension(SyndicationExtension):
    identity = ExtensionIdentity(
        prefix="fh",
        namespace="http://purl.org/syndication/history/1.0",
        version="1.0",
        documentation="https://www.rfc-editor.org/rfc/rfc5005",
        name="Feed Paging and Archiving",
        description="Marks complete and archived feeds and links between archive pages.",
    )
    context_type = FeedHistoryContext

    def load(self, element: etree._Element) -> bool:
        context: FeedHistoryContext = self.context
        was_loaded = False

        if self._child(element, "archive") is not None:
            context.is_archive = True
            was_loaded = True
        if self._child(element, "complete") is not None:
            context.is_complete = True
            was_loaded = True

        for child in child_elements(element):
            if namespace_of(child) != ATOM_NAMESPACE or local_name(child) != "link":
                continue
            relation = enum_by_value(FeedHistoryRelation, as_text(child.get("rel")))
            href = as_uri(child.get("href"))
            if relation is not None and href is not None:
                context.links.append(FeedHistoryLink(relation=relation, href=href))
                was_loaded = True

        return was_loaded

    def write_to(self, parent: etree._Element) -> None:
        context: FeedHistoryContext = self.context
        if context.is_archive:
            self._append(parent, "archive")
        if context.is_complete:
            self._append(parent, "complete")
        for link in context.links:
            node = etree.SubElement(parent, f"{{{ATOM_NAMESPACE}}}link")
            node.set("rel", link.relation.value)
            node.set("href", link.href)

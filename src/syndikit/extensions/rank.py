"""Atom feed ranking extension."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from lxml import etree

from syndikit.coercion import as_decimal, as_text, as_uri
from syndikit.extensions.base import ExtensionIdentity, SyndicationExtension


@dataclass(slots=True)
class FeedRankContext:
    scheme: str | None = None
    domain: str | None = None
    label: str | None = None
    value: Decimal | None = None


class FeedRankExtension(SyndicationExtension):
    identity = ExtensionIdentity(
        prefix="re",
        namespace="http://purl.org/atompub/rank/1.0",
        version="1.0",
        documentation="https://datatracker.ietf.org/doc/html/draft-snell-atompub-feed-index",
        name="Feed Rank",
        description="Ranking values attached to Atom feeds and entries.",
    )
    context_type = FeedRankContext

    def load(self, element: etree._Element) -> bool:
        context: FeedRankContext = self.context
        rank = self._child(element, "rank")
        if rank is None:
            return False

        context.scheme = as_uri(rank.get("scheme"))
        context.domain = as_uri(rank.get("domain"))
        context.label = as_text(rank.get("label"))
        context.value = as_decimal(rank.text)
        return any(value is not None for value in (context.scheme, context.domain, context.label, context.value))

    def write_to(self, parent: etree._Element) -> None:
        context: FeedRankContext = self.context
        node = self._append(parent, "rank", context.value)
        for name in ("scheme", "domain", "label"):
            value = getattr(context, name)
            if value:
                node.set(name, value)

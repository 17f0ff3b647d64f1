"""Comment and trackback discovery extensions."""

from __future__ import annotations

from dataclasses import dataclass, field

from lxml import etree

from syndikit.coercion import as_uri
from syndikit.extensions.base import ExtensionIdentity, SyndicationExtension

RDF_NAMESPACE = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"


@dataclass(slots=True)
class WellFormedWebContext:
    comment: str | None = None
    comments_feed: str | None = None


class WellFormedWebExtension(SyndicationExtension):
    identity = ExtensionIdentity(
        prefix="wfw",
        namespace="http://wellformedweb.org/CommentAPI/",
        version="1.0",
        documentation="http://wellformedweb.org/news/wfw_namespace_elements/",
        name="Well-Formed Web Comment API",
        description="Where to post comments and where to read them.",
    )
    context_type = WellFormedWebContext

    def load(self, element: etree._Element) -> bool:
        context: WellFormedWebContext = self.context
        context.comment = as_uri(self._child_text(element, "comment"))
        # Both spellings circulate in the wild.
        context.comments_feed = as_uri(
            self._child_text(element, "commentRss") or self._child_text(element, "commentRSS")
        )
        return context.comment is not None or context.comments_feed is not None

    def write_to(self, parent: etree._Element) -> None:
        if self.context.comment:
            self._append(parent, "comment", self.context.comment)
        if self.context.comments_feed:
            self._append(parent, "commentRss", self.context.comments_feed)


@dataclass(slots=True)
class TrackbackContext:
    ping: str | None = None
    about: list[str] = field(default_factory=list)


class TrackbackExtension(SyndicationExtension):
    identity = ExtensionIdentity(
        prefix="trackback",
        namespace="http://madskills.com/public/xml/rss/module/trackback/",
        version="1.2",
        documentation="http://madskills.com/public/xml/rss/module/trackback/",
        name="Trackback",
        description="Trackback ping endpoints and the resources an item refers to.",
    )
    context_type = TrackbackContext

    def load(self, element: etree._Element) -> bool:
        context: TrackbackContext = self.context
        ping = self._child(element, "ping")
        if ping is not None:
            context.ping = as_uri(ping.get(f"{{{RDF_NAMESPACE}}}resource") or ping.text)

        for about in self._children(element, "about"):
            target = as_uri(about.get(f"{{{RDF_NAMESPACE}}}resource") or about.text)
            if target is not None:
                context.about.append(target)

        return context.ping is not None or bool(context.about)

    def write_to(self, parent: etree._Element) -> None:
        if self.context.ping:
            self._append(parent, "ping", self.context.ping)
        for target in self.context.about:
            self._append(parent, "about", target)

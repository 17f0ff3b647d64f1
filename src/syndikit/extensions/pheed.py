"""Pheed photo extension."""

from __future__ import annotations

from dataclasses import dataclass

from lxml import etree

from syndikit.coercion import as_uri
from syndikit.extensions.base import ExtensionIdentity, SyndicationExtension


@dataclass(slots=True)
class PheedContext:
    thumbnail: str | None = None
    image_source: str | None = None


class PheedExtension(SyndicationExtension):
    identity = ExtensionIdentity(
        prefix="photo",
        namespace="http://www.pheed.com/pheed/",
        version="1.0",
        documentation="http://www.pheed.com/pheed/",
        name="Pheed",
        description="Photo and thumbnail locations for image feeds.",
    )
    context_type = PheedContext

    def load(self, element: etree._Element) -> bool:
        context: PheedContext = self.context
        context.thumbnail = as_uri(self._child_text(element, "thumbnail"))
        context.image_source = as_uri(self._child_text(element, "imgsrc"))
        return context.thumbnail is not None or context.image_source is not None

    def write_to(self, parent: etree._Element) -> None:
        if self.context.thumbnail:
            self._append(parent, "thumbnail", self.context.thumbnail)
        if self.context.image_source:
            self._append(parent, "imgsrc", self.context.image_source)

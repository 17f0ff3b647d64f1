"""Creative Commons licensing module for RSS."""

from __future__ import annotations

from dataclasses import dataclass, field

from lxml import etree

from syndikit.coercion import as_uri
from syndikit.extensions.base import ExtensionIdentity, SyndicationExtension


@dataclass(slots=True)
class CreativeCommonsContext:
    licenses: list[str] = field(default_factory=list)


class CreativeCommonsExtension(SyndicationExtension):
    identity = ExtensionIdentity(
        prefix="creativeCommons",
        namespace="http://backend.userland.com/creativeCommonsRssModule",
        version="1.0",
        documentation="http://backend.userland.com/creativeCommonsRssModule",
        name="Creative Commons",
        description="License URLs governing a channel or item.",
    )
    context_type = CreativeCommonsContext

    def load(self, element: etree._Element) -> bool:
        for license_element in self._children(element, "license"):
            url = as_uri(license_element.text)
            if url is not None:
                self.context.licenses.append(url)
        return bool(self.context.licenses)

    def write_to(self, parent: etree._Element) -> None:
        for url in self.context.licenses:
            self._append(parent, "license", url)

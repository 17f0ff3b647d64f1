"""Atom Publishing Protocol control extension (``app:control``, ``app:edited``)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from lxml import etree

from syndikit.coercion import as_yes_no, parse_rfc3339
from syndikit.extensions.base import ExtensionIdentity, SyndicationExtension

APP_NAMESPACE = "http://www.w3.org/2007/app"


@dataclass(slots=True)
class PublishingControlContext:
    is_draft: bool | None = None
    edited_on: datetime | None = None


class PublishingControlExtension(SyndicationExtension):
    identity = ExtensionIdentity(
        prefix="app",
        namespace=APP_NAMESPACE,
        version="1.0",
        documentation="https://www.rfc-editor.org/rfc/rfc5023",
        name="Atom Publishing Protocol Control",
        description="Publishing control data carried by Atom entries.",
    )
    context_type = PublishingControlContext

    def load(self, element: etree._Element) -> bool:
        context: PublishingControlContext = self.context
        was_loaded = False

        control = self._child(element, "control")
        if control is not None:
            draft = as_yes_no(self._child_text(control, "draft"))
            if draft is not None:
                context.is_draft = draft
                was_loaded = True

        edited = parse_rfc3339(self._child_text(element, "edited"))
        if edited is not None:
            context.edited_on = edited
            was_loaded = True

        return was_loaded

    def write_to(self, parent: etree._Element) -> None:
        context: PublishingControlContext = self.context
        if context.is_draft is not None:
            control = self._append(parent, "control")
            self._append(control, "draft", "yes" if context.is_draft else "no")
        if context.edited_on is not None:
            self._append(parent, "edited", context.edited_on.isoformat())

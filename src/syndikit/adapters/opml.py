"""OPML adapter; versions 1.0, 1.1 and 2.0 share one outline model."""

from __future__ import annotations

from lxml import etree

from syndikit.adapters.base import DialectAdapter, Field
from syndikit.coercion import as_bool, as_int, as_text, as_uri, parse_rfc822, split_list
from syndikit.detection import ContentFormat, parse_version
from syndikit.models.opml import OpmlDocument, OpmlHead, OpmlOutline

_HEAD_FIELDS = (
    Field("title", "title"),
    Field("dateCreated", "created_on", parse_rfc822),
    Field("dateModified", "modified_on", parse_rfc822),
    Field("docs", "docs", as_uri),
    Field("vertScrollState", "vertical_scroll_state", as_int),
)
_OWNER_FIELDS = (
    Field("ownerName", "name"),
    Field("ownerEmail", "email"),
    Field("ownerId", "id", as_uri),
)
_WINDOW_FIELDS = (
    Field("windowTop", "top", as_int),
    Field("windowLeft", "left", as_int),
    Field("windowBottom", "bottom", as_int),
    Field("windowRight", "right", as_int),
)


class OpmlAdapter(DialectAdapter):
    format = ContentFormat.OPML
    versions = ((1, 0), (1, 1), (2, 0))
    target_types = (OpmlDocument,)

    def _fill(self, document: OpmlDocument) -> bool:
        root = self._locate("opml")
        if root is None:
            return False
        document.version = parse_version(root.get("version"))

        head = self._select(root, "head")
        if head is not None:
            self._load_head(document.head, head)

        body = self._select(root, "body")
        if body is not None:
            self._fill_collection(document.outlines, self._select_all(body, "outline"), self._build_outline)

        self._fill_extensions(document, root)
        return True

    def _load_head(self, head: OpmlHead, element: etree._Element) -> None:
        self._fill_fields(head, element, _HEAD_FIELDS)
        self._fill_fields(head.owner, element, _OWNER_FIELDS)
        self._fill_fields(head.window, element, _WINDOW_FIELDS)

        for part in split_list(self._raw(element, "expansionState")):
            line = as_int(part)
            if line is not None:
                head.expansion_state.append(line)

        self._fill_extensions(head, element)

    def _build_outline(self, element: etree._Element) -> OpmlOutline | None:
        outline = OpmlOutline()
        was_loaded = False

        for name, raw in element.attrib.items():
            if name.startswith("{"):
                continue
            if self._load_attribute(outline, element, name, raw):
                was_loaded = True

        # Nested outlines are never subject to the retrieval limit.
        was_loaded |= self._fill_collection(
            outline.outlines, self._select_all(element, "outline"), self._build_outline, limited=False
        )

        self._fill_extensions(outline, element)
        return outline if was_loaded or outline.has_extensions else None

    def _load_attribute(self, outline: OpmlOutline, element: etree._Element, name: str, raw: str) -> bool:
        if not raw:
            return False

        key = name.lower()
        if key == "text":
            outline.text = raw
            return True
        if key == "type":
            outline.content_type = raw
            return True
        if key == "iscomment":
            flag = as_bool(raw)
            if flag is None:
                return False
            outline.is_comment = flag
            return True
        if key == "isbreakpoint":
            flag = as_bool(raw)
            if flag is None:
                return False
            outline.is_breakpoint = flag
            return True
        if key == "created":
            created = parse_rfc822(raw)
            if created is None:
                return False
            outline.created_on = created
            return True
        if key == "category":
            outline.categories.extend(split_list(raw))
            return True

        if name in outline.attributes:
            return False
        if key in {"url", "htmlurl", "xmlurl"}:
            value = as_uri(raw)
            if value is not None:
                value = self._resolve(element, value)
        else:
            value = as_text(raw)
        if value is None:
            return False
        outline.attributes[name] = value
        return True

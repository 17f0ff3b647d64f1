"""Format sniffing from the root element of a syndication document."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from io import BytesIO
import logging
from pathlib import Path
from typing import BinaryIO, Callable, Mapping

from lxml import etree

from syndikit import namespaces as ns
from syndikit.coercion import as_text
from syndikit.errors import DocumentLoadError
from syndikit.navigation import document_root

logger = logging.getLogger(__name__)

Version = tuple[int, ...]


class ContentFormat(Enum):
    NONE = "none"
    ATOM = "atom"
    RSS = "rss"
    OPML = "opml"
    BLOGML = "blogml"
    APML = "apml"
    RSD = "rsd"
    ATOM_SERVICE_DOCUMENT = "atom-service"
    ATOM_CATEGORY_DOCUMENT = "atom-categories"


@dataclass(frozen=True, slots=True)
class ResourceMetadata:
    """What the sniffer learned from the root element."""

    format: ContentFormat = ContentFormat.NONE
    version: Version | None = None
    namespaces: Mapping[str, str] = field(default_factory=dict)
    root_name: str | None = None

    @property
    def recognized(self) -> bool:
        return self.format is not ContentFormat.NONE


def parse_version(raw: str | None) -> Version | None:
    """Parse ``major.minor[.build[.revision]]``; anything else is None."""

    value = as_text(raw)
    if value is None:
        return None
    parts = value.split(".")
    if not 2 <= len(parts) <= 4 or not all(part.isdigit() for part in parts):
        return None
    return tuple(int(part) for part in parts)


def format_version(version: Version | None) -> str | None:
    if version is None:
        return None
    return ".".join(str(part) for part in version)


@dataclass(frozen=True, slots=True)
class _RootInfo:
    local_name: str
    namespace: str
    scope: Mapping[str, str]
    version_attribute: str | None

    def declares(self, namespace: str) -> bool:
        return namespace in self.scope.values()


_RootMatcher = Callable[[_RootInfo, "Version | None"], "tuple[ContentFormat, Version] | None"]


def _match_apml(root: _RootInfo, version: Version | None) -> tuple[ContentFormat, Version] | None:
    if root.local_name == "APML" and root.declares(ns.APML_06):
        return ContentFormat.APML, version or (0, 6)
    return None


def _match_atom(root: _RootInfo, version: Version | None) -> tuple[ContentFormat, Version] | None:
    if root.local_name not in {"feed", "entry"}:
        return None
    if root.declares(ns.ATOM_10):
        return ContentFormat.ATOM, version or (1, 0)
    if root.declares(ns.ATOM_03):
        return ContentFormat.ATOM, version or (0, 3)
    return None


def _match_categories(root: _RootInfo, version: Version | None) -> tuple[ContentFormat, Version] | None:
    if root.local_name == "categories" and root.declares(ns.ATOM_PUBLISHING):
        return ContentFormat.ATOM_CATEGORY_DOCUMENT, version or (1, 0)
    return None


def _match_service(root: _RootInfo, version: Version | None) -> tuple[ContentFormat, Version] | None:
    if root.local_name == "service" and root.declares(ns.ATOM_PUBLISHING):
        return ContentFormat.ATOM_SERVICE_DOCUMENT, version or (1, 0)
    return None


def _match_blogml(root: _RootInfo, version: Version | None) -> tuple[ContentFormat, Version] | None:
    if root.local_name == "blog" and root.declares(ns.BLOGML_20):
        return ContentFormat.BLOGML, version or (2, 0)
    return None


def _match_opml(root: _RootInfo, version: Version | None) -> tuple[ContentFormat, Version] | None:
    if root.local_name == "opml" and not root.namespace:
        return ContentFormat.OPML, version or (2, 0)
    return None


def _match_rsd(root: _RootInfo, version: Version | None) -> tuple[ContentFormat, Version] | None:
    if root.local_name.lower() != "rsd":
        return None
    if root.declares(ns.RSD):
        return ContentFormat.RSD, version or (1, 0)
    # Some blog engines emit RSD without its namespace; trust an explicit version.
    if version is not None:
        return ContentFormat.RSD, version
    return None


def _match_rss(root: _RootInfo, version: Version | None) -> tuple[ContentFormat, Version] | None:
    if root.local_name == "rss" and not root.namespace:
        return ContentFormat.RSS, version or (2, 0)
    if root.local_name == "RDF" and root.namespace == ns.RDF:
        if root.declares(ns.RSS_10):
            return ContentFormat.RSS, (1, 0)
        if root.declares(ns.RSS_090):
            return ContentFormat.RSS, (0, 9)
    return None


_MATCHERS: tuple[_RootMatcher, ...] = (
    _match_apml,
    _match_atom,
    _match_categories,
    _match_service,
    _match_blogml,
    _match_opml,
    _match_rsd,
    _match_rss,
)


def _classify(root: _RootInfo) -> ResourceMetadata:
    version = parse_version(root.version_attribute)
    for matcher in _MATCHERS:
        result = matcher(root, version)
        if result is not None:
            detected_format, detected_version = result
            return ResourceMetadata(
                format=detected_format,
                version=detected_version,
                namespaces=dict(root.scope),
                root_name=root.local_name,
            )

    logger.debug("Unrecognized root element %r (namespace=%r)", root.local_name, root.namespace)
    return ResourceMetadata(namespaces=dict(root.scope), root_name=root.local_name)


def _root_info(element: etree._Element) -> _RootInfo:
    qname = etree.QName(element)
    scope = {prefix or "": uri for prefix, uri in element.nsmap.items()}
    return _RootInfo(
        local_name=qname.localname,
        namespace=qname.namespace or "",
        scope=scope,
        version_attribute=element.get("version"),
    )


def detect(document: etree._ElementTree | etree._Element) -> ResourceMetadata:
    """Return the format and version of an already parsed document."""

    root = document_root(document)
    if root is None:
        return ResourceMetadata()
    return _classify(_root_info(root))


def detect_stream(source: bytes | Path | BinaryIO) -> ResourceMetadata:
    """Sniff the format without parsing past the root start tag."""

    if isinstance(source, Path):
        with source.open("rb") as handle:
            return _detect_from_handle(handle, str(source))
    if isinstance(source, (bytes, bytearray)):
        return _detect_from_handle(BytesIO(bytes(source)), None)
    return _detect_from_handle(source, None)


def _detect_from_handle(handle: BinaryIO, label: str | None) -> ResourceMetadata:
    events = etree.iterparse(
        handle,
        events=("start",),
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        huge_tree=False,
    )
    try:
        for _event, element in events:
            return _classify(_root_info(element))
    except etree.XMLSyntaxError as exc:
        raise DocumentLoadError(f"Payload is not well-formed XML: {exc}", label) from exc
    return ResourceMetadata()

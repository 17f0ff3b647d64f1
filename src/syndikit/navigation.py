"""Read-only helpers over the lxml tree handed to the adapters."""

from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import Iterator, Mapping

from charset_normalizer import from_bytes
from lxml import etree

from syndikit.errors import DocumentLoadError

logger = logging.getLogger(__name__)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


def codec_name(encoding: str) -> str:
    """Map a Python codec alias (``latin-1``, ``utf_8``) to the canonical name libxml2 accepts."""

    return codecs.lookup(encoding).name


def build_parser(encoding: str | None = None) -> etree.XMLParser:
    """Return the hardened parser used for every syndication payload."""

    return etree.XMLParser(
        encoding=codec_name(encoding) if encoding else None,
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        huge_tree=False,
    )


def _read_source(source: bytes | str | Path) -> tuple[bytes, str | None, str | None]:
    if isinstance(source, Path):
        return source.read_bytes(), None, str(source)
    if isinstance(source, str):
        # Python strings are already decoded; re-encode and pin the parser to UTF-8.
        return source.encode("utf-8"), "utf-8", None
    if isinstance(source, (bytes, bytearray)):
        return bytes(source), None, None
    raise TypeError(f"Unsupported document source: {type(source).__name__}")


def _detect_encoding(raw: bytes) -> str | None:
    best = from_bytes(raw).best()
    if best and best.encoding:
        return best.encoding
    return None


def load_document(source: bytes | str | Path, *, encoding: str | None = None) -> etree._ElementTree:
    """Parse raw XML into a navigable tree.

    Bytes whose declared (or absent) encoding does not decode are retried
    once with the encoding charset-normalizer detects.
    """

    raw, forced, label = _read_source(source)
    encoding = forced or encoding

    try:
        root = etree.fromstring(raw, parser=build_parser(encoding))
    except LookupError as exc:
        raise DocumentLoadError(f"Unsupported character encoding {encoding!r}: {exc}", label) from exc
    except etree.XMLSyntaxError as exc:
        if encoding is not None:
            raise DocumentLoadError(f"Payload is not well-formed XML: {exc}", label) from exc

        detected = _detect_encoding(raw)
        if detected is None:
            raise DocumentLoadError(f"Payload is not well-formed XML: {exc}", label) from exc

        logger.debug("Retrying XML parse with detected encoding %s", detected)
        try:
            root = etree.fromstring(raw, parser=build_parser(detected))
        except (etree.XMLSyntaxError, LookupError) as retry_exc:
            raise DocumentLoadError(f"Payload is not well-formed XML: {retry_exc}", label) from retry_exc

    if root is None:
        raise DocumentLoadError("Payload holds no root element", label)
    return root.getroottree()


def document_root(document: etree._ElementTree | etree._Element) -> etree._Element:
    if isinstance(document, etree._ElementTree):
        return document.getroot()
    return document.getroottree().getroot()


def is_element(node: object) -> bool:
    """Return True for real elements (not comments or processing instructions)."""

    return isinstance(node, etree._Element) and isinstance(node.tag, str)


def select_all(
    element: etree._Element, path: str, namespaces: Mapping[str, str] | None = None
) -> list[etree._Element]:
    return [node for node in element.xpath(path, namespaces=dict(namespaces or {})) if is_element(node)]


def select_one(
    element: etree._Element, path: str, namespaces: Mapping[str, str] | None = None
) -> etree._Element | None:
    nodes = select_all(element, path, namespaces)
    return nodes[0] if nodes else None


def select_value(
    element: etree._Element, path: str, namespaces: Mapping[str, str] | None = None
) -> str | None:
    """Return the string value of the first node (element or attribute) at ``path``."""

    result = element.xpath(path, namespaces=dict(namespaces or {}))
    if not isinstance(result, list):
        return str(result) if result is not None else None
    for node in result:
        if isinstance(node, str):
            return str(node)
        if is_element(node):
            return string_value(node)
    return None


def string_value(element: etree._Element) -> str:
    return "".join(element.itertext())


def local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def namespace_of(element: etree._Element) -> str:
    return etree.QName(element).namespace or ""


def child_elements(element: etree._Element) -> Iterator[etree._Element]:
    for child in element:
        if is_element(child):
            yield child


def attribute_namespaces(element: etree._Element) -> Iterator[str]:
    """Yield the namespace URI of each qualified attribute, in attribute order."""

    for name in element.attrib:
        namespace = etree.QName(name).namespace
        if namespace:
            yield namespace


def namespaces_in_scope(element: etree._Element) -> dict[str, str]:
    """Return the prefix → URI declarations visible at ``element``.

    The default namespace, if any, is reported under the empty prefix.
    """

    return {prefix or "": uri for prefix, uri in element.nsmap.items()}


def xml_base(element: etree._Element) -> str | None:
    return element.get(f"{{{XML_NAMESPACE}}}base")


def xml_lang(element: etree._Element) -> str | None:
    return element.get(f"{{{XML_NAMESPACE}}}lang")

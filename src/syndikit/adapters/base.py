"""Shared adapter contract and table-driven fill engine for dialect adapters."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, ClassVar, Iterable, Mapping, Protocol, TypeVar, runtime_checkable

from lxml import etree

from syndikit.coercion import as_text, as_uri, resolve_uri
from syndikit.config import LoadSettings
from syndikit.detection import ContentFormat, Version
from syndikit.extensions import ExtensionAdapter, ExtensionRegistry, build_default_registry
from syndikit.navigation import document_root, select_all, select_one, select_value, xml_lang

logger = logging.getLogger(__name__)

T = TypeVar("T")


@runtime_checkable
class ResourceAdapter(Protocol):
    """Protocol that every dialect adapter must implement."""

    def fill(self, target: Any) -> bool:
        """Mutate ``target`` in place; return False when the document has no matching root."""


@dataclass(frozen=True, slots=True)
class Field:
    """One scalar mapping: XPath (element or ``@attribute``) → attribute via coercion."""

    path: str
    attr: str
    coerce: Callable[[str | None], Any] = as_text


class DialectAdapter:
    """Base for the per-version adapters.

    Subclasses declare the dialect (``format``/``versions``), the prefixes used
    in their XPath tables and which namespaces count as native when scanning
    for extensions.
    """

    format: ClassVar[ContentFormat] = ContentFormat.NONE
    versions: ClassVar[tuple[Version, ...]] = ()
    namespaces: ClassVar[Mapping[str, str]] = {}
    native_namespaces: ClassVar[frozenset[str]] = frozenset()
    target_types: ClassVar[tuple[type, ...]] = ()

    def __init__(
        self,
        document: etree._ElementTree | etree._Element,
        settings: LoadSettings,
        registry: ExtensionRegistry | None = None,
    ) -> None:
        if document is None:
            raise ValueError("Navigable document is required")
        if settings is None:
            raise ValueError("Load settings are required")

        self._document = document
        self._root = document_root(document)
        self._settings = settings
        self._registry = registry if registry is not None else build_default_registry()
        self._extension_adapter = ExtensionAdapter(self._registry, settings)

    @property
    def settings(self) -> LoadSettings:
        return self._settings

    @property
    def registry(self) -> ExtensionRegistry:
        return self._registry

    def fill(self, target: Any) -> bool:
        """Populate ``target`` from the document.

        Returns False, leaving ``target`` untouched, when the dialect root is missing.
        """

        if target is None:
            raise ValueError("Fill target cannot be None")
        if not isinstance(target, self.target_types):
            expected = ", ".join(kind.__name__ for kind in self.target_types)
            raise TypeError(f"{type(self).__name__} fills {expected}, not {type(target).__name__}")
        return self._fill(target)

    def _fill(self, target: Any) -> bool:
        raise NotImplementedError

    def _locate(self, path: str) -> etree._Element | None:
        """Select the dialect root by an absolute path such as ``atom:feed``."""

        if self._root is None:
            return None
        found = select_one(self._root, f"/{path}", self.namespaces)
        if found is None:
            logger.debug("%s found no %s element; leaving target untouched", type(self).__name__, path)
        return found

    def _select(self, element: etree._Element, path: str) -> etree._Element | None:
        return select_one(element, path, self.namespaces)

    def _select_all(self, element: etree._Element, path: str) -> list[etree._Element]:
        return select_all(element, path, self.namespaces)

    def _raw(self, element: etree._Element, path: str) -> str | None:
        return select_value(element, path, self.namespaces)

    def _value(self, element: etree._Element, path: str, coerce: Callable[[str | None], T] = as_text) -> T | None:
        value = coerce(self._raw(element, path))
        if value is not None and coerce is as_uri:
            value = self._resolve(element, value)
        return value

    def _resolve(self, element: etree._Element, uri: str) -> str:
        if not self._settings.resolve_relative_uris:
            return uri
        return resolve_uri(uri, element.base)

    def _fill_fields(self, target: Any, element: etree._Element, fields: Iterable[Field]) -> bool:
        """Apply each field mapping; unset or malformed values leave defaults."""

        was_loaded = False
        for field in fields:
            value = self._value(element, field.path, field.coerce)
            if value is not None:
                setattr(target, field.attr, value)
                was_loaded = True
        return was_loaded

    def _fill_collection(
        self,
        collection: list[T],
        elements: Iterable[etree._Element],
        build: Callable[[etree._Element], T | None],
        *,
        limited: bool = True,
    ) -> bool:
        """Append one built item per element, honouring the retrieval limit.

        The limit is checked before each item is built. A builder returning
        None skips the element, and skipped elements do not count.
        """

        was_loaded = False
        for element in elements:
            if limited and self._settings.limit_reached(len(collection)):
                break
            item = build(element)
            if item is not None:
                collection.append(item)
                was_loaded = True
        return was_loaded

    def _fill_extensions(self, target: Any, element: etree._Element) -> None:
        self._extension_adapter.fill(target, element, self.native_namespaces)

    def _fill_language(self, target: Any, element: etree._Element, attr: str = "language") -> None:
        language = as_text(xml_lang(element))
        if language is not None:
            setattr(target, attr, language)

"""Shared contract for namespace-based syndication extensions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Protocol, runtime_checkable

from lxml import etree

from syndikit.navigation import attribute_namespaces, child_elements, local_name, namespace_of, string_value


@dataclass(frozen=True, slots=True)
class ExtensionIdentity:
    """Identity metadata carried by every extension prototype."""

    prefix: str
    namespace: str
    version: str
    documentation: str
    name: str
    description: str


@runtime_checkable
class ExtensionFactory(Protocol):
    """What the registry needs from a prototype."""

    def matches(self, namespace: str) -> bool:
        """Return True when this prototype understands ``namespace``."""

    def create(self) -> "SyndicationExtension":
        """Return a fresh, empty extension instance."""


class SyndicationExtension(ABC):
    """Base class for extensions attached to value-object nodes.

    Each concrete extension keeps its own fields on ``context`` so they never
    collide with the identity attributes defined here.
    """

    identity: ClassVar[ExtensionIdentity]
    context_type: ClassVar[type]

    def __init__(self) -> None:
        self.context: Any = self.context_type()

    @property
    def prefix(self) -> str:
        return self.identity.prefix

    @property
    def namespace(self) -> str:
        return self.identity.namespace

    @property
    def name(self) -> str:
        return self.identity.name

    def matches(self, namespace: str) -> bool:
        return namespace == self.identity.namespace

    def create(self) -> "SyndicationExtension":
        return type(self)()

    def exists_in_source(self, element: etree._Element) -> bool:
        """Return True when ``element`` has children or attributes in this namespace."""

        if any(namespace == self.namespace for namespace in attribute_namespaces(element)):
            return True
        return any(namespace_of(child) == self.namespace for child in child_elements(element))

    @abstractmethod
    def load(self, element: etree._Element) -> bool:
        """Populate ``context`` from ``element``; return True if anything was recognized."""

    @abstractmethod
    def write_to(self, parent: etree._Element) -> None:
        """Append this extension's elements under ``parent``."""

    def _children(self, element: etree._Element, name: str | None = None) -> list[etree._Element]:
        return [
            child
            for child in child_elements(element)
            if namespace_of(child) == self.namespace and (name is None or local_name(child) == name)
        ]

    def _child(self, element: etree._Element, name: str) -> etree._Element | None:
        matches = self._children(element, name)
        return matches[0] if matches else None

    def _child_text(self, element: etree._Element, name: str) -> str | None:
        child = self._child(element, name)
        return string_value(child) if child is not None else None

    def _attribute(self, element: etree._Element, name: str) -> str | None:
        return element.get(self._qualified(name))

    def _qualified(self, name: str) -> str:
        return f"{{{self.namespace}}}{name}"

    def _append(self, parent: etree._Element, name: str, text: object | None = None) -> etree._Element:
        child = etree.SubElement(parent, self._qualified(name), nsmap={self.prefix: self.namespace})
        if text is not None:
            child.text = str(text)
        return child

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SyndicationExtension):
            return NotImplemented
        return type(self) is type(other) and self.context == other.context

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(context={self.context!r})"

"""Discover and attach extensions for the foreign namespaces on an element."""

from __future__ import annotations

import logging
from typing import Iterable

from lxml import etree

from syndikit.config import LoadSettings
from syndikit.errors import ExtensionLoadError
from syndikit.extensions.base import SyndicationExtension
from syndikit.extensions.registry import ExtensionRegistry
from syndikit.navigation import XML_NAMESPACE, attribute_namespaces, child_elements, namespace_of

logger = logging.getLogger(__name__)


def foreign_namespaces(element: etree._Element, native_namespaces: Iterable[str] = ()) -> list[str]:
    """Return distinct non-native namespaces used by the attributes and children of ``element``."""

    excluded = {"", XML_NAMESPACE, *native_namespaces}
    seen: list[str] = []
    for namespace in attribute_namespaces(element):
        if namespace not in excluded and namespace not in seen:
            seen.append(namespace)
    for child in child_elements(element):
        namespace = namespace_of(child)
        if namespace not in excluded and namespace not in seen:
            seen.append(namespace)
    return seen


class ExtensionAdapter:
    """Fill the extension collection of one value-object node."""

    def __init__(self, registry: ExtensionRegistry, settings: LoadSettings) -> None:
        if registry is None:
            raise ValueError("Extension registry is required")
        if settings is None:
            raise ValueError("Load settings are required")
        self._registry = registry
        self._settings = settings

    def fill(
        self,
        target: object,
        element: etree._Element,
        native_namespaces: Iterable[str] = (),
    ) -> list[SyndicationExtension]:
        """Attach one loaded extension per matching registered type; return those attached.

        An extension whose ``load`` raises aborts the fill with
        :class:`ExtensionLoadError`.
        """

        if not hasattr(target, "add_extension"):
            raise TypeError(f"{type(target).__name__} cannot hold extensions")
        if element is None or not self._settings.detect_extensions:
            return []

        attached: list[SyndicationExtension] = []
        for namespace in foreign_namespaces(element, native_namespaces):
            prototypes = self._registry.lookup(namespace)
            if not prototypes:
                logger.debug("No extension registered for namespace %s", namespace)
                continue

            for prototype in prototypes:
                extension = prototype.create()
                try:
                    loaded = extension.load(element)
                except Exception as exc:
                    raise ExtensionLoadError(namespace, getattr(extension, "name", type(extension).__name__)) from exc

                if loaded and target.add_extension(extension):
                    attached.append(extension)
        return attached

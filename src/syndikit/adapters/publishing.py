"""Atom Publishing Protocol 1.0 service and category document adapters."""

from __future__ import annotations

from lxml import etree

from syndikit import namespaces as ns
from syndikit.adapters.atom import Atom10Adapter
from syndikit.coercion import as_text, as_uri, as_yes_no
from syndikit.detection import ContentFormat
from syndikit.models.atom import AtomCategory
from syndikit.models.publishing import (
    AtomCategoryDocument,
    AtomMemberResources,
    AtomServiceDocument,
    AtomWorkspace,
)
from syndikit.navigation import string_value


class _PublishingAdapter(Atom10Adapter):
    """Reuses the Atom 1.0 text and category builders for ``app:`` documents."""

    namespaces = {"app": ns.ATOM_PUBLISHING, "atom": ns.ATOM_10, "xhtml": ns.XHTML}
    native_namespaces = frozenset({ns.ATOM_PUBLISHING, ns.ATOM_10})

    def _load_category_document(self, document: AtomCategoryDocument, element: etree._Element, *, limited: bool) -> bool:
        loaded = self._load_common(document, element)

        fixed = as_yes_no(element.get("fixed"))
        if fixed is not None:
            document.is_fixed = fixed
            loaded = True
        scheme = as_uri(element.get("scheme"))
        if scheme is not None:
            document.scheme = self._resolve(element, scheme)
            loaded = True
        href = as_uri(element.get("href"))
        if href is not None:
            document.href = self._resolve(element, href)
            loaded = True

        loaded |= self._fill_collection(
            document.categories,
            self._select_all(element, "atom:category"),
            lambda child: self._build_simple(AtomCategory(), child, self.CATEGORY_FIELDS),
            limited=limited,
        )
        self._fill_extensions(document, element)
        return loaded or document.has_extensions

    def _build_category_document(self, element: etree._Element) -> AtomCategoryDocument | None:
        document = AtomCategoryDocument()
        return document if self._load_category_document(document, element, limited=False) else None


class AtomServiceDocumentAdapter(_PublishingAdapter):
    format = ContentFormat.ATOM_SERVICE_DOCUMENT
    versions = ((1, 0),)
    target_types = (AtomServiceDocument,)

    def _fill(self, document: AtomServiceDocument) -> bool:
        root = self._locate("app:service")
        if root is None:
            return False
        self._load_common(document, root)
        self._fill_collection(document.workspaces, self._select_all(root, "app:workspace"), self._build_workspace)
        self._fill_extensions(document, root)
        return True

    def _build_workspace(self, element: etree._Element) -> AtomWorkspace | None:
        workspace = AtomWorkspace()
        loaded = self._load_common(workspace, element)
        loaded |= self._load_text_constructs(workspace, element, {"atom:title": "title"})
        loaded |= self._fill_collection(
            workspace.collections,
            self._select_all(element, "app:collection"),
            self._build_collection,
            limited=False,
        )
        self._fill_extensions(workspace, element)
        return workspace if loaded or workspace.has_extensions else None

    def _build_collection(self, element: etree._Element) -> AtomMemberResources | None:
        collection = AtomMemberResources()
        loaded = self._load_common(collection, element)

        href = as_uri(element.get("href"))
        if href is not None:
            collection.href = self._resolve(element, href)
            loaded = True
        loaded |= self._load_text_constructs(collection, element, {"atom:title": "title"})

        for accept in self._select_all(element, "app:accept"):
            # An empty app:accept means the collection accepts no member resources.
            value = as_text(string_value(accept))
            if value is not None:
                collection.accepts.append(value)
                loaded = True

        loaded |= self._fill_collection(
            collection.categories,
            self._select_all(element, "app:categories"),
            self._build_category_document,
            limited=False,
        )
        self._fill_extensions(collection, element)
        return collection if loaded or collection.has_extensions else None


class AtomCategoryDocumentAdapter(_PublishingAdapter):
    format = ContentFormat.ATOM_CATEGORY_DOCUMENT
    versions = ((1, 0),)
    target_types = (AtomCategoryDocument,)

    def _fill(self, document: AtomCategoryDocument) -> bool:
        root = self._locate("app:categories")
        if root is None:
            return False
        self._load_category_document(document, root, limited=True)
        return True

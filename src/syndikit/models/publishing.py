"""Atom Publishing Protocol 1.0 service and category documents."""

from __future__ import annotations

from dataclasses import dataclass, field

from syndikit.models.atom import AtomCategory, AtomCommonObject, AtomTextConstruct


@dataclass(slots=True)
class AtomCategoryDocument(AtomCommonObject):
    """A standalone ``app:categories`` document, or one inlined in a collection."""

    is_fixed: bool = False
    scheme: str | None = None
    href: str | None = None
    categories: list[AtomCategory] = field(default_factory=list)


@dataclass(slots=True)
class AtomMemberResources(AtomCommonObject):
    href: str | None = None
    title: AtomTextConstruct | None = None
    accepts: list[str] = field(default_factory=list)
    categories: list[AtomCategoryDocument] = field(default_factory=list)


@dataclass(slots=True)
class AtomWorkspace(AtomCommonObject):
    title: AtomTextConstruct | None = None
    collections: list[AtomMemberResources] = field(default_factory=list)


@dataclass(slots=True)
class AtomServiceDocument(AtomCommonObject):
    workspaces: list[AtomWorkspace] = field(default_factory=list)

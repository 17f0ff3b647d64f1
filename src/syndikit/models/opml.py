"""OPML 1.0/1.1/2.0 outline documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from syndikit.models.base import Extensible


@dataclass(slots=True)
class OpmlOwner:
    name: str | None = None
    email: str | None = None
    id: str | None = None


@dataclass(slots=True)
class OpmlWindow:
    top: int | None = None
    left: int | None = None
    bottom: int | None = None
    right: int | None = None


@dataclass(slots=True)
class OpmlHead(Extensible):
    title: str | None = None
    created_on: datetime | None = None
    modified_on: datetime | None = None
    docs: str | None = None
    owner: OpmlOwner = field(default_factory=OpmlOwner)
    window: OpmlWindow = field(default_factory=OpmlWindow)
    expansion_state: list[int] = field(default_factory=list)
    vertical_scroll_state: int | None = None


@dataclass(slots=True)
class OpmlOutline(Extensible):
    """One ``outline`` element; unrecognized attributes land in ``attributes``."""

    text: str | None = None
    content_type: str | None = None
    is_comment: bool = False
    is_breakpoint: bool = False
    created_on: datetime | None = None
    categories: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    outlines: list[OpmlOutline] = field(default_factory=list)


@dataclass(slots=True)
class OpmlDocument(Extensible):
    version: tuple[int, ...] | None = None
    head: OpmlHead = field(default_factory=OpmlHead)
    outlines: list[OpmlOutline] = field(default_factory=list)

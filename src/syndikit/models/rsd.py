"""Really Simple Discovery documents."""

from __future__ import annotations

from dataclasses import dataclass, field

from syndikit.models.base import Extensible


@dataclass(slots=True)
class RsdApplicationInterface(Extensible):
    name: str | None = None
    is_preferred: bool = False
    link: str | None = None
    blog_id: str | None = None
    documentation: str | None = None
    notes: str | None = None
    settings: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class RsdDocument(Extensible):
    version: tuple[int, ...] | None = None
    engine_name: str | None = None
    engine_link: str | None = None
    homepage: str | None = None
    interfaces: list[RsdApplicationInterface] = field(default_factory=list)

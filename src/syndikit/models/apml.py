"""Attention Profiling Markup Language 0.6."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from syndikit.models.base import Extensible


@dataclass(slots=True)
class ApmlHead(Extensible):
    title: str | None = None
    generator: str | None = None
    email_address: str | None = None
    created_on: datetime | None = None


@dataclass(slots=True)
class ApmlAuthor(Extensible):
    key: str | None = None
    value: Decimal | None = None
    from_: str | None = None
    updated_on: datetime | None = None


@dataclass(slots=True)
class ApmlConcept(Extensible):
    key: str | None = None
    value: Decimal | None = None
    from_: str | None = None
    updated_on: datetime | None = None


@dataclass(slots=True)
class ApmlSource(Extensible):
    key: str | None = None
    name: str | None = None
    value: Decimal | None = None
    mime_type: str | None = None
    from_: str | None = None
    updated_on: datetime | None = None
    authors: list[ApmlAuthor] = field(default_factory=list)


@dataclass(slots=True)
class ApmlProfile(Extensible):
    name: str | None = None
    implicit_concepts: list[ApmlConcept] = field(default_factory=list)
    implicit_sources: list[ApmlSource] = field(default_factory=list)
    explicit_concepts: list[ApmlConcept] = field(default_factory=list)
    explicit_sources: list[ApmlSource] = field(default_factory=list)


@dataclass(slots=True)
class ApmlApplication(Extensible):
    """An application-specific block kept as raw XML."""

    name: str | None = None
    data: str | None = None


@dataclass(slots=True)
class ApmlDocument(Extensible):
    version: tuple[int, ...] | None = None
    head: ApmlHead = field(default_factory=ApmlHead)
    default_profile_name: str | None = None
    profiles: list[ApmlProfile] = field(default_factory=list)
    applications: list[ApmlApplication] = field(default_factory=list)

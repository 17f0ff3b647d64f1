"""Dialect adapter implementations and contracts."""

from __future__ import annotations

from syndikit.detection import ContentFormat, Version

from .apml import Apml06Adapter
from .atom import Atom03Adapter, Atom10Adapter
from .base import DialectAdapter, Field, ResourceAdapter
from .blogml import BlogML20Adapter
from .opml import OpmlAdapter
from .publishing import AtomCategoryDocumentAdapter, AtomServiceDocumentAdapter
from .rsd import Rsd06Adapter, Rsd10Adapter
from .rss import Rss090Adapter, Rss091Adapter, Rss092Adapter, Rss10Adapter, Rss20Adapter

_DEFAULT_ADAPTERS: tuple[type[DialectAdapter], ...] = (
    Atom10Adapter,
    Atom03Adapter,
    Rss20Adapter,
    Rss10Adapter,
    Rss092Adapter,
    Rss091Adapter,
    Rss090Adapter,
    OpmlAdapter,
    Apml06Adapter,
    BlogML20Adapter,
    Rsd10Adapter,
    Rsd06Adapter,
    AtomServiceDocumentAdapter,
    AtomCategoryDocumentAdapter,
)


def build_default_adapters() -> dict[tuple[ContentFormat, Version], type[DialectAdapter]]:
    """Return the default (format, version) -> adapter class map."""
    adapters: dict[tuple[ContentFormat, Version], type[DialectAdapter]] = {}
    for adapter_type in _DEFAULT_ADAPTERS:
        for version in adapter_type.versions:
            adapters[(adapter_type.format, version)] = adapter_type
    return adapters


__all__ = [
    "Apml06Adapter",
    "Atom03Adapter",
    "Atom10Adapter",
    "AtomCategoryDocumentAdapter",
    "AtomServiceDocumentAdapter",
    "BlogML20Adapter",
    "DialectAdapter",
    "Field",
    "OpmlAdapter",
    "ResourceAdapter",
    "Rsd06Adapter",
    "Rsd10Adapter",
    "Rss090Adapter",
    "Rss091Adapter",
    "Rss092Adapter",
    "Rss10Adapter",
    "Rss20Adapter",
    "build_default_adapters",
]

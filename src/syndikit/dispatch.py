"""Generic dispatcher: sniff the document, then hand it to the matching dialect adapter."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any, Mapping

from lxml import etree

from syndikit.adapters import DialectAdapter, ResourceAdapter, build_default_adapters
from syndikit.config import LoadSettings
from syndikit.detection import ContentFormat, Version, detect, format_version
from syndikit.errors import FormatMismatchError
from syndikit.extensions import ExtensionRegistry, build_default_registry
from syndikit.navigation import load_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FillOutcome:
    """What the dispatcher detected and whether an adapter ran."""

    format: ContentFormat
    version: Version | None
    filled: bool


class ResourceDispatcher:
    """Owns a parsed document and routes fills to the adapter for its dialect."""

    def __init__(
        self,
        document: etree._ElementTree | etree._Element,
        settings: LoadSettings,
        *,
        registry: ExtensionRegistry | None = None,
        adapters: Mapping[tuple[ContentFormat, Version], type[DialectAdapter]] | None = None,
    ) -> None:
        if document is None:
            raise ValueError("Navigable document is required")
        if settings is None:
            raise ValueError("Load settings are required")

        self._document = document
        self._settings = settings
        self._registry = registry if registry is not None else build_default_registry()
        self._adapters = dict(adapters) if adapters is not None else build_default_adapters()

    @property
    def settings(self) -> LoadSettings:
        return self._settings

    def register_adapter(
        self,
        format: ContentFormat,
        version: Version,
        adapter_type: type[DialectAdapter],
    ) -> None:
        if not isinstance(format, ContentFormat) or format is ContentFormat.NONE:
            raise ValueError(f"Cannot register an adapter for format {format!r}")
        self._adapters[(format, tuple(version))] = adapter_type

    def fill(self, target: Any, format: ContentFormat) -> FillOutcome:
        """Fill ``target`` from the document, which must be in the declared ``format``."""

        if not isinstance(format, ContentFormat) or format is ContentFormat.NONE:
            raise ValueError(f"A concrete content format is required, got {format!r}")
        if target is None:
            raise ValueError("Fill target cannot be None")

        metadata = detect(self._document)
        if metadata.format is not format:
            raise FormatMismatchError(expected=format.value, actual=metadata.format.value)

        adapter_type = self._adapters.get((metadata.format, metadata.version))
        if adapter_type is None:
            logger.warning(
                "No adapter for %s version %s; leaving target untouched",
                metadata.format.value,
                format_version(metadata.version),
            )
            return FillOutcome(metadata.format, metadata.version, filled=False)

        adapter: ResourceAdapter = adapter_type(self._document, self._settings, self._registry)
        filled = adapter.fill(target)
        if filled:
            logger.debug(
                "Filled %s from %s %s",
                type(target).__name__,
                metadata.format.value,
                format_version(metadata.version),
            )
        else:
            logger.warning(
                "%s found no root for %s; leaving target untouched",
                type(adapter).__name__,
                type(target).__name__,
            )
        return FillOutcome(metadata.format, metadata.version, filled=filled)


def load_resource(
    source: bytes | str | Path,
    target: Any,
    format: ContentFormat,
    settings: LoadSettings | None = None,
    registry: ExtensionRegistry | None = None,
) -> FillOutcome:
    """Parse ``source`` and fill ``target`` in one call."""

    settings = settings or LoadSettings()
    document = load_document(source, encoding=settings.character_encoding)
    return ResourceDispatcher(document, settings, registry=registry).fill(target, format)

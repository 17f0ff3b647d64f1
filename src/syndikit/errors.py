"""Domain errors raised when the library is called incorrectly.

Malformed feed data never raises: only caller misuse and unreadable payloads do.
"""

from __future__ import annotations

from dataclasses import dataclass


class SyndicationError(Exception):
    """Base class for syndikit domain errors."""


@dataclass(slots=True)
class DocumentLoadError(SyndicationError):
    """Raised when a payload cannot be parsed into an XML tree."""

    message: str
    source: str | None = None

    def __str__(self) -> str:
        if self.source:
            return f"{self.message} (source={self.source})"
        return self.message


@dataclass(slots=True)
class FormatMismatchError(SyndicationError):
    """Raised when the declared format disagrees with the detected one."""

    expected: object
    actual: object

    def __str__(self) -> str:
        return f"Declared format {self.expected} does not match detected format {self.actual}"


@dataclass(slots=True)
class ExtensionLoadError(SyndicationError):
    """Raised when a registered extension fails while loading its own elements."""

    namespace: str
    extension: str

    def __str__(self) -> str:
        return f"Extension {self.extension!r} failed to load (namespace={self.namespace})"

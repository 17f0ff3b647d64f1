"""Load settings shared by every adapter during a fill."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os
from typing import Mapping


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_flag(name: str, raw: str | None, default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag (got {raw!r})")


@dataclass(frozen=True, slots=True)
class LoadSettings:
    """Read-only policy bag passed through every adapter call.

    ``retrieval_limit`` caps how many repeating items (entries, items,
    outlines, profiles, posts) an adapter materializes; 0 means unlimited.
    """

    retrieval_limit: int = 0
    detect_extensions: bool = True
    resolve_relative_uris: bool = False
    character_encoding: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.retrieval_limit, bool) or not isinstance(self.retrieval_limit, int):
            raise ValueError("retrieval_limit must be an integer")
        if self.retrieval_limit < 0:
            raise ValueError("retrieval_limit cannot be negative")
        if self.character_encoding is not None:
            try:
                codecs.lookup(self.character_encoding)
            except LookupError as exc:
                raise ValueError(f"Unknown character encoding: {self.character_encoding}") from exc

    def limit_reached(self, count: int) -> bool:
        """Return True when a collection holding ``count`` items is full."""

        return self.retrieval_limit != 0 and count >= self.retrieval_limit

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LoadSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        raw_limit = source.get("SYNDIKIT_RETRIEVAL_LIMIT", "").strip()
        retrieval_limit = 0
        if raw_limit:
            try:
                retrieval_limit = int(raw_limit)
            except ValueError as exc:
                raise ValueError(f"SYNDIKIT_RETRIEVAL_LIMIT must be an integer (got {raw_limit!r})") from exc
            if retrieval_limit < 0:
                raise ValueError("SYNDIKIT_RETRIEVAL_LIMIT cannot be negative")

        detect_extensions = _parse_flag(
            "SYNDIKIT_DETECT_EXTENSIONS", source.get("SYNDIKIT_DETECT_EXTENSIONS"), True
        )
        resolve_relative_uris = _parse_flag(
            "SYNDIKIT_RESOLVE_RELATIVE_URIS", source.get("SYNDIKIT_RESOLVE_RELATIVE_URIS"), False
        )

        encoding = source.get("SYNDIKIT_CHARACTER_ENCODING", "").strip() or None
        if encoding is not None:
            try:
                codecs.lookup(encoding)
            except LookupError as exc:
                raise ValueError(f"SYNDIKIT_CHARACTER_ENCODING is not a known codec: {encoding}") from exc

        return cls(
            retrieval_limit=retrieval_limit,
            detect_extensions=detect_extensions,
            resolve_relative_uris=resolve_relative_uris,
            character_encoding=encoding,
        )

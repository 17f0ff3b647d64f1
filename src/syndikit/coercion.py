"""Best-effort value coercion used by the dialect adapters.

Every helper returns ``None`` instead of raising when the raw value is absent
or malformed, so a typo in a feed leaves the field unset.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from email.utils import parsedate_to_datetime
from enum import Enum
import logging
import math
from typing import TypeVar
from urllib.parse import urljoin, urlsplit

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def as_text(raw: str | None) -> str | None:
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def as_uri(raw: str | None) -> str | None:
    """Accept absolute and relative references alike."""

    value = as_text(raw)
    if value is None:
        return None
    try:
        urlsplit(value)
    except ValueError:
        logger.debug("Ignoring malformed URI %r", value)
        return None
    return value


def resolve_uri(value: str | None, base: str | None) -> str | None:
    if value is None or not base:
        return value
    try:
        return urljoin(base, value)
    except ValueError:
        logger.debug("Could not resolve %r against base %r", value, base)
        return value


def as_int(raw: str | None) -> int | None:
    value = as_text(raw)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.debug("Ignoring malformed integer %r", value)
        return None


def as_decimal(raw: str | None) -> Decimal | None:
    value = as_text(raw)
    if value is None:
        return None
    try:
        parsed = Decimal(value)
    except InvalidOperation:
        logger.debug("Ignoring malformed decimal %r", value)
        return None
    return parsed if parsed.is_finite() else None


def as_float(raw: str | None) -> float | None:
    value = as_text(raw)
    if value is None:
        return None
    try:
        parsed = float(value)
    except ValueError:
        logger.debug("Ignoring malformed number %r", value)
        return None
    return parsed if math.isfinite(parsed) else None


def as_bool(raw: str | None) -> bool | None:
    value = as_text(raw)
    if value is None:
        return None
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    logger.debug("Ignoring malformed boolean %r", value)
    return None


def as_yes_no(raw: str | None) -> bool | None:
    value = as_text(raw)
    if value is None:
        return None
    lowered = value.lower()
    if lowered == "yes":
        return True
    if lowered == "no":
        return False
    logger.debug("Ignoring malformed yes/no flag %r", value)
    return None


def _rfc822(value: str) -> datetime | None:
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None


def _rfc3339(value: str) -> datetime | None:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def parse_rfc822(raw: str | None) -> datetime | None:
    """Parse an RFC 822 timestamp, falling back to RFC 3339 for sloppy feeds."""

    value = as_text(raw)
    if value is None:
        return None
    parsed = _rfc822(value) or _rfc3339(value)
    if parsed is None:
        logger.debug("Ignoring malformed RFC 822 date %r", value)
    return parsed


def parse_rfc3339(raw: str | None) -> datetime | None:
    """Parse an RFC 3339 timestamp, falling back to RFC 822 for sloppy feeds."""

    value = as_text(raw)
    if value is None:
        return None
    parsed = _rfc3339(value) or _rfc822(value)
    if parsed is None:
        logger.debug("Ignoring malformed RFC 3339 date %r", value)
    return parsed


def enum_by_name(enum_type: type[E], raw: str | None) -> E | None:
    value = as_text(raw)
    if value is None:
        return None
    wanted = value.replace("-", "_").casefold()
    for member in enum_type:
        if member.name.casefold() == wanted:
            return member
    logger.debug("Ignoring unknown %s name %r", enum_type.__name__, value)
    return None


def enum_by_value(enum_type: type[E], raw: str | None) -> E | None:
    value = as_text(raw)
    if value is None:
        return None
    wanted = value.casefold()
    for member in enum_type:
        if str(member.value).casefold() == wanted:
            return member
    logger.debug("Ignoring unknown %s value %r", enum_type.__name__, value)
    return None


def split_list(raw: str | None, separator: str = ",") -> list[str]:
    value = as_text(raw)
    if value is None:
        return []
    return [part.strip() for part in value.split(separator) if part.strip()]

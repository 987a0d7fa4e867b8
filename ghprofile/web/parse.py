"""Helpers for projecting fields out of an untyped JSON response.

Values are never trusted to have their declared JSON type: each one is
stringified first and then converted, so ``42`` and ``"42"`` read the same.
"""

import logging
import re
from datetime import datetime
from typing import Any, Mapping

from ghprofile.errors import ParseError

logger = logging.getLogger(__name__)

# yyyy/MM/dd HH:mm:ss Z, e.g. "2008/01/14 04:33:35 -0800".
TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S %z"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def get_mapping(data: Any, key: str) -> Mapping[str, Any]:
    """Returns the nested mapping stored under ``key``, or raises ParseError."""
    if not isinstance(data, Mapping):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")
    value = data.get(key)
    if not isinstance(value, Mapping):
        raise ParseError(f"Response has no {key!r} object")
    return value


def to_optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    return None if value is None else str(value)


def to_str(data: Mapping[str, Any], key: str, default: str | None = None) -> str:
    """Returns the stringified value under ``key``.

    A missing or null value falls back to ``default``; without a default it
    raises ParseError.
    """
    if (value := to_optional_str(data, key)) is not None:
        return value
    if default is None:
        raise ParseError(f"Missing required field {key!r}")
    return default


def to_int64(data: Mapping[str, Any], key: str) -> int:
    """Parses the value under ``key`` as a signed 64-bit integer."""
    raw = str(data.get(key))
    if not _INTEGER_RE.fullmatch(raw):
        raise ParseError(f"Field {key!r} is not numeric: {raw!r}")
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ParseError(f"Field {key!r} is out of range: {raw!r}")
    return value


def parse_timestamp(raw: str) -> datetime | None:
    """Parses a timestamp, returning None if it does not match the format."""
    try:
        return datetime.strptime(raw, TIMESTAMP_FORMAT)
    except ValueError:
        return None


def to_optional_timestamp(data: Mapping[str, Any], key: str) -> datetime | None:
    raw = str(data.get(key))
    if (value := parse_timestamp(raw)) is None:
        logger.debug("Ignoring unparseable %s value %r", key, raw)
    return value

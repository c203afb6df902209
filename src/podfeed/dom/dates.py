"""Date and duration parsing for feed values.

Feeds in the wild mix RFC 822 dates, ISO 8601 timestamps and assorted
near-misses. Parsing tries a fixed list of grammars in order and never
raises: a value no grammar accepts is treated as absent.
"""

import logging
import re
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime

from dateutil.parser import isoparse

logger = logging.getLogger(__name__)

# Near-RFC 822 variants that email.utils rejects
_STRPTIME_FORMATS = (
    "%a, %d %B %Y %H:%M:%S %z",
    "%d %B %Y %H:%M:%S %z",
    "%a, %d %b %Y %H:%M %z",
    "%a, %d %b %Y %H:%M:%S",
    "%a, %d %b %Y",
    "%d %b %Y",
    "%Y-%m-%d %H:%M:%S %z",
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
)

_WHITESPACE = re.compile(r"\s+")
_SECONDS = re.compile(r"^\d+(?:\.\d+)?$")
_CLOCK = re.compile(r"^(?:(\d+):)?(\d+):(\d+(?:\.\d+)?)$")


def _ensure_aware(value: datetime) -> datetime:
    """Attach UTC to naive datetimes."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _parse_rfc822(value: str) -> datetime | None:
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError, OverflowError):
        return None


def _parse_iso8601(value: str) -> datetime | None:
    try:
        return isoparse(value)
    except (ValueError, OverflowError):
        return None


def _parse_strptime(value: str) -> datetime | None:
    for pattern in _STRPTIME_FORMATS:
        try:
            return datetime.strptime(value, pattern)
        except ValueError:
            continue
    return None


DATE_PARSERS: tuple[Callable[[str], datetime | None], ...] = (
    _parse_rfc822,
    _parse_iso8601,
    _parse_strptime,
)


def parse_datetime(value: str | None) -> datetime | None:
    """Parse a feed date into a timezone-aware datetime.

    Grammars are tried in order: RFC 822 (``pubDate``), ISO 8601 (Atom and
    many modern feeds, with optional fractions and offsets), then a list of
    known malformed variants. Naive results are assumed to be UTC.

    Args:
        value: Raw text of the date element

    Returns:
        The decoded instant, or None if no grammar accepts the value

    Examples:
        >>> parse_datetime("Fri, 08 Jun 2018 08:00:00 GMT")
        datetime.datetime(2018, 6, 8, 8, 0, tzinfo=datetime.timezone.utc)
        >>> parse_datetime("next tuesday") is None
        True
    """
    if value is None:
        return None
    candidate = _WHITESPACE.sub(" ", value).strip()
    if not candidate:
        return None

    for parser in DATE_PARSERS:
        parsed = parser(candidate)
        if parsed is not None:
            return _ensure_aware(parsed)

    logger.debug("Unparsable date value: %r", value)
    return None


def parse_duration(value: str | None) -> timedelta | None:
    """Parse a time offset given in seconds or as a clock literal.

    Accepts a bare non-negative number of seconds (``"90"``, ``"1.5"``) or
    ``[HH:]MM:SS[.fraction]``. When a larger unit precedes them, minutes
    and seconds must be below 60.

    Returns:
        The offset, or None for negative or unparsable input
    """
    if value is None:
        return None
    candidate = value.strip()
    if not candidate:
        return None

    try:
        if _SECONDS.match(candidate):
            return timedelta(seconds=float(candidate))

        match = _CLOCK.match(candidate)
        if match is None:
            return None

        hours_raw, minutes_raw, seconds_raw = match.groups()
        minutes = int(minutes_raw)
        seconds = float(seconds_raw)
        if seconds >= 60:
            return None
        if hours_raw is not None and minutes >= 60:
            return None
        hours = int(hours_raw) if hours_raw is not None else 0
        return timedelta(hours=hours, minutes=minutes, seconds=seconds)
    except OverflowError:
        return None

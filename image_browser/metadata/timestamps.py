import logging
import math
import os
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from ..exceptions import TimestampError


def _creation_time(st: os.stat_result) -> Optional[float]:
    # Only some platforms/filesystems report a birth time (macOS, BSD, Windows).
    return getattr(st, 'st_birthtime', None)


def _modification_time(st: os.stat_result) -> Optional[float]:
    return getattr(st, 'st_mtime', None)


# Tried in order; the first source that reports a value wins.
CLOCK_SOURCES: List[Tuple[str, Callable[[os.stat_result], Optional[float]]]] = [
    ('creation', _creation_time),
    ('modification', _modification_time),
]


def resolve_created_at(st: os.stat_result) -> str:
    """
    Resolves an entry's creation time as an RFC 3339 string.

    Strategy:
      1. Native creation time, if the platform reports one.
      2. Last-modified time otherwise.
      3. Only if converting the chosen value to a calendar date fails,
         the current UTC time is used instead.

    Raises:
        TimestampError: no clock value exists, or the chosen one is
                        pre-epoch / not representable.
    """
    return format_timestamp(epoch_seconds(st))


def epoch_seconds(st: os.stat_result) -> int:
    """Whole seconds since the Unix epoch from the first available clock source."""
    for label, source in CLOCK_SOURCES:
        value = source(st)
        if value is None:
            continue
        if not math.isfinite(value) or value < 0:
            raise TimestampError(f"{label} time is not representable as seconds since the epoch: {value}")
        return int(value)
    raise TimestampError("No creation or modification time available")


def format_timestamp(seconds: int) -> str:
    try:
        dt = datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        logging.warning(f"Cannot convert timestamp {seconds} to a date ({e}); using current time")
        dt = datetime.now(timezone.utc).replace(microsecond=0)
    return dt.isoformat()

"""Read creation/modification timestamps and convert them to UTC dates.

Creation time is not part of POSIX ``stat``. Python exposes it as
``st_birthtime`` where the platform records it (macOS, the BSDs, and
Windows since Python 3.12). Older Windows interpreters report the
creation time in ``st_ctime`` instead, so that field is used there. On
any other platform (notably Linux) a request for the creation time
raises :class:`~datesort.errors.CreationTimeUnavailable`.
"""
import os
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from dateutil import tz

from .config import TimestampSource
from .errors import CreationTimeUnavailable, MetadataIOError


@dataclass(frozen=True)
class ResolvedTimestamp:
    """Calendar date (UTC) a file is grouped by."""

    year: int
    month: int
    day: int

    @classmethod
    def from_timestamp(cls, ts: float) -> "ResolvedTimestamp":
        """Convert seconds since the epoch to UTC calendar fields.

        Raises:
            MetadataIOError: when ``ts`` is outside the range the platform
                can represent as a date.
        """
        try:
            dt = datetime.fromtimestamp(ts, tz=tz.UTC)
        except (OverflowError, OSError, ValueError) as err:
            raise MetadataIOError(f"timestamp {ts!r} is out of range") from err
        return cls(dt.year, dt.month, dt.day)


def supports_creation_time(st) -> bool:
    """Return True when ``st`` carries a file creation time."""
    if getattr(st, "st_birthtime", None) is not None:
        return True
    return sys.platform == "win32" and getattr(st, "st_ctime", None) is not None


def read_timestamp(st, source: TimestampSource, path: Optional[Path] = None) -> float:
    """Return the timestamp selected by ``source`` from a stat result.

    Args:
        st: An :class:`os.stat_result` or any object with the same
            ``st_*`` attributes.
        source: Which timestamp to read.
        path: Used only to name the file in error messages.

    Sub-second precision is preserved as returned by the platform.
    """
    if source is TimestampSource.MODIFIED:
        return st.st_mtime

    if not supports_creation_time(st):
        raise CreationTimeUnavailable(path)
    birth = getattr(st, "st_birthtime", None)
    if birth is not None:
        return birth
    # Windows before 3.12: st_ctime is the creation time
    return st.st_ctime


def stat_file(path: Path, stat_func: Callable = os.stat):
    """Stat ``path``; wrap any ``OSError`` in :class:`MetadataIOError`."""
    try:
        return stat_func(path)
    except OSError as err:
        raise MetadataIOError(f"cannot read metadata of {path}: {err}") from err


def resolve_timestamp(
    path: Path,
    source: TimestampSource,
    stat_func: Callable = os.stat,
) -> ResolvedTimestamp:
    """Return the UTC calendar date of ``path``'s selected timestamp."""
    st = stat_file(path, stat_func)
    return ResolvedTimestamp.from_timestamp(read_timestamp(st, source, path))

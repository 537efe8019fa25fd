import logging
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """``cli.main`` configures the ``datesort`` logger; undo that after each test."""
    logger = logging.getLogger("datesort")
    handlers, level = logger.handlers[:], logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def utc_ts(*args) -> float:
    """POSIX timestamp of a UTC wall-clock time."""
    return datetime(*args, tzinfo=timezone.utc).timestamp()


def fake_stat(birthtime=None, mtime=0.0):
    """Return a stand-in for ``os.stat`` with fixed timestamps.

    Without ``birthtime`` the result has no ``st_birthtime`` attribute at
    all, like a Linux stat result.
    """

    def _stat(_path):
        fields = {"st_mtime": mtime, "st_ctime": mtime}
        if birthtime is not None:
            fields["st_birthtime"] = birthtime
        return SimpleNamespace(**fields)

    return _stat

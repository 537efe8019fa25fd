"""Organize a directory into year/month(/day) folders.

The organizer walks the configured base directory, works out each file's
destination from its creation or modification date and moves it there.
Per-file problems (unreadable metadata, missing creation time, a failed
move) are reported and the run carries on with the next file. A
directory that cannot be read aborts the run before anything is moved.
"""
import errno
import os
import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, TextIO

from .config import Configuration
from .errors import DatesortError, MoveError
from .log import get_logger
from .planner import DestinationPlan, plan_destination, resolve_anchor
from .timestamps import resolve_timestamp
from .walker import FileEntry, walk

logger = get_logger(__name__)


@dataclass(frozen=True)
class MoveResult:
    source: Path
    target: Optional[Path] = None
    moved: bool = False
    error: Optional[DatesortError] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass
class RunSummary:
    results: List[MoveResult] = field(default_factory=list)

    @property
    def moved(self) -> int:
        return sum(1 for r in self.results if r.moved)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.failed)

    @property
    def skipped(self) -> int:
        """Files that were already at their destination."""
        return sum(1 for r in self.results if not r.moved and not r.failed)


def move_file(source: Path, plan: DestinationPlan) -> Path:
    """Move ``source`` to ``plan.target_path``, creating directories as needed.

    An existing file at the target is never overwritten. Renames across
    filesystems fall back to :func:`shutil.move`, which copies before
    deleting, so the file is never lost if the move fails midway.

    Raises:
        MoveError: the target directory could not be created, the target
            already exists, or the rename failed. ``source`` is left in
            place.
    """
    try:
        plan.target_directory.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise MoveError(f"cannot create {plan.target_directory}: {err}") from err

    if os.path.lexists(plan.target_path):
        raise MoveError(f"{plan.target_path} already exists")

    try:
        os.rename(source, plan.target_path)
    except OSError as err:
        if err.errno != errno.EXDEV:
            raise MoveError(f"cannot move to {plan.target_path}: {err}") from err
        try:
            shutil.move(str(source), str(plan.target_path))
        except OSError as move_err:
            raise MoveError(
                f"cannot move to {plan.target_path}: {move_err}"
            ) from move_err
    return plan.target_path


def _same_file_location(a: Path, b: Path) -> bool:
    return Path(a).resolve() == Path(b).resolve()


def display_path(path: Path) -> str:
    """Render ``path`` for output, escaping bytes that are not valid UTF-8.

    On POSIX, undecodable file names come back from the OS as lone
    surrogates, which a strict text stream refuses to write.
    """
    return os.fsencode(path).decode("utf-8", "backslashreplace")


class Organizer:
    """Run one organize pass over ``config.base_directory``.

    Args:
        config: Parsed run configuration.
        fallback_anchor: Directory used by the ``path`` anchor policy only
            when a file's path has no normal component. Defaults to the
            current working directory at construction time.
        stat_func: Replacement for :func:`os.stat`, mainly for tests that
            need a fixed creation time.
        out: Stream that receives one ``MOVED`` line per moved file.
    """

    def __init__(
        self,
        config: Configuration,
        fallback_anchor: Optional[Path] = None,
        stat_func: Callable = os.stat,
        out: Optional[TextIO] = None,
    ):
        self.config = config
        if fallback_anchor is None:
            try:
                fallback_anchor = Path.cwd()
            except OSError as err:
                logger.debug("no working directory to fall back on: %s", err)
        self.fallback_anchor = fallback_anchor
        self.stat_func = stat_func
        self.out = out

    def entries(self) -> List[FileEntry]:
        """Snapshot the files to process before anything is created."""
        return list(walk(self.config.base_directory, self.config.recursive))

    def plan(self, entry: FileEntry) -> DestinationPlan:
        timestamp = resolve_timestamp(
            entry.path, self.config.timestamp_source, stat_func=self.stat_func
        )
        anchor = resolve_anchor(
            entry.path,
            self.config.anchor_policy,
            self.config.base_directory,
            self.fallback_anchor,
        )
        return plan_destination(
            entry.path, timestamp, self.config.grouping_mode, anchor
        )

    def report(self, line: str) -> None:
        """Write one result line; never let an unencodable name escape."""
        stream = self.out or sys.stdout
        try:
            print(line, file=stream)
        except UnicodeEncodeError:
            print(line.encode("ascii", "backslashreplace").decode("ascii"), file=stream)

    def process(self, entry: FileEntry) -> MoveResult:
        try:
            plan = self.plan(entry)
            if _same_file_location(entry.path, plan.target_path):
                logger.debug("already in place: %s", display_path(entry.path))
                return MoveResult(entry.path, plan.target_path)
            target = move_file(entry.path, plan)
        except DatesortError as err:
            logger.error("SKIPPED %s: %s", display_path(entry.path), err)
            return MoveResult(entry.path, error=err)

        self.report(f"MOVED {display_path(entry.path)} -> {display_path(target)}")
        return MoveResult(entry.path, target, moved=True)

    def run(self) -> RunSummary:
        """Organize every file found under the base directory.

        Raises:
            DirectoryReadError: the base directory (or, with recursion, a
                subdirectory) could not be read. Nothing has been moved.
        """
        entries = self.entries()
        logger.debug(
            "found %d file(s) under %s", len(entries), self.config.base_directory
        )
        summary = RunSummary()
        for entry in entries:
            summary.results.append(self.process(entry))
        logger.info(
            "Organized %d file(s), %d failed", summary.moved, summary.failed
        )
        return summary


def organize_directory(config: Configuration, **kwargs) -> RunSummary:
    """Convenience wrapper: ``Organizer(config, **kwargs).run()``."""
    return Organizer(config, **kwargs).run()

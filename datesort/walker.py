"""Directory enumeration."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .errors import DirectoryReadError


@dataclass(frozen=True)
class FileEntry:
    path: Path
    name: str
    is_dir: bool


def _scan(directory: Path) -> Iterator[FileEntry]:
    try:
        with os.scandir(directory) as it:
            for entry in it:
                try:
                    is_dir = entry.is_dir()
                except OSError as err:
                    raise DirectoryReadError(
                        directory, f"cannot stat {entry.name}: {err}"
                    ) from err
                yield FileEntry(Path(directory) / entry.name, entry.name, is_dir)
    except OSError as err:
        raise DirectoryReadError(directory, str(err)) from err


def walk(directory: Path, recursive: bool = False) -> Iterator[FileEntry]:
    """Yield the non-directory entries of ``directory``.

    Order is whatever the filesystem returns. Subdirectories are descended
    into only when ``recursive`` is true and are never yielded themselves.
    Each call starts a fresh enumeration. Symbolic links to directories
    are followed like directories, so with ``recursive`` the files behind
    them are yielded too and a link loop ends in ``DirectoryReadError``.

    Raises:
        DirectoryReadError: a directory could not be opened or one of its
            entries could not be statted.
    """
    for entry in _scan(Path(directory)):
        if not entry.is_dir:
            yield entry
        elif recursive:
            yield from walk(entry.path, recursive=True)

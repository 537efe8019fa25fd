"""Run configuration and the command-line token parser.

The command line is deliberately small::

    datesort <directory> [-r] [mode=day|month] [sort=created|modified]
             [anchor=base|path] [-v|--verbose]

Flags may come in any order; when a flag is repeated the last occurrence
wins.
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable

from .errors import (
    InvalidAnchorPolicy,
    InvalidMode,
    InvalidSortType,
    MissingDirectory,
    UnknownArgument,
)

MODE_KEY = "mode="
SORT_KEY = "sort="
ANCHOR_KEY = "anchor="


class GroupingMode(str, Enum):
    MONTH = "month"
    DAY = "day"


class TimestampSource(str, Enum):
    CREATED = "created"
    MODIFIED = "modified"


class AnchorPolicy(str, Enum):
    """Where the ``year/month(/day)`` tree is created for each file.

    ``BASE`` always uses the configured base directory. ``PATH`` keeps the
    historical behaviour of anchoring on the first component of the
    file's own path.
    """

    BASE = "base"
    PATH = "path"


@dataclass(frozen=True)
class Configuration:
    base_directory: Path
    recursive: bool = False
    grouping_mode: GroupingMode = GroupingMode.MONTH
    timestamp_source: TimestampSource = TimestampSource.CREATED
    anchor_policy: AnchorPolicy = AnchorPolicy.BASE
    verbose: bool = False


def _choice(enum_cls, value: str, error_cls):
    try:
        return enum_cls(value)
    except ValueError:
        raise error_cls(value) from None


def parse_args(argv: Iterable[str]) -> Configuration:
    """Build a :class:`Configuration` from a full argument vector.

    Args:
        argv: Tokens as in ``sys.argv``; the first one (program name) is
            ignored and the second one is the base directory.

    Raises:
        MissingDirectory: no base directory was given.
        InvalidMode: ``mode=`` value is not ``day`` or ``month``.
        InvalidSortType: ``sort=`` value is not ``created`` or ``modified``.
        InvalidAnchorPolicy: ``anchor=`` value is not ``base`` or ``path``.
        UnknownArgument: any other token.
    """
    tokens = iter(argv)
    next(tokens, None)

    directory = next(tokens, None)
    if directory is None:
        raise MissingDirectory()

    recursive = False
    verbose = False
    mode = GroupingMode.MONTH
    source = TimestampSource.CREATED
    anchor = AnchorPolicy.BASE

    for token in tokens:
        if token == "-r":
            recursive = True
        elif token in ("-v", "--verbose"):
            verbose = True
        elif token.startswith(MODE_KEY):
            mode = _choice(GroupingMode, token[len(MODE_KEY):], InvalidMode)
        elif token.startswith(SORT_KEY):
            source = _choice(TimestampSource, token[len(SORT_KEY):], InvalidSortType)
        elif token.startswith(ANCHOR_KEY):
            anchor = _choice(AnchorPolicy, token[len(ANCHOR_KEY):], InvalidAnchorPolicy)
        else:
            raise UnknownArgument(token)

    return Configuration(
        base_directory=Path(directory),
        recursive=recursive,
        grouping_mode=mode,
        timestamp_source=source,
        anchor_policy=anchor,
        verbose=verbose,
    )

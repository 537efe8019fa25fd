"""Compute where a file goes.

Destinations are ``<anchor>/<year>/<month>`` or
``<anchor>/<year>/<month>/<day>``, with plain decimal numbers
(``2024/3/5``, never ``2024/03/05``). The file name is never changed.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import AnchorPolicy, GroupingMode
from .errors import PlanningError
from .timestamps import ResolvedTimestamp


@dataclass(frozen=True)
class DestinationPlan:
    target_directory: Path
    target_path: Path


def path_anchor(source: Path, fallback: Optional[Path] = None) -> Optional[Path]:
    """Return the anchor derived from the first normal component of ``source``.

    Root, drive, ``.`` and ``..`` components are not normal. The first
    normal component is returned as a relative directory, so it is
    resolved against the current working directory. ``fallback`` is
    returned only when ``source`` has no normal component at all.
    """
    source = Path(source)
    for part in source.parts:
        if part in (".", "..") or part == source.anchor:
            continue
        return Path(part)
    return fallback


def resolve_anchor(
    source: Path,
    policy: AnchorPolicy,
    base_directory: Path,
    fallback: Optional[Path] = None,
) -> Path:
    """Return the directory the date tree for ``source`` is created under.

    Raises:
        PlanningError: ``policy`` is ``path``, ``source`` has no normal
            component and no ``fallback`` was given.
    """
    if policy is AnchorPolicy.BASE:
        return Path(base_directory)
    anchor = path_anchor(source, fallback)
    if anchor is None:
        raise PlanningError(f"cannot determine anchor directory for {source}")
    return anchor


def plan_destination(
    source: Path,
    timestamp: ResolvedTimestamp,
    mode: GroupingMode,
    anchor: Path,
) -> DestinationPlan:
    name = Path(source).name
    if not name:
        raise PlanningError(f"{source} has no file name")
    parts = [str(timestamp.year), str(timestamp.month)]
    if mode is GroupingMode.DAY:
        parts.append(str(timestamp.day))
    target_directory = Path(anchor).joinpath(*parts)
    return DestinationPlan(target_directory, target_directory / name)

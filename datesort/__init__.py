"""Organize files into year/month(/day) folders by their timestamps."""
from .config import (
    AnchorPolicy,
    Configuration,
    GroupingMode,
    TimestampSource,
    parse_args,
)
from .organize import Organizer, RunSummary, organize_directory

__all__ = [
    "AnchorPolicy",
    "Configuration",
    "GroupingMode",
    "Organizer",
    "RunSummary",
    "TimestampSource",
    "organize_directory",
    "parse_args",
]

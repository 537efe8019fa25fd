"""Exception hierarchy for ``datesort``.

Configuration and directory-read errors abort a run. Metadata, planning
and move errors are raised per file and reported by the organizer, which
then continues with the next file.
"""
from pathlib import Path


class DatesortError(Exception):
    """Base application exception."""

    pass


class ConfigurationError(DatesortError):
    """The command line could not be turned into a configuration."""

    pass


class MissingDirectory(ConfigurationError):
    def __init__(self):
        super().__init__("Directory not specified")


class UnknownArgument(ConfigurationError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown argument: {token!r}")


class InvalidMode(ConfigurationError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid mode {value!r} (expected 'day' or 'month')")


class InvalidSortType(ConfigurationError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Invalid sort type {value!r} (expected 'created' or 'modified')"
        )


class InvalidAnchorPolicy(ConfigurationError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid anchor {value!r} (expected 'base' or 'path')")


class DirectoryReadError(DatesortError):
    """A directory could not be enumerated or one of its entries statted."""

    def __init__(self, directory: Path, reason: str):
        self.directory = Path(directory)
        super().__init__(f"cannot read directory {self.directory}: {reason}")


class MetadataError(DatesortError):
    """Timestamp metadata for a single file could not be obtained."""

    pass


class CreationTimeUnavailable(MetadataError):
    def __init__(self, path: Path | None = None):
        self.path = path
        where = f" for {path}" if path is not None else ""
        super().__init__(
            f"creation time is not available on this platform/filesystem{where}"
        )


class MetadataIOError(MetadataError):
    pass


class PlanningError(DatesortError):
    pass


class MoveError(DatesortError):
    pass

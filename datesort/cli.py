"""Command-line interface for the ``datesort`` package.

This module exposes the entry point used by the ``datesort`` console
script and by ``python -m datesort``. The token grammar itself lives in
:func:`datesort.config.parse_args`; this module only adds ``--help`` and
``--version``, sets up logging and maps errors to exit codes.
"""
import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from .config import parse_args
from .errors import ConfigurationError, DirectoryReadError
from .log import configure_logging
from .organize import Organizer

try:
    __version__ = version("datesort")
except PackageNotFoundError:
    __version__ = "0.0.0"

USAGE = (
    "datesort DIRECTORY [-r] [mode=day|month] [sort=created|modified] "
    "[anchor=base|path] [-v|--verbose]"
)

DESCRIPTION = (
    "Move every file in DIRECTORY into DIRECTORY/<year>/<month>[/<day>] "
    "according to its creation or modification time (UTC)."
)

EPILOG = """\
arguments:
  -r               also organize files in subdirectories
  mode=month|day   group by year/month (default) or year/month/day
  sort=created|modified
                   use the creation (default) or modification time
  anchor=base|path create the date folders under DIRECTORY (default) or
                   under the first component of each file's path
  -v, --verbose    print debug messages
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="datesort",
        usage=USAGE,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=__version__
    )
    return parser


def main(argv=None) -> int:
    """Run the CLI; return the process exit code."""
    if argv is None:
        argv = sys.argv
    argv = list(argv)

    # --help/--version are only recognised in place of the directory
    if len(argv) > 1 and argv[1] in ("-h", "--help", "--version"):
        build_parser().parse_args(argv[1:2])

    try:
        config = parse_args(argv)
    except ConfigurationError as err:
        print(f"Error parsing arguments: {err}", file=sys.stderr)
        print(f"usage: {USAGE}", file=sys.stderr)
        return 1

    # file names are arbitrary bytes; escape what the terminal cannot encode
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors="backslashreplace")
    configure_logging(logging.DEBUG if config.verbose else logging.INFO)

    try:
        Organizer(config).run()
    except DirectoryReadError as err:
        print(f"Application error: {err}", file=sys.stderr)
        return 1
    return 0

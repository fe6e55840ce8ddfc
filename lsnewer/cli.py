"""Command-line front doors for lsnewer and lslong.

Parses CLI options, resolves the threshold and root directory, and prints
one long-listing line per accepted entry, grouped by visited directory.
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from . import config
from .errors import LsnewerError
from .listing import ListingOptions, iter_listings, render_listing
from .log import configure_logging
from .threshold import resolve_root, resolve_threshold
from .timestamp import TIMESTAMP_LAYOUT

FILTER_EPILOG = (
    f"-t accepts a cut-off time in {TIMESTAMP_LAYOUT} format or a file whose "
    "modification time is used instead. Without -t the cut-off is 1970-01-01 00:00:00. "
    "Only entries modified strictly after the cut-off are listed."
)


def _add_display_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--no-headers",
        action="store_true",
        help="Do not print each visited directory's path before its entries.",
    )
    parser.add_argument("--skip-hidden", action="store_true", help="Skip entries whose name starts with '.'.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped entries and threshold resolution.")


def build_parser() -> argparse.ArgumentParser:
    """Parser for the filtering ``lsnewer`` command."""
    parser = argparse.ArgumentParser(
        prog="lsnewer",
        description="Recursively list entries modified after a cut-off time, ls -l style.",
        epilog=FILTER_EPILOG,
    )
    parser.add_argument(
        "-t",
        dest="threshold",
        metavar="TIME|FILE",
        default=None,
        help=f"Cut-off as '{TIMESTAMP_LAYOUT}', or a file whose modification time is the cut-off.",
    )
    _add_display_arguments(parser)
    parser.add_argument("directory", help="Directory to traverse.")
    return parser


def build_list_parser() -> argparse.ArgumentParser:
    """Parser for the unfiltered ``lslong`` command."""
    parser = argparse.ArgumentParser(
        prog="lslong",
        description="Recursively list every entry under a directory, ls -l style.",
    )
    _add_display_arguments(parser)
    parser.add_argument("directory", nargs="?", default=".", help="Directory to traverse. Defaults to '.'.")
    return parser


def _use_color(no_color: bool, out: TextIO) -> bool:
    """Color only on a TTY, when config allows it and ``--no-color`` is absent."""
    if no_color or not config.load_color():
        return False
    isatty = getattr(out, "isatty", None)
    return bool(isatty and isatty())


def run_listing(options: ListingOptions, out: TextIO, *, color: bool = False, headers: bool = True) -> int:
    """Print every visited directory's accepted entries; return the entry count."""
    count = 0
    for listing in iter_listings(options):
        for line in render_listing(listing, color=color, headers=headers):
            out.write(line + "\n")
        count += len(listing.entries)
    return count


def _run(prog: str, args: argparse.Namespace, threshold_value: str | None, filtering: bool) -> None:
    try:
        threshold = resolve_threshold(threshold_value) if filtering else None
        root = resolve_root(args.directory)
    except LsnewerError as exc:
        raise SystemExit(f"{prog}: {exc}") from exc

    show_hidden = config.load_show_hidden() and not args.skip_hidden
    headers = config.load_directory_headers() and not args.no_headers
    options = ListingOptions(root=root, threshold=threshold, show_hidden=show_hidden)
    run_listing(options, sys.stdout, color=_use_color(args.no_color, sys.stdout), headers=headers)


def main() -> None:
    """Parse CLI arguments and list entries newer than the ``-t`` cut-off.

    Exits non-zero with a message when the directory is unusable or the
    ``-t`` value is neither a timestamp nor an existing file. ``-h`` prints
    usage and exits successfully without traversing.
    """
    parser = build_parser()
    args = parser.parse_args()
    configure_logging(parser.prog, verbose=args.verbose)
    _run(parser.prog, args, args.threshold, filtering=True)


def main_list() -> None:
    """Parse CLI arguments and list every entry under the directory."""
    parser = build_list_parser()
    args = parser.parse_args()
    configure_logging(parser.prog, verbose=args.verbose)
    _run(parser.prog, args, None, filtering=False)


if __name__ == "__main__":
    main()

"""Command-line interface for finding images in named subdirectories.

Environment variables:
    IMAGE_FINDER_LIMIT: Default for --limit (non-negative integer)
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from .config import get_default_limit
from .core.models import Invocation, SearchReport
from .core.presenter import present
from .core.scanner import ImageScanner
from .core.selector import select_images
from .errors import SubdirectoryWarning, UsageError


def non_negative_int(value: str) -> int:
    """argparse type for --limit."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"limit must be non-negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-finder",
        description="Find images in specified subdirectories",
        epilog="Environment variables: IMAGE_FINDER_LIMIT (default for --limit)",
    )
    parser.add_argument("directory", help="Directory to search in")
    parser.add_argument(
        "subdirectories",
        nargs="*",
        help="Subdirectory names to search in",
    )
    parser.add_argument(
        "--limit", "-l",
        type=non_negative_int,
        default=None,
        help="Maximum number of images to display (random selection)",
    )
    parser.add_argument(
        "--names-only", "-n",
        action="store_true",
        help="Print only image names separated by spaces",
    )
    return parser


def resolve_invocation(args: argparse.Namespace) -> Invocation:
    """Validate parsed arguments and freeze them into an Invocation."""
    directory = Path(args.directory)
    if not directory.exists():
        raise UsageError(f"Directory '{directory}' does not exist")

    if not args.subdirectories:
        raise UsageError("Please provide at least one subdirectory to search in")

    limit = args.limit
    if limit is None:
        limit = get_default_limit()

    return Invocation(
        directory=directory,
        subdirectories=tuple(args.subdirectories),
        limit=limit,
        names_only=args.names_only,
    )


def print_warning(warning: SubdirectoryWarning) -> None:
    print(f"Warning: {warning}", file=sys.stderr)


def run(invocation: Invocation) -> SearchReport:
    """Scan the requested subdirectories and apply the limit."""
    found = ImageScanner.scan_subdirectories(
        invocation.directory,
        invocation.subdirectories,
        warn=print_warning,
    )
    selected = select_images(found, invocation.limit)
    return SearchReport(total_found=len(found), images=selected, limit=invocation.limit)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        invocation = resolve_invocation(args)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    report = run(invocation)
    present(report, names_only=invocation.names_only)
    return 0

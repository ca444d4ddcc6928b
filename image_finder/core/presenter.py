"""Text output for a search report."""

import sys
from typing import Optional, TextIO

from .models import SearchReport

NO_IMAGES_MESSAGE = "No images found in the specified subdirectories."


def summary_line(report: SearchReport) -> str:
    """Return the heading printed above the verbose listing."""
    if report.is_empty:
        return NO_IMAGES_MESSAGE
    if report.limit is None:
        return f"Found {report.total_found} image(s):"
    if report.limit_applied:
        return (
            f"Found {report.total_found} image(s), "
            f"displaying {report.limit} random selection(s):"
        )
    return f"Found {report.total_found} image(s) (limit {report.limit} not applied - showing all):"


def render_verbose(report: SearchReport) -> list[str]:
    lines = [summary_line(report)]
    lines.extend(f"  {image.display}" for image in report.images)
    return lines


def render_names_only(report: SearchReport) -> list[str]:
    # An empty scan prints nothing; an empty selection prints a blank line.
    if report.is_empty:
        return []
    return [" ".join(image.display for image in report.images)]


def present(report: SearchReport, names_only: bool = False, out: Optional[TextIO] = None) -> None:
    """Write the report to `out` (stdout by default)."""
    out = out or sys.stdout
    lines = render_names_only(report) if names_only else render_verbose(report)
    for line in lines:
        print(line, file=out)

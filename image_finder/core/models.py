"""Data models for a single search run."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class Invocation:
    """Resolved command-line arguments."""

    directory: Path
    subdirectories: tuple[str, ...]
    limit: Optional[int] = None
    names_only: bool = False


@dataclass(frozen=True)
class ImageRecord:
    """A discovered image file. Only the path is kept."""

    path: Path

    @property
    def display(self) -> str:
        return str(self.path)


@dataclass
class SearchReport:
    """Outcome of a scan after the limit has been applied."""

    total_found: int
    images: list[ImageRecord] = field(default_factory=list)  # the selection shown
    limit: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return self.total_found == 0

    @property
    def limit_applied(self) -> bool:
        return self.limit is not None and self.limit < self.total_found

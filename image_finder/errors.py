"""Error and warning types raised while resolving and scanning."""

from dataclasses import dataclass
from pathlib import Path


class UsageError(Exception):
    """Raised when the command line cannot be carried out."""
    pass


@dataclass(frozen=True)
class SubdirectoryWarning:
    """A named subdirectory that was skipped during the scan."""

    path: Path
    reason: str  # "missing" or "not_a_directory"

    @property
    def message(self) -> str:
        if self.reason == "missing":
            return f"Subdirectory '{self.path}' does not exist"
        return f"'{self.path}' is not a directory"

    def __str__(self) -> str:
        return self.message

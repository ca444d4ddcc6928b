"""Image Finder - locate image files inside named subdirectories.

Package structure:
    image_finder/
    ├── cli.py              # Command-line interface
    ├── config.py           # Environment-variable settings
    ├── errors.py           # UsageError / SubdirectoryWarning
    └── core/               # Core logic
        ├── models.py       # Data models (Invocation, ImageRecord, SearchReport)
        ├── scanner.py      # Recursive extension-based scanning
        ├── selector.py     # Random limit selection
        └── presenter.py    # Verbose and names-only output
"""

from .core.models import ImageRecord, Invocation, SearchReport
from .core.presenter import present, render_names_only, render_verbose, summary_line
from .core.scanner import ImageScanner
from .core.selector import select_images
from .errors import SubdirectoryWarning, UsageError

__all__ = [
    # Core
    "ImageRecord",
    "Invocation",
    "SearchReport",
    "ImageScanner",
    "select_images",
    # Output
    "present",
    "render_names_only",
    "render_verbose",
    "summary_line",
    # Errors
    "SubdirectoryWarning",
    "UsageError",
]

"""Recursive scanning for image files by extension."""

import os
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from ..errors import SubdirectoryWarning
from .models import ImageRecord


class ImageScanner:
    """Scans directories for images, judged by filename extension only."""

    IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".webp", ".svg"}

    @classmethod
    def is_image(cls, filepath: str | Path) -> bool:
        """Check if a file is an image based on extension."""
        return Path(filepath).suffix.lower() in cls.IMAGE_EXTENSIONS

    @classmethod
    def iter_images(cls, path: str | Path) -> Iterator[ImageRecord]:
        """
        Walk a directory tree and yield every image file below it.

        Symlinks are not followed and symlinked files are not reported.
        Directories that cannot be listed (permission denied, removed
        mid-scan) and entries that cannot be inspected are skipped.

        Args:
            path: Directory to scan recursively

        Yields:
            ImageRecord for each matching file, in traversal order
        """
        # os.walk drops directories whose listing fails
        for dirpath, _dirnames, filenames in os.walk(path):
            for filename in filenames:
                filepath = Path(dirpath) / filename
                if not cls.is_image(filepath):
                    continue
                try:
                    if filepath.is_symlink() or not filepath.is_file():
                        continue
                except OSError:
                    continue
                yield ImageRecord(path=filepath)

    @classmethod
    def scan_directory(cls, path: str | Path) -> list[ImageRecord]:
        """Scan a directory recursively and return all image records."""
        return list(cls.iter_images(path))

    @staticmethod
    def check_subdirectory(path: Path) -> Optional[SubdirectoryWarning]:
        """Return a warning if path cannot be scanned, None otherwise."""
        if not path.exists():
            return SubdirectoryWarning(path=path, reason="missing")
        if not path.is_dir():
            return SubdirectoryWarning(path=path, reason="not_a_directory")
        return None

    @classmethod
    def scan_subdirectories(
        cls,
        root: str | Path,
        names: Iterable[str],
        warn: Optional[Callable[[SubdirectoryWarning], None]] = None,
    ) -> list[ImageRecord]:
        """
        Scan each named subdirectory of root, in the order given.

        Args:
            root: Base directory the names are resolved against
            names: Subdirectory names; the same file is reported once per
                name it is reachable from
            warn: Called with a SubdirectoryWarning for every name that is
                missing or not a directory. Such names are skipped.

        Returns:
            Accumulated list of image records
        """
        root = Path(root)
        found: list[ImageRecord] = []

        for name in names:
            subdir_path = root / name
            warning = cls.check_subdirectory(subdir_path)
            if warning is not None:
                if warn is not None:
                    warn(warning)
                continue
            found.extend(cls.iter_images(subdir_path))

        return found

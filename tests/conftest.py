"""Shared fixtures for image_finder tests."""

from pathlib import Path

import pytest


def touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


@pytest.fixture(autouse=True)
def _clear_limit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("IMAGE_FINDER_LIMIT", raising=False)


@pytest.fixture
def image_tree(tmp_path: Path) -> Path:
    """Root with photos/ (2 images), art/ (3 nested images) and a plain file.

    Layout:
        photos/a.JPG, photos/b.txt, photos/c.png
        art/x.svg, art/deep/er/y.webp, art/deep/z.TIFF, art/noext, art/.png
        notes.md
    """
    touch(tmp_path / "photos" / "a.JPG")
    touch(tmp_path / "photos" / "b.txt")
    touch(tmp_path / "photos" / "c.png")
    touch(tmp_path / "art" / "x.svg")
    touch(tmp_path / "art" / "deep" / "er" / "y.webp")
    touch(tmp_path / "art" / "deep" / "z.TIFF")
    touch(tmp_path / "art" / "noext")
    touch(tmp_path / "art" / ".png")
    touch(tmp_path / "notes.md")
    return tmp_path

"""Core logic - data models, scanning, selection and output."""

from .models import ImageRecord, Invocation, SearchReport
from .scanner import ImageScanner
from .selector import select_images

__all__ = ["ImageRecord", "Invocation", "SearchReport", "ImageScanner", "select_images"]

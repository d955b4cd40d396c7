"""Core engine for classifying and relocating files."""

from .models import (
    CATEGORY_EXTENSIONS, EntryOutcome, EntryResult, FileCategory, OrganizeStats,
    classify, get_extension
)
from .organizer import FileOrganizer

__all__ = [
    "CATEGORY_EXTENSIONS",
    "EntryOutcome",
    "EntryResult",
    "FileCategory",
    "OrganizeStats",
    "classify",
    "get_extension",
    "FileOrganizer"
]

"""File Organizer - Sort the files of a directory into category folders."""

__version__ = "0.1.0"
__author__ = "File Organizer Team"
__description__ = "Sort the files of a directory into category folders"

# Import main components for programmatic access
from .core.models import FileCategory, OrganizeStats, classify
from .core.organizer import FileOrganizer
from .cli.main import cli

__all__ = [
    "FileCategory",
    "OrganizeStats",
    "classify",
    "FileOrganizer",
    "cli"
]

"""Core data models and enums for the File Organizer."""

import time
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Optional


class FileCategory(str, Enum):
    """Destination categories. The value is the folder name."""
    DOCUMENTS = "documents"
    IMAGES = "images"
    VIDEOS = "videos"
    AUDIO = "audio"
    ARCHIVES = "archives"
    CODE = "code"
    EXECUTABLES = "executables"
    OTHER = "other"

    @classmethod
    def get_extensions(cls) -> Mapping["FileCategory", FrozenSet[str]]:
        """Get mapping of categories to their recognized extensions."""
        return CATEGORY_EXTENSIONS

    @classmethod
    def classify(cls, extension: str) -> "FileCategory":
        """
        Classify an extension (without leading dot).

        Categories are checked in table order and the first one that lists
        the extension wins. Unknown extensions map to OTHER.
        """
        ext = extension.lower()
        for category, extensions in cls.get_extensions().items():
            if ext in extensions:
                return category
        return cls.OTHER

    @classmethod
    def folder_names(cls) -> List[str]:
        """Names of every category folder, table order then 'other'."""
        return [category.value for category in cls.get_extensions()] + [cls.OTHER.value]


# Insertion order is the lookup order: 'dmg' resolves to archives.
CATEGORY_EXTENSIONS: Mapping[FileCategory, FrozenSet[str]] = MappingProxyType({
    FileCategory.DOCUMENTS: frozenset({
        "pdf", "doc", "docx", "txt", "rtf", "odt",
        "xls", "xlsx", "csv", "ppt", "pptx",
    }),
    FileCategory.IMAGES: frozenset({
        "jpg", "jpeg", "png", "gif", "bmp", "svg",
        "webp", "tiff", "ico",
    }),
    FileCategory.VIDEOS: frozenset({
        "mp4", "mkv", "avi", "mov", "wmv", "flv",
        "webm", "3gp", "mpeg",
    }),
    FileCategory.AUDIO: frozenset({
        "mp3", "wav", "ogg", "flac", "aac", "m4a", "wma",
    }),
    FileCategory.ARCHIVES: frozenset({
        "zip", "rar", "7z", "tar", "gz", "bz2", "iso", "dmg",
    }),
    FileCategory.CODE: frozenset({
        "js", "py", "java", "c", "cpp", "cs", "php",
        "html", "css", "json", "xml", "yaml", "sql",
    }),
    FileCategory.EXECUTABLES: frozenset({
        "exe", "msi", "bat", "sh", "app", "dmg",
    }),
})


def classify(extension: str) -> FileCategory:
    """Return the category owning ``extension``, or OTHER."""
    return FileCategory.classify(extension)


def get_extension(filename: str) -> str:
    """Return the text after the last dot of ``filename``, or '' if none."""
    _, dot, extension = filename.rpartition(".")
    if not dot:
        return ""
    return extension


class EntryOutcome(Enum):
    """What happened to a single directory entry."""
    NOT_A_FILE = "not_a_file"
    HIDDEN = "hidden"
    NO_EXTENSION = "no_extension"
    ALREADY_ORGANIZED = "already_organized"
    MOVED = "moved"
    FAILED = "failed"

    @property
    def is_skip(self) -> bool:
        return self in (EntryOutcome.HIDDEN, EntryOutcome.NO_EXTENSION,
                        EntryOutcome.ALREADY_ORGANIZED)


@dataclass
class EntryResult:
    """Outcome of the classify-or-move decision for one entry."""
    name: str
    outcome: EntryOutcome
    category: Optional[FileCategory] = None
    message: Optional[str] = None
    dry_run: bool = False


@dataclass
class OrganizeStats:
    """Counters for one organizer run."""
    total: int = 0
    moved: int = 0
    skipped: int = 0
    errors: int = 0
    failed_files: List[str] = field(default_factory=list)
    dry_run: bool = False
    started_at: float = field(default_factory=time.time)
    duration: float = 0.0

    def record(self, result: EntryResult) -> None:
        """Tally one entry result."""
        if result.outcome is EntryOutcome.NOT_A_FILE:
            return

        self.total += 1
        if result.outcome.is_skip:
            self.skipped += 1
        elif result.outcome is EntryOutcome.MOVED:
            self.moved += 1
        else:
            self.errors += 1
            self.failed_files.append(result.name)

    def finish(self) -> "OrganizeStats":
        """Stamp the run duration."""
        self.duration = time.time() - self.started_at
        return self

    @property
    def is_consistent(self) -> bool:
        """Every counted file landed in exactly one outcome bucket."""
        return self.total == self.moved + self.skipped + self.errors

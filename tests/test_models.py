"""Tests for the category table, classifier and run statistics."""

import pytest

from file_organizer.core.models import (
    CATEGORY_EXTENSIONS, EntryOutcome, EntryResult, FileCategory, OrganizeStats,
    classify, get_extension
)


class TestClassify:
    """Test extension classification."""

    def test_every_table_extension_maps_to_its_category(self):
        for category, extensions in CATEGORY_EXTENSIONS.items():
            for extension in extensions:
                if extension == "dmg":
                    continue
                assert classify(extension) is category

    @pytest.mark.parametrize("extension", ["xyz", "md", "psd", "", "tar.gz"])
    def test_unknown_extensions_map_to_other(self, extension):
        assert classify(extension) is FileCategory.OTHER

    def test_classification_is_case_insensitive(self):
        assert classify("JPG") == classify("jpg") == FileCategory.IMAGES
        assert classify("Pdf") is FileCategory.DOCUMENTS
        assert classify("MP4") is FileCategory.VIDEOS

    def test_overlapping_extension_resolves_to_first_category(self):
        # dmg is listed under both archives and executables
        assert "dmg" in CATEGORY_EXTENSIONS[FileCategory.EXECUTABLES]
        assert classify("dmg") is FileCategory.ARCHIVES

    def test_category_compares_equal_to_folder_name(self):
        assert classify("py") == "code"
        assert FileCategory.OTHER.value == "other"



class TestCategoryTable:
    """Test the static category table."""

    def test_folder_names_in_table_order_then_other(self):
        assert FileCategory.folder_names() == [
            "documents", "images", "videos", "audio",
            "archives", "code", "executables", "other",
        ]

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            CATEGORY_EXTENSIONS[FileCategory.OTHER] = frozenset({"md"})

    def test_extensions_are_lowercase_without_dot(self):
        for extensions in CATEGORY_EXTENSIONS.values():
            for extension in extensions:
                assert extension == extension.lower()
                assert not extension.startswith(".")


class TestGetExtension:
    """Test extension extraction from file names."""

    @pytest.mark.parametrize("filename,expected", [
        ("report.pdf", "pdf"),
        ("photo.JPG", "JPG"),
        ("archive.tar.gz", "gz"),
        ("README", ""),
        ("trailing.", ""),
        (".env", "env"),
    ])
    def test_extension_after_last_dot(self, filename, expected):
        assert get_extension(filename) == expected


class TestOrganizeStats:
    """Test run statistics bookkeeping."""

    def test_starts_at_zero(self):
        stats = OrganizeStats()
        assert (stats.total, stats.moved, stats.skipped, stats.errors) == (0, 0, 0, 0)
        assert stats.is_consistent

    def test_record_routes_outcomes_to_one_bucket(self):
        stats = OrganizeStats()
        stats.record(EntryResult("notes", EntryOutcome.NOT_A_FILE))
        stats.record(EntryResult(".env", EntryOutcome.HIDDEN))
        stats.record(EntryResult("README", EntryOutcome.NO_EXTENSION))
        stats.record(EntryResult("a.pdf", EntryOutcome.ALREADY_ORGANIZED, FileCategory.DOCUMENTS))
        stats.record(EntryResult("b.pdf", EntryOutcome.MOVED, FileCategory.DOCUMENTS))
        stats.record(EntryResult("c.png", EntryOutcome.FAILED, FileCategory.IMAGES, "boom"))

        assert stats.total == 5
        assert stats.moved == 1
        assert stats.skipped == 3
        assert stats.errors == 1
        assert stats.failed_files == ["c.png"]
        assert stats.is_consistent

    def test_skip_outcomes(self):
        assert EntryOutcome.HIDDEN.is_skip
        assert EntryOutcome.NO_EXTENSION.is_skip
        assert EntryOutcome.ALREADY_ORGANIZED.is_skip
        assert not EntryOutcome.MOVED.is_skip
        assert not EntryOutcome.FAILED.is_skip

    def test_finish_sets_duration(self):
        stats = OrganizeStats().finish()
        assert stats.duration >= 0.0

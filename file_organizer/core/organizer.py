"""Directory organizer for the File Organizer."""

import logging
from pathlib import Path
from typing import Callable, List, Optional
from .models import EntryOutcome, EntryResult, FileCategory, OrganizeStats, get_extension
from .exceptions import (
    DestinationExistsError, FileSystemError, ListingError, MoveError,
    PathNotFoundError, PreparationError
)
from .error_handler import ErrorHandler, safe_path_operation


class FileOrganizer:
    """Moves the files of one directory into per-category folders."""

    def __init__(self, entry_callback: Optional[Callable[[EntryResult], None]] = None,
                 config=None, dry_run: Optional[bool] = None):
        """
        Initialize the file organizer.

        Args:
            entry_callback: Optional callback invoked with the EntryResult of
                            every directory entry, in processing order.
            config: Optional configuration object
            dry_run: Overrides the configured dry-run setting when not None
        """
        # Import here to avoid circular imports
        from .config import get_config

        self.entry_callback = entry_callback
        self.config = config or get_config()
        self.dry_run = self.config.organize.dry_run if dry_run is None else dry_run
        self.error_handler = ErrorHandler()
        self.logger = logging.getLogger(__name__)
        self._last_move_error: Optional[str] = None

    def organize(self, target_dir: Path) -> OrganizeStats:
        """
        Organize the immediate contents of a directory.

        Args:
            target_dir: Directory whose files are sorted into category folders

        Returns:
            OrganizeStats for the run

        Raises:
            PathNotFoundError: If target_dir doesn't exist
            FileSystemError: If target_dir is not a directory
            ListingError: If target_dir cannot be read
            PreparationError: If a category folder cannot be created
        """
        target_dir = Path(target_dir).resolve()
        stats = OrganizeStats(dry_run=self.dry_run)

        self._validate_target(target_dir)

        if self.dry_run:
            self.logger.info("Dry run: no folders will be created and no files moved")
        else:
            self.ensure_category_folders(target_dir)

        # Snapshot first so moves never disturb the listing
        entries = self.list_entries(target_dir)
        self.logger.debug(f"Found {len(entries)} entries in {target_dir}")

        for entry in entries:
            result = self.process_entry(entry, target_dir)
            stats.record(result)
            self._notify(result)

        stats.finish()

        if stats.failed_files:
            self.error_handler.log_error_summary(stats.failed_files, f"organizing {target_dir}")

        self.logger.info(
            f"Organized {target_dir}: total={stats.total} moved={stats.moved} "
            f"skipped={stats.skipped} errors={stats.errors}"
        )
        return stats

    def process_entry(self, entry: Path, target_dir: Path) -> EntryResult:
        """
        Decide and apply the outcome for one directory entry.

        Args:
            entry: Path of the entry inside target_dir
            target_dir: Directory being organized

        Returns:
            EntryResult describing what happened
        """
        name = entry.name

        if not self.is_regular_file(entry):
            self.logger.info(f"Skipping non-file entry: {name}")
            return EntryResult(name, EntryOutcome.NOT_A_FILE)

        if name.startswith("."):
            self.logger.info(f"Skipping hidden file: {name}")
            return EntryResult(name, EntryOutcome.HIDDEN)

        extension = get_extension(name)
        if not extension:
            self.logger.info(f"Skipping file without extension: {name}")
            return EntryResult(name, EntryOutcome.NO_EXTENSION)

        category = FileCategory.classify(extension)
        dest_folder = target_dir / category.value

        if entry.parent == dest_folder:
            self.logger.info(f"File already in correct folder: {name}")
            return EntryResult(name, EntryOutcome.ALREADY_ORGANIZED, category)

        if self.dry_run:
            try:
                self._check_destination(entry, dest_folder)
            except MoveError as e:
                self.logger.info(f"Would fail to move {name}: {e}")
                return EntryResult(name, EntryOutcome.FAILED, category, message=str(e), dry_run=True)

            self.logger.info(f"Would move {name} to {category.value}/")
            return EntryResult(name, EntryOutcome.MOVED, category, dry_run=True)

        self.logger.info(f"Moving {name} to {category.value}/")
        if self.move_file(entry, dest_folder):
            return EntryResult(name, EntryOutcome.MOVED, category)

        return EntryResult(name, EntryOutcome.FAILED, category,
                           message=self._last_move_error)

    def ensure_category_folders(self, target_dir: Path) -> List[Path]:
        """
        Create every missing category folder directly under target_dir.

        Existing folders are left untouched, so calling this repeatedly is
        safe.

        Args:
            target_dir: Existing directory to hold the category folders

        Returns:
            List of folders that were created by this call

        Raises:
            PreparationError: If any folder cannot be created
        """
        created = []

        for folder_name in FileCategory.folder_names():
            folder_path = Path(target_dir) / folder_name

            try:
                # Any entry holding the name is left alone, even a plain file
                if folder_path.exists() or folder_path.is_symlink():
                    self.logger.debug(f"Folder already exists: {folder_name}")
                    continue

                folder_path.mkdir()
            except OSError as e:
                self.logger.error(f"Failed to create folder {folder_path}: {e}")
                raise PreparationError(
                    f"Cannot create category folder '{folder_name}' in {target_dir}: {e}"
                ) from e

            self.logger.info(f"Created folder: {folder_name}")
            created.append(folder_path)

        return created

    def move_file(self, source: Path, dest_folder: Path) -> bool:
        """
        Move a single file into dest_folder, keeping its name.

        A file already present at the destination is never overwritten; the
        move is refused instead.

        Args:
            source: File to move
            dest_folder: Folder receiving the file

        Returns:
            True if the file was moved, False otherwise
        """
        self._last_move_error = None

        try:
            self._relocate(Path(source), Path(dest_folder))
            return True
        except MoveError as e:
            self._last_move_error = str(e)
            self.logger.info(f"Failed to move file {Path(source).name}: {e}")
            return False

    def _check_destination(self, source: Path, dest_folder: Path) -> Path:
        """Return the move target for source, raising MoveError if it is not usable."""
        destination = dest_folder / source.name

        try:
            if dest_folder.exists() and not dest_folder.is_dir():
                raise MoveError(f"destination folder is not a directory: {dest_folder}", source=source)

            # lexists-style check: a dangling symlink also occupies the name
            if destination.exists() or destination.is_symlink():
                raise DestinationExistsError(
                    f"destination already exists: {destination}", source=source
                )
        except OSError as e:
            raise MoveError(str(e), source=source) from e

        return destination

    def _relocate(self, source: Path, dest_folder: Path) -> Path:
        """Rename source into dest_folder, raising MoveError on failure."""
        destination = self._check_destination(source, dest_folder)

        try:
            source.rename(destination)
        except OSError as e:
            raise MoveError(str(e), source=source) from e

        return destination

    @safe_path_operation(fallback=ListingError)
    def list_entries(self, target_dir: Path) -> List[Path]:
        """
        Snapshot the immediate entries of target_dir.

        Args:
            target_dir: Directory to list

        Returns:
            Entries in the order the file system returns them

        Raises:
            ListingError: If the directory cannot be read
        """
        return list(Path(target_dir).iterdir())

    def is_regular_file(self, path: Path) -> bool:
        """Check whether path is a regular file; stat failures count as not a file."""
        try:
            return path.is_file()
        except OSError as e:
            self.logger.warning(f"Cannot stat {path}: {e}")
            return False

    def _validate_target(self, path: Path):
        """
        Validate that the target path exists and is a directory.

        Raises:
            PathNotFoundError: If path doesn't exist
            FileSystemError: If path is not a directory
        """
        if not path.exists():
            raise PathNotFoundError(f"Directory does not exist: {path}")

        if not path.is_dir():
            raise FileSystemError(f"Path is not a directory: {path}")

    def _notify(self, result: EntryResult):
        """Hand a result to the entry callback without letting it abort the run."""
        if not self.entry_callback:
            return

        try:
            self.entry_callback(result)
        except Exception as e:
            self.logger.warning(f"Entry callback error: {e}")

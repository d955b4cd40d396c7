"""Custom exceptions for the File Organizer."""


class FileOrganizerError(Exception):
    """Base exception for file organization errors."""
    pass


class FileSystemError(FileOrganizerError):
    """Exception for file system related errors."""
    pass


class ConfigurationError(FileOrganizerError):
    """Exception for configuration related errors."""
    pass


class PermissionDeniedError(FileSystemError):
    """Exception for file permission errors."""
    pass


class PathNotFoundError(FileSystemError):
    """Exception for path not found errors."""
    pass


class ListingError(FileSystemError):
    """Exception raised when the target directory cannot be read."""
    pass


class PreparationError(FileSystemError):
    """Exception raised when a category folder cannot be created."""
    pass


class MoveError(FileSystemError):
    """Exception for a single file that could not be relocated."""

    def __init__(self, message, source=None):
        super().__init__(message)
        self.source = source


class DestinationExistsError(MoveError):
    """Exception raised when the move target is already taken."""
    pass

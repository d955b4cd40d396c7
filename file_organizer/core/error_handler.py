"""Error handling utilities for the File Organizer."""

import errno
import logging
from functools import wraps
from pathlib import Path
from typing import Callable, List, Optional, Type, Union

from .exceptions import (
    FileOrganizerError, FileSystemError, PermissionDeniedError, PathNotFoundError
)


logger = logging.getLogger(__name__)


class ErrorHandler:
    """Centralized translation and reporting of file system errors."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize error handler.

        Args:
            logger: Logger instance to use for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def handle_file_system_error(
        self,
        error: Exception,
        file_path: Union[str, Path],
        fallback: Type[FileSystemError] = FileSystemError,
    ) -> None:
        """
        Translate an OS level error into the organizer's exception hierarchy.

        Args:
            error: The exception that occurred
            file_path: Path where the error occurred
            fallback: Exception type raised for errors with no specific mapping

        Raises:
            FileSystemError subclass matching the error
        """
        file_path = Path(file_path) if isinstance(file_path, str) else file_path

        if isinstance(error, FileOrganizerError):
            raise error

        if isinstance(error, OSError):
            if error.errno in (errno.EACCES, errno.EPERM):
                self.logger.warning(f"Permission denied accessing {file_path}: {error}")
                raise PermissionDeniedError(f"Permission denied: {file_path}") from error
            elif error.errno == errno.ENOENT:
                self.logger.warning(f"Path not found: {file_path}")
                raise PathNotFoundError(f"Path not found: {file_path}") from error
            elif error.errno == errno.ENOSPC:
                self.logger.error(f"No space left on device: {error}")
                raise FileSystemError("No space left on device") from error
            else:
                self.logger.error(f"File system error accessing {file_path}: {error}")
                raise fallback(f"File system error at {file_path}: {error}") from error

        self.logger.error(f"Unexpected file system error: {error}")
        raise fallback(f"Unexpected file system error: {error}") from error

    def log_error_summary(self, failed_files: List[str], operation: str = "operation"):
        """
        Log a summary of files that failed during an operation.

        Args:
            failed_files: Names of the files that could not be processed
            operation: Description of the operation
        """
        if not failed_files:
            return

        self.logger.warning(f"Error summary for {operation}: {len(failed_files)} file(s) failed")
        for name in failed_files[:10]:
            self.logger.info(f"  {name}")
        if len(failed_files) > 10:
            self.logger.info(f"  ... and {len(failed_files) - 10} more")


def safe_path_operation(fallback: Type[FileSystemError] = FileSystemError):
    """
    Decorator translating OSError raised by a path operation.

    The first ``str`` or ``Path`` positional argument is reported as the
    failing path.

    Args:
        fallback: Exception type raised for errors with no specific mapping
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except OSError as e:
                file_path = None
                for arg in args:
                    if isinstance(arg, (str, Path)):
                        file_path = arg
                        break

                ErrorHandler().handle_file_system_error(e, file_path or "unknown", fallback)

        return wrapper
    return decorator

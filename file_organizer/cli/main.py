"""Command line interface for the File Organizer."""

import click
import logging
from dataclasses import replace
from pathlib import Path
from rich.console import Console
from rich.markup import escape
from .. import __version__
from ..core.config import setup_config
from ..core.logging_config import setup_logging
from ..core.organizer import FileOrganizer
from ..core.exceptions import (
    ConfigurationError, FileOrganizerError, FileSystemError, ListingError,
    PathNotFoundError, PermissionDeniedError, PreparationError
)
from .reporter import Reporter

# Errors go to stderr so they stay apart from the run output
error_console = Console(stderr=True, highlight=False, soft_wrap=True)

USAGE_HINT = "Try: file-organizer <target-directory>"


@click.command()
@click.version_option(version=__version__)
@click.argument("target_directory", required=False, type=click.Path(path_type=Path))
@click.option("--dry-run/--no-dry-run", default=None,
              help="Show what would be moved without touching any file (default from config)")
@click.option("--quiet", "-q", is_flag=True, help="Only print the banner and the summary")
@click.option('--config', '-c', type=click.Path(path_type=Path),
              help='Configuration file path (INI)')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']),
              help='Set logging level (overrides config)')
@click.option('--log-file', type=click.Path(path_type=Path),
              help='Log file path (overrides config)')
@click.pass_context
def cli(ctx, target_directory, dry_run, quiet, config, log_level, log_file):
    """Sort the files of TARGET_DIRECTORY into category folders."""
    if target_directory is None:
        raise click.UsageError(f"No target directory provided. {USAGE_HINT}", ctx=ctx)

    try:
        config_manager = setup_config(config)
    except ConfigurationError as e:
        handle_cli_error(e, "configuration")
        raise click.Abort()
    app_config = config_manager.get_config()

    # Override logging config if command line options provided
    logging_config = app_config.logging
    if log_level or log_file:
        logging_config = replace(
            logging_config,
            level=log_level or logging_config.level,
            file_path=log_file or logging_config.file_path,
            file_enabled=bool(log_file) or logging_config.file_enabled
        )

    logging_manager = setup_logging(logging_config)
    ctx.call_on_close(logging_manager.close)

    target_dir = target_directory.resolve()
    show_entries = app_config.organize.show_entries and not quiet

    reporter = Reporter(show_entries=show_entries)
    organizer = FileOrganizer(entry_callback=reporter.entry, config=app_config, dry_run=dry_run)

    reporter.start(target_dir, dry_run=organizer.dry_run)

    try:
        stats = organizer.organize(target_dir)
    except Exception as e:
        handle_cli_error(e, "organize")
        raise click.Abort()

    reporter.summary(stats)


def handle_cli_error(error: Exception, operation: str = "operation") -> None:
    """
    Handle CLI errors with appropriate user feedback.

    Args:
        error: The exception that occurred
        operation: Description of the operation that failed
    """
    if isinstance(error, PathNotFoundError):
        error_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
        error_console.print("[yellow]Please check that the path exists and is accessible.[/yellow]")
    elif isinstance(error, PermissionDeniedError):
        error_console.print(f"[bold red]Permission Error:[/bold red] {escape(str(error))}")
        error_console.print("[yellow]Please check directory permissions or run with appropriate privileges.[/yellow]")
    elif isinstance(error, PreparationError):
        error_console.print(f"[bold red]Preparation Error:[/bold red] {escape(str(error))}")
        error_console.print("[yellow]No files were moved. Check that the directory is writable.[/yellow]")
    elif isinstance(error, ListingError):
        error_console.print(f"[bold red]Listing Error:[/bold red] {escape(str(error))}")
        error_console.print("[yellow]The directory could not be read. No files were moved.[/yellow]")
    elif isinstance(error, FileSystemError):
        error_console.print(f"[bold red]File System Error:[/bold red] {escape(str(error))}")
    elif isinstance(error, ConfigurationError):
        error_console.print(f"[bold red]Configuration Error:[/bold red] {escape(str(error))}")
    elif isinstance(error, FileOrganizerError):
        error_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    else:
        error_console.print(f"[bold red]Unexpected Error:[/bold red] {escape(str(error))}")
        error_console.print("[yellow]An unexpected error occurred. Please check the logs for more details.[/yellow]")

    logger = logging.getLogger(__name__)
    logger.error(f"CLI error in {operation}: {error}")
    logger.debug("Traceback for CLI error", exc_info=error)


if __name__ == "__main__":
    cli()

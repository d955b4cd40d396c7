"""Console output for organizer runs."""

from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.markup import escape
from ..core.models import EntryOutcome, EntryResult, OrganizeStats


class Reporter:
    """Prints the start banner, per-entry lines and the run summary."""

    def __init__(self, console: Optional[Console] = None, error_console: Optional[Console] = None,
                 show_entries: bool = True):
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.error_console = error_console or Console(stderr=True, highlight=False, soft_wrap=True)
        self.show_entries = show_entries

    def start(self, target_dir: Path, dry_run: bool = False):
        """Print the banner naming the directory being organized."""
        self.console.print("\n[bold blue]=== File Organizer ===[/bold blue]")
        self.console.print(f"Organizing files in: [bold]{escape(str(target_dir))}[/bold]")
        if dry_run:
            self.console.print("[bold yellow]DRY RUN MODE: no files will be moved[/bold yellow]")
        self.console.print("[bold blue]======================[/bold blue]\n")

    def entry(self, result: EntryResult):
        """Print one line for a processed entry."""
        if not self.show_entries:
            return

        name = result.name
        outcome = result.outcome

        if outcome is EntryOutcome.NOT_A_FILE:
            self.info(f"Skipping directory: {name}")
        elif outcome in (EntryOutcome.HIDDEN, EntryOutcome.NO_EXTENSION):
            self.info(f"Skipping file: {name} (hidden or no extension)")
        elif outcome is EntryOutcome.ALREADY_ORGANIZED:
            self.info(f"File already in correct folder: {name}")
        elif outcome is EntryOutcome.MOVED:
            verb = "Would move" if result.dry_run else "Moved"
            self.success(f"{verb} {name} to {result.category.value}/")
        elif result.dry_run:
            self.error(f"Would fail to move file {name}: {result.message}")
        else:
            self.error(f"Failed to move file {name}: {result.message}")

    def summary(self, stats: OrganizeStats):
        """Print the end-of-run counts. The errors line only appears when non-zero."""
        moved_label = "Files to move" if stats.dry_run else "Files moved"

        self.console.print("\n[bold]=== Operation Summary ===[/bold]")
        self.console.print(f"Total files processed: [bold]{stats.total}[/bold]")
        self.console.print(f"{moved_label}: [bold green]{stats.moved}[/bold green]")
        self.console.print(f"Files skipped: [bold]{stats.skipped}[/bold]")

        if stats.errors > 0:
            self.console.print(f"Errors encountered: [bold red]{stats.errors}[/bold red]")

        self.console.print(f"Completed in {stats.duration:.2f} seconds")
        self.console.print("[bold]=========================[/bold]\n")

    def info(self, message: str):
        self.console.print(f"[blue]i[/blue] {escape(message)}")

    def success(self, message: str):
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str):
        self.error_console.print(f"[bold red]Error:[/bold red] {escape(message)}")

"""Rich-based progress reporter implementation."""
from __future__ import annotations

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    MofNCompleteColumn,
    TimeElapsedColumn,
    TaskID,
)
from rich.table import Table
from rich.panel import Panel
from rich.text import Text

from ..core.errors import ErrorKind
from ..core.models import RelocationContext, RelocationResult
from ..services.batch import RelocationStats


PACKAGE_LOGGER = "cultured_renamer"


def configure_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """Route the package's log records through Rich.

    Args:
        verbose: Show DEBUG records (folder listings, name steps).
        console: Console to log to. Defaults to stderr.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Replace a handler from an earlier call instead of stacking them
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    logger.addHandler(RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        markup=False,
    ))
    return logger


class RichProgressReporter:
    """Progress reporter using Rich for terminal output.

    Implements the ProgressReporter protocol with Rich console output.
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        console: Optional[Console] = None,
    ):
        """Initialize the reporter.

        Args:
            verbose: Enable verbose output.
            quiet: Suppress all non-essential output.
            console: Console to print to. Defaults to stderr.
        """
        self._console = console or Console(stderr=True)
        self._verbose = verbose
        self._quiet = quiet
        self._progress: Optional[Progress] = None
        self._current_task_id: Optional[TaskID] = None
        self._phase_name: str = ""

    # --- Phase Management ---

    def start_phase(self, name: str, total: int) -> None:
        """Start a new processing phase with progress bar."""
        self._phase_name = name

        if self._quiet:
            return

        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(bar_width=40),
            MofNCompleteColumn(),
            TextColumn("[cyan]•"),
            TimeElapsedColumn(),
            console=self._console,
            transient=True,
        )
        self._progress.start()
        self._current_task_id = self._progress.add_task(name, total=total)

    def advance_phase(self, amount: int = 1) -> None:
        """Advance the current phase by amount."""
        if self._progress and self._current_task_id is not None:
            self._progress.advance(self._current_task_id, amount)

    def end_phase(self) -> None:
        """End the current phase."""
        if self._progress:
            self._progress.stop()
            self._progress = None
            self._current_task_id = None

    # --- Logging Methods ---

    def info(self, message: str) -> None:
        """Log an info message."""
        if not self._quiet:
            self._console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def success(self, message: str) -> None:
        """Log a success message."""
        if not self._quiet:
            self._console.print(f"[green]✓[/green] {escape(message)}")

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self._console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        """Log an error message."""
        self._console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def debug(self, message: str) -> None:
        """Log a debug message (only in verbose mode)."""
        if self._verbose:
            self._console.print(f"[dim]  {escape(message)}[/dim]")

    # --- Specialized Output ---

    def print_header(self, title: str) -> None:
        """Print a styled header."""
        if self._quiet:
            return

        text = Text(title, style="bold cyan")
        self._console.print(Panel(text, border_style="cyan"))

    def print_config(self, config_items: dict) -> None:
        """Print configuration as a table."""
        if self._quiet:
            return

        table = Table(title="Configuration", show_header=True, header_style="bold")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="white")

        for key, value in config_items.items():
            table.add_row(key, Text(str(value)))

        self._console.print(table)

    def print_results(
        self,
        contexts: list[RelocationContext],
        results: list[RelocationResult],
    ) -> None:
        """Print one row per planned relocation."""
        table = Table(title="Relocation Plan", show_header=True, header_style="bold")
        table.add_column("Source", style="white")
        table.add_column("New Name", style="green")
        table.add_column("Destination", style="cyan")
        table.add_column("Subfolder", style="cyan")

        for ctx, result in zip(contexts, results):
            if result.is_success:
                table.add_row(
                    Text(ctx.file.file_name),
                    Text(result.file_name),
                    Text(result.destination_folder.name),
                    Text(result.subfolder),
                )
            else:
                table.add_row(
                    Text(ctx.file.file_name),
                    Text(result.error.message, style="red"),
                    "",
                    "",
                )

        self._console.print(table)

    def print_stats(self, stats: RelocationStats) -> None:
        """Print planning statistics."""
        if self._quiet:
            return

        table = Table(title="Planning Complete", show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Count", style="green", justify="right")

        table.add_row("Files", str(stats.total))
        table.add_row("Planned", str(stats.planned))
        table.add_row("Failed", str(stats.failed))

        for kind in ErrorKind:
            count = stats.failures_of(kind)
            if count:
                table.add_row(f"  {kind.value}", str(count))

        self._console.print(table)

    # --- Context Managers ---

    def __enter__(self) -> "RichProgressReporter":
        return self

    def __exit__(self, *args) -> None:
        self.end_phase()


class QuietProgressReporter:
    """Minimal progress reporter that only shows errors."""

    def start_phase(self, name: str, total: int) -> None:
        pass

    def advance_phase(self, amount: int = 1) -> None:
        pass

    def end_phase(self) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        print(f"WARNING: {message}", file=sys.stderr)

    def error(self, message: str) -> None:
        print(f"ERROR: {message}", file=sys.stderr)

    def debug(self, message: str) -> None:
        pass

    def print_header(self, title: str) -> None:
        pass

    def print_config(self, config_items: dict) -> None:
        pass

    def print_results(
        self,
        contexts: list[RelocationContext],
        results: list[RelocationResult],
    ) -> None:
        pass

    def print_stats(self, stats: RelocationStats) -> None:
        pass

    def __enter__(self) -> "QuietProgressReporter":
        return self

    def __exit__(self, *args) -> None:
        pass

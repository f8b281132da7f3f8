"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Uses Rich library for spinners, colored output and preview panels. Supports
verbosity levels and --no-color flag.
"""

import json
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel
from rich.spinner import Spinner

from src.models.preview import PreviewPayload


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Preview resolved")
        >>> with handler.spinner("Resolving..."):
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow."""
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(escape(message))

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    def print_json(self, data: Dict[str, Any]) -> None:
        """Display data as indented JSON, unstyled so it can be piped."""
        self.console.print(
            json.dumps(data, indent=2, ensure_ascii=False),
            markup=False,
            soft_wrap=True,
        )

    def print_preview(self, payload: PreviewPayload) -> None:
        """Display a link preview roughly as the chat client shows it.

        Args:
            payload: Resolved preview
        """
        body = escape(payload.text.rstrip('\n')) or "[dim](empty page)[/dim]"
        self.console.print(Panel(
            body,
            title=f"[bold]{escape(payload.title) or '(untitled)'}[/bold]",
            title_align="left",
            subtitle=escape(payload.footer),
            subtitle_align="left",
        ))
        self.console.print(f"[dim]{escape(payload.title_link)}[/dim]")

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner for single operations.

        Example:
            >>> with handler.spinner("Fetching page..."):
            ...     pass
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10, transient=True):
            yield

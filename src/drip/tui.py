"""Rich console output for the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from drip.diff import RecipeDiff


class TUI:
    """Text User Interface for drip (non-interactive)."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize TUI.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_diff(self, diff: RecipeDiff) -> None:
        """Display the recipe/local formula difference.

        A direction with no differences prints nothing.

        Args:
            diff: The computed difference.
        """
        sections = [
            (diff.missing, "present in Recipe but not installed"),
            (diff.extra, "installed locally but not recorded in Recipe"),
        ]
        for names, description in sections:
            if not names:
                continue
            self.console.print(f"[bold]{len(names)} formula(s) {description}:[/bold]")
            for name in sorted(names):
                self.console.print(f"  {escape(name)}")
            self.console.print()

    def show_success(self, message: str) -> None:
        """Display success message.

        Args:
            message: Message to display.
        """
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Display error message.

        Args:
            message: Message to display.
        """
        self.console.print(f"[red]✗[/red] {escape(message)}")

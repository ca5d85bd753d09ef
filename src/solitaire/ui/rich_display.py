"""Rich-based terminal output for rendered game states.

The grid is printed as plain unwrapped text so its monospace alignment
reaches the terminal unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.text import Text

from solitaire.ui.display import GridRenderer

if TYPE_CHECKING:
    from solitaire.models.state import GameState


class RichDisplay:
    """Writes rendered game states to a Rich console."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()
        self.renderer = GridRenderer()

    def show(self, state: "GameState", clear: bool = True) -> None:
        """Render state and print it.

        Args:
            state: The game state to print
            clear: Clear the console first
        """
        grid = self.renderer.render(state)
        if clear:
            self.console.clear()
        self.console.print(Text(grid), end="", soft_wrap=True, highlight=False)

    def show_message(self, message: str, style: str = "bold") -> None:
        """Show a standalone status message."""
        self.console.print(f"[{style}]{message}[/{style}]")

    def show_error(self, message: str) -> None:
        """Show error message in bold red."""
        self.console.print(f"[bold red]Error: {message}[/bold red]")

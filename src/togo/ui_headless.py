"""Headless UI implementation for togo.

Plain list output used by `--list`, where the task list is printed once
to stdout without starting the TUI.
"""

from rich.console import Console

from .console import console as default_console
from .output import get_row_label
from .session import Mode, Row


class HeadlessOutput:
    """Non-interactive implementation of ITaskView.

    Rows are printed one per line without selection markers. There is no
    text entry in headless mode, so prompts are not drawn.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def render_list(self, rows: list[Row]) -> None:
        """Print rows followed by a completion summary."""
        if not rows:
            self.console.print("No tasks", style="muted")
            return

        for row in rows:
            self.console.print(get_row_label(row), markup=False, highlight=False)

        done_count = sum(1 for row in rows if row.done)
        self.console.print(f"\n({done_count}/{len(rows)} completed)", style="muted")

    def render_prompt(self, mode: Mode, text: str, cursor: int) -> None: pass

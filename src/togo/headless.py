"""Headless mode for togo.

This module provides the HeadlessApp that prints the task list without
starting the TUI. Used with the `-l/--list` flag.
"""

import sys

from .config import TogoConfig
from .session import Row
from .store import JsonTaskStore, StoreError
from .ui_headless import HeadlessOutput


class HeadlessApp:
    """Headless application for printing the task list.

    Mirrors the startup of tui.TogoApp but without any UI framework.
    """

    def __init__(self, config: TogoConfig) -> None:
        self.config = config
        self.store = JsonTaskStore(config.data_location)
        self.ui = HeadlessOutput()

    def run(self) -> None:
        """Load the task list and print it to stdout."""
        try:
            tasks = self.store.load()
        except StoreError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        self.ui.render_list([Row(task.description, task.done, False) for task in tasks])

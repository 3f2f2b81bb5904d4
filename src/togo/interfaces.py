"""Interface definitions for togo.

This module defines the Protocol interfaces that keep the input state
machine independent of where tasks are stored and how they are drawn.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .session import Mode, Row
    from .task import TaskList


@runtime_checkable
class ITaskStore(Protocol):
    """Persistence interface for the full task list.

    Implementations rewrite the whole document on every save. Failures are
    raised, never swallowed: there is no in-memory-only fallback.
    """

    def load(self) -> TaskList:
        """Read the task list. A missing document yields an empty list."""
        ...

    def save(self, tasks: TaskList) -> None:
        """Write the full task list, replacing what was stored."""
        ...


@runtime_checkable
class ITaskView(Protocol):
    """Render interface consumed by the presentation layer."""

    def render_list(self, rows: list[Row]) -> None:
        """Draw the ordered rows of (description, done, selected)."""
        ...

    def render_prompt(self, mode: Mode, text: str, cursor: int) -> None:
        """Draw the text entry prompt with the buffer and cursor position."""
        ...

"""Task list model for togo.

This module provides the Task value and the TaskList collection that owns
ordering. Tasks have no identity of their own; a task is addressed by its
position in the list for the lifetime of a session.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Task:
    """A task: a description plus a done flag."""

    description: str
    done: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to the on-disk entry shape (field order is stable)."""
        return {"Desc": self.description, "Done": self.done}

    @classmethod
    def from_dict(cls, entry: dict[str, Any]) -> Task:
        """Build a Task from an on-disk entry. Missing keys use zero values."""
        return cls(
            description=entry.get("Desc", ""),
            done=entry.get("Done", False),
        )


class TaskList:
    """Ordered collection of tasks with the relocation policy.

    Relocation Policy:
    -----------------
    Toggling a task to done moves it to the end of the list, so done tasks
    collect at the bottom in the order they were completed. Toggling it back
    moves it to the front, so reopened tasks rise to the top.

    Every operation taking an index raises IndexError when the index is out
    of range. Negative indexes are rejected rather than counted from the end.
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks) if tasks else []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"

    def descriptions(self) -> list[str]:
        """Return the descriptions in list order."""
        return [task.description for task in self._tasks]

    def toggle_done(self, index: int) -> int:
        """Flip the done flag of a task and relocate it.

        Args:
            index: Position of the task to toggle.

        Returns:
            The new position of the task.
        """
        self._check_index(index)
        task = self._tasks.pop(index)
        task.done = not task.done
        if task.done:
            self._tasks.append(task)
            return len(self._tasks) - 1
        self._tasks.insert(0, task)
        return 0

    def insert(self, index: int, task: Task) -> None:
        """Insert a task at index, shifting later tasks down.

        Valid positions are 0 through len(self) inclusive.
        """
        if index < 0 or index > len(self._tasks):
            raise IndexError(f"insert position {index} out of range")
        self._tasks.insert(index, task)

    def remove(self, index: int) -> Task:
        """Remove and return the task at index."""
        self._check_index(index)
        return self._tasks.pop(index)

    def replace(self, index: int, description: str, done: bool | None = None) -> Task:
        """Overwrite the description of a task in place.

        The done flag is preserved unless given explicitly.

        Returns:
            The updated task.
        """
        self._check_index(index)
        current = self._tasks[index]
        updated = Task(
            description=description,
            done=current.done if done is None else done,
        )
        self._tasks[index] = updated
        return updated

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise IndexError(f"task index {index} out of range")

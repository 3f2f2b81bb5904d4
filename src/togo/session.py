"""Input state machine for togo.

A Session interprets key events against three modes and drives task list
mutations. Every mutation is followed by a synchronous save through the
store before the call returns, so what is on screen is what is on disk.

Modes:
    BROWSING   Navigate the list; enter/i/d/c act on the selection.
    COMPOSING  Type a new task; enter inserts it at the front.
    EDITING    Change the selected task; enter replaces its description.

There is no key that leaves COMPOSING or EDITING without submitting.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Literal, NamedTuple, TypeAlias

from .task import Task, TaskList

if TYPE_CHECKING:
    from .interfaces import ITaskStore

KeyResult: TypeAlias = Literal["continue", "exit"]

PAGE_SIZE = 14
DEFAULT_WIDTH = 20


class Mode(Enum):
    BROWSING = "browsing"
    COMPOSING = "composing"
    EDITING = "editing"


class Row(NamedTuple):
    """One rendered list entry."""

    description: str
    done: bool
    selected: bool


class TextBuffer:
    """Single-line text buffer with a cursor."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.cursor = len(text)

    def set(self, text: str) -> None:
        """Replace the content and move the cursor to the end."""
        self.text = text
        self.cursor = len(text)

    def clear(self) -> None:
        self.set("")

    def insert(self, chars: str) -> None:
        self.text = self.text[: self.cursor] + chars + self.text[self.cursor :]
        self.cursor += len(chars)

    def backspace(self) -> None:
        if self.cursor > 0:
            self.text = self.text[: self.cursor - 1] + self.text[self.cursor :]
            self.cursor -= 1

    def delete(self) -> None:
        self.text = self.text[: self.cursor] + self.text[self.cursor + 1 :]

    def left(self) -> None:
        self.cursor = max(0, self.cursor - 1)

    def right(self) -> None:
        self.cursor = min(len(self.text), self.cursor + 1)

    def home(self) -> None:
        self.cursor = 0

    def end(self) -> None:
        self.cursor = len(self.text)

    def kill_to_start(self) -> None:
        self.text = self.text[self.cursor :]
        self.cursor = 0

    def kill_to_end(self) -> None:
        self.text = self.text[: self.cursor]

    def handle_key(self, key: str, character: str | None) -> bool:
        """Apply an editing key. Returns False if the key was not recognized."""
        match key:
            case "backspace":
                self.backspace()
            case "delete":
                self.delete()
            case "left":
                self.left()
            case "right":
                self.right()
            case "home" | "ctrl+a":
                self.home()
            case "end" | "ctrl+e":
                self.end()
            case "ctrl+u":
                self.kill_to_start()
            case "ctrl+k":
                self.kill_to_end()
            case _:
                if character is None or not character.isprintable():
                    return False
                self.insert(character)
        return True


class Session:
    """Keyboard-driven editing session over a task list.

    Attributes:
        tasks: The authoritative in-memory task list.
        store: Where the list is saved after every mutation.
        mode: Current input mode.
        buffer: Text being composed or edited.
        index: Selected position in the list (0 when the list is empty).
        width: Viewport width reported by the presentation layer.
    """

    def __init__(self, tasks: TaskList, store: ITaskStore) -> None:
        self.tasks = tasks
        self.store = store
        self.mode = Mode.BROWSING
        self.buffer = TextBuffer()
        self.index = 0
        self.width = DEFAULT_WIDTH

    @property
    def is_typing(self) -> bool:
        return self.mode is not Mode.BROWSING

    def selected(self) -> Task | None:
        """Return the selected task, or None when the list is empty."""
        if not self.tasks:
            return None
        return self.tasks[self.index]

    def rows(self) -> list[Row]:
        """Return the render contract for the current list."""
        return [
            Row(task.description, task.done, i == self.index)
            for i, task in enumerate(self.tasks)
        ]

    def resize(self, width: int) -> None:
        """Adjust the viewport width. Never touches the list."""
        self.width = max(0, width)

    def handle_key(self, key: str, character: str | None = None) -> KeyResult:
        """Process one key event.

        Args:
            key: Key name, e.g. "enter", "i", "up", "ctrl+u".
            character: The printable character for the key, if any.

        Returns:
            "exit" when the user asked to quit, "continue" otherwise.

        Raises:
            StoreError: If saving after a mutation fails.
        """
        if self.mode is Mode.BROWSING:
            return self._handle_browsing(key)

        if key == "enter":
            self._submit()
        else:
            self.buffer.handle_key(key, character)
        return "continue"

    # Browsing

    def _handle_browsing(self, key: str) -> KeyResult:
        match key:
            case "enter":
                self._toggle_selected()
            case "i":
                self.buffer.clear()
                self.mode = Mode.COMPOSING
            case "d":
                self._remove_selected()
            case "c":
                self._edit_selected()
            case "up" | "k":
                self._move(-1)
            case "down" | "j":
                self._move(1)
            case "pageup":
                self._move(-PAGE_SIZE)
            case "pagedown":
                self._move(PAGE_SIZE)
            case "home" | "g":
                self.index = 0
            case "end" | "G":
                self.index = max(0, len(self.tasks) - 1)
            case "q" | "escape":
                return "exit"
            case _:
                pass
        return "continue"

    def _toggle_selected(self) -> None:
        if not self.tasks:
            return
        self.tasks.toggle_done(self.index)
        self._persist()

    def _remove_selected(self) -> None:
        if not self.tasks:
            return
        self.tasks.remove(self.index)
        self._clamp()
        self._persist()

    def _edit_selected(self) -> None:
        task = self.selected()
        if task is None:
            return
        self.buffer.set(task.description)
        self.mode = Mode.EDITING

    def _move(self, delta: int) -> None:
        self.index += delta
        self._clamp()

    # Composing / Editing

    def _submit(self) -> None:
        text = self.buffer.text
        if self.mode is Mode.COMPOSING:
            self.tasks.insert(0, Task(description=text))
            self._clamp()
            self._persist()
        elif self.selected() is not None:
            self.tasks.replace(self.index, text)
            self._persist()

        self.buffer.clear()
        self.mode = Mode.BROWSING

    def _clamp(self) -> None:
        self.index = min(max(0, self.index), max(0, len(self.tasks) - 1))

    def _persist(self) -> None:
        self.store.save(self.tasks)

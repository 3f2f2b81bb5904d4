"""JSON persistence for the task list.

Document format:
    {"list": [{"Desc": "buy milk", "Done": false}, ...]}

The document is loaded once at startup and rewritten in full after every
mutation. A missing file is the first-run state. A file that exists but
cannot be understood is fatal, so that a broken document is never
overwritten with a guessed list.
"""

import contextlib
import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

from .task import Task, TaskList

LIST_KEY = "list"


class StoreError(Exception):
    """Base class for persistence failures. Always fatal."""


class CorruptDataError(StoreError):
    """The data file exists but does not hold a valid document."""


class StoreWriteError(StoreError):
    """The data file could not be written."""


class JsonTaskStore:
    """Task store backed by a single JSON document on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> TaskList:
        """Load the task list from disk.

        Returns:
            The stored tasks, or an empty list when the file is missing or
            unreadable.

        Raises:
            CorruptDataError: If the file content is not a valid document.
        """
        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeError):
            return TaskList()

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise CorruptDataError(f"Malformed data file at {self.path}: {e}") from e

        return TaskList(self._parse_document(data))

    def save(self, tasks: TaskList) -> None:
        """Write the full task list, replacing the file.

        The document is written to a temporary file in the same directory
        and moved into place.

        Raises:
            StoreWriteError: On any I/O failure.
        """
        document = {LIST_KEY: [task.to_dict() for task in tasks]}
        content = json.dumps(document, ensure_ascii=False, separators=(",", ":"))

        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            mode = self._file_mode()
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                f.write(content)
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise StoreWriteError(f"Error writing data file at {self.path}: {e}") from e

    def _file_mode(self) -> int:
        """Permission bits for the saved file: keep the current ones, else umask."""
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def _parse_document(self, data: Any) -> list[Task]:
        # A JSON null document decodes to nothing, same as an empty list.
        if data is None:
            return []
        if not isinstance(data, dict):
            raise CorruptDataError(
                f"Malformed data file at {self.path}: expected an object"
            )

        entries = data.get(LIST_KEY)
        if entries is None:
            return []
        if not isinstance(entries, list):
            raise CorruptDataError(
                f"Malformed data file at {self.path}: '{LIST_KEY}' must be an array"
            )

        return [self._parse_entry(i, entry) for i, entry in enumerate(entries)]

    def _parse_entry(self, i: int, entry: Any) -> Task:
        if not isinstance(entry, dict):
            raise CorruptDataError(
                f"Malformed data file at {self.path}: entry {i} must be an object"
            )
        task = Task.from_dict(entry)
        if not isinstance(task.description, str):
            raise CorruptDataError(
                f"Malformed data file at {self.path}: entry {i} 'Desc' must be a string"
            )
        if not isinstance(task.done, bool):
            raise CorruptDataError(
                f"Malformed data file at {self.path}: entry {i} 'Done' must be a boolean"
            )
        return task

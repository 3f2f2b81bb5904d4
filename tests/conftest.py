"""Shared fixtures for togo tests."""

import json
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from togo.session import Session
from togo.store import JsonTaskStore
from togo.task import Task, TaskList


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path of a data file that does not exist yet."""
    return tmp_path / "data.json"


@pytest.fixture
def store(data_file: Path) -> JsonTaskStore:
    """A JsonTaskStore writing into the temp directory."""
    return JsonTaskStore(data_file)


@pytest.fixture
def mock_store() -> MagicMock:
    """
    Mock task store.

    save() records calls so tests can assert whether a mutation persisted.
    """
    mock = MagicMock(spec=JsonTaskStore)
    mock.load.return_value = TaskList()
    return mock


@pytest.fixture
def make_tasks() -> Callable[..., TaskList]:
    """
    Build a TaskList from (description, done) pairs.

    Usage: make_tasks(("A", False), ("B", True))
    """

    def _make(*pairs: tuple[str, bool]) -> TaskList:
        return TaskList([Task(desc, done) for desc, done in pairs])

    return _make


@pytest.fixture
def make_session(mock_store: MagicMock) -> Callable[[TaskList], Session]:
    """Build a Session over the given tasks using the mock store."""

    def _make(tasks: TaskList) -> Session:
        return Session(tasks, mock_store)

    return _make


@pytest.fixture
def read_document(data_file: Path) -> Callable[[], object]:
    """Read and decode the data file written by the store."""

    def _read() -> object:
        return json.loads(data_file.read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def type_text() -> Callable[[Session, str], None]:
    """Feed each character of a string to a session as key presses."""

    def _type(session: Session, text: str) -> None:
        for ch in text:
            key = "space" if ch == " " else ch
            session.handle_key(key, ch)

    return _type

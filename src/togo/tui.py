"""Textual TUI for togo.

This module provides the full-screen application that feeds key events to
the Session and redraws the task view after each one.
"""

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.timer import Timer
from textual.widgets import Static

from .config import TogoConfig
from .output import build_list_text, build_prompt_text
from .session import Mode, Row, Session
from .store import StoreError

BROWSING_HELP = "↑/k up • ↓/j down • enter toggle • i new • c edit • d delete • q quit"
TYPING_HELP = "enter submit"


class TaskView(Static):
    """Task list or text prompt, depending on the session mode.

    Implements ITaskView. While typing, the cursor blinks on a timer; the
    blink only affects drawing.
    """

    BLINK_INTERVAL = 0.5

    def __init__(
        self,
        session: Session,
        *,
        id: str | None = None,  # noqa: A002
        classes: str | None = None,
    ) -> None:
        super().__init__("", id=id, classes=classes)
        self.session = session
        self.cursor_visible = True
        self._interval: Timer | None = None

    def on_mount(self) -> None:
        self._interval = self.set_interval(self.BLINK_INTERVAL, self._blink)
        self.show()

    def show(self) -> None:
        """Draw the current session state."""
        if self.session.is_typing:
            buffer = self.session.buffer
            self.render_prompt(self.session.mode, buffer.text, buffer.cursor)
        else:
            self.render_list(self.session.rows())

    def render_list(self, rows: list[Row]) -> None:
        self.update(build_list_text(rows, self.session.width))

    def render_prompt(self, mode: Mode, text: str, cursor: int) -> None:
        self.update(build_prompt_text(mode, text, cursor, self.cursor_visible))

    def reset_blink(self) -> None:
        """Show the cursor immediately, e.g. after a keystroke."""
        self.cursor_visible = True

    def _blink(self) -> None:
        if not self.session.is_typing:
            return
        self.cursor_visible = not self.cursor_visible
        self.show()

    def on_unmount(self) -> None:
        """Clean up timer when widget is unmounted."""
        if self._interval:
            self._interval.stop()
            self._interval = None


class TogoApp(App[None]):
    """Main TUI application for togo.

    Every key press goes to the Session. A store failure while handling a
    key stops the app with return code 1; the cause is kept in
    fatal_error for the caller to report.
    """

    CSS_PATH = "tui.tcss"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True),
        Binding("ctrl+q", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, session: Session, config: TogoConfig) -> None:
        super().__init__()
        self.session = session
        self.config = config
        self.fatal_error: str | None = None

    def compose(self) -> ComposeResult:
        """Create child widgets for the app."""
        yield TaskView(self.session, id="tasks")
        yield Static(BROWSING_HELP, id="help")

    def on_mount(self) -> None:
        self.title = "ToGo"
        self.sub_title = self.config.data_location
        self.session.resize(self.size.width)
        self.refresh_view()

    def on_key(self, event: events.Key) -> None:
        """Route a key press through the session."""
        event.stop()
        event.prevent_default()

        try:
            result = self.session.handle_key(event.key, event.character)
        except StoreError as e:
            self.fatal_error = str(e)
            self.exit(return_code=1)
            return

        match result:
            case "exit":
                self.exit(return_code=0)
            case "continue":
                self.refresh_view()

    def on_resize(self, event: events.Resize) -> None:
        self.session.resize(event.size.width)
        self.refresh_view()

    def refresh_view(self) -> None:
        """Redraw the task view and the help line for the current mode."""
        for view in self.query(TaskView):
            view.reset_blink()
            view.show()
        help_text = TYPING_HELP if self.session.is_typing else BROWSING_HELP
        for help_line in self.query("#help").results(Static):
            help_line.update(help_text)

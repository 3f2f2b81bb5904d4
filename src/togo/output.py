"""Text builders shared by the TUI and headless renderers."""

from rich.text import Text

from .session import PAGE_SIZE, Mode, Row

TITLE = "ToGo - Tasks"
PLACEHOLDER = "buy some milk"
EMPTY_LIST = "No items."

TITLE_STYLE = "bold #89b4fa"
SELECTED_STYLE = "#fab387"
DONE_STYLE = "grey62"
MUTED_STYLE = "bright_black"

PROMPT_HEADINGS = {
    Mode.COMPOSING: "Enter new task:",
    Mode.EDITING: "Edit task:",
}


def get_row_label(row: Row) -> str:
    """Format a row as "[x] description" or "[ ] description"."""
    mark = "[x]" if row.done else "[ ]"
    return f"{mark} {row.description}"


def get_page_indicator(page: int, pages: int) -> str:
    """Format page dots, e.g. "◦ • ◦" for the second of three pages."""
    return " ".join("•" if i == page else "◦" for i in range(pages))


def build_list_text(
    rows: list[Row], width: int | None = None, page_size: int = PAGE_SIZE
) -> Text:
    """Build the titled task list, marking the selected row with "> ".

    Only the page holding the selected row is drawn. Page dots follow when
    there is more than one page. Rows longer than width are truncated with
    an ellipsis.
    """
    text = Text()
    text.append("\n  ")
    text.append(TITLE, style=TITLE_STYLE)
    text.append("\n\n")

    if not rows:
        text.append(f"    {EMPTY_LIST}\n", style=MUTED_STYLE)
        return text

    selected = next((i for i, row in enumerate(rows) if row.selected), 0)
    page = selected // page_size
    pages = (len(rows) + page_size - 1) // page_size

    for row in rows[page * page_size : (page + 1) * page_size]:
        if row.selected:
            line = Text(f"  > {get_row_label(row)}", style=SELECTED_STYLE)
        else:
            line = Text(f"    {get_row_label(row)}", style=DONE_STYLE if row.done else "")
        if width:
            line.truncate(width, overflow="ellipsis")
        text.append_text(line)
        text.append("\n")

    if pages > 1:
        text.append(f"    {get_page_indicator(page, pages)}\n", style=MUTED_STYLE)
    return text


def build_prompt_text(
    mode: Mode, value: str, cursor: int, cursor_visible: bool = True
) -> Text:
    """Build the text entry prompt with a block cursor at the cursor position."""
    text = Text()
    text.append(PROMPT_HEADINGS.get(mode, PROMPT_HEADINGS[Mode.COMPOSING]))
    text.append("\n> ")

    cursor_style = "reverse" if cursor_visible else ""
    if not value:
        text.append(PLACEHOLDER[:1], style=f"{MUTED_STYLE} {cursor_style}".strip())
        text.append(PLACEHOLDER[1:], style=MUTED_STYLE)
        return text

    text.append(value[:cursor])
    under_cursor = value[cursor : cursor + 1] or " "
    text.append(under_cursor, style=cursor_style)
    text.append(value[cursor + 1 :])
    return text

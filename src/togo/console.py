from rich.console import Console
from rich.theme import Theme

THEME = Theme(
    {
        "muted": "bright_black",
    }
)

console = Console(theme=THEME)

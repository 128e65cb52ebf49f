"""Console styles for CLI messages."""

from rich.console import Console
from rich.theme import Theme

WARNING_MARK = "⚠"
ERROR_MARK = "✖"
POINTER = "❯"

THEME = Theme({
    "warning": "bold yellow",
    "error": "bold red",
    "pointer": "cyan",
    "head": "bold cyan",
})


def make_console(stderr: bool = False) -> Console:
    """Create a console that understands the climg styles."""
    return Console(theme=THEME, stderr=stderr, highlight=False)

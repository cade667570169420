"""RichDisplayObserver — prints display readings to the terminal with Rich."""

from rich.console import Console
from rich.markup import escape

# Rich markup style per display kind; unknown kinds fall back to bold.
_DISPLAY_STYLES: dict[str, str] = {
    "temperature": "bold red",
    "humidity": "bold cyan",
}


class RichDisplayObserver:
    """Renders each display reading as a single coloured line.

    Only display_rendered and display_no_data produce output; display_created
    is a no-op. Pass a Console built with ``file=io.StringIO()`` to capture
    output in tests.

    Does NOT inherit from DisplayObserver (structural typing via Protocol).
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console(stderr=True)

    def display_created(self, display: str) -> None:
        return None

    def display_rendered(self, display: str, reading: str) -> None:
        style = _DISPLAY_STYLES.get(display, "bold")
        label = escape(f"{display.capitalize():<12}")
        self._console.print(f"[{style}]{label}[/{style}] {escape(reading)}")

    def display_no_data(self, display: str) -> None:
        label = escape(f"{display.capitalize():<12}")
        self._console.print(f"[dim]{label} no data[/dim]")

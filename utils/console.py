"""
Terminal adapter used by every menu and by the review engine.

Menus never call print()/input() directly; they go through an object with
read_line / write_line so tests can script a whole session.

User-supplied text (card sides, deck names) is printed with markup disabled,
so a card reading "[bold]" is shown literally instead of being styled.
"""

from rich.console import Console


class ConsoleIO:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def read_line(self, prompt: str = '') -> str:
        """Blocking read of one line. Raises EOFError when input is closed."""
        return self.console.input(prompt, markup=False)

    def read_secret(self, prompt: str = '') -> str:
        return self.console.input(prompt, markup=False, password=True)

    def write_line(self, text: str = '') -> None:
        self.console.print(text, markup=False, highlight=False)

    def clear(self) -> None:
        self.console.clear()

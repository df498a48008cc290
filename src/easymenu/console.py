"""Terminal rendering and input for the executor, built on rich."""

from typing import Optional, Protocol

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import IntPrompt
from rich.text import Text

__all__ = ["Renderer", "Prompt", "ConsoleRenderer", "ConsolePrompt"]


class Renderer(Protocol):
    def display(self, label: str, entries: list[tuple[int, str]]) -> None: ...

    def error(self, text: str) -> None: ...


class Prompt(Protocol):
    def read_int(self, prompt: str) -> int: ...


class ConsoleRenderer:
    """Draws a level: its label in a double border, then one ``key. label`` row per entry."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def display(self, label: str, entries: list[tuple[int, str]]) -> None:
        self.console.print()
        if label:
            self.console.print(
                Panel(Text(label, style="bold"), box=box.DOUBLE, expand=False, padding=(0, 2))
            )
        width = max((len(str(key)) for key, _ in entries), default=1)
        for key, entry_label in entries:
            self.console.print(Text.assemble((f"{str(key).rjust(width)}.", "cyan"), " ", entry_label))
        self.console.print()

    def error(self, text: str) -> None:
        self.console.print(Text(text, style="red"))


class ConsolePrompt:
    """Blocks for a single integer, reprompting until one is entered."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def read_int(self, prompt: str) -> int:
        return IntPrompt.ask(prompt, console=self.console)

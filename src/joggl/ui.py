"""
Terminal interaction

The pipeline only talks to the `UI` protocol; `ConsoleUI` implements it with
Rich. Tests substitute a scripted implementation.
"""

from typing import Iterable, Optional, Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from .models import ItemStatus, ValidatedWorkItem


SEVERITY_STYLES = {
    "info": None,
    "success": "green",
    "warning": "yellow",
    "error": "red",
}

STATUS_STYLES = {
    ItemStatus.READY: "green",
    ItemStatus.NO_ID: "red",
    ItemStatus.MULTIPLE_IDS: "red",
}


def format_duration(millis: int) -> str:
    """Milliseconds as HH:MM:SS."""
    seconds = millis // 1000
    hours, rest = divmod(seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


class UI(Protocol):
    def ask(self, prompt: str) -> str: ...

    def ask_password(self, prompt: str) -> str: ...

    def confirm(self, prompt: str) -> bool: ...

    def report(self, message: str, severity: str = "info") -> None: ...

    def show_items(self, items: list[ValidatedWorkItem]) -> None: ...


class ConsoleUI:
    """Rich console implementation of UI"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def ask(self, prompt: str) -> str:
        return Prompt.ask(prompt, console=self.console)

    def ask_password(self, prompt: str) -> str:
        return Prompt.ask(prompt, password=True, console=self.console)

    def confirm(self, prompt: str) -> bool:
        return Confirm.ask(prompt, default=False, console=self.console)

    def report(self, message: str, severity: str = "info") -> None:
        style = SEVERITY_STYLES.get(severity)
        # markup off: descriptions may contain square brackets
        self.console.print(message, style=style, markup=False, highlight=False)

    def show_items(self, items: Iterable[ValidatedWorkItem]) -> None:
        """Show the aggregated items as a table."""
        table = Table(title="Summary")

        table.add_column("#", style="dim", justify="right")
        table.add_column("Project", style="cyan")
        table.add_column("Description")
        table.add_column("Duration", style="magenta", justify="right")
        table.add_column("Count", justify="right")
        table.add_column("Jira Id", style="bold")
        table.add_column("Status")

        for i, v in enumerate(items, 1):
            table.add_row(
                str(i),
                Text(v.project),
                Text(v.description),
                format_duration(v.total_duration_millis),
                str(v.occurrences),
                Text(", ".join(v.candidate_ids)),
                Text(v.status.value, style=STATUS_STYLES[v.status]),
            )

        self.console.print(table)

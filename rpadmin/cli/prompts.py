"""
Interactive Prompts.

Two capabilities used by the console loop, rendered with Rich:

- select: numbered choice list with optional search (`/text`) and quit (`q`)
- ask: free-text input returned exactly as typed
"""

from typing import Callable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

Searcher = Callable[[str, int], bool]


class OperatorExit(Exception):
    """Raised when the operator ends input (Ctrl-C, Ctrl-D or `q`)."""


class ConsolePrompter:
    """
    Prompt implementation backed by a Rich console.

    Usage:
        prompter = ConsolePrompter()
        index = prompter.select("Choose an RP", ["Alpha", "Beta"])
        answer = prompter.ask('Type "DESTROY ALPHA"')
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _read(self, prompt: str) -> str:
        try:
            return self.console.input(prompt)
        except (EOFError, KeyboardInterrupt) as e:
            self.console.print()
            raise OperatorExit() from e

    def _render(self, label: str, items: list[str], visible: list[int], term: str) -> None:
        title = escape(label)
        if term:
            title += f" [dim](search: {escape(term)})[/dim]"

        table = Table(title=title, show_header=False, title_justify="left")
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Item")
        for position, index in enumerate(visible, start=1):
            table.add_row(str(position), escape(items[index]))

        self.console.print(table)
        if not visible:
            self.console.print("[dim]No matches.[/dim]")

    def select(
        self,
        label: str,
        items: list[str],
        searcher: Searcher | None = None,
        allow_quit: bool = False,
    ) -> int | None:
        """
        Ask the operator to pick one of `items`.

        Args:
            label: Heading shown above the list.
            items: Display strings, one per choice.
            searcher: Predicate `(term, index) -> bool`; enables `/term` filtering.
            allow_quit: Accept `q` and return None.

        Returns:
            Index into `items`, or None when the operator quits.

        Raises:
            OperatorExit: On end of input or interrupt.
        """
        hints = ["number to choose"]
        if searcher is not None:
            hints.append("/text to search, / to clear")
        if allow_quit:
            hints.append("q to quit")
        hint = f"[dim]({'; '.join(hints)})[/dim]"

        term = ""
        while True:
            if term and searcher is not None:
                visible = [i for i in range(len(items)) if searcher(term, i)]
            else:
                visible = list(range(len(items)))

            self._render(label, items, visible, term)
            raw = self._read(f"{hint} [bold cyan]>[/bold cyan] ").strip()

            if allow_quit and raw.lower() == "q":
                return None
            if searcher is not None and raw.startswith("/"):
                term = raw[1:]
                continue
            if raw.isdecimal() and 1 <= int(raw) <= len(visible):
                return visible[int(raw) - 1]

            self.console.print(f"[red]Invalid choice: {escape(raw)}[/red]")

    def ask(self, label: str) -> str:
        """Read one line of free text. Whitespace is preserved."""
        return self._read(f"{escape(label)}: ")

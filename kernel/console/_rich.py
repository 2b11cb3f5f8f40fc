"""kernel.console._rich -- Rich-based terminal backend.

Provides coloured, structured terminal output using the Rich library.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

_THEME = Theme(
    {
        "info": "blue",
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "dim": "dim",
    }
)


class RichBackend:
    """ConsoleProtocol implementation backed by Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self._con = console or Console(theme=_THEME, highlight=False)

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        self._con.print(f"  {message}", style="info", markup=False)

    def success(self, message: str) -> None:
        self._con.print(f"  \u2713 {message}", style="success", markup=False)

    def warning(self, message: str) -> None:
        self._con.print(f"  \u26a0 {message}", style="warning", markup=False)

    def error(self, message: str) -> None:
        self._con.print(f"  \u2717 {message}", style="error", markup=False)

    # -- Structured panels --------------------------------------------------

    def panel(self, content: str, *, title: str = "", style: str = "") -> None:
        self._con.print(
            Panel(content, title=title or None, border_style=style or "dim"),
        )

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        t = Table(title=title or None, box=box.SIMPLE, show_edge=False, pad_edge=True)
        for h in headers:
            t.add_column(h)
        for r in rows:
            t.add_row(*r)
        self._con.print(t)

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        t = Table(
            title=title or None,
            box=box.SIMPLE,
            show_header=False,
            show_edge=False,
            pad_edge=True,
        )
        t.add_column("Key", style="bold", justify="right")
        t.add_column("Value")
        for k, v in data.items():
            t.add_row(k, v)
        self._con.print(t)

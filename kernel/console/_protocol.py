"""kernel.console._protocol -- ConsoleProtocol definition.

Pure standard-library typing.Protocol for the synthaccess terminal output.
No external dependencies allowed in this file.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleProtocol(Protocol):
    """synthaccess terminal output protocol.

    **General messages** -- usable from any module::

        console.info("Resolving BenchPojo.field")
        console.success("6 benchmarks finished")
        console.warning("Only one strategy selected")
        console.error("Unable to resolve accessor ...")

    **Structured panels** -- tables, key-value displays, panels::

        console.panel("binder: generated", title="Run")
        console.table(["Benchmark", "ns/call"], [["direct_getter", "31.2"]])
        console.kv({"Property": "field", "Source": "bean_method"})
    """

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        """Informational message."""
        ...

    def success(self, message: str) -> None:
        """Success / positive-outcome message."""
        ...

    def warning(self, message: str) -> None:
        """Warning message."""
        ...

    def error(self, message: str) -> None:
        """Error message."""
        ...

    # -- Structured panels --------------------------------------------------

    def panel(self, content: str, *, title: str = "", style: str = "") -> None:
        """Display *content* in a bordered panel."""
        ...

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        """Display a table with *headers* and *rows*."""
        ...

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        """Display key-value pairs."""
        ...

"""kernel.console._plain -- Plain-text backend.

print()-based output with no external dependencies. Used when stdout is
not a TTY (pipes, CI logs, captured test output).
"""

from __future__ import annotations


class PlainBackend:
    """ConsoleProtocol implementation using only built-in print()."""

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        print(f"  {message}")

    def success(self, message: str) -> None:
        print(f"  [ok] {message}")

    def warning(self, message: str) -> None:
        print(f"  [warn] {message}")

    def error(self, message: str) -> None:
        print(f"  [error] {message}")

    # -- Structured panels --------------------------------------------------

    def panel(self, content: str, *, title: str = "", style: str = "") -> None:
        width = 60
        header = f" {title} " if title else ""
        border = header.center(width, "=")
        print(f"\n{border}")
        for line in content.splitlines():
            print(f"  {line}")
        print("=" * width)

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        if title:
            print(f"\n  {title}:")

        if not headers and not rows:
            return

        all_rows = [headers, *rows]
        col_widths = [
            max(len(str(row[i])) if i < len(row) else 0 for row in all_rows)
            for i in range(len(headers))
        ]

        header_line = "  " + "  ".join(
            h.ljust(w) for h, w in zip(headers, col_widths, strict=True)
        )
        print(header_line)
        print("  " + "  ".join("-" * w for w in col_widths))

        for row in rows:
            cells = [
                str(row[i]).ljust(col_widths[i]) if i < len(row) else " " * col_widths[i]
                for i in range(len(headers))
            ]
            print("  " + "  ".join(cells))

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        if title:
            print(f"\n  {title}:")
        if not data:
            return
        max_key = max(len(k) for k in data)
        for k, v in data.items():
            print(f"  {k.rjust(max_key)}: {v}")

"""Output formatting utilities"""

import json
from typing import Any, Sequence

import click
from rich.console import Console
from rich.table import Table


class OutputFormatter:
    """Handles output formatting for JSON and human-readable modes"""

    def __init__(
        self,
        json_mode: bool = False,
        console: Console | None = None,
        error_console: Console | None = None,
    ):
        """Initialize output formatter

        Args:
            json_mode: Enable JSON output mode
            console: Rich console instance (for human mode)
            error_console: Rich console for errors (defaults to stderr)
        """
        self.json_mode = json_mode
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def _emit_json(self, payload: dict[str, Any], err: bool = False) -> None:
        click.echo(json.dumps(payload, indent=2), err=err)

    def success(self, message: str, data: Any = None) -> None:
        """Output success message

        Args:
            message: Success message
            data: Optional data to include
        """
        if self.json_mode:
            self._emit_json({"status": "success", "message": message, "data": data})
        else:
            self.console.print(f"[green]✓[/green] {message}")
            if data and isinstance(data, dict):
                for key, value in data.items():
                    self.console.print(f"  {key}: {value}")

    def error(self, message: str, details: str | None = None) -> None:
        """Output error message

        Args:
            message: Error message
            details: Optional error details
        """
        if self.json_mode:
            self._emit_json(
                {"status": "error", "message": message, "details": details},
                err=True,
            )
        else:
            self.error_console.print(f"[red]✗[/red] {message}")
            if details:
                self.error_console.print(f"  {details}", markup=False)

    def info(self, message: str) -> None:
        """Output info message (human mode only)

        Args:
            message: Info message
        """
        if not self.json_mode:
            self.console.print(f"[blue]ℹ[/blue] {message}")

    def table(self, title: str, columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
        """Output rows as a rich table, or as a list of objects in JSON mode

        Args:
            title: Table title (JSON message)
            columns: Column headers (JSON keys)
            rows: Row values in column order
        """
        if self.json_mode:
            data = [dict(zip(columns, row)) for row in rows]
            self._emit_json({"status": "success", "message": title, "data": data})
            return
        table = Table(title=title)
        for column in columns:
            table.add_column(column, justify="right")
        for row in rows:
            table.add_row(*(str(value) for value in row))
        self.console.print(table)

    def block(self, title: str, lines: Sequence[str]) -> None:
        """Output preformatted text lines (e.g. a plot)

        Args:
            title: Heading (JSON message)
            lines: Text lines, printed without markup
        """
        if self.json_mode:
            self._emit_json(
                {"status": "success", "message": title, "data": list(lines)}
            )
            return
        self.console.print(f"[blue]ℹ[/blue] {title}")
        for line in lines:
            self.console.print(line, markup=False, highlight=False)

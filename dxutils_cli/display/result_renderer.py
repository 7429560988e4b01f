"""Result renderer for helper command output."""

from rich.markup import escape
from rich.table import Table

from dxutils_cli.display.console import console


class ResultRenderer:
    """Render helper results.

    Values are printed without markup so user input containing brackets is
    shown verbatim.
    """

    def render_value(self, value: object) -> None:
        """Render a single result value on its own line."""
        console.print(str(value), markup=False, soft_wrap=True)

    def render_validation(self, kind: str, results: list[tuple[str, bool]]) -> None:
        """Render validation results as a table.

        Args:
            kind: Validator name (e.g., "email").
            results: (value, is_valid) pairs in input order.
        """
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column(kind.upper(), no_wrap=True)
        table.add_column("VALID")

        for value, is_valid in results:
            status = "[green]true[/green]" if is_valid else "[red]false[/red]"
            table.add_row(escape(value), status)

        console.print(table)

    def render_error(self, message: str) -> None:
        """Render an error message."""
        console.print(f"[red]{escape(message)}[/red]")

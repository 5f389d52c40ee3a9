"""CLI entry point for periodfmt."""

import typer

from periodfmt.commands.admin import init_command
from periodfmt.commands.demo import add_command, format_command, run_command

app = typer.Typer(
    name="periodfmt",
    help="Add a period to a date and print it through a pattern",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    date: str = typer.Option(None, "--date", help="Base date (YYYY-MM-DD, default: 2001-02-05)"),
    period: str = typer.Option(None, "--period", help="ISO-8601 period to add (default: P3M1D)"),
    pattern: str = typer.Option(None, "--pattern", help="Formatter pattern (default: CM)"),
) -> None:
    """Add a period to a date and print it through a pattern."""
    if ctx.invoked_subcommand is None:
        run_command(date, period, pattern)


@app.command()
def add(
    date: str = typer.Argument(..., help="Base date (YYYY-MM-DD)"),
    period: str = typer.Argument(..., help="ISO-8601 period, e.g. P3M1D"),
) -> None:
    """Show each step of adding a period to a date."""
    add_command(date, period)


@app.command(name="format")
def format_(
    date: str = typer.Argument(..., help="Date to format (YYYY-MM-DD)"),
    pattern: str = typer.Argument(..., help="Formatter pattern, e.g. yyyy-MM-dd"),
) -> None:
    """Format a date with a pattern."""
    format_command(date, pattern)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize periodfmt configuration."""
    init_command(force)


if __name__ == "__main__":
    app()

"""Date arithmetic and formatting commands."""

import sys
from datetime import date
from typing import NoReturn

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from periodfmt.config import load_defaults
from periodfmt.dates import add_period, add_period_steps, parse_date
from periodfmt.domain.models import Period, parse_period
from periodfmt.domain.pattern import compile_pattern

console = Console()
err_console = Console(stderr=True)


def fail(message: str) -> NoReturn:
    """Report an error on stderr and exit with status 1."""
    err_console.print(f"[red]Error: {escape(message)}[/red]", style="bold")
    sys.exit(1)


def parse_inputs(date_text: str, period_text: str) -> tuple[date, Period]:
    """Parse date and period arguments, exiting on invalid input."""
    try:
        return parse_date(date_text), parse_period(period_text)
    except ValueError as e:
        fail(str(e))


def run_command(
    date_text: str | None = None,
    period_text: str | None = None,
    pattern: str | None = None,
) -> None:
    """Add a period to a date and print it through a pattern.

    Anything not given comes from the config defaults.
    """
    try:
        defaults = load_defaults()
    except ValueError as e:
        fail(f"Invalid config: {e}")
    except OSError as e:
        fail(f"Filesystem error: {e}")

    base, period = parse_inputs(
        defaults["date"] if date_text is None else date_text,
        defaults["period"] if period_text is None else period_text,
    )

    try:
        result = add_period(base, period)
        formatter = compile_pattern(defaults["pattern"] if pattern is None else pattern)
        text = formatter.format(result)
    except (ValueError, OverflowError) as e:
        fail(str(e))

    console.out(text, highlight=False)


def add_command(date_text: str, period_text: str) -> None:
    """Show each step of adding a period to a date."""
    base, period = parse_inputs(date_text, period_text)

    try:
        after_months, result = add_period_steps(base, period)
    except OverflowError as e:
        fail(str(e))

    table = Table(title=f"{base.isoformat()} + {period}")
    table.add_column("Step", style="cyan")
    table.add_column("Date", justify="right")

    table.add_row("Base", base.isoformat())
    table.add_row(f"+ {period.months} months", after_months.isoformat())
    table.add_row(f"+ {period.days} days", result.isoformat(), style="bold green")

    console.print(table)


def format_command(date_text: str, pattern: str) -> None:
    """Format a single date with a pattern."""
    try:
        value = parse_date(date_text)
        text = compile_pattern(pattern).format(value)
    except ValueError as e:
        fail(str(e))

    console.out(text, highlight=False)

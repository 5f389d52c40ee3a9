"""Admin command for initializing configuration."""

import sys

from rich.console import Console
from rich.markup import escape

from periodfmt.config import create_default_config, get_config_path

console = Console()


def init_command(force: bool = False) -> None:
    """Initialize periodfmt configuration."""
    config_path = get_config_path()

    # Guard: refuse to overwrite without force flag
    if not force and config_path.exists():
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'periodfmt init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")
    except OSError as e:
        console.print(f"[red]Filesystem error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

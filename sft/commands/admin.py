"""Admin commands for initializing storage and editing configuration."""

import sqlite3
import sys
import tomllib
from pathlib import Path

from rich.console import Console
from rich.table import Table

from sft.config import CONFIG_KEYS, create_default_config, get_config_path, load_settings, set_config_value
from sft.store.schema import init_database

console = Console()


def run_full_init(db_path: Path, config_path: Path, write_config: bool) -> None:
    """Initialize database and, when requested, the config file."""
    console.print(f"[cyan]Initializing database at {db_path}...[/cyan]")
    init_database(db_path)
    console.print("[green]✓[/green] Database initialized")

    if write_config:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")
    else:
        console.print(f"[dim]Keeping existing config: {config_path}[/dim]")

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Database: {db_path}[/dim]")
    console.print(f"[dim]Config: {config_path}[/dim]")


def init_command(force: bool = False) -> None:
    """Initialize sft database and configuration."""
    config_path = get_config_path()
    config_exists = config_path.exists()
    db_path = load_settings(config_path).db_path

    try:
        # Guard: refuse to overwrite config without force flag
        if not force and config_exists and db_path.exists():
            console.print("[yellow]Already initialized:[/yellow]")
            console.print(f"  Database: {db_path}")
            console.print(f"  Config: {config_path}")
            console.print("\n[yellow]Use 'sft init --force' to rewrite the default config[/yellow]")
            sys.exit(1)

        run_full_init(db_path, config_path, write_config=force or not config_exists)

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)


def config_command(key: str | None = None, value: str | None = None) -> None:
    """Show the resolved settings, or change one key in the config file.

    Args:
        key: Config key to change. If None, the current settings are shown.
        value: New value for the key.
    """
    config_path = get_config_path()

    if key is None:
        settings = load_settings(config_path)
        table = Table(title=f"Config ({config_path})")
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Value")
        for name in CONFIG_KEYS:
            table.add_row(name, str(getattr(settings, name)))
        console.print(table)
        return

    if value is None:
        console.print(f"[red]Missing value for '{key}'[/red]")
        sys.exit(1)

    try:
        config = set_config_value(key, value, config_path)
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Config file is not valid TOML, not changed: {e}[/red]")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] {key} = {config[key]!r}")

"""Admin commands for backup and init."""

import shutil
import sqlite3
import sys
from datetime import datetime
from pathlib import Path

from rich.console import Console

from kinsenas.config import create_default_config, get_config_path, get_database_path, load_config_or_default
from kinsenas.store.schema import get_xdg_data_home, init_database

console = Console()


def get_backup_dir() -> Path:
    """Get the default backup directory (XDG compliant)."""
    return get_xdg_data_home() / "kinsenas" / "backups"


def backup_command(
    output_dir: str | None = None,
) -> None:
    """Backup database and configuration files."""
    config_path = get_config_path()
    db_path = get_database_path(load_config_or_default(config_path))

    if not db_path.exists():
        console.print("[red]Database not found. Run 'kinsenas init' first.[/red]", style="bold")
        sys.exit(1)

    backup_dir = Path(output_dir).expanduser() if output_dir else get_backup_dir()
    backup_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    db_backup = backup_dir / f"kinsenas_{timestamp}.db"
    config_backup = backup_dir / f"config_{timestamp}.toml"

    try:
        shutil.copy2(db_path, db_backup)
        console.print(f"[green]✓[/green] Database backed up to: {db_backup}")

        # Config is optional, defaults apply without it
        if config_path.exists():
            shutil.copy2(config_path, config_backup)
            console.print(f"[green]✓[/green] Config backed up to: {config_backup}")

        console.print("\n[green]Backup complete![/green]", style="bold")
        console.print(f"[dim]Backup directory: {backup_dir}[/dim]")

    except OSError as e:
        console.print(f"[red]Backup failed: {e}[/red]", style="bold")
        sys.exit(1)


def init_command(force: bool = False) -> None:
    """Initialize kinsenas database and configuration."""
    config_path = get_config_path()
    config_exists = config_path.exists()
    db_path = get_database_path(load_config_or_default(config_path))
    db_exists = db_path.exists()

    try:
        if not force and (db_exists or config_exists):
            console.print("[red]Initialization failed:[/red]", style="bold")
            if db_exists:
                console.print(f"  Database already exists: {db_path}")
            if config_exists:
                console.print(f"  Config already exists: {config_path}")
            console.print("\n[yellow]Use 'kinsenas init --force' to overwrite[/yellow]")
            sys.exit(1)

        if db_exists:
            db_path.unlink()

        console.print(f"[cyan]Initializing database at {db_path}...[/cyan]")
        init_database(db_path)
        console.print("[green]✓[/green] Database initialized")

        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")

        console.print("\n[green]Initialization complete![/green]", style="bold")

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

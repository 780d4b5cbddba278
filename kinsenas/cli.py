"""CLI entry point for kinsenas."""

import typer

from kinsenas.commands.admin import backup_command, init_command
from kinsenas.commands.budget import budget_command
from kinsenas.commands.expenses import expenses_command

app = typer.Typer(
    name="kinsenas",
    help="Kinsenas - Payday budgeting split across two cutoffs",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Kinsenas - Payday budgeting split across two cutoffs."""
    pass


@app.command(name="backup")
def backup(
    output_dir: str = typer.Option(None, "--output", "-o", help="Backup directory (default: data dir/backups)"),
) -> None:
    """Backup your database and configuration files."""
    backup_command(output_dir)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing database and config"),
) -> None:
    """Initialize kinsenas database and configuration."""
    init_command(force)


@app.command()
def budget(
    add: bool = typer.Option(False, "--add", help="Add a blank row"),
    remove_last: bool = typer.Option(False, "--remove-last", help="Remove the last row (the salary row stays)"),
    remove: int = typer.Option(None, "--remove", help="Remove row number N"),
    edit: int = typer.Option(None, "--edit", help="Edit row number N"),
    name: str = typer.Option(None, "--name", help="New name for the edited row"),
    first: str = typer.Option(None, "--first", help="New first cutoff amount for the edited row"),
    second: str = typer.Option(None, "--second", help="New second cutoff amount for the edited row"),
    first_day: int = typer.Option(None, "--first-day", help="Set the first cutoff day (1-31)"),
    second_day: int = typer.Option(None, "--second-day", help="Set the second cutoff day (1-31)"),
    reset: bool = typer.Option(False, "--reset", help="Restore the default rows and cutoff days"),
) -> None:
    """Show and edit your recurring budget."""
    budget_command(add, remove_last, remove, edit, name, first, second, first_day, second_day, reset)


@app.command()
def expenses(
    month: str = typer.Option(None, "--month", help="Month to show (YYYY-MM, default: this month)"),
    prev: bool = typer.Option(False, "--prev", help="Go to the month before"),
    next: bool = typer.Option(False, "--next", help="Go to the month after"),
    add: bool = typer.Option(False, "--add", help="Add a blank row"),
    remove_last: bool = typer.Option(False, "--remove-last", help="Remove the last row"),
    remove: list[int] = typer.Option(None, "--remove", help="Remove row number N (repeatable)"),
    edit: int = typer.Option(None, "--edit", help="Edit row number N"),
    name: str = typer.Option(None, "--name", help="New name for the edited row"),
    amount: str = typer.Option(None, "--amount", help="New amount for the edited row"),
) -> None:
    """Show and edit your expenses for a month."""
    expenses_command(month, prev, next, add, remove_last, remove, edit, name, amount)


if __name__ == "__main__":
    app()

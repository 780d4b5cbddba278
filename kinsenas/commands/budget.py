"""Budget command for the recurring budget table."""

import sqlite3
import sys
import tomllib

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from kinsenas.budget_store import BudgetStore
from kinsenas.commands.common import format_amount, format_balance, ordinal, resolve_settings, row_index
from kinsenas.domain.budget import Cutoff

console = Console()


def show_budget(store: BudgetStore, currency: str) -> None:
    """Render the budget table with its totals."""
    first_label = ordinal(store.first_cutoff_day)
    second_label = ordinal(store.second_cutoff_day)

    table = Table(title="Budget")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="white")
    table.add_column(first_label, justify="right")
    table.add_column(second_label, justify="right")

    for idx, row in enumerate(store.rows, 1):
        name = escape(row.name) if row.name else "[dim]-[/dim]"
        # Salary row is what everything else is paid from
        if idx == 1:
            name = f"[bold green]{name}[/bold green]"
        table.add_row(str(idx), name, escape(row.first_cutoff), escape(row.second_cutoff))

    console.print(table)

    console.print(f"\n[bold]Monthly total:[/bold] {format_amount(store.monthly_total_value, currency)}")
    console.print(
        f"[bold]Remaining after {first_label}:[/bold] {format_balance(store.remaining_after_first_cutoff, currency)}"
    )
    console.print(
        f"[bold]Remaining after {second_label}:[/bold] {format_balance(store.remaining_after_second_cutoff, currency)}"
    )


def remove_budget_row(store: BudgetStore, number: int) -> None:
    """Remove a row by its 1-based number."""
    index = row_index(number, len(store.rows))
    if index is None:
        console.print(f"[red]No row {number}. Choose 1-{len(store.rows)}[/red]")
        sys.exit(1)

    row = store.rows[index]
    if not store.remove_row(row.id):
        console.print("[yellow]The salary row can't be removed[/yellow]")
        return

    label = escape(row.name) or f"row {number}"
    console.print(f"[green]✓ Removed {label}[/green]\n")


def edit_budget_row(
    store: BudgetStore,
    number: int,
    name: str | None,
    first: str | None,
    second: str | None,
) -> None:
    """Edit fields of a row by its 1-based number."""
    index = row_index(number, len(store.rows))
    if index is None:
        console.print(f"[red]No row {number}. Choose 1-{len(store.rows)}[/red]")
        sys.exit(1)

    if name is None and first is None and second is None:
        console.print("[red]--edit needs at least one of --name, --first, --second[/red]")
        sys.exit(1)

    updated = store.update_row(store.rows[index].id, name=name, first_cutoff=first, second_cutoff=second)
    label = escape(updated.name) or f"row {number}"
    console.print(f"[green]✓ Updated {label}[/green]\n")


def set_cutoff_day(store: BudgetStore, which: Cutoff, day: int) -> None:
    """Set a cutoff day, reporting when the value was clamped."""
    stored = store.set_cutoff_day(which, day)
    if stored != day:
        console.print(f"[yellow]Cutoff day {day} is out of range, using {stored}[/yellow]")
    console.print(f"[green]✓ {which.capitalize()} cutoff set to the {ordinal(stored)}[/green]\n")


def budget_command(
    add: bool = False,
    remove_last: bool = False,
    remove: int | None = None,
    edit: int | None = None,
    name: str | None = None,
    first: str | None = None,
    second: str | None = None,
    first_day: int | None = None,
    second_day: int | None = None,
    reset: bool = False,
) -> None:
    """Show and edit the budget table."""
    row_actions = [add, remove_last, remove is not None, edit is not None, reset]
    if sum(row_actions) > 1:
        console.print("[red]Use only one of --add, --remove-last, --remove, --edit, --reset[/red]")
        sys.exit(1)

    if edit is None and (name is not None or first is not None or second is not None):
        console.print("[red]--name, --first and --second need --edit ROW[/red]")
        sys.exit(1)

    try:
        db_path, currency = resolve_settings()
        store = BudgetStore(db_path)

        if reset:
            store.reset()
            console.print("[green]✓ Budget reset to defaults[/green]\n")
        elif add:
            store.add_row()
            console.print(f"[green]✓ Added row {len(store.rows)}[/green]\n")
        elif remove_last:
            if store.remove_last_row():
                console.print("[green]✓ Removed last row[/green]\n")
            else:
                console.print("[yellow]The salary row can't be removed[/yellow]\n")
        elif remove is not None:
            remove_budget_row(store, remove)
        elif edit is not None:
            edit_budget_row(store, edit, name, first, second)

        if first_day is not None:
            set_cutoff_day(store, "first", first_day)
        if second_day is not None:
            set_cutoff_day(store, "second", second_day)

        show_budget(store, currency)

    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

"""Expenses command for the month-by-month tracker."""

import sqlite3
import sys
import tomllib

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from kinsenas.commands.common import format_amount, resolve_settings, row_index
from kinsenas.dates import parse_month_key
from kinsenas.expenses_store import ExpensesStore

console = Console()


def show_expenses(store: ExpensesStore, currency: str) -> None:
    """Render the selected month's expenses with the total."""
    table = Table(title=f"Expenses - {store.selected_month_title}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="white")
    table.add_column("Amount", justify="right")

    for idx, row in enumerate(store.rows, 1):
        name = escape(row.name) if row.name else "[dim]-[/dim]"
        amount = escape(row.amount) if row.amount else "[dim]-[/dim]"
        table.add_row(str(idx), name, amount)

    if store.rows:
        console.print(table)
    else:
        console.print(f"[dim]No expenses for {store.selected_month_title}[/dim]")

    console.print(f"\n[bold]Total expenses:[/bold] [red]{format_amount(store.total_expenses, currency)}[/red]")


def select_month(store: ExpensesStore, month: str | None, prev: bool, next: bool) -> None:
    """Move the store to the month requested on the command line."""
    if month:
        try:
            store.selected_month = parse_month_key(month)
        except ValueError:
            console.print(f"[red]Invalid month '{escape(month)}'. Use YYYY-MM[/red]")
            sys.exit(1)

    try:
        if prev:
            store.go_to_previous_month()
        elif next:
            store.go_to_next_month()
    except ValueError:
        direction = "before" if prev else "after"
        console.print(f"[red]No month {direction} {store.selected_month_title}[/red]")
        sys.exit(1)


def remove_expense_rows(store: ExpensesStore, numbers: list[int]) -> None:
    """Remove rows by their 1-based numbers."""
    offsets = []
    for number in numbers:
        index = row_index(number, len(store.rows))
        if index is None:
            console.print(f"[red]No row {number}. Choose 1-{len(store.rows)}[/red]")
            sys.exit(1)
        offsets.append(index)

    removed = store.remove_rows(offsets)
    console.print(f"[green]✓ Removed {removed} row{'s' if removed != 1 else ''}[/green]\n")


def edit_expense_row(store: ExpensesStore, number: int, name: str | None, amount: str | None) -> None:
    """Edit fields of a row by its 1-based number."""
    index = row_index(number, len(store.rows))
    if index is None:
        console.print(f"[red]No row {number}. Choose 1-{len(store.rows)}[/red]")
        sys.exit(1)

    if name is None and amount is None:
        console.print("[red]--edit needs at least one of --name, --amount[/red]")
        sys.exit(1)

    updated = store.update_row(store.rows[index].id, name=name, amount=amount)
    label = escape(updated.name) or f"row {number}"
    console.print(f"[green]✓ Updated {label}[/green]\n")


def expenses_command(
    month: str | None = None,
    prev: bool = False,
    next: bool = False,
    add: bool = False,
    remove_last: bool = False,
    remove: list[int] | None = None,
    edit: int | None = None,
    name: str | None = None,
    amount: str | None = None,
) -> None:
    """Show and edit a month's expenses."""
    if prev and next:
        console.print("[red]Use only one of --prev, --next[/red]")
        sys.exit(1)

    row_actions = [add, remove_last, bool(remove), edit is not None]
    if sum(row_actions) > 1:
        console.print("[red]Use only one of --add, --remove-last, --remove, --edit[/red]")
        sys.exit(1)

    if edit is None and (name is not None or amount is not None):
        console.print("[red]--name and --amount need --edit ROW[/red]")
        sys.exit(1)

    try:
        db_path, currency = resolve_settings()
        store = ExpensesStore(db_path)
        select_month(store, month, prev, next)

        if add:
            store.add_row()
            console.print(f"[green]✓ Added row {len(store.rows)}[/green]\n")
        elif remove_last:
            if store.remove_last_row():
                console.print("[green]✓ Removed last row[/green]\n")
            else:
                console.print("[yellow]No rows to remove[/yellow]\n")
        elif remove:
            remove_expense_rows(store, remove)
        elif edit is not None:
            edit_expense_row(store, edit, name, amount)

        show_expenses(store, currency)

    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

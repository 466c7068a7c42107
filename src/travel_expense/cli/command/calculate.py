from __future__ import annotations

"""
Calculate a monthly travel expense report: load, compute, store.
"""

from pathlib import Path

from rich.table import Table

from .util import console, fmt_cents
from travel_expense.errors import TravelExpenseError
from travel_expense.model.report import Report
from travel_expense.model.report_io import load_report, save_report
from travel_expense.services.expense_service import ExpenseService


def run(*, path_in: Path, path_out: Path) -> int:
    """Read the report at path_in, compute allowances and totals, write path_out.

    Nothing is written unless the whole report is computed successfully.

    Returns:
        Exit code (0 success; 1 on any error)
    """
    try:
        report = load_report(path_in)
        ExpenseService().calculate(report)
        save_report(path_out, report)
    except TravelExpenseError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    _display_totals(report)
    console.print(f"[green]Wrote[/] {path_out}")
    return 0


def _display_totals(report: Report) -> None:
    table = Table(title=f"Travel Expenses: {report.month}", show_lines=False)
    table.add_column("Day", style="cyan", justify="right", no_wrap=True)
    table.add_column("Subject", style="white")
    table.add_column("Hours", style="blue", justify="right")
    table.add_column("km", style="yellow", justify="right")
    table.add_column("Catering", justify="right")
    table.add_column("Travel", justify="right")

    for entry in report.entries:
        table.add_row(
            str(entry.day),
            entry.subject,
            str(entry.calculated.hours),
            str(entry.traveled_km),
            fmt_cents(entry.calculated.catering_money),
            fmt_cents(entry.calculated.travel_money),
        )

    console.print(table)

    totals = report.totals
    console.print(f"\n[bold]Travel Distance:[/] {totals.travel_distance_km} km")
    console.print("[bold]Travel Money:[/]", fmt_cents(totals.travel_money))
    console.print("[bold]Catering Money:[/]", fmt_cents(totals.catering_money))
    console.print("[bold]Total:[/]", fmt_cents(totals.money))

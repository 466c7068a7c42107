from __future__ import annotations

"""
Travel Expense CLI Wrapper (Typer + Rich)

Reads a YAML report of business-trip days, computes catering allowances,
travel reimbursement and monthly totals, and writes the completed report.
"""

import logging
from pathlib import Path

import typer

APP_HELP = "Compute monthly travel expense totals from a YAML report"

logging.basicConfig(level=logging.WARNING)

app = typer.Typer(add_completion=False, help=APP_HELP)


@app.command()
def calculate(
    path_in: Path = typer.Argument(..., help="Input report (YAML)"),
    path_out: Path = typer.Argument(..., help="Output report with calculated values (YAML)"),
):
    """Compute per-entry allowances and totals, then write the completed report.

    Values under `calculated` and `totals` in the input are ignored and replaced.
    No output is written if any entry fails to compute.

    Examples:
      travel-expense october.yml october-out.yml
    """
    from travel_expense.cli.command import calculate as cmd_calculate

    code = cmd_calculate.run(path_in=path_in, path_out=path_out)
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()  # pragma: no cover

from __future__ import annotations

# Command implementations for the travel-expense CLI.
# Each command module exposes a `run(...)` function that performs the action
# and prints to the console. The Typer wrapper in travel_expense.cli.app delegates here.

__all__ = [
    "calculate",
]

from __future__ import annotations

from rich.console import Console
from rich.text import Text

console = Console()


def fmt_cents(cents: int) -> Text:
    """Format an integer amount of cents as currency units, e.g. 4400 -> 44.00."""
    s = f"{cents / 100:,.2f}"
    if cents > 0:
        return Text(s, style="bold green")
    return Text(s)

from __future__ import annotations

"""
Expense Service - monthly travel expense calculation

Fills in each entry's calculated values (hours, catering money, travel money)
and the report totals. Works on the in-memory report only; loading and saving
are handled by travel_expense.model.report_io.
"""

import logging

from travel_expense.errors import MalformedTimeError
from travel_expense.model.report import CalculatedValues, Entry, Report, TotalValues
from travel_expense.services.allowance import catering_money, travel_money
from travel_expense.services.time_span import hours_between

logger = logging.getLogger(__name__)


class ExpenseService:
    """Service for per-entry allowances and report totals."""

    def calculate_entry(self, entry: Entry, report: Report) -> CalculatedValues:
        """Compute the derived values of one entry using the report's rates.

        Raises:
            MalformedTimeError: start or end time is not a clock time
        """
        try:
            hours = hours_between(entry.start_time, entry.end_time)
        except MalformedTimeError as e:
            raise MalformedTimeError(e.value, e.reason, entry_day=entry.day) from e

        return CalculatedValues(
            hours=hours,
            catering_money=catering_money(
                hours, report.small_catering_money, report.big_catering_money
            ),
            travel_money=travel_money(entry.traveled_km, report.cent_per_km),
        )

    def calculate(self, report: Report) -> Report:
        """Recompute every entry and the totals of ``report`` in place.

        Values already present in ``calculated`` or ``totals`` are ignored and
        overwritten. The first malformed entry aborts the pass.

        Returns:
            The same report instance
        """
        travel_distance_km = 0
        total_travel_money = 0
        total_catering_money = 0
        total_money = 0

        for entry in report.entries:
            calculated = self.calculate_entry(entry, report)
            logger.debug(
                "Day %d: %d hours, catering %d, travel %d",
                entry.day,
                calculated.hours,
                calculated.catering_money,
                calculated.travel_money,
            )

            travel_distance_km += entry.traveled_km
            total_travel_money += calculated.travel_money
            total_catering_money += calculated.catering_money
            total_money += calculated.travel_money + calculated.catering_money

            entry.calculated = calculated

        report.totals = TotalValues(
            travel_distance_km=travel_distance_km,
            travel_money=total_travel_money,
            catering_money=total_catering_money,
            money=total_money,
        )
        return report


__all__ = ["ExpenseService"]

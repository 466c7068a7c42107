from __future__ import annotations

"""
Tests for the expense calculation service.
"""

from datetime import date

import pytest

from travel_expense.errors import MalformedTimeError
from travel_expense.model.report import CalculatedValues, Entry, Report, TotalValues
from travel_expense.model.report_io import dump_report_text, load_report_text
from travel_expense.services.expense_service import ExpenseService


def _report(entries: list[Entry]) -> Report:
    return Report(
        author="Jane Doe",
        company="ACME GmbH",
        signature_image="signature.png",
        cent_per_km=30,
        small_catering_money=1400,
        big_catering_money=2800,
        document_date=date(2024, 10, 31),
        month="October 2024",
        entries=entries,
    )


class DescribeExpenseService:
    def it_should_compute_partial_day_with_travel(self):
        report = _report(
            [Entry(day=3, subject="Customer visit", start_time="08:00", end_time="17:00", traveled_km=100)]
        )

        ExpenseService().calculate(report)

        assert report.entries[0].calculated == CalculatedValues(
            hours=9, catering_money=1400, travel_money=3000
        )
        assert report.totals == TotalValues(
            travel_distance_km=100, travel_money=3000, catering_money=1400, money=4400
        )

    def it_should_default_to_full_day_without_times(self):
        report = _report([Entry(day=4, subject="Trade fair")])

        ExpenseService().calculate(report)

        calculated = report.entries[0].calculated
        assert calculated.hours == 24
        assert calculated.catering_money == 2800
        assert calculated.travel_money == 0

    def it_should_pay_no_catering_for_eight_hours(self):
        report = _report([Entry(day=5, subject="Office", start_time="09:00", end_time="17:00", traveled_km=12)])

        ExpenseService().calculate(report)

        assert report.entries[0].calculated.hours == 8
        assert report.entries[0].calculated.catering_money == 0
        assert report.totals.money == 360

    def it_should_sum_totals_over_entries(self):
        report = _report(
            [
                Entry(day=1, subject="A", start_time="08:00", end_time="17:00", traveled_km=100),
                Entry(day=2, subject="B", traveled_km=250),
                Entry(day=3, subject="C", start_time="10:00", end_time="12:00", traveled_km=0),
            ]
        )

        ExpenseService().calculate(report)

        totals = report.totals
        assert totals.travel_distance_km == 350
        assert totals.travel_money == sum(e.calculated.travel_money for e in report.entries)
        assert totals.catering_money == sum(e.calculated.catering_money for e in report.entries)
        assert totals.money == totals.travel_money + totals.catering_money
        assert totals.money == 3000 + 1400 + 7500 + 2800

    def it_should_overwrite_existing_derived_values(self):
        entry = Entry(
            day=1,
            subject="A",
            start_time="08:00",
            end_time="10:00",
            calculated=CalculatedValues(hours=99, catering_money=99, travel_money=99),
        )
        report = _report([entry])
        report.totals = TotalValues(travel_distance_km=1, travel_money=2, catering_money=3, money=4)

        ExpenseService().calculate(report)

        assert report.entries[0].calculated == CalculatedValues(hours=2, catering_money=0, travel_money=0)
        assert report.totals == TotalValues()

    def it_should_keep_entry_order(self):
        report = _report([Entry(day=d, subject=str(d)) for d in (15, 2, 9)])

        ExpenseService().calculate(report)

        assert [e.day for e in report.entries] == [15, 2, 9]

    def it_should_produce_zero_totals_for_no_entries(self):
        report = _report([])

        ExpenseService().calculate(report)

        assert report.totals == TotalValues()

    def it_should_return_the_same_report(self):
        report = _report([Entry(day=1, subject="A")])
        assert ExpenseService().calculate(report) is report

    def it_should_report_decimal_time_as_malformed_time(self):
        text = dump_report_text(_report([])).replace(
            "entries: []", "entries:\n- day: 2\n  subject: Site visit\n  start_time: 9.30\n"
        )
        report = load_report_text(text)

        with pytest.raises(MalformedTimeError) as exc:
            ExpenseService().calculate(report)

        assert exc.value.entry_day == 2
        assert "missing ':'" in str(exc.value)

    def it_should_report_day_of_malformed_entry(self):
        report = _report(
            [
                Entry(day=1, subject="ok"),
                Entry(day=7, subject="bad", start_time="930"),
            ]
        )

        with pytest.raises(MalformedTimeError) as exc:
            ExpenseService().calculate(report)

        assert exc.value.entry_day == 7
        assert exc.value.value == "930"
        assert "day 7" in str(exc.value)

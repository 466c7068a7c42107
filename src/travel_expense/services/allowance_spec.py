from __future__ import annotations

import pytest

from travel_expense.services.allowance import catering_money, travel_money

SMALL = 1400
BIG = 2800


class DescribeCateringMoney:
    @pytest.mark.parametrize("hours", [0, 1, 7, 8])
    def it_should_pay_nothing_up_to_eight_hours(self, hours):
        assert catering_money(hours, SMALL, BIG) == 0

    @pytest.mark.parametrize("hours", [9, 12, 23])
    def it_should_pay_partial_day_above_eight_hours(self, hours):
        assert catering_money(hours, SMALL, BIG) == SMALL

    @pytest.mark.parametrize("hours", [24, 25])
    def it_should_pay_full_day_from_twenty_four_hours(self, hours):
        assert catering_money(hours, SMALL, BIG) == BIG


class DescribeTravelMoney:
    def it_should_multiply_distance_by_rate(self):
        assert travel_money(100, 30) == 3000

    def it_should_pay_nothing_without_distance(self):
        assert travel_money(0, 30) == 0
        assert travel_money(0, 999) == 0

    def it_should_not_round(self):
        assert travel_money(7, 33) == 231

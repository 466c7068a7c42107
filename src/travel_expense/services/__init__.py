from .allowance import catering_money, travel_money
from .expense_service import ExpenseService
from .time_span import hours_between, parse_clock_time

__all__ = [
    "ExpenseService",
    "catering_money",
    "hours_between",
    "parse_clock_time",
    "travel_money",
]

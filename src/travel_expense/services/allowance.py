"""Per-entry allowance rules: catering per diem and travel reimbursement."""

from travel_expense.config import FULL_DAY_HOURS, PARTIAL_DAY_THRESHOLD_HOURS


def catering_money(hours: int, small_catering_money: int, big_catering_money: int) -> int:
    """Catering allowance for one day.

    24 hours or more earns the full-day allowance, more than 8 hours the
    partial-day allowance, anything up to and including 8 hours nothing.
    """
    if hours >= FULL_DAY_HOURS:
        return big_catering_money
    if hours > PARTIAL_DAY_THRESHOLD_HOURS:
        return small_catering_money
    return 0


def travel_money(traveled_km: int, cent_per_km: int) -> int:
    return traveled_km * cent_per_km


__all__ = ["catering_money", "travel_money"]

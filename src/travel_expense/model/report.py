from __future__ import annotations

"""
Report models for monthly travel expense documents.

Scope
- Pure Pydantic v2 models mirroring the YAML report document
- No I/O operations (handled by report_io.py)

Derived values
- Entry.calculated and Report.totals are outputs. They default to zero when
  absent from the input and are overwritten on every calculation run.
"""

from datetime import date
from typing import Annotated

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from travel_expense.config import DEFAULT_END_TIME, DEFAULT_START_TIME

# Integer fields are strict: "30", 30.0 and true are rejected rather than coerced.
Count = Annotated[int, Field(strict=True, ge=0)]


class CalculatedValues(BaseModel):
    """Per-entry derived values."""

    hours: int = 0
    catering_money: int = 0
    travel_money: int = 0


class TotalValues(BaseModel):
    """Derived totals over all entries of a report."""

    travel_distance_km: int = 0
    travel_money: int = 0
    catering_money: int = 0
    money: int = 0


class Entry(BaseModel):
    """One business-trip day.

    Missing start/end times default to a full day (00:00 until 24:00). The
    defaults are applied during validation so calculation code always sees text.
    """

    day: int = Field(strict=True, gt=0, description="Day of month")
    subject: str
    start_time: str = Field(default=DEFAULT_START_TIME, description="HH:MM")
    end_time: str = Field(default=DEFAULT_END_TIME, description="HH:MM or 24:00")
    traveled_km: Count = 0
    calculated: CalculatedValues = Field(default_factory=CalculatedValues)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _normalize_time(cls, value: object, info: ValidationInfo) -> object:
        if value is None:
            return DEFAULT_START_TIME if info.field_name == "start_time" else DEFAULT_END_TIME
        # YAML reads an unquoted 930 or 9.30 as a number; keep it as text for the time parser.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class Report(BaseModel):
    """Root of a monthly travel expense document.

    Rates are integer base-currency units (cents). ``signature_image`` is an
    opaque reference kept for the document renderer; calculation ignores it.
    """

    author: str
    company: str
    signature_image: str

    cent_per_km: Count
    small_catering_money: Count
    big_catering_money: Count

    document_date: date
    month: str
    entries: list[Entry]

    totals: TotalValues = Field(default_factory=TotalValues)


__all__ = [
    "CalculatedValues",
    "Entry",
    "Report",
    "TotalValues",
]

from .report import CalculatedValues, Entry, Report, TotalValues
from .report_io import (
    dump_report_text,
    load_report,
    load_report_text,
    save_report,
)

__all__ = [
    # models
    "CalculatedValues",
    "Entry",
    "Report",
    "TotalValues",
    # IO helpers
    "dump_report_text",
    "load_report",
    "load_report_text",
    "save_report",
]

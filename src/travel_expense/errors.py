"""
Typed exceptions for the travel expense calculator.

Every error is fatal: the run stops at the first one and no output document
is written. Each class carries a machine-readable ``code`` class attribute
and keeps its context as attributes rather than only in the message.

    TravelExpenseError (base)
    |
    +-- InputNotFoundError
    +-- DocumentIOError
    +-- SchemaError
    |   +-- MalformedConstantError
    +-- MalformedTimeError
"""

from __future__ import annotations

from pathlib import Path


class TravelExpenseError(Exception):
    """Base exception for all calculator errors."""

    code: str = "TRAVEL_EXPENSE_ERROR"


class InputNotFoundError(TravelExpenseError):
    """Input document does not exist."""

    code: str = "INPUT_NOT_FOUND"

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Input file not found: {path}")


class DocumentIOError(TravelExpenseError):
    """Input document could not be read or output document could not be written."""

    code: str = "DOCUMENT_IO_ERROR"

    def __init__(self, path: Path, operation: str, reason: str):
        self.path = path
        self.operation = operation
        self.reason = reason
        super().__init__(f"Cannot {operation} {path}: {reason}")


class SchemaError(TravelExpenseError):
    """Document does not match the report structure."""

    code: str = "SCHEMA_ERROR"

    def __init__(self, message: str, location: str | None = None):
        self.location = location
        if location:
            message = f"{location}: {message}"
        super().__init__(message)


class MalformedConstantError(SchemaError):
    """A numeric field is not a valid integer for its position."""

    code: str = "MALFORMED_CONSTANT"

    def __init__(self, location: str, value: object, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"{reason} (got {value!r})", location=location)


class MalformedTimeError(TravelExpenseError):
    """Start or end time is not an "HH:MM" clock time."""

    code: str = "MALFORMED_TIME"

    def __init__(self, value: str, reason: str, entry_day: int | None = None):
        self.value = value
        self.reason = reason
        self.entry_day = entry_day
        where = f" in entry for day {entry_day}" if entry_day is not None else ""
        super().__init__(f"Malformed time {value!r}{where}: {reason}")


__all__ = [
    "DocumentIOError",
    "InputNotFoundError",
    "MalformedConstantError",
    "MalformedTimeError",
    "SchemaError",
    "TravelExpenseError",
]

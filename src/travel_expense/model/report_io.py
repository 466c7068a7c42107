from __future__ import annotations

"""
Report document I/O (YAML loading and saving).

Text-level helpers (load_report_text / dump_report_text) do no disk I/O; the
path-level helpers wrap them with file handling and translate every failure
into the typed errors of travel_expense.errors.

Output is written to a temporary sibling file and moved into place, so a failed
run never leaves a partial document behind.
"""

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from travel_expense.errors import (
    DocumentIOError,
    InputNotFoundError,
    MalformedConstantError,
    SchemaError,
)
from travel_expense.model.report import Report

logger = logging.getLogger(__name__)

# Pydantic error types raised by the integer fields of the report models
_INTEGER_ERROR_TYPES = {
    "int_type",
    "int_parsing",
    "int_from_float",
    "greater_than",
    "greater_than_equal",
}

_INT_TAG = "tag:yaml.org,2002:int"

# YAML 1.1 integers minus the base-60 form, which would turn 17:00 into 1020.
_INT_WITHOUT_SEXAGESIMAL = re.compile(
    r"""^(?:[-+]?0b[0-1_]+
    |[-+]?0[0-7_]+
    |[-+]?(?:0|[1-9][0-9_]*)
    |[-+]?0x[0-9a-fA-F_]+)$""",
    re.X,
)


# Free-text fields keep their source text: month: 10, subject: No, subject: 2024-10-03.
TEXT_FIELDS = frozenset({"author", "company", "signature_image", "month", "subject"})


class ReportLoader(yaml.SafeLoader):
    """Safe loader that keeps clock times such as 17:00 and free-text fields as text."""

    def construct_mapping(self, node, deep=False):
        mapping = super().construct_mapping(node, deep=deep)
        for key_node, value_node in node.value:
            if not isinstance(value_node, yaml.ScalarNode):
                continue
            key = self.construct_object(key_node, deep=deep)
            if key in TEXT_FIELDS:
                mapping[key] = self.construct_scalar(value_node)
        return mapping


ReportLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _INT_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
ReportLoader.add_implicit_resolver(_INT_TAG, _INT_WITHOUT_SEXAGESIMAL, list("-+0123456789"))


def _format_location(loc: tuple[Any, ...]) -> str:
    out = ""
    for part in loc:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else str(part)
    return out


def _translate_validation_error(ve: ValidationError) -> SchemaError:
    """Map the first Pydantic error onto SchemaError or MalformedConstantError."""
    first = ve.errors()[0]
    location = _format_location(tuple(first.get("loc", ())))
    if first["type"] in _INTEGER_ERROR_TYPES:
        return MalformedConstantError(location, first.get("input"), first["msg"])
    return SchemaError(first["msg"], location=location or None)


def _output_mode(path: Path) -> int:
    """Permissions for the written report: keep an existing file's, else honour the umask."""
    if path.exists():
        return path.stat().st_mode & 0o777
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def load_report_text(text: str) -> Report:
    """Parse YAML text into a validated Report.

    Raises:
        SchemaError: YAML is invalid, not a mapping, or does not match the model
        MalformedConstantError: an integer field holds a non-integer or negative value
    """
    try:
        data = yaml.load(text, Loader=ReportLoader)
    except yaml.YAMLError as e:
        raise SchemaError(f"Invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise SchemaError("Report document must be a mapping")

    try:
        return Report.model_validate(data)
    except ValidationError as ve:
        raise _translate_validation_error(ve) from ve


def dump_report_text(report: Report) -> str:
    """Serialize a Report to YAML text, keeping model field order."""
    # Python mode keeps document_date a date, so YAML emits it unquoted.
    data = report.model_dump(mode="python")
    return yaml.safe_dump(
        data,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def load_report(path: Path) -> Report:
    """Read and validate the report document at ``path``."""
    try:
        with path.open("r", encoding="utf-8") as fh:
            text = fh.read()
    except FileNotFoundError as e:
        raise InputNotFoundError(path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentIOError(path, "read", str(e)) from e

    report = load_report_text(text)
    logger.debug("Loaded report for %s with %d entries from %s", report.month, len(report.entries), path)
    return report


def save_report(path: Path, report: Report) -> None:
    """Write ``report`` to ``path`` as YAML.

    The document is serialized fully before any file is touched, then written
    to a temporary file in the target directory and renamed over ``path``.

    Raises:
        DocumentIOError: the target directory or file cannot be written
    """
    text = dump_report_text(report)

    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp_name = fh.name
            fh.write(text)
        os.chmod(tmp_name, _output_mode(path))
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise DocumentIOError(path, "write", str(e)) from e

    logger.debug("Wrote report to %s", path)


__all__ = [
    "ReportLoader",
    "dump_report_text",
    "load_report",
    "load_report_text",
    "save_report",
]

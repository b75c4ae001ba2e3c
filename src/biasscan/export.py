"""Export scan results as summary CSV, detailed CSV or JSON."""

from __future__ import annotations

import csv
import dataclasses
import enum
import io
import json
from datetime import datetime, timezone
from typing import Any

from biasscan.scanner.models import ScanResults

SUMMARY_HEADERS = [
    "File Name",
    "File Path",
    "Language",
    "Total Elements",
    "Biased Elements",
    "Bias Percentage",
    "Estimated Fix Time (seconds)",
    "Last Scanned",
]

DETAILED_HEADERS = [
    "File Name",
    "File Path",
    "Language",
    "Line Number",
    "Column",
    "Occurrence Type",
    "Biased Term",
    "Term Category",
    "Term Severity",
    "Context",
    "Content",
]

_FILENAME_STEMS = {
    "csv": ("bias-scan-results", "csv"),
    "json": ("bias-scan-results", "json"),
    "detailed-csv": ("bias-scan-detailed", "csv"),
}


def _iso(timestamp: float) -> str:
    return (
        datetime.fromtimestamp(timestamp, tz=timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def _write_rows(headers: list[str], rows: list[list[str]]) -> str:
    buf = io.StringIO()
    # Header row is unquoted, every data field is quoted
    buf.write(",".join(headers) + "\n")
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(rows)
    return buf.getvalue().rstrip("\n")


def to_csv(results: ScanResults) -> str:
    """One row per file."""
    rows = [
        [
            f.name,
            f.path,
            f.language,
            str(f.total_elements),
            str(f.biased_elements),
            f"{f.bias_percentage:.2f}",
            str(f.estimated_fix_time),
            _iso(f.last_scanned),
        ]
        for f in results.files
    ]
    return _write_rows(SUMMARY_HEADERS, rows)


def to_detailed_csv(results: ScanResults) -> str:
    """One row per occurrence; clean files get a single placeholder row."""
    rows: list[list[str]] = []
    for f in results.files:
        if not f.occurrences:
            rows.append(
                [f.name, f.path, f.language, "", "", "", "", "", "", "No biased terms found", ""]
            )
            continue
        for occ in f.occurrences:
            rows.append(
                [
                    f.name,
                    f.path,
                    f.language,
                    str(occ.line),
                    str(occ.column),
                    occ.type.value,
                    occ.biased_term.term,
                    occ.biased_term.category.value,
                    occ.biased_term.severity.value,
                    occ.context,
                    occ.content,
                ]
            )
    return _write_rows(DETAILED_HEADERS, rows)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


_TIMESTAMP_FIELDS = {"last_scanned", "timestamp"}


def _to_jsonable(value: Any, key: str = "") -> Any:
    if dataclasses.is_dataclass(value):
        return {
            _camel(f.name): _to_jsonable(getattr(value, f.name), f.name)
            for f in dataclasses.fields(value)
        }
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    if key in _TIMESTAMP_FIELDS and isinstance(value, float):
        return _iso(value)
    return value


def results_to_dict(results: ScanResults) -> dict[str, Any]:
    """camelCase mapping of the full results, timestamps as ISO-8601."""
    return _to_jsonable(results)


def to_json(results: ScanResults, indent: int = 2) -> str:
    return json.dumps(results_to_dict(results), indent=indent)


EXPORTERS = {
    "csv": to_csv,
    "detailed-csv": to_detailed_csv,
    "json": to_json,
}


def default_export_filename(kind: str, when: datetime | None = None) -> str:
    """Dated filename such as ``bias-scan-results-2024-01-31.csv``."""
    stem, ext = _FILENAME_STEMS[kind]
    when = when or datetime.now(timezone.utc)
    return f"{stem}-{when.date().isoformat()}.{ext}"

"""
Shared utilities for record decoding: cell coercion, date normalisation,
grid splitting, and the positional / header-keyed row accessors.

Coercion never raises. A cell that cannot be read as the requested type comes
back as None (numbers), "" (dates), or the caller's default (text).
"""

import logging
import math
import numbers
import re
from datetime import date
from typing import Any, Iterable

import pandas as pd

from ..config import DATE_FORMAT, EMPTY_MARKERS, ERROR_MARKERS, EXCEL_EPOCH
from ..exceptions import SchemaError

logger = logging.getLogger(__name__)

RawGrid = list[list[Any]]

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)")


def _is_missing(val: Any) -> bool:
    if val is None or val is pd.NaT:
        return True
    return isinstance(val, float) and math.isnan(val)


def _is_real_number(val: Any) -> bool:
    return isinstance(val, numbers.Real) and not isinstance(val, bool)


def leading_float(text: str) -> float | None:
    """Parse the longest numeric prefix of `text`, like a lenient float()."""
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return None
    return float(match.group(0))


def parse_numeric_text(text: str) -> float | None:
    """Keep only digits, '.' and '-' from `text` and parse what is left."""
    cleaned = _NON_NUMERIC.sub("", text)
    if not cleaned:
        return None
    return leading_float(cleaned)


def coerce_number(cell: Any) -> float | int | None:
    """Coerce a cell to a number, returning None for sentinels and text.

    Numbers pass through unchanged. Strings are stripped of every character
    that is not a digit, '.' or '-' before parsing, so "1,234.50 USD" reads
    as 1234.5.
    """
    if _is_missing(cell) or isinstance(cell, bool):
        return None
    if _is_real_number(cell):
        return cell
    if not isinstance(cell, str):
        return None
    text = cell.strip()
    if text in EMPTY_MARKERS or text in ERROR_MARKERS:
        return None
    return parse_numeric_text(text)


def coerce_date(cell: Any) -> str:
    """Normalise a date cell to dd/mm/yyyy.

    Spreadsheet serial numbers use the 1899-12-30 epoch and are truncated to
    whole days. Native date values are formatted directly. Any other
    non-empty value passes through as text; blanks and "-" give "".
    """
    if _is_missing(cell) or cell is False:
        return ""
    if isinstance(cell, str) and cell.strip() in EMPTY_MARKERS:
        return ""
    if _is_real_number(cell):
        if cell == 0:
            return ""
        if cell > 0:
            try:
                stamp = pd.Timestamp(EXCEL_EPOCH) + pd.Timedelta(days=int(cell))
                return stamp.strftime(DATE_FORMAT)
            except (ValueError, OverflowError):
                logger.debug("Serial %s is out of range for a date", cell)
        return cell_text(cell)
    if isinstance(cell, (date, pd.Timestamp)):
        return cell.strftime(DATE_FORMAT)
    return str(cell)


def parse_dmy(text: str) -> date | None:
    """Parse a dd/mm/yyyy string into a date, or None."""
    if not text:
        return None
    parts = text.split("/")
    if len(parts) != 3:
        return None
    try:
        day, month, year = (int(part) for part in parts)
        return date(year, month, day)
    except ValueError:
        return None


def year_of(text: str) -> int | None:
    """Return the year field of a dd/mm/yyyy string, or None."""
    if not text:
        return None
    parts = text.split("/")
    if len(parts) != 3:
        return None
    try:
        return int(parts[2])
    except ValueError:
        return None


def cell_text(cell: Any, default: str = "") -> str:
    """Render a cell as text; falsy cells (blank, 0, None) give `default`."""
    if _is_missing(cell) or not cell:
        return default
    if isinstance(cell, float) and cell.is_integer():
        return str(int(cell))
    return str(cell)


def number_or_zero(cell: Any) -> float:
    val = coerce_number(cell)
    return 0 if val is None else val


# ---------------------------------------------------------------------------
# Grid handling
# ---------------------------------------------------------------------------

def split_grid(grid: Iterable[Iterable[Any]], sheet_label: str) -> tuple[list, RawGrid]:
    """Split a raw grid into (header, body), padding rows to the grid width.

    Raises SchemaError when the grid has no header, no body rows, or no
    columns at all.
    """
    rows = [list(row) if row is not None else [] for row in grid]
    width = max((len(row) for row in rows), default=0)
    if len(rows) < 2 or width == 0:
        raise SchemaError(f"{sheet_label} sheet is empty or has no data rows.")
    padded = [row + [""] * (width - len(row)) for row in rows]
    return padded[0], padded[1:]


def is_blank_row(cells: Iterable[Any]) -> bool:
    for cell in cells:
        if _is_missing(cell):
            continue
        if isinstance(cell, str) and not cell.strip():
            continue
        return False
    return True


def header_labels(header: list) -> list[str]:
    return [str(cell).strip() if not _is_missing(cell) else "" for cell in header]


class _RowAccessor:
    """Typed reads over one body row; subclasses decide how a key is resolved."""

    def value(self, key) -> Any:
        raise NotImplementedError

    def text(self, key, default: str = "") -> str:
        return cell_text(self.value(key), default)

    def number(self, key) -> float | None:
        return coerce_number(self.value(key))

    def number_or_zero(self, key) -> float:
        return number_or_zero(self.value(key))

    def date(self, key) -> str:
        return coerce_date(self.value(key))

    def optional_date(self, key) -> str | None:
        raw = self.value(key)
        if _is_missing(raw) or not raw:
            return None
        return coerce_date(raw)


class PositionalRow(_RowAccessor):
    """Row addressed by zero-based column index."""

    def __init__(self, cells: list):
        self.cells = cells

    def __len__(self) -> int:
        return len(self.cells)

    def value(self, index: int) -> Any:
        if index < len(self.cells):
            return self.cells[index]
        return None

    def slice(self, start: int, stop: int) -> list:
        return [self.value(i) for i in range(start, stop)]


class HeaderRow(_RowAccessor):
    """Row addressed by header label; a key may be a tuple of aliases."""

    def __init__(self, values: dict[str, Any]):
        self.values = values

    def value(self, key) -> Any:
        aliases = (key,) if isinstance(key, str) else key
        for alias in aliases:
            raw = self.values.get(alias)
            if not _is_missing(raw) and raw != "":
                return raw
        return None


def header_rows(header: list, body: RawGrid) -> list[HeaderRow]:
    """Key each non-blank body row by its header labels.

    The first column carrying a given label wins; unlabeled columns are
    dropped.
    """
    labels = header_labels(header)
    positions: dict[str, int] = {}
    for idx, label in enumerate(labels):
        if label and label not in positions:
            positions[label] = idx

    rows = []
    for cells in body:
        if is_blank_row(cells):
            continue
        rows.append(HeaderRow({label: cells[idx] for label, idx in positions.items()}))
    return rows

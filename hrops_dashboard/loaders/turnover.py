"""
Decoder for the staff turnover register.

The sheet is keyed by (mostly Thai) header labels in arbitrary column
order; see config.TURNOVER_HEADERS for the label of each field.
"""

import logging

from ..config import NOT_AVAILABLE, TURNOVER_HEADERS
from ..models import TurnoverRow
from .utils import HeaderRow, RawGrid, header_rows, split_grid

logger = logging.getLogger(__name__)

_H = TURNOVER_HEADERS

_DATE_FIELDS = (
    "hire_date_buddhist", "hire_date", "probation_pass_date", "now", "dob",
    "termination_date", "effective_date",
)
_NUMBER_FIELDS = ("tenure_years", "tenure_months", "tenure_days", "age")


def _decode_row(row: HeaderRow) -> TurnoverRow | None:
    employee_id = row.text(_H["employee_id"])
    if not employee_id:
        return None

    fields = {}
    for name, labels in _H.items():
        if name in _DATE_FIELDS:
            fields[name] = row.date(labels)
        elif name in _NUMBER_FIELDS:
            fields[name] = row.number_or_zero(labels)
        else:
            fields[name] = row.text(labels)
    fields["employee_id"] = employee_id
    fields["department"] = row.text(_H["department"], NOT_AVAILABLE)
    return TurnoverRow(**fields)


def decode_turnover(grid: RawGrid) -> list[TurnoverRow]:
    """Decode a turnover sheet; rows without an employee id are dropped."""
    header, body = split_grid(grid, "Turnover")
    rows = header_rows(header, body)
    records = [r for r in (_decode_row(row) for row in rows) if r is not None]
    logger.info("Decoded %d turnover rows (%d dropped)", len(records), len(body) - len(records))
    return records

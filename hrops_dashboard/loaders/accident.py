"""
Decoder for accident logs.

Both accident reports (general and the second warehouse site) share this
schema; they differ only in which bundle the result is stored under.
"""

import logging

from ..config import ACCIDENT_MIN_COLUMNS
from ..models import AccidentRow
from .utils import PositionalRow, RawGrid, split_grid

logger = logging.getLogger(__name__)


def _decode_row(row: PositionalRow) -> AccidentRow | None:
    if len(row) < ACCIDENT_MIN_COLUMNS:
        return None
    employee_id = row.text(6)
    employee_name = row.text(7)
    if not employee_id and not employee_name:
        return None

    return AccidentRow(
        id=row.text(0),
        incident_date=row.date(1),
        incident_time=row.text(2),
        severity=row.text(3),
        occurrence=row.text(4),
        department=row.text(5),
        employee_id=employee_id,
        employee_name=employee_name,
        position=row.text(8),
        details=row.text(9),
        cause=row.text(10),
        prevention=row.text(11),
        damage_value=row.number_or_zero(12),
        insurance_claim=row.text(13),
        action_taken=row.text(14),
        penalty=row.text(15),
        remarks=row.text(16),
        accident_location=row.text(17),
    )


def decode_accidents(grid: RawGrid) -> list[AccidentRow]:
    """Decode an accident sheet.

    Assumptions
    -----------
    - 18 columns: id, date, time, severity, occurrence, department,
      employee id, employee name, position, details, cause, prevention,
      damage value, insurance claim, action taken, penalty, remarks,
      location.
    - A row needs an employee id or an employee name.
    """
    _, body = split_grid(grid, "Accident Report")
    rows = [_decode_row(PositionalRow(cells)) for cells in body]
    records = [r for r in rows if r is not None]
    logger.info("Decoded %d accident rows (%d dropped)", len(records), len(body) - len(records))
    return records

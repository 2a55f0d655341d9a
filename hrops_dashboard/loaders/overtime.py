"""
Decoder for the yearly overtime register.

Layout (0-based columns):
    0-6    id, employee id, name, position, department, grade, status
    7-18   monthly OT hours (Jan..Dec)
    19     total OT hours
    20     OT rate
    21-32  monthly OT pay (Jan..Dec)
    33     total OT pay
    34     year (optional)
"""

import logging

from ..config import OT_MIN_COLUMNS
from ..models import OtRow
from .utils import PositionalRow, RawGrid, number_or_zero, split_grid

logger = logging.getLogger(__name__)

_HOURS_START = 7
_PAY_START = 21


def _monthly(row: PositionalRow, start: int) -> list[float]:
    return [number_or_zero(cell) for cell in row.slice(start, start + 12)]


def _decode_row(row: PositionalRow) -> OtRow | None:
    if len(row) < OT_MIN_COLUMNS:
        return None
    employee_id = row.text(1)
    if not employee_id:
        return None

    monthly_ot = _monthly(row, _HOURS_START)
    monthly_ot_pay = _monthly(row, _PAY_START)

    # Blank totals fall back to the sum of the monthly columns.
    total_ot = row.number(19)
    if total_ot is None:
        total_ot = sum(monthly_ot)
    total_ot_pay = row.number(33)
    if total_ot_pay is None:
        total_ot_pay = sum(monthly_ot_pay)

    year = row.number(34)

    return OtRow(
        id=row.text(0),
        employee_id=employee_id,
        name=row.text(2),
        position=row.text(3),
        department=row.text(4),
        grade=row.text(5),
        status=row.text(6),
        monthly_ot=monthly_ot,
        total_ot=total_ot,
        ot_rate=row.number_or_zero(20),
        monthly_ot_pay=monthly_ot_pay,
        total_ot_pay=total_ot_pay,
        year=int(year) if year else None,
    )


def decode_overtime(grid: RawGrid) -> list[OtRow]:
    """Decode an overtime sheet.

    Rows narrower than the fixed layout, or without an employee id, are
    dropped. A missing year is left as None for the report to resolve.
    """
    _, body = split_grid(grid, "OT Report")
    rows = [_decode_row(PositionalRow(cells)) for cells in body]
    records = [r for r in rows if r is not None]
    logger.info("Decoded %d overtime rows (%d dropped)", len(records), len(body) - len(records))
    return records

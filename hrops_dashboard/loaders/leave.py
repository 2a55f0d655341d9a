"""
Decoder for the yearly leave register.

Layout (0-based columns):
    0-6    id, employee id, name, position, department, grade, status
    7-18   monthly leave days (Jan..Dec), vacation included
    19-30  leave-category totals, see _TOTAL_COLUMNS
"""

import logging

from ..config import LEAVE_MIN_COLUMNS
from ..models import LeaveRow
from .utils import PositionalRow, RawGrid, cell_text, number_or_zero, split_grid

logger = logging.getLogger(__name__)

_TOTAL_COLUMNS = {
    "leave_without_vacation": 19,
    "total_leave_with_vacation": 20,
    "vacation_carried_over": 21,
    "vacation_entitlement": 22,
    "total_vacation": 23,
    "vacation_used": 24,
    "vacation_accrued": 25,
    "sick_leave": 26,
    "personal_leave": 27,
    "birthday_leave": 28,
    "other_leave": 29,
    "total_leave": 30,
}


def _decode_row(row: PositionalRow, position: int) -> LeaveRow | None:
    if len(row) < LEAVE_MIN_COLUMNS:
        return None
    employee_id = row.text(1)
    if not employee_id:
        return None

    totals = {field: row.number_or_zero(col) for field, col in _TOTAL_COLUMNS.items()}

    return LeaveRow(
        id=row.text(0, cell_text(position)),
        employee_id=employee_id,
        name=row.text(2),
        position=row.text(3),
        department=row.text(4),
        grade=row.text(5),
        status=row.text(6),
        monthly_leave=[number_or_zero(cell) for cell in row.slice(7, 19)],
        **totals,
    )


def decode_leave(grid: RawGrid) -> list[LeaveRow]:
    """Decode a leave sheet; rows without an employee id are dropped.

    A blank sequence number defaults to the row's 1-based body position.
    """
    _, body = split_grid(grid, "Leave Report")
    rows = [_decode_row(PositionalRow(cells), i + 1) for i, cells in enumerate(body)]
    records = [r for r in rows if r is not None]
    logger.info("Decoded %d leave rows (%d dropped)", len(records), len(body) - len(records))
    return records

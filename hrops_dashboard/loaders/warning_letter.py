"""Decoder for disciplinary warning letters."""

import logging

from ..config import (
    OTHER_LABEL,
    UNKNOWN,
    VERBAL_LABEL,
    VERBAL_WARNING_KEYWORDS,
    WARNING_MIN_COLUMNS,
    WRITTEN_LABEL,
    WRITTEN_WARNING_KEYWORDS,
)
from ..models import WarningLetterRow
from .utils import PositionalRow, RawGrid, split_grid

logger = logging.getLogger(__name__)


def classify_warning_type(warning_type: str) -> str:
    """Map a free-text warning type to Verbal, Written or Other.

    Matching is by substring against Thai and English keywords, so
    "ตักเตือนด้วยวาจา" and "Verbal warning" both classify as Verbal.
    """
    text = str(warning_type).strip().lower()
    if any(keyword in text for keyword in VERBAL_WARNING_KEYWORDS):
        return VERBAL_LABEL
    if any(keyword in text for keyword in WRITTEN_WARNING_KEYWORDS):
        return WRITTEN_LABEL
    return OTHER_LABEL


def _decode_row(row: PositionalRow) -> WarningLetterRow | None:
    if len(row) < WARNING_MIN_COLUMNS:
        return None
    employee_id = row.text(2)
    employee_name = row.text(3)
    if not employee_id and not employee_name:
        return None

    warning_type = row.text(8, UNKNOWN)
    return WarningLetterRow(
        id=row.text(0),
        date=row.date(1),
        employee_id=employee_id,
        employee_name=employee_name,
        department=row.text(4, UNKNOWN),
        reason=row.text(5),
        warning_id=row.text(6),
        damage_value=row.number_or_zero(7),
        type=warning_type,
        type_category=classify_warning_type(warning_type),
        hr_sent_date=row.date(9),
        hr_investigation_date=row.date(10),
        hr_warning_received_date=row.date(11),
        document_status=row.text(12),
    )


def decode_warning_letters(grid: RawGrid) -> list[WarningLetterRow]:
    """Decode a warning-letter sheet.

    Assumptions
    -----------
    - Columns: id, date, employee id, employee name, department, reason,
      warning id, damage value, type, HR sent / investigation / received
      dates, document status.
    - A row needs an employee id or an employee name.
    """
    _, body = split_grid(grid, "Warning Letter")
    rows = [_decode_row(PositionalRow(cells)) for cells in body]
    records = [r for r in rows if r is not None]
    logger.info("Decoded %d warning letter rows (%d dropped)", len(records), len(body) - len(records))
    return records

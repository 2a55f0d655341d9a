"""
Decoder for the manpower roster.

The upload is a generic sheet; it is recognised as a roster only when the
header carries both MANPOWER and CURRENT columns. Columns are addressed by
header label, so their order is free.
"""

import logging

from ..config import MANPOWER_HEADERS, MANPOWER_MARKER_COLUMNS, NOT_AVAILABLE, UNKNOWN
from ..exceptions import SchemaError
from ..models import ManpowerRow
from .utils import HeaderRow, RawGrid, header_labels, header_rows, split_grid

logger = logging.getLogger(__name__)

_H = MANPOWER_HEADERS


def _decode_row(row: HeaderRow) -> ManpowerRow | None:
    employee_id = row.text(_H["employee_id"])
    position = row.text(_H["position"])
    if not employee_id and not position:
        return None

    return ManpowerRow(
        id=row.text(_H["id"]),
        employee_id=employee_id,
        name=row.text(_H["name"]),
        position=position,
        department=row.text(_H["department"], NOT_AVAILABLE),
        grade=row.text(_H["grade"]),
        status=row.text(_H["status"], UNKNOWN),
        manpower=row.number_or_zero(_H["manpower"]),
        current=row.number_or_zero(_H["current"]),
        hire_date=row.optional_date(_H["hire_date"]),
        termination_date=row.optional_date(_H["termination_date"]),
    )


def decode_manpower(grid: RawGrid) -> list[ManpowerRow]:
    """Decode a manpower roster.

    Raises SchemaError if the MANPOWER / CURRENT marker headers are absent;
    a wrong file here is rejected rather than filtered.
    """
    header, body = split_grid(grid, "Uploaded")

    labels = set(header_labels(header))
    missing = [marker for marker in MANPOWER_MARKER_COLUMNS if marker not in labels]
    if missing:
        logger.warning("Manpower sheet is missing marker columns: %s", missing)
        raise SchemaError(
            "The uploaded Excel file does not match the expected format for Manpower."
        )

    rows = header_rows(header, body)
    records = [r for r in (_decode_row(row) for row in rows) if r is not None]
    logger.info("Decoded %d manpower rows (%d dropped)", len(records), len(body) - len(records))
    return records

"""
Decoder for the departmental KPI scorecard.

One row per KPI: sequence number, title, target, unit, twelve monthly values,
then score, pass/fail result and five free-text planning columns.
"""

import logging

from ..config import MONTH_ABBREVIATIONS, NOT_AVAILABLE
from ..models import KpiRow
from .utils import PositionalRow, RawGrid, split_grid

logger = logging.getLogger(__name__)

_MONTH_COL_START = 4


def _decode_row(row: PositionalRow) -> KpiRow | None:
    title = row.text(1)
    if not title:
        return None

    monthly_data = {
        month: row.text(_MONTH_COL_START + i)
        for i, month in enumerate(MONTH_ABBREVIATIONS)
    }

    return KpiRow(
        kpi_no=row.text(0),
        title=title,
        measurement=row.text(3),
        target=row.text(2),
        score=row.text(16, NOT_AVAILABLE),
        result=row.text(17, NOT_AVAILABLE),
        monthly_data=monthly_data,
        description=row.text(18),
        objective=row.text(19),
        measurement_method=row.text(20),
        responsible=row.text(21),
        improvement_plan=row.text(22),
    )


def decode_kpi_report(grid: RawGrid) -> list[KpiRow]:
    """Decode a KPI scorecard grid.

    Assumptions
    -----------
    - Row 0 is a header and is skipped.
    - Column 1 (title) is required; rows without it are dropped.
    - Columns 4-15 hold Jan..Dec values, kept as display text.
    - Column 16 = score, 17 = result (both default to "N/A").
    - Columns 18-22 = description, objective, measurement method,
      responsible, improvement plan.
    """
    _, body = split_grid(grid, "KPI")
    rows = [_decode_row(PositionalRow(cells)) for cells in body]
    records = [r for r in rows if r is not None]
    logger.info("Decoded %d KPI rows (%d dropped)", len(records), len(body) - len(records))
    return records

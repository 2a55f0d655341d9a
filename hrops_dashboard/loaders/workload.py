"""
Decoder for the warehouse workload sheet.

The sheet is a sequence of product sections. A non-empty text cell in
column A opens a new section; every row with a description in column B
adds a detail row to the open section. Columns D-O hold Jan..Dec values,
Q-S the precomputed average, min and max.
"""

import logging

from ..config import WORKLOAD_SUB_PRODUCT_TITLE, WORKLOAD_SUMMARY_PREFIXES
from ..models import WorkloadDetailRow, WorkloadSection
from .utils import PositionalRow, RawGrid, coerce_number, is_blank_row, split_grid

logger = logging.getLogger(__name__)


def _text_cell(val) -> str:
    if isinstance(val, str):
        return val.strip()
    return ""


def decode_workload(grid: RawGrid) -> list[WorkloadSection]:
    """Group workload rows into product sections.

    Description rows seen before the first product are dropped. A detail row
    is a sub-row unless its description starts with one of the summary
    prefixes (Sum, Manpower, Workday, Working Hours, OT).
    """
    _, body = split_grid(grid, "Workload Report")

    sections: list[WorkloadSection] = []
    current: WorkloadSection | None = None

    for cells in body:
        if is_blank_row(cells):
            continue
        row = PositionalRow(cells)

        product = _text_cell(row.value(0))
        if product:
            current = WorkloadSection(
                product=product,
                is_sub_product=product == WORKLOAD_SUB_PRODUCT_TITLE,
            )
            sections.append(current)

        description = _text_cell(row.value(1))
        if not description or current is None:
            continue

        current.rows.append(WorkloadDetailRow(
            description=description,
            is_sub_row=not description.startswith(WORKLOAD_SUMMARY_PREFIXES),
            unit=row.text(2),
            values=[coerce_number(cell) for cell in row.slice(3, 15)],
            average=row.number(16),
            min=row.number(17),
            max=row.number(18),
        ))

    logger.info("Decoded %d workload sections from %d rows", len(sections), len(body))
    return sections

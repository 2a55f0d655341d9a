"""Decoder for consumable material withdrawals."""

import logging

from ..models import ConsumableRow
from .utils import PositionalRow, RawGrid, split_grid

logger = logging.getLogger(__name__)


def _decode_row(row: PositionalRow) -> ConsumableRow | None:
    material = row.text(1)
    if not material:
        return None
    return ConsumableRow(
        date=row.date(0),
        material=material,
        description=row.text(2),
        quantity=row.number_or_zero(3),
        unit=row.text(4),
        price=row.number_or_zero(5),
        total_price=row.number_or_zero(6),
        cost_center=row.text(7),
        department=row.text(8),
    )


def decode_consumables(grid: RawGrid) -> list[ConsumableRow]:
    """Decode a consumables sheet.

    Assumptions
    -----------
    - Columns: date, material code, description, quantity, unit, unit
      price, total price, cost centre, department.
    - Rows without a material code are dropped.
    """
    _, body = split_grid(grid, "Consumables")
    rows = [_decode_row(PositionalRow(cells)) for cells in body]
    records = [r for r in rows if r is not None]
    logger.info("Decoded %d consumable rows (%d dropped)", len(records), len(body) - len(records))
    return records

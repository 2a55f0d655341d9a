"""
Decoder for purchase requests (PR).

Header-keyed. Labels are the Thai procurement export headers, with English
aliases accepted for each field (config.PURCHASE_REQUEST_HEADERS).
"""

import logging
import math
from typing import Any

from ..config import (
    DEFAULT_PURCHASE_STATUS,
    PURCHASE_REQUEST_HEADERS,
    PURCHASE_STATUS_RULES,
    PURCHASE_STATUSES,
    UNKNOWN,
)
from ..models import PurchaseRequestRow
from .utils import HeaderRow, RawGrid, cell_text, header_rows, parse_dmy, split_grid

logger = logging.getLogger(__name__)

_H = PURCHASE_REQUEST_HEADERS


def normalise_purchase_status(raw: Any) -> str:
    """Map a free-text PR status onto Pending/Approved/Rejected/Ordered/Completed.

    The substring table is checked first; a value that is already one of
    the canonical labels passes through only if no rule matched.
    """
    text = cell_text(raw).strip()
    if not text:
        return DEFAULT_PURCHASE_STATUS
    lowered = text.lower()
    for keywords, status in PURCHASE_STATUS_RULES:
        if any(keyword in lowered for keyword in keywords):
            return status
    if text in PURCHASE_STATUSES:
        return text
    return DEFAULT_PURCHASE_STATUS


def lead_time_days(opened: str, received: str) -> int:
    """Whole days from PR open to goods received, 0 if unknown or negative."""
    start = parse_dmy(opened)
    end = parse_dmy(received)
    if start is None or end is None or end < start:
        return 0
    return math.ceil((end - start).days)


def _decode_row(row: HeaderRow) -> PurchaseRequestRow | None:
    pr_number = row.text(_H["id"])
    if not pr_number:
        return None

    opened = row.date(_H["date"])
    received = row.date(_H["goods_received_date"])

    return PurchaseRequestRow(
        id=pr_number,
        date=opened,
        requester="",
        department=row.text(_H["department"], UNKNOWN),
        item_description=row.text(_H["item_description"]),
        quantity=row.number_or_zero(_H["quantity"]),
        unit=row.text(_H["unit"]),
        unit_price=row.number_or_zero(_H["unit_price"]),
        total_price=row.number_or_zero(_H["total_price"]),
        supplier="",
        status=normalise_purchase_status(row.value(_H["status"])),
        objective=row.text(_H["objective"]),
        goods_received_date=received,
        lead_time_days=lead_time_days(opened, received),
    )


def decode_purchase_requests(grid: RawGrid) -> list[PurchaseRequestRow]:
    """Decode a purchase-request sheet; rows without a PR number are dropped."""
    header, body = split_grid(grid, "Purchase Request")
    rows = header_rows(header, body)
    records = [r for r in (_decode_row(row) for row in rows) if r is not None]
    logger.info("Decoded %d purchase requests (%d dropped)", len(records), len(body) - len(records))
    return records

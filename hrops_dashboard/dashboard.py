"""
Dashboard-ready entry point.

ingest() is the single call a front end makes: it picks the decoder and
assembler registered for a report kind and returns the finished
ReportBundle. Only SchemaError and UnsupportedReportKindError escape.
"""

import logging
from datetime import date
from typing import Any, Callable

from .exceptions import UnsupportedReportKindError
from .loaders import (
    decode_accidents,
    decode_consumables,
    decode_kpi_report,
    decode_leave,
    decode_manpower,
    decode_overtime,
    decode_purchase_requests,
    decode_training,
    decode_turnover,
    decode_warning_letters,
    decode_workload,
)
from .loaders.utils import RawGrid
from .models import ReportBundle, ReportKind
from .transforms import (
    build_accident_report,
    build_accident_wh1_report,
    build_consumables_report,
    build_kpi_report,
    build_leave_report,
    build_manpower_report,
    build_overtime_report,
    build_purchase_request_report,
    build_training_report,
    build_turnover_report,
    build_warning_letter_report,
    build_workload_report,
)

logger = logging.getLogger(__name__)

Decoder = Callable[[RawGrid], list[Any]]
Assembler = Callable[[list[Any], date], ReportBundle]

# kind -> (decoder, assembler)
REPORT_REGISTRY: dict[ReportKind, tuple[Decoder, Assembler]] = {
    ReportKind.KPI: (decode_kpi_report, build_kpi_report),
    ReportKind.CONSUMABLES: (decode_consumables, build_consumables_report),
    ReportKind.OVERTIME: (decode_overtime, build_overtime_report),
    ReportKind.LEAVE: (decode_leave, build_leave_report),
    ReportKind.ACCIDENT: (decode_accidents, build_accident_report),
    ReportKind.ACCIDENT_WH1: (decode_accidents, build_accident_wh1_report),
    ReportKind.WORKLOAD: (decode_workload, build_workload_report),
    ReportKind.MANPOWER: (decode_manpower, build_manpower_report),
    ReportKind.WARNING_LETTER: (decode_warning_letters, build_warning_letter_report),
    ReportKind.TURNOVER: (decode_turnover, build_turnover_report),
    ReportKind.PURCHASE_REQUEST: (decode_purchase_requests, build_purchase_request_report),
    ReportKind.TRAINING: (decode_training, build_training_report),
}


def resolve_kind(report_kind: ReportKind | str) -> ReportKind:
    """Accept a ReportKind or its string value ("otReport", ...)."""
    try:
        return ReportKind(report_kind)
    except ValueError:
        raise UnsupportedReportKindError(f"Unsupported report kind: {report_kind!r}") from None


def ingest(
    raw_grid: RawGrid,
    report_kind: ReportKind | str,
    as_of: date | None = None,
) -> ReportBundle:
    """Decode a raw grid and assemble its report bundle.

    Parameters
    ----------
    raw_grid : First-sheet cell values, header row first.
    report_kind : Which report the sheet holds.
    as_of : Reference date for "this year" comparisons; defaults to today.

    Returns
    -------
    ReportBundle with the decoded records, KPI cards, charts, rankings
    and summary tables. An empty bundle is a valid result.

    Raises
    ------
    SchemaError : The sheet is empty or does not match the kind's layout.
    UnsupportedReportKindError : No decoder is registered for the kind.
    """
    kind = resolve_kind(report_kind)
    decoder, assembler = REPORT_REGISTRY[kind]
    as_of = as_of or date.today()

    records = decoder(raw_grid)
    bundle = assembler(records, as_of)
    logger.info(
        "Ingested %s: %d records, %d KPIs, %d charts",
        kind.value, len(bundle.table_data), len(bundle.kpis), len(bundle.charts),
    )
    return bundle

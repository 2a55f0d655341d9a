"""
HR & Operations Dashboard: report ingestion and aggregation engine

Turns spreadsheet exports (KPI scorecard, consumables, overtime, leave,
accidents, workload, manpower, warning letters, turnover, purchase
requests) into typed records plus KPI cards, chart series, rankings and
period comparisons for a dashboard front end.

To load a workbook:
    grid = loaders.read_first_sheet("ot_2025.xlsx")
    bundle = ingest(grid, "otReport")

To add a report kind:
    Add the kind to models.ReportKind, write a decoder in loaders/ and a
    build_* assembler in transforms.py, then register the pair in
    dashboard.REPORT_REGISTRY.

To roll the reporting year:
    Update the year constants and previous-year baselines in config.py.
"""

from .dashboard import ingest
from .exceptions import ReportError, SchemaError, UnsupportedReportKindError
from .loaders.utils import coerce_date, coerce_number
from .models import ReportBundle, ReportKind

__all__ = [
    "ReportBundle",
    "ReportError",
    "ReportKind",
    "SchemaError",
    "UnsupportedReportKindError",
    "coerce_date",
    "coerce_number",
    "ingest",
]

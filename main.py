"""
HR & Operations Dashboard: ingestion smoke runner.

Reads the first sheet of a workbook, ingests it as the given report kind
and prints the resulting KPI cards, charts and rankings.

Usage:
    python main.py <workbook.xlsx> <report kind>

    e.g. python main.py exports/ot_2025.xlsx otReport
"""

import logging
import sys

from hrops_dashboard import ReportKind, SchemaError, ingest
from hrops_dashboard.exceptions import UnsupportedReportKindError
from hrops_dashboard.loaders import read_first_sheet

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Ingest one workbook and print a summary of its report bundle."""
    if len(sys.argv) != 3:
        print(__doc__)
        print("Report kinds: " + ", ".join(kind.value for kind in ReportKind))
        return 2

    path, kind = sys.argv[1], sys.argv[2]

    print("=" * 70)
    print("  HR & OPERATIONS DASHBOARD | Ingestion Smoke Test")
    print(f"  {path} as {kind}")
    print("=" * 70)

    grid = read_first_sheet(path)
    try:
        bundle = ingest(grid, kind)
    except (SchemaError, UnsupportedReportKindError) as e:
        logger.error("Could not ingest %s: %s", path, e)
        return 1

    # ------------------------------------------------------------------
    # 1. Records
    # ------------------------------------------------------------------
    print("\n[ 1 ] RECORDS")
    print("-" * 40)
    frame = bundle.table_frame()
    print(f"{len(frame)} records decoded")
    if not frame.empty:
        print(frame.head(10).to_string(index=False))

    # ------------------------------------------------------------------
    # 2. KPI cards
    # ------------------------------------------------------------------
    print("\n[ 2 ] KPI CARDS")
    print("-" * 40)
    for kpi in bundle.kpis:
        line = f"  {kpi.title:28s} | {kpi.value}"
        if kpi.sub_value:
            line += f" {kpi.sub_value}"
        if kpi.comparison is not None:
            c = kpi.comparison
            line += f" | {c.value} ({c.percentage}) vs {c.previous_value} [{kpi.trend_direction}]"
        print(line)

    # ------------------------------------------------------------------
    # 3. Charts, rankings and tables
    # ------------------------------------------------------------------
    print("\n[ 3 ] CHARTS / RANKINGS / TABLES")
    print("-" * 40)
    for name, points in bundle.charts.items():
        print(f"\n  chart {name}: {len(points)} points")
        for point in points[:12]:
            extra = f" {point.series}" if point.series else ""
            print(f"    {point.name:20s} {point.value}{extra}")
    for name, entries in bundle.rankings.items():
        print(f"\n  ranking {name}:")
        for i, entry in enumerate(entries, 1):
            print(f"    {i:2d}. {entry.label:30s} {entry.metric}")
    for name, rows in bundle.tables.items():
        print(f"\n  table {name}: {len(rows)} rows")

    print("\n" + "=" * 70)
    print("  Ingestion complete.")
    print("=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())

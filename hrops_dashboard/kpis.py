"""
Aggregation helpers shared by the report assemblers. Pure functions, no side effects.

Provides monthly bucketing, group-by summation, stable top-N ranking,
distinct counts and period-over-period comparison. Group results are
pandas Series indexed by category in first-seen order; the helpers at the
bottom turn them into chart points and ranking entries.
"""

import logging
from typing import Any, Callable, Iterable, Sequence

import pandas as pd

from .config import NOT_AVAILABLE
from .formatting import format_change, format_delta, format_previous
from .loaders.utils import parse_dmy
from .models import ChartPoint, Comparison, RankEntry

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Monthly bucketing
# ---------------------------------------------------------------------------

def month_index(date_text: str) -> int | None:
    """Zero-based month of a dd/mm/yyyy string, or None."""
    parsed = parse_dmy(date_text)
    return parsed.month - 1 if parsed else None


def monthly_totals(series: Iterable[Sequence[float]]) -> list[float]:
    """Sum fixed-length 12-month series slot by slot."""
    frame = pd.DataFrame(list(series), columns=range(12))
    return [float(v) for v in frame.fillna(0).sum()]


def bucket_by_month(entries: Iterable[tuple[int | None, float]]) -> list[float]:
    """Accumulate (month_index, amount) pairs into 12 slots; bad indexes are skipped."""
    totals = [0.0] * 12
    for idx, amount in entries:
        if idx is not None and 0 <= idx < 12:
            totals[idx] += amount
    return totals


# ---------------------------------------------------------------------------
# Grouping and ranking
# ---------------------------------------------------------------------------

def group_sum(
    records: Iterable[Any],
    key: Callable[[Any], str],
    value: Callable[[Any], float] | None = None,
) -> pd.Series:
    """Sum `value` per `key` category, or count records when `value` is None.

    The result is indexed by category in first-seen order.
    """
    records = list(records)
    if not records:
        return pd.Series(dtype="float64")
    keys = [key(r) for r in records]
    values = [1 if value is None else value(r) for r in records]
    return pd.Series(values, index=keys).groupby(level=0, sort=False).sum()


def rank_descending(totals: pd.Series, limit: int | None = None) -> pd.Series:
    """Sort descending, ties kept in first-seen order, truncated to `limit`."""
    ordered = totals.sort_values(ascending=False, kind="stable")
    if limit is not None:
        ordered = ordered.head(limit)
    return ordered


def top_label(totals: pd.Series) -> str:
    """Category with the largest total, or N/A for an empty grouping."""
    if totals.empty:
        return NOT_AVAILABLE
    return str(rank_descending(totals, 1).index[0])


def distinct_count(records: Iterable[Any], key: Callable[[Any], Any]) -> int:
    return len({key(r) for r in records})


def percent_of_total(part: float, total: float) -> float:
    if total > 0:
        return part / total * 100
    return 0.0


def _plain(value: Any) -> float | int:
    """numpy scalar -> Python number, keeping integers integral."""
    as_float = float(value)
    if as_float.is_integer() and not isinstance(value, float):
        return int(value)
    return as_float


def series_points(totals: pd.Series) -> list[ChartPoint]:
    return [ChartPoint(name=str(label), value=_plain(v)) for label, v in totals.items()]


def rank_entries(totals: pd.Series, limit: int | None = None) -> list[RankEntry]:
    ranked = rank_descending(totals, limit)
    return [RankEntry(label=str(label), metric=_plain(v)) for label, v in ranked.items()]


def month_points(
    labels: Sequence[str],
    values: Sequence[float] | None = None,
    **series: Sequence[float],
) -> list[ChartPoint]:
    """One chart point per month, with a main value and/or named series."""
    points = []
    for i, name in enumerate(labels):
        points.append(ChartPoint(
            name=name,
            value=values[i] if values is not None else None,
            series={series_name: data[i] for series_name, data in series.items()},
        ))
    return points


# ---------------------------------------------------------------------------
# Period comparison
# ---------------------------------------------------------------------------

def compare_periods(current: float, previous: float) -> tuple[float, float]:
    """Return (delta, pct_change).

    A zero previous period gives 100 if the current period is positive,
    otherwise 0.
    """
    delta = current - previous
    if previous != 0:
        return delta, (delta / previous) * 100
    return delta, 100.0 if current > 0 else 0.0


def compare_periods_or_none(current: float, previous: float) -> tuple[float, float] | None:
    """Return (delta, pct_change), or None when there is no previous period."""
    if previous == 0:
        return None
    delta = current - previous
    return delta, (delta / previous) * 100


def build_comparison(
    current: float,
    previous: float,
    decimals: int = 0,
    currency: bool = False,
    period: str = "year",
    require_previous: bool = False,
) -> Comparison | None:
    """Build a formatted Comparison.

    With require_previous=True a zero previous value yields None instead of
    the 0/100 percent sentinel.
    """
    if require_previous:
        result = compare_periods_or_none(current, previous)
        if result is None:
            return None
    else:
        result = compare_periods(current, previous)
    delta, percent = result
    return Comparison(
        value=format_delta(delta, decimals, currency),
        percentage=format_change(percent),
        period=period,
        delta=delta,
        percent=percent,
        previous_value=format_previous(previous, currency),
    )


def trend_direction(comparison: Comparison | None, direction: str = "lower_is_better") -> str:
    """Return 'up' (good), 'down' (bad) or 'neutral' for a comparison.

    Logic
    -----
    - lower_is_better: a rise is 'down', anything else 'up'.
    - higher_is_better: a rise is 'up', anything else 'down'.
    - no comparison: 'neutral'.
    """
    if comparison is None:
        return "neutral"
    rising = comparison.delta > 0
    if direction == "higher_is_better":
        return "up" if rising else "down"
    return "down" if rising else "up"

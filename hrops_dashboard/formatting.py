"""
Display formatting for KPI cards: currency, signed deltas, percentages and
the KPI-scorecard score rules.
"""

from .config import (
    CURRENCY_SYMBOL,
    DEFAULT_KPI_ICON,
    FORKLIFT_AVAILABILITY_MARKERS,
    KPI_ICON_RULES,
    NOT_AVAILABLE,
)
from .loaders.utils import parse_numeric_text


def number_text(value: float) -> str:
    """Shortest text for a number: 5.0 -> "5", 2.5 -> "2.5"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_number(value: float, decimals: int = 0) -> str:
    return f"{value:,.{decimals}f}"


def format_currency(value: float, decimals: int = 2) -> str:
    return f"{CURRENCY_SYMBOL}{format_number(value, decimals)}"


def format_delta(value: float, decimals: int = 0, currency: bool = False) -> str:
    """Signed delta, always carrying + or -: "+12", "-฿1,500.00"."""
    sign = "-" if value < 0 else "+"
    body = format_number(abs(value), decimals)
    if currency:
        body = CURRENCY_SYMBOL + body
    return sign + body


def format_change(percent: float) -> str:
    return f"{percent:.1f}%"


def format_previous(value: float, currency: bool = False) -> str:
    if currency:
        return format_currency(value, 2)
    if float(value).is_integer():
        return format_number(value, 0)
    return format_number(value, 2)


def format_percentage(percentage: float) -> str:
    if float(percentage).is_integer():
        return f"{percentage:.0f}%"
    return f"{percentage:.2f}%"


def _parse_score(score: str) -> float | None:
    return parse_numeric_text(str(score))


def _is_blank_score(score: str) -> bool:
    return not score or score in (NOT_AVAILABLE, "-")


def format_score_as_percentage(score: str) -> str:
    """Render a score as a percentage; fractions in (0, 1] are scaled by 100."""
    if _is_blank_score(score):
        return str(score)
    numeric = _parse_score(score)
    if numeric is None:
        return str(score)
    if 0 < numeric <= 1:
        numeric = numeric * 100
    return format_percentage(numeric)


def is_forklift_availability(title: str) -> bool:
    lowered = str(title).lower()
    if "availability" in lowered and "forklift" in lowered:
        return True
    return any(marker in lowered for marker in FORKLIFT_AVAILABILITY_MARKERS)


def format_kpi_score(title: str, score: str) -> str:
    """Card value for a scorecard row.

    Forklift availability is reported in days and keeps its bare number;
    every other KPI is shown as a percentage.
    """
    if _is_blank_score(score):
        return str(score)
    if is_forklift_availability(title):
        numeric = _parse_score(score)
        return number_text(numeric) if numeric is not None else str(score)
    return format_score_as_percentage(score)


def kpi_icon(title: str) -> str:
    lowered = str(title).lower()
    for keywords, icon in KPI_ICON_RULES:
        if any(keyword in lowered for keyword in keywords):
            return icon
    return DEFAULT_KPI_ICON

"""
Report assemblers: compose decoded records into ReportBundles.

One build_* function per report kind. Each takes the decoded records and
the reference date that defines "this year", and returns the KPI cards,
chart series, rankings and summary tables for that kind.
"""

import logging
from dataclasses import replace
from datetime import date

import pandas as pd

from .config import (
    ACCIDENT_TOP_DEPARTMENTS_LIMIT,
    CONSUMABLES_TOP_ITEMS_YEAR,
    CURRENT_TOTAL_LABEL,
    FORKLIFT_AVAILABILITY_UNIT,
    KPI_PASS_RESULT,
    LEAVE_TOP_DEPARTMENTS_LIMIT,
    MANPOWER_TOTAL_LABEL,
    MONTH_ABBREVIATIONS,
    NEW_HIRES_SERIES,
    NOT_AVAILABLE,
    OT_HOURS_SERIES,
    OT_PAY_SERIES,
    OT_PREVIOUS_YEAR_BASELINE,
    OTHER_LABEL,
    PURCHASE_COMMITTED_STATUSES,
    PURCHASE_PENDING_STATUS,
    RESIGNATIONS_SERIES,
    SEVERITY_ORDER,
    TOP_DEPARTMENTS_LIMIT,
    TOP_EMPLOYEES_LIMIT,
    TOP_ITEMS_LIMIT,
    TURNOVER_ACTIVE_STATUS,
    TURNOVER_HIRE_YEAR,
    TURNOVER_PREVIOUS_YEAR,
    TURNOVER_RESIGNED_STATUS,
    UNKNOWN,
    VERBAL_LABEL,
    WEEKS_PER_YEAR,
    WRITTEN_LABEL,
)
from .formatting import (
    format_currency,
    format_kpi_score,
    format_number,
    is_forklift_availability,
    kpi_icon,
)
from .kpis import (
    bucket_by_month,
    build_comparison,
    distinct_count,
    group_sum,
    month_index,
    month_points,
    monthly_totals,
    percent_of_total,
    rank_descending,
    rank_entries,
    series_points,
    top_label,
    trend_direction,
)
from .loaders.utils import year_of
from .models import (
    AccidentRow,
    ChartPoint,
    ConsumableRow,
    DepartmentComparison,
    Kpi,
    KpiRow,
    LeaveRow,
    ManpowerRow,
    NeededPosition,
    OtAverageRow,
    OtRow,
    PurchaseRequestRow,
    RankEntry,
    ReportBundle,
    ReportKind,
    TrainingRow,
    TurnoverRow,
    WarningLetterRow,
    WorkloadSection,
)

logger = logging.getLogger(__name__)


def _label(text: str) -> str:
    return text or UNKNOWN


def _latest_year(dates: list[str]) -> int | None:
    years = [y for y in (year_of(d) for d in dates) if y is not None]
    return max(years) if years else None


# ---------------------------------------------------------------------------
# KPI scorecard
# ---------------------------------------------------------------------------

def build_kpi_report(rows: list[KpiRow], as_of: date) -> ReportBundle:
    """One card per scorecard row.

    The card trend carries the PASS/FAIL result; forklift availability
    scores are shown in days rather than as a percentage.
    """
    kpis = []
    for row in rows:
        direction = "up" if row.result.strip().upper() == KPI_PASS_RESULT else "down"
        forklift = is_forklift_availability(row.title)
        kpis.append(Kpi(
            title=row.title,
            value=format_kpi_score(row.title, row.score),
            icon=kpi_icon(row.title),
            trend_direction=direction,
            trend=row.result,
            sub_value=FORKLIFT_AVAILABILITY_UNIT if forklift else None,
            sub_value_position="inline" if forklift else None,
        ))
    logger.info("Assembled %d KPI scorecard cards", len(kpis))
    return ReportBundle(kind=ReportKind.KPI, table_data=list(rows), kpis=kpis)


# ---------------------------------------------------------------------------
# Consumables
# ---------------------------------------------------------------------------

def _top_items(rows: list[ConsumableRow]) -> list[RankEntry]:
    """Top items by total cost, keyed by material code."""
    if not rows:
        return []
    frame = pd.DataFrame({
        "material": [r.material for r in rows],
        "description": [r.description for r in rows],
        "total_price": [r.total_price for r in rows],
    })
    grouped = frame.groupby("material", sort=False).agg(
        description=("description", "first"),
        frequency=("material", "size"),
        total_cost=("total_price", "sum"),
    )
    ranked = grouped.sort_values("total_cost", ascending=False, kind="stable").head(TOP_ITEMS_LIMIT)
    return [
        RankEntry(
            label=item["description"] or str(material),
            metric=float(item["total_cost"]),
            details={
                "material": str(material),
                "frequency": int(item["frequency"]),
                "totalCost": float(item["total_cost"]),
            },
        )
        for material, item in ranked.iterrows()
    ]


def build_consumables_report(rows: list[ConsumableRow], as_of: date) -> ReportBundle:
    """Year-over-year consumables spend.

    Assumptions
    -----------
    - "This year" is as_of.year; the comparison uses the year before.
    - A year with no spend compares as +100% (or 0% if this year is also
      empty) rather than being omitted.
    - The top-items ranking is fixed to CONSUMABLES_TOP_ITEMS_YEAR.
    """
    this_year = as_of.year
    current = [r for r in rows if year_of(r.date) == this_year]
    previous = [r for r in rows if year_of(r.date) == this_year - 1]

    current_cost = sum(r.total_price for r in current)
    previous_cost = sum(r.total_price for r in previous)
    cost_cmp = build_comparison(current_cost, previous_cost, decimals=2, currency=True)
    tx_cmp = build_comparison(len(current), len(previous))

    current_items = distinct_count(current, lambda r: r.material)
    items_cmp = build_comparison(current_items, distinct_count(previous, lambda r: r.material))

    kpis = [
        Kpi(
            title="totalCost",
            value=format_currency(current_cost),
            icon="CurrencyDollarIcon",
            trend_direction=trend_direction(cost_cmp),
            comparison=cost_cmp,
        ),
        Kpi(
            title="totalTransactions",
            value=format_number(len(current)),
            icon="ClipboardDocumentListIcon",
            trend_direction=trend_direction(tx_cmp),
            comparison=tx_cmp,
        ),
        Kpi(
            title="uniqueItems",
            value=format_number(current_items),
            icon="CubeIcon",
            trend_direction=trend_direction(items_cmp),
            comparison=items_cmp,
        ),
        Kpi(
            title="totalDepartments",
            value=format_number(distinct_count(current, lambda r: _label(r.department))),
            icon="BuildingOfficeIcon",
        ),
    ]

    monthly = bucket_by_month((month_index(r.date), r.total_price) for r in current)

    charts = {"monthlyCost": month_points(MONTH_ABBREVIATIONS, monthly)}
    latest = _latest_year([r.date for r in rows])
    if latest is not None:
        latest_rows = [r for r in rows if year_of(r.date) == latest]
        by_dept = group_sum(latest_rows, lambda r: _label(r.department), lambda r: r.total_price)
        charts["costByDepartment"] = series_points(rank_descending(by_dept))
    else:
        charts["costByDepartment"] = []

    top_year_rows = [r for r in rows if year_of(r.date) == CONSUMABLES_TOP_ITEMS_YEAR]
    rankings = {"topItems": _top_items(top_year_rows)}

    logger.info(
        "Assembled consumables report: %d rows in %d, %d in %d",
        len(current), this_year, len(previous), this_year - 1,
    )
    return ReportBundle(
        kind=ReportKind.CONSUMABLES,
        table_data=list(rows),
        kpis=kpis,
        charts=charts,
        rankings=rankings,
    )


# ---------------------------------------------------------------------------
# Overtime
# ---------------------------------------------------------------------------

def _hour_decimals(*values: float) -> int:
    return 0 if all(float(v).is_integer() for v in values) else 2


def ot_averages_by_department(rows: list[OtRow]) -> list[OtAverageRow]:
    """Per-department OT hours averaged over distinct employees.

    Returns
    -------
    One OtAverageRow per department, highest total hours first, with
    monthly (/12) and weekly (/52.14) averages per employee.
    """
    if not rows:
        return []
    frame = pd.DataFrame({
        "department": [_label(r.department) for r in rows],
        "employee_id": [r.employee_id for r in rows],
        "total_ot": [r.total_ot for r in rows],
    })
    grouped = frame.groupby("department", sort=False).agg(
        employee_count=("employee_id", "nunique"),
        total_ot_hours=("total_ot", "sum"),
    )
    grouped = grouped.sort_values("total_ot_hours", ascending=False, kind="stable")

    averages = []
    for department, g in grouped.iterrows():
        count = int(g["employee_count"])
        total = float(g["total_ot_hours"])
        averages.append(OtAverageRow(
            department=str(department),
            employee_count=count,
            total_ot_hours=total,
            avg_ot_hours_per_month=total / 12 / count if count else 0.0,
            avg_ot_hours_per_week=total / WEEKS_PER_YEAR / count if count else 0.0,
        ))
    return averages


def _ot_previous_totals(rows: list[OtRow], year: int) -> dict[str, float]:
    """Prior-year totals from the sheet itself, else the configured baseline."""
    prior = [r for r in rows if r.year == year]
    if prior:
        return {
            "total_hours": sum(r.total_ot for r in prior),
            "total_pay": sum(r.total_ot_pay for r in prior),
            "employees": distinct_count(prior, lambda r: r.employee_id),
        }
    return OT_PREVIOUS_YEAR_BASELINE.get(year, {})


def build_overtime_report(rows: list[OtRow], as_of: date) -> ReportBundle:
    """Overtime hours and pay for the latest year in the sheet.

    Assumptions
    -----------
    - Rows without a year belong to as_of.year.
    - The target year is the largest year present.
    - Comparisons are omitted when no prior-year figure is known.
    """
    rows = [r if r.year and r.year > 0 else replace(r, year=as_of.year) for r in rows]
    if not rows:
        logger.info("Overtime sheet has no rows; returning an empty report")
        return ReportBundle(kind=ReportKind.OVERTIME)

    target_year = max(r.year for r in rows)
    current = [r for r in rows if r.year == target_year]
    previous = _ot_previous_totals(rows, target_year - 1)

    hours = sum(r.total_ot for r in current)
    pay = sum(r.total_ot_pay for r in current)
    employees = distinct_count(current, lambda r: r.employee_id)

    prev_hours = previous.get("total_hours", 0)
    hours_cmp = build_comparison(
        hours, prev_hours, decimals=_hour_decimals(hours, prev_hours), require_previous=True,
    )
    pay_cmp = build_comparison(
        pay, previous.get("total_pay", 0), decimals=2, currency=True, require_previous=True,
    )
    employees_cmp = build_comparison(employees, previous.get("employees", 0), require_previous=True)

    dept_hours = group_sum(current, lambda r: _label(r.department), lambda r: r.total_ot)
    kpis = [
        Kpi(
            title="totalOtHours",
            value=format_number(hours, _hour_decimals(hours)),
            icon="ClockIcon",
            trend_direction=trend_direction(hours_cmp),
            comparison=hours_cmp,
        ),
        Kpi(
            title="totalOtPay",
            value=format_currency(pay),
            icon="CurrencyDollarIcon",
            trend_direction=trend_direction(pay_cmp),
            comparison=pay_cmp,
        ),
        Kpi(
            title="totalEmployeesOt",
            value=format_number(employees),
            icon="UserGroupIcon",
            trend_direction=trend_direction(employees_cmp),
            comparison=employees_cmp,
        ),
        Kpi(title="topDepartmentOt", value=top_label(dept_hours), icon="BuildingOfficeIcon"),
    ]

    monthly = month_points(
        MONTH_ABBREVIATIONS,
        **{
            OT_HOURS_SERIES: monthly_totals(r.monthly_ot for r in current),
            OT_PAY_SERIES: monthly_totals(r.monthly_ot_pay for r in current),
        },
    )

    employee_hours = group_sum(current, lambda r: r.employee_id, lambda r: r.total_ot)
    identities = {}
    for r in current:
        identities.setdefault(r.employee_id, {"name": r.name, "department": _label(r.department)})
    top_employees = rank_entries(employee_hours, TOP_EMPLOYEES_LIMIT)
    for entry in top_employees:
        entry.details.update(identities[entry.label])

    logger.info("Assembled overtime report for %d: %d rows", target_year, len(current))
    return ReportBundle(
        kind=ReportKind.OVERTIME,
        table_data=current,
        kpis=kpis,
        charts={"monthly": monthly},
        rankings={
            "topEmployees": top_employees,
            "topDepartments": rank_entries(dept_hours, TOP_DEPARTMENTS_LIMIT),
        },
        tables={"otAveragesByDept": ot_averages_by_department(current)},
    )


# ---------------------------------------------------------------------------
# Leave
# ---------------------------------------------------------------------------

_LEAVE_TYPES = {
    "Sick": lambda r: r.sick_leave,
    "Personal": lambda r: r.personal_leave,
    "Birthday": lambda r: r.birthday_leave,
    "Other": lambda r: r.other_leave,
}


def _non_vacation_monthly(row: LeaveRow) -> list[float]:
    ratio = row.leave_without_vacation / row.total_leave if row.total_leave > 0 else 0
    return [days * ratio for days in row.monthly_leave]


def employees_without_recent_leave(rows: list[LeaveRow]) -> list[LeaveRow]:
    """Employees with no leave in the six months up to the latest month with any leave.

    When nobody took leave all year the window is Jul..Dec.
    """
    last_month = -1
    for row in rows:
        for idx in range(11, -1, -1):
            if row.monthly_leave[idx] > 0:
                last_month = max(last_month, idx)
                break
    if last_month == -1:
        last_month = 11
    start = max(0, last_month - 5)
    return [r for r in rows if sum(r.monthly_leave[start:last_month + 1]) == 0]


def _top_by(rows: list[LeaveRow], metric, positive_only: bool = False) -> list[RankEntry]:
    candidates = [r for r in rows if metric(r) > 0] if positive_only else rows
    ranked = sorted(candidates, key=metric, reverse=True)[:TOP_EMPLOYEES_LIMIT]
    return [
        RankEntry(
            label=r.name or r.employee_id,
            metric=metric(r),
            details={"employeeId": r.employee_id, "department": _label(r.department)},
        )
        for r in ranked
    ]


def build_leave_report(rows: list[LeaveRow], as_of: date) -> ReportBundle:
    monthly = monthly_totals(_non_vacation_monthly(r) for r in rows)
    total_days = sum(r.leave_without_vacation for r in rows)

    type_totals = pd.Series({name: sum(get(r) for r in rows) for name, get in _LEAVE_TYPES.items()})
    dept_totals = group_sum(rows, lambda r: _label(r.department), lambda r: r.leave_without_vacation)
    top_month = MONTH_ABBREVIATIONS[monthly.index(max(monthly))]

    kpis = [
        Kpi(title="totalLeaveDays", value=format_number(round(total_days)), icon="CalendarDaysIcon"),
        Kpi(
            title="topLeaveType",
            value=top_label(type_totals) if rows else NOT_AVAILABLE,
            icon="ClipboardDocumentCheckIcon",
        ),
        Kpi(title="topDepartmentLeave", value=top_label(dept_totals), icon="BuildingOfficeIcon"),
        Kpi(title="topMonthLeave", value=top_month, icon="ChartBarIcon"),
    ]

    logger.info("Assembled leave report: %d employees, %.2f days", len(rows), total_days)
    return ReportBundle(
        kind=ReportKind.LEAVE,
        table_data=list(rows),
        kpis=kpis,
        charts={
            "monthly": month_points(MONTH_ABBREVIATIONS, monthly),
            "leaveTypes": series_points(rank_descending(type_totals)),
        },
        rankings={
            "topDepartments": rank_entries(dept_totals, LEAVE_TOP_DEPARTMENTS_LIMIT),
            "topEmployees": _top_by(rows, lambda r: r.leave_without_vacation),
            "topSickLeave": _top_by(rows, lambda r: r.sick_leave, positive_only=True),
            "topPersonalLeave": _top_by(rows, lambda r: r.personal_leave, positive_only=True),
        },
        tables={"employeesWithNoLeave": employees_without_recent_leave(rows)},
    )


# ---------------------------------------------------------------------------
# Accidents
# ---------------------------------------------------------------------------

def _severity_sort_key(severity: str) -> tuple[int, str]:
    if severity in SEVERITY_ORDER:
        return SEVERITY_ORDER.index(severity), ""
    return len(SEVERITY_ORDER), severity


def build_accident_report(
    rows: list[AccidentRow],
    as_of: date,
    kind: ReportKind = ReportKind.ACCIDENT,
) -> ReportBundle:
    """Incident counts and damage by department and severity.

    Serves both accident registers; `kind` tags the bundle.
    """
    total_damage = sum(r.damage_value for r in rows)
    dept_counts = group_sum(rows, lambda r: _label(r.department))
    dept_damage = group_sum(rows, lambda r: _label(r.department), lambda r: r.damage_value)
    severity_counts = group_sum(rows, lambda r: _label(r.severity))
    severity_damage = group_sum(rows, lambda r: _label(r.severity), lambda r: r.damage_value)

    kpis = [
        Kpi(title="totalIncidents", value=format_number(len(rows)), icon="ExclamationTriangleIcon"),
        Kpi(title="totalDamage", value=format_currency(total_damage, 0), icon="CurrencyDollarIcon"),
        Kpi(title="topDepartmentAccident", value=top_label(dept_counts), icon="BuildingOfficeIcon"),
        Kpi(title="topSeverity", value=top_label(severity_counts), icon="ClipboardDocumentCheckIcon"),
    ]

    by_severity = [
        ChartPoint(
            name=severity,
            value=int(severity_counts[severity]),
            series={"totalDamage": float(severity_damage[severity])},
        )
        for severity in sorted(severity_counts.index, key=_severity_sort_key)
    ]

    damage_ranking = rank_entries(dept_damage, ACCIDENT_TOP_DEPARTMENTS_LIMIT)
    for entry in damage_ranking:
        entry.details["caseCount"] = int(dept_counts[entry.label])

    severity_ranking = rank_entries(dept_counts, ACCIDENT_TOP_DEPARTMENTS_LIMIT)
    for entry in severity_ranking:
        in_dept = [r for r in rows if _label(r.department) == entry.label]
        split = group_sum(in_dept, lambda r: _label(r.severity))
        entry.details["severities"] = {
            str(sev): int(split[sev]) for sev in sorted(split.index, key=_severity_sort_key)
        }

    logger.info("Assembled %s: %d incidents", kind.value, len(rows))
    return ReportBundle(
        kind=kind,
        table_data=list(rows),
        kpis=kpis,
        charts={
            "byDepartment": series_points(rank_descending(dept_counts)),
            "bySeverity": by_severity,
        },
        rankings={
            "damageByDept": damage_ranking,
            "severityByDept": severity_ranking,
        },
    )


def build_accident_wh1_report(rows: list[AccidentRow], as_of: date) -> ReportBundle:
    return build_accident_report(rows, as_of, kind=ReportKind.ACCIDENT_WH1)


# ---------------------------------------------------------------------------
# Workload
# ---------------------------------------------------------------------------

def build_workload_report(sections: list[WorkloadSection], as_of: date) -> ReportBundle:
    return ReportBundle(kind=ReportKind.WORKLOAD, table_data=list(sections))


# ---------------------------------------------------------------------------
# Manpower
# ---------------------------------------------------------------------------

def department_comparison(rows: list[ManpowerRow]) -> list[DepartmentComparison]:
    """Planned vs actual headcount per department, ordered by department name.

    Positions are listed only where planned exceeds actual, largest gap first.
    """
    by_dept: dict[str, list[ManpowerRow]] = {}
    for r in rows:
        by_dept.setdefault(_label(r.department), []).append(r)

    comparison = []
    for department in sorted(by_dept):
        members = by_dept[department]
        manpower = sum(r.manpower for r in members)
        current = sum(r.current for r in members)

        short = [r for r in members if r.manpower - r.current > 0]
        gaps = group_sum(short, lambda r: _label(r.position), lambda r: r.manpower - r.current)
        gaps = rank_descending(gaps)
        comparison.append(DepartmentComparison(
            department=department,
            manpower=manpower,
            current=current,
            needed=max(0, manpower - current),
            needed_positions=[
                NeededPosition(position=str(pos), count=float(count)) for pos, count in gaps.items()
            ],
        ))
    return comparison


def build_manpower_report(rows: list[ManpowerRow], as_of: date) -> ReportBundle:
    manpower_total = sum(r.manpower for r in rows)
    current_total = sum(r.current for r in rows)
    needed = max(0, manpower_total - current_total)
    departments = distinct_count(rows, lambda r: _label(r.department))

    kpis = [
        Kpi(
            title="manpowerTotal",
            value=format_number(manpower_total),
            icon="UserGroupIcon",
            sub_value="(100%)",
            sub_value_position="bottom",
        ),
        Kpi(
            title="totalEmployees",
            value=format_number(current_total),
            icon="UsersIcon",
            sub_value=f"({percent_of_total(current_total, manpower_total):.2f}%)",
            sub_value_position="bottom",
        ),
        Kpi(
            title="additionalManpowerNeeded",
            value=format_number(needed),
            icon="UserPlusIcon",
            sub_value=f"({percent_of_total(needed, manpower_total):.2f}%)",
            sub_value_position="bottom",
        ),
        Kpi(title="totalDepartments", value=format_number(departments), icon="BuildingOfficeIcon"),
    ]

    status_chart = [
        ChartPoint(name=MANPOWER_TOTAL_LABEL, value=manpower_total),
        ChartPoint(name=CURRENT_TOTAL_LABEL, value=current_total),
    ]
    headcount = group_sum(rows, lambda r: _label(r.department))
    comparison = department_comparison(rows)

    needed_staff = sorted((c for c in comparison if c.needed > 0), key=lambda c: c.needed, reverse=True)

    logger.info("Assembled manpower report: %d rows across %d departments", len(rows), departments)
    return ReportBundle(
        kind=ReportKind.MANPOWER,
        table_data=list(rows),
        kpis=kpis,
        charts={
            "status": status_chart,
            "byDepartment": series_points(rank_descending(headcount, TOP_DEPARTMENTS_LIMIT)),
        },
        rankings={
            "neededStaff": [
                RankEntry(
                    label=c.department,
                    metric=c.needed,
                    details={"positions": {p.position: p.count for p in c.needed_positions}},
                )
                for c in needed_staff
            ],
        },
        tables={"departmentComparison": comparison},
    )


# ---------------------------------------------------------------------------
# Warning letters
# ---------------------------------------------------------------------------

def build_warning_letter_report(rows: list[WarningLetterRow], as_of: date) -> ReportBundle:
    total = len(rows)
    type_counts = {
        label: sum(1 for r in rows if r.type_category == label)
        for label in (VERBAL_LABEL, WRITTEN_LABEL, OTHER_LABEL)
    }
    total_damage = sum(r.damage_value for r in rows)

    def share(count: int) -> str:
        return f"({percent_of_total(count, total):.0f}%)"

    kpis = [
        Kpi(
            title="totalWarnings",
            value=format_number(total),
            icon="DocumentTextIcon",
            sub_value="(100%)",
            sub_value_position="bottom",
        ),
        Kpi(
            title="verbalWarnings",
            value=format_number(type_counts[VERBAL_LABEL]),
            icon="ChatBubbleLeftRightIcon",
            sub_value=share(type_counts[VERBAL_LABEL]),
            sub_value_position="bottom",
        ),
        Kpi(
            title="writtenWarnings",
            value=format_number(type_counts[WRITTEN_LABEL]),
            icon="PencilSquareIcon",
            sub_value=share(type_counts[WRITTEN_LABEL]),
            sub_value_position="bottom",
        ),
        Kpi(title="totalDamage", value=format_currency(total_damage, 0), icon="CurrencyDollarIcon"),
    ]

    dept_totals = rank_descending(group_sum(rows, lambda r: _label(r.department)))
    by_dept = []
    for department, count in dept_totals.items():
        in_dept = [r for r in rows if _label(r.department) == department]
        by_dept.append(ChartPoint(
            name=str(department),
            value=int(count),
            series={
                label: sum(1 for r in in_dept if r.type_category == label)
                for label in (VERBAL_LABEL, WRITTEN_LABEL, OTHER_LABEL)
            },
        ))

    by_type = [ChartPoint(name=label, value=count) for label, count in type_counts.items() if count > 0]

    damage = group_sum(rows, lambda r: _label(r.department), lambda r: r.damage_value)
    damage = rank_descending(damage[damage > 0])

    logger.info("Assembled warning letter report: %d letters", total)
    return ReportBundle(
        kind=ReportKind.WARNING_LETTER,
        table_data=list(rows),
        kpis=kpis,
        charts={
            "byDepartment": by_dept,
            "byType": by_type,
            "damageByDepartment": series_points(damage),
        },
    )


# ---------------------------------------------------------------------------
# Turnover
# ---------------------------------------------------------------------------

def build_turnover_report(rows: list[TurnoverRow], as_of: date) -> ReportBundle:
    """Resignations against new hires.

    Assumptions
    -----------
    - A resignation is a row whose status is the resigned marker.
    - A new hire is an active row hired in TURNOVER_HIRE_YEAR.
    - Average tenure is taken over all rows.
    """
    resigned = [r for r in rows if r.status.strip() == TURNOVER_RESIGNED_STATUS]
    hires = [
        r for r in rows
        if r.status.strip() == TURNOVER_ACTIVE_STATUS and year_of(r.hire_date) == TURNOVER_HIRE_YEAR
    ]

    avg_tenure = sum(r.tenure_years for r in rows) / len(rows) if rows else 0.0
    turnover_cmp = build_comparison(len(resigned), TURNOVER_PREVIOUS_YEAR["total_turnover"])
    tenure_cmp = build_comparison(avg_tenure, TURNOVER_PREVIOUS_YEAR["avg_tenure"], decimals=2)

    reasons = group_sum(resigned, lambda r: _label(r.reason_for_leaving))
    dept_resigned = group_sum(resigned, lambda r: _label(r.department))
    dept_hired = group_sum(hires, lambda r: _label(r.department))

    kpis = [
        Kpi(
            title="totalTurnover",
            value=format_number(len(resigned)),
            icon="ArrowRightOnRectangleIcon",
            trend_direction=trend_direction(turnover_cmp),
            comparison=turnover_cmp,
        ),
        Kpi(
            title="avgTenure",
            value=format_number(avg_tenure, 2),
            icon="ClockIcon",
            sub_value="years",
            sub_value_position="inline",
            trend_direction=trend_direction(tenure_cmp, "higher_is_better"),
            comparison=tenure_cmp,
        ),
        Kpi(title="topReasonForLeaving", value=top_label(reasons), icon="ChatBubbleLeftEllipsisIcon"),
        Kpi(title="topDeptByTurnover", value=top_label(dept_resigned), icon="BuildingOfficeIcon"),
    ]

    monthly_hires = bucket_by_month((month_index(r.hire_date), 1) for r in hires)
    monthly_resigned = bucket_by_month((month_index(r.termination_date), 1) for r in resigned)

    departments = pd.DataFrame({
        NEW_HIRES_SERIES: dept_hired,
        RESIGNATIONS_SERIES: dept_resigned,
    }).fillna(0)
    departments = departments.loc[
        departments.sum(axis=1).sort_values(ascending=False, kind="stable").index
    ]
    by_dept = [
        ChartPoint(
            name=str(department),
            series={
                NEW_HIRES_SERIES: int(counts[NEW_HIRES_SERIES]),
                RESIGNATIONS_SERIES: int(counts[RESIGNATIONS_SERIES]),
            },
        )
        for department, counts in departments.iterrows()
    ]

    logger.info("Assembled turnover report: %d resignations, %d new hires", len(resigned), len(hires))
    return ReportBundle(
        kind=ReportKind.TURNOVER,
        table_data=list(rows),
        kpis=kpis,
        charts={
            "monthly": month_points(
                MONTH_ABBREVIATIONS,
                **{NEW_HIRES_SERIES: monthly_hires, RESIGNATIONS_SERIES: monthly_resigned},
            ),
            "byDepartment": by_dept,
            "byReason": series_points(rank_descending(reasons)),
            "hiresVsResignations": [
                ChartPoint(name=NEW_HIRES_SERIES, value=len(hires)),
                ChartPoint(name=RESIGNATIONS_SERIES, value=len(resigned)),
            ],
        },
    )


# ---------------------------------------------------------------------------
# Purchase requests
# ---------------------------------------------------------------------------

def build_purchase_request_report(rows: list[PurchaseRequestRow], as_of: date) -> ReportBundle:
    committed = [r for r in rows if r.status in PURCHASE_COMMITTED_STATUSES]
    committed_value = sum(r.total_price for r in committed)
    pending = sum(1 for r in rows if r.status == PURCHASE_PENDING_STATUS)
    dept_value = group_sum(committed, lambda r: _label(r.department), lambda r: r.total_price)

    kpis = [
        Kpi(title="totalRequests", value=format_number(len(rows)), icon="DocumentTextIcon"),
        Kpi(title="totalApprovedValue", value=format_currency(committed_value, 0), icon="CurrencyDollarIcon"),
        Kpi(title="pendingRequests", value=format_number(pending), icon="ClockIcon"),
        Kpi(title="topDeptByValue", value=top_label(dept_value), icon="BuildingOfficeIcon"),
    ]

    year = _latest_year([r.date for r in rows]) or as_of.year
    monthly = bucket_by_month(
        (month_index(r.date), r.total_price) for r in rows if year_of(r.date) == year
    )

    logger.info("Assembled purchase request report: %d requests, %d pending", len(rows), pending)
    return ReportBundle(
        kind=ReportKind.PURCHASE_REQUEST,
        table_data=list(rows),
        kpis=kpis,
        charts={
            "byDepartment": series_points(rank_descending(dept_value)),
            "byStatus": series_points(group_sum(rows, lambda r: r.status)),
            "monthly": month_points(MONTH_ABBREVIATIONS, monthly),
        },
    )


# ---------------------------------------------------------------------------
# Training
# ---------------------------------------------------------------------------

def build_training_report(rows: list[TrainingRow], as_of: date) -> ReportBundle:
    return ReportBundle(kind=ReportKind.TRAINING, table_data=list(rows))

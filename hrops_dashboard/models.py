"""
Typed records and result structures.

One record dataclass per report kind; the aggregate types (Kpi, ChartPoint,
RankEntry) are shared by every assembler and collected in a ReportBundle.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

import pandas as pd


class ReportKind(str, Enum):
    KPI = "kpiReport"
    CONSUMABLES = "consumablesReport"
    OVERTIME = "otReport"
    LEAVE = "leaveReport"
    ACCIDENT = "accidentReport"
    ACCIDENT_WH1 = "accidentWh1Report"
    WORKLOAD = "workloadReport"
    MANPOWER = "manpowerReport"
    WARNING_LETTER = "warningLetterReport"
    TURNOVER = "turnoverReport"
    PURCHASE_REQUEST = "purchaseRequestReport"
    TRAINING = "trainingReport"


# ---------------------------------------------------------------------------
# Decoded records
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class KpiRow:
    kpi_no: str
    title: str
    measurement: str
    target: str
    score: str
    result: str
    monthly_data: dict[str, str]
    description: str
    objective: str
    measurement_method: str
    responsible: str
    improvement_plan: str


@dataclass(slots=True)
class ConsumableRow:
    date: str
    material: str
    description: str
    quantity: float
    unit: str
    price: float
    total_price: float
    cost_center: str
    department: str


@dataclass(slots=True)
class OtRow:
    id: str
    employee_id: str
    name: str
    position: str
    department: str
    grade: str
    status: str
    monthly_ot: list[float]
    total_ot: float
    ot_rate: float
    monthly_ot_pay: list[float]
    total_ot_pay: float
    year: int | None


@dataclass(slots=True)
class LeaveRow:
    id: str
    employee_id: str
    name: str
    position: str
    department: str
    grade: str
    status: str
    monthly_leave: list[float]
    leave_without_vacation: float
    total_leave_with_vacation: float
    vacation_carried_over: float
    vacation_entitlement: float
    total_vacation: float
    vacation_used: float
    vacation_accrued: float
    sick_leave: float
    personal_leave: float
    birthday_leave: float
    other_leave: float
    total_leave: float


@dataclass(slots=True)
class AccidentRow:
    id: str
    incident_date: str
    incident_time: str
    severity: str
    occurrence: str
    department: str
    employee_id: str
    employee_name: str
    position: str
    details: str
    cause: str
    prevention: str
    damage_value: float
    insurance_claim: str
    action_taken: str
    penalty: str
    remarks: str
    accident_location: str


@dataclass(slots=True)
class WorkloadDetailRow:
    description: str
    is_sub_row: bool
    unit: str
    values: list[float | None]
    average: float | None
    min: float | None
    max: float | None


@dataclass(slots=True)
class WorkloadSection:
    product: str
    is_sub_product: bool
    rows: list[WorkloadDetailRow] = field(default_factory=list)


@dataclass(slots=True)
class ManpowerRow:
    id: str
    employee_id: str
    name: str
    position: str
    department: str
    grade: str
    status: str
    manpower: float
    current: float
    hire_date: str | None = None
    termination_date: str | None = None


@dataclass(slots=True)
class WarningLetterRow:
    id: str
    date: str
    employee_id: str
    employee_name: str
    department: str
    reason: str
    warning_id: str
    damage_value: float
    type: str
    type_category: str
    hr_sent_date: str
    hr_investigation_date: str
    hr_warning_received_date: str
    document_status: str


@dataclass(slots=True)
class TurnoverRow:
    id: str
    employee_id: str
    name: str
    position: str
    status: str
    cost_center: str
    department: str
    grade: str
    hire_date_buddhist: str
    hire_date: str
    tenure_years: float
    tenure_months: float
    tenure_days: float
    probation_pass_date: str
    nickname: str
    now: str
    dob: str
    age: float
    religion: str
    mobile: str
    hometown: str
    education: str
    employment_type: str
    termination_date: str
    effective_date: str
    reason_for_leaving: str


@dataclass(slots=True)
class PurchaseRequestRow:
    id: str
    date: str
    requester: str
    department: str
    item_description: str
    quantity: float
    unit: str
    unit_price: float
    total_price: float
    supplier: str
    status: str
    objective: str
    goods_received_date: str
    lead_time_days: int


@dataclass(slots=True)
class TrainingRow:
    id: str
    course_name: str
    employee_id: str
    employee_name: str
    department: str
    training_date: str
    duration_hours: float
    cost: float
    status: str
    trainer: str
    location: str


# ---------------------------------------------------------------------------
# Aggregate results
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Comparison:
    """Current-vs-previous period delta, numeric and display-formatted."""

    value: str
    percentage: str
    period: str
    delta: float
    percent: float
    previous_value: str | None = None


@dataclass(slots=True)
class Kpi:
    title: str
    value: str
    icon: str
    trend_direction: str = "neutral"
    trend: str | None = None
    sub_value: str | None = None
    sub_value_position: str | None = None
    comparison: Comparison | None = None


@dataclass(slots=True)
class ChartPoint:
    name: str
    value: float | None = None
    series: dict[str, float] = field(default_factory=dict)


@dataclass(slots=True)
class RankEntry:
    label: str
    metric: float
    details: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class OtAverageRow:
    department: str
    employee_count: int
    total_ot_hours: float
    avg_ot_hours_per_month: float
    avg_ot_hours_per_week: float


@dataclass(slots=True)
class NeededPosition:
    position: str
    count: float


@dataclass(slots=True)
class DepartmentComparison:
    department: str
    manpower: float
    current: float
    needed: float
    needed_positions: list[NeededPosition] = field(default_factory=list)


@dataclass(slots=True)
class ReportBundle:
    """Everything one ingestion call produces for the presentation layer."""

    kind: ReportKind
    table_data: list[Any] = field(default_factory=list)
    kpis: list[Kpi] = field(default_factory=list)
    charts: dict[str, list[ChartPoint]] = field(default_factory=dict)
    rankings: dict[str, list[RankEntry]] = field(default_factory=dict)
    tables: dict[str, list[Any]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["kind"] = self.kind.value
        return data

    def table_frame(self) -> pd.DataFrame:
        """Return the decoded records as a DataFrame, one column per field."""
        return pd.DataFrame([asdict(row) for row in self.table_data])

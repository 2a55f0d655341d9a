"""
Configuration: column layouts, business-rule tables, thresholds, constants.

Every per-kind literal the assemblers rely on lives here so that a new
reporting year or a renamed spreadsheet header is a one-line change.
"""

# ---------------------------------------------------------------------------
# Calendar
# ---------------------------------------------------------------------------
MONTH_ABBREVIATIONS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

# Average weeks per year including the fractional week at the year boundary.
WEEKS_PER_YEAR = 52.14

# Day zero of spreadsheet serial dates.
EXCEL_EPOCH = "1899-12-30"

DATE_FORMAT = "%d/%m/%Y"

# ---------------------------------------------------------------------------
# Cell sentinels
# ---------------------------------------------------------------------------
EMPTY_MARKERS = {"", "-"}
ERROR_MARKERS = {"#DIV/0!", "#N/A", "#VALUE!", "#REF!", "#NUM!", "#NAME?", "#NULL!"}

NOT_AVAILABLE = "N/A"
UNKNOWN = "Unknown"

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------
CURRENCY_SYMBOL = "฿"

# ---------------------------------------------------------------------------
# Ranking caps
# ---------------------------------------------------------------------------
TOP_ITEMS_LIMIT = 10
TOP_EMPLOYEES_LIMIT = 10
TOP_DEPARTMENTS_LIMIT = 10
LEAVE_TOP_DEPARTMENTS_LIMIT = 5
ACCIDENT_TOP_DEPARTMENTS_LIMIT = 4

# ---------------------------------------------------------------------------
# KPI report
# ---------------------------------------------------------------------------
# Titles in this family keep their raw score and are read in days.
FORKLIFT_AVAILABILITY_MARKERS = ("ความพร้อมของรถยก", "avaliability")
FORKLIFT_AVAILABILITY_UNIT = "days"

# (keywords, icon) evaluated in order against the lower-cased KPI title
KPI_ICON_RULES: list[tuple[tuple[str, ...], str]] = [
    (("availability", "ความพร้อมของรถยก", "avaliability"), "CubeIcon"),
    (("initiative", "carbon", "ลดการปล่อยก๊าซคาร์บอน"), "SparklesIcon"),
    (("อัตราการเกิดอุบัติเหตุ", "ifr"), "ShieldCheckIcon"),
    (("lean", "กำหนดแผนพัฒนา"), "ChartPieIcon"),
    (("idp", "implementation"), "AcademicCapIcon"),
]
DEFAULT_KPI_ICON = "ChartBarIcon"

KPI_PASS_RESULT = "PASS"

# ---------------------------------------------------------------------------
# Consumables
# ---------------------------------------------------------------------------
# Ranking year for the "top items by cost" table.
CONSUMABLES_TOP_ITEMS_YEAR = 2025

# ---------------------------------------------------------------------------
# Overtime
# ---------------------------------------------------------------------------
OT_MIN_COLUMNS = 34

# Prior-year totals used when the sheet carries no rows for that year,
# keyed by the prior year.
OT_PREVIOUS_YEAR_BASELINE: dict[int, dict[str, float]] = {
    2024: {
        "total_hours": 57776.75,
        "total_pay": 5230099.63,
        "employees": 105,
    },
}

OT_HOURS_SERIES = "OT Hours"
OT_PAY_SERIES = "OT Pay"

# ---------------------------------------------------------------------------
# Leave
# ---------------------------------------------------------------------------
LEAVE_MIN_COLUMNS = 31

# ---------------------------------------------------------------------------
# Accident
# ---------------------------------------------------------------------------
ACCIDENT_MIN_COLUMNS = 18
SEVERITY_ORDER = ["L", "M", "S"]

# ---------------------------------------------------------------------------
# Manpower
# ---------------------------------------------------------------------------
MANPOWER_MARKER_COLUMNS = ("MANPOWER", "CURRENT")

MANPOWER_HEADERS = {
    "id": ("NO.",),
    "employee_id": ("EMP.",),
    "name": ("NAME-SURENAME",),
    "position": ("POSITION",),
    "department": ("DEPT.",),
    "grade": ("Grade",),
    "status": ("STATUS",),
    "manpower": ("MANPOWER",),
    "current": ("CURRENT",),
    "hire_date": ("HIRE DATE",),
    "termination_date": ("ทำงานวันสุดท้าย",),
}

MANPOWER_TOTAL_LABEL = "Manpower Total"
CURRENT_TOTAL_LABEL = "Current Total"

# ---------------------------------------------------------------------------
# Warning letters
# ---------------------------------------------------------------------------
WARNING_MIN_COLUMNS = 12
VERBAL_WARNING_KEYWORDS = ("วาจา", "verbal")
WRITTEN_WARNING_KEYWORDS = ("ลายลักษณ์อักษร", "written")

VERBAL_LABEL = "Verbal"
WRITTEN_LABEL = "Written"
OTHER_LABEL = "Other"

# ---------------------------------------------------------------------------
# Turnover
# ---------------------------------------------------------------------------
TURNOVER_HEADERS = {
    "id": ("NO.",),
    "employee_id": ("EMP.",),
    "name": ("NAME-SURENAME",),
    "position": ("POSITION",),
    "status": ("สถานะ",),
    "cost_center": ("COST CENTER",),
    "department": ("DEPT.",),
    "grade": ("Grade",),
    "hire_date_buddhist": ("วันเริ่มงาน (พ.ศ.)",),
    "hire_date": ("วันเริ่มงาน (ค.ศ.)",),
    "tenure_years": ("อายุงาน (ปี)",),
    "tenure_months": ("อายุงาน (เดือน)",),
    "tenure_days": ("อายุงาน (วัน)",),
    "probation_pass_date": ("วันที่ผ่านทดลองงาน",),
    "nickname": ("ชื่อเล่น",),
    "now": ("=Now",),
    "dob": ("วัน-เดือน-ปีเกิด",),
    "age": ("อายุ",),
    "religion": ("ศาสนา",),
    "mobile": ("โทรศัพท์มือถือ",),
    "hometown": ("ภูมิลำเนา",),
    "education": ("วุฒิการศึกษา",),
    "employment_type": ("STATUS",),
    "termination_date": ("ทำงานวันสุดท้าย",),
    "effective_date": ("วันที่มีผล",),
    "reason_for_leaving": ("สาเหตุการลาออก",),
}

TURNOVER_ACTIVE_STATUS = "ทำงาน"
TURNOVER_RESIGNED_STATUS = "ลาออก"

# New hires are counted for this calendar year only.
TURNOVER_HIRE_YEAR = 2025

TURNOVER_PREVIOUS_YEAR = {
    "total_turnover": 32,
    "avg_tenure": 3.12,
}

NEW_HIRES_SERIES = "newHires"
RESIGNATIONS_SERIES = "resignations"

# ---------------------------------------------------------------------------
# Purchase requests
# ---------------------------------------------------------------------------
PURCHASE_REQUEST_HEADERS = {
    "id": ("เลขที่ PR", "PR No.", "PR Number"),
    "date": ("วันที่เปิด PR", "PR Date", "Open Date"),
    "department": ("ส่วนงาน", "Department"),
    "item_description": ("รายการสั่งซื้อ", "Item", "Description"),
    "quantity": ("จำนวน", "Quantity"),
    "unit": ("หน่วย", "Unit"),
    "unit_price": ("ราคา/หน่วย", "Unit Price"),
    "total_price": ("รวมจำนวนเงิน", "Total Price"),
    "status": ("สถานะ", "Status"),
    "objective": ("วัตถุประสงค์", "Objective"),
    "goods_received_date": ("วันที่รับสินค้า", "Received Date", "Goods Received Date"),
}

PURCHASE_STATUSES = ["Pending", "Approved", "Rejected", "Ordered", "Completed"]
DEFAULT_PURCHASE_STATUS = "Pending"
PURCHASE_PENDING_STATUS = "Pending"

# (substrings, status) evaluated in order against the lower-cased status text
PURCHASE_STATUS_RULES: list[tuple[tuple[str, ...], str]] = [
    (("อนุมัติ", "approved"), "Approved"),
    (("เสร็จสมบูรณ์", "completed"), "Completed"),
    (("สั่งซื้อแล้ว", "ordered"), "Ordered"),
    (("ปฏิเสธ", "rejected"), "Rejected"),
    (("pending", "รอ"), "Pending"),
]

# Statuses whose value counts as committed spend.
PURCHASE_COMMITTED_STATUSES = {"Approved", "Ordered", "Completed"}

# ---------------------------------------------------------------------------
# Workload
# ---------------------------------------------------------------------------
WORKLOAD_SUB_PRODUCT_TITLE = "Ton/Person/Hr."
WORKLOAD_SUMMARY_PREFIXES = ("Sum", "Manpower", "Workday", "Working Hours", "OT")

from __future__ import annotations

import pytest

from hrops_dashboard.exceptions import SchemaError
from hrops_dashboard.loaders import (
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
from hrops_dashboard.loaders.purchase_request import lead_time_days, normalise_purchase_status
from hrops_dashboard.loaders.warning_letter import classify_warning_type

PR_HEADER = ["เลขที่ PR", "วันที่เปิด PR", "วันที่รับสินค้า", "สถานะ", "รวมจำนวนเงิน", "ส่วนงาน"]
MANPOWER_HEADER = ["NO.", "EMP.", "NAME-SURENAME", "POSITION", "DEPT.", "STATUS", "MANPOWER", "CURRENT"]


# ---------------------------------------------------------------------------
# KPI scorecard
# ---------------------------------------------------------------------------

def test_kpi_report_requires_title_and_defaults_score(grid) -> None:
    months = [f"{m}%" for m in range(1, 13)]
    rows = decode_kpi_report(grid(
        ["1", "Forklift availability", "95%", "%"] + months + ["0.96", "PASS", "d", "o", "m", "r", "p"],
        ["2", "", "95%", "%"] + months,
        ["3", "IFR", "0", "case"] + months,
    ))
    assert [r.title for r in rows] == ["Forklift availability", "IFR"]
    assert rows[0].monthly_data["Jan"] == "1%"
    assert rows[0].monthly_data["Dec"] == "12%"
    assert rows[0].improvement_plan == "p"
    assert rows[1].score == "N/A"
    assert rows[1].result == "N/A"


# ---------------------------------------------------------------------------
# Consumables
# ---------------------------------------------------------------------------

def test_consumables_drop_rows_without_material(grid) -> None:
    rows = decode_consumables(grid(
        [45731, "M-01", "Gloves", "10", "pair", "12.5", "125", "CC1", "WH"],
        ["15/03/2025", "", "Tape", 1, "roll", 20, 20, "CC1", "WH"],
        ["", "M-02", "Tape", "-", "roll", "#N/A", "", "CC2", ""],
    ))
    assert [r.material for r in rows] == ["M-01", "M-02"]
    assert rows[0].date == "15/03/2025"
    assert rows[0].total_price == 125
    assert rows[1].quantity == 0
    assert rows[1].price == 0
    assert rows[1].date == ""


# ---------------------------------------------------------------------------
# Overtime
# ---------------------------------------------------------------------------

def test_overtime_monthly_series_and_filtering(grid, ot_row) -> None:
    rows = decode_overtime(grid(
        ot_row("E1", "A", [10, 20]),
        ot_row("", "A", [5]),
        ot_row("E2", "B", [1.5], year=None),
    ))
    assert [r.employee_id for r in rows] == ["E1", "E2"]
    assert len(rows[0].monthly_ot) == 12
    assert rows[0].monthly_ot[:3] == [10, 20, 0]
    assert rows[0].total_ot == 30
    assert rows[0].monthly_ot_pay[1] == 2000
    assert rows[0].year == 2024
    assert rows[1].year is None


def test_overtime_blank_total_falls_back_to_monthly_sum(grid, ot_row) -> None:
    rows = decode_overtime(grid(ot_row("E1", "A", [4, 6], total="")))
    assert rows[0].total_ot == 10


def test_overtime_narrow_sheet_yields_no_rows(grid) -> None:
    rows = decode_overtime(grid(["1", "E1", "Name"] + [1] * 20))
    assert rows == []


# ---------------------------------------------------------------------------
# Leave
# ---------------------------------------------------------------------------

def test_leave_row_layout_and_default_id(grid, leave_row) -> None:
    rows = decode_leave(grid(
        leave_row("E1", "WH", [1, 2], without_vacation=3, total_leave=5, sick=2, personal=1),
        leave_row("", "WH"),
        leave_row("E3", "QA"),
    ))
    assert [r.employee_id for r in rows] == ["E1", "E3"]
    assert rows[0].id == "1"
    assert rows[1].id == "3"
    assert rows[0].leave_without_vacation == 3
    assert rows[0].sick_leave == 2
    assert rows[0].personal_leave == 1
    assert rows[0].total_leave == 5
    assert rows[0].monthly_leave[:3] == [1, 2, 0]


# ---------------------------------------------------------------------------
# Accidents
# ---------------------------------------------------------------------------

def test_accident_requires_employee_id_or_name(grid, accident_row) -> None:
    nameless = accident_row("QA", "M", employee_id="")
    nameless[7] = ""
    rows = decode_accidents(grid(
        accident_row("WH", "L", damage="1,200"),
        nameless,
    ))
    assert len(rows) == 1
    assert rows[0].damage_value == 1200
    assert rows[0].incident_date == "10/02/2025"
    assert rows[0].accident_location == "Zone A"


# ---------------------------------------------------------------------------
# Workload
# ---------------------------------------------------------------------------

def test_workload_sections() -> None:
    values = list(range(1, 13))
    sections = decode_workload([
        ["Product", "Description", "Unit"],
        ["Orphan", None, None],
        [None, "Loose row", "x"],
        ["SSRM", "Inbound", "Ton", *values, None, 6.5, 1, 12],
        [None, "Sum", "Ton", *values],
        [None, None, None],
        ["Ton/Person/Hr.", "Sum", "Ton/hr", 2.5, None],
    ])
    assert [s.product for s in sections] == ["Orphan", "SSRM", "Ton/Person/Hr."]
    assert sections[0].rows[0].description == "Loose row"
    ssrm = sections[1]
    assert ssrm.is_sub_product is False
    assert [r.description for r in ssrm.rows] == ["Inbound", "Sum"]
    assert ssrm.rows[0].is_sub_row is True
    assert ssrm.rows[1].is_sub_row is False
    assert ssrm.rows[0].values == values
    assert ssrm.rows[0].average == 6.5
    assert ssrm.rows[1].average is None
    assert sections[2].is_sub_product is True
    assert sections[2].rows[0].values[:2] == [2.5, None]


def test_workload_description_before_first_product_is_dropped() -> None:
    sections = decode_workload([
        ["Product", "Description"],
        [None, "Sum"],
        ["COIL", None],
    ])
    assert len(sections) == 1
    assert sections[0].rows == []


# ---------------------------------------------------------------------------
# Manpower
# ---------------------------------------------------------------------------

def test_manpower_rows_need_employee_or_position() -> None:
    rows = decode_manpower([
        MANPOWER_HEADER,
        [1, "E1", "A", "Picker", "WH", "Active", 2, 1],
        [2, "", "", "Clerk", "", "", "1", "0"],
        [3, "", "Nobody", "", "WH", "", 1, 1],
    ])
    assert [r.position for r in rows] == ["Picker", "Clerk"]
    assert rows[1].department == "N/A"
    assert rows[1].status == "Unknown"
    assert rows[1].manpower == 1
    assert rows[0].hire_date is None


def test_manpower_missing_current_marker_raises() -> None:
    header = [h for h in MANPOWER_HEADER if h != "CURRENT"]
    with pytest.raises(SchemaError, match="expected format for Manpower"):
        decode_manpower([header, [1, "E1", "A", "Picker", "WH", "Active", 2]])


# ---------------------------------------------------------------------------
# Warning letters
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "text, expected",
    [
        ("ตักเตือนด้วยวาจา", "Verbal"),
        ("Verbal warning", "Verbal"),
        ("หนังสือเตือนเป็นลายลักษณ์อักษร", "Written"),
        ("WRITTEN", "Written"),
        ("Suspension", "Other"),
        ("", "Other"),
    ],
)
def test_classify_warning_type(text, expected) -> None:
    assert classify_warning_type(text) == expected


def test_warning_letters_filter_and_classify(grid) -> None:
    rows = decode_warning_letters(grid(
        ["1", "01/02/2025", "E1", "A", "WH", "Late", "W-1", "500", "วาจา", "", "", "", "Done"],
        ["2", "01/02/2025", "", "", "WH", "Late", "W-2", "0", "วาจา", "", "", "", ""],
        ["3", "02/02/2025", "", "B", "", "Damage", "W-3", "", "", "", "", "", ""],
    ))
    assert [r.warning_id for r in rows] == ["W-1", "W-3"]
    assert rows[0].type_category == "Verbal"
    assert rows[0].damage_value == 500
    assert rows[1].type == "Unknown"
    assert rows[1].department == "Unknown"
    assert rows[1].type_category == "Other"


# ---------------------------------------------------------------------------
# Turnover
# ---------------------------------------------------------------------------

def test_turnover_is_header_keyed() -> None:
    rows = decode_turnover([
        ["สาเหตุการลาออก", "EMP.", "สถานะ", "DEPT.", "วันเริ่มงาน (ค.ศ.)", "อายุงาน (ปี)"],
        ["Relocation", "E1", "ลาออก", "WH", 45658, "2.5"],
        ["", "", "ทำงาน", "WH", "", ""],
        ["", "E2", "ทำงาน", "", "-", ""],
    ])
    assert [r.employee_id for r in rows] == ["E1", "E2"]
    assert rows[0].reason_for_leaving == "Relocation"
    assert rows[0].hire_date == "01/01/2025"
    assert rows[0].tenure_years == 2.5
    assert rows[1].department == "N/A"
    assert rows[1].hire_date == ""
    assert rows[1].age == 0


# ---------------------------------------------------------------------------
# Purchase requests
# ---------------------------------------------------------------------------

def test_lead_time_days() -> None:
    assert lead_time_days("01/01/2024", "05/01/2024") == 4
    assert lead_time_days("01/01/2024", "01/01/2023") == 0
    assert lead_time_days("01/01/2024", "") == 0
    assert lead_time_days("garbage", "05/01/2024") == 0


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("อนุมัติแล้ว", "Approved"),
        ("Completed", "Completed"),
        ("สั่งซื้อแล้ว", "Ordered"),
        ("Rejected by manager", "Rejected"),
        ("รอดำเนินการ", "Pending"),
        ("waiting", "Pending"),
        ("", "Pending"),
        (None, "Pending"),
    ],
)
def test_normalise_purchase_status(raw, expected) -> None:
    assert normalise_purchase_status(raw) == expected


def test_purchase_requests_decode_with_lead_time() -> None:
    rows = decode_purchase_requests([
        PR_HEADER,
        ["PR-1", "01/01/2024", "05/01/2024", "Approved", "1,000", "IT"],
        ["PR-2", "01/01/2024", "01/01/2023", "", 50, ""],
        ["", "02/01/2024", "", "Approved", 10, "IT"],
    ])
    assert [r.id for r in rows] == ["PR-1", "PR-2"]
    assert rows[0].lead_time_days == 4
    assert rows[0].total_price == 1000
    assert rows[1].lead_time_days == 0
    assert rows[1].status == "Pending"
    assert rows[1].department == "Unknown"


def test_purchase_requests_accept_english_headers() -> None:
    rows = decode_purchase_requests([
        ["PR No.", "PR Date", "Status", "Total Price"],
        ["PR-9", "03/03/2025", "ordered", 250],
    ])
    assert rows[0].status == "Ordered"
    assert rows[0].date == "03/03/2025"


# ---------------------------------------------------------------------------
# Training
# ---------------------------------------------------------------------------

def test_training_returns_no_rows(grid) -> None:
    assert decode_training(grid(["Course", "E1"])) == []


def test_training_empty_sheet_still_raises() -> None:
    with pytest.raises(SchemaError):
        decode_training([["Course"]])


# ---------------------------------------------------------------------------
# Row filtering invariant
# ---------------------------------------------------------------------------

def test_decoded_rows_never_exceed_body_rows(grid, ot_row, leave_row, accident_row) -> None:
    cases = [
        (decode_overtime, grid(ot_row("E1", "A", [1]), ot_row("", "A", [1]))),
        (decode_leave, grid(leave_row("E1", "A"), leave_row("", "A"))),
        (decode_accidents, grid(accident_row("A", "L"), [""] * 18)),
        (decode_consumables, grid(["", "M", "", 1, "", 1, 1, "", ""], ["", "", "", 1, "", 1, 1, "", ""])),
    ]
    for decoder, sheet in cases:
        assert len(decoder(sheet)) <= len(sheet) - 1

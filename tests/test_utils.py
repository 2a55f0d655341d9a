from __future__ import annotations

import math
from datetime import date, datetime

import pandas as pd
import pytest

from hrops_dashboard.exceptions import SchemaError
from hrops_dashboard.loaders.utils import (
    HeaderRow,
    PositionalRow,
    cell_text,
    coerce_date,
    coerce_number,
    header_rows,
    leading_float,
    parse_dmy,
    split_grid,
    year_of,
)


@pytest.mark.parametrize("cell", ["-", "", "  ", None, math.nan, "#DIV/0!", "#N/A", " #VALUE! ", True, False])
def test_coerce_number_sentinels_are_none(cell) -> None:
    assert coerce_number(cell) is None


def test_coerce_number_parses_text_and_passes_numbers() -> None:
    assert coerce_number("1,234.56") == 1234.56
    assert coerce_number(42) == 42
    assert coerce_number(2.5) == 2.5
    assert coerce_number("฿ 1,500") == 1500
    assert coerce_number("-12.5 hrs") == -12.5
    assert coerce_number("abc") is None
    assert coerce_number(["1"]) is None


def test_leading_float_reads_longest_prefix() -> None:
    assert leading_float("12.5.3") == 12.5
    assert leading_float("7-3") == 7
    assert leading_float(".5") == 0.5
    assert leading_float("-") is None


def test_coerce_date_serial_uses_1899_epoch() -> None:
    assert coerce_date(45658) == "01/01/2025"
    assert coerce_date(45658.75) == "01/01/2025"
    assert coerce_date(25569) == "01/01/1970"


def test_coerce_date_passes_formatted_text_through() -> None:
    assert coerce_date("15/03/2025") == "15/03/2025"
    assert coerce_date("March 2025") == "March 2025"


@pytest.mark.parametrize("cell", ["", "-", " - ", None, 0, False])
def test_coerce_date_empty_values(cell) -> None:
    assert coerce_date(cell) == ""


def test_coerce_date_native_values() -> None:
    assert coerce_date(date(2024, 2, 29)) == "29/02/2024"
    assert coerce_date(datetime(2024, 12, 31, 23, 59)) == "31/12/2024"
    assert coerce_date(pd.Timestamp("2023-07-04")) == "04/07/2023"


def test_coerce_date_huge_serial_does_not_raise() -> None:
    assert coerce_date(10**12) == "1000000000000"


def test_parse_dmy_and_year_of() -> None:
    assert parse_dmy("05/01/2024") == date(2024, 1, 5)
    assert parse_dmy("31/02/2024") is None
    assert parse_dmy("2024-01-05") is None
    assert year_of("05/01/2024") == 2024
    assert year_of("") is None
    assert year_of("n/a") is None


def test_cell_text_falsy_gives_default() -> None:
    assert cell_text(0, "x") == "x"
    assert cell_text(None, "x") == "x"
    assert cell_text("", "x") == "x"
    assert cell_text(3.0) == "3"
    assert cell_text(3.5) == "3.5"
    assert cell_text("E-01") == "E-01"


def test_split_grid_pads_ragged_rows() -> None:
    header, body = split_grid([["a", "b", "c"], ["1"], ["1", "2", "3", "4"]], "Test")
    assert len(header) == 4
    assert body == [["1", "", "", ""], ["1", "2", "3", "4"]]


@pytest.mark.parametrize("grid", [[], [["only header"]], [[], []]])
def test_split_grid_rejects_empty_sheets(grid) -> None:
    with pytest.raises(SchemaError, match="Test sheet is empty"):
        split_grid(grid, "Test")


def test_positional_row_reads_beyond_width_as_none() -> None:
    row = PositionalRow(["E1", "12", "-"])
    assert row.value(10) is None
    assert row.number(1) == 12
    assert row.number(2) is None
    assert row.number_or_zero(2) == 0
    assert row.slice(1, 4) == ["12", "-", None]


def test_header_rows_first_label_wins_and_blank_rows_skipped() -> None:
    rows = header_rows(
        [" Status ", "Status", "Amount", None],
        [["open", "closed", "10", "x"], ["", None, "  ", ""]],
    )
    assert len(rows) == 1
    assert rows[0].value("Status") == "open"
    assert rows[0].number("Amount") == 10


def test_header_row_aliases_take_first_non_empty() -> None:
    row = HeaderRow({"PR No.": "", "PR Number": "PR-7"})
    assert row.text(("เลขที่ PR", "PR No.", "PR Number")) == "PR-7"
    assert row.optional_date("missing") is None

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date
from typing import Any

import pytest

AS_OF = date(2025, 6, 1)


def _header(width: int) -> list[str]:
    return [f"col{i}" for i in range(width)]


@pytest.fixture()
def as_of() -> date:
    return AS_OF


@pytest.fixture()
def grid() -> Callable[..., list[list[Any]]]:
    """Prefix body rows with a generic header as wide as the widest row."""

    def build(*rows: Sequence[Any]) -> list[list[Any]]:
        width = max((len(r) for r in rows), default=1)
        return [_header(width)] + [list(r) for r in rows]

    return build


@pytest.fixture()
def ot_row() -> Callable[..., list[Any]]:
    """35-cell overtime row: identity, 12 monthly hours, totals, 12 monthly pay, year."""

    def build(
        employee_id: str,
        department: str,
        hours: Sequence[float],
        year: int | None = 2024,
        name: str = "",
        rate: float = 100,
        total: float | str | None = None,
    ) -> list[Any]:
        monthly = list(hours) + [0] * (12 - len(hours))
        pay = [h * rate for h in monthly]
        total_hours = sum(monthly) if total is None else total
        return (
            ["1", employee_id, name or f"Name {employee_id}", "Operator", department, "G1", "Active"]
            + monthly
            + [total_hours, rate]
            + pay
            + [sum(pay), year if year is not None else ""]
        )

    return build


@pytest.fixture()
def leave_row() -> Callable[..., list[Any]]:
    """31-cell leave row."""

    def build(
        employee_id: str,
        department: str,
        monthly: Sequence[float] = (),
        without_vacation: float = 0,
        total_leave: float = 0,
        sick: float = 0,
        personal: float = 0,
        birthday: float = 0,
        other: float = 0,
        vacation_used: float = 0,
    ) -> list[Any]:
        months = list(monthly) + [0] * (12 - len(monthly))
        totals = [
            without_vacation, total_leave, 0, 6, 6, vacation_used, 0,
            sick, personal, birthday, other, total_leave,
        ]
        return ["", employee_id, f"Name {employee_id}", "Clerk", department, "G2", "Active"] + months + totals

    return build


@pytest.fixture()
def accident_row() -> Callable[..., list[Any]]:
    """18-cell accident row."""

    def build(department: str, severity: str, damage: float = 0, employee_id: str = "E1") -> list[Any]:
        return [
            "1", "10/02/2025", "08:30", severity, "Warehouse", department,
            employee_id, "Somchai", "Driver", "Forklift hit rack", "Speed",
            "Training", damage, "No", "Warned", "", "", "Zone A",
        ]

    return build

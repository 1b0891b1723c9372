"""Shared fixtures for tests."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def clear_payroll_env(monkeypatch):
    """Keep PAYROLL_* variables from the developer's shell out of tests."""
    monkeypatch.delenv("PAYROLL_ROSTER", raising=False)
    monkeypatch.delenv("PAYROLL_CONFIG", raising=False)


@pytest.fixture
def sample_employee():
    """The first employee of the built-in roster."""
    from models import EmployeeRecord

    return EmployeeRecord(
        employee_id=10001,
        last_name="Garcia",
        first_name="Manuel III",
        birth_date="10/11/1983",
        monthly_salary=Decimal("90000"),
    )


@pytest.fixture
def low_salary_employee():
    """An employee whose taxable income lands in the 20% bracket."""
    from models import EmployeeRecord

    return EmployeeRecord(
        employee_id=10008,
        last_name="Romualdez",
        first_name="Alice",
        birth_date="05/14/1992",
        monthly_salary=Decimal("22500"),
    )


@pytest.fixture
def demo_hours():
    """Lunch-adjusted hours of the demonstration week (41 in total)."""
    return (Decimal("8"), Decimal("8.5"), Decimal("7.5"), Decimal("9"), Decimal("8"))


@pytest.fixture
def roster_csv(tmp_path) -> Path:
    """A roster file with two good lines and three malformed ones."""
    path = tmp_path / "roster.csv"
    path.write_text(
        "# id,last,first,birth,salary\n"
        "10001,Garcia,Manuel III,10/11/1983,90000\n"
        "\n"
        "10002, Lim , Antonio ,06/19/1988, 60000\n"
        "10003,Aquino,Bianca Sofia\n"
        "abc,Reyes,Isabella,06/16/1994,60000\n"
        "10005,Hernandez,Eduard,09/23/1989,lots\n",
        encoding="utf-8",
    )
    return path

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")


@dataclass(frozen=True)
class EmployeeRecord:
    employee_id: int
    last_name: str
    first_name: str
    birth_date: str
    monthly_salary: Decimal

    @property
    def full_name(self) -> str:
        """Name as shown in reports: 'Last, First'."""
        return f"{self.last_name}, {self.first_name}"


@dataclass(frozen=True)
class TimesheetEntry:
    day_index: int
    clock_in: Decimal
    clock_out: Decimal

    @property
    def day_name(self) -> str:
        return DAY_NAMES[self.day_index]


@dataclass(frozen=True)
class PayBreakdown:
    employee: EmployeeRecord
    hourly_rate: Decimal
    daily_hours: tuple[Decimal, ...]
    total_hours: Decimal
    regular_hours: Decimal
    overtime_hours: Decimal
    regular_pay: Decimal
    overtime_pay: Decimal
    gross_pay: Decimal
    # Monthly figures
    monthly_sss: Decimal
    monthly_philhealth: Decimal
    monthly_pagibig: Decimal
    total_monthly_deductions: Decimal
    taxable_income: Decimal
    monthly_tax: Decimal
    # Weekly figures
    weekly_sss: Decimal
    weekly_philhealth: Decimal
    weekly_pagibig: Decimal
    weekly_tax: Decimal
    total_weekly_deductions: Decimal
    net_pay: Decimal


@dataclass
class Config:
    standard_weekly_hours: Decimal = Decimal("40")
    standard_monthly_hours: Decimal = Decimal("160")
    overtime_multiplier: Decimal = Decimal("1.5")
    weeks_per_month: Decimal = Decimal("4.33")
    lunch_threshold_hours: Decimal = Decimal("5")
    lunch_break_hours: Decimal = Decimal("1")
    currency: str = "PHP"
    currency_symbol: str = "₱"


class PayrollError(Exception):
    """Base exception for payroll input problems."""

"""Pay and statutory deduction calculations.

Every function here is a pure function of its arguments. Nothing is validated:
negative salaries or hours give well-defined (if meaningless) numbers.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Sequence

from models import Config, EmployeeRecord, PayBreakdown
from timesheet import build_week, compute_weekly_total, daily_hours_for
from utils import to_decimal

logger = logging.getLogger("payroll.calculator")

_DEFAULT_CONFIG = Config()
ZERO = Decimal("0")

# SSS: 500-wide salary brackets starting at 3,250
SSS_MINIMUM = Decimal("135.00")
SSS_MAXIMUM = Decimal("1125.00")
SSS_FIRST_BRACKET = Decimal("3250")
SSS_CAP_SALARY = Decimal("24750")
SSS_BRACKET_WIDTH = Decimal("500")
SSS_BASE = Decimal("157.50")
SSS_STEP = Decimal("22.50")

# PhilHealth: employee share of a 3% premium
PHILHEALTH_FLOOR_SALARY = Decimal("10000")
PHILHEALTH_CEILING_SALARY = Decimal("60000")
PHILHEALTH_MINIMUM = Decimal("150.00")
PHILHEALTH_MAXIMUM = Decimal("900.00")
PHILHEALTH_RATE = Decimal("0.015")

# Pag-IBIG
PAGIBIG_LOW_SALARY = Decimal("1500")
PAGIBIG_LOW_RATE = Decimal("0.01")
PAGIBIG_RATE = Decimal("0.02")
PAGIBIG_MAXIMUM = Decimal("100.00")

# Withholding tax: (taxable income below, base tax, excess over, rate)
TAX_EXEMPT_LIMIT = Decimal("20832")
TAX_BRACKETS = [
    (Decimal("33333"), Decimal("0"), Decimal("20833"), Decimal("0.20")),
    (Decimal("66667"), Decimal("2500"), Decimal("33333"), Decimal("0.25")),
    (Decimal("166667"), Decimal("10833"), Decimal("66667"), Decimal("0.30")),
    (Decimal("666667"), Decimal("40833.33"), Decimal("166667"), Decimal("0.32")),
]
TAX_TOP_BRACKET = (Decimal("200833.33"), Decimal("666667"), Decimal("0.35"))


def hourly_rate(monthly_salary: Decimal, config: Config | None = None) -> Decimal:
    config = config or _DEFAULT_CONFIG
    return monthly_salary / config.standard_monthly_hours


def regular_hours(total_hours: Decimal, config: Config | None = None) -> Decimal:
    config = config or _DEFAULT_CONFIG
    return min(total_hours, config.standard_weekly_hours)


def overtime_hours(total_hours: Decimal, config: Config | None = None) -> Decimal:
    config = config or _DEFAULT_CONFIG
    return max(ZERO, total_hours - config.standard_weekly_hours)


def regular_pay(total_hours: Decimal, rate: Decimal, config: Config | None = None) -> Decimal:
    """Pay for hours up to the standard week."""
    return regular_hours(total_hours, config) * rate


def overtime_pay(total_hours: Decimal, rate: Decimal, config: Config | None = None) -> Decimal:
    """Pay for hours beyond the standard week at the overtime multiplier."""
    config = config or _DEFAULT_CONFIG
    return overtime_hours(total_hours, config) * rate * config.overtime_multiplier


def social_insurance_contribution(monthly_salary: Decimal) -> Decimal:
    """Monthly SSS contribution.

    Below 3,250 the minimum applies and from 24,750 the maximum. In between,
    each 500-wide bracket above 3,250 adds 22.50 to the 157.50 base.
    """
    if monthly_salary < SSS_FIRST_BRACKET:
        return SSS_MINIMUM
    if monthly_salary >= SSS_CAP_SALARY:
        return SSS_MAXIMUM

    bracket = int((monthly_salary - SSS_FIRST_BRACKET) // SSS_BRACKET_WIDTH)
    return SSS_BASE + bracket * SSS_STEP


def health_insurance_contribution(monthly_salary: Decimal) -> Decimal:
    """Monthly PhilHealth contribution (employee share)."""
    if monthly_salary <= PHILHEALTH_FLOOR_SALARY:
        return PHILHEALTH_MINIMUM
    if monthly_salary < PHILHEALTH_CEILING_SALARY:
        return monthly_salary * PHILHEALTH_RATE
    return PHILHEALTH_MAXIMUM


def housing_fund_contribution(monthly_salary: Decimal) -> Decimal:
    """Monthly Pag-IBIG contribution."""
    if monthly_salary <= PAGIBIG_LOW_SALARY:
        return monthly_salary * PAGIBIG_LOW_RATE
    return min(monthly_salary * PAGIBIG_RATE, PAGIBIG_MAXIMUM)


def withholding_tax(taxable_income: Decimal) -> Decimal:
    """Monthly withholding tax over taxable income."""
    if taxable_income <= TAX_EXEMPT_LIMIT:
        return ZERO

    for below, base, excess_over, rate in TAX_BRACKETS:
        if taxable_income < below:
            return base + (taxable_income - excess_over) * rate

    base, excess_over, rate = TAX_TOP_BRACKET
    return base + (taxable_income - excess_over) * rate


def prorate_weekly(monthly_amount: Decimal, config: Config | None = None) -> Decimal:
    config = config or _DEFAULT_CONFIG
    return monthly_amount / config.weeks_per_month


def compute_pay(
    employee: EmployeeRecord,
    daily_hours: Sequence[Decimal],
    config: Config | None = None,
) -> PayBreakdown:
    """Full gross-to-net breakdown for one employee's week."""
    config = config or _DEFAULT_CONFIG
    salary = employee.monthly_salary
    daily_hours = tuple(to_decimal(h) for h in daily_hours)

    rate = hourly_rate(salary, config)
    total = compute_weekly_total(daily_hours)
    regular = regular_pay(total, rate, config)
    overtime = overtime_pay(total, rate, config)
    gross = regular + overtime

    sss = social_insurance_contribution(salary)
    philhealth = health_insurance_contribution(salary)
    pagibig = housing_fund_contribution(salary)
    monthly_deductions = sss + philhealth + pagibig
    taxable = salary - monthly_deductions
    tax = withholding_tax(taxable)

    weekly_sss = prorate_weekly(sss, config)
    weekly_philhealth = prorate_weekly(philhealth, config)
    weekly_pagibig = prorate_weekly(pagibig, config)
    weekly_tax = prorate_weekly(tax, config)
    weekly_deductions = weekly_sss + weekly_philhealth + weekly_pagibig + weekly_tax

    return PayBreakdown(
        employee=employee,
        hourly_rate=rate,
        daily_hours=daily_hours,
        total_hours=total,
        regular_hours=regular_hours(total, config),
        overtime_hours=overtime_hours(total, config),
        regular_pay=regular,
        overtime_pay=overtime,
        gross_pay=gross,
        monthly_sss=sss,
        monthly_philhealth=philhealth,
        monthly_pagibig=pagibig,
        total_monthly_deductions=monthly_deductions,
        taxable_income=taxable,
        monthly_tax=tax,
        weekly_sss=weekly_sss,
        weekly_philhealth=weekly_philhealth,
        weekly_pagibig=weekly_pagibig,
        weekly_tax=weekly_tax,
        total_weekly_deductions=weekly_deductions,
        net_pay=gross - weekly_deductions,
    )


def compute_payroll(
    employees: Iterable[EmployeeRecord],
    week: Sequence[tuple],
    config: Config | None = None,
) -> list[PayBreakdown]:
    """Apply the same week of clock readings to every employee, in roster order."""
    hours = daily_hours_for(build_week(week), config)
    results = []
    for employee in employees:
        breakdown = compute_pay(employee, hours, config)
        logger.debug(
            "Employee %s: %s hours, gross %s, net %s",
            employee.employee_id, breakdown.total_hours, breakdown.gross_pay, breakdown.net_pay,
        )
        results.append(breakdown)
    return results

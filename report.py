"""Console rendering of the weekly payroll report."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from models import DAY_NAMES, Config, PayBreakdown

CENTS = Decimal("0.01")
TITLE = "MOTOR PH PAYROLL SYSTEM"
RULE = "=" * 72


def round_cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_hours(hours: Decimal) -> str:
    return f"{round_cents(hours):.2f}"


def format_money(amount: Decimal, config: Config | None = None) -> str:
    """Amount to 2 places with the currency symbol, e.g. '₱1,125.00'."""
    symbol = (config or Config()).currency_symbol
    rounded = round_cents(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"


def summary_row(breakdown: PayBreakdown) -> tuple[str, ...]:
    """Cells for one employee: ID, Name, Hours, Rate, Gross, Net."""
    return (
        str(breakdown.employee.employee_id),
        breakdown.employee.full_name,
        format_hours(breakdown.total_hours),
        f"{round_cents(breakdown.hourly_rate):,.2f}",
        f"{round_cents(breakdown.gross_pay):,.2f}",
        f"{round_cents(breakdown.net_pay):,.2f}",
    )


def build_summary_table(breakdowns: Sequence[PayBreakdown], config: Config | None = None) -> Table:
    """One row per employee: ID, Name, Hours, Rate, Gross, Net."""
    config = config or Config()
    table = Table(
        title="WEEKLY PAYROLL REPORT",
        title_justify="left",
        caption=f"Amounts in {config.currency}",
        caption_justify="left",
    )
    table.add_column("ID", justify="left")
    table.add_column("Name", justify="left")
    table.add_column("Hours", justify="right")
    table.add_column(f"Rate ({config.currency_symbol})", justify="right")
    table.add_column(f"Gross ({config.currency_symbol})", justify="right")
    table.add_column(f"Net ({config.currency_symbol})", justify="right")

    for b in breakdowns:
        table.add_row(*summary_row(b))
    return table


def build_detail(breakdown: PayBreakdown, config: Config | None = None) -> Text:
    """Itemised calculation for one employee, every intermediate figure included."""
    config = config or Config()
    emp = breakdown.employee

    def money(amount: Decimal) -> str:
        return format_money(amount, config)

    text = Text()
    text.append(f"DETAILED CALCULATION (Employee ID: {emp.employee_id})\n", style="bold")
    text.append(f"Employee: {emp.full_name}\n")
    text.append(f"Monthly Salary: {money(emp.monthly_salary)}\n")
    text.append(f"Hourly Rate: {money(breakdown.hourly_rate)}\n")

    text.append("\nHours Worked:\n", style="bold")
    for name, hours in zip(DAY_NAMES, breakdown.daily_hours):
        text.append(f"  {name + ':':<11}{format_hours(hours)}\n")
    text.append(f"  {'Total:':<11}{format_hours(breakdown.total_hours)} hours\n")

    text.append("\nSalary Calculation:\n", style="bold")
    text.append(f"  Regular Hours: {format_hours(breakdown.regular_hours)}\n")
    text.append(f"  Regular Pay: {money(breakdown.regular_pay)}\n")
    # Dim the overtime lines on a standard week
    ot_style = "dim" if breakdown.overtime_hours == 0 else ""
    text.append(f"  Overtime Hours: {format_hours(breakdown.overtime_hours)}\n", style=ot_style)
    text.append(f"  Overtime Pay: {money(breakdown.overtime_pay)}\n", style=ot_style)
    text.append(f"  GROSS WEEKLY SALARY: {money(breakdown.gross_pay)}\n", style="bold")

    text.append("\nMonthly Government Deductions:\n", style="bold")
    text.append(f"  SSS Contribution: {money(breakdown.monthly_sss)}\n")
    text.append(f"  PhilHealth Contribution: {money(breakdown.monthly_philhealth)}\n")
    text.append(f"  Pag-IBIG Contribution: {money(breakdown.monthly_pagibig)}\n")
    text.append(f"  Total Deductions: {money(breakdown.total_monthly_deductions)}\n")
    text.append(f"  Taxable Income: {money(breakdown.taxable_income)}\n")
    text.append(f"  Withholding Tax: {money(breakdown.monthly_tax)}\n")

    text.append("\nWeekly Government Deductions:\n", style="bold")
    text.append(f"  SSS Contribution: {money(breakdown.weekly_sss)}\n")
    text.append(f"  PhilHealth Contribution: {money(breakdown.weekly_philhealth)}\n")
    text.append(f"  Pag-IBIG Contribution: {money(breakdown.weekly_pagibig)}\n")
    text.append(f"  Withholding Tax: {money(breakdown.weekly_tax)}\n")
    text.append(f"  Total Deductions: {money(breakdown.total_weekly_deductions)}\n")
    text.append(f"  NET WEEKLY SALARY: {money(breakdown.net_pay)}", style="bold")
    return text


def select_sample(breakdowns: Sequence[PayBreakdown], sample_id: int | None = None) -> PayBreakdown | None:
    """Breakdown for sample_id, or the first one when no id is given."""
    if not breakdowns:
        return None
    if sample_id is None:
        return breakdowns[0]
    for b in breakdowns:
        if b.employee.employee_id == sample_id:
            return b
    return None


def render_report(
    breakdowns: Sequence[PayBreakdown],
    console: Console,
    sample_id: int | None = None,
    config: Config | None = None,
) -> None:
    """Print the summary table followed by one detailed breakdown."""
    console.print(RULE)
    console.print(TITLE, justify="center", style="bold")
    console.print(RULE)
    console.print(build_summary_table(breakdowns, config))

    sample = select_sample(breakdowns, sample_id)
    if sample is None:
        if sample_id is not None:
            console.print(f"No employee with ID {sample_id} in the roster", style="yellow")
        return

    console.print()
    console.print(build_detail(sample, config))
    console.print(RULE)

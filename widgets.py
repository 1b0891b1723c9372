"""Custom widgets for the payroll viewer."""

from __future__ import annotations

from decimal import Decimal

from textual.widgets import Static
from rich.text import Text

from models import Config, PayBreakdown
from report import build_detail, format_money


class PayrollHeader(Static):
    """Shows the report title on the left and roster totals on the right."""

    def __init__(self, config: Config | None = None, **kwargs):
        super().__init__(**kwargs)
        self.config = config or Config()
        self.employee_count = 0

    def update_display(self, employee_count: int, total_gross: Decimal, total_net: Decimal):
        self.employee_count = employee_count
        title = "WEEKLY PAYROLL REPORT"
        totals = (
            f"{employee_count} employees  "
            f"Gross {format_money(total_gross, self.config)}  "
            f"Net {format_money(total_net, self.config)}"
        )

        text = Text()
        text.append(title, style="bold")
        text.append("  ")
        text.append(totals, style="bold")
        self.update(text)


class BreakdownPanel(Static):
    """Itemised calculation for the selected employee."""

    def __init__(self, config: Config | None = None, **kwargs):
        super().__init__(**kwargs)
        self.config = config or Config()
        self.employee_id: int | None = None

    def update_display(self, breakdown: PayBreakdown | None):
        if breakdown is None:
            self.employee_id = None
            self.update(Text("No employee selected", style="dim"))
            return

        self.employee_id = breakdown.employee.employee_id
        self.update(build_detail(breakdown, self.config))

#!/usr/bin/env python3
"""Weekly payroll report: console output or TUI viewer."""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal
from typing import Sequence

from rich.console import Console
from rich.logging import RichHandler
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import DataTable, Footer

from models import Config, PayBreakdown, PayrollError
from payroll import compute_payroll
from report import render_report, summary_row
from roster import default_roster_path, load_roster
from settings import load_config
from utils import DEMO_WEEK
from widgets import BreakdownPanel, PayrollHeader

logger = logging.getLogger("payroll.app")


class PayrollApp(App):
    """Browse the weekly payroll, one employee's breakdown at a time."""

    CSS = """
    Screen {
        background: $surface;
    }

    #payroll-header {
        height: auto;
        background: $primary;
        color: $text;
        padding: 0 1;
        text-style: bold;
    }

    #payroll-table {
        width: 3fr;
        height: 1fr;
        margin: 1 2;
    }

    #breakdown-panel {
        width: 2fr;
        height: 1fr;
        padding: 1 2;
        color: $text;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("g", "goto_first", "First"),
        Binding("G", "goto_last", "Last"),
    ]

    def __init__(self, breakdowns: Sequence[PayBreakdown], config: Config | None = None):
        super().__init__()
        self.breakdowns = list(breakdowns)
        self.config = config or Config()
        self._breakdowns_by_id = {b.employee.employee_id: b for b in self.breakdowns}

    def get_breakdown(self, employee_id: int) -> PayBreakdown | None:
        return self._breakdowns_by_id.get(employee_id)

    def totals(self) -> tuple[Decimal, Decimal]:
        """Total gross and net pay over the roster."""
        gross = sum((b.gross_pay for b in self.breakdowns), Decimal("0"))
        net = sum((b.net_pay for b in self.breakdowns), Decimal("0"))
        return gross, net

    def compose(self) -> ComposeResult:
        yield PayrollHeader(self.config, id="payroll-header")
        with Horizontal():
            yield DataTable(id="payroll-table")
            yield BreakdownPanel(self.config, id="breakdown-panel")
        yield Footer()

    def on_mount(self):
        table = self.query_one("#payroll-table", DataTable)
        table.cursor_type = "row"
        table.add_column("ID", width=6)
        table.add_column("Name", width=24)
        table.add_column("Hours", width=6)
        table.add_column("Rate", width=9)
        table.add_column("Gross", width=11)
        table.add_column("Net", width=11)

        for b in self.breakdowns:
            table.add_row(*summary_row(b), key=str(b.employee.employee_id))

        gross, net = self.totals()
        self.query_one("#payroll-header", PayrollHeader).update_display(len(self.breakdowns), gross, net)
        self.query_one("#breakdown-panel", BreakdownPanel).update_display(
            self.breakdowns[0] if self.breakdowns else None
        )
        table.focus()

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        if event.row_key is None or event.row_key.value is None:
            return
        breakdown = self.get_breakdown(int(event.row_key.value))
        self.query_one("#breakdown-panel", BreakdownPanel).update_display(breakdown)

    def action_goto_first(self):
        table = self.query_one("#payroll-table", DataTable)
        if table.row_count:
            table.move_cursor(row=0)

    def action_goto_last(self):
        table = self.query_one("#payroll-table", DataTable)
        if table.row_count:
            table.move_cursor(row=table.row_count - 1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Weekly payroll report")
    parser.add_argument("--roster", help="Roster file (.csv, .txt or .xlsx); defaults to $PAYROLL_ROSTER")
    parser.add_argument("--config", help="JSON settings file; defaults to $PAYROLL_CONFIG")
    parser.add_argument("--sample", type=int, help="Employee ID for the detailed breakdown")
    parser.add_argument("--tui", action="store_true", help="Open the interactive viewer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level="DEBUG" if verbose else "WARNING",
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    console = console or Console()

    try:
        config = load_config(args.config)
        roster = load_roster(args.roster or default_roster_path())
    except PayrollError as e:
        logger.error("%s", e)
        return 1

    breakdowns = compute_payroll(roster, DEMO_WEEK, config)

    if args.tui:
        PayrollApp(breakdowns, config).run()
        return 0

    render_report(breakdowns, console, sample_id=args.sample, config=config)
    return 0


if __name__ == "__main__":
    sys.exit(main())

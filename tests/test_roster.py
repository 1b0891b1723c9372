"""Tests for roster.py - built-in roster, CSV and workbook loading."""

import logging
from decimal import Decimal

import pytest
from openpyxl import Workbook

from roster import (
    DEFAULT_ROSTER,
    RosterFormatError,
    RosterLoadError,
    default_roster_path,
    load_roster,
    load_roster_file,
    load_roster_workbook,
    parse_roster_line,
)


class TestDefaultRoster:
    """Tests for the built-in roster."""

    def test_thirteen_employees(self):
        assert len(DEFAULT_ROSTER) == 13

    def test_unique_ids(self):
        ids = [e.employee_id for e in DEFAULT_ROSTER]
        assert len(set(ids)) == len(ids)

    def test_first_employee(self):
        first = DEFAULT_ROSTER[0]
        assert first.employee_id == 10001
        assert first.full_name == "Garcia, Manuel III"
        assert first.monthly_salary == Decimal("90000")

    def test_salaries_positive(self):
        assert all(e.monthly_salary > 0 for e in DEFAULT_ROSTER)


class TestParseRosterLine:
    """Tests for parse_roster_line."""

    def test_valid_line(self):
        employee = parse_roster_line("10007,San Jose,Brad,03/15/1996,42975")
        assert employee.employee_id == 10007
        assert employee.last_name == "San Jose"
        assert employee.first_name == "Brad"
        assert employee.birth_date == "03/15/1996"
        assert employee.monthly_salary == Decimal("42975")

    def test_strips_whitespace(self):
        employee = parse_roster_line(" 10002 , Lim , Antonio , 06/19/1988 , 60000.50 ")
        assert employee.last_name == "Lim"
        assert employee.monthly_salary == Decimal("60000.50")

    def test_birth_date_not_validated(self):
        assert parse_roster_line("1,A,B,not a date,1000").birth_date == "not a date"

    def test_too_few_fields(self):
        with pytest.raises(RosterFormatError) as exc_info:
            parse_roster_line("10003,Aquino,Bianca Sofia", line_no=4)
        assert exc_info.value.line_no == 4
        assert "line 4" in str(exc_info.value)

    @pytest.mark.parametrize("line", ["abc,A,B,C,1000", "1.5,A,B,C,1000", ",A,B,C,1000"])
    def test_bad_id(self, line):
        with pytest.raises(RosterFormatError):
            parse_roster_line(line)

    @pytest.mark.parametrize("line", ["1,A,B,C,lots", "1,A,B,C,", "1,A,B,C,inf"])
    def test_bad_salary(self, line):
        with pytest.raises(RosterFormatError):
            parse_roster_line(line)

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_roster_line("oops")

    def test_quoted_field_with_comma(self):
        employee = parse_roster_line('"10001","Garcia, Jr.",Manuel,10/11/1983,90000')
        assert employee.employee_id == 10001
        assert employee.last_name == "Garcia, Jr."
        assert employee.first_name == "Manuel"
        assert employee.monthly_salary == Decimal("90000")


class TestLoadRosterFile:
    """Tests for load_roster_file."""

    def test_skips_malformed_lines(self, roster_csv, caplog):
        with caplog.at_level(logging.WARNING, logger="payroll.roster"):
            employees = load_roster_file(roster_csv)

        assert [e.employee_id for e in employees] == [10001, 10002]
        assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(RosterLoadError):
            load_roster_file(tmp_path / "missing.csv")

    def test_byte_order_mark(self, tmp_path):
        """Files saved by spreadsheet tools often start with a BOM."""
        path = tmp_path / "roster.csv"
        path.write_bytes("\ufeff10001,Garcia,Manuel III,10/11/1983,90000\n".encode("utf-8"))
        employees = load_roster_file(path)
        assert [e.employee_id for e in employees] == [10001]

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "roster.csv"
        path.write_bytes(b"10001,Mu\xf1oz,Ana,01/01/1990,30000\n")
        with pytest.raises(RosterLoadError):
            load_roster_file(path)


class TestLoadRosterWorkbook:
    """Tests for load_roster_workbook."""

    def _write(self, path, rows):
        wb = Workbook()
        ws = wb.active
        for row in rows:
            ws.append(row)
        wb.save(path)

    def test_reads_rows_after_header(self, tmp_path):
        path = tmp_path / "roster.xlsx"
        self._write(path, [
            ["ID", "Last Name", "First Name", "Birthday", "Salary"],
            [10001, "Garcia", "Manuel III", "10/11/1983", 90000],
            [10008, "Romualdez", "Alice", "05/14/1992", 22500.5],
        ])

        employees = load_roster_workbook(path)

        assert [e.employee_id for e in employees] == [10001, 10008]
        assert employees[1].monthly_salary == Decimal("22500.5")

    def test_skips_bad_rows(self, tmp_path, caplog):
        path = tmp_path / "roster.xlsx"
        self._write(path, [
            [10001, "Garcia", "Manuel III", "10/11/1983", 90000],
            ["x", "Lim", "Antonio", "06/19/1988", 60000],
            [10003, "Aquino"],
        ])

        with caplog.at_level(logging.WARNING, logger="payroll.roster"):
            employees = load_roster_workbook(path)

        assert [e.employee_id for e in employees] == [10001]
        assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2

    def test_bad_first_data_row_is_warned(self, tmp_path, caplog):
        """Only a non-numeric first cell marks row 1 as a header."""
        path = tmp_path / "roster.xlsx"
        self._write(path, [
            [10001, "Garcia", "Manuel III", "10/11/1983", "lots"],
            [10002, "Lim", "Antonio", "06/19/1988", 60000],
        ])

        with caplog.at_level(logging.WARNING, logger="payroll.roster"):
            employees = load_roster_workbook(path)

        assert [e.employee_id for e in employees] == [10002]
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "line 1" in warnings[0].getMessage()

    def test_not_a_workbook(self, tmp_path):
        path = tmp_path / "roster.xlsx"
        path.write_text("not a zip file")
        with pytest.raises(RosterLoadError):
            load_roster_workbook(path)


class TestLoadRoster:
    """Tests for the load_roster entry point."""

    def test_no_path_uses_builtin(self):
        assert load_roster() == list(DEFAULT_ROSTER)

    def test_loads_csv(self, roster_csv):
        assert len(load_roster(roster_csv)) == 2

    def test_accepts_string_path(self, roster_csv):
        assert len(load_roster(str(roster_csv))) == 2

    def test_empty_file_falls_back(self, tmp_path, caplog):
        path = tmp_path / "empty.csv"
        path.write_text("")
        with caplog.at_level(logging.WARNING, logger="payroll.roster"):
            assert load_roster(path) == list(DEFAULT_ROSTER)
        assert "built-in roster" in caplog.text

    def test_all_lines_bad_falls_back(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("a,b\nc,d\n")
        assert load_roster(path) == list(DEFAULT_ROSTER)

    def test_missing_file_is_fatal(self, tmp_path):
        with pytest.raises(RosterLoadError):
            load_roster(tmp_path / "missing.csv")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "roster.json"
        path.write_text("[]")
        with pytest.raises(RosterLoadError):
            load_roster(path)


class TestDefaultRosterPath:
    """Tests for default_roster_path."""

    def test_unset(self):
        assert default_roster_path() is None

    def test_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PAYROLL_ROSTER", str(tmp_path / "r.csv"))
        assert default_roster_path() == tmp_path / "r.csv"

"""Load the employee roster from the built-in list, a CSV file or a workbook."""

from __future__ import annotations

import csv
import logging
import os
from decimal import Decimal
from pathlib import Path
from zipfile import BadZipFile

from models import EmployeeRecord, PayrollError
from utils import to_decimal

logger = logging.getLogger("payroll.roster")

ROSTER_FIELDS = ("id", "last_name", "first_name", "birth_date", "monthly_salary")
WORKBOOK_SUFFIXES = {".xlsx", ".xlsm"}
TEXT_SUFFIXES = {".csv", ".txt", ""}


class RosterFormatError(PayrollError, ValueError):
    """A roster line or row could not be parsed."""

    def __init__(self, message: str, line_no: int | None = None):
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class RosterLoadError(PayrollError):
    """The roster source could not be opened."""


DEFAULT_ROSTER: tuple[EmployeeRecord, ...] = (
    EmployeeRecord(10001, "Garcia", "Manuel III", "10/11/1983", Decimal("90000")),
    EmployeeRecord(10002, "Lim", "Antonio", "06/19/1988", Decimal("60000")),
    EmployeeRecord(10003, "Aquino", "Bianca Sofia", "08/04/1989", Decimal("60000")),
    EmployeeRecord(10004, "Reyes", "Isabella", "06/16/1994", Decimal("60000")),
    EmployeeRecord(10005, "Hernandez", "Eduard", "09/23/1989", Decimal("52670")),
    EmployeeRecord(10006, "Villanueva", "Andrea Mae", "02/14/1988", Decimal("52670")),
    EmployeeRecord(10007, "San Jose", "Brad", "03/15/1996", Decimal("42975")),
    EmployeeRecord(10008, "Romualdez", "Alice", "05/14/1992", Decimal("22500")),
    EmployeeRecord(10009, "Atienza", "Rosie", "09/24/1948", Decimal("22500")),
    EmployeeRecord(10010, "Alvaro", "Roderick", "03/30/1988", Decimal("52670")),
    EmployeeRecord(10032, "Castro", "John Rafael", "02/09/1992", Decimal("52670")),
    EmployeeRecord(10033, "Martinez", "Carlos Ian", "11/16/1990", Decimal("52670")),
    EmployeeRecord(10021, "Lazaro", "Darlene", "11/25/1985", Decimal("23250")),
)


def default_roster_path() -> Path | None:
    """Roster path from the PAYROLL_ROSTER environment variable, if set."""
    if env_path := os.environ.get("PAYROLL_ROSTER"):
        return Path(env_path)
    return None


def parse_roster_fields(fields: list, line_no: int | None = None) -> EmployeeRecord:
    """Build an EmployeeRecord from id, last name, first name, birth date, salary."""
    values = ["" if f is None else str(f).strip() for f in fields]
    if len(values) < len(ROSTER_FIELDS):
        raise RosterFormatError(
            f"expected {len(ROSTER_FIELDS)} fields, got {len(values)}", line_no
        )

    raw_id, last_name, first_name, birth_date, raw_salary = values[:5]

    try:
        id_value = to_decimal(raw_id)
        if id_value != id_value.to_integral_value():
            raise ValueError(raw_id)
        employee_id = int(id_value)
    except (ValueError, ArithmeticError):
        raise RosterFormatError(f"employee id is not numeric: {raw_id!r}", line_no) from None

    try:
        salary = to_decimal(raw_salary)
        if not salary.is_finite():
            raise ValueError(raw_salary)
    except ValueError:
        raise RosterFormatError(f"salary is not numeric: {raw_salary!r}", line_no) from None

    return EmployeeRecord(
        employee_id=employee_id,
        last_name=last_name,
        first_name=first_name,
        birth_date=birth_date,
        monthly_salary=salary,
    )


def parse_roster_line(line: str, line_no: int | None = None) -> EmployeeRecord:
    """Parse one comma-separated roster line; quoted fields may hold commas."""
    try:
        fields = next(csv.reader([line]), [])
    except csv.Error as e:
        raise RosterFormatError(str(e), line_no) from None
    return parse_roster_fields(fields, line_no)


def load_roster_file(path: Path) -> list[EmployeeRecord]:
    """Read a comma-separated roster, skipping lines that fail to parse."""
    try:
        with open(path, encoding="utf-8-sig") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise RosterLoadError(f"Cannot read roster file {path}: {e}") from e

    employees = []
    for line_no, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        try:
            employees.append(parse_roster_line(stripped, line_no))
        except RosterFormatError as e:
            logger.warning("Skipping roster entry in %s: %s", path, e)

    logger.debug("Loaded %d employees from %s", len(employees), path)
    return employees


def _is_header_row(row: tuple) -> bool:
    """A header row has a non-numeric first cell."""
    try:
        to_decimal("" if row[0] is None else row[0])
    except ValueError:
        return True
    return False


def load_roster_workbook(path: Path) -> list[EmployeeRecord]:
    """Read the first worksheet of an Excel roster, one employee per row."""
    from openpyxl import load_workbook
    from openpyxl.utils.exceptions import InvalidFileException

    try:
        wb = load_workbook(path, read_only=True, data_only=True)
    except (OSError, InvalidFileException, BadZipFile) as e:
        raise RosterLoadError(f"Cannot read roster workbook {path}: {e}") from e

    employees = []
    try:
        ws = wb.worksheets[0]
        for row_no, row in enumerate(ws.iter_rows(values_only=True), start=1):
            if not row or all(cell is None for cell in row):
                continue
            if row_no == 1 and _is_header_row(row):
                logger.debug("Treating row 1 of %s as a header", path)
                continue
            try:
                employees.append(parse_roster_fields(list(row), row_no))
            except RosterFormatError as e:
                logger.warning("Skipping roster entry in %s: %s", path, e)
    finally:
        wb.close()

    logger.debug("Loaded %d employees from %s", len(employees), path)
    return employees


def load_roster(path: Path | str | None = None) -> list[EmployeeRecord]:
    """Load the roster from path, or the built-in roster when no path is given.

    An empty result falls back to the built-in roster. Raises RosterLoadError
    when the file cannot be opened or its type is not supported.
    """
    if path is None:
        return list(DEFAULT_ROSTER)

    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in WORKBOOK_SUFFIXES:
        employees = load_roster_workbook(path)
    elif suffix in TEXT_SUFFIXES:
        employees = load_roster_file(path)
    else:
        raise RosterLoadError(f"Unsupported roster file type: {path.suffix}")

    if not employees:
        logger.warning("No valid employees in %s, using the built-in roster", path)
        return list(DEFAULT_ROSTER)
    return employees

"""Looking up employees and their full profile."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from .db import InvalidInputError

MALE = "男"
FEMALE = "女"


@dataclass(frozen=True)
class EmployeeProfile:
    """Everything shown about one employee."""

    employee_id: str
    name: str
    enrollment_date: str
    sex: str
    job: str
    department_name: str
    tech_level: str
    manage_level: str


def _text(value) -> str:
    return "" if value is None else str(value)


def employee_ids(conn: sqlite3.Connection) -> list[str]:
    """Return the ids of all employees as text."""
    return [_text(row[0]) for row in conn.execute("SELECT employeeID FROM employee")]


def _first_value(conn: sqlite3.Connection, sql: str, key: str) -> str:
    row = conn.execute(sql, (key,)).fetchone()
    return "" if row is None else _text(row[0])


def load_profile(conn: sqlite3.Connection, employee_id: str) -> EmployeeProfile | None:
    """Return the profile of the employee with this id, or None if there is none."""
    if not employee_id:
        raise InvalidInputError("您没有选择合适的ID")
    row = conn.execute(
        "SELECT * FROM employee WHERE CAST(employeeID AS TEXT) = ? LIMIT 1",
        (employee_id,),
    ).fetchone()
    if row is None:
        return None
    department_name = _first_value(
        conn,
        "SELECT departname FROM department WHERE CAST(departmentID AS TEXT) = ? LIMIT 1",
        _text(row["departmentID"]),
    )
    tech_level = _first_value(
        conn,
        "SELECT techlevel FROM technicist WHERE CAST(employeeID AS TEXT) = ? LIMIT 1",
        employee_id,
    )
    manage_level = _first_value(
        conn,
        "SELECT managelevel FROM management WHERE CAST(employeeID AS TEXT) = ? LIMIT 1",
        employee_id,
    )
    return EmployeeProfile(
        employee_id=employee_id,
        name=_text(row["employname"]),
        enrollment_date=_text(row["enrollmentdate"]),
        sex=MALE if row["sex"] else FEMALE,
        job=_text(row["job"]),
        department_name=department_name,
        tech_level=tech_level,
        manage_level=manage_level,
    )
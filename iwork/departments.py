"""Looking up, creating, changing and removing departments."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from .db import DatabaseError, InvalidInputError, parse_int
from .employees import OperationReport

_KEPT = "但部门已创建，请检查输入后在部门修改中操作！"
_HEAD_PROFILE_FAILED = "更新部长的个人信息失败，请检查并更改"


@dataclass(frozen=True)
class DepartmentSummary:
    """What is shown about one department."""

    department_id: str
    name: str
    head_id: str
    employee_count: int


@dataclass(frozen=True)
class DepartmentUpdate:
    """Form input for changing a department; empty strings leave a field alone."""

    name: str = ""
    head_id: str = ""
    clear_name: bool = False
    clear_head: bool = False


def _text(value) -> str:
    return "" if value is None else str(value)


def _run(conn: sqlite3.Connection, report: OperationReport, failure: str, sql: str, params) -> bool:
    """Execute one statement; on failure record ``failure`` and return False."""
    try:
        conn.execute(sql, params)
    except sqlite3.Error:
        report.warnings.append(failure)
        return False
    return True


def department_ids(conn: sqlite3.Connection) -> list[str]:
    """Return the ids of all departments as text."""
    return [_text(row[0]) for row in conn.execute("SELECT departmentID FROM department")]


def department_summary(conn: sqlite3.Connection, department_id: str) -> DepartmentSummary | None:
    """Return the summary of the department with this id, or None if there is none."""
    if not department_id:
        raise InvalidInputError("您没有选择合适的ID")
    row = conn.execute(
        "SELECT departname, employeeID FROM department "
        "WHERE CAST(departmentID AS TEXT) = ? LIMIT 1",
        (department_id,),
    ).fetchone()
    if row is None:
        return None
    (count,) = conn.execute(
        "SELECT COUNT(*) FROM employee WHERE CAST(departmentID AS TEXT) = ?",
        (department_id,),
    ).fetchone()
    return DepartmentSummary(
        department_id=department_id,
        name=_text(row[0]),
        head_id=_text(row[1]),
        employee_count=count,
    )


def _assign_head(
    conn: sqlite3.Connection,
    report: OperationReport,
    department: int,
    head_text: str,
    not_number: str,
    failure: str,
) -> None:
    try:
        head = parse_int(head_text)
    except InvalidInputError:
        report.warnings.append(not_number)
        return
    if _run(conn, report, failure,
            "UPDATE department SET employeeID = ? WHERE departmentID = ?", (head, department)):
        _run(conn, report, _HEAD_PROFILE_FAILED,
             "UPDATE employee SET departmentID = ? WHERE employeeID = ?", (department, head))


def create_department(
    conn: sqlite3.Connection, department_id: str, name: str = "", head_id: str = ""
) -> OperationReport:
    """Create a department, optionally with a name and a head."""
    try:
        value = parse_int(department_id)
    except InvalidInputError as exc:
        raise InvalidInputError("输入的部门ID不是数字，创建失败！") from exc
    try:
        conn.execute("INSERT INTO department (departmentID) VALUES (?)", (value,))
    except sqlite3.Error as exc:
        raise DatabaseError("数据库错误，插入失败，请检查输入！") from exc

    report = OperationReport()
    if name:
        _run(conn, report, f"插入部门名失败，{_KEPT}",
             "UPDATE department SET departname = ? WHERE departmentID = ?", (name, value))
    if head_id:
        _assign_head(conn, report, value, head_id,
                     f"输入的部长ID不是数字，{_KEPT}", f"插入部长ID失败，{_KEPT}")
    return report


def remove_department(conn: sqlite3.Connection, department_id: str) -> OperationReport:
    """Delete the department with this id."""
    try:
        value = parse_int(department_id)
    except InvalidInputError as exc:
        raise InvalidInputError("输入的部门ID不是数字，移除失败！") from exc
    try:
        conn.execute("DELETE FROM department WHERE departmentID = ?", (value,))
    except sqlite3.Error as exc:
        raise DatabaseError("移除部门失败，请检查并更改") from exc
    return OperationReport()


def modify_department(
    conn: sqlite3.Connection, department_id: str, update: DepartmentUpdate
) -> OperationReport:
    """Apply the given changes to a department."""
    try:
        value = parse_int(department_id)
    except InvalidInputError as exc:
        raise InvalidInputError("输入的部门ID不是数字，修改失败！") from exc

    report = OperationReport()
    if update.clear_name:
        _run(conn, report, "修改部门名失败！",
             "UPDATE department SET departname = ? WHERE departmentID = ?", (None, value))
    elif update.name:
        _run(conn, report, "修改部门名失败！",
             "UPDATE department SET departname = ? WHERE departmentID = ?", (update.name, value))

    if update.clear_head:
        _run(conn, report, "修改部长ID失败！",
             "UPDATE department SET employeeID = ? WHERE departmentID = ?", (0, value))
    elif update.head_id:
        _assign_head(conn, report, value, update.head_id,
                     "输入的部长ID不是数字！", "修改部长ID失败！")
    return report
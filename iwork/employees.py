"""Creating, changing and removing employees."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field

from .db import DatabaseError, InvalidInputError, parse_int

DONE_MESSAGE = "操作完成！"
_KEPT = "但用户已创建，请检查输入后在用户修改中操作！"


@dataclass
class OperationReport:
    """Outcome of an operation that went through, with any partial failures."""

    warnings: list[str] = field(default_factory=list)
    message: str = DONE_MESSAGE

    @property
    def ok(self) -> bool:
        """True when every part of the operation succeeded."""
        return not self.warnings


@dataclass(frozen=True)
class NewEmployee:
    """Form input for a new employee; empty strings mean 'not given'."""

    employee_id: str
    name: str
    sex: str = ""
    enrollment_date: str = ""
    job: str = ""
    department_id: str = ""
    tech_level: str = ""
    manage_level: str = ""


@dataclass(frozen=True)
class EmployeeUpdate:
    """Form input for changing an employee; empty strings leave a field alone."""

    name: str = ""
    sex: str = ""
    enrollment_date: str = ""
    job: str = ""
    department_id: str = ""
    tech_level: str = ""
    manage_level: str = ""
    clear_enrollment_date: bool = False
    clear_job: bool = False
    clear_department: bool = False
    clear_tech_level: bool = False
    clear_manage_level: bool = False


def _run(conn: sqlite3.Connection, report: OperationReport, failure: str, sql: str, params) -> bool:
    """Execute one statement; on failure record ``failure`` and return False."""
    try:
        conn.execute(sql, params)
    except sqlite3.Error:
        report.warnings.append(failure)
        return False
    return True


def _parse_sex(text: str) -> bool:
    value = parse_int(text)
    if value not in (0, 1):
        raise InvalidInputError(f"sex must be 0 or 1: {text!r}")
    return value == 1


def add_employee(conn: sqlite3.Connection, employee: NewEmployee) -> OperationReport:
    """Insert a new employee and the optional details given with it."""
    try:
        employee_id = parse_int(employee.employee_id)
    except InvalidInputError:
        employee_id = None
    if employee_id is None or not employee.name:
        raise InvalidInputError("输入的用户ID不是数字，或用户名为空值，创建失败！")
    try:
        conn.execute(
            "INSERT INTO employee (employeeID, employname) VALUES (?, ?)",
            (employee_id, employee.name),
        )
    except sqlite3.Error as exc:
        raise DatabaseError("数据库错误，插入失败，请检查输入！") from exc

    report = OperationReport()
    if employee.sex:
        try:
            sex = _parse_sex(employee.sex)
        except InvalidInputError:
            report.warnings.append(f"输入的用户性别不合法，{_KEPT}")
        else:
            _run(conn, report, f"用户性别插入失败，{_KEPT}",
                 "UPDATE employee SET sex = ? WHERE employeeID = ?", (sex, employee_id))
    if employee.enrollment_date:
        _run(conn, report, f"插入入职时间失败，{_KEPT}",
             "UPDATE employee SET enrollmentdate = ? WHERE employeeID = ?",
             (employee.enrollment_date, employee_id))
    if employee.job:
        _run(conn, report, f"插入职务失败，{_KEPT}",
             "UPDATE employee SET job = ? WHERE employeeID = ?", (employee.job, employee_id))
    if employee.department_id:
        try:
            department = parse_int(employee.department_id)
        except InvalidInputError:
            report.warnings.append(f"输入的部门ID不是数字，{_KEPT}")
        else:
            _run(conn, report, f"用户部门ID插入失败，{_KEPT}",
                 "UPDATE employee SET departmentID = ? WHERE employeeID = ?",
                 (department, employee_id))
    if employee.tech_level:
        try:
            level = parse_int(employee.tech_level)
        except InvalidInputError:
            report.warnings.append(f"输入的技术职级不是数字，{_KEPT}")
        else:
            _run(conn, report, f"用户技术职级插入失败，{_KEPT}",
                 "INSERT INTO technicist (employeeID, techlevel) VALUES (?, ?)",
                 (employee_id, level))
    if employee.manage_level:
        try:
            level = parse_int(employee.manage_level)
        except InvalidInputError:
            report.warnings.append(f"输入的管理职级不是数字，{_KEPT}")
        else:
            _run(conn, report, f"用户管理职级插入失败，{_KEPT}",
                 "INSERT INTO management (employeeID, managelevel) VALUES (?, ?)",
                 (employee_id, level))
    return report


def delete_employee(conn: sqlite3.Connection, employee_id: str) -> OperationReport:
    """Delete the employee with this id."""
    try:
        value = parse_int(employee_id)
    except InvalidInputError as exc:
        raise InvalidInputError("输入的用户ID不是数字，删除失败！") from exc
    try:
        conn.execute("DELETE FROM employee WHERE employeeID = ?", (value,))
    except sqlite3.Error as exc:
        raise DatabaseError("删除失败，请检查并更改") from exc
    return OperationReport()


def _replace_level(
    conn: sqlite3.Connection,
    report: OperationReport,
    table: str,
    column: str,
    employee_id: int,
    text: str,
    not_number: str,
    failure: str,
) -> None:
    try:
        level = parse_int(text)
    except InvalidInputError:
        report.warnings.append(not_number)
        return
    try:
        conn.execute(f"DELETE FROM {table} WHERE employeeID = ?", (employee_id,))
    except sqlite3.Error:
        pass
    _run(conn, report, failure,
         f"INSERT INTO {table} (employeeID, {column}) VALUES (?, ?)", (employee_id, level))


def modify_employee(
    conn: sqlite3.Connection, employee_id: str, update: EmployeeUpdate
) -> OperationReport:
    """Apply the given changes to an employee."""
    try:
        value = parse_int(employee_id)
    except InvalidInputError as exc:
        raise InvalidInputError("输入的用户ID不是数字，修改失败！") from exc

    if update.name:
        try:
            conn.execute(
                "UPDATE employee SET employname = ? WHERE employeeID = ?", (update.name, value)
            )
        except sqlite3.Error as exc:
            raise DatabaseError("姓名修改失败，请检查输入！") from exc

    report = OperationReport()
    if update.sex:
        try:
            sex = _parse_sex(update.sex)
        except InvalidInputError:
            report.warnings.append("输入的用户性别不合法，修改失败！")
        else:
            _run(conn, report, "用户性别修改失败！",
                 "UPDATE employee SET sex = ? WHERE employeeID = ?", (sex, value))

    if update.clear_enrollment_date:
        _run(conn, report, "入职时间修改失败！",
             "UPDATE employee SET enrollmentdate = ? WHERE employeeID = ?", (None, value))
    elif update.enrollment_date:
        _run(conn, report, "入职时间修改失败！",
             "UPDATE employee SET enrollmentdate = ? WHERE employeeID = ?",
             (update.enrollment_date, value))

    if update.clear_job:
        _run(conn, report, "职务修改失败！",
             "UPDATE employee SET job = ? WHERE employeeID = ?", (None, value))
    elif update.job:
        _run(conn, report, "职务修改失败！",
             "UPDATE employee SET job = ? WHERE employeeID = ?", (update.job, value))

    if update.clear_department:
        _run(conn, report, "部门ID修改失败！",
             "UPDATE employee SET departmentID = ? WHERE employeeID = ?", (0, value))
    elif update.department_id:
        try:
            department = parse_int(update.department_id)
        except InvalidInputError:
            report.warnings.append("输入的部门ID不是数字！")
        else:
            _run(conn, report, "部门ID修改失败！",
                 "UPDATE employee SET departmentID = ? WHERE employeeID = ?",
                 (department, value))

    if update.clear_tech_level:
        _run(conn, report, "技术职级修改失败！",
             "DELETE FROM technicist WHERE employeeID = ?", (value,))
    elif update.tech_level:
        _replace_level(conn, report, "technicist", "techlevel", value, update.tech_level,
                       "输入的技术职级不是数字！", "用户技术职级修改失败！")

    if update.clear_manage_level:
        _run(conn, report, "管理职级修改失败！",
             "DELETE FROM management WHERE employeeID = ?", (value,))
    elif update.manage_level:
        _replace_level(conn, report, "management", "managelevel", value, update.manage_level,
                       "输入的管理职级不是数字！", "管理职级修改失败！")
    return report
"""Command line front end for the staff database."""

from __future__ import annotations

import argparse
import sys
from contextlib import closing

from .auth import Role, admin_hint, authenticate
from .db import IworkError, clock_text, connect
from .departments import (
    DepartmentUpdate,
    create_department,
    department_ids,
    department_summary,
    modify_department,
    remove_department,
)
from .employees import (
    EmployeeUpdate,
    NewEmployee,
    OperationReport,
    add_employee,
    delete_employee,
    modify_employee,
)
from .profile import employee_ids, load_profile

DEFAULT_DATABASE = "iwork.db"


def _print_report(report: OperationReport) -> int:
    for warning in report.warnings:
        print(warning, file=sys.stderr)
    print(report.message)
    return 0


def _print_profile(conn, employee_id: str) -> int:
    profile = load_profile(conn, employee_id)
    if profile is None:
        print(f"no employee with id {employee_id}", file=sys.stderr)
        return 1
    for label, value in (
        ("id", profile.employee_id),
        ("name", profile.name),
        ("enrollment date", profile.enrollment_date),
        ("sex", profile.sex),
        ("job", profile.job),
        ("department", profile.department_name),
        ("tech level", profile.tech_level),
        ("manage level", profile.manage_level),
    ):
        print(f"{label}: {value}")
    return 0


def _cmd_login(conn, args) -> int:
    role = Role(args.role)
    number = authenticate(conn, role, args.number, args.password)
    if role is Role.ADMIN:
        print("Iwork Admin")
        return 0
    print(f"Welcome: user {number}")
    return _print_profile(conn, number)


def _cmd_hint(args) -> int:
    print(admin_hint())
    return 0


def _cmd_clock(args) -> int:
    print(clock_text())
    return 0


def _cmd_employees(conn, args) -> int:
    for employee_id in employee_ids(conn):
        print(employee_id)
    return 0


def _cmd_employee(conn, args) -> int:
    return _print_profile(conn, args.id)


def _cmd_add_employee(conn, args) -> int:
    employee = NewEmployee(
        employee_id=args.id,
        name=args.name,
        sex=args.sex,
        enrollment_date=args.enrollment_date,
        job=args.job,
        department_id=args.department,
        tech_level=args.tech_level,
        manage_level=args.manage_level,
    )
    return _print_report(add_employee(conn, employee))


def _cmd_delete_employee(conn, args) -> int:
    return _print_report(delete_employee(conn, args.id))


def _cmd_modify_employee(conn, args) -> int:
    update = EmployeeUpdate(
        name=args.name,
        sex=args.sex,
        enrollment_date=args.enrollment_date,
        job=args.job,
        department_id=args.department,
        tech_level=args.tech_level,
        manage_level=args.manage_level,
        clear_enrollment_date=args.clear_enrollment_date,
        clear_job=args.clear_job,
        clear_department=args.clear_department,
        clear_tech_level=args.clear_tech_level,
        clear_manage_level=args.clear_manage_level,
    )
    return _print_report(modify_employee(conn, args.id, update))


def _cmd_departments(conn, args) -> int:
    for department_id in department_ids(conn):
        print(department_id)
    return 0


def _cmd_department(conn, args) -> int:
    summary = department_summary(conn, args.id)
    if summary is None:
        print(f"no department with id {args.id}", file=sys.stderr)
        return 1
    print(f"id: {summary.department_id}")
    print(f"name: {summary.name}")
    print(f"head: {summary.head_id}")
    print(f"employees: {summary.employee_count}")
    return 0


def _cmd_create_department(conn, args) -> int:
    return _print_report(create_department(conn, args.id, args.name, args.head))


def _cmd_remove_department(conn, args) -> int:
    return _print_report(remove_department(conn, args.id))


def _cmd_modify_department(conn, args) -> int:
    update = DepartmentUpdate(
        name=args.name,
        head_id=args.head,
        clear_name=args.clear_name,
        clear_head=args.clear_head,
    )
    return _print_report(modify_department(conn, args.id, update))


def _employee_fields(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--sex", default="", help="1 for male, 0 for female")
    parser.add_argument("--enrollment-date", default="")
    parser.add_argument("--job", default="")
    parser.add_argument("--department", default="")
    parser.add_argument("--tech-level", default="")
    parser.add_argument("--manage-level", default="")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="iwork", description="Staff and department records.")
    parser.add_argument("--database", default=DEFAULT_DATABASE, help="database file")
    commands = parser.add_subparsers(dest="command", required=True)

    login = commands.add_parser("login", help="check an account")
    login.add_argument("role", choices=[role.value for role in Role])
    login.add_argument("number")
    login.add_argument("password")
    login.set_defaults(handler=_cmd_login)

    commands.add_parser("hint", help="show the reserved admin account").set_defaults(
        plain=_cmd_hint
    )
    commands.add_parser("clock", help="show the current time").set_defaults(plain=_cmd_clock)

    commands.add_parser("employees", help="list employee ids").set_defaults(
        handler=_cmd_employees
    )
    show = commands.add_parser("employee", help="show an employee")
    show.add_argument("id")
    show.set_defaults(handler=_cmd_employee)

    add = commands.add_parser("add-employee", help="create an employee")
    add.add_argument("id")
    add.add_argument("name")
    _employee_fields(add)
    add.set_defaults(handler=_cmd_add_employee)

    delete = commands.add_parser("delete-employee", help="delete an employee")
    delete.add_argument("id")
    delete.set_defaults(handler=_cmd_delete_employee)

    modify = commands.add_parser("modify-employee", help="change an employee")
    modify.add_argument("id")
    modify.add_argument("--name", default="")
    _employee_fields(modify)
    for flag in ("enrollment-date", "job", "department", "tech-level", "manage-level"):
        modify.add_argument(f"--clear-{flag}", action="store_true")
    modify.set_defaults(handler=_cmd_modify_employee)

    commands.add_parser("departments", help="list department ids").set_defaults(
        handler=_cmd_departments
    )
    dep = commands.add_parser("department", help="show a department")
    dep.add_argument("id")
    dep.set_defaults(handler=_cmd_department)

    create = commands.add_parser("create-department", help="create a department")
    create.add_argument("id")
    create.add_argument("--name", default="")
    create.add_argument("--head", default="")
    create.set_defaults(handler=_cmd_create_department)

    remove = commands.add_parser("remove-department", help="remove a department")
    remove.add_argument("id")
    remove.set_defaults(handler=_cmd_remove_department)

    change = commands.add_parser("modify-department", help="change a department")
    change.add_argument("id")
    change.add_argument("--name", default="")
    change.add_argument("--head", default="")
    change.add_argument("--clear-name", action="store_true")
    change.add_argument("--clear-head", action="store_true")
    change.set_defaults(handler=_cmd_modify_department)
    return parser


def main(argv=None) -> int:
    """Run one command and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        plain = getattr(args, "plain", None)
        if plain is not None:
            return plain(args)
        with closing(connect(args.database)) as conn:
            return args.handler(conn, args)
    except IworkError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
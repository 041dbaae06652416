# iwork

A small personnel records tool. It keeps employees, departments, technical
levels and management levels in an SQLite database file and provides a
command line and a Python API for looking them up, adding, changing and
removing them. Messages shown to the user are in Chinese.

## Installing

    pip install .

To run the test suite as well:

    pip install ".[test]"
    pytest

## Running

Every invocation runs one command against one database file. The file is
`iwork.db` in the current directory unless `--database` is given before the
command; it is created, with its tables, if it does not exist.

    iwork --database staff.db employees

Commands:

| Command | What it does |
| --- | --- |
| `login {admin,user} NUMBER PASSWORD` | Check an account. The administrator account is fixed; employees sign in with their employee number and the password stored with them. An employee who signs in is greeted and shown their profile. |
| `hint` | Print the reserved administrator account. |
| `clock` | Print the current time as `yyyy-MM-dd hh:mm:ss`. |
| `employees` | List all employee ids. |
| `employee ID` | Show an employee's name, enrollment date, sex, job, department name, technical level and management level. |
| `add-employee ID NAME [options]` | Create an employee. Options: `--sex` (1 male, 0 female), `--enrollment-date`, `--job`, `--department`, `--tech-level`, `--manage-level`. |
| `modify-employee ID [options]` | Change an employee. Takes `--name` and the options above, plus `--clear-enrollment-date`, `--clear-job`, `--clear-department`, `--clear-tech-level` and `--clear-manage-level`. |
| `delete-employee ID` | Delete an employee. |
| `departments` | List all department ids. |
| `department ID` | Show a department's name, head and number of employees. |
| `create-department ID [--name NAME] [--head EMPLOYEE_ID]` | Create a department. Setting a head also moves that employee into the department. |
| `modify-department ID [--name NAME] [--head EMPLOYEE_ID] [--clear-name] [--clear-head]` | Change a department. |
| `remove-department ID` | Remove a department. |

Changes that go through print `操作完成！`; any optional field that could not
be stored is reported on standard error, and the rest of the change is kept.
Invalid input, a refused database operation, a failed login or an unknown id
give exit status 1 with the message on standard error.

## Using it as a library

    from iwork.db import connect
    from iwork.auth import Role, authenticate
    from iwork.profile import load_profile
    from iwork.departments import department_summary

    password = "password"
    conn = connect("staff.db")
    number = authenticate(conn, Role.USER, "1001", password)
    print(load_profile(conn, number))
    print(department_summary(conn, "10"))

- `iwork.db`: `connect`, `create_schema`, `parse_int` (signed 32-bit
  integers), `clock_text`, and the errors `IworkError`, `InvalidInputError`
  and `DatabaseError`.
- `iwork.auth`: `Role`, `authenticate` (returns the account number, raises
  `IworkError` when the login does not match) and `admin_hint`.
- `iwork.profile`: `employee_ids`, and `load_profile`, which returns an
  `EmployeeProfile` or `None`.
- `iwork.employees`: `add_employee`, `modify_employee` and `delete_employee`,
  taking `NewEmployee` and `EmployeeUpdate` values and returning an
  `OperationReport` whose `warnings` list the fields that could not be stored.
- `iwork.departments`: `department_ids`, `department_summary` (returns a
  `DepartmentSummary` or `None`), `create_department`, `modify_department`
  (taking a `DepartmentUpdate`) and `remove_department`.
- `iwork.cli`: `main`, the entry point of the `iwork` command.

## What it does not do

There are no windows or menus, and no sign-in session: `login` only checks an
account, and every other command runs without one. Data is kept only in a
local SQLite file; the package does not connect to a database server.
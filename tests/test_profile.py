import pytest

from iwork.db import InvalidInputError, connect
from iwork.profile import FEMALE, MALE, EmployeeProfile, employee_ids, load_profile


@pytest.fixture
def conn():
    connection = connect(":memory:")
    connection.execute(
        "INSERT INTO employee (employeeID, employname, sex, enrollmentdate, job, departmentID)"
        " VALUES (3, 'Chen', 1, '2020-05-01', 'engineer', 11)"
    )
    connection.execute("INSERT INTO employee (employeeID, employname, sex) VALUES (9, 'Zhao', 0)")
    connection.execute("INSERT INTO department (departmentID, departname) VALUES (11, 'Research')")
    connection.execute("INSERT INTO technicist (employeeID, techlevel) VALUES (3, 4)")
    connection.execute("INSERT INTO management (employeeID, managelevel) VALUES (3, 2)")
    return connection


def test_employee_ids_lists_all(conn):
    assert employee_ids(conn) == ["3", "9"]


def test_employee_ids_empty():
    assert employee_ids(connect(":memory:")) == []


def test_full_profile(conn):
    profile = load_profile(conn, "3")
    assert profile == EmployeeProfile(
        employee_id="3",
        name="Chen",
        enrollment_date="2020-05-01",
        sex=MALE,
        job="engineer",
        department_name="Research",
        tech_level="4",
        manage_level="2",
    )


def test_sparse_profile_has_blank_fields(conn):
    profile = load_profile(conn, "9")
    assert profile.sex == FEMALE
    assert (profile.enrollment_date, profile.job, profile.department_name) == ("", "", "")
    assert (profile.tech_level, profile.manage_level) == ("", "")


def test_loaded_sex_text_matches_source_labels(conn):
    assert load_profile(conn, "3").sex == "男"
    assert load_profile(conn, "9").sex == "女"


def test_null_sex_reads_as_female():
    connection = connect(":memory:")
    connection.execute("INSERT INTO employee (employeeID, employname) VALUES (1, 'Sun')")
    assert load_profile(connection, "1").sex == FEMALE


def test_unknown_department_gives_blank_name(conn):
    conn.execute("UPDATE employee SET departmentID = 77 WHERE employeeID = 9")
    assert load_profile(conn, "9").department_name == ""


def test_missing_employee_returns_none(conn):
    assert load_profile(conn, "404") is None


def test_empty_id_is_rejected(conn):
    with pytest.raises(InvalidInputError):
        load_profile(conn, "")


def test_every_listed_id_loads(conn):
    assert [load_profile(conn, eid).employee_id for eid in employee_ids(conn)] == employee_ids(conn)
import sqlite3
from datetime import datetime

import pytest

from iwork.db import (
    DatabaseError,
    InvalidInputError,
    IworkError,
    clock_text,
    connect,
    create_schema,
    parse_int,
)


def _tables(conn):
    rows = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
    return {row[0] for row in rows}


def test_connect_creates_all_tables():
    conn = connect(":memory:")
    assert _tables(conn) == {"employee", "department", "technicist", "management"}


def test_create_schema_is_idempotent():
    conn = connect(":memory:")
    conn.execute("INSERT INTO employee (employeeID, employname) VALUES (5, 'Li')")
    create_schema(conn)
    assert conn.execute("SELECT employname FROM employee").fetchone()[0] == "Li"


def test_connect_persists_to_file(tmp_path):
    path = tmp_path / "iwork.db"
    conn = connect(path)
    conn.execute("INSERT INTO department (departmentID, departname) VALUES (3, 'R&D')")
    conn.close()
    again = connect(path)
    assert again.execute("SELECT departname FROM department").fetchone()["departname"] == "R&D"


def test_connect_to_directory_fails(tmp_path):
    with pytest.raises(DatabaseError):
        connect(tmp_path)


def test_error_hierarchy():
    with pytest.raises(IworkError):
        parse_int("x")
    assert issubclass(DatabaseError, IworkError)


@pytest.mark.parametrize("text", ["42", "-7", "+15", "0"])
def test_parse_int_valid(text):
    assert parse_int(text) == int(text)


def test_parse_int_ignores_surrounding_whitespace():
    assert parse_int("  12 ") == 12


@pytest.mark.parametrize("text", ["", "abc", "1.5", "12a", "- 3", "2147483648", "-2147483649"])
def test_parse_int_rejects(text):
    with pytest.raises(InvalidInputError):
        parse_int(text)


@pytest.mark.parametrize("value", [-(2**31), 2**31 - 1, 10000])
def test_parse_int_round_trip(value):
    assert parse_int(str(value)) == value


def test_clock_text_format():
    assert clock_text(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02 03:04:05"


def test_clock_text_now_parses_back():
    text = clock_text()
    assert clock_text(datetime.strptime(text, "%Y-%m-%d %H:%M:%S")) == text


def test_connection_rows_are_mappings():
    conn = connect(":memory:")
    conn.execute("INSERT INTO employee (employeeID, employname) VALUES (1, 'Wang')")
    row = conn.execute("SELECT * FROM employee").fetchone()
    assert isinstance(conn, sqlite3.Connection)
    assert row["employname"] == "Wang"
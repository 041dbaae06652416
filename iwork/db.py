"""Database access, shared errors and small input helpers."""

from __future__ import annotations

import re
import sqlite3
from datetime import datetime

_INT_PATTERN = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_SCHEMA = """
CREATE TABLE IF NOT EXISTS employee (
    employeeID INTEGER PRIMARY KEY,
    employname TEXT NOT NULL,
    pwd TEXT,
    sex BOOLEAN,
    enrollmentdate TEXT,
    job TEXT,
    departmentID INTEGER
);
CREATE TABLE IF NOT EXISTS department (
    departmentID INTEGER PRIMARY KEY,
    departname TEXT,
    employeeID INTEGER
);
CREATE TABLE IF NOT EXISTS technicist (
    employeeID INTEGER PRIMARY KEY,
    techlevel INTEGER
);
CREATE TABLE IF NOT EXISTS management (
    employeeID INTEGER PRIMARY KEY,
    managelevel INTEGER
);
"""


class IworkError(Exception):
    """Base class for every error the package raises."""


class InvalidInputError(IworkError):
    """Raised when user input cannot be accepted."""


class DatabaseError(IworkError):
    """Raised when the database refuses an operation."""


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the employee, department, technicist and management tables."""
    try:
        conn.executescript(_SCHEMA)
    except sqlite3.Error as exc:
        raise DatabaseError(f"数据库错误: {exc}") from exc


def connect(path) -> sqlite3.Connection:
    """Open the database at ``path`` and make sure its tables exist."""
    try:
        conn = sqlite3.connect(str(path), isolation_level=None)
    except sqlite3.Error as exc:
        raise DatabaseError(f"数据库连接失败！ {exc}") from exc
    conn.row_factory = sqlite3.Row
    try:
        create_schema(conn)
    except DatabaseError:
        conn.close()
        raise
    return conn


def parse_int(text: str) -> int:
    """Parse a signed 32-bit decimal integer, surrounding whitespace allowed."""
    stripped = text.strip()
    if not _INT_PATTERN.fullmatch(stripped):
        raise InvalidInputError(f"not a number: {text!r}")
    value = int(stripped)
    if not _INT_MIN <= value <= _INT_MAX:
        raise InvalidInputError(f"number out of range: {text!r}")
    return value


def clock_text(moment: datetime | None = None) -> str:
    """Format a moment (now by default) as ``yyyy-MM-dd hh:mm:ss``."""
    if moment is None:
        moment = datetime.now()
    return moment.strftime("%Y-%m-%d %H:%M:%S")
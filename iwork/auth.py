"""Login checks for administrators and ordinary employees."""

from __future__ import annotations

import enum
import sqlite3

from .db import InvalidInputError, IworkError, parse_int

_ADMIN_ACCOUNT = "10000"


class Role(enum.Enum):
    """The kind of account a login attempt is for."""

    ADMIN = "admin"
    USER = "user"


def admin_hint() -> str:
    """Return the text describing the reserved administrator account."""
    return f"工号：{_ADMIN_ACCOUNT}\n密码：{_ADMIN_ACCOUNT}"


def _as_int(value) -> int:
    if value is None:
        return 0
    try:
        return parse_int(str(value))
    except InvalidInputError:
        return 0


def _as_text(value) -> str:
    return "" if value is None else str(value)


def authenticate(conn: sqlite3.Connection, role: Role, number: str, password: str) -> str:
    """Check a login and return the account number on success.

    Raises IworkError when the number and password do not match.
    """
    if role is Role.ADMIN:
        if number == _ADMIN_ACCOUNT and password == _ADMIN_ACCOUNT:
            return number
        raise IworkError(
            "用户名或密码错误: 请检查后重新输入！(您正在尝试管理员用户登录，请确认您的登录类型）"
        )
    if role is Role.USER:
        wanted = _as_int(number)
        rows = conn.execute("SELECT employeeID, pwd FROM employee")
        if any(
            _as_int(row[0]) == wanted and _as_text(row[1]) == password for row in rows
        ):
            return number
        raise IworkError(
            "用户名或密码错误: 请检查后重新输入！(您正在尝试普通用户登录，请确认您的登录类型）"
        )
    raise InvalidInputError(f"unknown role: {role!r}")
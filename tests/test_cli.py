import re

import pytest

from iwork.cli import main
from iwork.db import connect


@pytest.fixture
def database(tmp_path):
    return str(tmp_path / "staff.db")


def _run(database, *args):
    return main(["--database", database, *args])


def test_hint_prints_admin_account(capsys):
    assert main(["hint"]) == 0
    assert capsys.readouterr().out == "工号：10000\n密码：10000\n"


def test_clock_prints_formatted_time(capsys):
    assert main(["clock"]) == 0
    out = capsys.readouterr().out.strip()
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", out)


def test_admin_login(database, capsys):
    assert _run(database, "login", "admin", "10000", "10000") == 0
    assert capsys.readouterr().out == "Iwork Admin\n"


def test_admin_login_wrong_password_fails(database, capsys):
    assert _run(database, "login", "admin", "10000", "secret") == 1
    assert "管理员用户登录" in capsys.readouterr().err


def test_user_login_shows_profile(database, capsys):
    password = "password"
    with connect(database) as conn:
        conn.execute(
            "INSERT INTO employee (employeeID, employname, pwd, sex) VALUES (?, ?, ?, ?)",
            (7, "Chen", password, 1),
        )
    conn.close()
    assert _run(database, "login", "user", "7", password) == 0
    out = capsys.readouterr().out
    assert out.startswith("Welcome: user 7\n")
    assert "name: Chen" in out
    assert "sex: 男" in out


def test_department_lifecycle(database, capsys):
    assert _run(database, "create-department", "5", "--name", "Sales") == 0
    assert "操作完成！" in capsys.readouterr().out
    assert _run(database, "departments") == 0
    assert capsys.readouterr().out == "5\n"
    assert _run(database, "department", "5") == 0
    assert "name: Sales" in capsys.readouterr().out
    assert _run(database, "modify-department", "5", "--clear-name") == 0
    capsys.readouterr()
    assert _run(database, "department", "5") == 0
    assert "name: \n" in capsys.readouterr().out
    assert _run(database, "remove-department", "5") == 0
    capsys.readouterr()
    assert _run(database, "department", "5") == 1


def test_create_department_invalid_id(database, capsys):
    assert _run(database, "create-department", "five") == 1
    assert "创建失败" in capsys.readouterr().err


def test_employee_commands(database, capsys):
    assert _run(database, "add-employee", "12", "Liu", "--job", "Engineer") == 0
    capsys.readouterr()
    assert _run(database, "employees") == 0
    assert capsys.readouterr().out == "12\n"
    assert _run(database, "modify-employee", "12", "--name", "Liu Yang") == 0
    capsys.readouterr()
    assert _run(database, "employee", "12") == 0
    out = capsys.readouterr().out
    assert "name: Liu Yang" in out
    assert "job: Engineer" in out
    assert _run(database, "delete-employee", "12") == 0
    capsys.readouterr()
    assert _run(database, "employee", "12") == 1


def test_warnings_go_to_stderr(database, capsys):
    assert _run(database, "add-employee", "3", "Sun", "--sex", "2") == 0
    captured = capsys.readouterr()
    assert "操作完成！" in captured.out
    assert "用户性别不合法" in captured.err


def test_missing_command_is_rejected():
    with pytest.raises(SystemExit):
        main([])
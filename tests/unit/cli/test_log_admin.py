import json

import pytest
from typer.testing import CliRunner

from repolog.cli.log_admin import app as log_admin_app

runner = CliRunner()


def test_levels_command():
    result = runner.invoke(log_admin_app, ["levels"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 7
    assert lines[0].split() == ["CRITICAL", "C", "-"]
    assert lines[-1].split() == ["TRACE", "T", "5"]


@pytest.mark.parametrize("value,name", [("D", "DEBUG"), ("0", "ERROR"), ("NOTICE", "NOTICE")])
def test_level_command(value, name):
    result = runner.invoke(log_admin_app, ["level", value])
    assert result.exit_code == 0
    assert result.output.strip() == name


def test_level_command_invalid():
    result = runner.invoke(log_admin_app, ["level", "bogus"])
    assert result.exit_code == 2
    assert "bogus" in result.output


def test_check_command():
    result = runner.invoke(log_admin_app, ["check", "*=ERROR,b=DEBUG"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"*": "ERROR", "b": "DEBUG"}


def test_check_command_invalid():
    result = runner.invoke(log_admin_app, ["check", "a=INFO=extra"])
    assert result.exit_code == 2
    assert "a=INFO=extra" in result.output

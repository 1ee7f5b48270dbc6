"""Unit tests for svcreinstall.cli."""

import io
import json
import os
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from svcreinstall.cli import main
from svcreinstall.cli._create_app import _create_app
from svcreinstall.constants import DEFAULT_INSTALLER_DIR

runner = CliRunner()


def run_cli(args):
    """Execute CLI command and capture stdout/stderr."""
    out_buf = io.StringIO()
    err_buf = io.StringIO()
    with redirect_stdout(out_buf), redirect_stderr(err_buf):
        rc = main(args)
    return rc, out_buf.getvalue(), err_buf.getvalue()


@patch("svcreinstall.cli.reinstall._handle_stage_result")
def test_reinstall_defaults(mock_handle_stage_result):
    mock_executor = MagicMock()
    mock_handle_stage_result.return_value = mock_executor

    result = runner.invoke(_create_app(), ["reinstall", "C:/svc/Foo.exe"])

    assert result.exit_code == 0
    mock_executor.assert_called_once_with(
        service_path=Path("C:/svc/Foo.exe"),
        service_name=None,
        dotnet_path=DEFAULT_INSTALLER_DIR,
        start_after_install=True,
        wait_time=5,
    )


@patch("svcreinstall.cli.reinstall._handle_stage_result")
def test_reinstall_all_options(mock_handle_stage_result):
    mock_executor = MagicMock()
    mock_handle_stage_result.return_value = mock_executor

    result = runner.invoke(
        _create_app(),
        [
            "reinstall",
            "C:/svc/Foo.exe",
            "--service-name",
            "FooSvc",
            "--dotnet-path",
            "D:/net",
            "--no-start-after-install",
            "--wait-time",
            "10",
        ],
    )

    assert result.exit_code == 0
    mock_executor.assert_called_once_with(
        service_path=Path("C:/svc/Foo.exe"),
        service_name="FooSvc",
        dotnet_path=Path("D:/net"),
        start_after_install=False,
        wait_time=10,
    )


def test_reinstall_requires_path():
    rc, _out, err = run_cli(["reinstall"])
    assert rc == 1
    assert "Usage error" in err


def test_reinstall_rejects_negative_wait_time():
    rc, _out, err = run_cli(["reinstall", "Foo.exe", "--wait-time", "-1"])
    assert rc == 1
    assert "Usage error" in err


@patch("svcreinstall.cli.service._handle_stage_result")
def test_find(mock_handle_stage_result):
    mock_executor = MagicMock()
    mock_handle_stage_result.return_value = mock_executor

    result = runner.invoke(_create_app(), ["find", "Foo"])

    assert result.exit_code == 0
    mock_executor.assert_called_once_with(name="Foo")


def test_invalid_display_format():
    result = runner.invoke(_create_app(), ["--display", "xml", "find", "Foo"])
    assert result.exit_code == 1
    assert "--display must be 'json' or 'yaml'" in result.output


def test_main_version():
    rc, out, _err = run_cli(["--version"])
    assert rc == 0
    assert out.startswith("svcreinstall ")


def test_main_without_command_shows_help():
    rc, out, _err = run_cli([])
    assert rc == 0
    assert "reinstall" in out


def test_main_usage_error():
    rc, _out, err = run_cli(["no-such-command"])
    assert rc == 1
    assert "Usage error" in err


@pytest.mark.skipif(os.name == "nt", reason="elevation check passes on an elevated Windows shell")
def test_main_reinstall_fails_without_elevation(tmp_path):
    rc, out, err = run_cli(["--display", "json", "reinstall", str(tmp_path / "Foo.exe"), "--wait-time", "0"])

    assert rc == 1
    output = json.loads(out)
    assert output["state"] == "failed"
    assert output["exit_code"] == 1
    assert output["phases"] == []
    assert "Administrator privileges are required" in output["errors"][0]
    assert "Reinstall failed" in err


@pytest.mark.skipif(os.name == "nt", reason="service manager is available on Windows")
def test_main_find_off_windows_reports_error():
    rc, out, _err = run_cli(["find", "Foo"])

    assert rc == 1
    assert "Unsupported operating system" in out


def test_main_invalid_display_format():
    rc, _out, err = run_cli(["--display", "xml", "find", "Foo"])
    assert rc == 1
    assert "--display must be 'json' or 'yaml'" in err


def test_main_help():
    rc, out, _err = run_cli(["--help"])
    assert rc == 0
    assert "find" in out

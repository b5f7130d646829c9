"""Build-agent host adapter: inputs, tool lookup and logging commands."""

from __future__ import annotations

import io
import os
from pathlib import Path

import pytest

from npm_task.adapters.agent_host import AgentHost, escape_data, format_command, input_variable
from npm_task.domain import ConfigurationError, ResolutionError, TaskResult, WorkspaceError


def _host(env: dict) -> tuple[AgentHost, io.StringIO]:
    stream = io.StringIO()
    return AgentHost(env, stream=stream), stream


def test_input_variable_names() -> None:
    assert input_variable("cwd") == "INPUT_CWD"
    assert input_variable("npm args") == "INPUT_NPM_ARGS"


def test_get_input_reads_environment() -> None:
    host, stream = _host({"INPUT_COMMAND": " install "})
    assert host.get_input("command", required=True) == "install"
    assert "##vso[task.debug]command=install" in stream.getvalue()


def test_missing_optional_input_is_none() -> None:
    host, _ = _host({"INPUT_ARGUMENTS": "   "})
    assert host.get_input("arguments") is None


def test_missing_required_input_raises() -> None:
    host, _ = _host({})
    with pytest.raises(ConfigurationError, match="Input required: command"):
        host.get_input("command", required=True)


def test_get_path_input(tmp_path: Path) -> None:
    host, _ = _host({"INPUT_CWD": str(tmp_path / "proj")})
    assert host.get_path_input("cwd", required=True) == tmp_path / "proj"
    with pytest.raises(ConfigurationError, match="Not found cwd"):
        host.get_path_input("cwd", required=True, check=True)


def test_which_uses_host_path(fake_npm_bin: Path) -> None:
    host, _ = _host({"PATH": str(fake_npm_bin)})
    assert host.which("npm") == str(fake_npm_bin / "npm")


def test_which_required_raises_resolution_error(tmp_path: Path) -> None:
    host, _ = _host({"PATH": str(tmp_path)})
    assert host.which("npm") is None
    with pytest.raises(ResolutionError, match="npm"):
        host.which("npm", required=True)


def test_mkdir_p_and_cd(tmp_path: Path) -> None:
    host, _ = _host({})
    target = tmp_path / "a" / "b"
    host.mkdir_p(target)
    host.mkdir_p(target)
    host.cd(target)
    assert Path(os.getcwd()).resolve() == target.resolve()


def test_mkdir_p_failure_is_workspace_error(tmp_path: Path) -> None:
    blocker = tmp_path / "file.txt"
    blocker.write_text("x", encoding="utf-8")
    host, _ = _host({})
    with pytest.raises(WorkspaceError, match="Unable to create directory"):
        host.mkdir_p(blocker / "sub")
    with pytest.raises(WorkspaceError, match="Unable to change to directory"):
        host.cd(tmp_path / "missing")


def test_set_result_success() -> None:
    host, stream = _host({})
    host.set_result(TaskResult.SUCCEEDED, "npm return code: 0")
    assert stream.getvalue() == "##vso[task.complete result=Succeeded;]npm return code: 0\n"
    assert host.result is TaskResult.SUCCEEDED


def test_set_result_failure_logs_issue() -> None:
    host, stream = _host({})
    host.set_result(TaskResult.FAILED, "bad\nthing 100%")
    lines = stream.getvalue().splitlines()
    assert lines == [
        "##vso[task.issue type=error;]bad%0Athing 100%AZP25",
        "##vso[task.complete result=Failed;]bad%0Athing 100%AZP25",
    ]


def test_escaping() -> None:
    assert escape_data("a\r\nb") == "a%0D%0Ab"
    assert format_command("task.setvariable", {"variable": "x;y]"}, "v") == "##vso[task.setvariable variable=x%3By%5D;]v"


def test_invalid_path_is_workspace_error(tmp_path: Path) -> None:
    host, _ = _host({})
    bad = tmp_path / "a\x00b"
    with pytest.raises(WorkspaceError, match="Unable to create directory"):
        host.mkdir_p(bad)
    with pytest.raises(WorkspaceError, match="Unable to change to directory"):
        host.cd(bad)

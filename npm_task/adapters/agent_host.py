"""Build-agent host: task inputs from the environment, results as logging commands."""
from __future__ import annotations

import logging
import os
import shutil
import sys
from pathlib import Path
from typing import Mapping, Optional, TextIO

from ..domain.errors import ConfigurationError, ResolutionError, WorkspaceError
from ..domain.inputs import TaskResult
from ..messages import MessageCatalog

LOG = logging.getLogger("npm_task.agent_host")


def escape_data(value: str) -> str:
    return value.replace("%", "%AZP25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace("]", "%5D").replace(";", "%3B")


def format_command(command: str, properties: Mapping[str, str], message: str) -> str:
    props = ";".join(f"{key}={escape_property(value)}" for key, value in properties.items())
    if props:
        props += ";"
    suffix = f" {props}" if props else ""
    return f"##vso[{command}{suffix}]{escape_data(message)}"


def input_variable(name: str) -> str:
    return "INPUT_" + name.replace(" ", "_").upper()


class AgentHost:
    """Reads ``INPUT_<NAME>`` variables and writes ``##vso[...]`` commands to stdout."""

    def __init__(
        self,
        env: Optional[Mapping[str, str]] = None,
        *,
        stream: Optional[TextIO] = None,
        messages: Optional[MessageCatalog] = None,
    ) -> None:
        self.env = dict(os.environ if env is None else env)
        self.stream = stream
        self.messages = messages or MessageCatalog()
        self.result: Optional[TaskResult] = None

    def get_input(self, name: str, required: bool = False) -> Optional[str]:
        value = self.env.get(input_variable(name), "").strip()
        if not value:
            if required:
                raise ConfigurationError(self.messages.loc("LIB_InputRequired", name))
            value = None
        self.debug(f"{name}={value}")
        return value

    def get_path_input(
        self,
        name: str,
        required: bool = False,
        check: bool = False,
    ) -> Optional[Path]:
        value = self.get_input(name, required)
        if value is None:
            return None
        path = Path(value)
        if check and not path.exists():
            raise ConfigurationError(f"Not found {name}: {path}")
        return path

    def which(self, tool: str, required: bool = False) -> Optional[str]:
        found = shutil.which(tool, path=self.env.get("PATH"))
        if found is None and required:
            raise ResolutionError(tool)
        self.debug(f"which {tool}: {found}")
        return found

    def mkdir_p(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as exc:
            raise WorkspaceError(self.messages.loc("LIB_MkdirFailed", str(path), exc)) from exc

    def cd(self, path: Path) -> None:
        try:
            os.chdir(path)
        except (OSError, ValueError) as exc:
            raise WorkspaceError(self.messages.loc("LIB_CdFailed", str(path), exc)) from exc
        self.debug(f"cd {path}")

    def debug(self, message: str) -> None:
        LOG.debug(message)
        self._emit(format_command("task.debug", {}, message))

    def set_result(self, result: TaskResult, message: str) -> None:
        self.result = result
        if result is TaskResult.FAILED:
            self._emit(format_command("task.issue", {"type": "error"}, message))
        self._emit(format_command("task.complete", {"result": result.value}, message))

    def _emit(self, line: str) -> None:
        stream = self.stream or sys.stdout
        stream.write(line + "\n")
        stream.flush()

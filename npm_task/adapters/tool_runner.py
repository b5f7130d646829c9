from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import Mapping, Optional, Sequence, TextIO

from ..domain.errors import ExecutionError
from ..ports.runner import ProcessResult, ProcessRunnerPort

LOG = logging.getLogger("npm_task.tool_runner")

STDERR_TAIL = 2000


def display_command(argv: Sequence[str]) -> str:
    parts = []
    for arg in argv:
        text = str(arg)
        if not text or any(ch.isspace() for ch in text):
            text = f'"{text}"'
        parts.append(text)
    return " ".join(parts)


class ToolRunner(ProcessRunnerPort):
    """Runs the tool as a child process.

    stdout is inherited so output streams straight to the build log; stderr is
    forwarded line by line and also kept for the failure message.
    """

    def __init__(
        self,
        *,
        env: Optional[Mapping[str, str]] = None,
        echo: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        stderr_limit: int = STDERR_TAIL,
    ) -> None:
        self.env = dict(env) if env is not None else None
        self.echo = echo
        self.stderr = stderr
        self.stderr_limit = stderr_limit

    def run(self, argv: Sequence[str], cwd: Path) -> ProcessResult:
        command = [str(arg) for arg in argv]
        if not command:
            raise ExecutionError("empty command provided")
        echo = self.echo or sys.stdout
        echo.write(f"[command]{display_command(command)}\n")
        echo.flush()

        env = os.environ.copy() if self.env is None else dict(self.env)
        try:
            process = subprocess.Popen(
                command,
                cwd=str(cwd),
                env=env,
                stdout=None,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except (OSError, ValueError) as exc:
            raise ExecutionError(f"failed to start {command[0]}: {exc}") from exc

        if process.stderr is None:
            process.kill()
            process.wait()
            raise ExecutionError(f"no stderr pipe for {command[0]}")

        tail = ""
        sink = self.stderr or sys.stderr
        with process.stderr:
            for line in process.stderr:
                tail = (tail + line)[-self.stderr_limit:]
                sink.write(line)
        exit_code = process.wait()
        LOG.debug("%s exited with %s", command[0], exit_code)
        return ProcessResult(argv=command, exit_code=exit_code, stderr=tail)

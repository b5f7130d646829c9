from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import List, Optional, Union

from ..config import TaskConfig
from ..domain.errors import (
    ConfigurationError,
    ExecutionError,
    ResolutionError,
    TaskError,
)
from ..domain.inputs import ExitOutcome, TaskInputs, TaskResult
from ..messages import MessageCatalog
from ..ports.host import TaskHostPort
from ..ports.runner import ProcessResult, ProcessRunnerPort

LOG = logging.getLogger("npm_task.service")

STDERR_TAIL = 2000


def _tail(text: str, limit: int = STDERR_TAIL) -> str:
    text = (text or "").strip()
    return text if len(text) <= limit else text[-limit:]


class NpmTaskService:
    """Runs a single npm command for the build host and reports the outcome."""

    def __init__(
        self,
        host: TaskHostPort,
        runner: ProcessRunnerPort,
        config: Optional[TaskConfig] = None,
    ) -> None:
        self.host = host
        self.runner = runner
        self.config = config or TaskConfig()
        self.messages = MessageCatalog(self.config.messages)

    def run_from_host(self) -> ExitOutcome:
        try:
            working_directory = self.host.get_path_input("cwd", required=True, check=False)
            command = self.host.get_input("command", required=True)
            arguments = self.host.get_input("arguments", required=False)
        except ConfigurationError as err:
            return self._report(self._failure(err))
        return self.run(working_directory, command, arguments)

    def run(
        self,
        working_directory: Union[str, Path, None],
        command: Optional[str],
        arguments: Optional[str] = None,
    ) -> ExitOutcome:
        try:
            inputs = TaskInputs.build(working_directory, command, arguments)
            outcome = self._execute(inputs)
        except TaskError as err:
            outcome = self._failure(err)
        return self._report(outcome)

    def argument_tokens(self, inputs: TaskInputs) -> List[str]:
        if not inputs.arguments:
            return []
        if not self.config.split_arguments:
            return [inputs.arguments]
        try:
            return shlex.split(inputs.arguments)
        except ValueError as exc:
            raise ConfigurationError(f"invalid arguments {inputs.arguments!r}: {exc}") from exc

    def _execute(self, inputs: TaskInputs) -> ExitOutcome:
        extra = self.argument_tokens(inputs)
        tool_path = self.host.which(self.config.tool, required=True)
        if not tool_path:
            raise ResolutionError(self.config.tool)

        self.host.mkdir_p(inputs.working_directory)
        self.host.cd(inputs.working_directory)

        argv = [tool_path, inputs.command, *extra]
        LOG.info("running %s in %s", argv, inputs.working_directory)
        result = self.runner.run(argv, inputs.working_directory)
        if result.exit_code != 0:
            raise ExecutionError(
                self._failure_text(tool_path, result),
                exit_code=result.exit_code,
                stderr=result.stderr,
            )
        return ExitOutcome(
            result=TaskResult.SUCCEEDED,
            message=self.messages.loc("NpmReturnCode", result.exit_code),
            exit_code=result.exit_code,
        )

    def _failure_text(self, tool_path: str, result: ProcessResult) -> str:
        text = self.messages.loc("NpmReturnCodeFailed", tool_path, result.exit_code)
        stderr = _tail(result.stderr)
        if stderr:
            text = f"{text}\n{stderr}"
        return text

    def _failure(self, err: TaskError) -> ExitOutcome:
        LOG.error("npm task failed: %s", err)
        if isinstance(err, ExecutionError):
            self.host.debug("taskRunner fail")
        return ExitOutcome(
            result=TaskResult.FAILED,
            message=self.messages.loc("NpmFailed", str(err) or type(err).__name__),
            exit_code=getattr(err, "exit_code", None),
            error=err,
        )

    def _report(self, outcome: ExitOutcome) -> ExitOutcome:
        self.host.set_result(outcome.result, outcome.message)
        return outcome

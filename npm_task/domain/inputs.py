from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .errors import ConfigurationError, TaskError


class TaskResult(str, Enum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


@dataclass(frozen=True)
class TaskInputs:
    """Validated inputs for a single npm invocation."""

    working_directory: Path
    command: str
    arguments: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.working_directory, Path):
            raise TypeError("working_directory must be a pathlib.Path instance")
        if not str(self.working_directory).strip():
            raise ConfigurationError("Input required: cwd")
        command = self.command.strip()
        if not command:
            raise ConfigurationError("Input required: command")
        object.__setattr__(self, "command", command)
        # passed through verbatim; whitespace-only counts as absent
        arguments = self.arguments or ""
        object.__setattr__(self, "arguments", arguments if arguments.strip() else "")

    @classmethod
    def build(
        cls,
        working_directory: Union[str, Path, None],
        command: Optional[str],
        arguments: Optional[str] = None,
    ) -> "TaskInputs":
        if working_directory is None or not str(working_directory).strip():
            raise ConfigurationError("Input required: cwd")
        if command is None:
            raise ConfigurationError("Input required: command")
        return cls(Path(working_directory), command, arguments or "")


@dataclass(frozen=True)
class ExitOutcome:
    """What the task reports back to its host."""

    result: TaskResult
    message: str
    exit_code: Optional[int] = None
    error: Optional[TaskError] = None

    def __post_init__(self) -> None:
        if not self.message.strip():
            raise ValueError("message cannot be empty")

    @property
    def succeeded(self) -> bool:
        return self.result is TaskResult.SUCCEEDED

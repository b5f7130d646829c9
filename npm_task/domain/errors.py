from __future__ import annotations

from typing import Optional


class TaskError(RuntimeError):
    """Base class for failures that end a task invocation."""


class ConfigurationError(TaskError):
    """Raised when a required task input is missing or malformed."""


class ResolutionError(TaskError):
    """Raised when the tool executable cannot be located on PATH."""

    def __init__(self, tool: str) -> None:
        super().__init__(f"Unable to locate executable file: '{tool}'")
        self.tool = tool


class WorkspaceError(TaskError):
    """Raised when the working directory cannot be created or entered."""


class ExecutionError(TaskError):
    """Raised when the child process cannot start or exits non-zero."""

    def __init__(
        self,
        message: str,
        *,
        exit_code: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.stderr = stderr

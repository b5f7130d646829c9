"""Domain objects for the npm task."""

from .errors import (
    ConfigurationError,
    ExecutionError,
    ResolutionError,
    TaskError,
    WorkspaceError,
)
from .inputs import ExitOutcome, TaskInputs, TaskResult

__all__ = [
    "ConfigurationError",
    "ExecutionError",
    "ExitOutcome",
    "ResolutionError",
    "TaskError",
    "TaskInputs",
    "TaskResult",
    "WorkspaceError",
]

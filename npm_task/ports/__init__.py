"""Ports for the npm task."""

from .host import TaskHostPort
from .runner import ProcessResult, ProcessRunnerPort

__all__ = [
    "ProcessResult",
    "ProcessRunnerPort",
    "TaskHostPort",
]

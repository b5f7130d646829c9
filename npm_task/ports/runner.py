from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence


@dataclass(frozen=True)
class ProcessResult:
    argv: Sequence[str]
    exit_code: int
    stderr: str = ""


class ProcessRunnerPort(ABC):
    """Port for running one child process to completion."""

    @abstractmethod
    def run(self, argv: Sequence[str], cwd: Path) -> ProcessResult:
        """Runs ``argv`` in ``cwd`` and returns once the process has exited.

        Raises ExecutionError when the process cannot be started.
        """

"""Host capability the task depends on."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol

from ..domain.inputs import TaskResult


class TaskHostPort(Protocol):
    """Inputs, filesystem helpers and result reporting provided by the build host."""

    def get_input(self, name: str, required: bool = False) -> Optional[str]:
        ...

    def get_path_input(
        self,
        name: str,
        required: bool = False,
        check: bool = False,
    ) -> Optional[Path]:
        ...

    def which(self, tool: str, required: bool = False) -> Optional[str]:
        ...

    def mkdir_p(self, path: Path) -> None:
        ...

    def cd(self, path: Path) -> None:
        ...

    def debug(self, message: str) -> None:
        ...

    def set_result(self, result: TaskResult, message: str) -> None:
        ...

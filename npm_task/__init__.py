"""Build task that runs an npm command in a working directory."""

from .app.service import NpmTaskService
from .config import TaskConfig, load_config
from .domain import ExitOutcome, TaskInputs, TaskResult

__all__ = [
    "ExitOutcome",
    "NpmTaskService",
    "TaskConfig",
    "TaskInputs",
    "TaskResult",
    "load_config",
]

__version__ = "0.1.0"

"""Adapters binding the npm task to the build agent and the OS."""

from .agent_host import AgentHost
from .tool_runner import ToolRunner

__all__ = [
    "AgentHost",
    "ToolRunner",
]

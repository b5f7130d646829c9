from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, Optional

from .adapters.agent_host import AgentHost, input_variable
from .adapters.tool_runner import ToolRunner
from .app.service import NpmTaskService
from .config import DEFAULT_CONFIG_NAME, load_config
from .domain.errors import ConfigurationError
from .domain.inputs import TaskResult
from .messages import MessageCatalog

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _default_log_level() -> str:
    if os.getenv("SYSTEM_DEBUG", "").strip().lower() == "true":
        return "DEBUG"
    level = os.getenv("NPM_TASK_LOG_LEVEL", "WARNING").upper()
    return level if level in LOG_LEVELS else "WARNING"


def run_cli(argv: Optional[Iterable[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="npm_task", description="Run an npm command as a build task")
    subparsers = parser.add_subparsers(dest="command_name", required=True)

    run_parser = subparsers.add_parser("run", help="Run npm in the task working directory")
    run_parser.add_argument("--cwd", default=None, help="Working directory (overrides INPUT_CWD)")
    run_parser.add_argument("--command", default=None, help="npm command (overrides INPUT_COMMAND)")
    run_parser.add_argument("--arguments", default=None, help="Extra arguments (overrides INPUT_ARGUMENTS)")
    run_parser.add_argument("--config", type=Path, default=Path(DEFAULT_CONFIG_NAME), help="Optional YAML configuration")
    run_parser.add_argument(
        "--log-level",
        default=_default_log_level(),
        choices=LOG_LEVELS,
    )

    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.command_name == "run":
        return _handle_run(args)
    return 0


def _handle_run(args) -> int:
    env = os.environ.copy()
    for name in ("cwd", "command", "arguments"):
        value = getattr(args, name)
        if value is not None:
            env[input_variable(name)] = value

    try:
        config = load_config(args.config, env=env)
    except ConfigurationError as err:
        return _abort(AgentHost(env), f"invalid configuration: {err}")

    host = AgentHost(env, messages=MessageCatalog(config.messages))
    service = NpmTaskService(host, ToolRunner(env=env), config)
    outcome = service.run_from_host()
    return 0 if outcome.succeeded else 1


def _abort(host: AgentHost, message: str) -> int:
    print(message, file=sys.stderr)
    host.set_result(TaskResult.FAILED, message)
    return 1


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()

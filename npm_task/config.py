"""Task configuration loaded from an optional YAML file."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .domain.errors import ConfigurationError

DEFAULT_CONFIG_NAME = "npm-task.yaml"
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class TaskConfig:
    tool: str = "npm"
    split_arguments: bool = False
    messages: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        tool = self.tool.strip()
        if not tool:
            raise ConfigurationError("tool cannot be empty")
        object.__setattr__(self, "tool", tool)


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"invalid YAML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigurationError(f"unable to read {path}: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigurationError(f"{path} must contain a mapping")
    return payload


def load_config(
    path: Optional[Path] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
) -> TaskConfig:
    """Builds a TaskConfig from ``path`` (if it exists) and environment overrides.

    Environment wins over the file: ``NPM_TASK_TOOL`` and
    ``NPM_TASK_SPLIT_ARGUMENTS``.
    """
    env = os.environ if env is None else env
    data: Dict[str, Any] = {}
    if path is not None and path.exists():
        data = _read_yaml(path)

    unknown = sorted(set(data) - {"tool", "split_arguments", "messages"})
    if unknown:
        raise ConfigurationError(f"unknown configuration keys: {', '.join(unknown)}")

    tool = env.get("NPM_TASK_TOOL") or data.get("tool", "npm")
    if not isinstance(tool, str):
        raise ConfigurationError("tool must be a string")

    split_raw = env.get("NPM_TASK_SPLIT_ARGUMENTS", data.get("split_arguments", False))
    split_arguments = _parse_bool("split_arguments", split_raw)

    messages = data.get("messages") or {}
    if not isinstance(messages, dict) or not all(
        isinstance(key, str) and isinstance(value, str) for key, value in messages.items()
    ):
        raise ConfigurationError("messages must map message keys to strings")

    return TaskConfig(tool=tool, split_arguments=split_arguments, messages=dict(messages))

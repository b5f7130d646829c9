"""Resource strings reported to the build host."""
from __future__ import annotations

from typing import Dict, Mapping, Optional

DEFAULT_MESSAGES: Dict[str, str] = {
    "NpmReturnCode": "npm return code: %d",
    "NpmFailed": "npm failed with error: %s",
    "NpmReturnCodeFailed": "%s failed with return code: %d",
    "LIB_InputRequired": "Input required: %s",
    "LIB_WhichNotFound": "Unable to locate executable file: '%s'",
    "LIB_MkdirFailed": "Unable to create directory '%s'. %s",
    "LIB_CdFailed": "Unable to change to directory '%s'. %s",
}


class MessageCatalog:
    def __init__(self, overrides: Optional[Mapping[str, str]] = None) -> None:
        self._messages = dict(DEFAULT_MESSAGES)
        if overrides:
            self._messages.update(overrides)

    def loc(self, key: str, *args: object) -> str:
        template = self._messages.get(key)
        if template is None:
            # unknown key: surface the key and its arguments
            if not args:
                return key
            return f"{key} {' '.join(str(arg) for arg in args)}"
        if not args:
            return template
        try:
            return template % args
        except (TypeError, ValueError):
            return f"{template} {' '.join(str(arg) for arg in args)}"


_DEFAULT_CATALOG = MessageCatalog()


def loc(key: str, *args: object) -> str:
    return _DEFAULT_CATALOG.loc(key, *args)

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path

import pytest

FAKE_NPM = """#!/bin/sh
printf '%s\\n' "$@" > "$PWD/argv.txt"
pwd > "$PWD/cwd.txt"
echo "fake npm $1"
if [ "$1" = "run" ]; then
    echo "npm ERR! missing script: $2" >&2
    exit 1
fi
if [ "$1" = "crash" ]; then
    exit 3
fi
exit 0
"""


def write_fake_npm(bin_dir: Path) -> Path:
    bin_dir.mkdir(parents=True, exist_ok=True)
    script = bin_dir / "npm"
    script.write_text(FAKE_NPM, encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture()
def fake_npm_bin(tmp_path: Path) -> Path:
    if sys.platform.startswith("win"):
        pytest.skip("fake npm is a POSIX shell script")
    bin_dir = tmp_path / "bin"
    write_fake_npm(bin_dir)
    return bin_dir


@pytest.fixture(autouse=True)
def restore_cwd():
    # the task changes the process working directory
    original = os.getcwd()
    yield
    os.chdir(original)

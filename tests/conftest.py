"""Shared test fixtures for the matrix calculator tools."""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

import pytest

TOOLS_DIR = Path(__file__).resolve().parent.parent / "plugins" / "matrix-calculator" / "tools"


class ToolRun:
    """Outcome of running a tool script as a subprocess."""

    def __init__(self, completed: subprocess.CompletedProcess) -> None:
        self.returncode = completed.returncode
        self.stderr = completed.stderr
        self.messages = [json.loads(line) for line in completed.stdout.splitlines() if line.strip()]

    @property
    def result(self) -> dict:
        return self.messages[-1]


@pytest.fixture()
def run_script():
    """Run a tool script, feeding each given line to its stdin."""

    def _run(name: str, *lines: str) -> ToolRun:
        completed = subprocess.run(
            [sys.executable, str(TOOLS_DIR / name)],
            input="".join(line + "\n" for line in lines),
            capture_output=True,
            text=True,
            cwd=TOOLS_DIR,
            timeout=120,
        )
        return ToolRun(completed)

    return _run

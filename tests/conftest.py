"""Pytest configuration and shared fixtures."""

import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest

from vcsbackends.backends.errors import ExternalToolError


class RecordingRunner:
    """Command runner that records invocations instead of running tools.

    ``fail_on`` maps a subcommand (the first argument) to the exit status
    the fake tool should report.
    """

    def __init__(self):
        self.calls: List[Dict] = []
        self.fail_on: Dict[str, int] = {}

    def run(self, tool: str, args: Sequence[str], cwd=None) -> subprocess.CompletedProcess:
        args = list(args)
        self.calls.append({"tool": tool, "args": args, "cwd": cwd})
        returncode = self.fail_on.get(args[0], 0) if args else 0
        if returncode:
            raise ExternalToolError(tool, args, returncode, "simulated failure")
        return subprocess.CompletedProcess([tool] + args, 0, b"", b"")

    @property
    def commands(self) -> List[List[str]]:
        return [[call["tool"]] + call["args"] for call in self.calls]

    def last_cwd(self) -> Optional[Path]:
        cwd = self.calls[-1]["cwd"]
        return None if cwd is None else Path(cwd)


@pytest.fixture
def fake_runner():
    """Recording command runner."""
    return RecordingRunner()


@pytest.fixture
def remote_url():
    """Sample remote repository URL."""
    return "https://github.com/example/project"


@pytest.fixture
def sample_config():
    """Sample configuration dictionary."""
    return {
        "executables": {
            "git": "/usr/local/bin/git",
            "hg": "/opt/mercurial/bin/hg",
        },
        "capture_output": False,
        "logging": {
            "level": "DEBUG",
            "log_dir": "/tmp/vcsbackends-logs",
            "file_logging": True,
        },
    }

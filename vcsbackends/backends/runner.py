"""External command execution for VCS backends.

All process invocations made by the backends go through a CommandRunner,
which maps exit status and start-up failures onto the backend error types.
Tests substitute a recording runner instead of spawning real tools.
"""

import os
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Sequence, Union

from ..common.config import VCSBackendsConfig
from ..common.logger import get_logger
from .errors import ExternalToolError, MissingWorkingCopyError, ToolNotAvailableError

logger = get_logger("runner")

PathLike = Union[str, "os.PathLike[str]"]


class CommandRunner(Protocol):
    """Protocol for objects that execute external VCS tools."""

    def run(
        self,
        tool: str,
        args: Sequence[str],
        cwd: Optional[PathLike] = None,
    ) -> subprocess.CompletedProcess: ...


class SubprocessRunner:
    """Runs external tools with subprocess.

    A run succeeds only when the tool exits with status zero. No retries and
    no timeout are applied; the call blocks until the tool exits.
    """

    def __init__(
        self,
        executables: Optional[Dict[str, str]] = None,
        capture_output: bool = True,
    ):
        """Initialize the runner.

        Args:
            executables: Optional mapping of tool name to executable path
            capture_output: Capture stdout/stderr so failures carry diagnostics;
                when False the tool writes straight to the terminal
        """
        self.executables = dict(executables or {})
        self.capture_output = capture_output

    def resolve_executable(self, tool: str) -> str:
        """Return the executable to invoke for a tool name."""
        return self.executables.get(tool, tool)

    def run(
        self,
        tool: str,
        args: Sequence[str],
        cwd: Optional[PathLike] = None,
    ) -> subprocess.CompletedProcess:
        """Run a tool and raise on failure.

        Args:
            tool: Tool name (e.g. "git")
            args: Arguments following the tool name
            cwd: Optional working directory for the process

        Returns:
            CompletedProcess of the successful run

        Raises:
            MissingWorkingCopyError: If cwd is given but is not a directory
            ToolNotAvailableError: If the executable cannot be started
            ExternalToolError: If the tool exits with a non-zero status
        """
        if cwd is not None and not Path(cwd).is_dir():
            raise MissingWorkingCopyError(Path(cwd))

        executable = self.resolve_executable(tool)
        cmd: List[str] = [executable] + [str(arg) for arg in args]

        if cwd is not None:
            logger.debug(f"Running in {cwd}: {' '.join(cmd)}")
        else:
            logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                cwd=None if cwd is None else str(cwd),
                capture_output=self.capture_output,
                check=False,
            )
        except OSError as e:
            raise ToolNotAvailableError(tool, executable, str(e)) from e

        if result.returncode != 0:
            stderr = result.stderr.decode(errors="replace") if result.stderr else ""
            raise ExternalToolError(tool, list(args), result.returncode, stderr)

        return result


def build_runner(config: VCSBackendsConfig) -> SubprocessRunner:
    """Create a SubprocessRunner from configuration.

    Args:
        config: Loaded configuration

    Returns:
        Runner honouring the configured executables and output capture
    """
    return SubprocessRunner(
        executables=config.executables,
        capture_output=config.capture_output,
    )

"""Thin wrappers around external process invocation."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

# Shell convention for "command not found"
COMMAND_NOT_FOUND = 127


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured output of one external command."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(
    args: list[str],
    cwd: Path | None = None,
    capture: bool = False,
) -> CommandResult:
    """Run a command and wait for it to exit.

    Output is streamed to the terminal unless ``capture`` is set, in which
    case stdout/stderr are returned on the result. There is no timeout: a
    hung tool hangs the wizard.

    A missing executable is reported as return code 127 rather than raised,
    so callers only ever branch on the exit status.
    """
    try:
        result = subprocess.run(
            args,
            cwd=cwd,
            capture_output=capture,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        return CommandResult(COMMAND_NOT_FOUND, "", str(e))

    return CommandResult(
        result.returncode,
        result.stdout or "",
        result.stderr or "",
    )


def which(name: str) -> str | None:
    """Return the full path of an executable on PATH, or None."""
    return shutil.which(name)

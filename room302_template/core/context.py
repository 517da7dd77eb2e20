"""Explicit working context handed to every setup step."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from room302_template.config import WizardSettings
from room302_template.helpers.shell import CommandResult, run_command, which

Runner = Callable[..., CommandResult]
Which = Callable[[str], "str | None"]


@dataclass
class SetupContext:
    """Where the project lives and how external tools are invoked.

    ``project_dir`` is the root of the cloned project. Steps run commands and
    touch files relative to it instead of changing the process working
    directory.
    """

    project_dir: Path
    settings: WizardSettings = field(default_factory=WizardSettings)
    runner: Runner = run_command
    which: Which = which

    def run(self, args: list[str], capture: bool = False) -> CommandResult:
        """Run a command inside the project directory."""
        return self.runner(args, cwd=self.project_dir, capture=capture)

    def run_in(self, cwd: Path, args: list[str], capture: bool = False) -> CommandResult:
        """Run a command in an explicit directory (e.g. before the clone exists)."""
        return self.runner(args, cwd=cwd, capture=capture)

    def path(self, relative: str) -> Path:
        """Absolute path of a file inside the project."""
        return self.project_dir / relative

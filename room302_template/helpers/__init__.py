"""Helper utilities shared by the setup steps."""

from room302_template.helpers.shell import CommandResult, run_command, which

__all__ = [
    "CommandResult",
    "run_command",
    "which",
]

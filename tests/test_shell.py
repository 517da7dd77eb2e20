"""Tests for the subprocess wrapper."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

from room302_template.helpers.shell import COMMAND_NOT_FOUND, run_command


def test_run_command_passes_cwd_and_capture(tmp_path: Path) -> None:
    completed = subprocess.CompletedProcess(["node", "-v"], 0, stdout="v20.0.0\n", stderr="")
    with patch("room302_template.helpers.shell.subprocess.run", return_value=completed) as mock_run:
        result = run_command(["node", "-v"], cwd=tmp_path, capture=True)

    assert result.ok
    assert result.stdout == "v20.0.0\n"
    mock_run.assert_called_once_with(
        ["node", "-v"],
        cwd=tmp_path,
        capture_output=True,
        text=True,
        check=False,
    )


def test_uncaptured_output_is_empty_string() -> None:
    completed = subprocess.CompletedProcess(["git", "init"], 0, stdout=None, stderr=None)
    with patch("room302_template.helpers.shell.subprocess.run", return_value=completed):
        result = run_command(["git", "init"])

    assert (result.stdout, result.stderr) == ("", "")


def test_non_zero_exit_is_not_ok() -> None:
    completed = subprocess.CompletedProcess(["gh"], 4, stdout="", stderr="auth required")
    with patch("room302_template.helpers.shell.subprocess.run", return_value=completed):
        result = run_command(["gh", "repo", "view"], capture=True)

    assert not result.ok
    assert result.stderr == "auth required"


def test_missing_executable_maps_to_127() -> None:
    with patch(
        "room302_template.helpers.shell.subprocess.run",
        side_effect=FileNotFoundError("No such file or directory: 'gh'"),
    ):
        result = run_command(["gh", "--version"])

    assert result.returncode == COMMAND_NOT_FOUND
    assert "gh" in result.stderr

#!/usr/bin/env python3
"""room302-template - create a new project from the Room302 Nuxt template.

Usage:
    room302-template

All choices are asked interactively. The wizard then:
    1. checks for Node.js, the Supabase CLI and the GitHub CLI
    2. clones the template into ./<project-name>
    3. rewrites package.json / nuxt.config.ts for the chosen UI setup
    4. starts a fresh git history and creates the GitHub repository
    5. commits and pushes, opens the editor and installs dependencies

Settings that are not asked (template repo, organization, package manager,
editor) come from ~/.room302/config.yaml or $ROOM302_TEMPLATE_CONFIG.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from room302_template.cli.prompts import AnswerCollectionError, collect_answers
from room302_template.config import ConfigError, WizardSettings, load_settings
from room302_template.core.context import SetupContext
from room302_template.core.environment_probe import probe_environment
from room302_template.core.pipeline import report, run_setup
from room302_template.core.step_result import StepResult
from room302_template.helpers.helpers_logging import print_info, print_warning

# Conventional exit status for SIGINT
_EXIT_CANCELLED = 130


def _load_settings_or_defaults() -> WizardSettings:
    try:
        return load_settings()
    except ConfigError as e:
        print_warning(f"{e}; using default settings")
        return WizardSettings()


@click.command(
    name="room302-template",
    help="Create a new project from the Room302 Nuxt template (interactive).",
)
def _click_cli() -> int:
    """Run the setup wizard."""
    print_info("🚀 Starting project setup...")
    settings = _load_settings_or_defaults()

    report(probe_environment(SetupContext(project_dir=Path.cwd(), settings=settings)))

    try:
        answers = collect_answers(settings)
    except AnswerCollectionError as e:
        report(StepResult.fatal(f"Error occurred while collecting answers: {e}"))
        return 1

    return run_setup(answers, settings, base_dir=Path.cwd())


def main() -> int:
    """Main CLI entry point."""
    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name="room302-template",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return _EXIT_CANCELLED
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())

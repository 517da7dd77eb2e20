"""Sequential driver for the setup steps.

This is the only place that decides what a failure means: FATAL results stop
the run with exit status 1, ADVISORY results are printed and the run goes on.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from room302_template.config import WizardSettings
from room302_template.core.answers import SetupAnswers
from room302_template.core.config_rewriter import rewrite_project_config
from room302_template.core.context import Runner, SetupContext, Which
from room302_template.core.finalizer import commit_and_push, install_dependencies, open_in_editor
from room302_template.core.git_init import init_git_repo
from room302_template.core.integrations import init_supabase, setup_netlify
from room302_template.core.remote_repo import create_github_repo
from room302_template.core.repository_fetcher import fetch_template
from room302_template.core.step_result import StepResult, StepStatus
from room302_template.helpers.helpers_logging import (
    print_error,
    print_info,
    print_success,
    print_warning,
)
from room302_template.helpers.shell import run_command, which

Step = Callable[[SetupContext, SetupAnswers], StepResult]


def report(result: StepResult) -> None:
    """Print a step's notes: errors for FATAL, warnings for ADVISORY."""
    show = print_error if result.status is StepStatus.FATAL else print_warning
    for note in result.notes:
        if note.is_hint:
            print_info(f"   {note.text}")
        else:
            show(note.text)


def build_steps(answers: SetupAnswers) -> list[tuple[str, Step]]:
    """Ordered (label, step) pairs for one run."""
    steps: list[tuple[str, Step]] = [
        ("fetch template", lambda ctx, _a: fetch_template(ctx)),
        ("rewrite config", rewrite_project_config),
        ("init git", lambda ctx, _a: init_git_repo(ctx)),
        ("create GitHub repo", create_github_repo),
    ]
    if answers.init_supabase:
        steps.append(("init Supabase", lambda ctx, _a: init_supabase(ctx)))
    steps.append(("commit and push", lambda ctx, a: commit_and_push(ctx, a.auto_commit_push)))
    if answers.use_netlify:
        steps.append(("set up Netlify", lambda ctx, _a: setup_netlify(ctx)))
    steps.extend([
        ("open editor", lambda ctx, _a: open_in_editor(ctx)),
        ("install dependencies", lambda ctx, _a: install_dependencies(ctx)),
    ])
    return steps


def run_setup(
    answers: SetupAnswers,
    settings: WizardSettings | None = None,
    base_dir: Path | None = None,
    runner: Runner = run_command,
    which_fn: Which = which,
) -> int:
    """Create the project ``answers.project_name`` under ``base_dir``.

    Returns:
        0 when every step ran (advisory failures included), 1 on the first
        fatal failure.
    """
    base = (base_dir or Path.cwd()).resolve()
    ctx = SetupContext(
        project_dir=base / answers.project_name,
        settings=settings or WizardSettings(),
        runner=runner,
        which=which_fn,
    )

    warnings = 0
    for label, step in build_steps(answers):
        result = step(ctx, answers)
        report(result)
        if result.is_fatal:
            print_error(f"Setup stopped at step '{label}'")
            return 1
        if not result.is_ok:
            warnings += 1

    print_success(f"\n🎉 All done! Your project is ready in {ctx.project_dir} 🚀")
    if warnings:
        print_warning(f"{warnings} step(s) reported problems; see the messages above.")
    return 0

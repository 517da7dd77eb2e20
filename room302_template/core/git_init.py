"""Replace the template's git history with a fresh repository."""

from __future__ import annotations

import shutil

from room302_template.core.context import SetupContext
from room302_template.core.step_result import StepResult, merge_results
from room302_template.helpers.helpers_logging import print_success


def remove_existing_repo(ctx: SetupContext) -> StepResult:
    """Delete the cloned template's .git directory."""
    git_dir = ctx.path(".git")
    try:
        if git_dir.is_dir() and not git_dir.is_symlink():
            shutil.rmtree(git_dir)
        elif git_dir.exists() or git_dir.is_symlink():
            git_dir.unlink()
    except OSError as e:
        return StepResult.advisory(f"Oops! Failed to remove existing git repo 😿 ({e})")
    return StepResult.ok()


def init_git_repo(ctx: SetupContext) -> StepResult:
    """Remove inherited history, then ``git init``.

    Both parts always run; a half-initialized repository is left for the
    later git steps to trip over.
    """
    results = [remove_existing_repo(ctx)]

    init = ctx.run(["git", "init", "-b", ctx.settings.default_branch])
    if not init.ok:
        results.append(StepResult.advisory("Oops! Git init failed 😿"))

    result = merge_results(results)
    if result.is_ok:
        print_success("✅ Git repository initialized!")
    return result

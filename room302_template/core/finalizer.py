"""Last steps: first commit, editor, dependency install.

Each step is independent; a failure in one never stops the others.
"""

from __future__ import annotations

from room302_template.core.context import SetupContext
from room302_template.core.step_result import StepResult, merge_results
from room302_template.helpers.helpers_logging import print_info, print_success


def commit_and_push(ctx: SetupContext, auto_commit_push: bool) -> StepResult:
    """Stage, commit and push, each attempted in order with its own failure message."""
    if not auto_commit_push:
        print_info("⏭️  Skipping initial commit and push")
        return StepResult.ok()

    settings = ctx.settings
    steps = [
        (["git", "add", "."], "Oops! Git add failed 😿"),
        (["git", "commit", "-m", settings.commit_message], "Oops! Git commit failed 😿"),
        (["git", "push", "-u", "origin", settings.default_branch], "Oops! Git push failed 😿"),
    ]

    results: list[StepResult] = []
    for args, failure in steps:
        if not ctx.run(args).ok:
            results.append(StepResult.advisory(failure))

    result = merge_results(results)
    if result.is_ok:
        print_success("✅ Changes pushed to GitHub successfully!")
    return result


def open_in_editor(ctx: SetupContext) -> StepResult:
    if not ctx.run([ctx.settings.editor, "."]).ok:
        return StepResult.advisory("Oops! Tried and failed to open the repo in VSCode 😿")
    return StepResult.ok()


def install_dependencies(ctx: SetupContext) -> StepResult:
    package_manager = ctx.settings.package_manager
    print_info(f"📦 Installing dependencies with {package_manager}...")
    if not ctx.run([package_manager, "install"]).ok:
        return StepResult.advisory(f"Oops! {package_manager} install failed 😿")

    print_success("✅ Dependencies installed successfully!")
    return StepResult.ok()


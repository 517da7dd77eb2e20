"""Clone the Nuxt template and make sure it is usable.

Every failure in this module is fatal: the rewrite steps that follow assume
the essential files exist, so a broken or altered template must be caught
here rather than by whichever later step touches a missing file.
"""

from __future__ import annotations

from room302_template.core.context import SetupContext
from room302_template.core.step_result import StepResult
from room302_template.helpers.helpers_logging import print_info, print_success

ESSENTIAL_FILES: tuple[str, ...] = (
    "nuxt.config.ts",
    "package.json",
    "tailwind.config.js",
    "app.vue",
)


def check_template_access(ctx: SetupContext) -> StepResult:
    """Query the template repository's metadata with ``gh repo view``."""
    repo = ctx.settings.template_repo
    result = ctx.run_in(
        ctx.project_dir.parent,
        ["gh", "repo", "view", repo, "--json", "name,html_url"],
        capture=True,
    )
    if not result.ok:
        return StepResult.fatal(
            f"Oops! Template repository not accessible: {repo} 😿",
            hints=("👩‍🔧 Check your network connection and run: gh auth status",),
        )
    return StepResult.ok()


def clone_template(ctx: SetupContext) -> StepResult:
    """Clone the template into ``ctx.project_dir``."""
    if ctx.project_dir.exists():
        return StepResult.fatal(
            f"Oops! Directory {ctx.project_dir.name} already exists 😿",
            hints=("👩‍🔧 Pick another project name or remove the directory first.",),
        )

    print_info("🚀 Let's clone the template repo... 🎉")
    result = ctx.run_in(
        ctx.project_dir.parent,
        ["gh", "repo", "clone", ctx.settings.template_repo, ctx.project_dir.name],
        capture=True,
    )
    if not result.ok:
        detail = result.stderr.strip()
        return StepResult.fatal(
            "Oops! Git clone failed 😿" + (f": {detail}" if detail else ""),
        )
    return StepResult.ok()


def find_missing_files(ctx: SetupContext) -> list[str]:
    """Return the essential files that are absent from the clone."""
    return [name for name in ESSENTIAL_FILES if not ctx.path(name).exists()]


def verify_essential_files(ctx: SetupContext) -> StepResult:
    missing = find_missing_files(ctx)
    if missing:
        return StepResult.fatal(
            f"Oops! Template is missing essential files: {', '.join(missing)} 😿",
        )
    return StepResult.ok()


def fetch_template(ctx: SetupContext) -> StepResult:
    """Reachability check, clone, then essential-file check; stop at the first failure."""
    for step in (check_template_access, clone_template, verify_essential_files):
        result = step(ctx)
        if not result.is_ok:
            return result

    print_success("🎉 Hooray! Successfully cloned the template repo 🚀")
    return StepResult.ok()

"""Create the GitHub repository for the new project."""

from __future__ import annotations

from room302_template.config import WizardSettings
from room302_template.core.answers import RepoScope, SetupAnswers
from room302_template.core.context import SetupContext
from room302_template.core.step_result import StepResult
from room302_template.helpers.helpers_logging import print_info, print_success


def resolve_repo_path(
    project_name: str,
    github_org: RepoScope,
    custom_org: str | None,
    settings: WizardSettings,
) -> str:
    """Return the ``gh repo create`` target for the chosen scope.

    Examples:
        >>> resolve_repo_path("demo", RepoScope.PERSONAL, None, WizardSettings())
        'demo'
        >>> resolve_repo_path("demo", RepoScope.ORGANIZATION, None, WizardSettings())
        'room302studio/demo'
        >>> resolve_repo_path("demo", RepoScope.OTHER, "acme", WizardSettings())
        'acme/demo'
    """
    scope = RepoScope(github_org)
    if scope is RepoScope.PERSONAL:
        return project_name
    if scope is RepoScope.ORGANIZATION:
        return f"{settings.organization}/{project_name}"
    if not custom_org:
        raise ValueError("A custom organization name is required for scope 'other'")
    return f"{custom_org}/{project_name}"


def _describe_scope(answers: SetupAnswers, settings: WizardSettings) -> str:
    if answers.github_org is RepoScope.PERSONAL:
        return "🏠 Creating in your personal GitHub account..."
    if answers.github_org is RepoScope.ORGANIZATION:
        return f"🏢 Creating in {settings.organization_label} organization..."
    return f"🏢 Creating in {answers.custom_org} organization..."


def create_github_repo(ctx: SetupContext, answers: SetupAnswers) -> StepResult:
    """Create the remote with ``gh repo create`` using the project dir as source."""
    repo_path = resolve_repo_path(
        answers.project_name,
        answers.github_org,
        answers.custom_org,
        ctx.settings,
    )
    visibility = "--public" if answers.is_repo_public else "--private"

    print_info(_describe_scope(answers, ctx.settings))
    result = ctx.run([
        "gh", "repo", "create", repo_path, visibility, f"--source={ctx.project_dir}",
    ])
    if not result.ok:
        return StepResult.advisory("Oops! Failed to create GitHub repository 😿")

    print_success(f"✅ Created GitHub repository {repo_path}")
    return StepResult.ok()

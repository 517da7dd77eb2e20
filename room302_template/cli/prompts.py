"""Interactive questions asked before anything is created."""

from __future__ import annotations

import click

from room302_template.config import WizardSettings
from room302_template.core.answers import (
    DEFAULT_PROJECT_NAME,
    LICENSES,
    RepoScope,
    SetupAnswers,
    UIFramework,
    validate_project_name,
)


class AnswerCollectionError(Exception):
    """Raised when the questions could not be answered (closed input, Ctrl-C)."""


def _project_name(value: str) -> str:
    try:
        return validate_project_name(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def _org_name(value: str) -> str:
    value = value.strip()
    if not value or "/" in value or " " in value:
        raise click.BadParameter("Organization name must be a single GitHub account name")
    return value


def collect_answers(settings: WizardSettings | None = None) -> SetupAnswers:
    """Ask the setup questions in order and return the answers.

    The custom organization question is only asked for the 'other' scope.

    Raises:
        AnswerCollectionError: If input ends or the operator aborts
    """
    settings = settings or WizardSettings()
    try:
        project_name = click.prompt(
            "🚀 What is the name of the project?",
            default=DEFAULT_PROJECT_NAME,
            value_proc=_project_name,
        )
        ui_framework = click.prompt(
            "🎨 Which UI setup do you want? (nuxt-ui = full @nuxt/ui, "
            + "tailwind = Tailwind CSS only, none = bare)",
            type=click.Choice([f.value for f in UIFramework]),
            default=UIFramework.NUXT_UI.value,
        )
        use_nuxt_content = click.confirm(
            "📚 Do you want to use Nuxt Content?",
            default=True,
        )
        use_openai = click.confirm(
            "🤖 Do you want to use OpenAI?",
            default=True,
        )
        is_repo_public = click.confirm(
            "🌍 Do you want to make the GitHub repository public?",
            default=True,
        )
        license_id = click.prompt(
            "📝 Please choose the license for your project",
            type=click.Choice(list(LICENSES)),
            default="mit",
        )
        github_org = click.prompt(
            f"🏢 Where should the repository live? ({settings.organization_label} = "
            + f"{RepoScope.ORGANIZATION.value})",
            type=click.Choice([s.value for s in RepoScope]),
            default=RepoScope.PERSONAL.value,
        )
        custom_org = None
        if github_org == RepoScope.OTHER.value:
            custom_org = click.prompt(
                "✍️  Enter the GitHub organization name",
                value_proc=_org_name,
            )
        auto_commit_push = click.confirm(
            "📤 Commit and push the initial state automatically?",
            default=True,
        )
        init_supabase = click.confirm(
            "🗄️  Do you want to initialize a Supabase project?",
            default=False,
        )
        use_netlify = click.confirm(
            "☁️  Do you want to set up a Netlify deployment?",
            default=False,
        )
    except (click.Abort, EOFError) as e:
        raise AnswerCollectionError("Input was closed before all questions were answered") from e

    try:
        return SetupAnswers.from_mapping({
            "project_name": project_name,
            "ui_framework": ui_framework,
            "use_nuxt_content": use_nuxt_content,
            "use_openai": use_openai,
            "is_repo_public": is_repo_public,
            "license": license_id,
            "github_org": github_org,
            "custom_org": custom_org,
            "auto_commit_push": auto_commit_push,
            "init_supabase": init_supabase,
            "use_netlify": use_netlify,
        })
    except (KeyError, ValueError) as e:
        raise AnswerCollectionError(str(e)) from e

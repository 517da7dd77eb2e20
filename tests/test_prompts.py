"""Tests for the interactive question flow."""

from __future__ import annotations

import io
from unittest.mock import patch

import click
import pytest

from room302_template.cli.prompts import AnswerCollectionError, collect_answers
from room302_template.core.answers import RepoScope, UIFramework


def _collect(prompts: list[object], confirms: list[bool]):
    with patch(
        "room302_template.cli.prompts.click.prompt",
        side_effect=prompts,
    ) as mock_prompt, patch(
        "room302_template.cli.prompts.click.confirm",
        side_effect=confirms,
    ):
        answers = collect_answers()
    return answers, mock_prompt


def test_answers_in_order() -> None:
    answers, mock_prompt = _collect(
        ["demo", "tailwind", "mit", "personal"],
        [True, False, True, True, False, False],
    )

    assert answers.project_name == "demo"
    assert answers.ui_framework is UIFramework.TAILWIND
    assert answers.use_nuxt_content is True
    assert answers.use_openai is False
    assert answers.is_repo_public is True
    assert answers.github_org is RepoScope.PERSONAL
    assert answers.custom_org is None
    assert answers.auto_commit_push is True
    assert mock_prompt.call_count == 4


def test_custom_org_only_asked_for_other_scope() -> None:
    answers, mock_prompt = _collect(
        ["demo", "none", "unlicense", "other", "acme"],
        [True, True, False, False, False, False],
    )

    assert mock_prompt.call_count == 5
    assert "organization name" in mock_prompt.call_args_list[-1].args[0]
    assert answers.github_org is RepoScope.OTHER
    assert answers.custom_org == "acme"
    assert answers.is_repo_public is False


def test_organization_prompt_names_configured_label() -> None:
    _answers, mock_prompt = _collect(
        ["demo", "nuxt-ui", "mit", "room302studio"],
        [True, True, True, True, False, False],
    )

    assert "Room302 Studio" in mock_prompt.call_args_list[3].args[0]


def test_abort_raises_collection_error() -> None:
    with patch("room302_template.cli.prompts.click.prompt", side_effect=click.Abort()):
        with pytest.raises(AnswerCollectionError):
            collect_answers()


def test_closed_stdin_raises_collection_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    with pytest.raises(AnswerCollectionError):
        collect_answers()


def test_defaults_from_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("\n" * 12))

    answers = collect_answers()

    assert answers.project_name == "my-nuxt-project"
    assert answers.ui_framework is UIFramework.NUXT_UI
    assert answers.license == "mit"
    assert answers.github_org is RepoScope.PERSONAL
    assert answers.init_supabase is False
    assert answers.use_nuxt_content is True
    assert answers.use_openai is True


def test_invalid_project_name_is_asked_again(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("bad name\ngood-name\n" + "\n" * 11))

    assert collect_answers().project_name == "good-name"

"""Tests for template reachability, clone and essential-file checks."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from room302_template.core import repository_fetcher
from room302_template.core.context import SetupContext
from room302_template.core.step_result import StepStatus
from tests.conftest import FakeRunner, write_template


def _clone_into(skip: tuple[str, ...] = ()) -> Callable[[list[str], Path | None], None]:
    """Runner handler that simulates ``gh repo clone <repo> <dir>``."""

    def _handler(args: list[str], cwd: Path | None) -> None:
        assert cwd is not None
        write_template(cwd / args[-1], skip=skip)

    return _handler


@pytest.fixture
def fresh_ctx(make_ctx: Callable[..., SetupContext]) -> SetupContext:
    return make_ctx(with_template=False)


class TestCheckTemplateAccess:
    def test_queries_repo_metadata(self, fresh_ctx: SetupContext, runner: FakeRunner) -> None:
        result = repository_fetcher.check_template_access(fresh_ctx)

        assert result.is_ok
        assert runner.calls[0].args == [
            "gh", "repo", "view", "room302studio/nuxt-template", "--json", "name,html_url",
        ]
        assert runner.calls[0].capture is True

    def test_unreachable_template_is_fatal(
        self,
        fresh_ctx: SetupContext,
        runner: FakeRunner,
    ) -> None:
        runner.fail("gh", "repo", "view")

        result = repository_fetcher.check_template_access(fresh_ctx)

        assert result.status is StepStatus.FATAL
        assert "Template repository not accessible" in result.messages[0]


class TestFetchTemplate:
    def test_successful_clone(
        self,
        fresh_ctx: SetupContext,
        runner: FakeRunner,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        runner.on(("gh", "repo", "clone"), _clone_into())

        result = repository_fetcher.fetch_template(fresh_ctx)

        assert result.is_ok
        clone = runner.calls[1]
        assert clone.args == ["gh", "repo", "clone", "room302studio/nuxt-template", "demo"]
        assert clone.cwd == fresh_ctx.project_dir.parent
        assert "Successfully cloned" in capsys.readouterr().out

    def test_no_clone_when_template_unreachable(
        self,
        fresh_ctx: SetupContext,
        runner: FakeRunner,
    ) -> None:
        runner.fail("gh", "repo", "view")

        result = repository_fetcher.fetch_template(fresh_ctx)

        assert result.is_fatal
        assert not runner.ran("gh", "repo", "clone")

    def test_clone_failure_is_fatal(self, fresh_ctx: SetupContext, runner: FakeRunner) -> None:
        runner.fail("gh", "repo", "clone")

        result = repository_fetcher.fetch_template(fresh_ctx)

        assert result.is_fatal
        assert result.messages[0].startswith("Oops! Git clone failed 😿")

    def test_missing_essential_files_are_listed(
        self,
        fresh_ctx: SetupContext,
        runner: FakeRunner,
    ) -> None:
        runner.on(("gh", "repo", "clone"), _clone_into(skip=("tailwind.config.js", "app.vue")))

        result = repository_fetcher.fetch_template(fresh_ctx)

        assert result.is_fatal
        assert result.messages == (
            "Oops! Template is missing essential files: tailwind.config.js, app.vue 😿",
        )

    def test_existing_directory_is_fatal_without_clone(
        self,
        make_ctx: Callable[..., SetupContext],
        runner: FakeRunner,
    ) -> None:
        ctx = make_ctx()

        result = repository_fetcher.fetch_template(ctx)

        assert result.is_fatal
        assert "already exists" in result.messages[0]
        assert not runner.ran("gh", "repo", "clone")


def test_find_missing_files_checks_every_essential_file(ctx: SetupContext) -> None:
    ctx.path("package.json").unlink()

    assert repository_fetcher.find_missing_files(ctx) == ["package.json"]
    assert repository_fetcher.ESSENTIAL_FILES == (
        "nuxt.config.ts",
        "package.json",
        "tailwind.config.js",
        "app.vue",
    )

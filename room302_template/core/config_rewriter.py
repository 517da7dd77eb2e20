"""Rewrite package.json and nuxt.config.ts to match the chosen setup.

Three mutually exclusive UI branches:

    nuxt-ui   keep the @nuxt/ui module and dependency as they are
    tailwind  drop @nuxt/ui, then install and wire up plain Tailwind
    none      drop @nuxt/ui and add nothing in its place

Opting out of Nuxt Content or OpenAI removes their module, dependency and
template files as well.

Both files are read and parsed before either is written. A broken file
leaves both untouched, and running the rewrite twice with the same answers
leaves identical files.
"""

from __future__ import annotations

import shutil

from room302_template.core.answers import SetupAnswers, UIFramework
from room302_template.core.context import SetupContext
from room302_template.core.nuxt_config import NuxtConfig
from room302_template.core.package_manifest import (
    CONTENT_DEPENDENCY,
    UI_DEPENDENCY,
    apply_answers,
    load_manifest,
    render_manifest,
)
from room302_template.core.step_result import StepResult, merge_results
from room302_template.core.tailwind_setup import setup_tailwind
from room302_template.helpers.helpers_logging import print_info, print_success

PACKAGE_JSON = "package.json"
NUXT_CONFIG = "nuxt.config.ts"
CONTENT_DIR = "content"
PROSE_COMPONENTS = "components/Prose*.vue"
OPENAI_COMPOSABLE = "composables/useOpenAi.js"

_BRANCH_MESSAGES = {
    UIFramework.NUXT_UI: "✨ Keeping @nuxt/ui configuration...",
    UIFramework.TAILWIND: "🎭 Setting up lightweight Tailwind configuration...",
    UIFramework.NONE: "🧹 Removing UI frameworks for a clean slate...",
}


def update_package_json(manifest: dict[str, object], answers: SetupAnswers) -> None:
    """Set the package name and license; drop dependencies of unused features."""
    apply_answers(
        manifest,
        answers.project_name,
        answers.license,
        keep_ui_dependency=answers.ui_framework is UIFramework.NUXT_UI,
        keep_content_dependency=answers.use_nuxt_content,
    )


def update_nuxt_config(config: NuxtConfig, answers: SetupAnswers) -> None:
    """Drop module registrations of unused features."""
    if answers.ui_framework is not UIFramework.NUXT_UI:
        config.remove_module(UI_DEPENDENCY)
    if not answers.use_nuxt_content:
        config.remove_module(CONTENT_DEPENDENCY)
        config.remove_property("content")


def remove_unused_files(ctx: SetupContext, answers: SetupAnswers) -> StepResult:
    """Delete template files of the features that were opted out of."""
    results: list[StepResult] = []

    if not answers.use_nuxt_content:
        try:
            if ctx.path(CONTENT_DIR).is_dir():
                shutil.rmtree(ctx.path(CONTENT_DIR))
        except OSError:
            results.append(StepResult.advisory("Oops! Failed to remove /content/ folder 😿"))
        try:
            for component in ctx.project_dir.glob(PROSE_COMPONENTS):
                component.unlink()
        except OSError:
            results.append(StepResult.advisory(
                "Oops! Failed to remove Nuxt Content Prose*.vue components 😿",
            ))

    if not answers.use_openai:
        try:
            ctx.path(OPENAI_COMPOSABLE).unlink(missing_ok=True)
        except OSError:
            results.append(StepResult.advisory(f"Oops! Failed to remove {OPENAI_COMPOSABLE} 😿"))

    return merge_results(results)


def rewrite_project_config(ctx: SetupContext, answers: SetupAnswers) -> StepResult:
    """Apply the answers to package.json and nuxt.config.ts, then prune files.

    Any read or parse failure skips the rest of the step, named after the
    file that caused it.
    """
    print_info(_BRANCH_MESSAGES[answers.ui_framework])

    manifest_path = ctx.path(PACKAGE_JSON)
    try:
        manifest = load_manifest(manifest_path)
    except Exception as e:
        return StepResult.advisory(f"Error occurred while updating {PACKAGE_JSON}: {e}")

    config_path = ctx.path(NUXT_CONFIG)
    try:
        config = NuxtConfig(config_path.read_text(encoding="utf-8"))
    except Exception as e:
        return StepResult.advisory(f"Error occurred while updating {NUXT_CONFIG}: {e}")

    update_package_json(manifest, answers)
    update_nuxt_config(config, answers)

    try:
        manifest_path.write_text(render_manifest(manifest), encoding="utf-8")
    except OSError as e:
        return StepResult.advisory(f"Error occurred while updating {PACKAGE_JSON}: {e}")
    try:
        config_path.write_text(config.render(), encoding="utf-8")
    except OSError as e:
        return StepResult.advisory(f"Error occurred while updating {NUXT_CONFIG}: {e}")

    print_success(f"✅ Updated {PACKAGE_JSON} and {NUXT_CONFIG} for {answers.project_name}")

    results = [remove_unused_files(ctx, answers)]
    if answers.ui_framework is UIFramework.TAILWIND:
        results.append(setup_tailwind(ctx))
    return merge_results(results)

"""Optional Supabase and Netlify setup."""

from __future__ import annotations

from room302_template.core.context import SetupContext
from room302_template.core.step_result import StepResult, merge_results
from room302_template.helpers.helpers_logging import print_info, print_success


def init_supabase(ctx: SetupContext) -> StepResult:
    """Run ``supabase init`` in the project. Needs Docker for the local stack."""
    if ctx.which("docker") is None:
        return StepResult.advisory(
            "Oops! Docker not found. Please install it first. 🛠️",
            hints=(
                "👩‍🔧 You can install it from:",
                "https://docs.docker.com/get-docker/ 🚀",
            ),
        )

    print_info("🗄️  Initializing Supabase project...")
    if not ctx.run(["supabase", "init", "--with-vscode-workspace"]).ok:
        return StepResult.advisory("Oops! Supabase init failed 😿")

    print_success("✅ Supabase project initialized!")
    return StepResult.ok()


def setup_netlify(ctx: SetupContext) -> StepResult:
    """Link a Netlify site and run a first build; both parts always run."""
    print_info("☁️  Setting up Netlify deployment...")
    results: list[StepResult] = []
    if not ctx.run(["netlify", "init"]).ok:
        results.append(StepResult.advisory("Oops! Netlify site creation failed 😿"))
    if not ctx.run(["netlify", "build"]).ok:
        results.append(StepResult.advisory("Oops! Netlify build failed 😿"))

    result = merge_results(results)
    if result.is_ok:
        print_success("✅ Netlify deployment configured!")
    return result

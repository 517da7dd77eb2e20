"""Advisory checks for the local toolchain.

Nothing here stops the wizard: a missing or outdated tool only produces a
remediation message, since the operator may fix it before it is needed.
"""

from __future__ import annotations

import re

from room302_template.core.context import SetupContext
from room302_template.core.step_result import StepResult, merge_results

_VERSION_RE = re.compile(r"v?(\d+)(?:\.(\d+))?")


def parse_version(text: str) -> tuple[int, int] | None:
    """Parse 'v18.17.1' / '18.2' into (major, minor)."""
    match = _VERSION_RE.search(text.strip())
    if not match:
        return None
    return int(match.group(1)), int(match.group(2) or 0)


def check_node_version(ctx: SetupContext) -> StepResult:
    """Compare ``node -v`` against the configured minimum version."""
    try:
        result = ctx.run(["node", "-v"], capture=True)
        floor = parse_version(ctx.settings.min_node_version) or (0, 0)
        current = parse_version(result.stdout) if result.ok else None

        if current is None or current < floor:
            found = result.stdout.strip() or "no Node.js"
            return StepResult.advisory(
                "Oops! Your Node.js version is not correct. "
                + f"We expected a version above {ctx.settings.min_node_version} "
                + f"but got {found} 🙀",
                hints=(
                    "👩‍🔧 If you have nvm installed, you can fix this with the command:",
                    "nvm use 18.17.1 🚀",
                ),
            )
    except Exception as e:
        return StepResult.advisory(f"Error occurred while checking Node.js version: {e}")

    return StepResult.ok()


def _check_cli(
    ctx: SetupContext,
    executable: str,
    label: str,
    install_command: str,
) -> StepResult:
    try:
        if ctx.which(executable) is None:
            return StepResult.advisory(
                f"Oops! {label} not found. Please install it first. 🛠️",
                hints=(
                    "👩‍🔧 You can install it with the command:",
                    f"{install_command} 🚀",
                ),
            )
    except Exception as e:
        return StepResult.advisory(f"Error occurred while checking {label}: {e}")

    return StepResult.ok()


def check_supabase_cli(ctx: SetupContext) -> StepResult:
    """Check that the Supabase CLI is on PATH."""
    return _check_cli(ctx, "supabase", "Supabase CLI", "npm install -g supabase")


def check_github_cli(ctx: SetupContext) -> StepResult:
    """Check that the GitHub CLI is on PATH."""
    return _check_cli(ctx, "gh", "GitHub CLI", "brew install gh")


def probe_environment(ctx: SetupContext) -> StepResult:
    """Run every toolchain check; never fatal."""
    return merge_results([
        check_node_version(ctx),
        check_supabase_cli(ctx),
        check_github_cli(ctx),
    ])

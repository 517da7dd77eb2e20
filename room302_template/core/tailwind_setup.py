"""Plain Tailwind CSS setup for projects that drop @nuxt/ui."""

from __future__ import annotations

import re

from room302_template.core.context import SetupContext
from room302_template.core.nuxt_config import NuxtConfig
from room302_template.core.step_result import StepResult
from room302_template.helpers.helpers_logging import print_info, print_success

TAILWIND_CONFIG = "tailwind.config.js"
POSTCSS_CONFIG = "postcss.config.js"
CSS_ENTRY = "assets/css/tailwind.css"
CSS_ENTRY_ALIAS = f"~/{CSS_ENTRY}"

DEFAULT_TAILWIND_CONFIG = """/** @type {import('tailwindcss').Config} */
module.exports = {
  content: [
    './components/**/*.{js,vue,ts}',
    './layouts/**/*.vue',
    './pages/**/*.vue',
    './plugins/**/*.{js,ts}',
    './app.vue',
    './error.vue',
  ],
  theme: {
    extend: {},
  },
  plugins: [],
}
"""

DEFAULT_POSTCSS_CONFIG = """module.exports = {
  plugins: {
    tailwindcss: {},
    autoprefixer: {},
  },
}
"""

DEFAULT_CSS_ENTRY = """@tailwind base;
@tailwind components;
@tailwind utilities;
"""

_UI_REF = r"""(?:require\(\s*)?(['"])@nuxt/ui[^'"]*\1(?:\s*\))?"""
_UI_IMPORT_LINE = re.compile(
    r"""^[ \t]*(?:import\b[^\n]*|[^\n]*=\s*require\(\s*)(['"])@nuxt/ui[^'"]*\1[^\n]*\n?""",
    re.MULTILINE,
)
_UI_ENTRY_LINE = re.compile(r"^[ \t]*" + _UI_REF + r"[ \t]*,?[ \t]*\n", re.MULTILINE)
_UI_REF_WITH_FOLLOWING_COMMA = re.compile(_UI_REF + r"\s*,[ \t]*")
_UI_REF_WITH_PRECEDING_COMMA = re.compile(r",?\s*" + _UI_REF)
_BLANK_RUN = re.compile(r"\n(?:[ \t]*\n){2,}")
_WHITESPACE_ONLY_LINE = re.compile(r"^[ \t]+$", re.MULTILINE)


def strip_ui_references(text: str) -> str:
    """Remove @nuxt/ui imports, requires and list entries from a JS config.

    A list entry is removed together with its separating comma; blank lines
    left behind are collapsed to one.
    """
    text = _UI_IMPORT_LINE.sub("", text)
    text = _UI_ENTRY_LINE.sub("", text)
    text = _UI_REF_WITH_FOLLOWING_COMMA.sub("", text)
    text = _UI_REF_WITH_PRECEDING_COMMA.sub("", text)
    text = _WHITESPACE_ONLY_LINE.sub("", text)
    return _BLANK_RUN.sub("\n\n", text)


def install_tailwind_dependencies(ctx: SetupContext) -> StepResult:
    settings = ctx.settings
    print_info("📦 Installing Tailwind CSS dependencies...")
    result = ctx.run([settings.package_manager, "add", "-D", *settings.tailwind_dependencies])
    if not result.ok:
        return StepResult.advisory("Failed to install Tailwind dependencies")
    return StepResult.ok()


def write_tailwind_config(ctx: SetupContext) -> None:
    """Clean an existing tailwind.config.js or create a default one."""
    path = ctx.path(TAILWIND_CONFIG)
    if path.exists():
        path.write_text(strip_ui_references(path.read_text(encoding="utf-8")), encoding="utf-8")
        print_success(f"✅ Cleaned @nuxt/ui references from {TAILWIND_CONFIG}")
    else:
        path.write_text(DEFAULT_TAILWIND_CONFIG, encoding="utf-8")
        print_success(f"✅ Created {TAILWIND_CONFIG}")


def write_postcss_config(ctx: SetupContext) -> None:
    path = ctx.path(POSTCSS_CONFIG)
    if not path.exists():
        path.write_text(DEFAULT_POSTCSS_CONFIG, encoding="utf-8")
        print_success(f"✅ Created {POSTCSS_CONFIG}")


def write_css_entry(ctx: SetupContext) -> None:
    """Create assets/css/tailwind.css with the Tailwind layer directives."""
    path = ctx.path(CSS_ENTRY)
    if path.exists():
        return
    # The directory may exist without the file
    if not path.parent.is_dir():
        path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_CSS_ENTRY, encoding="utf-8")
    print_success(f"✅ Created {CSS_ENTRY}")


def include_css_entry(ctx: SetupContext) -> None:
    """Reference the CSS entry from nuxt.config.ts unless it already is."""
    path = ctx.path("nuxt.config.ts")
    config = NuxtConfig(path.read_text(encoding="utf-8"))
    if config.references_stylesheet(CSS_ENTRY_ALIAS):
        return
    config.add_stylesheet(CSS_ENTRY_ALIAS)
    path.write_text(config.render(), encoding="utf-8")
    print_success(f"✅ Added {CSS_ENTRY_ALIAS} to nuxt.config.ts")


def setup_tailwind(ctx: SetupContext) -> StepResult:
    """Install Tailwind and write its config files.

    A failed install skips the file steps, which all assume the toolchain
    is present.
    """
    result = install_tailwind_dependencies(ctx)
    if not result.is_ok:
        return result

    try:
        write_tailwind_config(ctx)
        write_postcss_config(ctx)
        write_css_entry(ctx)
        include_css_entry(ctx)
    except Exception as e:
        return StepResult.advisory(f"Error occurred while setting up Tailwind: {e}")

    print_success("✅ Tailwind CSS is ready!")
    return StepResult.ok()

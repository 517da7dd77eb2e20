"""Shared fixtures for the room302-template test suite.

``FakeRunner`` stands in for ``run_command``: it records every command and
answers with configurable exit codes, so no test spawns git, gh or yarn.
``write_template`` writes a minimal copy of the Nuxt template to disk.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from room302_template.config import WizardSettings
from room302_template.core.context import SetupContext
from room302_template.helpers.shell import CommandResult

NUXT_CONFIG = """// https://nuxt.com/docs/api/configuration/nuxt-config
export default defineNuxtConfig({
  devtools: { enabled: true },
  modules: [
    '@nuxt/ui',
    '@nuxt/content',
    '@vueuse/nuxt',
  ],
  content: { documentDriven: true },
  runtimeConfig: {
    public: {},
  },
})
"""

PACKAGE_JSON: dict[str, object] = {
    "name": "nuxt-template",
    "private": True,
    "license": "UNLICENSED",
    "scripts": {"dev": "nuxt dev", "build": "nuxt build"},
    "dependencies": {
        "@nuxt/content": "^2.13.0",
        "@nuxt/ui": "^2.18.0",
        "@vueuse/nuxt": "^10.11.0",
        "nuxt": "^3.15.1",
    },
}

TAILWIND_CONFIG = """import type { Config } from 'tailwindcss'

export default <Partial<Config>>{
  content: [
    './components/**/*.{vue,js,ts}',
  ],
  presets: [
    require('@nuxt/ui/tailwind'),
  ],
}
"""

APP_VUE = """<template>
  <NuxtPage />
</template>
"""

CONTENT_FILES = {
    "content/index.md": "# Hello\n",
    "components/ProseA.vue": "<template><a><slot /></a></template>\n",
    "components/AppHeader.vue": "<template><header /></template>\n",
    "composables/useOpenAi.js": "export const useOpenAi = () => {}\n",
}

Handler = Callable[[list[str], Path | None], None]


@dataclass
class Call:
    args: list[str]
    cwd: Path | None
    capture: bool


@dataclass
class FakeRunner:
    """Records commands; fails those whose prefix is in ``failures``."""

    failures: set[tuple[str, ...]] = field(default_factory=set)
    stdout: dict[tuple[str, ...], str] = field(default_factory=dict)
    handlers: dict[tuple[str, ...], Handler] = field(default_factory=dict)
    calls: list[Call] = field(default_factory=list)

    def fail(self, *prefix: str) -> None:
        self.failures.add(prefix)

    def on(self, prefix: tuple[str, ...], handler: Handler) -> None:
        self.handlers[prefix] = handler

    @staticmethod
    def _matches(args: list[str], table: dict | set) -> tuple[str, ...] | None:
        for prefix in table:
            if tuple(args[:len(prefix)]) == prefix:
                return prefix
        return None

    def __call__(
        self,
        args: list[str],
        cwd: Path | None = None,
        capture: bool = False,
    ) -> CommandResult:
        self.calls.append(Call(list(args), cwd, capture))

        handler_key = self._matches(args, self.handlers)
        if handler_key is not None:
            self.handlers[handler_key](list(args), cwd)

        if self._matches(args, self.failures) is not None:
            return CommandResult(1, "", "simulated failure")

        stdout_key = self._matches(args, self.stdout)
        return CommandResult(0, self.stdout[stdout_key] if stdout_key else "", "")

    @property
    def commands(self) -> list[list[str]]:
        return [call.args for call in self.calls]

    def ran(self, *prefix: str) -> bool:
        return any(tuple(args[:len(prefix)]) == prefix for args in self.commands)


def write_template(
    target: Path,
    *,
    nuxt_config: str = NUXT_CONFIG,
    package_json: dict[str, object] | None = None,
    tailwind_config: str | None = TAILWIND_CONFIG,
    skip: tuple[str, ...] = (),
) -> Path:
    """Write a minimal clone of the Nuxt template into ``target``."""
    target.mkdir(parents=True, exist_ok=True)
    files = {
        "nuxt.config.ts": nuxt_config,
        "package.json": json.dumps(package_json or PACKAGE_JSON, indent=2) + "\n",
        "app.vue": APP_VUE,
    }
    files.update(CONTENT_FILES)
    if tailwind_config is not None:
        files["tailwind.config.js"] = tailwind_config
    for name, content in files.items():
        if name not in skip:
            path = target / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
    (target / ".git").mkdir(exist_ok=True)
    (target / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    return target


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def settings() -> WizardSettings:
    return WizardSettings()


@pytest.fixture
def make_ctx(
    tmp_path: Path,
    runner: FakeRunner,
    settings: WizardSettings,
) -> Callable[..., SetupContext]:
    """Factory for a ``SetupContext`` rooted at ``tmp_path/<name>``."""

    def _make(name: str = "demo", with_template: bool = True, **template_kwargs) -> SetupContext:
        project_dir = tmp_path / name
        if with_template:
            write_template(project_dir, **template_kwargs)
        return SetupContext(
            project_dir=project_dir,
            settings=settings,
            runner=runner,
            which=lambda tool: f"/usr/local/bin/{tool}",
        )

    return _make


@pytest.fixture
def ctx(make_ctx: Callable[..., SetupContext]) -> SetupContext:
    return make_ctx()

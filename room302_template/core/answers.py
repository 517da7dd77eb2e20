"""The operator's choices for one wizard run."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class UIFramework(str, Enum):
    """UI layer the generated project ships with."""

    NUXT_UI = "nuxt-ui"
    TAILWIND = "tailwind"
    NONE = "none"


class RepoScope(str, Enum):
    """Where the GitHub repository is created."""

    PERSONAL = "personal"
    ORGANIZATION = "room302studio"
    OTHER = "other"


LICENSES: tuple[str, ...] = (
    "mit",
    "copyright",
    "unlicense",
    "ecl-2.0",
    "CC-BY-4.0",
    "proprietary",
)

DEFAULT_PROJECT_NAME = "my-nuxt-project"

# Usable as a directory, an npm package name and a GitHub repo name
_PROJECT_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def validate_project_name(name: str) -> str:
    """Return the stripped project name or raise ValueError."""
    name = name.strip()
    if not name:
        raise ValueError("Project name must not be empty")
    if not _PROJECT_NAME_RE.match(name):
        raise ValueError(
            f"Invalid project name '{name}': use letters, digits, '.', '_' or '-'",
        )
    return name


@dataclass(frozen=True)
class SetupAnswers:
    """Answers collected once at startup; read-only afterwards."""

    project_name: str
    ui_framework: UIFramework = UIFramework.NUXT_UI
    use_nuxt_content: bool = True
    use_openai: bool = True
    is_repo_public: bool = True
    license: str = "mit"
    github_org: RepoScope = RepoScope.PERSONAL
    custom_org: str | None = None
    auto_commit_push: bool = True
    init_supabase: bool = False
    use_netlify: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "project_name", validate_project_name(self.project_name))
        object.__setattr__(self, "ui_framework", UIFramework(self.ui_framework))
        object.__setattr__(self, "github_org", RepoScope(self.github_org))

        if self.license not in LICENSES:
            raise ValueError(
                f"Unknown license '{self.license}' (expected one of: {', '.join(LICENSES)})",
            )

        if self.github_org is RepoScope.OTHER:
            if not self.custom_org or not self.custom_org.strip():
                raise ValueError("A custom organization name is required for scope 'other'")
            object.__setattr__(self, "custom_org", self.custom_org.strip())
        elif self.custom_org is not None:
            object.__setattr__(self, "custom_org", None)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> SetupAnswers:
        """Build answers from a prompt result keyed by field name.

        Raises:
            ValueError: If a value is missing or outside its allowed set
            KeyError: If ``project_name`` is absent
        """
        custom_org = data.get("custom_org")
        return cls(
            project_name=str(data["project_name"]),
            ui_framework=UIFramework(str(data.get("ui_framework", UIFramework.NUXT_UI.value))),
            use_nuxt_content=bool(data.get("use_nuxt_content", True)),
            use_openai=bool(data.get("use_openai", True)),
            is_repo_public=bool(data.get("is_repo_public", True)),
            license=str(data.get("license", "mit")),
            github_org=RepoScope(str(data.get("github_org", RepoScope.PERSONAL.value))),
            custom_org=str(custom_org) if custom_org is not None else None,
            auto_commit_push=bool(data.get("auto_commit_push", True)),
            init_supabase=bool(data.get("init_supabase", False)),
            use_netlify=bool(data.get("use_netlify", False)),
        )

"""Read and rewrite the cloned project's ``package.json``."""

from __future__ import annotations

import json
from pathlib import Path

UI_DEPENDENCY = "@nuxt/ui"
CONTENT_DEPENDENCY = "@nuxt/content"
_DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")


class ManifestError(Exception):
    """Raised when package.json is not a JSON object."""


def load_manifest(path: Path) -> dict[str, object]:
    """Parse package.json.

    Raises:
        OSError: If the file cannot be read
        ManifestError: If the content is not a JSON object
    """
    try:
        data: object = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ManifestError(f"{path.name} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"{path.name} must contain a JSON object")
    return data


def render_manifest(data: dict[str, object]) -> str:
    """Serialize the way npm/yarn write package.json."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def remove_dependency(data: dict[str, object], name: str) -> bool:
    """Delete ``name`` from every dependency section. Returns True if found."""
    removed = False
    for section in _DEPENDENCY_SECTIONS:
        deps = data.get(section)
        if isinstance(deps, dict) and name in deps:
            del deps[name]
            removed = True
    return removed


def apply_answers(
    data: dict[str, object],
    project_name: str,
    license_id: str,
    keep_ui_dependency: bool,
    keep_content_dependency: bool = True,
) -> dict[str, object]:
    """Set name and license, and drop the UI and Content dependencies unless kept."""
    data["name"] = project_name
    data["license"] = license_id
    if not keep_ui_dependency:
        remove_dependency(data, UI_DEPENDENCY)
    if not keep_content_dependency:
        remove_dependency(data, CONTENT_DEPENDENCY)
    return data

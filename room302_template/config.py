"""User configuration for the room302-template wizard.

Settings are read from ``~/.room302/config.yaml`` (or the file named by
``$ROOM302_TEMPLATE_CONFIG``). Every key is optional; anything left out
falls back to the defaults below.

Example:
    template_repo: room302studio/nuxt-template
    organization: room302studio
    organization_label: Room302 Studio
    package_manager: yarn
    editor: code
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path

from ruamel.yaml.error import YAMLError

from room302_template.helpers.helpers_logging import print_warning
from room302_template.helpers.yaml_loader import load_yaml_file

CONFIG_ENV_VAR = "ROOM302_TEMPLATE_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".room302" / "config.yaml"


class ConfigError(Exception):
    """Raised when the user configuration file cannot be used."""


@dataclass(frozen=True)
class WizardSettings:
    """Tooling and naming choices that are not asked interactively."""

    template_repo: str = "room302studio/nuxt-template"
    organization: str = "room302studio"
    organization_label: str = "Room302 Studio"
    package_manager: str = "yarn"
    editor: str = "code"
    commit_message: str = "feat: begin project 🪴"
    default_branch: str = "main"
    min_node_version: str = "18.0"
    tailwind_dependencies: tuple[str, ...] = field(
        default=("tailwindcss", "postcss", "autoprefixer"),
    )


def resolve_config_path(path: Path | None = None) -> Path:
    """Return the config file location: explicit path, env var, or default."""
    if path is not None:
        return path
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


def _coerce(name: str, value: object, default: object) -> object:
    """Check a raw YAML value against the type of the field's default."""
    if isinstance(default, tuple):
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"'{name}' must be a list of strings")
        return tuple(str(v) for v in value)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{name}' must be a non-empty string")
    return str(value).strip()


def settings_from_mapping(data: dict[str, object]) -> WizardSettings:
    """Build settings from a parsed config document.

    Unknown keys are reported and ignored.

    Raises:
        ConfigError: If a known key has a value of the wrong type
    """
    defaults = WizardSettings()
    known = {f.name for f in fields(WizardSettings)}
    overrides: dict[str, object] = {}

    for key, value in data.items():
        if key not in known:
            print_warning(f"Ignoring unknown config key '{key}'")
            continue
        overrides[key] = _coerce(key, value, getattr(defaults, key))

    return replace(defaults, **overrides)


def load_settings(path: Path | None = None) -> WizardSettings:
    """Load wizard settings from the user config file.

    Args:
        path: Explicit config file; see ``resolve_config_path`` otherwise

    Returns:
        Settings with file values applied over the defaults. A missing or
        empty file yields the defaults.

    Raises:
        ConfigError: If the file is not valid YAML, is not a mapping, or
            holds a wrongly typed value
    """
    config_path = resolve_config_path(path)
    if not config_path.exists():
        return WizardSettings()

    try:
        raw = load_yaml_file(config_path)
    except (OSError, YAMLError) as e:
        raise ConfigError(f"Could not read {config_path}: {e}") from e

    if raw is None:
        return WizardSettings()
    if not isinstance(raw, dict):
        raise ConfigError(f"{config_path} must contain a mapping at the top level")

    return settings_from_mapping({str(k): v for k, v in raw.items()})

#!/usr/bin/env python3
"""
YAML loader for the wizard's user configuration file.
Provides a shared ruamel.yaml instance with comment preservation.
"""

from pathlib import Path
from typing import Union, cast

from ruamel.yaml import YAML

# Recursive type for nested YAML structures
ConfigValue = Union[str, int, float, bool, None, 'ConfigDict', list['ConfigValue']]
ConfigDict = dict[str, ConfigValue]


def _create_yaml_loader() -> YAML:
    """Create the YAML loader instance.

    Returns:
        ruamel.yaml round-trip loader with comment preservation
    """
    yaml_obj = YAML()
    yaml_obj.preserve_quotes = True
    yaml_obj.default_flow_style = False
    return yaml_obj


# Singleton YAML loader instance
yaml = _create_yaml_loader()


def load_yaml_file(file_path: Path) -> ConfigValue:
    """Load a YAML file.

    ruamel.yaml's round-trip load() does not execute arbitrary Python code
    from YAML content.

    Args:
        file_path: Path to YAML file to load

    Returns:
        Parsed document (None for an empty file)

    Raises:
        FileNotFoundError: If file does not exist
    """
    if not file_path.exists():
        raise FileNotFoundError(f"YAML file not found: {file_path}")

    with file_path.open(encoding='utf-8') as f:
        return cast(ConfigValue, yaml.load(f))


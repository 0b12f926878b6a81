"""Loading of preset variable values from the command line and files."""

from pathlib import Path
from typing import Dict, List, Optional

import yaml

from t3.exceptions import ConfigError


def parse_value_pairs(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Parse KEY=VALUE pairs given with --value."""
    values: Dict[str, str] = {}
    for item in pairs or []:
        if '=' not in item:
            raise ConfigError(f"Invalid value format: {item}. Expected KEY=VALUE")
        key, value = item.split('=', 1)
        if not key:
            raise ConfigError(f"Invalid KEY in pair: {item}")
        values[key] = value
    return values


def load_values_file(path: Path) -> Dict[str, Optional[str]]:
    """
    Load preset values from a YAML (or JSON) mapping.

    Keys and values are converted to strings; null values are kept as None
    so the variable is skipped without a prompt.
    """
    if not path.exists():
        raise ConfigError(f"Values file not found: {path}", path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load values file {path}: {e}", path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Values file must contain a mapping, got {type(data).__name__}", path
        )

    return {
        str(key): None if value is None else str(value)
        for key, value in data.items()
    }


def load_presets(
    pairs: Optional[List[str]] = None,
    values_file: Optional[str] = None
) -> Dict[str, Optional[str]]:
    """Merge values file and --value pairs; pairs win on conflict."""
    presets: Dict[str, Optional[str]] = {}
    if values_file:
        presets.update(load_values_file(Path(values_file)))
    presets.update(parse_value_pairs(pairs))
    return presets

"""Gateway: YAML configuration loader."""

from __future__ import annotations

from pathlib import Path

import yaml

from prompt_relay.l1_entities.errors import ConfigurationError
from prompt_relay.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS


class YamlConfigLoader:
    """Reads the user config file into a plain dict; validation happens in L4."""

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return the merged YAML data. Raises FileNotFoundError for a missing explicit path.

        Unparsable YAML, or a top level that is not a mapping, raises ConfigurationError.
        """
        path = _resolve_path(config_path)
        data = _read_mapping(path) if path is not None else {}
        if overrides:
            deep_merge(data, overrides)
        return data


def _resolve_path(config_path: str | None) -> Path | None:
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f'Config file not found: {path}')
        return path
    return next((p for p in DEFAULT_CONFIG_PATHS if p.exists()), None)


def _read_mapping(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text(encoding='utf-8'))
    except yaml.YAMLError as e:
        raise ConfigurationError(f'{path}: invalid YAML ({type(e).__name__})') from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f'{path}: top level must be a mapping, got {type(data).__name__}')
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base

"""YAML config file loading.

This module reads an optional YAML settings file and checks its keys
so misspelled settings fail loudly instead of being ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence, cast

from core.errors import EventLoadConfigError, EventLoadDependencyError


def load_config_file(config_path: str, allowed_keys: Sequence[str]) -> dict[str, str]:
    """Load flat settings from a YAML mapping.

    Args:
        config_path: File path to YAML config.
        allowed_keys: Accepted setting names.

    Returns:
        Setting name to string value. Null values are omitted.

    Raises:
        EventLoadDependencyError: If PyYAML is unavailable.
        EventLoadConfigError: If file is missing, invalid, or has unknown keys.
    """
    payload = _load_yaml_payload(config_path)
    if not isinstance(payload, Mapping):
        raise EventLoadConfigError(
            f"Invalid config file {config_path}: expected a mapping at the root, "
            f"got {type(payload).__name__}."
        )
    settings: dict[str, str] = {}
    for key, value in payload.items():
        if key not in allowed_keys:
            raise EventLoadConfigError(
                f"Unknown setting '{key}' in config file {config_path}. "
                f"Supported settings: {', '.join(allowed_keys)}."
            )
        if value is None:
            continue
        settings[key] = _stringify(key, value, config_path)
    return settings


def _load_yaml_payload(config_path: str) -> object:
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise EventLoadDependencyError(
            "YAML config support requires PyYAML. Install with 'pip install pyyaml'."
        ) from error
    config_file = Path(config_path).expanduser().resolve()
    if not config_file.exists():
        raise EventLoadConfigError(
            f"Config file does not exist at {config_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(config_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise EventLoadConfigError(
            f"Failed to read config file at {config_file}: {error}. "
            "Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise EventLoadConfigError(
            f"Failed to parse YAML config at {config_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        return {}
    return payload


def _stringify(key: str, value: object, config_path: str) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise EventLoadConfigError(
        f"Invalid value for '{key}' in config file {config_path}: "
        f"expected a scalar, got {type(value).__name__}."
    )

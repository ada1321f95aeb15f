"""Layered configuration loading.

Each layer is a YAML mapping of option names to booleans. Layers are applied
in order, so later files override earlier ones:

1. Built-in defaults
2. Global config (~/.skeletor/config.yaml)
3. Local config (./.skeletor/config.yaml)
4. The file named by $SKELETOR_CONFIG, if set
"""

import logging
import os
from dataclasses import fields
from pathlib import Path

import yaml

from skeletor.config.schema import DEFAULT_CONFIG, SkeletorConfig

logger = logging.getLogger(__name__)

CONFIG_DIRNAME = ".skeletor"
CONFIG_FILENAME = "config.yaml"
CONFIG_ENV_VAR = "SKELETOR_CONFIG"

_OPTION_NAMES = frozenset(f.name for f in fields(SkeletorConfig))


def get_home_config_path() -> Path:
    return Path.home() / CONFIG_DIRNAME / CONFIG_FILENAME


def get_local_config_path() -> Path:
    return Path.cwd() / CONFIG_DIRNAME / CONFIG_FILENAME


def get_env_config_path() -> Path | None:
    """Path named by $SKELETOR_CONFIG, or None when unset or empty."""
    value = os.environ.get(CONFIG_ENV_VAR)
    return Path(value).expanduser() if value else None


def get_config_search_paths() -> list[tuple[str, Path]]:
    """Return (layer name, path) pairs, lowest precedence first."""
    paths = [
        ("global", get_home_config_path()),
        ("local", get_local_config_path()),
    ]
    env_path = get_env_config_path()
    if env_path is not None:
        paths.append((CONFIG_ENV_VAR, env_path))
    return paths


def load_yaml_config(path: Path) -> dict[str, object] | None:
    """Read a config file as a mapping.

    Returns None when the file is missing or empty. Files that cannot be
    read or parsed, or that hold something other than a mapping, are skipped
    with a warning.
    """
    if not path.is_file():
        return None
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.warning("Ignoring config file %s: %s", path, e)
        return None
    if data is None:
        return None
    if not isinstance(data, dict):
        logger.warning(
            "Ignoring config file %s: expected a mapping, got %s",
            path,
            type(data).__name__,
        )
        return None
    result: dict[str, object] = data
    return result


def _options_from_mapping(data: dict[str, object], path: Path) -> SkeletorConfig:
    """Keep the recognized boolean options of a config mapping."""
    options: dict[str, object] = {}
    for key, value in data.items():
        if key not in _OPTION_NAMES:
            logger.warning("Unknown option '%s' in %s", key, path)
        elif value is not None and not isinstance(value, bool):
            logger.warning(
                "Option '%s' in %s must be true or false, got %r", key, path, value
            )
        else:
            options[key] = value
    return SkeletorConfig.from_dict(options)


def load_config() -> SkeletorConfig:
    """Load the merged configuration from every layer that exists."""
    config = DEFAULT_CONFIG
    for layer, path in get_config_search_paths():
        data = load_yaml_config(path)
        if not data:
            continue
        logger.debug("Applying %s config from %s", layer, path)
        config = config.merge(_options_from_mapping(data, path))
    return config

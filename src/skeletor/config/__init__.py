"""Configuration loading."""

from skeletor.config.loader import load_config
from skeletor.config.schema import DEFAULT_CONFIG, SkeletorConfig

__all__ = [
    "DEFAULT_CONFIG",
    "SkeletorConfig",
    "load_config",
]

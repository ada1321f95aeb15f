"""Manifest file loading for template directories."""

from __future__ import annotations

import logging
from pathlib import Path

from skeletor.config.schema import DEFAULT_CONFIG, SkeletorConfig
from skeletor.manifest.base import Manifest
from skeletor.manifest.codec import load_manifest_data
from skeletor.manifest.errors import ManifestNotFoundError, ManifestReadError
from skeletor.manifest.validator import validate_manifest

logger = logging.getLogger(__name__)

# Constants
MANIFEST_FILENAME = "manifest.yaml"


def get_manifest_path(path: Path) -> Path:
    """Resolve a template directory or manifest file to the manifest path.

    A directory maps to <dir>/manifest.yaml; any other path is used as-is.
    """
    if path.is_dir():
        return path / MANIFEST_FILENAME
    return path


def load_manifest_file(path: Path) -> Manifest:
    """Read and decode the manifest for a template directory or file.

    Raises:
        ManifestNotFoundError: If the manifest file does not exist.
        ManifestReadError: If the manifest file exists but cannot be read.
        DecodeError: If the file content is not a manifest document.
    """
    manifest_path = get_manifest_path(path)
    if not manifest_path.is_file():
        raise ManifestNotFoundError(manifest_path)

    logger.debug("Loading manifest from %s", manifest_path)
    try:
        content = manifest_path.read_bytes()
    except OSError as err:
        raise ManifestReadError(manifest_path, err.strerror or str(err)) from err
    return load_manifest_data(content)


def load_and_validate(path: Path, config: SkeletorConfig | None = None) -> Manifest:
    """Load a manifest and validate it with the options from `config`.

    Returns the validated Manifest.

    Raises:
        ManifestError: If loading, decoding or validation fails.
    """
    config = DEFAULT_CONFIG.merge(config) if config is not None else DEFAULT_CONFIG
    manifest = load_manifest_file(path)
    validate_manifest(
        manifest,
        strict_types=bool(config.strict_types),
        unique_names=bool(config.unique_names),
    )
    return manifest

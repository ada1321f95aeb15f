"""Template manifest file loading."""

from skeletor.templates.loader import (
    MANIFEST_FILENAME,
    get_manifest_path,
    load_and_validate,
    load_manifest_file,
)

__all__ = [
    "MANIFEST_FILENAME",
    "get_manifest_path",
    "load_and_validate",
    "load_manifest_file",
]

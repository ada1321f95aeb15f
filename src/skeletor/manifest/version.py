"""Manifest version compatibility checks."""

import logging

import semver

from skeletor.manifest.errors import (
    IncompatibleVersionError,
    MalformedVersionError,
    MissingVersionError,
)

logger = logging.getLogger(__name__)

# Newest manifest format this engine understands. Bump together with any
# change to the manifest schema.
MAX_COMPAT_MANIFEST_VERSION = "1.0.0"


def parse_version(version: str) -> semver.Version:
    """Parse a strict semantic version string.

    Raises:
        MalformedVersionError: If the text is not a semantic version.
    """
    try:
        return semver.Version.parse(version)
    except (ValueError, TypeError) as err:
        raise MalformedVersionError(version, str(err)) from err


def check_version(version: str) -> None:
    """Check that a manifest version is at most MAX_COMPAT_MANIFEST_VERSION.

    Older versions, including 0.x and pre-releases of the maximum, are
    accepted. Build metadata is ignored when comparing.

    Raises:
        MissingVersionError: If the version is empty.
        MalformedVersionError: If the version is not a semantic version.
        IncompatibleVersionError: If the version is newer than supported.
    """
    if not version:
        raise MissingVersionError()

    parsed = parse_version(version)
    max_compat = parse_version(MAX_COMPAT_MANIFEST_VERSION)

    if parsed > max_compat:
        raise IncompatibleVersionError(version, MAX_COMPAT_MANIFEST_VERSION)

    logger.debug("Manifest version %s is compatible", version)

"""Manifest validation entry points."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from skeletor.manifest.base import Manifest, Parameter
from skeletor.manifest.errors import (
    DuplicateParameterError,
    ManifestError,
    ParameterError,
    VersionError,
)
from skeletor.manifest.params import check_parameter, validate_parameters
from skeletor.manifest.version import check_version

logger = logging.getLogger(__name__)


def _duplicate_name_errors(
    params: Sequence[Parameter],
) -> list[DuplicateParameterError]:
    """Return an error for every repeat of an earlier parameter name."""
    first_seen: dict[str, int] = {}
    errors: list[DuplicateParameterError] = []
    for index, param in enumerate(params):
        if not param.name:
            continue
        if param.name in first_seen:
            errors.append(
                DuplicateParameterError(index, param.name, first_seen[param.name])
            )
        else:
            first_seen[param.name] = index
    return errors


def validate_manifest(
    manifest: Manifest,
    strict_types: bool = False,
    unique_names: bool = False,
) -> None:
    """Validate a decoded manifest.

    The version is checked first. Parameters are only examined once the
    version is known to be compatible, since their meaning depends on it.

    Args:
        manifest: The manifest to validate.
        strict_types: Reject unrecognized parameter types instead of treating
            them as strings.
        unique_names: Reject manifests that declare a parameter name twice.

    Raises:
        VersionError: If the version is missing, malformed or too new.
        ParameterError: The first parameter violation found.
    """
    check_version(manifest.version)
    validate_parameters(manifest.parameters, strict_types=strict_types)

    if unique_names:
        duplicates = _duplicate_name_errors(manifest.parameters)
        if duplicates:
            raise duplicates[0]

    logger.debug("Manifest %s is valid", manifest.version)


def _collect_parameter_errors(
    params: Sequence[Parameter],
    strict_types: bool = False,
    unique_names: bool = False,
) -> list[ParameterError]:
    """Return every parameter violation instead of stopping at the first.

    Each parameter contributes at most one type error.
    """
    errors: list[ParameterError] = []
    for index, param in enumerate(params):
        try:
            check_parameter(param, index, strict_types=strict_types)
        except ParameterError as err:
            errors.append(err)

    if unique_names:
        errors.extend(_duplicate_name_errors(params))
        errors.sort(key=lambda e: e.index)

    return errors


def collect_manifest_errors(
    manifest: Manifest,
    strict_types: bool = False,
    unique_names: bool = False,
) -> list[ManifestError]:
    """Validate a manifest and return every violation found.

    The version gate applies as in `validate_manifest`: when it fails, the
    version error is the only one returned and parameters are not examined.
    An empty list means the manifest is valid.
    """
    try:
        check_version(manifest.version)
    except VersionError as err:
        return [err]

    return list(
        _collect_parameter_errors(
            manifest.parameters,
            strict_types=strict_types,
            unique_names=unique_names,
        )
    )

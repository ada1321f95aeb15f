"""Template manifest model, codec and validation."""

from skeletor.manifest.base import (
    BOOLEAN_TYPE,
    INTEGER_TYPE,
    PARAMETER_TYPES,
    STRING_TYPE,
    Manifest,
    Parameter,
    ParameterType,
)
from skeletor.manifest.codec import dump_manifest, load_manifest_data
from skeletor.manifest.errors import (
    BooleanEnumNotAllowedError,
    BooleanParseError,
    DecodeError,
    DuplicateParameterError,
    IncompatibleVersionError,
    IntegerParseError,
    MalformedVersionError,
    ManifestError,
    ManifestNotFoundError,
    ManifestReadError,
    MissingTypeError,
    MissingVersionError,
    ParameterError,
    UnknownTypeError,
    VersionError,
)
from skeletor.manifest.params import parse_boolean, parse_integer, validate_parameters
from skeletor.manifest.validator import collect_manifest_errors, validate_manifest
from skeletor.manifest.version import MAX_COMPAT_MANIFEST_VERSION, check_version

__all__ = [
    "BOOLEAN_TYPE",
    "INTEGER_TYPE",
    "MAX_COMPAT_MANIFEST_VERSION",
    "PARAMETER_TYPES",
    "STRING_TYPE",
    "BooleanEnumNotAllowedError",
    "BooleanParseError",
    "DecodeError",
    "DuplicateParameterError",
    "IncompatibleVersionError",
    "IntegerParseError",
    "MalformedVersionError",
    "Manifest",
    "ManifestError",
    "ManifestNotFoundError",
    "ManifestReadError",
    "MissingTypeError",
    "MissingVersionError",
    "Parameter",
    "ParameterError",
    "ParameterType",
    "UnknownTypeError",
    "VersionError",
    "check_version",
    "collect_manifest_errors",
    "dump_manifest",
    "load_manifest_data",
    "parse_boolean",
    "parse_integer",
    "validate_manifest",
    "validate_parameters",
]

"""Exceptions raised while decoding and validating manifests."""

from __future__ import annotations


class ManifestError(Exception):
    """Base exception for manifest handling."""


class DecodeError(ManifestError):
    """Raised when manifest content is not a well-formed manifest document."""


class ManifestNotFoundError(ManifestError):
    """Raised when no manifest file exists at the requested location."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"Manifest file not found: {path}")


class ManifestReadError(ManifestError):
    """Raised when an existing manifest file cannot be read."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read manifest file {path}: {reason}")


class VersionError(ManifestError):
    """Base exception for manifest version failures."""


class MissingVersionError(VersionError):
    """Raised when a manifest does not declare a version."""

    def __init__(self) -> None:
        super().__init__("manifest file needs to provide a version")


class MalformedVersionError(VersionError):
    """Raised when the manifest version is not a semantic version."""

    def __init__(self, version: str, reason: str) -> None:
        self.version = version
        self.reason = reason
        super().__init__(f"invalid manifest version '{version}': {reason}")


class IncompatibleVersionError(VersionError):
    """Raised when the manifest version is newer than the engine supports."""

    def __init__(self, version: str, max_version: str) -> None:
        self.version = version
        self.max_version = max_version
        super().__init__(
            f"manifest version {version} is not supported, "
            f"needs to be at most {max_version}"
        )


class ParameterError(ManifestError):
    """Base exception for a single offending parameter.

    Carries the parameter's position and name so callers can point at the
    entry in the manifest.
    """

    def __init__(self, index: int, name: str, message: str) -> None:
        self.index = index
        self.name = name
        self.message = message
        super().__init__(f"parameter #{index + 1} ({name or '<unnamed>'}): {message}")


class MissingTypeError(ParameterError):
    """Raised when a parameter does not declare a type."""

    def __init__(self, index: int, name: str) -> None:
        super().__init__(
            index, name, "every parameter defined in manifest needs to provide a type"
        )


class UnknownTypeError(ParameterError):
    """Raised in strict mode when a parameter type tag is not recognized."""

    def __init__(self, index: int, name: str, type_tag: str) -> None:
        self.type_tag = type_tag
        super().__init__(index, name, f"unknown parameter type '{type_tag}'")


class IntegerParseError(ParameterError):
    """Raised when an integer parameter value is not a base-10 integer."""

    def __init__(self, index: int, name: str, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(index, name, f"{field} value '{value}' is not an integer")


class BooleanParseError(ParameterError):
    """Raised when a boolean parameter default is not a boolean literal."""

    def __init__(self, index: int, name: str, value: str) -> None:
        self.value = value
        super().__init__(index, name, f"defaultValue '{value}' is not a boolean")


class BooleanEnumNotAllowedError(ParameterError):
    """Raised when a boolean parameter declares an enum."""

    def __init__(self, index: int, name: str) -> None:
        super().__init__(index, name, "boolean type does not allow enums")


class DuplicateParameterError(ParameterError):
    """Raised when a parameter name is declared more than once."""

    def __init__(self, index: int, name: str, first_index: int) -> None:
        self.first_index = first_index
        super().__init__(
            index, name, f"name already declared by parameter #{first_index + 1}"
        )

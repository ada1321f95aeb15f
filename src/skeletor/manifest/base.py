"""Manifest and parameter definitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

STRING_TYPE = "string"
INTEGER_TYPE = "integer"
BOOLEAN_TYPE = "boolean"


class ParameterType(Enum):
    """Recognized parameter type tags."""

    STRING = STRING_TYPE
    INTEGER = INTEGER_TYPE
    BOOLEAN = BOOLEAN_TYPE

    @classmethod
    def from_tag(cls, tag: str) -> ParameterType | None:
        """Return the member for a tag, or None if the tag is not recognized."""
        try:
            return cls(tag)
        except ValueError:
            return None


# Type tags in the order they are offered to template authors
PARAMETER_TYPES: tuple[str, ...] = tuple(t.value for t in ParameterType)


@dataclass(frozen=True)
class Parameter:
    """A substitution variable exposed by a template.

    All values are kept in their textual form; `type` decides how
    `default_value` and `enum` are interpreted during validation.
    """

    name: str = ""
    prompt: str = ""
    type: str = ""  # "string" | "integer" | "boolean"
    enum: tuple[str, ...] = ()
    description: str = ""
    default_value: str = ""

    @property
    def parameter_type(self) -> ParameterType | None:
        """The parsed type tag, or None when empty or unrecognized."""
        return ParameterType.from_tag(self.type)

    def to_dict(self) -> dict[str, Any]:
        """Convert to manifest dictionary form, omitting empty fields."""
        result: dict[str, Any] = {}
        if self.name:
            result["name"] = self.name
        if self.prompt:
            result["prompt"] = self.prompt
        if self.type:
            result["type"] = self.type
        if self.enum:
            result["enum"] = list(self.enum)
        if self.description:
            result["description"] = self.description
        if self.default_value:
            result["defaultValue"] = self.default_value
        return result


@dataclass(frozen=True)
class Manifest:
    """Metadata for one template.

    Parameter order is the order in which values are requested when the
    template is instantiated and is never rearranged.
    """

    version: str = ""
    parameters: tuple[Parameter, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to manifest dictionary form, omitting empty fields."""
        result: dict[str, Any] = {}
        if self.version:
            result["version"] = self.version
        if self.parameters:
            result["parameters"] = [p.to_dict() for p in self.parameters]
        return result

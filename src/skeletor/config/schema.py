"""Configuration schema for skeletor."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class SkeletorConfig:
    """Skeletor configuration schema.

    Fields mirror the options of `skeletor manifest validate`.
    None values indicate "not set" and will use defaults or be inherited.
    """

    # Reject unknown parameter types instead of treating them as strings
    strict_types: bool | None = None
    # Reject manifests that repeat a parameter name
    unique_names: bool | None = None
    # Report every parameter error instead of the first one
    all_errors: bool | None = None

    def merge(self, other: SkeletorConfig) -> SkeletorConfig:
        """Merge another config into this one.

        Values from `other` take precedence when they are not None.
        Returns a new SkeletorConfig instance.
        """
        return SkeletorConfig(
            strict_types=(
                other.strict_types
                if other.strict_types is not None
                else self.strict_types
            ),
            unique_names=(
                other.unique_names
                if other.unique_names is not None
                else self.unique_names
            ),
            all_errors=(
                other.all_errors if other.all_errors is not None else self.all_errors
            ),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SkeletorConfig:
        """Create a SkeletorConfig from a dictionary. Unknown keys are ignored."""
        values: dict[str, bool | None] = {}
        for f in fields(cls):
            raw = data.get(f.name)
            values[f.name] = bool(raw) if raw is not None else None
        return cls(**values)


# Default configuration values (used when not specified anywhere)
DEFAULT_CONFIG = SkeletorConfig(
    strict_types=False,
    unique_names=False,
    all_errors=False,
)

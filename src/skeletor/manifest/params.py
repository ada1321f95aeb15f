"""Per-type validation of manifest parameters."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from skeletor.manifest.base import Parameter, ParameterType
from skeletor.manifest.errors import (
    BooleanEnumNotAllowedError,
    BooleanParseError,
    IntegerParseError,
    MissingTypeError,
    UnknownTypeError,
)

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Signed 64-bit range
INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1

TRUE_LITERALS: frozenset[str] = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS: frozenset[str] = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_integer(text: str) -> int:
    """Parse a base-10 integer literal.

    Only an optional sign followed by ASCII digits is accepted: no
    whitespace, underscores, decimal point or thousands separators.

    Raises:
        ValueError: If the text is not an integer or overflows 64 bits.
    """
    if not _INTEGER_RE.fullmatch(text):
        raise ValueError(f"invalid integer literal: {text!r}")
    value = int(text)
    if not INTEGER_MIN <= value <= INTEGER_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_boolean(text: str) -> bool:
    """Parse a boolean literal such as true, False, T, f, 1 or 0.

    Raises:
        ValueError: If the text is not a recognized spelling.
    """
    if text in TRUE_LITERALS:
        return True
    if text in FALSE_LITERALS:
        return False
    raise ValueError(f"invalid boolean literal: {text!r}")


def _check_integer(param: Parameter, index: int) -> None:
    if param.default_value:
        try:
            parse_integer(param.default_value)
        except ValueError as err:
            raise IntegerParseError(
                index, param.name, "defaultValue", param.default_value
            ) from err
    for value in param.enum:
        try:
            parse_integer(value)
        except ValueError as err:
            raise IntegerParseError(index, param.name, "enum", value) from err


def _check_boolean(param: Parameter, index: int) -> None:
    if param.default_value:
        try:
            parse_boolean(param.default_value)
        except ValueError as err:
            raise BooleanParseError(index, param.name, param.default_value) from err
    if param.enum:
        raise BooleanEnumNotAllowedError(index, param.name)


def check_parameter(param: Parameter, index: int, strict_types: bool = False) -> None:
    """Validate a single parameter at position `index`.

    Unrecognized type tags are treated like strings unless `strict_types`
    is set, in which case they are rejected.

    Raises:
        ParameterError: The first violation found for this parameter.
    """
    if not param.type:
        raise MissingTypeError(index, param.name)

    param_type = param.parameter_type
    if param_type is ParameterType.INTEGER:
        _check_integer(param, index)
    elif param_type is ParameterType.BOOLEAN:
        _check_boolean(param, index)
    elif param_type is None:
        if strict_types:
            raise UnknownTypeError(index, param.name, param.type)
        logger.warning(
            "Parameter '%s' has unknown type '%s', treating it as a string",
            param.name,
            param.type,
        )


def validate_parameters(
    params: Sequence[Parameter], strict_types: bool = False
) -> None:
    """Validate parameters in declaration order, stopping at the first failure.

    Raises:
        ParameterError: The first violation found.
    """
    for index, param in enumerate(params):
        check_parameter(param, index, strict_types=strict_types)

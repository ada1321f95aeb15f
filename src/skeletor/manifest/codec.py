"""YAML encoding and decoding of manifest documents."""

from __future__ import annotations

import datetime
import logging
import math
from decimal import Decimal
from typing import Any

import yaml

from skeletor.manifest.base import Manifest, Parameter
from skeletor.manifest.errors import DecodeError

logger = logging.getLogger(__name__)


def format_float(value: float) -> str:
    """Format a float with the fewest digits that read back as the same value.

    Integral values lose their fraction (8080.0 -> "8080"). Exponent notation
    is used below 1e-4 and from 1e6 up, e.g. "1e-05" and "1.5e+06".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    prefix = "-" if sign else ""
    exp10 = len(digits) + exponent - 1
    if exp10 < -4 or exp10 >= 6:
        mantissa = str(digits[0])
        if len(digits) > 1:
            mantissa += "." + "".join(str(d) for d in digits[1:])
        exp_sign = "+" if exp10 >= 0 else "-"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp10):02d}"
    return prefix + format(Decimal(repr(abs(value))).normalize(), "f")


def _to_text(value: Any, field: str) -> str:
    """Convert a YAML scalar to its text form.

    Numbers, booleans and dates are accepted for string fields so that
    unquoted values like ``defaultValue: 8080`` keep working. Null reads as
    the empty string.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, datetime.date):
        return value.isoformat()
    raise DecodeError(
        f"field '{field}' must be a string, got {type(value).__name__}"
    )


def _decode_enum(value: Any, field: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise DecodeError(
            f"field '{field}' must be a sequence, got {type(value).__name__}"
        )
    return tuple(_to_text(item, f"{field}[{i}]") for i, item in enumerate(value))


def _decode_parameter(data: Any, index: int) -> Parameter:
    field = f"parameters[{index}]"
    if data is None:
        return Parameter()
    if not isinstance(data, dict):
        raise DecodeError(
            f"field '{field}' must be a mapping, got {type(data).__name__}"
        )
    return Parameter(
        name=_to_text(data.get("name"), f"{field}.name"),
        prompt=_to_text(data.get("prompt"), f"{field}.prompt"),
        type=_to_text(data.get("type"), f"{field}.type"),
        enum=_decode_enum(data.get("enum"), f"{field}.enum"),
        description=_to_text(data.get("description"), f"{field}.description"),
        default_value=_to_text(data.get("defaultValue"), f"{field}.defaultValue"),
    )


def manifest_from_dict(data: dict[str, Any]) -> Manifest:
    """Build a Manifest from a parsed manifest mapping.

    Unknown keys are ignored. Raises DecodeError when a recognized key holds
    a value of the wrong shape.
    """
    params_raw = data.get("parameters")
    if params_raw is None:
        params_raw = []
    if not isinstance(params_raw, list):
        raise DecodeError(
            f"field 'parameters' must be a sequence, got {type(params_raw).__name__}"
        )

    return Manifest(
        version=_to_text(data.get("version"), "version"),
        parameters=tuple(
            _decode_parameter(item, i) for i, item in enumerate(params_raw)
        ),
    )


def load_manifest_data(data: bytes | str) -> Manifest:
    """Decode YAML manifest content into a Manifest.

    Only structural decoding happens here; use
    `skeletor.manifest.validator.validate_manifest` for the semantic rules.

    Raises:
        DecodeError: If the content is not valid YAML or does not have the
            shape of a manifest document.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as err:
            raise DecodeError(f"manifest is not valid UTF-8: {err}") from err

    try:
        parsed = yaml.safe_load(data)
    except yaml.YAMLError as err:
        raise DecodeError(f"manifest is not valid YAML: {err}") from err

    if parsed is None:
        logger.debug("Empty manifest document")
        return Manifest()
    if not isinstance(parsed, dict):
        raise DecodeError(
            f"manifest must be a mapping, got {type(parsed).__name__}"
        )

    manifest = manifest_from_dict(parsed)
    logger.debug(
        "Decoded manifest version=%r with %d parameter(s)",
        manifest.version,
        len(manifest.parameters),
    )
    return manifest


def dump_manifest(manifest: Manifest) -> str:
    """Serialize a Manifest to YAML text.

    Empty fields are omitted; `load_manifest_data` reads them back as their
    zero values, so the result decodes to an equal Manifest.
    """
    return yaml.safe_dump(
        manifest.to_dict(),
        default_flow_style=False,
        sort_keys=False,
    )

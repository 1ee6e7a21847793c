from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between raw configuration sources (environment, CLI flags) and
the pipeline. Coerces values to their expected types and replaces anything
unusable with the domain default, collecting a warning for each correction.
"""

import logging
import math
from typing import Any, Dict, List, Tuple

from lssuppress.domain.config import get_default_config

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Thresholds accept ints, floats and numeric strings. Non-numeric,
    non-finite and non-positive values fall back to the default; fractional
    values are floored, and a value that floors to zero falls back too.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Schema Definition
    positive_int_fields = ["max_blocks", "max_entries"]
    # Field -> whether an empty string is a legitimate value
    string_fields = {"host_tool_name": False, "log_level": False, "log_file": True}

    # 3. Field Processing & Normalization
    for field in positive_int_fields:
        merged[field] = _as_positive_int(
            merged.get(field), defaults[field], field, warnings, strict
        )

    for field, allow_empty in string_fields.items():
        merged[field] = _as_str(
            merged.get(field), defaults[field], field, warnings, strict, allow_empty
        )

    merged["log_level"] = merged["log_level"].upper()

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_positive_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce a threshold value into a positive integer."""
    if value is None:
        return fallback

    number: float
    if isinstance(value, bool):
        number = math.nan
    elif isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            number = math.nan
    else:
        number = math.nan

    if not math.isfinite(number):
        msg = f"Invalid field '{field}': expected a number, received {value!r}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using default {fallback}.")
        return fallback

    result = math.floor(number)
    if result < 1:
        msg = f"Invalid field '{field}': expected a positive number, received {value!r}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using default {fallback}.")
        return fallback

    if not isinstance(value, int) or result != value:
        logger.debug(f"Field '{field}' normalized from {value!r} to {result}.")
    return result


def _as_str(
        value: Any,
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
        allow_empty: bool = False,
) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if (v or allow_empty) else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback

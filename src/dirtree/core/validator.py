from __future__ import annotations

"""
Configuration Validation Service.

Normalizes untrusted configuration (CLI overrides, programmatic callers)
into the typed dictionary expected by the traversal core. Handles type
coercion, default injection and warning collection.
"""

import logging
from typing import Any, Dict, List, Tuple

from dirtree.domain.config import get_default_config

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

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and a
                                          list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    string_fields = ["root_path"]
    bool_fields = ["show_hidden", "dirs_only", "ascii_glyphs"]
    int_fields = ["max_depth"]

    for field in string_fields:
        merged[field] = _as_str(
            merged.get(field), defaults.get(field, ""), field, warnings, strict
        )

    for field in bool_fields:
        merged[field] = _as_bool(
            merged.get(field), defaults.get(field, False), field, warnings, strict
        )

    for field in int_fields:
        merged[field] = _as_non_negative_int(
            merged.get(field), defaults.get(field, 0), field, warnings, strict
        )

    unknown = sorted(set(merged) - set(defaults))
    for key in unknown:
        msg = f"Unknown field '{key}'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Ignored.")
        del merged[key]

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_non_negative_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce integer-like inputs, rejecting booleans and negatives."""
    if value is None:
        return fallback

    if isinstance(value, int) and not isinstance(value, bool):
        if value >= 0:
            return value
        msg = f"Invalid field '{field}': must be >= 0, received {value}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if isinstance(value, str) and not strict:
        s = value.strip()
        if s.isdigit():
            warnings.append(f"Field '{field}' converted from '{value}' to int.")
            return int(s)

    msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback

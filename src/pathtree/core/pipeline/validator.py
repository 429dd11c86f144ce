from __future__ import annotations

"""
Configuration Validation Service.

Ensures that the configuration dictionary matches the expected schema
before ingestion. Coerces loosely typed values (from JSON files or CLI
overrides) and fills missing keys with domain defaults.
"""

import logging
from typing import Any, Dict, List, Tuple

from pathtree.domain.config import NO_DEPTH, get_default_config
from pathtree.infra.logging.config import LEVEL_MAP

logger = logging.getLogger(__name__)

STRING_FIELDS = ["input_path", "source_url", "find_name", "find_path", "log_file"]
BOOL_FIELDS = ["display_tree"]
INT_FIELDS = ["find_depth"]


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
        config: Raw configuration data.
        strict: If True, raise TypeError/ValueError instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
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

    for field in STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in INT_FIELDS:
        merged[field] = _as_int(merged.get(field), defaults[field], field, warnings, strict)

    if merged["find_depth"] < NO_DEPTH:
        msg = f"Field 'find_depth' must be >= 0 (or {NO_DEPTH} to disable)."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Lookup disabled.")
        merged["find_depth"] = NO_DEPTH

    merged["log_level"] = _normalize_level(merged.get("log_level"), warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate string inputs. Lookup queries are kept verbatim."""
    if value is None:
        return fallback
    if isinstance(value, str):
        if field.startswith("find_"):
            return value
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


def _as_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce integers, accepting numeric strings in non-strict mode."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict and isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            pass
        else:
            warnings.append(f"Field '{field}' converted from '{value}' to {parsed}.")
            return parsed

    msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _normalize_level(value: Any, warnings: List[str], strict: bool) -> str:
    level = str(value or "").strip().upper()
    if level in LEVEL_MAP:
        return level

    msg = f"Unknown log level '{value}'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using INFO.")
    return "INFO"

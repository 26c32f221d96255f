from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper for the indexing pipeline: coerces untrusted configuration
values (CLI, JSON files) into the expected types, fills missing keys with
defaults and reports every correction as a warning.
"""

import logging
from typing import Any, Dict, List, Tuple

from docsindex.domain.config import get_default_config
from docsindex.domain.constants import MARKDOWN_EXTENSIONS, TREE_MODES

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["input_path", "output_path", "link_prefix"]
_OPTIONAL_STRING_FIELDS = ["base_dir", "nav_output_path"]
_BOOL_FIELDS = ["encode_links", "sort_entries", "print_tree"]
# (field, empty list allowed)
_LIST_FIELDS = [
    ("markdown_extensions", False),
    ("exclude_names", True),
    ("exclude_patterns", True),
    ("reserved_nav_titles", True),
]


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
        strict: If True, raise on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.

    Raises:
        TypeError: In strict mode, on a type mismatch.
        ValueError: In strict mode, on an out-of-range value.
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

    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in _OPTIONAL_STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), "", field, warnings, strict)

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field, allow_empty in _LIST_FIELDS:
        merged[field] = _as_list_str(
            merged.get(field), defaults[field], field, warnings, strict, allow_empty
        )

    merged["workers"] = _as_workers(merged.get("workers"), warnings, strict)
    merged["mode"] = _as_mode(merged.get("mode"), warnings, strict)
    merged["markdown_extensions"] = _normalize_extensions(
        merged["markdown_extensions"], warnings, strict
    )

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


def _as_list_str(
        value: Any,
        fallback: List[str],
        field: str,
        warnings: List[str],
        strict: bool,
        allow_empty: bool,
) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        if items or allow_empty:
            return items
        return list(fallback)

    if isinstance(value, list):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        if out or allow_empty:
            return out
        return list(fallback)

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


def _as_workers(value: Any, warnings: List[str], strict: bool) -> int:
    """Coerce the worker count into an integer of at least 1."""
    if value is None:
        return 1
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        msg = f"Invalid field 'workers': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using 1.")
        return 1

    try:
        n = int(value)
    except ValueError:
        msg = f"Invalid field 'workers': '{value}' is not an integer."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using 1.")
        return 1

    if n < 1:
        if strict:
            raise ValueError(f"Invalid field 'workers': must be >= 1, received {n}.")
        warnings.append(f"Field 'workers' raised from {n} to 1.")
        return 1
    return n


def _as_mode(value: Any, warnings: List[str], strict: bool) -> str:
    if isinstance(value, str) and value.strip().lower() in TREE_MODES:
        return value.strip().lower()

    msg = f"Invalid field 'mode': expected one of {', '.join(TREE_MODES)}, received {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using 'full'.")
    return "full"


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_extensions(exts: List[str], warnings: List[str], strict: bool) -> List[str]:
    """Ensure all file extensions are prefixed with a dot."""
    out: List[str] = []
    for ext in exts:
        e = ext.strip()
        if not e:
            continue
        if not e.startswith("."):
            if strict:
                raise ValueError(f"Invalid extension '{ext}': must start with '.'.")
            warnings.append(f"Extension '{ext}' corrected to '.{e}'.")
            e = "." + e
        out.append(e)
    return out if out else list(MARKDOWN_EXTENSIONS)

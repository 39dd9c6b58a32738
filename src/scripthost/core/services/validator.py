from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted configuration sources (CLI flags, dictionaries
built by embedding code) and the HostConfig model. Coerces types, injects
defaults and reports every correction as a human readable warning.
"""

import logging
from typing import Any, Dict, List, Tuple

from scripthost.domain.config import get_default_config
from scripthost.domain.constants import SUPPORTED_ENCODINGS

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

    string_fields = ["pwd", "template_dir", "separator", "encoding", "script_suffix", "entry_point"]
    bool_fields = ["quiet", "verbose"]
    list_fields = ["bootstrap_scripts", "arguments"]

    for name in string_fields:
        merged[name] = _as_str(merged.get(name), defaults.get(name, ""), name, warnings, strict)

    for name in bool_fields:
        merged[name] = _as_bool(merged.get(name), defaults.get(name, False), name, warnings, strict)

    for name in list_fields:
        merged[name] = _as_list_str(merged.get(name), defaults.get(name, []), name, warnings, strict)

    merged["list_depth"] = _as_depth(merged.get("list_depth"), defaults["list_depth"], warnings, strict)
    merged["separator"] = _normalize_separator(merged["separator"], defaults["separator"], warnings, strict)
    merged["encoding"] = _normalize_encoding(merged["encoding"], defaults["encoding"], warnings, strict)

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
    """Accept native booleans, or yes/no style strings when not strict."""
    if value is None:
        return fallback
    if isinstance(value, bool):
        return value

    if isinstance(value, str) and not strict:
        word = value.strip().lower()
        if word in ("true", "yes", "on", "1"):
            return True
        if word in ("false", "no", "off", "0"):
            return False

    msg = f"Invalid field '{field}': expected bool, received {value!r}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """
    Ensure input is a list of strings.

    A bare string is taken as a single item; script arguments may contain
    commas, so nothing is split.
    """
    if value is None:
        return list(fallback)
    if isinstance(value, str) and not strict:
        return [value]

    if isinstance(value, (list, tuple)):
        kept = [item for item in value if isinstance(item, str)]
        if len(kept) != len(value):
            msg = f"Non-string items in '{field}'."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} {len(value) - len(kept)} item(s) discarded.")
        return kept

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


def _as_depth(value: Any, fallback: int, warnings: List[str], strict: bool) -> int:
    """Coerce the listing depth into a non-negative integer."""
    if value is None:
        return fallback
    if isinstance(value, bool):
        value = None
    elif isinstance(value, str) and not strict:
        try:
            value = int(value.strip())
        except ValueError:
            value = None

    if isinstance(value, int) and value >= 0:
        return value

    msg = "Invalid field 'list_depth': expected a non-negative integer."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_separator(separator: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """Ensure the separator is one of the two supported single characters."""
    if separator in ("/", "\\"):
        return separator

    msg = f"Invalid separator '{separator}': must be '/' or '\\'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback


def _normalize_encoding(encoding: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """Map an encoding name onto one of the supported codecs."""
    if encoding in SUPPORTED_ENCODINGS.values():
        return encoding
    for alias, codec in SUPPORTED_ENCODINGS.items():
        if alias in encoding.upper():
            return codec

    msg = f"Unsupported encoding '{encoding}': only UTF-8 and ASCII are available."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback

"""
Text helpers shared by the writers

Scalar rendering, markup escaping, identifier sanitising and JSON dumping.
"""

import json
import math
import re
from typing import Any

# Anything that is not an ASCII letter or digit becomes "_" in generated identifiers
_NON_IDENTIFIER = re.compile(r"[^a-zA-Z0-9]")

_MARKUP_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def dump_json(value: Any, indent_size: int) -> str:
    """Serialize a value the way JSON.stringify(value, null, indent) does

    An indent of 0 produces compact single-line output instead of the
    newline-per-item layout json.dumps would give. NaN and infinities become
    null.
    """
    value = _finite(value)
    if indent_size <= 0:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    return json.dumps(value, ensure_ascii=False, indent=indent_size, default=str)


def format_scalar(value: Any) -> str:
    """Render a value as display text

    Booleans are lowercase, integral floats lose their ".0", None becomes
    "null" and containers are written as compact JSON.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return dump_json(value, 0)
    return str(value)


def format_cell(value: Any) -> str:
    """Like format_scalar, but a missing or null cell is blank"""
    if value is None:
        return ""
    return format_scalar(value)


def escape_markup(text: str) -> str:
    """Apply the five predefined XML entity escapes"""
    for char, entity in _MARKUP_ESCAPES:
        text = text.replace(char, entity)
    return text


def sanitize_identifier(name: str) -> str:
    """Replace every non-alphanumeric character with an underscore"""
    return _NON_IDENTIFIER.sub("_", name)


def capitalize_first(name: str) -> str:
    """Uppercase only the first character, leaving the rest untouched"""
    return name[:1].upper() + name[1:]


def _finite(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(child) for key, child in value.items()}
    if isinstance(value, list):
        return [_finite(child) for child in value]
    return value

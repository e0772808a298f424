"""
Helpers for turning command line arguments into raw values.
"""

from __future__ import annotations

import re
from typing import Any

# JSON number grammar: no leading zeros, optional fraction and exponent
_INT_PATTERN = re.compile(r"-?(?:0|[1-9][0-9]*)")
_FLOAT_PATTERN = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")

_KEYWORDS = {"true": True, "false": False, "null": None}


def coerce_scalar(text: str, strict: bool = False) -> Any:
    """Convert a scalar literal to None, bool, int or float.

    Examples:
        "true" -> True
        "null" -> None
        "42" -> 42
        "-1.5e3" -> -1500.0
        "hello" -> "hello" (ValueError when strict)

    Args:
        text: The argument text
        strict: Raise instead of falling back to the text itself

    Returns:
        The converted value, or ``text`` unchanged when it is not a literal
    """
    if text in _KEYWORDS:
        return _KEYWORDS[text]
    if _INT_PATTERN.fullmatch(text):
        return int(text)
    if _FLOAT_PATTERN.fullmatch(text):
        return float(text)
    if strict:
        raise ValueError(f"<{text}> is not a true/false/null or number literal")
    return text


def parse_assignment(text: str, coerce: bool = True) -> tuple[str, Any]:
    """Split a ``KEY=VALUE`` or ``KEY:=LITERAL`` argument.

    ``KEY=VALUE`` is coerced with coerce_scalar() when ``coerce`` is set and
    kept as a string otherwise. ``KEY:=LITERAL`` always requires a literal.

    Raises:
        ValueError: no '=' in the argument, empty key, or a bad literal
    """
    if "=" not in text:
        raise ValueError(f"<{text}> is not of the form KEY=VALUE")
    name, _, value = text.partition("=")
    if name.endswith(":"):
        name = name[:-1]
        parsed = coerce_scalar(value, strict=True)
    else:
        parsed = coerce_scalar(value) if coerce else value
    if not name:
        raise ValueError(f"<{text}> has an empty key")
    return name, parsed

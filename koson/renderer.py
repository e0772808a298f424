"""
Compact JSON rendering of finished values.

Output has no insignificant whitespace, keeps object members and array
elements in insertion order, and is accepted by any conforming JSON parser.
"""

from __future__ import annotations

from .config import DEFAULT_CONFIG, KosonConfig
from .errors import InvalidValueTypeError
from .numeric import format_number
from .values import Arr, Bool, EmptyArr, Null, Number, Obj, Str, Value


def escape_string(s: str, escape_control_characters: bool = True) -> str:
    """Quote ``s`` as a JSON string.

    '"' and '\\' are always backslash-escaped. Control characters
    U+0000..U+001F become \\uXXXX unless disabled.
    """
    out_chars = []
    for ch in s:
        if ch == '"':
            out_chars.append('\\"')
        elif ch == "\\":
            out_chars.append("\\\\")
        elif escape_control_characters and ord(ch) <= 0x1F:
            out_chars.append(f"\\u{ord(ch):04x}")
        else:
            out_chars.append(ch)
    return '"' + "".join(out_chars) + '"'


def _render(value: Value, escape_control_characters: bool) -> str:
    if isinstance(value, Null):
        return "null"
    if isinstance(value, Bool):
        return "true" if value.value else "false"
    if isinstance(value, Number):
        return format_number(value.value)
    if isinstance(value, Str):
        return escape_string(value.value, escape_control_characters)
    if isinstance(value, Obj):
        return (
            "{"
            + ",".join(
                escape_string(name, escape_control_characters)
                + ":"
                + _render(member, escape_control_characters)
                for name, member in value.members
            )
            + "}"
        )
    if isinstance(value, Arr):
        return "[" + ",".join(_render(v, escape_control_characters) for v in value.elements) + "]"
    if isinstance(value, EmptyArr):
        return "[]"
    raise InvalidValueTypeError(value)


def render(value: Value, config: KosonConfig | None = None) -> str:
    """
    Render a finished value as compact JSON text.

    Args:
        value: A Value produced by classify() or a builder
        config: Rendering options (defaults to KosonConfig())

    Returns:
        The JSON text

    Raises:
        InvalidValueTypeError: value is not a Value (raw data must go through classify())
    """
    config = config or DEFAULT_CONFIG
    if not isinstance(value, Value):
        raise InvalidValueTypeError(value)
    return _render(value, config.escape_control_characters)

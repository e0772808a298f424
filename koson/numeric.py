"""
Numeric normalization.

Maps fixed-width host numbers to the single representation held by
Number: int for every integer width, a finite float for every floating
width. 32-bit floats are narrowed back to the shortest decimal that
reproduces the 32-bit value, so c_float(3.2) is stored (and rendered) as
3.2 rather than its widened double 3.200000047683716.
"""

from __future__ import annotations

import ctypes
import math
import struct

# ctypes aliases (c_int32 is c_int, etc.) collapse to the same classes.
INTEGER_CTYPES: tuple[type, ...] = tuple(
    {
        ctypes.c_byte,
        ctypes.c_ubyte,
        ctypes.c_short,
        ctypes.c_ushort,
        ctypes.c_int,
        ctypes.c_uint,
        ctypes.c_long,
        ctypes.c_ulong,
        ctypes.c_longlong,
        ctypes.c_ulonglong,
        ctypes.c_int8,
        ctypes.c_uint8,
        ctypes.c_int16,
        ctypes.c_uint16,
        ctypes.c_int32,
        ctypes.c_uint32,
        ctypes.c_int64,
        ctypes.c_uint64,
        ctypes.c_size_t,
        ctypes.c_ssize_t,
    }
)

FLOAT_CTYPES: tuple[type, ...] = (ctypes.c_float, ctypes.c_double)

CHAR_CTYPES: tuple[type, ...] = (ctypes.c_char, ctypes.c_wchar)

# Nine significant digits always round-trip an IEEE 754 single.
_FLOAT32_MAX_DIGITS = 9


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def shortest_float32(value: float) -> float:
    """Return the float with the fewest significant digits that narrows to ``value``.

    ``value`` must already be exactly representable as a 32-bit float (which is
    what ctypes.c_float(...).value yields).
    """
    if value == 0 or not math.isfinite(value):
        return value
    for digits in range(1, _FLOAT32_MAX_DIGITS + 1):
        candidate = float(f"{value:.{digits}g}")
        try:
            narrowed = _to_float32(candidate)
        except OverflowError:
            # rounding near FLT_MAX can step past the single range
            continue
        if narrowed == value:
            return candidate
    return value


def normalize_ctype(raw: ctypes._SimpleCData) -> int | float | str:
    """Convert a ctypes scalar to int, float or a one-character str."""
    if isinstance(raw, ctypes.c_float):
        return shortest_float32(raw.value)
    if isinstance(raw, ctypes.c_double):
        return float(raw.value)
    if isinstance(raw, ctypes.c_char):
        return raw.value.decode("latin-1")
    if isinstance(raw, ctypes.c_wchar):
        return raw.value
    return int(raw.value)


def format_number(value: int | float) -> str:
    """Render a normalized number as JSON number text.

    Integers are plain decimal. Floats use the shortest round-trip repr,
    which keeps a trailing ``.0`` for integral values (345.0) and uses
    ``e`` notation for very large or small magnitudes, both valid JSON.
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a JSON number")
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise ValueError(f"{value!r} is not representable as a JSON number")
    return repr(value)

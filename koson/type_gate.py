"""
Admission of host values into the value model.

classify() is the only way a raw Python value becomes a Value. It accepts
the closed JSON universe (None, bool, integers, finite floats, strings),
fixed-width ctypes scalars, already finished Values, and, unless disabled,
any other object with a text form: instances of user-defined classes and of
types that define their own __str__. Builtins without one (object(),
functions, containers), binary data, unfinished builders and unmapped ctypes
are rejected.
"""

from __future__ import annotations

import ctypes
import logging
import math
import numbers
from collections.abc import Mapping, Sequence, Set
from typing import Any

from .config import DEFAULT_CONFIG, KosonConfig
from .errors import BareArrayMarkerError, InvalidValueTypeError
from .numeric import CHAR_CTYPES, FLOAT_CTYPES, INTEGER_CTYPES, normalize_ctype
from .values import NULL, Bool, Number, Str, Value

logger = logging.getLogger(__name__)

_BINARY_TYPES = (bytes, bytearray, memoryview)

_CONTAINER_TYPES = (Mapping, Sequence, Set)


def _is_array_entry_point(raw: Any) -> bool:
    # Imported lazily: builders depends on this module.
    from .builders import ArrayBuilder, new_array_builder

    return raw is new_array_builder or isinstance(raw, ArrayBuilder)


def _is_unfinished_object_builder(raw: Any) -> bool:
    from .builders import ObjectBuilder

    return isinstance(raw, ObjectBuilder)


def _has_text_representation(raw: Any) -> bool:
    cls = type(raw)
    if cls.__str__ is not object.__str__:
        return True
    if isinstance(raw, _CONTAINER_TYPES):
        return False
    return cls.__module__ != "builtins"


def _number(raw: Any, value: int | float) -> Number:
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidValueTypeError(
            raw, f"Invalid value: <{raw}> of type <{type(raw).__name__}> is not a finite number"
        )
    return Number(value)


def classify(raw: Any, config: KosonConfig | None = None) -> Value:
    """
    Convert a raw host value into a Value.

    Args:
        raw: The candidate value
        config: Admission options (defaults to KosonConfig())

    Returns:
        The admitted Value

    Raises:
        BareArrayMarkerError: raw is the array builder entry point
        InvalidValueTypeError: raw is outside the allowed universe
    """
    config = config or DEFAULT_CONFIG

    if isinstance(raw, Value):
        return raw
    if _is_array_entry_point(raw):
        raise BareArrayMarkerError(raw)
    if raw is None:
        return NULL
    if isinstance(raw, bool):
        return Bool(raw)
    if isinstance(raw, numbers.Integral):
        return Number(int(raw))
    if isinstance(raw, float):
        return _number(raw, float(raw))
    if isinstance(raw, ctypes.c_bool):
        return Bool(bool(raw.value))
    if isinstance(raw, INTEGER_CTYPES + FLOAT_CTYPES):
        return _number(raw, normalize_ctype(raw))
    if isinstance(raw, CHAR_CTYPES):
        return Str(normalize_ctype(raw))
    if isinstance(raw, str):
        return Str(str(raw))
    if isinstance(raw, _BINARY_TYPES + (ctypes._SimpleCData,)):
        raise InvalidValueTypeError(raw)
    if _is_unfinished_object_builder(raw):
        raise InvalidValueTypeError(raw)

    if config.stringify_unknown and _has_text_representation(raw):
        text = str(raw)
        logger.debug("Stringified value of type %s as %r", type(raw).__name__, text)
        return Str(text)

    raise InvalidValueTypeError(raw)

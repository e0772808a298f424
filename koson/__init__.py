"""koson

Build JSON values in code and render them as compact JSON text.
Values are admitted through a type gate, objects reject duplicate keys,
and rendering keeps insertion order.
"""

__version__ = "1.0.1"

from .builders import ArrayBuilder, ObjectBuilder, new_array_builder, new_object_builder
from .config import KosonConfig
from .errors import (
    BareArrayMarkerError,
    BuilderFinishedError,
    DuplicateKeyError,
    InvalidKeyTypeError,
    InvalidValueTypeError,
    KosonError,
)
from .renderer import render
from .type_gate import classify
from .values import Arr, Bool, EmptyArr, Null, Number, Obj, Str, Value, empty_array

__all__ = [
    "new_object_builder",
    "new_array_builder",
    "ObjectBuilder",
    "ArrayBuilder",
    "empty_array",
    "render",
    "classify",
    "KosonConfig",
    "Value",
    "Null",
    "Bool",
    "Number",
    "Str",
    "Obj",
    "Arr",
    "EmptyArr",
    "KosonError",
    "InvalidValueTypeError",
    "InvalidKeyTypeError",
    "DuplicateKeyError",
    "BareArrayMarkerError",
    "BuilderFinishedError",
]

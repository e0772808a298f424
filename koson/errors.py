"""
Exceptions raised while admitting values into builders.

Every error is raised synchronously at the point of violation. A builder
that raised stays consistent (nothing from the failing call is stored),
but callers are expected to discard it.
"""

from __future__ import annotations

from typing import Any

ALLOWED_CATEGORIES = (
    "string",
    "number",
    "boolean",
    "null",
    "object (new_object_builder().finish())",
    "array (new_array_builder().push(...).finish())",
    "empty array marker (empty_array())",
)


def describe_pairing(key: Any, value: Any) -> str:
    """Textual form of a key/value pairing, used in error messages."""
    return f"({key} to {value})"


class KosonError(Exception):
    """Base class for all koson errors."""

    pass


class InvalidValueTypeError(KosonError, TypeError):
    """Raised when a value is outside the allowed JSON value universe."""

    def __init__(self, value: Any, message: str | None = None):
        self.value = value
        if message is None:
            message = (
                f"Invalid value type: <{value}> of type <{type(value).__name__}>. "
                f"Allowed types are: {', '.join(ALLOWED_CATEGORIES)}"
            )
        super().__init__(message)


class BareArrayMarkerError(InvalidValueTypeError):
    """Raised when the array builder entry point is used as a value.

    Only a finished array or the empty array marker can be a value; the
    entry point itself is the thing elements are pushed into.
    """

    def __init__(self, value: Any):
        super().__init__(
            value,
            f"<{type(value).__name__}> is the array builder entry point and cannot be used "
            "as a value, use empty_array() for an empty array or finish() the builder",
        )


class InvalidKeyTypeError(KosonError, TypeError):
    """Raised when an object key is not a string."""

    def __init__(self, key: Any, value: Any):
        self.key = key
        self.value = value
        self.pairing = describe_pairing(key, value)
        super().__init__(
            f"key <{key}> of {self.pairing} must be of type str, "
            f"got <{type(key).__name__}>"
        )


class DuplicateKeyError(KosonError, ValueError):
    """Raised when an object key is defined twice.

    The first definition is kept; the rejected pairing is never stored.
    """

    def __init__(self, key: str, value: Any):
        self.key = key
        self.value = value
        self.pairing = describe_pairing(key, value)
        super().__init__(f"key <{key}> of {self.pairing} is already defined for json object")


class BuilderFinishedError(KosonError, RuntimeError):
    """Raised when a builder is used after finish()."""

    pass

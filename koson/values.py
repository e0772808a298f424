"""
Value model.

A closed set of frozen dataclasses representing everything that can appear
as a JSON value. Values are only produced by the type gate and the builders,
never mutated, and render themselves when converted with str().
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from .errors import DuplicateKeyError, InvalidKeyTypeError, InvalidValueTypeError


class Value(ABC):
    """Base class of all JSON values."""

    __slots__ = ()

    @abstractmethod
    def to_python(self) -> Any:
        """Convert to plain Python data (dict, list, str, int, float, bool, None)."""

    def __str__(self) -> str:
        from .renderer import render

        return render(self)


@dataclass(frozen=True)
class Null(Value):
    """JSON null."""

    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class Bool(Value):
    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise InvalidValueTypeError(self.value)

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Number(Value):
    """A JSON number.

    Every accepted integer width is held as int, every floating width as a
    finite float. The conversion happens at admission time.
    """

    value: int | float

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise InvalidValueTypeError(self.value)
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise InvalidValueTypeError(
                self.value, f"Invalid value: <{self.value}> of type <float> is not a finite number"
            )

    def to_python(self) -> int | float:
        return self.value


@dataclass(frozen=True)
class Str(Value):
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise InvalidValueTypeError(self.value)

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class Obj(Value):
    """A finished JSON object.

    Members keep insertion order, which is also the render order. Keys are
    strings and unique, checked on construction like every other variant.
    """

    members: tuple[tuple[str, Value], ...] = ()

    def __post_init__(self):
        members = tuple(tuple(member) for member in self.members)
        seen: set[str] = set()
        for name, value in members:
            if not isinstance(name, str):
                raise InvalidKeyTypeError(name, value)
            if name in seen:
                raise DuplicateKeyError(name, value)
            if not isinstance(value, Value):
                raise InvalidValueTypeError(value)
            seen.add(name)
        object.__setattr__(self, "members", members)

    def __len__(self) -> int:
        return len(self.members)

    def keys(self) -> list[str]:
        return [name for name, _ in self.members]

    def get(self, key: str, default: Value | None = None) -> Value | None:
        for name, value in self.members:
            if name == key:
                return value
        return default

    def to_python(self) -> dict[str, Any]:
        return {name: value.to_python() for name, value in self.members}


@dataclass(frozen=True)
class Arr(Value):
    """A finished JSON array with at least one element when built by ArrayBuilder."""

    elements: tuple[Value, ...] = ()

    def __post_init__(self):
        elements = tuple(self.elements)
        for element in elements:
            if not isinstance(element, Value):
                raise InvalidValueTypeError(element)
        object.__setattr__(self, "elements", elements)

    def __len__(self) -> int:
        return len(self.elements)

    def to_python(self) -> list[Any]:
        return [element.to_python() for element in self.elements]


@dataclass(frozen=True)
class EmptyArr(Value):
    """The empty array marker.

    Kept apart from Arr so an empty array used as a value is never confused
    with the array builder entry point.
    """

    def __len__(self) -> int:
        return 0

    def to_python(self) -> list[Any]:
        return []


NULL = Null()
EMPTY_ARRAY = EmptyArr()


def empty_array() -> EmptyArr:
    """Return the empty array marker, usable anywhere a value is accepted."""
    return EMPTY_ARRAY

"""
Object and array builders.

A builder accumulates validated values and is finished exactly once into
an immutable Value. Only key()/push() calls change a builder's state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .config import KosonConfig
from .errors import BuilderFinishedError, DuplicateKeyError, InvalidKeyTypeError
from .type_gate import classify
from .values import EMPTY_ARRAY, Arr, EmptyArr, Obj, Value

logger = logging.getLogger(__name__)


class _Builder:
    def __init__(self, config: KosonConfig | None = None):
        self.config = config
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    def _check_open(self) -> None:
        if self._finished:
            raise BuilderFinishedError(f"{type(self).__name__} has already been finished")


class ObjectBuilder(_Builder):
    """Accumulates unique string keys and their values."""

    def __init__(self, config: KosonConfig | None = None):
        super().__init__(config)
        self._members: dict[str, Value] = {}

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, name: object) -> bool:
        return name in self._members

    def key(self, name: Any, value: Any) -> ObjectBuilder:
        """
        Add a member.

        Args:
            name: Member name, must be a str
            value: Raw value, admitted through classify()

        Returns:
            The builder, so calls can be chained

        Raises:
            InvalidKeyTypeError: name is not a str
            DuplicateKeyError: name was already defined; the first value is kept
            InvalidValueTypeError: value is outside the allowed universe
        """
        self._check_open()
        if not isinstance(name, str):
            raise InvalidKeyTypeError(name, value)
        if name in self._members:
            raise DuplicateKeyError(name, value)
        self._members[name] = classify(value, self.config)
        return self

    def update(self, pairs: Mapping[Any, Any] | Iterable[tuple[Any, Any]]) -> ObjectBuilder:
        """Add members from a mapping or from (name, value) pairs, in order."""
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        for name, value in items:
            self.key(name, value)
        return self

    def finish(self) -> Obj:
        self._check_open()
        self._finished = True
        members = tuple(self._members.items())
        self._members = {}
        logger.debug("Finished object with %d member(s)", len(members))
        return Obj(members)


class ArrayBuilder(_Builder):
    """Accumulates values in call order."""

    def __init__(self, config: KosonConfig | None = None):
        super().__init__(config)
        self._elements: list[Value] = []

    def __len__(self) -> int:
        return len(self._elements)

    def push(self, *values: Any) -> ArrayBuilder:
        """
        Append values.

        All values of one call are classified before any is stored, so a
        rejected value leaves the builder exactly as it was.
        """
        self._check_open()
        admitted = [classify(value, self.config) for value in values]
        self._elements.extend(admitted)
        return self

    def extend(self, values: Iterable[Any]) -> ArrayBuilder:
        return self.push(*values)

    def finish(self) -> Arr | EmptyArr:
        self._check_open()
        self._finished = True
        elements = tuple(self._elements)
        self._elements = []
        logger.debug("Finished array with %d element(s)", len(elements))
        if not elements:
            return EMPTY_ARRAY
        return Arr(elements)


def new_object_builder(config: KosonConfig | None = None) -> ObjectBuilder:
    return ObjectBuilder(config)


def new_array_builder(config: KosonConfig | None = None) -> ArrayBuilder:
    """Start a new array. The returned builder itself is never a value."""
    return ArrayBuilder(config)

#!/usr/bin/env python3

import collections
import ctypes
import decimal
import enum
import math

import pytest

from koson import (
    BareArrayMarkerError,
    InvalidValueTypeError,
    KosonConfig,
    classify,
    empty_array,
    new_array_builder,
    new_object_builder,
)
from koson.numeric import shortest_float32
from koson.values import NULL, Arr, Bool, EmptyArr, Number, Obj, Str

FLT_MAX = 3.4028234663852886e38


class Color(enum.Enum):
    RED = 1

    def __str__(self):
        return self.name.lower()


class Opaque:
    pass


class TestAccepted:
    """Values inside the allowed universe"""

    def test_null(self):
        assert classify(None) is NULL

    def test_booleans_are_not_numbers(self):
        assert classify(True) == Bool(True)
        assert classify(False) == Bool(False)
        assert not isinstance(classify(True), Number)

    def test_integers(self):
        assert classify(9) == Number(9)
        assert classify(-(2**63)) == Number(-(2**63))
        assert isinstance(classify(9).value, int)

    def test_floats(self):
        assert classify(7.6) == Number(7.6)

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (ctypes.c_int8(-5), -5),
            (ctypes.c_short(12), 12),
            (ctypes.c_int32(9), 9),
            (ctypes.c_int64(34), 34),
            (ctypes.c_ubyte(0xAA), 170),
            (ctypes.c_uint64(2**64 - 1), 2**64 - 1),
        ],
    )
    def test_fixed_width_integers(self, raw, expected):
        value = classify(raw)
        assert value == Number(expected)
        assert isinstance(value.value, int)

    def test_float32_keeps_its_shortest_decimal(self):
        assert ctypes.c_float(3.2).value != 3.2
        assert classify(ctypes.c_float(3.2)) == Number(3.2)
        assert classify(ctypes.c_float(0.1)) == Number(0.1)
        assert classify(ctypes.c_float(345)) == Number(345.0)
        assert classify(ctypes.c_float(FLT_MAX)) == Number(3.4028235e38)
        assert classify(ctypes.c_float(-FLT_MAX)) == Number(-3.4028235e38)

    def test_float64_ctype(self):
        assert classify(ctypes.c_double(7.6)) == Number(7.6)

    def test_ctypes_bool(self):
        assert classify(ctypes.c_bool(True)) == Bool(True)

    def test_single_characters_become_strings(self):
        assert classify(ctypes.c_char(b"e")) == Str("e")
        assert classify(ctypes.c_wchar("é")) == Str("é")

    def test_strings(self):
        assert classify("value") == Str("value")
        assert classify("") == Str("")

    def test_finished_values_pass_through(self):
        finished = new_object_builder().key("a", 1).finish()
        assert classify(finished) is finished
        assert classify(empty_array()) is empty_array()
        assert isinstance(classify(new_array_builder().push(1).finish()), Arr)

    def test_objects_with_text_representation_are_stringified(self):
        assert classify(Color.RED) == Str("red")
        assert classify(decimal.Decimal("1.10")) == Str("1.10")

    def test_instances_of_user_classes_are_stringified(self):
        opaque = Opaque()
        assert classify(opaque) == Str(str(opaque))
        assert str(classify(opaque)).startswith('"<')

    def test_this_instance_as_a_value(self):
        value = new_array_builder().push(self).finish()
        assert value.elements == (Str(str(self)),)


class TestRejected:
    """Values outside the allowed universe"""

    @pytest.mark.parametrize("raw", [math.nan, math.inf, -math.inf, ctypes.c_float(math.inf)])
    def test_non_finite_numbers(self, raw):
        with pytest.raises(InvalidValueTypeError, match="not a finite number"):
            classify(raw)

    @pytest.mark.parametrize("raw", [b"bytes", bytearray(b"x"), memoryview(b"x")])
    def test_binary_data(self, raw):
        with pytest.raises(InvalidValueTypeError):
            classify(raw)

    @pytest.mark.parametrize(
        "raw",
        [
            [1, 2],
            (1,),
            {"a": 1},
            {1},
            collections.OrderedDict(a=1),
            collections.deque([1]),
            object(),
            len,
            lambda: None,
            ctypes.c_char_p(b"x"),
        ],
    )
    def test_values_without_text_representation(self, raw):
        with pytest.raises(InvalidValueTypeError) as exc_info:
            classify(raw)
        assert not isinstance(exc_info.value, BareArrayMarkerError)
        assert exc_info.value.value is raw

    def test_message_names_value_type_and_allowed_categories(self):
        with pytest.raises(InvalidValueTypeError) as exc_info:
            classify([1, 2])
        message = str(exc_info.value)
        assert "<[1, 2]>" in message
        assert "<list>" in message
        for category in ("string", "number", "boolean", "null", "object", "array", "empty array"):
            assert category in message

    def test_unfinished_object_builder(self):
        with pytest.raises(InvalidValueTypeError):
            classify(new_object_builder())

    def test_array_builder_entry_point(self):
        with pytest.raises(BareArrayMarkerError, match=r"use empty_array\(\)"):
            classify(new_array_builder)

    def test_array_builder_instance(self):
        with pytest.raises(BareArrayMarkerError):
            classify(new_array_builder().push(1))

    def test_bare_array_marker_is_an_invalid_value_type(self):
        with pytest.raises(InvalidValueTypeError):
            classify(new_array_builder())

    def test_stringify_can_be_disabled(self):
        config = KosonConfig(stringify_unknown=False)
        with pytest.raises(InvalidValueTypeError):
            classify(Color.RED, config)
        with pytest.raises(InvalidValueTypeError):
            classify(Opaque(), config)
        assert classify("still fine", config) == Str("still fine")


class TestShortestFloat32:
    def test_zero_and_non_finite_are_unchanged(self):
        assert shortest_float32(0.0) == 0.0
        assert math.isinf(shortest_float32(math.inf))

    def test_round_trips_at_single_precision(self):
        for raw in (3.2, 0.1, 2.433, 1e-7, 123456.78, -42.5):
            narrowed = ctypes.c_float(raw).value
            assert ctypes.c_float(shortest_float32(narrowed)).value == narrowed

    def test_result_is_shortest(self):
        assert shortest_float32(ctypes.c_float(2.433).value) == 2.433

    @pytest.mark.parametrize("limit", [FLT_MAX, -FLT_MAX])
    def test_largest_single_does_not_overflow(self, limit):
        result = shortest_float32(limit)
        assert abs(result) == 3.4028235e38
        assert ctypes.c_float(result).value == limit


def test_classified_values_are_distinct_variants():
    assert classify(empty_array()) != Arr(())
    assert isinstance(classify(empty_array()), EmptyArr)
    assert isinstance(classify(new_object_builder().finish()), Obj)

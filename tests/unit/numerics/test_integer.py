"""Unit tests for the integer numeric kinds and their factory."""

from __future__ import annotations

import pytest

from stringcalc.core.exceptions import UnknownNumericTypeError
from stringcalc.core.protocols import INumericType
from stringcalc.numerics import NUMERIC_KINDS, create_numeric
from stringcalc.numerics.integer import BIGINT, I8, I32, U8, U32, U64, FixedWidthInteger
from tests.fakes import RecordingNumeric


class TestRanges:
    def test_u32_bounds(self):
        assert U32.min_value == 0
        assert U32.max_value == 4_294_967_295

    def test_i8_bounds(self):
        assert I8.min_value == -128
        assert I8.max_value == 127

    def test_names(self):
        assert U64.name == "u64"
        assert I32.name == "i32"

    def test_rejects_non_positive_width(self):
        with pytest.raises(ValueError):
            FixedWidthInteger(0)


class TestParse:
    @pytest.mark.parametrize("text, expected", [("0", 0), ("7", 7), ("+12", 12), ("007", 7)])
    def test_accepts_plain_digits(self, text, expected):
        assert U32.parse(text) == expected

    @pytest.mark.parametrize("text", ["", " 1", "1 ", "1_000", "1.5", "abc", "+", "٣", "0x10"])
    def test_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            U32.parse(text)

    def test_unsigned_rejects_minus(self):
        with pytest.raises(ValueError):
            U32.parse("-1")

    def test_signed_accepts_minus(self):
        assert I32.parse("-1") == -1

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            U8.parse("256")
        assert U8.parse("255") == 255

    def test_bigint_has_no_range(self):
        assert BIGINT.parse("99999999999999999999999") == 99999999999999999999999


class TestArithmetic:
    def test_zero(self):
        assert U32.zero() == 0

    def test_add(self):
        assert U32.add(2, 3) == 5

    def test_add_overflow(self):
        with pytest.raises(OverflowError):
            U8.add(200, 100)

    def test_bigint_add_never_overflows(self):
        assert BIGINT.add(2**64, 2**64) == 2**65

    @pytest.mark.parametrize("a, b, expected", [(1, 2, -1), (2, 2, 0), (3, 2, 1)])
    def test_compare(self, a, b, expected):
        assert U32.compare(a, b) == expected


class TestFactory:
    def test_lookup_by_name(self):
        assert create_numeric("u32") is U32

    def test_lookup_is_case_insensitive(self):
        assert create_numeric("I32") is I32

    def test_passes_kind_objects_through(self):
        kind = RecordingNumeric()
        assert create_numeric(kind) is kind

    def test_unknown_name(self):
        with pytest.raises(UnknownNumericTypeError) as exc_info:
            create_numeric("f64")
        assert "u32" in exc_info.value.known

    def test_all_registered_kinds_satisfy_protocol(self):
        for kind in NUMERIC_KINDS.values():
            assert isinstance(kind, INumericType)

    def test_fake_satisfies_protocol(self):
        assert isinstance(RecordingNumeric(), INumericType)

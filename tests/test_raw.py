import math
import re
import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ryufmt.raw import (
    Decimal,
    Exponent,
    RawFormatted,
    decompose32,
    decompose64,
    format32,
    format32_spec,
    format64,
    format64_spec,
)

NUMERIC = re.compile(r"-?\d+(\.\d+)?(e-?\d+)?")


def _as_f32(x):
    return struct.unpack("<f", struct.pack("<f", x))[0]


@pytest.mark.parametrize(
    "value, text",
    [
        (1.234, "1.234"),
        (0.0, "0.0"),
        (-0.0, "-0.0"),
        (1.0, "1.0"),
        (-1.0, "-1.0"),
        (0.3, "0.3"),
        (1234000000000000.0, "1234000000000000.0"),
        (1.234e16, "1.234e16"),
        (1e30, "1e30"),
        (1.234e33, "1.234e33"),
        (12340000000.0, "12340000000.0"),
        (12.34, "12.34"),
        (0.001234, "0.001234"),
        (0.00001, "0.00001"),
        (1e-6, "1e-6"),
        (5e-324, "5e-324"),
        (1.7976931348623157e308, "1.7976931348623157e308"),
        (2.9802322387695312e-8, "2.9802322387695312e-8"),
        (9007199254740992.0, "9007199254740992.0"),
        (-2.109808898695963e16, "-2.109808898695963e16"),
    ],
)
def test_format64_values(value, text):
    assert format64(value) == text


@pytest.mark.parametrize(
    "value, text",
    [
        (1.234, "1.234"),
        (0.0, "0.0"),
        (-0.0, "-0.0"),
        (1234000000000.0, "1234000000000.0"),
        (1.234e13, "1.234e13"),
        (1e-45, "1e-45"),
        (3.4028235e38, "3.4028235e38"),
        (-0.001234, "-0.001234"),
        (1e-6, "0.000001"),
        (1e-7, "1e-7"),
        (305404.12, "305404.12"),
        (33554450.0, "33554450.0"),
    ],
)
def test_format32_values(value, text):
    assert format32(value) == text


@pytest.mark.parametrize(
    "value, digits, exponent",
    [
        (1.234, 1234, -3),
        (5e-324, 5, -324),
        (1.7976931348623157e308, 17976931348623157, 292),
        (1000.0, 1, 3),
        (9007199254740992.0, 9007199254740992, 0),
        (0.0, 0, 0),
        (-2.5, 25, -1),
    ],
)
def test_decompose64(value, digits, exponent):
    assert decompose64(value) == (digits, exponent)


@pytest.mark.parametrize(
    "value, digits, exponent",
    [
        (3.4028235e38, 34028235, 31),
        (1e-45, 1, -45),
        (1.234, 1234, -3),
    ],
)
def test_decompose32(value, digits, exponent):
    assert decompose32(value) == (digits, exponent)


def test_spec_decimal_meta():
    result = format64_spec(-1.5)
    assert result == RawFormatted("-1.5", Decimal(2))
    assert result.initialized == 4


def test_spec_zero_meta():
    assert format64_spec(-0.0).meta == Decimal(2)
    assert format32_spec(0.0).meta == Decimal(1)


def test_spec_exponent_meta():
    result = format64_spec(-1.234e33)
    assert result.text == "-1.234e33"
    assert result.meta == Exponent(2, 6)


def test_spec_single_digit_exponent_meta():
    result = format32_spec(1e30)
    assert result.text == "1e30"
    assert result.meta == Exponent(None, 1)


def test_format32_overflow_raises():
    with pytest.raises(OverflowError):
        format32(1e300)


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_nonfinite_gives_numeric_text(value):
    negative = math.copysign(1.0, value) < 0
    for text in (format64(value), format32(value)):
        match = NUMERIC.fullmatch(text)
        assert match is not None
        assert match.group(0) == text
        assert text.startswith("-") == negative
        assert text not in ("inf", "-inf", "NaN")


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_roundtrip64(value):
    assert float(format64(value)) == value


@given(st.floats(width=32, allow_nan=False, allow_infinity=False))
def test_roundtrip32(value):
    assert _as_f32(float(format32(value))) == value


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_meta_offsets64(value):
    result = format64_spec(value)
    meta = result.meta
    if isinstance(meta, Decimal):
        assert result.text[meta.offset_decimal_point] == "."
    else:
        assert result.text[meta.offset_exponent] == "e"
        if meta.offset_decimal_point is not None:
            assert result.text[meta.offset_decimal_point] == "."


@given(st.floats(min_value=5e-324, allow_nan=False, allow_infinity=False))
def test_digits_are_shortest64(value):
    digits, exponent = decompose64(value)
    assert digits % 10 != 0
    for candidate in (digits // 10, digits // 10 + 1):
        if candidate == 0:
            continue
        assert float(f"{candidate}e{exponent + 1}") != value
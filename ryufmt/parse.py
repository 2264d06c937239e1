"""Parse decimal text back into double or single precision floats."""

from __future__ import annotations

import enum
import struct
from typing import Union

__all__ = ["ParseErrorKind", "ParseError", "s2f", "s2d"]

_DOUBLE_MANTISSA_BITS = 52
_DOUBLE_EXPONENT_BITS = 11
_DOUBLE_EXPONENT_BIAS = 1023

_FLOAT_MANTISSA_BITS = 23
_FLOAT_EXPONENT_BITS = 8
_FLOAT_EXPONENT_BIAS = 127

_MAX_EXPONENT_DIGITS = 3


class ParseErrorKind(enum.Enum):
    """Why a piece of text could not be parsed."""

    INPUT_TOO_SHORT = "input too short"
    INPUT_TOO_LONG = "input too long"
    MALFORMED_INPUT = "malformed input"


class ParseError(ValueError):
    """Raised when text cannot be converted to a float."""

    def __init__(self, kind: ParseErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.value


def _as_bytes(buffer: Union[str, bytes, bytearray, memoryview]) -> bytes:
    if isinstance(buffer, str):
        try:
            return buffer.encode("ascii")
        except UnicodeEncodeError:
            raise ParseError(ParseErrorKind.MALFORMED_INPUT) from None
    return bytes(buffer)


def _scan(data: bytes, max_digits: int) -> tuple[bool, int, int, int]:
    """Split text into ``(negative, m10, e10, m10digits)``."""
    length = len(data)
    if length == 0:
        raise ParseError(ParseErrorKind.INPUT_TOO_SHORT)

    m10 = 0
    m10digits = 0
    e10 = 0
    e10digits = 0
    dot_index = length
    e_index = length
    negative = data[0] == ord("-")
    i = 1 if negative else 0

    while i < length:
        c = data[i]
        if c == ord("."):
            if dot_index != length:
                raise ParseError(ParseErrorKind.MALFORMED_INPUT)
            dot_index = i
            i += 1
            continue
        if not ord("0") <= c <= ord("9"):
            break
        if m10digits >= max_digits:
            raise ParseError(ParseErrorKind.INPUT_TOO_LONG)
        m10 = 10 * m10 + (c - ord("0"))
        if m10 != 0:
            m10digits += 1
        i += 1

    negative_exponent = False
    if i < length and data[i] in (ord("e"), ord("E")):
        e_index = i
        i += 1
        if i < length and data[i] == ord("-"):
            negative_exponent = True
            i += 1
        elif i < length and data[i] == ord("+"):
            i += 1
        while i < length:
            c = data[i]
            if not ord("0") <= c <= ord("9"):
                raise ParseError(ParseErrorKind.MALFORMED_INPUT)
            if e10digits > _MAX_EXPONENT_DIGITS:
                raise ParseError(ParseErrorKind.INPUT_TOO_LONG)
            e10 = 10 * e10 + (c - ord("0"))
            if e10 != 0:
                e10digits += 1
            i += 1

    if i < length:
        raise ParseError(ParseErrorKind.MALFORMED_INPUT)
    if negative_exponent:
        e10 = -e10
    if dot_index < e_index:
        e10 -= e_index - dot_index - 1
    return negative, m10, e10, m10digits


def _floor_log2(value: int) -> int:
    return value.bit_length() - 1


def _log2_pow5(e: int) -> int:
    return _floor_log2(5**e)


def _ceil_log2_pow5(e: int) -> int:
    return _log2_pow5(e) + 1


def _to_bits(
    negative: bool,
    m10: int,
    e10: int,
    m10digits: int,
    mantissa_bits: int,
    exponent_bits: int,
    bias: int,
    zero_cutoff: int,
    infinity_cutoff: int,
) -> int:
    sign_bit = int(negative) << (exponent_bits + mantissa_bits)
    max_exponent = (1 << exponent_bits) - 1
    infinity = sign_bit | (max_exponent << mantissa_bits)

    if m10 == 0 or m10digits + e10 <= zero_cutoff:
        return sign_bit
    if m10digits + e10 >= infinity_cutoff:
        return infinity

    # Binary exponent chosen so that m2 keeps at least mantissa_bits + 2 bits.
    if e10 >= 0:
        e2 = _floor_log2(m10) + e10 + _log2_pow5(e10) - (mantissa_bits + 1)
    else:
        e2 = _floor_log2(m10) + e10 - _ceil_log2_pow5(-e10) - (mantissa_bits + 1)

    numerator, denominator = m10, 1
    if e10 >= 0:
        numerator *= 10**e10
    else:
        denominator *= 10 ** (-e10)
    if e2 >= 0:
        denominator <<= e2
    else:
        numerator <<= -e2
    m2, remainder = divmod(numerator, denominator)
    trailing_zeros = remainder == 0

    ieee_e2 = max(0, e2 + bias + _floor_log2(m2))
    if ieee_e2 > max_exponent - 1:
        return infinity

    shift = (1 if ieee_e2 == 0 else ieee_e2) - e2 - bias - mantissa_bits
    trailing_zeros = trailing_zeros and (m2 & ((1 << (shift - 1)) - 1)) == 0
    last_removed_bit = (m2 >> (shift - 1)) & 1
    round_up = last_removed_bit != 0 and (not trailing_zeros or ((m2 >> shift) & 1) != 0)

    ieee_m2 = ((m2 >> shift) + int(round_up)) & ((1 << mantissa_bits) - 1)
    if ieee_m2 == 0 and round_up:
        # Rounding overflowed the mantissa; carry into the exponent.
        ieee_e2 += 1
    return sign_bit | (ieee_e2 << mantissa_bits) | ieee_m2


def s2f(buffer: Union[str, bytes, bytearray, memoryview]) -> float:
    """Parse text into the nearest single-precision value.

    At most 9 significant mantissa digits and 4 exponent digits are accepted.
    Raises :class:`ParseError` on empty, too long or malformed input.
    """
    negative, m10, e10, m10digits = _scan(_as_bytes(buffer), 9)
    bits = _to_bits(
        negative, m10, e10, m10digits,
        _FLOAT_MANTISSA_BITS, _FLOAT_EXPONENT_BITS, _FLOAT_EXPONENT_BIAS,
        -46, 40,
    )
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def s2d(buffer: Union[str, bytes, bytearray, memoryview]) -> float:
    """Parse text into the nearest double-precision value.

    At most 17 significant mantissa digits and 4 exponent digits are accepted.
    Raises :class:`ParseError` on empty, too long or malformed input.
    """
    negative, m10, e10, m10digits = _scan(_as_bytes(buffer), 17)
    bits = _to_bits(
        negative, m10, e10, m10digits,
        _DOUBLE_MANTISSA_BITS, _DOUBLE_EXPONENT_BITS, _DOUBLE_EXPONENT_BIAS,
        -324, 310,
    )
    return struct.unpack("<d", struct.pack("<Q", bits))[0]
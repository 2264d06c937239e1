"""Shortest round-trip formatting of binary floating point numbers.

The formatting functions do not special-case NaN or infinity: such inputs
produce some well-formed but unspecified numeric text.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Optional, Union

__all__ = [
    "Decimal",
    "Exponent",
    "Nonfinite",
    "RawFormatted",
    "decompose64",
    "decompose32",
    "format64_spec",
    "format32_spec",
    "format64",
    "format32",
]

DOUBLE_MANTISSA_BITS = 52
DOUBLE_EXPONENT_BITS = 11
DOUBLE_BIAS = 1023

FLOAT_MANTISSA_BITS = 23
FLOAT_EXPONENT_BITS = 8
FLOAT_BIAS = 127


@dataclass(frozen=True)
class Decimal:
    """Plain decimal notation; the index of the decimal point in the text."""

    offset_decimal_point: int


@dataclass(frozen=True)
class Exponent:
    """Scientific notation such as ``1.23e4``.

    ``offset_decimal_point`` is ``None`` when the significand has one digit.
    """

    offset_decimal_point: Optional[int]
    offset_exponent: int


@dataclass(frozen=True)
class Nonfinite:
    """NaN or an infinity."""


Meta = Union[Decimal, Exponent, Nonfinite]


@dataclass(frozen=True)
class RawFormatted:
    """Formatted text together with its layout."""

    text: str
    meta: Meta

    @property
    def initialized(self) -> int:
        """Number of characters of the text."""
        return len(self.text)

    def __str__(self) -> str:
        return self.text


def _bits64(f: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", float(f)))[0]


def _bits32(f: float) -> int:
    return struct.unpack("<I", struct.pack("<f", float(f)))[0]


def _split(bits: int, mantissa_bits: int, exponent_bits: int) -> tuple[bool, int, int]:
    sign = (bits >> (mantissa_bits + exponent_bits)) & 1 == 1
    mantissa = bits & ((1 << mantissa_bits) - 1)
    exponent = (bits >> mantissa_bits) & ((1 << exponent_bits) - 1)
    return sign, mantissa, exponent


def _shortest(ieee_mantissa: int, ieee_exponent: int, mantissa_bits: int, bias: int) -> tuple[int, int]:
    """Shortest decimal ``(digits, exponent)`` inside the rounding interval."""
    if ieee_exponent == 0:
        e2 = 1 - bias - mantissa_bits - 2
        m2 = ieee_mantissa
    else:
        e2 = ieee_exponent - bias - mantissa_bits - 2
        m2 = (1 << mantissa_bits) | ieee_mantissa
    if m2 == 0:
        return 0, 0

    accept_bounds = m2 % 2 == 0
    mm_shift = 1 if (ieee_mantissa != 0 or ieee_exponent <= 1) else 0
    mv = 4 * m2
    mp = mv + 2
    mm = mv - 1 - mm_shift

    # Scale everything to exact integers in units of 10**base.
    if e2 >= 0:
        scale, base = 1 << e2, 0
    else:
        scale, base = 5 ** (-e2), e2
    lower, value, upper = mm * scale, mv * scale, mp * scale
    if not accept_bounds:
        upper -= 1

    # Largest number of removable digits: a multiple of 10**removed must lie
    # in (lower, upper]. This predicate is monotone in ``removed``.
    removed = max(0, len(str(upper - lower)) - 1)
    while upper // 10 ** (removed + 1) > lower // 10 ** (removed + 1):
        removed += 1

    power = 10**removed
    vm, vr = lower // power, value // power
    vm_trailing_zeros = accept_bounds and lower % power == 0
    if removed:
        below = 10 ** (removed - 1)
        last_removed_digit = (value // below) % 10
        vr_trailing_zeros = value % below == 0
    else:
        last_removed_digit = 0
        vr_trailing_zeros = True

    if vm_trailing_zeros:
        while vm % 10 == 0:
            vr_trailing_zeros = vr_trailing_zeros and last_removed_digit == 0
            last_removed_digit = vr % 10
            vr //= 10
            vm //= 10
            removed += 1

    if vr_trailing_zeros and last_removed_digit == 5 and vr % 2 == 0:
        # Exactly halfway: round to even.
        last_removed_digit = 4

    round_up = (vr == vm and (not accept_bounds or not vm_trailing_zeros)) or last_removed_digit >= 5
    return vr + int(round_up), base + removed


def decompose64(f: float) -> tuple[int, int]:
    """Return ``(digits, exponent)`` with ``|f| == digits * 10**exponent`` shortest.

    The sign is ignored; zero gives ``(0, 0)``.
    """
    _, mantissa, exponent = _split(_bits64(f), DOUBLE_MANTISSA_BITS, DOUBLE_EXPONENT_BITS)
    return _shortest(mantissa, exponent, DOUBLE_MANTISSA_BITS, DOUBLE_BIAS)


def decompose32(f: float) -> tuple[int, int]:
    """Single-precision counterpart of :func:`decompose64`.

    ``f`` is first rounded to single precision; values too large for it
    raise ``OverflowError``.
    """
    _, mantissa, exponent = _split(_bits32(f), FLOAT_MANTISSA_BITS, FLOAT_EXPONENT_BITS)
    return _shortest(mantissa, exponent, FLOAT_MANTISSA_BITS, FLOAT_BIAS)


def _layout(sign: bool, digits: int, exponent: int, max_kk: int, min_kk: int) -> RawFormatted:
    prefix = "-" if sign else ""
    index = len(prefix)
    text = str(digits)
    length = len(text)
    kk = length + exponent  # 10**(kk-1) <= v < 10**kk

    if 0 <= exponent and kk <= max_kk:
        # 1234e7 -> 12340000000.0
        body = text + "0" * (kk - length) + ".0"
        return RawFormatted(prefix + body, Decimal(index + kk))
    if 0 < kk <= max_kk:
        # 1234e-2 -> 12.34
        body = f"{text[:kk]}.{text[kk:]}"
        return RawFormatted(prefix + body, Decimal(index + kk))
    if min_kk < kk <= 0:
        # 1234e-6 -> 0.001234
        body = "0." + "0" * (-kk) + text
        return RawFormatted(prefix + body, Decimal(index + 1))
    if length == 1:
        # 1e30
        body = f"{text}e{kk - 1}"
        return RawFormatted(prefix + body, Exponent(None, index + 1))
    # 1234e30 -> 1.234e33
    body = f"{text[0]}.{text[1:]}e{kk - 1}"
    return RawFormatted(prefix + body, Exponent(index + 1, index + length + 1))


def format64_spec(f: float) -> RawFormatted:
    """Format a double with its layout metadata."""
    sign, mantissa, exponent = _split(_bits64(f), DOUBLE_MANTISSA_BITS, DOUBLE_EXPONENT_BITS)
    if mantissa == 0 and exponent == 0:
        prefix = "-" if sign else ""
        return RawFormatted(prefix + "0.0", Decimal(len(prefix) + 1))
    digits, exp10 = _shortest(mantissa, exponent, DOUBLE_MANTISSA_BITS, DOUBLE_BIAS)
    return _layout(sign, digits, exp10, 16, -5)


def format32(f: float) -> str:
    """Format ``f`` rounded to single precision as shortest text."""
    return format32_spec(f).text


def format32_spec(f: float) -> RawFormatted:
    """Format a single-precision value with its layout metadata."""
    sign, mantissa, exponent = _split(_bits32(f), FLOAT_MANTISSA_BITS, FLOAT_EXPONENT_BITS)
    if mantissa == 0 and exponent == 0:
        prefix = "-" if sign else ""
        return RawFormatted(prefix + "0.0", Decimal(len(prefix) + 1))
    digits, exp10 = _shortest(mantissa, exponent, FLOAT_MANTISSA_BITS, FLOAT_BIAS)
    return _layout(sign, digits, exp10, 13, -6)


def format64(f: float) -> str:
    """Format a double as shortest round-trip text."""
    return format64_spec(f).text
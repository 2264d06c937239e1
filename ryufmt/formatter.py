"""Format Python floats as shortest round-trip text in double or single precision."""

from __future__ import annotations

import struct

from ryufmt.formatted import Formatted
from ryufmt.raw import Nonfinite, format32_spec, format64_spec

__all__ = ["format_f64", "format_f32", "format_finite_f64", "format_finite_f32"]

NAN = "NaN"
INFINITY = "inf"
NEG_INFINITY = "-inf"

_F64_EXP_MASK = 0x7FF0000000000000
_F64_MANTISSA_MASK = 0x000FFFFFFFFFFFFF
_F64_SIGN_MASK = 0x8000000000000000

_F32_EXP_MASK = 0x7F800000
_F32_MANTISSA_MASK = 0x007FFFFF
_F32_SIGN_MASK = 0x80000000


def _bits64(d: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", float(d)))[0]


def _bits32(f: float) -> int:
    return struct.unpack("<I", struct.pack("<f", float(f)))[0]


def _nonfinite_text(bits: int, mantissa_mask: int, sign_mask: int) -> str:
    if bits & mantissa_mask:
        return NAN
    if bits & sign_mask:
        return NEG_INFINITY
    return INFINITY


def format_f64(d: float) -> Formatted:
    """Format ``d`` as a double.

    NaN becomes ``"NaN"``, infinities ``"inf"`` and ``"-inf"``.
    """
    bits = _bits64(d)
    if bits & _F64_EXP_MASK == _F64_EXP_MASK:
        return Formatted(_nonfinite_text(bits, _F64_MANTISSA_MASK, _F64_SIGN_MASK), Nonfinite())
    return format_finite_f64(d)


def format_f32(f: float) -> Formatted:
    """Format ``f`` rounded to single precision.

    NaN becomes ``"NaN"``, infinities ``"inf"`` and ``"-inf"``. Finite values
    too large for single precision raise ``OverflowError``.
    """
    bits = _bits32(f)
    if bits & _F32_EXP_MASK == _F32_EXP_MASK:
        return Formatted(_nonfinite_text(bits, _F32_MANTISSA_MASK, _F32_SIGN_MASK), Nonfinite())
    return format_finite_f32(f)


def format_finite_f64(d: float) -> Formatted:
    """Format ``d`` as a double without checking for NaN or infinity.

    Non-finite input gives well-formed but unspecified numeric text.
    """
    return Formatted.from_raw(format64_spec(d))


def format_finite_f32(f: float) -> Formatted:
    """Single-precision counterpart of :func:`format_finite_f64`."""
    return Formatted.from_raw(format32_spec(f))
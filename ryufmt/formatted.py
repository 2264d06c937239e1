"""Formatted text of a floating point number, with decimal-place helpers."""

from __future__ import annotations

from dataclasses import dataclass

from ryufmt.raw import Decimal, Exponent, Meta, Nonfinite, RawFormatted

__all__ = ["BUFFER_LEN", "Formatted"]

BUFFER_LEN = 32
"""Length of the longest text a formatted number can take."""


@dataclass
class Formatted:
    """The text of a formatted number and its layout.

    ``meta`` tells whether the text is plain decimal, in exponent form or
    non-finite, and where its decimal point and exponent sit.
    """

    text: str
    meta: Meta

    @classmethod
    def from_raw(cls, raw: RawFormatted) -> Formatted:
        """Wrap the result of a raw formatting call."""
        return cls(raw.text, raw.meta)

    @property
    def initialized(self) -> int:
        """Number of characters of the text."""
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def __len__(self) -> int:
        return len(self.text)

    def as_str(self) -> str:
        """Return the formatted text."""
        return self.text

    def as_bytes(self) -> bytes:
        """Return the formatted text as ASCII bytes."""
        return self.text.encode("ascii")

    def as_str_fixed_dp(self, decimal_places: int) -> str:
        """Return the text cut to ``decimal_places`` decimals where possible.

        Shorter decimal parts are not padded; exponent and non-finite forms
        are returned unchanged.
        """
        _check_places(decimal_places)
        meta = self.meta
        if isinstance(meta, Decimal):
            point = meta.offset_decimal_point
            if point + decimal_places < len(self.text):
                return self.text[: point + decimal_places + 1]
        return self.text

    def as_str_adjusting_dp(self, decimal_places: int) -> str:
        """Return the text with exactly ``decimal_places`` decimals.

        A shorter decimal part is padded with zeros, and the padding is kept
        in this object. Exponent and non-finite forms are returned unchanged.
        """
        _check_places(decimal_places)
        meta = self.meta
        if not isinstance(meta, Decimal):
            return self.text
        target = meta.offset_decimal_point + decimal_places + 1
        if target > len(self.text):
            self.text += "0" * (target - len(self.text))
        return self.text[:target]

    def copy_to_bytes(self, decimal_places: int, buf: bytearray) -> int:
        """Write the text with exactly ``decimal_places`` decimals into ``buf``.

        With zero places the decimal point is dropped. In exponent form the
        significand is adjusted and the exponent kept. Non-finite text is
        copied unchanged. Returns the number of bytes written and raises
        ``ValueError`` if ``buf`` is too small.
        """
        _check_places(decimal_places)
        data = self._fixed_text(decimal_places).encode("ascii")
        if len(data) > len(buf):
            raise ValueError(f"buffer of {len(buf)} bytes is too small for {len(data)} bytes")
        buf[: len(data)] = data
        return len(data)

    def _fixed_text(self, decimal_places: int) -> str:
        meta = self.meta
        text = self.text
        if isinstance(meta, Decimal):
            point = meta.offset_decimal_point
            if decimal_places == 0:
                return text[:point]
            target = point + decimal_places + 1
            return text[:target].ljust(target, "0")
        if isinstance(meta, Exponent):
            if meta.offset_decimal_point is None:
                integer_end, decimal_len = meta.offset_exponent, 0
            else:
                integer_end = meta.offset_decimal_point
                decimal_len = meta.offset_exponent - meta.offset_decimal_point
            integer_part = text[:integer_end]
            decimal_part = text[integer_end : integer_end + decimal_len]
            exponent_part = text[integer_end + decimal_len :]
            # The decimal part includes its leading '.'.
            target_decimal = 0 if decimal_places == 0 else decimal_places + 1
            if target_decimal == 0:
                new_decimal = ""
            elif decimal_len == 0:
                new_decimal = "." + "0" * (target_decimal - 1)
            else:
                new_decimal = decimal_part[:target_decimal].ljust(target_decimal, "0")
            return integer_part + new_decimal + exponent_part
        if isinstance(meta, Nonfinite):
            return text
        raise TypeError(f"unknown layout {meta!r}")


def _check_places(decimal_places: int) -> None:
    if decimal_places < 0:
        raise ValueError("decimal_places must not be negative")
# ryufmt

Shortest round-trip text for `float` values, in both double (64-bit) and
single (32-bit) precision. The printed digits are the fewest that parse back
to exactly the same binary value. The package is pure Python and has no
dependencies.

## Installing

```
pip install ryufmt
```

## Formatting

```python
from ryufmt.formatter import format_f64, format_f32

format_f64(1.234).as_str()         # '1.234'
format_f64(1.1e128).as_str()       # '1.1e128'
format_f64(5e-324).as_str()        # '5e-324'
format_f64(float("nan")).as_str()  # 'NaN'
format_f64(float("-inf")).as_str() # '-inf'

format_f32(0.3).as_str()           # '0.3'  (value rounded to single precision first)
format_f32(3.4028235e38).as_str()  # '3.4028235e38'
```

Integral values keep a trailing `.0` (`1.0`, `1234000000000000.0`). Values
whose decimal magnitude falls outside a fixed window switch to exponent form
(`1.234e16`). Non-finite values become `NaN`, `inf` and `-inf`.

`format_f32` rounds its argument to single precision; a finite value too
large for single precision raises `OverflowError`.

`format_finite_f64` and `format_finite_f32` skip the NaN/infinity check;
given a non-finite value they return well-formed but meaningless numeric
text, so give them only finite values.

## The `Formatted` object

All four functions return a `ryufmt.formatted.Formatted`. Besides `as_str()`,
it offers `as_bytes()` (ASCII bytes), `str()`, `bytes()` and `len()`, a
`meta` attribute describing the layout, and helpers for decimal places:

```python
from ryufmt.formatter import format_f64

formatted = format_f64(3.14159)
formatted.as_str_fixed_dp(2)       # '3.14'   (truncates, never pads)

formatted = format_f64(3.1)
formatted.as_str_fixed_dp(3)       # '3.1'
formatted.as_str_adjusting_dp(3)   # '3.100'  (pads with zeros and keeps them)
formatted.as_str_fixed_dp(3)       # '3.100'

buf = bytearray(34)
formatted = format_f64(3.14e20)
n = formatted.copy_to_bytes(3, buf)
bytes(buf[:n])                     # b'3.140e20'
```

- `as_str_fixed_dp` and `as_str_adjusting_dp` leave exponent-form and
  non-finite text unchanged.
- `copy_to_bytes(decimal_places, buf)` writes exactly the requested number of
  decimal places for decimal and exponent forms alike (zero places drops the
  decimal point), copies non-finite text unchanged, returns the number of
  bytes written, and raises `ValueError` if `buf` is too small.
- A negative number of decimal places raises `ValueError`.

`ryufmt.formatted.BUFFER_LEN` (32) is the longest text a formatted number can
take; a buffer of `BUFFER_LEN + decimal_places` bytes is always enough for
`copy_to_bytes`.

## Lower-level pieces

`ryufmt.raw` works on finite values only:

- `format64(f)` / `format32(f)` return the text.
- `format64_spec(f)` / `format32_spec(f)` return a `RawFormatted` holding the
  `text` and its `meta`: `Decimal(offset_decimal_point)`,
  `Exponent(offset_decimal_point, offset_exponent)` (the decimal point offset
  is `None` for a one-digit significand) or `Nonfinite()`.
- `decompose64(f)` / `decompose32(f)` return the shortest `(digits, exponent)`
  pair with `abs(f) == digits * 10**exponent`; zero gives `(0, 0)`.

## Parsing (experimental)

```python
from ryufmt.parse import s2d, s2f, ParseError

s2d(b"1.234e16")   # 1.234e16
s2d("-0.001")      # -0.001
s2f(b"0.3")        # 0.30000001192092896 (nearest single-precision value)
```

Both accept `str` or bytes-like input: an optional leading `-`, digits with
at most one `.`, and an optional `e`/`E` exponent with a `+` or `-` sign.
`s2d` takes at most 17 significant mantissa digits and `s2f` at most 9; the
exponent takes at most 4 digits. Results too small round to a signed zero
and results too large give a signed infinity.

Empty, malformed or over-long input raises `ParseError` (a `ValueError`),
whose `kind` is a `ParseErrorKind`: `INPUT_TOO_SHORT`, `INPUT_TOO_LONG` or
`MALFORMED_INPUT`. The parser does not read `NaN`, `inf` or a leading `+`.

## What it does not do

This is a library only: there is no command-line tool. It formats to the
shortest round-trip text and does not offer rounding to a chosen precision;
the decimal-place helpers only cut or pad the shortest text.

## Running the tests

```
pip install -e ".[test]"
pytest
```
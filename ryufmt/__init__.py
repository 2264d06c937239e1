"""Shortest round-trip formatting and experimental parsing of double and single precision floats."""

__version__ = "2.0.0a2"
__all__ = ["formatted", "formatter", "parse", "raw"]
"""Conversion between half-width and full-width Japanese text."""
from .convert import (
    CONVERTERS,
    ConvOption,
    get_converter,
    h2z,
    hira2hkata,
    hira2kata,
    kata2hira,
    z2h,
)

__all__ = [
    "CONVERTERS",
    "ConvOption",
    "get_converter",
    "h2z",
    "hira2hkata",
    "hira2kata",
    "kata2hira",
    "z2h",
]

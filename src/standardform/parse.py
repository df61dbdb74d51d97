"""
Direct text decoding for standard form numbers.

Three surface forms are recognised, tried in this order:

- plain decimal:      "42", "-0.025", ".5", "inf", "NaN"
- e-notation:         "1.23e3", "4E-2"
- engineering:        "2.5*10^-2"

The decoder returns raw (mantissa, exponent) components; normalisation is the
caller's job (see StandardForm.parse).
"""

from __future__ import annotations

import re
from typing import Tuple, Union

from .constants import EXPONENT_MIN, EXPONENT_MAX
from .exc import (
    MantissaParseError,
    ExponentParseError,
    InvalidFormatError,
    InvalidEncodingError,
)

# Debug printing control (parsing layer)
DEBUG_PARSE = False

def _dbg(msg: str) -> None:
    if DEBUG_PARSE:
        print(msg)


# ---------------------------------------------------------------------------
# Literal grammars
# ---------------------------------------------------------------------------

_SPECIAL = r"inf|infinity|nan"
_DIGITS = r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)"

#: Decimal number without exponent marker.
PLAIN_DECIMAL_RE = re.compile(rf"[+-]?(?:{_SPECIAL}|{_DIGITS})", re.IGNORECASE)

#: Any float literal; the mantissa segment of e/engineering forms must match this.
FLOAT_LITERAL_RE = re.compile(rf"[+-]?(?:{_SPECIAL}|{_DIGITS}(?:[eE][+-]?[0-9]+)?)", re.IGNORECASE)

#: Signed decimal integer for exponent segments.
EXPONENT_RE = re.compile(r"[+-]?[0-9]+")

ENGINEERING_MARKER = "*10^"
_ENGINEERING_HEAD = ENGINEERING_MARKER[:-1]

TextLike = Union[str, bytes, bytearray, memoryview]


# ---------------------------------------------------------------------------
# Segment decoders
# ---------------------------------------------------------------------------

def parse_mantissa(segment: str) -> float:
    """Decode a float literal; raises MantissaParseError."""
    if not FLOAT_LITERAL_RE.fullmatch(segment):
        raise MantissaParseError(segment)
    return float(segment)


def parse_exponent(segment: str) -> int:
    """Decode a signed 8-bit integer; raises ExponentParseError."""
    if segment == "":
        raise ExponentParseError(segment, "cannot parse integer from empty string")
    if not EXPONENT_RE.fullmatch(segment):
        raise ExponentParseError(segment)
    e = int(segment)
    if e < EXPONENT_MIN or e > EXPONENT_MAX:
        raise ExponentParseError(segment, "number too large or too small to fit in target type")
    return e


def decode_utf8(data: Union[bytes, bytearray, memoryview]) -> str:
    """Strict UTF-8 decode for the byte entry point."""
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as err:
        raise InvalidEncodingError(f"Invalid UTF-8 sequence: {err}") from err


def _find_e(text: str) -> int:
    hits = [i for i in (text.find("e"), text.find("E")) if i >= 0]
    return min(hits) if hits else -1


# ---------------------------------------------------------------------------
# Public decoder
# ---------------------------------------------------------------------------

def decode(text: TextLike) -> Tuple[float, int]:
    """Decode text (or UTF-8 bytes) into unnormalised (mantissa, exponent).

    Raises a ParsingStandardFormError subclass on failure.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        text = decode_utf8(text)
    if not isinstance(text, str):
        raise TypeError(f"expected str or bytes, got {type(text).__name__}")

    if PLAIN_DECIMAL_RE.fullmatch(text):
        _dbg(f"decode: plain decimal {text!r}")
        return float(text), 0

    idx = _find_e(text)
    if idx >= 0:
        _dbg(f"decode: e-notation split at {idx} in {text!r}")
        return parse_mantissa(text[:idx]), parse_exponent(text[idx + 1:])

    idx = text.find("^")
    if idx >= 0:
        head = text[:idx]
        if not head.endswith(_ENGINEERING_HEAD):
            raise InvalidFormatError(text)
        _dbg(f"decode: engineering split at {idx} in {text!r}")
        return parse_mantissa(head[: -len(_ENGINEERING_HEAD)]), parse_exponent(text[idx + 1:])

    raise InvalidFormatError(text)


__all__ = [
    "PLAIN_DECIMAL_RE",
    "FLOAT_LITERAL_RE",
    "EXPONENT_RE",
    "ENGINEERING_MARKER",
    "parse_mantissa",
    "parse_exponent",
    "decode_utf8",
    "decode",
]

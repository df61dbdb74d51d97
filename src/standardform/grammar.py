"""
Prefix scanner for standard form numbers, for use inside larger text grammars.

Each scanner consumes a number from the start of the input and returns
(rest, value), leaving anything after the number untouched:

    scan_standard_form("2.5*10^-2 m/s")        -> (" m/s", 2.5e-2)
    scan_standard_form("42, 7")                -> (", 7", 4.2e1)
    scan_standard_form_strict("42")            -> InvalidFormatError

Accepted exponent markers are 'e', 'E' and '*10^'. On complete inputs the
results agree with StandardForm.parse.
"""

from __future__ import annotations

import re
from typing import Tuple

from .exc import MantissaParseError, InvalidFormatError
from .parse import parse_exponent
from .standard_form import StandardForm

# Debug printing control (scanner layer)
DEBUG_GRAMMAR = False

def _dbg(msg: str) -> None:
    if DEBUG_GRAMMAR:
        print(msg)


# Longest special word first so 'infinity' is not cut at 'inf'.
_MANTISSA_PREFIX_RE = re.compile(
    r"[+-]?(?:infinity|inf|nan|[0-9]+\.?[0-9]*|\.[0-9]+)", re.IGNORECASE
)
_EXPONENT_TAIL_RE = re.compile(r"(?:[eE]|\*10\^)([+-]?[0-9]+)")


def _scan(text: str, require_exponent: bool) -> Tuple[str, StandardForm]:
    m_match = _MANTISSA_PREFIX_RE.match(text)
    if m_match is None:
        raise MantissaParseError(text)
    mantissa = float(m_match.group(0))
    pos = m_match.end()
    _dbg(f"scan: mantissa={mantissa} from {m_match.group(0)!r}, pos={pos}")

    e_match = _EXPONENT_TAIL_RE.match(text, pos)
    if e_match is None:
        if require_exponent:
            raise InvalidFormatError(text)
        return text[pos:], StandardForm(mantissa, 0)

    exponent = parse_exponent(e_match.group(1))
    _dbg(f"scan: exponent={exponent}, rest={text[e_match.end():]!r}")
    return text[e_match.end():], StandardForm(mantissa, exponent)


def scan_standard_form(text: str) -> Tuple[str, StandardForm]:
    """Scan a number whose exponent is optional (defaults to 0).

    A dangling or malformed exponent marker is not consumed: "1e" -> ("e", 1).
    Raises MantissaParseError when the input does not start with a number and
    ExponentParseError when the exponent does not fit in 8 bits.
    """
    return _scan(text, require_exponent=False)


def scan_standard_form_strict(text: str) -> Tuple[str, StandardForm]:
    """Scan a number that must carry an exponent; InvalidFormatError otherwise."""
    return _scan(text, require_exponent=True)


__all__ = [
    "scan_standard_form",
    "scan_standard_form_strict",
]

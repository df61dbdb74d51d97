"""
standardform
============

Numbers in standard form: a float mantissa in [1, 10] (or [-10, -1], or 0)
scaled by an integer power of ten. All arithmetic re-normalises its result.

The core type lives in `standard_form`; text decoding in `parse`, rendering in
`fmt`, prefix scanning for larger grammars in `grammar` and the generic numeric
capability adapter in `num`.
"""

# Bounds and tolerances
from .constants import (
    MANTISSA_MIN,
    MANTISSA_MAX,
    EXPONENT_MIN,
    EXPONENT_MAX,
    ROUNDING_TOLERANCE,
    SCIENTIFIC_DISPLAY_THRESHOLD,
    PARSE_RADIX,
)

# Exceptions
from .exc import (
    ParsingStandardFormError,
    MantissaParseError,
    ExponentParseError,
    InvalidFormatError,
    InvalidEncodingError,
    InvalidRadixError,
)

# Formatting helpers
from .fmt import fmt_float, fmt_scientific, fmt_engineering

# Core value type
from .standard_form import StandardForm, normalize

# Prefix scanner
from .grammar import scan_standard_form, scan_standard_form_strict

# Numeric capability adapter
from .num import Numeric, StandardFormNum, STANDARD_FORM_NUM

__all__ = [
    # constants
    "MANTISSA_MIN",
    "MANTISSA_MAX",
    "EXPONENT_MIN",
    "EXPONENT_MAX",
    "ROUNDING_TOLERANCE",
    "SCIENTIFIC_DISPLAY_THRESHOLD",
    "PARSE_RADIX",
    # exceptions
    "ParsingStandardFormError",
    "MantissaParseError",
    "ExponentParseError",
    "InvalidFormatError",
    "InvalidEncodingError",
    "InvalidRadixError",
    # fmt
    "fmt_float",
    "fmt_scientific",
    "fmt_engineering",
    # core
    "StandardForm",
    "normalize",
    # grammar
    "scan_standard_form",
    "scan_standard_form_strict",
    # num
    "Numeric",
    "StandardFormNum",
    "STANDARD_FORM_NUM",
]

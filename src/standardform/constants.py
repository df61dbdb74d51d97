"""
Standard Form Constants
=======================

Bounds and tolerances shared by the normaliser, the arithmetic operators and
the text codecs. Plain module-level values; nothing here is mutated at runtime.
"""

# NOTE: The mantissa band is inclusive at both ends, so 10 * 10^n and 1 * 10^(n+1)
#       are both accepted as normalised.

# ---------------------------------------------------------------------------
# Normalised mantissa band
# ---------------------------------------------------------------------------

#: Smallest magnitude a non-zero normalised mantissa may take.
MANTISSA_MIN: float = 1.0

#: Largest magnitude a normalised mantissa may take (inclusive).
MANTISSA_MAX: float = 10.0


# ---------------------------------------------------------------------------
# Exponent range (signed 8-bit)
# ---------------------------------------------------------------------------

#: Exponent bounds accepted by the text decoders. Arithmetic does not clamp.
EXPONENT_MIN: int = -128
EXPONENT_MAX: int = 127


# ---------------------------------------------------------------------------
# Rounding and display
# ---------------------------------------------------------------------------

#: Subtraction and multiplication round mantissas to 1/ROUNDING_TOLERANCE.
ROUNDING_TOLERANCE: float = 1.0e6

#: Display switches to scientific notation for exponents above this value.
SCIENTIFIC_DISPLAY_THRESHOLD: int = 4

#: The only radix accepted by radix-aware parsing.
PARSE_RADIX: int = 10


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "MANTISSA_MIN",
    "MANTISSA_MAX",
    "EXPONENT_MIN",
    "EXPONENT_MAX",
    "ROUNDING_TOLERANCE",
    "SCIENTIFIC_DISPLAY_THRESHOLD",
    "PARSE_RADIX",
]

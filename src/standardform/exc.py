"""
Exception types for standardform.

These are dependency-free and may be imported by all modules.
"""

__all__ = [
    "ParsingStandardFormError",
    "MantissaParseError",
    "ExponentParseError",
    "InvalidFormatError",
    "InvalidEncodingError",
    "InvalidRadixError",
]


class ParsingStandardFormError(ValueError):
    """Base class for every failure to decode text into a StandardForm."""
    pass


class MantissaParseError(ParsingStandardFormError):
    """Raised when the mantissa segment is not a floating-point literal.

    Attributes
    ----------
    segment : str
        The offending mantissa text.
    """

    def __init__(self, segment: str):
        super().__init__(f"Error parsing mantissa: invalid float literal {segment!r}")
        self.segment = segment


class ExponentParseError(ParsingStandardFormError):
    """Raised when the exponent segment is not a signed 8-bit integer.

    Attributes
    ----------
    segment : str
        The offending exponent text.
    reason : str
        Short description (invalid digit, out of range, empty).
    """

    def __init__(self, segment: str, reason: str = "invalid digit found in string"):
        super().__init__(f"Error parsing exponent: {reason} ({segment!r})")
        self.segment = segment
        self.reason = reason


class InvalidFormatError(ParsingStandardFormError):
    """Raised when text matches none of the recognised standard form shapes."""

    def __init__(self, text: str):
        super().__init__(f"Invalid format: {text!r}")
        self.text = text


class InvalidEncodingError(ParsingStandardFormError):
    """Raised when a byte sequence is not valid UTF-8 text."""
    pass


class InvalidRadixError(ParsingStandardFormError):
    """Raised when radix-aware parsing is asked for any radix other than 10."""

    def __init__(self, radix: int):
        super().__init__(f"Invalid radix: {radix} (only radix 10 is supported)")
        self.radix = radix

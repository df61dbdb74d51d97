"""
Formatting helpers for standard form components.

Floats are rendered in positional notation with the shortest digit string that
round-trips, integral values without a trailing ".0". Decimal is used here only
to expand the digit string; no arithmetic happens in this module.
"""

import math
from decimal import Decimal


# ---------------------------------------------------------------------------
# Float rendering
# ---------------------------------------------------------------------------

def fmt_float(x: float) -> str:
    """Render a float as a plain number, e.g.:
      2.0    -> '2'
      0.025  -> '0.025'
      1e-07  -> '0.0000001'
      1e+16  -> '10000000000000000'
      -0.0   -> '-0'
    Non-finite values render as 'inf', '-inf' and 'NaN'.
    """
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    s = format(Decimal(repr(x)), "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


# ---------------------------------------------------------------------------
# Component notations
# ---------------------------------------------------------------------------

def fmt_scientific(mantissa: float, exponent: int) -> str:
    """'{mantissa}e{exponent}', e.g. (2.5, -2) -> '2.5e-2'."""
    return f"{fmt_float(mantissa)}e{exponent}"


def fmt_engineering(mantissa: float, exponent: int) -> str:
    """'{mantissa}*10^{exponent}', e.g. (2.5, -2) -> '2.5*10^-2'."""
    return f"{fmt_float(mantissa)}*10^{exponent}"


__all__ = [
    "fmt_float",
    "fmt_scientific",
    "fmt_engineering",
]

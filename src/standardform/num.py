"""
Numeric capability adapter for StandardForm.

Generic numeric code can depend on the `Numeric` protocol (zero/one, sign,
radix parsing, primitive conversions, powers) instead of on StandardForm
itself. `StandardFormNum` implements it using only StandardForm's public
operations; the core type does not know about this module.

Primitive conversions follow fixed-width integer rules: values are truncated
toward zero and anything outside the target width (or non-finite) yields None.
"""

from __future__ import annotations

import math
import numbers
from typing import Dict, Optional, Protocol, Tuple, TypeVar

from .constants import PARSE_RADIX
from .exc import InvalidRadixError
from .standard_form import StandardForm, float_pow

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Integer widths
# ---------------------------------------------------------------------------

INT_BOUNDS: Dict[str, Tuple[int, int]] = {
    "i8": (-(2 ** 7), 2 ** 7 - 1),
    "i16": (-(2 ** 15), 2 ** 15 - 1),
    "i32": (-(2 ** 31), 2 ** 31 - 1),
    "i64": (-(2 ** 63), 2 ** 63 - 1),
    "u8": (0, 2 ** 8 - 1),
    "u16": (0, 2 ** 16 - 1),
    "u32": (0, 2 ** 32 - 1),
    "u64": (0, 2 ** 64 - 1),
}


def _bounds(kind: str) -> Tuple[int, int]:
    try:
        return INT_BOUNDS[kind]
    except KeyError:
        raise ValueError(f"unknown integer width {kind!r}; expected one of {sorted(INT_BOUNDS)}") from None


# ---------------------------------------------------------------------------
# Capability protocol
# ---------------------------------------------------------------------------

class Numeric(Protocol[T]):
    """Capabilities generic numeric code may rely on."""

    def zero(self) -> T: ...
    def is_zero(self, x: T) -> bool: ...
    def one(self) -> T: ...
    def from_str_radix(self, text: str, radix: int) -> T: ...
    def abs(self, x: T) -> T: ...
    def abs_sub(self, a: T, b: T) -> T: ...
    def signum(self, x: T) -> T: ...
    def is_positive(self, x: T) -> bool: ...
    def is_negative(self, x: T) -> bool: ...
    def from_int(self, n: int, kind: str = "i64") -> Optional[T]: ...
    def from_f64(self, x: float) -> Optional[T]: ...
    def to_int(self, x: T, kind: str = "i64") -> Optional[int]: ...
    def to_f64(self, x: T) -> Optional[float]: ...
    def pow(self, x: T, n: numbers.Real) -> float: ...
    def powf(self, x: T, other: T) -> float: ...


# ---------------------------------------------------------------------------
# StandardForm implementation
# ---------------------------------------------------------------------------

class StandardFormNum:
    """Stateless `Numeric[StandardForm]` implementation."""

    # ------------- identities -------------

    def zero(self) -> StandardForm:
        return StandardForm.zero()

    def is_zero(self, x: StandardForm) -> bool:
        return x.is_zero()

    def one(self) -> StandardForm:
        return StandardForm.one()

    # ------------- parsing -------------

    def from_str_radix(self, text: str, radix: int) -> StandardForm:
        """Parse base-10 text; any other radix is rejected before parsing."""
        if radix != PARSE_RADIX:
            raise InvalidRadixError(radix)
        return StandardForm.parse(text)

    # ------------- sign -------------

    def abs(self, x: StandardForm) -> StandardForm:
        return abs(x)

    def abs_sub(self, a: StandardForm, b: StandardForm) -> StandardForm:
        """max(a - b, 0)."""
        if a <= b:
            return self.zero()
        return a - b

    def signum(self, x: StandardForm) -> StandardForm:
        """one, -one, or zero (for zero and NaN mantissas)."""
        m = x.mantissa
        if m == 0.0 or math.isnan(m):
            return self.zero()
        return self.one() if m > 0 else -self.one()

    def is_positive(self, x: StandardForm) -> bool:
        return math.copysign(1.0, x.mantissa) > 0

    def is_negative(self, x: StandardForm) -> bool:
        return math.copysign(1.0, x.mantissa) < 0

    # ------------- from primitives -------------

    def from_int(self, n: int, kind: str = "i64") -> Optional[StandardForm]:
        lo, hi = _bounds(kind)
        if n < lo or n > hi:
            return None
        return StandardForm(float(n), 0)

    def from_i64(self, n: int) -> Optional[StandardForm]:
        return self.from_int(n, "i64")

    def from_u64(self, n: int) -> Optional[StandardForm]:
        return self.from_int(n, "u64")

    def from_f64(self, x: float) -> Optional[StandardForm]:
        return StandardForm(float(x), 0)

    # ------------- to primitives -------------

    def to_int(self, x: StandardForm, kind: str = "i64") -> Optional[int]:
        lo, hi = _bounds(kind)
        f = float(x)
        if not math.isfinite(f):
            return None
        n = math.trunc(f)
        if n < lo or n > hi:
            return None
        return n

    def to_i64(self, x: StandardForm) -> Optional[int]:
        return self.to_int(x, "i64")

    def to_u64(self, x: StandardForm) -> Optional[int]:
        return self.to_int(x, "u64")

    def to_i8(self, x: StandardForm) -> Optional[int]:
        return self.to_int(x, "i8")

    def to_i16(self, x: StandardForm) -> Optional[int]:
        return self.to_int(x, "i16")

    def to_i32(self, x: StandardForm) -> Optional[int]:
        return self.to_int(x, "i32")

    def to_u8(self, x: StandardForm) -> Optional[int]:
        return self.to_int(x, "u8")

    def to_u16(self, x: StandardForm) -> Optional[int]:
        return self.to_int(x, "u16")

    def to_u32(self, x: StandardForm) -> Optional[int]:
        return self.to_int(x, "u32")

    def to_f64(self, x: StandardForm) -> Optional[float]:
        return float(x)

    # ------------- powers -------------

    def pow(self, x: StandardForm, n: numbers.Real) -> float:
        """float(x) ** n with IEEE overflow/domain results (never raises)."""
        return float_pow(float(x), float(n))

    def powf(self, x: StandardForm, other: StandardForm) -> float:
        return x.powf(other)


#: Shared adapter instance.
STANDARD_FORM_NUM = StandardFormNum()


__all__ = [
    "INT_BOUNDS",
    "Numeric",
    "StandardFormNum",
    "STANDARD_FORM_NUM",
]

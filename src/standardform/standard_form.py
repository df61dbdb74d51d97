"""
StandardForm: a float mantissa scaled by an integer power of ten.

- Value = mantissa * 10^exponent, computed in double precision.
- Normalised band: mantissa == 0, or 1 <= |mantissa| <= 10 (both ends inclusive).
- Zero is canonicalised to exponent 0; non-finite mantissas are left as-is.
- Normalisation shifts one decade per step (multiply/divide by 10); it never
  goes through logarithms, so rounding matches repeated float scaling.
- Rounding: subtraction and multiplication round the mantissa to 1e-6 (ties away
  from zero) before normalising; addition and division do not round.
- Ordering is exponent-first, mantissa only on equal exponents.

Native numbers (any numbers.Real) are promoted as StandardForm(float(x), 0)
before arithmetic or comparison.
"""

from __future__ import annotations

import math
import numbers
import operator
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Tuple, Union

from .constants import (
    MANTISSA_MIN,
    MANTISSA_MAX,
    ROUNDING_TOLERANCE,
    SCIENTIFIC_DISPLAY_THRESHOLD,
)
from .fmt import fmt_float, fmt_scientific, fmt_engineering
from .parse import TextLike, decode

# Debug printing control
DEBUG_STANDARDFORM = False

def _dbg(msg: str) -> None:
    if DEBUG_STANDARDFORM:
        print(msg)


# ----------------------------
# Float helpers (centralised)
# ----------------------------

def _in_range(m: float) -> bool:
    return (MANTISSA_MIN <= m <= MANTISSA_MAX) or (-MANTISSA_MAX <= m <= -MANTISSA_MIN)


def _pow10(n: int) -> float:
    """10.0 ** n, saturating to inf instead of raising OverflowError."""
    try:
        return 10.0 ** n
    except OverflowError:
        return math.inf


def _round_mantissa(x: float) -> float:
    """Round to 1/ROUNDING_TOLERANCE, ties away from zero."""
    scaled = x * ROUNDING_TOLERANCE
    if not math.isfinite(scaled):
        return scaled / ROUNDING_TOLERANCE
    q = Decimal(scaled).to_integral_value(rounding=ROUND_HALF_UP)
    return float(q) / ROUNDING_TOLERANCE


def _float_div(a: float, b: float) -> float:
    """IEEE division: x/0 -> +-inf, 0/0 and nan/0 -> nan."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def float_pow(a: float, b: float) -> float:
    """IEEE power: overflow -> +-inf, negative base with fractional power -> nan,
    zero to a negative power -> +-inf. Never raises.
    """
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and _is_odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        if a == 0.0:
            if math.copysign(1.0, a) < 0 and _is_odd_integer(b):
                return -math.inf
            return math.inf
        return math.nan


def _is_odd_integer(x: float) -> bool:
    return x.is_integer() and int(x) % 2 == 1


def _domain(fn, x: float) -> float:
    """Apply a math function, mapping domain errors to nan."""
    try:
        return fn(x)
    except ValueError:
        return math.nan


def _real_to_float(value: numbers.Real) -> float:
    # Ints beyond float range saturate like IEEE conversion would.
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def normalize(m: float, e: int) -> Tuple[float, int]:
    """Shift mantissa/exponent one decade at a time into the normalised band.

    - Mantissa already in band: unchanged
    - Zero: canonicalised to exponent 0
    - Non-finite mantissa: unchanged (no decade shift can reach the band)
    """
    if m == 0.0:
        return m, 0
    if _in_range(m) or not math.isfinite(m):
        return m, e

    # |m| < 1, e.g. 0.023 -> 2.3e-2
    if -1.0 < m < 1.0:
        while not _in_range(m):
            m *= 10.0
            e -= 1
            _dbg(f"normalize: scale up m={m}, e={e}")
    # |m| > 10, e.g. -750 -> -7.5e2
    else:
        while not _in_range(m):
            m /= 10.0
            e += 1
            _dbg(f"normalize: scale down m={m}, e={e}")
    return m, e


_NAN_HASH_KEY = float("nan")


def _canonical_mantissa(m: float) -> float:
    # All NaNs hash alike; -0.0 already hashes like 0.0.
    return _NAN_HASH_KEY if math.isnan(m) else m


# ----------------------------
# StandardForm
# ----------------------------

@dataclass(frozen=True, eq=False)
class StandardForm:
    """Number in standard form: mantissa * 10^exponent (normalised on construction).

    Hashing combines the mantissa (all NaNs alike) with the exponent, so equal
    StandardForms hash alike. Equality with native numbers goes through
    promotion, but their hashes differ: StandardForm(2.0, 0) == 2 is True while
    StandardForm(2.0, 0) in {2} is False. Do not mix both kinds of key in one
    set or dict.
    """
    mantissa: float
    exponent: int = 0

    def __post_init__(self):
        if not isinstance(self.mantissa, numbers.Real):
            raise TypeError(f"mantissa must be a real number, got {type(self.mantissa).__name__}")
        m, e = normalize(_real_to_float(self.mantissa), operator.index(self.exponent))
        object.__setattr__(self, "mantissa", m)
        object.__setattr__(self, "exponent", e)

    # ------------- constructors -------------

    @classmethod
    def _new_unchecked(cls, mantissa: float, exponent: int) -> "StandardForm":
        """Build without normalising; callers guarantee the band invariant."""
        obj = object.__new__(cls)
        object.__setattr__(obj, "mantissa", mantissa)
        object.__setattr__(obj, "exponent", exponent)
        return obj

    @staticmethod
    def zero() -> "StandardForm":
        return StandardForm._new_unchecked(0.0, 0)

    @staticmethod
    def one() -> "StandardForm":
        return StandardForm._new_unchecked(1.0, 0)

    @classmethod
    def parse(cls, text: TextLike) -> "StandardForm":
        """Decode '42', '1.23e3', '2.5*10^-2' (str or UTF-8 bytes).

        Raises MantissaParseError, ExponentParseError, InvalidFormatError or
        InvalidEncodingError (all ParsingStandardFormError).
        """
        m, e = decode(text)
        return cls(m, e)

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview]) -> "StandardForm":
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"expected bytes, got {type(data).__name__}")
        return cls.parse(data)

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.mantissa == 0.0

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ------------- formatting -------------

    def to_scientific_notation(self) -> str:
        return fmt_scientific(self.mantissa, self.exponent)

    def to_engineering_notation(self) -> str:
        return fmt_engineering(self.mantissa, self.exponent)

    def __str__(self) -> str:
        if self.exponent > SCIENTIFIC_DISPLAY_THRESHOLD:
            return self.to_scientific_notation()
        return fmt_float(float(self))

    def __format__(self, spec: str) -> str:
        if spec == "":
            return str(self)
        if spec == "e":
            return self.to_scientific_notation()
        if spec == "eng":
            return self.to_engineering_notation()
        return format(float(self), spec)

    # ------------- conversions -------------

    def __float__(self) -> float:
        return self.mantissa * _pow10(self.exponent)

    def __int__(self) -> int:
        return math.trunc(float(self))

    # ------------- comparisons (exponent first) -------------

    def _cmp_core(self, other: "StandardForm") -> Optional[int]:
        if self.exponent != other.exponent:
            return (self.exponent > other.exponent) - (self.exponent < other.exponent)
        m1, m2 = self.mantissa, other.mantissa
        if math.isnan(m1) or math.isnan(m2):
            return None
        return (m1 > m2) - (m1 < m2)

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.mantissa == rhs.mantissa and self.exponent == rhs.exponent

    def __hash__(self) -> int:
        return hash((_canonical_mantissa(self.mantissa), self.exponent))

    def __lt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        c = self._cmp_core(rhs)
        return c is not None and c < 0

    def __le__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        c = self._cmp_core(rhs)
        return c is not None and c <= 0

    def __gt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        c = self._cmp_core(rhs)
        return c is not None and c > 0

    def __ge__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        c = self._cmp_core(rhs)
        return c is not None and c >= 0

    # ------------- unary -------------

    def __neg__(self) -> "StandardForm":
        return StandardForm._new_unchecked(-self.mantissa, self.exponent)

    def __pos__(self) -> "StandardForm":
        return self

    def __abs__(self) -> "StandardForm":
        return StandardForm._new_unchecked(abs(self.mantissa), self.exponent)

    # ------------- arithmetic -------------
    # Augmented assignment falls back to these, rebinding to a new instance.

    def __add__(self, other: object) -> "StandardForm":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _add(self, rhs)

    def __radd__(self, other: object) -> "StandardForm":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _add(lhs, self)

    def __sub__(self, other: object) -> "StandardForm":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _sub(self, rhs)

    def __rsub__(self, other: object) -> "StandardForm":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _sub(lhs, self)

    def __mul__(self, other: object) -> "StandardForm":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _mul(self, rhs)

    def __rmul__(self, other: object) -> "StandardForm":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _mul(lhs, self)

    def __truediv__(self, other: object) -> "StandardForm":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _div(self, rhs)

    def __rtruediv__(self, other: object) -> "StandardForm":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _div(lhs, self)

    def __mod__(self, other: object) -> "StandardForm":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _rem(self, rhs)

    def __rmod__(self, other: object) -> "StandardForm":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _rem(lhs, self)

    # ------------- powers -------------

    def pow(self, n: numbers.Real) -> "StandardForm":
        """Raise to a real scalar power; result is a normalised StandardForm.

        Follows IEEE semantics: overflow gives +-inf, a negative base with a
        fractional power gives nan.
        """
        if isinstance(n, StandardForm) or not isinstance(n, numbers.Real):
            raise TypeError("pow() expects a real scalar; use powf() for StandardForm exponents")
        return StandardForm(float_pow(float(self), _real_to_float(n)), 0)

    def __pow__(self, n: object) -> "StandardForm":
        if isinstance(n, StandardForm) or not isinstance(n, numbers.Real):
            return NotImplemented
        return self.pow(n)

    def powf(self, other: "StandardForm") -> float:
        """Raise to a StandardForm power; result is a plain float."""
        if not isinstance(other, StandardForm):
            raise TypeError("powf() expects a StandardForm exponent")
        return float_pow(float(self), float(other))

    # ------------- elementary functions (plain float results, IEEE inf/nan) -------------

    def sin(self) -> float:
        """Sine (radians)."""
        return math.sin(float(self))

    def cos(self) -> float:
        """Cosine (radians)."""
        return math.cos(float(self))

    def tan(self) -> float:
        """Tangent (radians)."""
        return math.tan(float(self))

    def asin(self) -> float:
        return _domain(math.asin, float(self))

    def acos(self) -> float:
        return _domain(math.acos, float(self))

    def atan(self) -> float:
        return math.atan(float(self))

    def sinh(self) -> float:
        x = float(self)
        try:
            return math.sinh(x)
        except OverflowError:
            return math.copysign(math.inf, x)

    def cosh(self) -> float:
        try:
            return math.cosh(float(self))
        except OverflowError:
            return math.inf

    def tanh(self) -> float:
        return math.tanh(float(self))

    def asinh(self) -> float:
        return math.asinh(float(self))

    def acosh(self) -> float:
        return _domain(math.acosh, float(self))

    def atanh(self) -> float:
        x = float(self)
        if abs(x) == 1.0:
            return math.copysign(math.inf, x)
        return _domain(math.atanh, x)


# ----------------------------
# Operand promotion
# ----------------------------

def _coerce(value: object) -> Optional[StandardForm]:
    """Promote a native real to StandardForm(float(value), 0); None if unsupported."""
    if isinstance(value, StandardForm):
        return value
    if isinstance(value, numbers.Real):
        return StandardForm(_real_to_float(value), 0)
    return None


# ----------------------------
# Operator kernels
# ----------------------------

def _add(a: StandardForm, b: StandardForm) -> StandardForm:
    # Align to the larger exponent; the smaller operand shrinks.
    e = max(a.exponent, b.exponent)
    m = a.mantissa * _pow10(a.exponent - e) + b.mantissa * _pow10(b.exponent - e)
    return StandardForm(m, e)


def _sub(a: StandardForm, b: StandardForm) -> StandardForm:
    # Align to the smaller exponent, then drop alignment noise below 1e-6.
    e = min(a.exponent, b.exponent)
    x = a.mantissa * _pow10(a.exponent - e)
    y = b.mantissa * _pow10(b.exponent - e)
    return StandardForm(_round_mantissa(x - y), e)


def _mul(a: StandardForm, b: StandardForm) -> StandardForm:
    return StandardForm(_round_mantissa(a.mantissa * b.mantissa), a.exponent + b.exponent)


def _div(a: StandardForm, b: StandardForm) -> StandardForm:
    return StandardForm(_float_div(a.mantissa, b.mantissa), a.exponent - b.exponent)


def _rem(a: StandardForm, b: StandardForm) -> StandardForm:
    return _sub(a, _mul(_div(a, b), b))


__all__ = [
    "StandardForm",
    "normalize",
    "float_pow",
]

from __future__ import annotations
from typing import Any, Self

from fractax.core import flags
from fractax.core.constants import DEFAULT_DEN, DEFAULT_NUM, ILLEGAL_DEN
from fractax.core.typing import IntegralLike
from fractax.core.utils import gcd, is_integral_value, promote_pair, sign_factor


class Fraction:
    """Rational number num/den over a signed integral value type (python int or NumPy signed integer).

    Every construction and every in-place operation normalizes the pair: it is reduced by the gcd and
    the sign is moved into the numerator, so a legal fraction always has den > 0. A zero denominator is
    representable but marks the fraction as illegal (see is_legal), nothing guards against producing one.

    Fractions are mutable values: ``+=``, ``-=``, ``*=`` and ``/=`` change the instance in place,
    the binary operators return new instances.
    """

    __slots__ = ("_num", "_den")

    # mutable, therefore unhashable
    __hash__ = None  # type: ignore[assignment]

    # NumPy scalars defer to the reflected operators instead of building object arrays
    __array_ufunc__ = None

    def __init__(
        self,
        num: IntegralLike = DEFAULT_NUM,
        den: IntegralLike = DEFAULT_DEN,
    ) -> None:
        if not is_integral_value(num):
            raise TypeError(f"Numerator must be a signed integer, got {num!r} of type {type(num).__name__}")
        if not is_integral_value(den):
            raise TypeError(f"Denominator must be a signed integer, got {den!r} of type {type(den).__name__}")
        self._normalize(num, den)

    @classmethod
    def zero(cls) -> Self:
        return cls()

    @classmethod
    def from_integer(cls, value: IntegralLike) -> Self:
        return cls(value, DEFAULT_DEN)

    @classmethod
    def _from_normalized(cls, num: Any, den: Any) -> Self:
        # bypasses normalization, the caller guarantees the pair is already in normal form
        result = object.__new__(cls)
        result._num = num
        result._den = den
        return result

    @classmethod
    def _coerce(cls, other: Any) -> Fraction | None:
        if isinstance(other, Fraction):
            return other
        if is_integral_value(other):
            return cls(other)
        return None

    def _normalize(
        self,
        num: IntegralLike,
        den: IntegralLike,
    ) -> Self:
        num, den = promote_pair(num, den)
        g = gcd(abs(num), abs(den))
        # g is only zero for 0/0, which stays as it is
        if g != 0:
            m = sign_factor(den)
            num = num // g * m
            den = den // g * m
        if flags.LEGALITY_CHECK_FLAG and den == ILLEGAL_DEN:
            raise ZeroDivisionError(f"Illegal fraction with zero denominator: {num}/{den}")
        self._num = num
        self._den = den
        return self

    def num(self) -> IntegralLike:
        return self._num

    def den(self) -> IntegralLike:
        return self._den

    @property
    def numerator(self) -> IntegralLike:
        return self._num

    @property
    def denominator(self) -> IntegralLike:
        return self._den

    def is_integral(self) -> bool:
        return bool(self._den == 1)

    def is_legal(self) -> bool:
        return bool(self._den != ILLEGAL_DEN)

    def assign(self, value: Fraction | IntegralLike) -> Self:
        """Replaces the value of this fraction in place, a bare integral value is assigned as value/1."""
        if isinstance(value, Fraction):
            self._num = value._num
            self._den = value._den
            return self
        if not is_integral_value(value):
            raise TypeError(f"Cannot assign {value!r} of type {type(value).__name__} to a Fraction")
        return self._normalize(value, DEFAULT_DEN)

    def copy(self) -> Self:
        return self._from_normalized(self._num, self._den)

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.copy()

    # Truth value
    def __bool__(self) -> bool:
        """
        Inverted polarity: a fraction is truthy if it is ZERO. Consequently ``not f`` is True for
        non-zero fractions. This is kept literally as an open question, do not rely on the usual
        "non-zero is truthy" convention.
        """
        return bool(self._num == 0)

    def logical_not(self) -> bool:
        """Same as ``not f``: True if the fraction is non-zero."""
        return bool(self._num != 0)

    # Unary operators
    def __pos__(self) -> Self:
        return self.copy()

    def __neg__(self) -> Self:
        # den stays positive, so the negation is still normalized
        return self._from_normalized(-self._num, self._den)

    def __abs__(self) -> Self:
        return self._from_normalized(abs(self._num), self._den)

    # In-place arithmetic
    def __iadd__(self, other: Fraction | IntegralLike) -> Self:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._normalize(self._num * rhs._den + self._den * rhs._num, self._den * rhs._den)

    def __isub__(self, other: Fraction | IntegralLike) -> Self:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._normalize(self._num * rhs._den - self._den * rhs._num, self._den * rhs._den)

    def __imul__(self, other: Fraction | IntegralLike) -> Self:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._normalize(self._num * rhs._num, self._den * rhs._den)

    def __itruediv__(self, other: Fraction | IntegralLike) -> Self:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        # dividing by zero produces an illegal fraction, not an exception
        return self._normalize(self._num * rhs._den, self._den * rhs._num)

    # Binary arithmetic, computed on a copy of the left operand
    def __add__(self, other: Fraction | IntegralLike) -> Self:
        return self.copy().__iadd__(other)

    def __sub__(self, other: Fraction | IntegralLike) -> Self:
        return self.copy().__isub__(other)

    def __mul__(self, other: Fraction | IntegralLike) -> Self:
        return self.copy().__imul__(other)

    def __truediv__(self, other: Fraction | IntegralLike) -> Self:
        return self.copy().__itruediv__(other)

    def __radd__(self, other: IntegralLike) -> Fraction:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__iadd__(self)

    def __rsub__(self, other: IntegralLike) -> Fraction:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__isub__(self)

    def __rmul__(self, other: IntegralLike) -> Fraction:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__imul__(self)

    def __rtruediv__(self, other: IntegralLike) -> Fraction:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__itruediv__(self)

    # Integer power
    def __pow__(self, exponent: int) -> Self:
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        result = object.__new__(type(self))
        if exponent >= 0:
            return result._normalize(self._num**exponent, self._den**exponent)
        # raising zero to a negative power yields an illegal fraction
        return result._normalize(self._den ** (-exponent), self._num ** (-exponent))

    # Comparison operators. Normal form makes equal values have identical components.
    def __eq__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return bool(self._num == rhs._num and self._den == rhs._den)

    def __ne__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return bool(self._num != rhs._num or self._den != rhs._den)

    # Cross multiply to avoid division, positive denominators keep the sign correct
    def __lt__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return bool(self._num * rhs._den < rhs._num * self._den)

    def __le__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return bool(self._num * rhs._den <= rhs._num * self._den)

    def __gt__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return bool(self._num * rhs._den > rhs._num * self._den)

    def __ge__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return bool(self._num * rhs._den >= rhs._num * self._den)

    # Conversion
    def __float__(self) -> float:
        from fractax.functional.conversion import to_real

        return to_real(self, float)

    def __int__(self) -> int:
        num, den = int(self._num), int(self._den)
        quotient = abs(num) // den
        return -quotient if num < 0 else quotient

    def __repr__(self) -> str:
        return f"Fraction({self._num}, {self._den})"

    def __str__(self) -> str:
        if self._den == 1:
            return str(self._num)
        return f"{self._num}/{self._den}"

from __future__ import annotations
from typing import Any

import numpy as np

from fractax.core.typing import IntegralLike


def gcd(
    m: IntegralLike,
    n: IntegralLike,
) -> IntegralLike:
    """
    Greatest common divisor via Euclid's algorithm. The result has the value type of the inputs.

    Args:
        m (IntegralLike): non-negative integral value
        n (IntegralLike): non-negative integral value

    Returns:
        IntegralLike: gcd(m, n), with gcd(m, 0) == m
    """
    while n != 0:
        m, n = n, m % n
    return m


def sign_factor(den: IntegralLike) -> int:
    return -1 if den < 0 else 1


def is_integral_value(x: Any) -> bool:
    # bool is an int subclass, but True/False are not meaningful fraction components
    if isinstance(x, bool | np.bool_):
        return False
    return isinstance(x, int | np.signedinteger)


def promote_pair(
    a: IntegralLike,
    b: IntegralLike,
) -> tuple[IntegralLike, IntegralLike]:
    """
    Brings numerator and denominator to a common value type. Python integers only mix with
    NumPy integers as weak scalars, so Fraction(np.int32(1), 2) stores two np.int32 values.

    Args:
        a (IntegralLike): numerator
        b (IntegralLike): denominator

    Returns:
        tuple[IntegralLike, IntegralLike]: Both values in their common type
    """
    if isinstance(a, np.generic) or isinstance(b, np.generic):
        scalar_type = np.result_type(a, b).type
        return scalar_type(a), scalar_type(b)
    return a, b

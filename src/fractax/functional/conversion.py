from __future__ import annotations
from typing import Any

import jax
import jax.numpy as jnp
import numpy as np

from fractax.core.fraction import Fraction
from fractax.core.typing import JAX_REAL_DTYPES, NUMPY_REAL_DTYPES, RealDType


def is_jax_real_dtype(real_type: Any) -> bool:
    # identity check: jnp.float32 == np.float32 holds, but both need different handling
    return any(real_type is dt for dt in JAX_REAL_DTYPES)


def numpy_real_dtype(real_type: Any) -> np.dtype | None:
    # np.dtype(None) is float64, None is not a target type
    if real_type is None:
        return None
    try:
        dt = np.dtype(real_type)
    except TypeError:
        return None
    if dt.type not in NUMPY_REAL_DTYPES:
        return None
    return dt


def to_real(
    f: Fraction,
    real_type: RealDType = float,
) -> float | complex | np.number | jax.Array:
    """
    Converts a fraction to a real (or complex) approximation num / den, with the numerator cast to
    real_type before dividing. A zero denominator is not handled specially: python types raise
    ZeroDivisionError, NumPy and JAX types follow IEEE semantics (inf/nan).

    Args:
        f (Fraction): fraction to convert
        real_type (RealDType, optional): Target type. Either python float/complex, a NumPy floating or
            complex type/dtype, or a JAX floating/complex dtype. Defaults to float.

    Returns:
        float | complex | np.number | jax.Array: Python scalar, NumPy scalar or 0-d JAX array of real_type
    """
    if real_type is float or real_type is complex:
        return real_type(f.num()) / real_type(f.den())

    if is_jax_real_dtype(real_type):
        num = jnp.asarray(float(f.num()), dtype=real_type)
        return num / jnp.asarray(float(f.den()), dtype=real_type)

    dt = numpy_real_dtype(real_type)
    if dt is None:
        raise TypeError(f"Cannot convert Fraction to non-real type {real_type}")
    with np.errstate(divide="ignore", invalid="ignore"):
        return dt.type(f.num()) / dt.type(f.den())

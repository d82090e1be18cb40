from __future__ import annotations

from functools import lru_cache
from typing import Any, Tuple, Union

import jax.numpy as jnp
import numpy as np


# Value types a Fraction can be built over. Unsigned integers are excluded,
# the sign is kept in the numerator.
IntegralLike = Union[
    int,
    np.signedinteger,
]

# Anything that names a real or complex dtype (python type, numpy type/dtype, jax dtype)
RealDType = Any


def _jax_dtype_works(dtype: Any) -> bool:
    """
    dtype must be constructible and usable in a division
    on the current default backend.
    """
    try:
        x = jnp.asarray(1, dtype=dtype)
        _ = x / jnp.asarray(2, dtype=dtype)
        return True
    except Exception:
        return False


def _numpy_dtype_is_real_extended(dtype: Any) -> bool:
    """
    Return True if dtype exists and is wider than float64/complex128 in this NumPy build.
    This filters out platforms where float128/complex256 are missing or aliased.
    """
    if dtype is None:
        return False
    try:
        dt = np.dtype(dtype)
    except Exception:
        return False

    if dt.kind == "f":
        return dt.itemsize > np.dtype(np.float64).itemsize
    if dt.kind == "c":
        return dt.itemsize > np.dtype(np.complex128).itemsize
    return False


@lru_cache(maxsize=1)
def _jax_real_dtypes() -> Tuple[Any, ...]:
    """
    Return JAX dtypes a Fraction can be converted to.
    - Always include stable dtypes (float16/32/64, bfloat16, complex64).
    - Conditionally include float8 dtypes if supported by the active JAX backend.
    """
    dtypes: list[Any] = [
        jnp.float16,
        jnp.bfloat16,
        jnp.float32,
        jnp.float64,
        jnp.complex64,
    ]

    float8_names = (
        "float8_e4m3b11fnuz",
        "float8_e4m3fn",
        "float8_e4m3fnuz",
        "float8_e5m2",
        "float8_e5m2fnuz",
    )
    for name in float8_names:
        dt = getattr(jnp, name, None)
        if dt is not None and _jax_dtype_works(dt):
            dtypes.append(dt)

    out: list[Any] = []
    seen: set[Any] = set()
    for dt in dtypes:
        if dt not in seen:
            seen.add(dt)
            out.append(dt)
    return tuple(out)


@lru_cache(maxsize=1)
def _numpy_real_dtypes() -> Tuple[Any, ...]:
    """
    Return NumPy scalar types a Fraction can be converted to.
    Extended precision (float128/complex256) is only included if the build truly supports
    wider-than-float64 types (typically Linux x86_64).
    """
    dtypes: list[Any] = [
        np.float16,
        np.float32,
        np.float64,
        np.complex64,
        np.complex128,
    ]
    if _numpy_dtype_is_real_extended(getattr(np, "float128", None)):
        dtypes.append(np.float128)
    if _numpy_dtype_is_real_extended(getattr(np, "complex256", None)):
        dtypes.append(np.complex256)
    return tuple(dtypes)


# real conversion targets
NUMPY_REAL_DTYPES = _numpy_real_dtypes()
JAX_REAL_DTYPES = _jax_real_dtypes()

import jax.numpy as jnp
import numpy as np

from fractax.core.typing import JAX_REAL_DTYPES, NUMPY_REAL_DTYPES


def test_real_dtypes_contain_basic_set():
    """Stable, cross-platform dtypes must always be present."""
    for dt in (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64, jnp.complex64):
        assert any(dt is d for d in JAX_REAL_DTYPES)
    for dt in (np.float16, np.float32, np.float64, np.complex64, np.complex128):
        assert dt in NUMPY_REAL_DTYPES


def test_real_dtypes_no_duplicates():
    """The dtype tuples should not contain duplicate entries"""
    assert len(JAX_REAL_DTYPES) == len({id(d) for d in JAX_REAL_DTYPES})
    assert len(NUMPY_REAL_DTYPES) == len(set(NUMPY_REAL_DTYPES))


def test_float8_dtypes_are_usable_if_present():
    """Float8 dtypes are included only if they are actually executable on the current backend"""
    FLOAT8_NAMES = (
        "float8_e4m3b11fnuz",
        "float8_e4m3fn",
        "float8_e4m3fnuz",
        "float8_e5m2",
        "float8_e5m2fnuz",
    )

    for name in FLOAT8_NAMES:
        dt = getattr(jnp, name, None)
        if dt is None:
            continue

        if any(dt is d for d in JAX_REAL_DTYPES):
            x = jnp.asarray(1, dtype=dt)
            _ = x / jnp.asarray(2, dtype=dt)


def test_numpy_extended_precision_semantics():
    """Include float128 / complex256 only when they provide real extended precision (not aliases)."""
    if hasattr(np, "float128"):
        is_real = np.dtype(np.float128).itemsize > np.dtype(np.float64).itemsize
        assert (np.float128 in NUMPY_REAL_DTYPES) == is_real

    if hasattr(np, "complex256"):
        is_real = np.dtype(np.complex256).itemsize > np.dtype(np.complex128).itemsize
        assert (np.complex256 in NUMPY_REAL_DTYPES) == is_real

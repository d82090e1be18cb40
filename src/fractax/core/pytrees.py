from __future__ import annotations
from typing import Any

import jax

from fractax.core.fraction import Fraction
from fractax.core.utils import is_integral_value


def _flatten_fraction(f: Fraction) -> tuple[tuple[Any, Any], None]:
    return (f.num(), f.den()), None


def _unflatten_fraction(aux_data: None, children: tuple[Any, Any]) -> Fraction:
    """
    Rebuilds a Fraction from its leaves. Integral leaves are normalized like any other construction.
    During tree transformations the leaves can also be arbitrary objects (tracers, None, object()),
    those are stored as they are since gcd/sign handling does not apply to them.
    """
    del aux_data
    num, den = children
    if is_integral_value(num) and is_integral_value(den):
        return Fraction(num, den)
    return Fraction._from_normalized(num, den)


def register_fraction_pytree() -> None:
    try:
        jax.tree_util.register_pytree_node(
            Fraction,
            _flatten_fraction,
            _unflatten_fraction,
        )
    except ValueError:
        # already registered, e.g. after a module reload
        pass

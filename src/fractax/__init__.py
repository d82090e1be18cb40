from fractax.core.flags import legality_checks, set_legality_checks
from fractax.core.fraction import Fraction
from fractax.core.pytrees import register_fraction_pytree
from fractax.core.utils import gcd
from fractax.functional.arithmetic import (
    add,
    divide,
    eq,
    ge,
    gt,
    le,
    lt,
    multiply,
    ne,
    subtract,
)
from fractax.functional.conversion import to_real

register_fraction_pytree()


__all__ = [
    "Fraction",
    "to_real",
    "gcd",
    "add",
    "subtract",
    "multiply",
    "divide",
    "eq",
    "ne",
    "lt",
    "le",
    "gt",
    "ge",
    "legality_checks",
    "set_legality_checks",
]

# ruff: noqa: F811
"""Free-function counterparts of the Fraction operators.

Every function accepts ``(Fraction, Fraction)``, ``(Fraction, bare value)`` and ``(bare value, Fraction)``,
where a bare value is a python int or a NumPy signed integer, wrapped as value/1 before computing.
Operands are never modified. Other operand types raise plum.NotFoundLookupError.
"""
from typing import Union

import numpy as np
from plum import dispatch, overload

from fractax.core.fraction import Fraction

BareValue = Union[int, np.signedinteger]


def _wrap(x: Union[Fraction, BareValue]) -> Fraction:
    if isinstance(x, Fraction):
        return x
    return Fraction.from_integer(x)


## add #####################################
@overload
def add(x: Fraction, y: Fraction) -> Fraction:
    return x + y


@overload
def add(x: Fraction, y: BareValue) -> Fraction:
    return x + _wrap(y)


@overload
def add(x: BareValue, y: Fraction) -> Fraction:
    return _wrap(x) + y


@dispatch
def add(x, y):
    del x, y
    raise NotImplementedError()


## subtract ################################
@overload
def subtract(x: Fraction, y: Fraction) -> Fraction:
    return x - y


@overload
def subtract(x: Fraction, y: BareValue) -> Fraction:
    return x - _wrap(y)


@overload
def subtract(x: BareValue, y: Fraction) -> Fraction:
    return _wrap(x) - y


@dispatch
def subtract(x, y):
    del x, y
    raise NotImplementedError()


## multiply ################################
@overload
def multiply(x: Fraction, y: Fraction) -> Fraction:
    return x * y


@overload
def multiply(x: Fraction, y: BareValue) -> Fraction:
    return x * _wrap(y)


@overload
def multiply(x: BareValue, y: Fraction) -> Fraction:
    return _wrap(x) * y


@dispatch
def multiply(x, y):
    del x, y
    raise NotImplementedError()


## divide ##################################
# dividing by a zero value yields an illegal fraction (den == 0), no exception is raised
@overload
def divide(x: Fraction, y: Fraction) -> Fraction:
    return x / y


@overload
def divide(x: Fraction, y: BareValue) -> Fraction:
    return x / _wrap(y)


@overload
def divide(x: BareValue, y: Fraction) -> Fraction:
    return _wrap(x) / y


@dispatch
def divide(x, y):
    del x, y
    raise NotImplementedError()


## comparison ##############################
def _cross(x: Fraction, y: Fraction):
    # normal form keeps both denominators positive, so no sign handling is needed
    return x.num() * y.den(), y.num() * x.den()


@overload
def eq(x: Union[Fraction, BareValue], y: Fraction) -> bool:
    x, y = _wrap(x), _wrap(y)
    return bool(x.num() == y.num() and x.den() == y.den())


@overload
def eq(x: Fraction, y: BareValue) -> bool:
    return eq(x, _wrap(y))


@dispatch
def eq(x, y):
    del x, y
    raise NotImplementedError()


@overload
def ne(x: Union[Fraction, BareValue], y: Fraction) -> bool:
    x, y = _wrap(x), _wrap(y)
    return bool(x.num() != y.num() or x.den() != y.den())


@overload
def ne(x: Fraction, y: BareValue) -> bool:
    return ne(x, _wrap(y))


@dispatch
def ne(x, y):
    del x, y
    raise NotImplementedError()


@overload
def lt(x: Union[Fraction, BareValue], y: Fraction) -> bool:
    lhs, rhs = _cross(_wrap(x), y)
    return bool(lhs < rhs)


@overload
def lt(x: Fraction, y: BareValue) -> bool:
    return lt(x, _wrap(y))


@dispatch
def lt(x, y):
    del x, y
    raise NotImplementedError()


@overload
def le(x: Union[Fraction, BareValue], y: Fraction) -> bool:
    lhs, rhs = _cross(_wrap(x), y)
    return bool(lhs <= rhs)


@overload
def le(x: Fraction, y: BareValue) -> bool:
    return le(x, _wrap(y))


@dispatch
def le(x, y):
    del x, y
    raise NotImplementedError()


@overload
def gt(x: Union[Fraction, BareValue], y: Fraction) -> bool:
    lhs, rhs = _cross(_wrap(x), y)
    return bool(lhs > rhs)


@overload
def gt(x: Fraction, y: BareValue) -> bool:
    return gt(x, _wrap(y))


@dispatch
def gt(x, y):
    del x, y
    raise NotImplementedError()


@overload
def ge(x: Union[Fraction, BareValue], y: Fraction) -> bool:
    lhs, rhs = _cross(_wrap(x), y)
    return bool(lhs >= rhs)


@overload
def ge(x: Fraction, y: BareValue) -> bool:
    return ge(x, _wrap(y))


@dispatch
def ge(x, y):
    del x, y
    raise NotImplementedError()

from fractax.core.fraction import Fraction
from fractax.core.utils import gcd


def get_binary_function_list_from_op(op):
    def _fn0(x, y):
        return op(x, y)
    def _fn1(x, y):
        return op(op(op(op(x, y), y), x), y)
    return [
        _fn0,
        _fn1,
    ]


# legal fractions spanning signs, integral values and zero
SAMPLE_PAIRS = [
    (0, 1),
    (1, 1),
    (-1, 1),
    (1, 2),
    (-1, 2),
    (15, 63),
    (5, -21),
    (-7, -3),
    (22, 7),
    (100, 4),
]


def sample_fractions() -> list[Fraction]:
    return [Fraction(n, d) for n, d in SAMPLE_PAIRS]


def assert_normalized(f: Fraction):
    assert f.den() > 0
    assert gcd(abs(f.num()), abs(f.den())) == 1

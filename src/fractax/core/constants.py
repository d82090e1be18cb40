"""Components of a default constructed fraction, i.e. Fraction.zero()"""

DEFAULT_NUM: int = 0
DEFAULT_DEN: int = 1

"""
Denominator that marks a fraction as illegal. Such a fraction is representable, but only its
construction and Fraction.is_legal() are meaningful.
"""
ILLEGAL_DEN: int = 0

from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)

"""Global debug flag. If True, every normalization that produces a zero denominator raises a
ZeroDivisionError instead of silently returning an illegal fraction. Disabled by default.
"""
LEGALITY_CHECK_FLAG: bool = False


def set_legality_checks(enabled: bool) -> bool:
    """Sets the legality check flag and returns its previous value."""
    global LEGALITY_CHECK_FLAG
    previous = LEGALITY_CHECK_FLAG
    LEGALITY_CHECK_FLAG = bool(enabled)
    if previous != LEGALITY_CHECK_FLAG:
        logger.debug("Fraction legality checks %s", "enabled" if LEGALITY_CHECK_FLAG else "disabled")
    return previous


@contextmanager
def legality_checks(enabled: bool = True) -> Iterator[None]:
    previous = set_legality_checks(enabled)
    try:
        yield
    finally:
        set_legality_checks(previous)

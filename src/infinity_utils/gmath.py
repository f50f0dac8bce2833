"""
Numeric tolerance helpers.

All numeric comparisons in this package go through :func:`is_equal_eps` so that tiny floating point errors do not make
two values unequal. The tolerance used when none is passed explicitly can be changed for a block of code with the
:func:`epsilon` context manager.
"""

import math
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Optional


DEFAULT_EPS = 1e-9

# Keep track of the epsilon currently in use. Only ever changed through epsilon()
_CURR_EPS = DEFAULT_EPS


# Context manager to return _CURR_EPS back to what it was when entered
class _ReturnCurrEps:
    def __init__(self, eps):
        self.eps = eps
        self.prev_eps = None
    def __enter__(self):
        global _CURR_EPS
        self.prev_eps = _CURR_EPS
        _CURR_EPS = self.eps
        return self.eps
    def __exit__(self, *args):
        global _CURR_EPS
        _CURR_EPS = self.prev_eps


def epsilon(eps: 'float') -> '_ReturnCurrEps':
    """Sets the default tolerance used by :func:`is_equal_eps` (and so by every equality check) for a `with` block

    Blocks may be nested, the previous tolerance is restored on exit.

    Args:
        eps (float): the new tolerance. Must be a finite, non-negative number

    Example:
        >>> with epsilon(1e-3):
        ...     is_equal_eps(1.0, 1.0005)
        True
    """
    if isinstance(eps, bool) or not isinstance(eps, (int, float)):
        raise TypeError("`eps` must be a float, not %s" % repr(type(eps).__name__))
    if not math.isfinite(eps) or eps < 0:
        raise ValueError("`eps` must be finite and non-negative: %s" % repr(eps))
    return _ReturnCurrEps(float(eps))


def get_epsilon() -> 'float':
    """Returns the tolerance currently used when none is passed explicitly"""
    return _CURR_EPS


def is_equal_eps(a: 'float', b: 'float', eps: 'Optional[float]' = None) -> 'bool':
    """Returns True if `a` and `b` are equal or differ by less than `eps`

    Args:
        a (float): first number
        b (float): second number
        eps (Optional[float]): tolerance, defaults to the one currently set (see :func:`epsilon`)
    """
    if eps is None:
        eps = _CURR_EPS
    return bool(a == b or abs(a - b) < eps)

"""Value comparison and small utility helpers for the Infinity graphics editor."""

from .equality import equals, EqualityError, EqualityCheckingError
from .flags import flag_delta
from .geometry import Point, Rect, Transform
from .gmath import epsilon, get_epsilon, is_equal_eps
from .memory import memcpy, memcpy_at
from .sequences import index_of_equals, u_sort_segment, contains_object_key
from .strings import uuid, replace_all, escape, unescape

__all__ = ['equals', 'EqualityError', 'EqualityCheckingError', 'flag_delta', 'Point', 'Rect', 'Transform', 'epsilon',
    'get_epsilon', 'is_equal_eps', 'memcpy', 'memcpy_at', 'index_of_equals', 'u_sort_segment', 'contains_object_key',
    'uuid', 'replace_all', 'escape', 'unescape']

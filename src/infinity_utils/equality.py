"""
Utils for determining equality of values

Handled kinds (see :mod:`infinity_utils.pytypes`):
    - None, bool, str
    - int, float, np.number (compared with an epsilon tolerance, NaN equals NaN)
    - list, tuple, numpy ndarray (element-wise, in order)
    - datetime, date, np.datetime64 (compared by instant)
    - Rect, Point, Transform (using their own equals())
    - dict and plain objects (by reference, or by their own keys/values with `object_by_value=True`)
    - anything else is never equal, not even to itself
"""

import datetime
import locale
import logging
import math
import numbers
import unicodedata
import numpy as np
from .geometry import Point, Rect, Transform
from .gmath import is_equal_eps
from .pytypes import ValueKind, kind_of, is_blank, strictly_identical, own_keys, own_value
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Optional


logger = logging.getLogger(__name__)

_MAX_STR_LEN = 1000

_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
_MICROSECOND = datetime.timedelta(microseconds=1)


def equals(left: 'Any', right: 'Any', object_by_value: 'bool' = False, raise_err: 'bool' = False) -> 'bool':
    """
    Determines whether `left` and `right` are the same value.

    Rules, first match wins:

        1. a blank value (None, False, 0, '') is equal to a strictly identical value (0 and 0.0 are, 0 and False aren't)
        2. a blank value is never equal to a non-blank one
        3. values of different kinds are never equal (a Rect is only ever equal to a Rect, a list to a sequence, ...)
        4. otherwise the comparator for the shared kind decides

    Numbers are compared with :func:`~infinity_utils.gmath.is_equal_eps` so small floating point errors are ignored,
    and two NaN's are equal. Strings are compared with the current locale's collation.

    NOTE: records are only walked one level per recursion step, and there is no cycle detection, so do not pass
    self-referencing structures with `object_by_value=True`.

    NOTE: the order of a record's keys matters: {'a': 1, 'b': 2} and {'b': 2, 'a': 1} are not equal by value.

    Args:
        left (Any): left side of comparison
        right (Any): right side of comparison
        object_by_value (bool): if True, records are compared by their keys and values instead of their identity.
            The flag is passed unchanged to every nested comparison. Defaults to False.
        raise_err (bool): if True, then an ``EqualityError`` will be raised whenever `left` and `right` are unequal,
            with a message explaining where they differ. Defaults to False.

    Returns:
        bool: True if `left` and `right` are equal (also if they're both None)
    """
    try:
        if is_blank(left) and strictly_identical(left, right):
            return True

        if is_blank(left) or is_blank(right):
            return _eq_check(False, left, right, raise_err, message='Only one of the values is blank, or they differ')

        left_kind, right_kind = kind_of(left), kind_of(right)
        if left_kind is not right_kind:
            return _eq_check(False, left, right, raise_err,
                message='Values are of different kinds: %s != %s' % (left_kind.value, right_kind.value))

        return _COMPARATORS.get(left_kind, _compare_other)(left, right, object_by_value, raise_err)

    except (EqualityError, EqualityCheckingError):
        raise
    except Exception:
        if raise_err:
            raise EqualityCheckingError("Could not determine equality between values\nleft: %s\nright: %s" %
                (_limit_str(left), _limit_str(right)))
        logger.debug("Could not compare %s with %s, treating them as unequal", type(left).__name__,
            type(right).__name__, exc_info=True)
        return False


def _compare_rect(left, right, object_by_value, raise_err):
    return _eq_check(Rect.equals(left, right), left, right, raise_err, message='Rectangles differ')


def _compare_point(left, right, object_by_value, raise_err):
    return _eq_check(Point.equals(left, right), left, right, raise_err, message='Points differ')


def _compare_transform(left, right, object_by_value, raise_err):
    return _eq_check(Transform.equals(left, right), left, right, raise_err, message='Transforms differ')


def _compare_timestamp(left, right, object_by_value, raise_err):
    left_instant, right_instant = _instant(left), _instant(right)
    if left_instant is None or right_instant is None:
        return _eq_check(False, left, right, raise_err, message='Invalid timestamps are never equal')
    return _eq_check(left_instant == right_instant, left, right, raise_err, message='Timestamps are different instants')


def _compare_sequence(left, right, object_by_value, raise_err):
    if len(left) != len(right):
        return _eq_check(False, left, right, raise_err,
            message="Sequences had different lengths: %d != %d" % (len(left), len(right)))

    for i in range(len(left)):
        try:
            # It will have raised an error if raise_err, so just return False
            if not equals(left[i], right[i], object_by_value=object_by_value, raise_err=raise_err):
                return False
        except EqualityError:
            raise EqualityError(left, right, "Values at index %d were not equal" % i)

    return True


def _compare_number(left, right, object_by_value, raise_err):
    left, right = _as_python_number(left), _as_python_number(right)
    if _is_nan(left) or _is_nan(right):
        return _eq_check(_is_nan(left) and _is_nan(right), left, right, raise_err,
            message='Only one of the numbers is NaN')
    return _eq_check(is_equal_eps(left, right), left, right, raise_err, message='Numbers differ by more than epsilon')


def _compare_string(left, right, object_by_value, raise_err):
    # Canonically equivalent strings (eg: precomposed vs combining accents) must collate equal
    left, right = unicodedata.normalize('NFC', str(left)), unicodedata.normalize('NFC', str(right))
    return _eq_check(locale.strcoll(left, right) == 0, left, right, raise_err,
        message='Strings do not collate equal')


def _compare_bool(left, right, object_by_value, raise_err):
    return _eq_check(int(left) == int(right), left, right, raise_err)


def _compare_record(left, right, object_by_value, raise_err):
    if not object_by_value:
        return _eq_check(left is right, left, right, raise_err,
            message='Records are compared by reference, pass `object_by_value=True` to compare their contents')

    left_keys, right_keys = own_keys(left), own_keys(right)

    # Key order matters, the key lists are compared as sequences
    try:
        if not equals(left_keys, right_keys, object_by_value=object_by_value, raise_err=raise_err):
            return False
    except EqualityError:
        raise EqualityError(left, right, message="Records had different keys: %s != %s" %
            (_limit_str(left_keys), _limit_str(right_keys)))

    for key in left_keys:
        try:
            if not equals(own_value(left, key), own_value(right, key), object_by_value=object_by_value,
                    raise_err=raise_err):
                return False
        except EqualityError:
            raise EqualityError(left, right, message="Values at key %s differ" % repr(key))

    return True


def _compare_other(left, right, object_by_value, raise_err):
    logger.debug("Values of type %s cannot be compared, treating them as unequal", type(left).__name__)
    return _eq_check(False, left, right, raise_err, message='Values of this kind are never equal')


_COMPARATORS = {
    ValueKind.RECTANGLE: _compare_rect,
    ValueKind.POINT: _compare_point,
    ValueKind.TRANSFORM: _compare_transform,
    ValueKind.TIMESTAMP: _compare_timestamp,
    ValueKind.SEQUENCE: _compare_sequence,
    ValueKind.NUMBER: _compare_number,
    ValueKind.STRING: _compare_string,
    ValueKind.BOOL: _compare_bool,
    ValueKind.RECORD: _compare_record,
}


def _instant(value: 'Any') -> 'Optional[int]':
    """Microseconds since the epoch for a timestamp value, or None if it is not a valid time

    Naive datetimes and np.datetime64 values are read as UTC, dates as their midnight.
    """
    if isinstance(value, np.ndarray):
        value = value[()]
    if isinstance(value, np.datetime64):
        if np.isnat(value):
            return None
        return int(value.astype('datetime64[us]').astype(np.int64))
    if not isinstance(value, datetime.datetime):
        value = datetime.datetime.combine(value, datetime.time())
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    return (value - _EPOCH) // _MICROSECOND


def _as_python_number(value):
    """Converts numpy scalars and 0-d arrays into plain python numbers so arithmetic cannot wrap around"""
    if isinstance(value, (np.generic, np.ndarray)):
        return value.item()
    return value


def _is_nan(value):
    return not isinstance(value, numbers.Integral) and math.isnan(value)


def _eq_check(checked, left, right, raise_err, message=None):
    """bool equal check, determine whether or not we need to raise an error with info, or just return true/false"""
    if not checked:
        if raise_err:
            raise EqualityError(left, right, message)
        return False
    return True


def _limit_str(a, limit=_MAX_STR_LEN):
    a_str = repr(a)
    return a_str if len(a_str) < limit else (a_str[:limit] + '...')


class EqualityError(Exception):
    """Error raised whenever an :func:`~infinity_utils.equality.equals` check returns false and `raise_err=True`"""

    def __init__(self, left, right, message=None):
        message = "Values are not equal" if message is None else message
        super().__init__("Object left (%s) is not equal to object right (%s)\nleft: %s\nright: %s\nMessage: %s" %
            (repr(type(left).__name__), repr(type(right).__name__), _limit_str(left), _limit_str(right), message))


class EqualityCheckingError(Exception):
    """Error raised whenever there is an unexpected problem attempting to check equality between two values"""

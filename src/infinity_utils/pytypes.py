"""
Classification of values into the variants understood by :func:`~infinity_utils.equality.equals`.

Variants:
    - NULL: None
    - BOOL: bool, np.bool_
    - NUMBER: int, float, np.integer, np.floating (and 0-d numeric numpy arrays)
    - STRING: str
    - SEQUENCE: list, tuple, numpy ndarray with at least one dimension
    - TIMESTAMP: datetime, date, np.datetime64
    - RECTANGLE, POINT, TRANSFORM: the geometry value types
    - RECORD: mappings and plain instances with a __dict__
    - OTHER: anything else (functions, classes, modules, sets, bytes, complex, ...)
"""

import datetime
import numbers
import numpy as np
from collections.abc import Mapping
from enum import Enum
from types import BuiltinFunctionType, FunctionType, MethodType, ModuleType
from .geometry import Point, Rect, Transform
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any


class ValueKind(Enum):
    NULL = 'null'
    BOOL = 'bool'
    NUMBER = 'number'
    STRING = 'string'
    SEQUENCE = 'sequence'
    TIMESTAMP = 'timestamp'
    RECTANGLE = 'rectangle'
    POINT = 'point'
    TRANSFORM = 'transform'
    RECORD = 'record'
    OTHER = 'other'


# Things that carry a __dict__ but are never treated as records
_NON_RECORD_TYPES = (type, ModuleType, FunctionType, BuiltinFunctionType, MethodType, Enum)


def kind_of(value: 'Any') -> 'ValueKind':
    """Returns the :class:`ValueKind` variant of the given value

    The checks run from most to least specific, so a geometry instance is never mistaken for a record, and a bool is
    never mistaken for a number.
    """
    if value is None:
        return ValueKind.NULL

    # Geometry first, they would otherwise look like records
    if isinstance(value, Rect):
        return ValueKind.RECTANGLE
    if isinstance(value, Point):
        return ValueKind.POINT
    if isinstance(value, Transform):
        return ValueKind.TRANSFORM

    if isinstance(value, (datetime.date, np.datetime64)):
        return ValueKind.TIMESTAMP

    if isinstance(value, np.ndarray):
        if value.ndim > 0:
            return ValueKind.SEQUENCE
        return kind_of(value[()])

    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE

    # Check for bool first that way int's and bool's are never the same kind
    if isinstance(value, (bool, np.bool_)):
        return ValueKind.BOOL
    if isinstance(value, numbers.Real):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING

    if isinstance(value, Mapping):
        return ValueKind.RECORD
    if isinstance(value, _NON_RECORD_TYPES) or callable(value):
        return ValueKind.OTHER
    if hasattr(value, '__dict__'):
        return ValueKind.RECORD

    return ValueKind.OTHER


def own_keys(record: 'Any') -> 'list':
    """Returns the own keys of a RECORD value, in enumeration order"""
    if isinstance(record, Mapping):
        return list(record.keys())
    return list(vars(record).keys())


def own_value(record: 'Any', key: 'Any') -> 'Any':
    """Returns the value stored under `key` in a RECORD value, or None if there is none"""
    if isinstance(record, Mapping):
        return record.get(key)
    return vars(record).get(key)


def is_blank(value: 'Any') -> 'bool':
    """Whether the value belongs to the 'blank' family: None, False, numeric zero or the empty string

    NaN is not blank, and neither are empty sequences or empty records.
    """
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return True
    if kind is ValueKind.BOOL:
        return not bool(value)
    if kind is ValueKind.NUMBER:
        return bool(value == 0)
    if kind is ValueKind.STRING:
        return bool(value == '')
    return False


def strictly_identical(a: 'Any', b: 'Any') -> 'bool':
    """Identity check used for blank values: same kind and same value (so 0 and 0.0 match, 0 and False do not)"""
    kind = kind_of(a)
    if kind is not kind_of(b):
        return False
    if kind is ValueKind.NULL:
        return True
    if kind in (ValueKind.BOOL, ValueKind.NUMBER, ValueKind.STRING):
        return bool(a == b)
    return a is b

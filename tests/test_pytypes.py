"""
Tests for the infinity_utils.pytypes file.
"""

from infinity_utils.geometry import Point, Rect, Transform
from infinity_utils.pytypes import ValueKind, is_blank, kind_of, strictly_identical
import datetime
import numpy as np


class _Thing:
    def __init__(self):
        self.a = 1


def test_kind_of():
    expected = [
        (None, ValueKind.NULL),
        (True, ValueKind.BOOL),
        (np.bool_(False), ValueKind.BOOL),
        (1, ValueKind.NUMBER),
        (1.5, ValueKind.NUMBER),
        (np.int16(3), ValueKind.NUMBER),
        (np.float32(3), ValueKind.NUMBER),
        (np.array(3.0), ValueKind.NUMBER),
        ('a', ValueKind.STRING),
        ([], ValueKind.SEQUENCE),
        ((1, 2), ValueKind.SEQUENCE),
        (np.zeros((2, 2)), ValueKind.SEQUENCE),
        (datetime.datetime.now(), ValueKind.TIMESTAMP),
        (datetime.date.today(), ValueKind.TIMESTAMP),
        (np.datetime64('2020-01-01'), ValueKind.TIMESTAMP),
        (Rect(), ValueKind.RECTANGLE),
        (Point(), ValueKind.POINT),
        (Transform(), ValueKind.TRANSFORM),
        ({}, ValueKind.RECORD),
        (_Thing(), ValueKind.RECORD),
        (len, ValueKind.OTHER),
        (test_kind_of, ValueKind.OTHER),
        (int, ValueKind.OTHER),
        ({1}, ValueKind.OTHER),
        (b'a', ValueKind.OTHER),
        (1j, ValueKind.OTHER),
        (ValueKind.NULL, ValueKind.OTHER),
        (datetime, ValueKind.OTHER),
    ]

    for value, kind in expected:
        assert kind_of(value) is kind, "%r should be %s" % (value, kind)


def test_is_blank():
    for value in [None, False, np.bool_(False), 0, 0.0, -0.0, np.float64(0), '']:
        assert is_blank(value), repr(value)

    for value in [True, 1, float('nan'), 'a', ' ', [], (), {}, np.zeros(0), Point(), Rect(), _Thing()]:
        assert not is_blank(value), repr(value)


def test_strictly_identical():
    assert strictly_identical(None, None)
    assert strictly_identical(0, 0.0)
    assert strictly_identical('', '')
    assert strictly_identical(False, np.bool_(False))

    assert not strictly_identical(0, False)
    assert not strictly_identical(0, '')
    assert not strictly_identical(None, 0)
    assert not strictly_identical({}, {})

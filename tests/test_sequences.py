"""
Tests for the infinity_utils.sequences file.
"""

from infinity_utils.geometry import Point
from infinity_utils.sequences import contains_object_key, index_of_equals, u_sort_segment
import numpy as np


class _Thing:
    def __init__(self, a, b):
        self.a = a
        self.b = b


def test_index_of_equals():
    """Tests searching with equals() instead of identity"""
    assert index_of_equals([10, 20, 30], 20) == 1
    assert index_of_equals([10, 20, 30], 99) == -1
    assert index_of_equals([], 1) == -1

    # The lowest index wins
    assert index_of_equals([5, 5, 5], 5) == 0

    # Epsilon tolerant
    assert index_of_equals([1.0, 2.0, 3.0], 2.0 + 1e-12) == 1
    assert index_of_equals([float('nan'), 1.0], float('nan')) == 0

    # Blank values are only found when strictly identical
    assert index_of_equals([None, False, '', 0], 0) == 3
    assert index_of_equals([None, False, ''], 0) == -1

    assert index_of_equals([Point(0, 0), Point(1, 1)], Point(1, 1)) == 1
    assert index_of_equals([[1, 2], [3, 4]], (3, 4)) == 1
    assert index_of_equals(np.array([1.5, 2.5]), 2.5) == 1


def test_index_of_equals_records():
    """Records are only found by value when asked to"""
    records = [{'a': 1}, {'a': 2, 'b': [1, 2]}]
    assert index_of_equals(records, {'a': 2, 'b': [1, 2]}) == -1
    assert index_of_equals(records, {'a': 2, 'b': [1, 2]}, object_by_value=True) == 1
    assert index_of_equals(records, records[1]) == 1

    things = [_Thing(1, 'x'), _Thing(2, 'y')]
    assert index_of_equals(things, _Thing(2, 'y')) == -1
    assert index_of_equals(things, _Thing(2, 'y'), True) == 1


def test_u_sort_segment():
    """Tests the unique values of a segment are appended in ascending order"""
    out = []
    assert u_sort_segment(1, 5, [5, 3, 3, 1, 7, 1], out) == 3
    assert out == [1, 3, 5]

    out = []
    assert u_sort_segment(0, 100, [3.5, -1, 2, 2, 3.5, 100, 101], out) == 3
    assert out == [2, 3.5, 100]

    # Nothing in range
    out = []
    assert u_sort_segment(10, 20, [1, 2, 3, 30], out) == 0
    assert out == []


def test_u_sort_segment_edges():
    """Tests empty and single element inputs, and out of range duplicates"""
    out = []
    assert u_sort_segment(1, 5, [], out) == 0
    assert out == []

    out = []
    assert u_sort_segment(1, 5, [9], out) == 0
    assert out == []

    out = []
    assert u_sort_segment(1, 5, [2], out) == 1
    assert out == [2]

    # Bounds are inclusive
    out = []
    assert u_sort_segment(1, 5, [5, 1], out) == 2
    assert out == [1, 5]

    # Duplicates are checked against the sorted input, whether or not the previous value was appended
    out = []
    assert u_sort_segment(2, 5, [3, 1, 3, 1], out) == 1
    assert out == [3]


def test_u_sort_segment_side_effects():
    """The input is sorted in place, and the output is appended to"""
    numbers = [4, 2, 9, 2]
    out = ['existing']
    assert u_sort_segment(0, 5, numbers, out) == 2
    assert numbers == [2, 2, 4, 9]
    assert out == ['existing', 2, 4]


def test_u_sort_segment_numpy():
    """numpy arrays are sorted in place as well"""
    numbers = np.array([5.0, 3.0, 3.0, 1.0, 7.0, 1.0])
    out = []
    assert u_sort_segment(1, 5, numbers, out) == 3
    assert out == [1.0, 3.0, 5.0]
    assert np.all(numbers == np.array([1.0, 1.0, 3.0, 3.0, 5.0, 7.0]))


def test_contains_object_key():
    assert contains_object_key(['a', 'b'], {'b': 1})
    assert contains_object_key(('x', 'a'), _Thing(1, 2))
    assert not contains_object_key(['x'], {'b': 1})
    assert not contains_object_key(['a'], {})
    assert not contains_object_key(['a'], [1, 2])

"""
Helpers for searching and deduplicating sequences.
"""

from .equality import equals
from .pytypes import ValueKind, kind_of, own_keys
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Sequence, MutableSequence, Iterable


def index_of_equals(sequence: 'Sequence[Any]', element: 'Any', object_by_value: 'bool' = False) -> 'int':
    """Same as ``list.index()``, except elements are compared with :func:`~infinity_utils.equality.equals`

    Unlike ``list.index()`` this does not raise if the element is missing.

    Args:
        sequence (Sequence[Any]): the sequence to search in
        element (Any): the element to look for
        object_by_value (bool): if True, records are compared by their contents and not by their identity. Defaults
            to False.

    Returns:
        int: the lowest index of an element equal to `element`, or -1 if there is none
    """
    for i in range(len(sequence)):
        if equals(sequence[i], element, object_by_value=object_by_value):
            return i
    return -1


def u_sort_segment(low: 'float', high: 'float', numbers: 'MutableSequence[float]', out: 'MutableSequence[float]') -> 'int':
    """Appends the unique values of `numbers` that lie in the segment [low, high] to `out`, in ascending order

    NOTE: `numbers` is sorted in place (it must support ``.sort()``, eg: a list or a numpy array), so callers should
    consider it consumed.

    NOTE: duplicates are detected against the previous element of the sorted input, not against the last value that
    was appended to `out`.

    Args:
        low (float): lower bound of the segment, inclusive
        high (float): upper bound of the segment, inclusive
        numbers (MutableSequence[float]): the values, sorted in place
        out (MutableSequence[float]): receives the selected values (must support ``.append()``)

    Returns:
        int: the number of values appended to `out`
    """
    numbers.sort()

    if len(numbers) == 0:
        return 0

    count = 0
    if low <= numbers[0] <= high:
        out.append(numbers[0])
        count = 1

        if len(numbers) == 1:
            return count

    for i in range(1, len(numbers)):
        if numbers[i] != numbers[i - 1] and low <= numbers[i] <= high:
            out.append(numbers[i])
            count += 1

    return count


def contains_object_key(sequence: 'Iterable[Any]', obj: 'Any') -> 'bool':
    """Returns True if at least one own key of `obj` (a dict or plain object) is in `sequence`"""
    if kind_of(obj) is not ValueKind.RECORD:
        return False
    members = list(sequence)
    return any(key in members for key in own_keys(obj))

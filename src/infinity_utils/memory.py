"""
Contains methods for copying raw memory (bytes, bytearrays, numpy arrays, lists) in place.
"""

import numpy as np
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Optional


def memcpy(dst: 'Any', src: 'Any', length: 'Optional[int]' = None) -> 'Any':
    """Copies the first `length` items of `src` (all of them if None) to the start of `dst`, returns `dst`"""
    return memcpy_at(dst, 0, src, 0, length)


def memcpy_at(dst: 'Any', dst_offset: 'int', src: 'Any', src_offset: 'int' = 0, length: 'Optional[int]' = None) -> 'Any':
    """Copies items of `src` into `dst` in place

    Args:
        dst (Any): a mutable buffer supporting slice assignment (bytearray, list, writable numpy array or memoryview)
        dst_offset (int): index in `dst` of the first copied item
        src (Any): any sliceable buffer (bytes, bytearray, list, numpy array, memoryview)
        src_offset (int): index in `src` of the first item to copy. Defaults to 0.
        length (Optional[int]): number of items to copy, defaults to everything after `src_offset`

    Returns:
        Any: `dst`
    """
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("Offsets must be non-negative, got dst_offset=%d and src_offset=%d" % (dst_offset, src_offset))
    if length is not None and length < 0:
        raise ValueError("`length` must be non-negative: %d" % length)

    end = None if length is None else src_offset + length
    chunk = src[src_offset:end]
    if length is not None and len(chunk) < length:
        raise ValueError("Cannot copy %d items starting at %d from a source of length %d" % (length, src_offset, len(src)))

    # numpy arrays are copied through their raw bytes when the source is a plain bytes-like object
    target = dst
    if isinstance(dst, np.ndarray) and isinstance(src, (bytes, bytearray, memoryview)):
        target = dst.view(np.uint8).reshape(-1)
        chunk = np.frombuffer(chunk, dtype=np.uint8)

    if dst_offset + len(chunk) > len(target):
        raise ValueError("Cannot copy %d items at offset %d into a destination of length %d" %
            (len(chunk), dst_offset, len(target)))

    target[dst_offset:dst_offset + len(chunk)] = chunk
    return dst

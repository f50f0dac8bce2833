"""
Bitmask helpers.
"""


def flag_delta(left_mask: int, right_mask: int, flag: int) -> int:
    """Compares a flag in two bitmasks

    Returns:
        int: 0 if the flag is the same in both masks (either set or unset), -1 if it is only set in `left_mask`,
            1 if it is only set in `right_mask`
    """
    if (left_mask & flag) == (right_mask & flag):
        return 0
    elif left_mask & flag:
        return -1
    return 1

"""Number puzzles solved with bit tricks and counting."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import xor


def _xor_all(nums: Sequence[int]) -> int:
    return reduce(xor, nums, 0)


def single_number(nums: Sequence[int]) -> int:
    """Return the one value that appears once when every other appears twice."""
    return _xor_all(nums)


def xor_all_pairings(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Return the XOR of a ^ b over every pair drawn from the two sequences."""
    result = 0
    if len(nums1) % 2 == 1:
        result ^= _xor_all(nums2)
    if len(nums2) % 2 == 1:
        result ^= _xor_all(nums1)
    return result


def minimize_xor(num1: int, num2: int) -> int:
    """Return x with num2's popcount such that x ^ num1 is as small as possible."""
    have, want = num1.bit_count(), num2.bit_count()
    x = num1
    if have < want:
        position = 0
        for _ in range(want - have):
            while (x >> position) & 1:
                position += 1
            x |= 1 << position
    else:
        for _ in range(have - want):
            x &= x - 1
    return x


def add_digits(n: int) -> int:
    """Return the digital root of a non-negative integer."""
    return 0 if n == 0 else 1 + (n - 1) % 9


def missing_number(nums: Sequence[int]) -> int:
    """Return the value in 0..len(nums) that is absent from nums."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def count_operations(num1: int, num2: int) -> int:
    """Count subtractions of the smaller from the larger until either reaches zero."""
    count = 0
    while num1 and num2:
        if num1 >= num2:
            steps, num1 = divmod(num1, num2)
        else:
            steps, num2 = divmod(num2, num1)
        count += steps
    return count


def does_valid_array_exist(derived: Sequence[int]) -> bool:
    """Tell whether a binary array exists whose circular neighbour XORs give derived."""
    if not derived:
        raise ValueError("derived must not be empty")
    return _xor_all(derived) == 0


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the element that appears once in a sorted array of pairs."""
    return _xor_all(nums)


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value in n+1 numbers drawn from 1..n."""
    low, high = 1, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if sum(1 for n in nums if n <= mid) <= mid:
            low = mid + 1
        else:
            high = mid - 1
    return low
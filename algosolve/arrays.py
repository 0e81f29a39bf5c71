"""Puzzles over integer sequences: sums, orderings, ranges and combinations."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterator, MutableSequence, Sequence
from itertools import combinations


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices [i, j], i < j, of two values adding up to target.

    When several pairs match, the last one in (i, j) order wins; when none
    does, the result is empty.
    """
    found: list[int] = []
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            found = [i, j]
    return found


def last_stone_weight(stones: Sequence[int]) -> int:
    """Smash the two heaviest stones together until at most one is left; return its weight."""
    heap = [-stone for stone in stones]
    heapq.heapify(heap)
    while len(heap) > 1:
        heaviest = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        if heaviest != second:
            heapq.heappush(heap, -(heaviest - second))
    return -heap[0] if heap else 0


def remove_covered_intervals(intervals: Sequence[Sequence[int]]) -> int:
    """Count the intervals left after dropping every one covered by another."""
    remaining = 0
    left = right = -1
    for start, end in sorted((iv[0], iv[1]) for iv in intervals):
        if start > left and end > right:
            remaining += 1
            left = start
        right = max(right, end)
    return remaining


def minimum_deviation(nums: Sequence[int]) -> int:
    """Return the smallest max-min spread reachable by halving evens and doubling odds."""
    if not nums:
        raise ValueError("nums must not be empty")
    present = {n if n % 2 == 0 else n * 2 for n in nums}
    heap = [-value for value in present]
    heapq.heapify(heap)
    low = min(present)
    deviation = -heap[0] - low
    while -heap[0] % 2 == 0:
        largest = -heapq.heappop(heap)
        present.discard(largest)
        half = largest // 2
        if half not in present:
            present.add(half)
            heapq.heappush(heap, -half)
        low = min(low, half)
        deviation = min(deviation, -heap[0] - low)
    return deviation


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occupying more than half of nums."""
    if not nums:
        raise ValueError("nums must not be empty")
    return sorted(nums)[len(nums) // 2]


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Tell whether nums is a non-decreasing sequence rotated by some amount."""
    drops = sum(1 for a, b in zip(nums, [*nums[1:], *nums[:1]]) if a > b)
    return drops <= 1


def ways_to_split_array(nums: Sequence[int]) -> int:
    """Count split points whose left part sums to at least the right part."""
    total = sum(nums)
    prefix = 0
    splits = 0
    for value in nums[:-1]:
        prefix += value
        if prefix >= total - prefix:
            splits += 1
    return splits


def _ranges(nums: Sequence[int]) -> Iterator[tuple[int, int]]:
    start = previous = None
    for value in nums:
        if start is None:
            start = previous = value
        elif value == previous + 1:
            previous = value
        else:
            yield start, previous
            start = previous = value
    if start is not None:
        yield start, previous


def summary_ranges(nums: Sequence[int]) -> list[str]:
    """Describe runs of consecutive integers as 'a->b', or 'a' for a single value."""
    return [str(a) if a == b else f"{a}->{b}" for a, b in _ranges(nums)]


def prefix_common_array(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """For each prefix length, count values present in both prefixes of a and b."""
    seen: Counter[int] = Counter()
    common = 0
    result = []
    for x, y in zip(a, b):
        for value in (x, y):
            seen[value] += 1
            if seen[value] == 2:
                common += 1
        result.append(common)
    return result


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the order of the other values."""
    write = 0
    for read in range(len(nums)):
        if nums[read] != 0:
            nums[read], nums[write] = nums[write], nums[read]
            write += 1


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Write the sorted distinct values to the front of nums in place and return their count."""
    unique = sorted(set(nums))
    nums[: len(unique)] = unique
    return len(unique)


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse a list of characters in place."""
    chars.reverse()


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every multiset of candidates summing to target, each in ascending order."""
    pool = sorted(set(candidates))
    if pool and pool[0] <= 0:
        raise ValueError("candidates must be positive")

    def search(remaining: int, start: int, chosen: list[int]) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        for index in range(start, len(pool)):
            value = pool[index]
            if value > remaining:
                break
            chosen.append(value)
            yield from search(remaining - value, index, chosen)
            chosen.pop()

    return list(search(target, 0, []))


def trap_rain_water(heights: Sequence[int]) -> int:
    """Return the water held between bars of the given heights."""
    water = 0
    left_max = right_max = 0
    start, end = 0, len(heights) - 1
    while start <= end:
        if heights[start] < heights[end]:
            if heights[start] > left_max:
                left_max = heights[start]
            else:
                water += left_max - heights[start]
            start += 1
        else:
            if heights[end] > right_max:
                right_max = heights[end]
            else:
                water += right_max - heights[end]
            end -= 1
    return water
"""Puzzles over strings: counting, matching, shifting and editing."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence
from itertools import accumulate, combinations, zip_longest

_VOWELS = frozenset("aeiou")


def word_subsets(words1: Sequence[str], words2: Sequence[str]) -> list[str]:
    """Return the words of words1 that contain every word of words2 as a letter multiset."""
    required: Counter[str] = Counter()
    for word in words2:
        required |= Counter(word)
    result = []
    for word in words1:
        counts = Counter(word)
        if all(counts[letter] >= need for letter, need in required.items()):
            result.append(word)
    return result


def can_construct_palindromes(s: str, k: int) -> bool:
    """Tell whether all characters of s can form exactly k non-empty palindromes."""
    if len(s) < k:
        return False
    odd = sum(1 for count in Counter(s).values() if count % 2 == 1)
    return odd <= k


def string_matching(words: Sequence[str]) -> list[str]:
    """Return the words that occur inside some other word of the list, in list order."""
    return [
        word
        for i, word in enumerate(words)
        if any(i != j and word in other for j, other in enumerate(words))
    ]


def max_split_score(s: str) -> int:
    """Return the best count of zeros on the left plus ones on the right over all splits."""
    if not s:
        raise ValueError("s must not be empty")
    left_zeros = 0
    right_ones = s.count("1")
    best = 0
    for char in s[:-1]:
        if char == "0":
            left_zeros += 1
        else:
            right_ones -= 1
        best = max(best, left_zeros + right_ones)
    return best


def _revision(part: str) -> int:
    return int(part) if part else 0


def compare_version(version1: str, version2: str) -> int:
    """Compare dotted version strings; return 1, -1 or 0. Missing revisions count as 0."""
    for a, b in zip_longest(version1.split("."), version2.split("."), fillvalue=""):
        left, right = _revision(a), _revision(b)
        if left > right:
            return 1
        if left < right:
            return -1
    return 0


def title_to_number(title: str) -> int:
    """Return the number of a spreadsheet column title such as 'A' or 'AB'."""
    result = 0
    for char in title:
        if not "A" <= char <= "Z":
            raise ValueError(f"invalid column letter: {char!r}")
        result = result * 26 + (ord(char) - ord("A") + 1)
    return result


def _sweep(boxes: str) -> Iterator[int]:
    operations = balls = 0
    for box in boxes:
        yield operations
        if box == "1":
            balls += 1
        operations += balls


def min_operations(boxes: str) -> list[int]:
    """For each box, count the moves needed to bring every ball into it."""
    from_left = list(_sweep(boxes))
    from_right = list(_sweep(boxes[::-1]))[::-1]
    return [a + b for a, b in zip(from_left, from_right)]


def are_almost_equal(s1: str, s2: str) -> bool:
    """Tell whether at most one swap of two characters in one string makes them equal."""
    if len(s1) != len(s2):
        raise ValueError("strings must have the same length")
    diffs = [(x, y) for x, y in zip(s1, s2) if x != y]
    if not diffs:
        return True
    if len(diffs) != 2:
        return False
    (x0, y0), (x1, y1) = diffs
    return x0 == y1 and y0 == x1


def count_palindromic_subsequences(s: str) -> int:
    """Count distinct length-3 palindromes that are subsequences of s."""
    total = 0
    for char in set(s):
        first, last = s.find(char), s.rfind(char)
        if last > first:
            total += len(set(s[first + 1 : last]))
    return total


def can_be_valid(s: str, locked: str) -> bool:
    """Tell whether flipping unlocked brackets can make s a balanced bracket string."""
    if len(s) != len(locked):
        raise ValueError("s and locked must have the same length")
    if len(s) % 2 != 0:
        return False

    balance = 0
    for char, lock in zip(s, locked):
        balance += 1 if lock == "0" or char == "(" else -1
        if balance < 0:
            return False

    balance = 0
    for char, lock in zip(reversed(s), reversed(locked)):
        balance += 1 if lock == "0" or char == ")" else -1
        if balance < 0:
            return False
    return True


def prefix_count(words: Sequence[str], pref: str) -> int:
    """Count the words that start with pref."""
    return sum(1 for word in words if word.startswith(pref))


def shift_letters(s: str, shifts: Sequence[Sequence[int]]) -> str:
    """Apply [start, end, direction] shifts to a lowercase string; direction 1 is forward."""
    diff = [0] * (len(s) + 1)
    for start, end, direction in shifts:
        delta = 1 if direction == 1 else -1
        diff[start] += delta
        diff[end + 1] -= delta
    base = ord("a")
    return "".join(
        chr(base + (ord(char) - base + net) % 26)
        for char, net in zip(s, accumulate(diff[: len(s)]))
    )


def _vowel_bounded(word: str) -> bool:
    return bool(word) and word[0] in _VOWELS and word[-1] in _VOWELS


def vowel_strings(words: Sequence[str], queries: Sequence[Sequence[int]]) -> list[int]:
    """For each [l, r] query, count words in that range starting and ending with a vowel."""
    prefix = list(accumulate((int(_vowel_bounded(word)) for word in words), initial=0))
    return [prefix[right + 1] - prefix[left] for left, right in queries]


def is_prefix_and_suffix(str1: str, str2: str) -> bool:
    """Tell whether str1 is both a prefix and a suffix of str2."""
    return len(str1) <= len(str2) and str2.startswith(str1) and str2.endswith(str1)


def count_prefix_suffix_pairs(words: Sequence[str]) -> int:
    """Count index pairs i < j where words[i] is a prefix and suffix of words[j]."""
    return sum(1 for a, b in combinations(words, 2) if is_prefix_and_suffix(a, b))


def minimum_length(s: str) -> int:
    """Return the shortest length reachable by deleting matching characters around a centre."""
    return sum(2 if count % 2 == 0 else 1 for count in Counter(s).values())


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether s can be obtained from t by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def remove_k_digits(num: str, k: int) -> str:
    """Remove k digits from num to leave the smallest possible number."""
    if len(num) <= k:
        return "0"
    if k == 0:
        return num

    stack = [num[0]]
    for digit in num[1:]:
        while k > 0 and stack and digit < stack[-1]:
            stack.pop()
            k -= 1
        stack.append(digit)
        if len(stack) == 1 and digit == "0":
            stack.pop()

    if k > 0:
        del stack[max(0, len(stack) - k) :]
    return "".join(stack) or "0"


def _typed(text: str) -> list[str]:
    typed: list[str] = []
    for char in text:
        if char != "#":
            typed.append(char)
        elif typed:
            typed.pop()
    return typed


def backspace_compare(s: str, t: str) -> bool:
    """Tell whether two strings are equal once '#' is treated as a backspace."""
    return _typed(s) == _typed(t)
"""Fixed-size sliding window problems."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence
from itertools import chain, repeat


def max_window_sum(items: Sequence[int], k: int) -> int:
    """Return the largest sum of at most ``k`` consecutive items, never below 0.

    The running sum includes the partial windows at the start.
    """
    if k < 0:
        raise ValueError("window size must not be negative")
    best = 0
    total = 0
    leaving = chain(repeat(0, k), items)
    for value, dropped in zip(items, leaving):
        total += value - dropped
        best = max(best, total)
    return best


def first_negatives(items: Sequence[int], k: int) -> list[int]:
    """Return the first negative number of each window of size ``k`` (0 if none)."""
    if k < 1:
        raise ValueError("window size must be positive")
    negatives: deque[int] = deque()
    result = []
    for end, value in enumerate(items):
        if value < 0:
            negatives.append(value)
        start = end - k + 1
        if start > 0 and negatives and negatives[0] == items[start - 1]:
            negatives.popleft()
        if start >= 0:
            result.append(negatives[0] if negatives else 0)
    return result


def count_anagrams(pattern: str, text: str) -> int:
    """Count the windows of ``text`` that are anagrams of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    wanted = Counter(pattern)
    size = len(pattern)
    window: Counter[str] = Counter()
    count = 0
    for end, char in enumerate(text):
        window[char] += 1
        start = end - size + 1
        if start < 0:
            continue
        if window == wanted:
            count += 1
        leaving = text[start]
        window[leaving] -= 1
        if not window[leaving]:
            del window[leaving]
    return count
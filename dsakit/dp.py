"""Dynamic programming problems."""

from __future__ import annotations

from collections.abc import Sequence


def longest_common_subsequence(x: Sequence, y: Sequence) -> int:
    """Return the length of the longest common subsequence of ``x`` and ``y``."""
    previous = [0] * (len(y) + 1)
    for a in x:
        current = [0]
        for j, b in enumerate(y):
            if a == b:
                current.append(previous[j] + 1)
            else:
                current.append(max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]
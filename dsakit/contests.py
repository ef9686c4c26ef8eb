"""Solutions to a handful of short contest problems."""

from __future__ import annotations

from collections.abc import Sequence


def beer_answers(s: str) -> list[str]:
    """Answer after each character: NO once a '0' was seen, YES at the end, else IDK."""
    answers = []
    spoiled = False
    last = len(s) - 1
    for position, char in enumerate(s):
        if char == "0":
            spoiled = True
        if spoiled:
            answers.append("NO")
        elif position < last:
            answers.append("IDK")
        else:
            answers.append("YES")
    return answers


def cursed_arrangement(values: Sequence[int]) -> tuple[int, list[int]]:
    """Arrange values greedily so that as many as possible exceed the sum before them.

    Returns the number of such values and the arrangement, with those values
    first in ascending order and the rest filled in from the end.
    """
    front: list[int] = []
    back: list[int] = []
    total = 0
    for value in sorted(values):
        if total < value:
            front.append(value)
            total += value
        else:
            back.append(value)
    return len(front), front + back[::-1]


def max_nourishment(types: Sequence[int], nourishment: Sequence[int]) -> int:
    """Sum, over each food type, the best nourishment of that type (at least 0)."""
    if len(types) != len(nourishment):
        raise ValueError("types and nourishment must have the same length")
    best: dict[int, int] = {}
    for kind, value in zip(types, nourishment):
        best[kind] = max(best.get(kind, 0), value)
    return sum(best.values())


def permutation_with_ends(n: int, x: int) -> list[int]:
    """Build a permutation of 1..n starting with ``x`` and ending with ``n - x + 1``."""
    if not 1 <= x <= n:
        raise ValueError("x must lie between 1 and n")
    if n % 2 and x == (n + 1) // 2:
        raise ValueError("no such permutation exists")
    y = n - x + 1
    middle = [value for value in range(1, n + 1) if value not in (x, y)]
    return [x, *middle, y]


def pair_constant_sums(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], list[int]]:
    """Reorder ``a`` ascending and ``b`` descending so every pair has the same sum."""
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    if not a:
        raise ValueError("sequences must not be empty")
    first = sorted(a)
    second = sorted(b, reverse=True)
    target = first[0] + second[0]
    if any(p + q != target for p, q in zip(first, second)):
        raise ValueError("no arrangement gives equal sums")
    return first, second


def make_zero_operations(values: Sequence[int]) -> int:
    """Count the operations needed to bring every value to zero."""
    remaining = list(values)
    subtract_ops = 0
    cut_ops = 0
    last = len(remaining)
    while last > 0:
        prefix = remaining[:last]
        smallest = min(prefix)
        pivot = last - 1 - prefix[::-1].index(smallest)
        remaining[:last] = [value - smallest for value in prefix]
        subtract_ops += smallest
        cut_ops += last - pivot - 1
        last = pivot
        if last == 0 and smallest != 0:
            subtract_ops -= smallest
            cut_ops += 1
    return subtract_ops + cut_ops
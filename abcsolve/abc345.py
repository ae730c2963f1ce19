"""Solutions for contest 345: arrow strings, ceiling division, letter swaps."""

from collections import Counter
from itertools import combinations

from .abc341 import _Input, _yes_no


def is_bidirectional_arrow(s):
    """Tell whether s is '<', one or more '=', then '>'."""
    if not s or s[0] != "<" or s[-1] != ">":
        return False
    equals = s.count("=")
    return equals > 0 and len(s) == equals + 2


def ceil_divide_by_ten(x):
    """Return the smallest integer not less than x / 10."""
    return -(-x // 10)


def count_unique_swaps(s):
    """Count the distinct strings obtained by swapping two characters of s."""
    counts = Counter(s)
    total = 1 if any(c > 1 for c in counts.values()) else 0
    total += sum(x * y for x, y in combinations(counts.values(), 2))
    return total


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        return _yes_no(is_bidirectional_arrow(data.word()))
    if problem == "B":
        return f"{ceil_divide_by_ten(data.number())}\n"
    if problem == "C":
        return f"{count_unique_swaps(data.word())}\n"
    raise ValueError(f"unknown problem: {problem}")
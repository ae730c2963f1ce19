"""Solutions for contest 343: digits, adjacency lists, palindromic cubes, scores."""

import random
from collections import Counter

from .abc341 import _Input, _spaced


def pick_digit(a, b, rng=None):
    """Return a random digit 0-9 that differs from ``a + b``."""
    rng = rng if rng is not None else random.Random()
    total = a + b
    while True:
        digit = rng.randrange(10)
        if digit != total:
            return digit


def adjacency_lists(matrix):
    """Return, for each row, the 1-based columns that hold a 1."""
    return [[j for j, cell in enumerate(row, 1) if cell == 1] for row in matrix]


def is_palindrome(num):
    """Tell whether a non-negative integer reads the same in both directions."""
    if num < 0:
        return False
    digits = str(num)
    return digits == digits[::-1]


def max_palindromic_cube(n):
    """Return the largest palindromic cube not above n, or 0 if there is none."""
    best = 0
    x = 1
    while x * x * x <= n:
        cube = x * x * x
        if is_palindrome(cube):
            best = cube
        x += 1
    return best


def distinct_score_counts(n, events):
    """Return the number of distinct scores among n players after each event.

    Each event is a ``(player, points)`` pair with a 1-based player number.
    """
    scores = [0] * n
    tally = Counter({0: n})
    result = []
    for player, points in events:
        if not 1 <= player <= n:
            raise ValueError(f"player {player} out of range")
        old = scores[player - 1]
        tally[old] -= 1
        if tally[old] == 0:
            del tally[old]
        new = old + points
        scores[player - 1] = new
        tally[new] += 1
        result.append(len(tally))
    return result


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        a, b = data.numbers(2)
        return f"{pick_digit(a, b)}\n"
    if problem == "B":
        n = data.number()
        matrix = [data.numbers(n) for _ in range(n)]
        return "".join(_spaced(row) for row in adjacency_lists(matrix))
    if problem == "C":
        return f"{max_palindromic_cube(data.number())}\n"
    if problem == "D":
        n, t = data.numbers(2)
        events = [(data.number(), data.number()) for _ in range(t)]
        return "".join(f"{c}\n" for c in distinct_score_counts(n, events))
    raise ValueError(f"unknown problem: {problem}")
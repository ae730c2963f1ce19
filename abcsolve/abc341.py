"""Solutions for contest 341: alternating strings, currency exchange, grid walks, divisors.

This module also holds the small input helpers that the other contest modules share.
"""

import heapq
from itertools import count, islice
from math import gcd

_BACKWARD_STEPS = {"L": (0, 1), "R": (0, -1), "U": (1, 0), "D": (-1, 0)}


class _Input:
    """Whitespace separated tokens of a problem input."""

    def __init__(self, text):
        self._tokens = iter(text.split())

    def word(self):
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self):
        return int(self.word())

    def numbers(self, amount):
        return [self.number() for _ in range(amount)]


def _yes_no(flag):
    """Render a boolean answer as a "Yes" or "No" line."""
    return ("Yes" if flag else "No") + "\n"


def _spaced(values):
    """Render values each followed by a space, then a newline."""
    return "".join(f"{v} " for v in values) + "\n"


def alternating_string(n):
    """Return n copies of "10" followed by a final "1"."""
    return "10" * n + "1"


def exchange_currency(amounts, rates):
    """Convert money country by country and return what ends up in the last one.

    ``rates`` holds one ``(cost, gain)`` pair per neighbouring pair of countries.
    """
    amounts = list(amounts)
    rates = list(rates)
    if not amounts or len(rates) != len(amounts) - 1:
        raise ValueError("need exactly one rate between each pair of amounts")
    carry = 0
    for amount, (cost, gain) in zip(amounts, rates):
        current = amount + carry
        carry = (current // cost) * gain if current >= cost else 0
    return amounts[-1] + carry


def count_positions(grid, moves):
    """Count the cells where a walk following ``moves`` could have ended."""
    height = len(grid)
    width = len(grid[0]) if grid else 0

    def is_open(i, j):
        return 0 <= i < height and 0 <= j < width and grid[i][j] == "."

    possible = {
        (i, j)
        for i in range(1, height - 1)
        for j in range(1, width - 1)
        if grid[i][j] == "."
    }
    for move in reversed(moves):
        step = _BACKWARD_STEPS.get(move)
        if step is None:
            possible = set()
            continue
        di, dj = step
        possible = {(i + di, j + dj) for i, j in possible if is_open(i + di, j + dj)}
    return len(possible)


def kth_divisible(n, m, k):
    """Return the k-th smallest positive integer divisible by exactly one of n and m."""
    lcm = n // gcd(n, m) * m
    cycle = lcm // n + lcm // m - 2
    if cycle <= 0:
        raise ValueError("n and m must differ")
    full_cycles, remainder = divmod(k, cycle)
    answer = full_cycles * lcm
    if remainder == 0:
        return answer - min(n, m)
    multiples = heapq.merge(count(n, n), count(m, m))
    return answer + next(islice(multiples, remainder - 1, None))


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        return alternating_string(data.number()) + "\n"
    if problem == "B":
        n = data.number()
        amounts = data.numbers(n)
        rates = [(data.number(), data.number()) for _ in range(n - 1)]
        return f"{exchange_currency(amounts, rates)}\n"
    if problem == "C":
        height, _width, _n = data.numbers(3)
        moves = data.word()
        grid = [data.word() for _ in range(height)]
        return f"{count_positions(grid, moves)}\n"
    if problem == "D":
        n, m, k = data.numbers(3)
        return f"{kth_divisible(n, m, k)}\n"
    raise ValueError(f"unknown problem: {problem}")
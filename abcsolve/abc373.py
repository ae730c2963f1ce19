"""Solutions for contest 373: string lengths, keyboard travel, maximum pair sum."""

import string
from itertools import pairwise


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


def count_matching_lengths(strings):
    """Count the strings whose length equals their 1-based position."""
    return sum(1 for position, s in enumerate(strings, 1) if len(s) == position)


def keyboard_distance(layout):
    """Return the distance a finger travels typing A to Z on a one-row keyboard layout."""
    if sorted(layout) != list(string.ascii_uppercase):
        raise ValueError("layout must hold each letter A-Z exactly once")
    position = {letter: i for i, letter in enumerate(layout)}
    return sum(
        abs(position[b] - position[a]) for a, b in pairwise(string.ascii_uppercase)
    )


def max_pair_sum(a, b):
    """Return the largest a_i + b_j."""
    return max(a) + max(b)


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        return f"{count_matching_lengths([data.word() for _ in range(12)])}\n"
    if problem == "B":
        return f"{keyboard_distance(data.word())}\n"
    if problem == "C":
        n = data.number()
        a = data.numbers(n)
        b = data.numbers(n)
        return f"{max_pair_sum(a, b)}\n"
    raise ValueError(f"unknown problem: {problem}")
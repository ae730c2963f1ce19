"""Solutions for contest 346: adjacent products, piano keyboard, missing sum."""

from itertools import cycle, islice, pairwise

from .abc341 import _Input, _yes_no

_KEYBOARD = "wbwbwwbwbwbw"


def adjacent_products(values):
    """Return the products of each pair of neighbouring values."""
    return [a * b for a, b in pairwise(values)]


def keyboard_substring_exists(w, b):
    """Tell whether the endless keyboard has a stretch with w white and b black keys."""
    for start in range(len(_KEYBOARD)):
        whites = blacks = 0
        for key in islice(cycle(_KEYBOARD), start, None):
            if whites > w or blacks > b:
                break
            whites += key == "w"
            blacks += key == "b"
            if whites == w and blacks == b:
                return True
    return False


def missing_sum(numbers, k):
    """Return the sum of the integers 1..k that do not occur in numbers."""
    present = {x for x in numbers if x <= k}
    return k * (k + 1) // 2 - sum(present)


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        values = data.numbers(data.number())
        return "".join(f"{p} " for p in adjacent_products(values))
    if problem == "B":
        w, b = data.numbers(2)
        return _yes_no(keyboard_substring_exists(w, b))
    if problem == "C":
        n, k = data.numbers(2)
        return f"{missing_sum(data.numbers(n), k)}\n"
    raise ValueError(f"unknown problem: {problem}")
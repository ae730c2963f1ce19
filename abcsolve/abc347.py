"""Solutions for contest 347: divisible quotients, distinct substrings."""

from .abc341 import _Input, _spaced


def divisible_quotients(values, k):
    """Return, sorted, the quotients of the values that are multiples of k."""
    return sorted(v // k for v in values if v % k == 0)


def count_distinct_substrings(s):
    """Count the distinct non-empty substrings of s."""
    return len({s[i:j] for i in range(len(s)) for j in range(i + 1, len(s) + 1)})


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        n, k = data.numbers(2)
        return _spaced(divisible_quotients(data.numbers(n), k))
    if problem == "B":
        return f"{count_distinct_substrings(data.word())}\n"
    raise ValueError(f"unknown problem: {problem}")
"""Solutions for contest 350: contest names, teeth, sorting by swaps."""

from .abc341 import _Input, _yes_no


def is_past_contest(s):
    """Tell whether s names a contest held before this one (ABC001-ABC349, not ABC316)."""
    if s[:3] != "ABC":
        return False
    number = int(s[3:])
    return 1 <= number <= 349 and number != 316


def remaining_teeth(n, treatments):
    """Return how many of n teeth remain after toggling the listed holes."""
    empty = set()
    for hole in treatments:
        if not 1 <= hole <= n:
            raise ValueError(f"hole {hole} out of range")
        empty ^= {hole}
    return n - len(empty)


def sort_by_swaps(values):
    """Return the swaps ``(i, j)``, 1-based with i < j, that sort a permutation of 1..n."""
    values = list(values)
    position = {v: i for i, v in enumerate(values)}
    operations = []
    for target in range(1, len(values) + 1):
        where = position[target]
        if where != target - 1:
            operations.append((target, where + 1))
            position[values[target - 1]] = where
            values[where], values[target - 1] = values[target - 1], values[where]
    return operations


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        return _yes_no(is_past_contest(data.word()))
    if problem == "B":
        n, q = data.numbers(2)
        return f"{remaining_teeth(n, data.numbers(q))}\n"
    if problem == "C":
        operations = sort_by_swaps(data.numbers(data.number()))
        lines = [str(len(operations))] + [f"{i} {j}" for i, j in operations]
        return "\n".join(lines) + "\n"
    raise ValueError(f"unknown problem: {problem}")
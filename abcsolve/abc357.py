"""Solutions for contest 357: disinfectant, letter case, carpets, repeated numbers, walks."""

from collections import Counter

from .abc341 import _Input

MOD = 998244353


def disinfect_count(m, hands):
    """Return how many aliens in a row can disinfect all their hands with m units."""
    remaining = m
    served = 0
    for need in hands:
        if remaining < need:
            break
        remaining -= need
        served += 1
    return served


def normalize_case(s):
    """Make s all upper case if it has more upper than lower case letters, else all lower."""
    counts = Counter("upper" if c.isupper() else "lower" if c.islower() else "other" for c in s)
    if counts["upper"] > counts["lower"]:
        return "".join(c.upper() if c.islower() else c for c in s)
    return "".join(c.lower() if c.isupper() else c for c in s)


def sierpinski_carpet(level):
    """Return the rows of the level-K carpet, using '#' for filled and '.' for empty cells."""
    if level < 0:
        raise ValueError("level must not be negative")
    carpet = ["#"]
    for _ in range(level):
        blank = "." * len(carpet)
        outer = [row * 3 for row in carpet]
        middle = [row + blank + row for row in carpet]
        carpet = outer + middle + outer
    return carpet


def repeated_number_mod(n_str):
    """Return the number made by writing N exactly N times, modulo 998244353."""
    n_str = str(n_str)
    if not n_str.isdigit():
        raise ValueError(f"not a decimal number: {n_str!r}")
    digits = len(n_str)
    n_mod = int(n_str) % MOD
    n_exp = int(n_str) % (MOD - 1)
    power_d = pow(10, digits, MOD)
    power_total = pow(10, digits * n_exp % (MOD - 1), MOD)
    numerator = (power_total - 1) % MOD
    denominator = (power_d - 1) % MOD
    return n_mod * numerator % MOD * pow(denominator, MOD - 2, MOD) % MOD


def count_reachable_pairs(targets):
    """Count the pairs (u, v) where v can be reached from u by following the edges.

    ``targets[i]`` is the 1-based vertex that vertex i + 1 points to.
    """
    n = len(targets)
    successor = []
    for target in targets:
        if not 1 <= target <= n:
            raise ValueError(f"target {target} out of range")
        successor.append(target - 1)

    reach = [0] * n
    state = [0] * n  # 0: unseen, 1: on the current walk, 2: finished
    for start in range(n):
        if state[start]:
            continue
        path = []
        node = start
        while state[node] == 0:
            state[node] = 1
            path.append(node)
            node = successor[node]
        if state[node] == 1:
            first = path.index(node)
            cycle = path[first:]
            for member in cycle:
                reach[member] = len(cycle)
                state[member] = 2
            path = path[:first]
        for vertex in reversed(path):
            reach[vertex] = reach[successor[vertex]] + 1
            state[vertex] = 2
    return sum(reach)


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        n, m = data.numbers(2)
        return f"{disinfect_count(m, data.numbers(n))}\n"
    if problem == "B":
        return normalize_case(data.word()) + "\n"
    if problem == "C":
        return "".join(row + "\n" for row in sierpinski_carpet(data.number()))
    if problem == "D":
        return f"{repeated_number_mod(data.word())}\n"
    if problem == "E":
        n = data.number()
        return f"{count_reachable_pairs(data.numbers(n))}\n"
    raise ValueError(f"unknown problem: {problem}")
"""Solutions for contest 356: segment reversal, nutrients, keys, masked popcounts."""

from .abc341 import _Input, _spaced, _yes_no

MOD = 998244353


def reverse_segment(n, l, r):
    """Return 1..n with the 1-based segment l..r reversed."""
    values = list(range(1, n + 1))
    values[l - 1 : r] = values[l - 1 : r][::-1]
    return values


def nutrients_met(goals, foods):
    """Tell whether the foods together reach every nutrient goal."""
    goals = list(goals)
    foods = list(foods)
    totals = [sum(column) for column in zip(*foods)] if foods else [0] * len(goals)
    return all(total >= goal for total, goal in zip(totals, goals))


def count_key_combinations(n, k, tests):
    """Count real/dummy assignments of n keys consistent with the tests.

    Each test is ``(keys, result)``: 1-based key numbers and 'o' if the door
    opened (at least k real keys) or 'x' if it stayed shut.
    """
    checks = [(sum(1 << (key - 1) for key in set(keys)), result) for keys, result in tests]

    def consistent(mask):
        for keys_mask, result in checks:
            real = bin(mask & keys_mask).count("1")
            if result == "o" and real < k:
                return False
            if result == "x" and real >= k:
                return False
        return True

    return sum(1 for mask in range(1 << n) if consistent(mask))


def masked_popcount_sum(n, m):
    """Return the sum over k in 0..n of popcount(k & m), modulo 998244353."""
    total = 0
    for bit in range(60):
        if not (m >> bit) & 1:
            continue
        block = 1 << (bit + 1)
        full_blocks, remainder = divmod(n + 1, block)
        ones = full_blocks * (block // 2) + max(0, remainder - (1 << bit))
        total = (total + ones) % MOD
    return total


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        n, l, r = data.numbers(3)
        return _spaced(reverse_segment(n, l, r))
    if problem == "B":
        n, m = data.numbers(2)
        goals = data.numbers(m)
        foods = [data.numbers(m) for _ in range(n)]
        return _yes_no(nutrients_met(goals, foods))
    if problem == "C":
        n, m, k = data.numbers(3)
        tests = []
        for _ in range(m):
            keys = data.numbers(data.number())
            tests.append((keys, data.word()))
        return f"{count_key_combinations(n, k, tests)}\n"
    if problem == "D":
        n, m = data.numbers(2)
        return f"{masked_popcount_sum(n, m)}\n"
    raise ValueError(f"unknown problem: {problem}")
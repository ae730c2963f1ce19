"""Solutions for contest 358: theme park names, ticket booth, popcorn stands, gifts."""

from itertools import combinations

from .abc341 import _Input, _yes_no


def is_atcoder_land(s, t):
    """Tell whether the two words are exactly "AtCoder" and "Land"."""
    return s == "AtCoder" and t == "Land"


def finish_times(a, arrivals):
    """Return when each person, arriving in order, finishes buying a ticket taking a seconds."""
    current = 0
    times = []
    for arrival in arrivals:
        current = max(current, arrival) + a
        times.append(current)
    return times


def min_stands(stands):
    """Return the fewest stands that together sell every flavour ('o' marks a flavour sold).

    If no choice covers every flavour, the number of stands is returned.
    """
    stands = list(stands)
    if not stands:
        return 0
    flavours = len(stands[0])
    for size in range(1, len(stands) + 1):
        for chosen in combinations(stands, size):
            if all(any(stand[j] == "o" for stand in chosen) for j in range(flavours)):
                return size
    return len(stands)


def min_gift_cost(prices, demands):
    """Return the cheapest total for buying one box per demand, each costing at least it.

    Every box is bought at most once; None means the demands cannot all be met.
    """
    available = iter(sorted(prices))
    total = 0
    for need in sorted(demands):
        for price in available:
            if price >= need:
                total += price
                break
        else:
            return None
    return total


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        s, t = data.word(), data.word()
        return _yes_no(is_atcoder_land(s, t))
    if problem == "B":
        n, a = data.numbers(2)
        return "".join(f"{t}\n" for t in finish_times(a, data.numbers(n)))
    if problem == "C":
        n, _m = data.numbers(2)
        return f"{min_stands([data.word() for _ in range(n)])}\n"
    if problem == "D":
        n, m = data.numbers(2)
        prices = data.numbers(n)
        demands = data.numbers(m)
        cost = min_gift_cost(prices, demands)
        return f"{-1 if cost is None else cost}\n"
    raise ValueError(f"unknown problem: {problem}")
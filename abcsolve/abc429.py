"""Solutions for contest 429: rate limits, dropping a value, pairs, a ring walk, BFS."""

import math
from collections import Counter, deque
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


def request_responses(n, m):
    """Answer n requests: the first m get "OK", the rest "Too Many Requests"."""
    return ["OK" if i <= m else "Too Many Requests" for i in range(1, n + 1)]


def can_drop_one(values, m):
    """Tell whether removing exactly one value leaves a sum of m."""
    values = list(values)
    total = sum(values)
    return any(total - v == m for v in values)


def count_pair_triples(values):
    """Count triples of positions where exactly two of the three values are equal.

    Every value must lie in 1..len(values).
    """
    values = list(values)
    n = len(values)
    counts = Counter(values)
    for value in counts:
        if not 1 <= value <= n:
            raise ValueError(f"value {value} out of range")
    return sum(c * (c - 1) // 2 * (n - c) for c in counts.values() if c >= 2)


def ring_sum(m, c, positions):
    """Sum, over every start 0..m-1 on a ring of length m, the people met before reaching c.

    Walking from a start, people are met at their positions; the walk stops
    once at least c people have been met, and the number met is counted.
    """
    positions = list(positions)
    if not positions:
        raise ValueError("no positions given")
    if c > len(positions):
        raise ValueError("c exceeds the number of people")
    counts = Counter(positions)
    spots = sorted(counts)
    gaps = [b - a for a, b in pairwise(spots)] + [m - spots[-1] + spots[0]]
    weights = [counts[p] for p in spots] * 2

    total = 0
    window = 0
    right = 0
    for i, gap in enumerate(gaps):
        while window < c:
            right += 1
            window += weights[right]
        total += gap * window
        window -= weights[i + 1]
    return total


def nearest_safe_sums(n, edges, labels):
    """For each 'D' vertex, sum the distances to its two nearest distinct 'S' vertices.

    ``labels[i]`` labels vertex i + 1; ``edges`` are undirected 1-based pairs.
    None is given where fewer than two 'S' vertices can be reached.
    """
    if len(labels) != n:
        raise ValueError("need one label per vertex")
    graph = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) out of range")
        graph[u].append(v)
        graph[v].append(u)

    d1 = [math.inf] * (n + 1)
    d2 = [math.inf] * (n + 1)
    s1 = [None] * (n + 1)
    s2 = [None] * (n + 1)
    queue = deque()
    for vertex, label in enumerate(labels, 1):
        if label == "S":
            d1[vertex] = 0
            s1[vertex] = vertex
            queue.append((vertex, 0, vertex))

    while queue:
        u, dist, source = queue.popleft()
        step = dist + 1
        for v in graph[u]:
            improved = False
            if s1[v] == source:
                if step < d1[v]:
                    d1[v] = step
                    improved = True
            elif s2[v] == source:
                if step < d2[v]:
                    d2[v] = step
                    improved = True
            elif step < d1[v]:
                d2[v], s2[v] = d1[v], s1[v]
                d1[v], s1[v] = step, source
                improved = True
            elif step < d2[v]:
                d2[v], s2[v] = step, source
                improved = True
            if improved:
                queue.append((v, step, source))

    return [
        None if d2[vertex] == math.inf else d1[vertex] + d2[vertex]
        for vertex, label in enumerate(labels, 1)
        if label == "D"
    ]


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        n, m = data.numbers(2)
        return "".join(line + "\n" for line in request_responses(n, m))
    if problem == "B":
        n, m = data.numbers(2)
        return "Yes" if can_drop_one(data.numbers(n), m) else "No"
    if problem == "C":
        n = data.number()
        return f"{count_pair_triples(data.numbers(n))}"
    if problem == "D":
        n, m, c = data.numbers(3)
        return f"{ring_sum(m, c, data.numbers(n))}"
    if problem == "E":
        n, m = data.numbers(2)
        edges = [tuple(data.numbers(2)) for _ in range(m)]
        labels = data.word()
        return "".join(
            f"{-1 if s is None else s}\n" for s in nearest_safe_sums(n, edges, labels)
        )
    raise ValueError(f"unknown problem: {problem}")
"""Solutions for contest 362: pens, right triangles, vertex-weighted shortest paths."""

import heapq
import math

UNREACHABLE = 10**18

_PEN_CHOICES = {
    "Red": ("g", "b"),
    "Green": ("r", "b"),
    "Blue": ("r", "g"),
}


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


def min_pen_cost(r, g, b, color):
    """Return the cheapest pen whose colour is not the disliked one."""
    choices = _PEN_CHOICES.get(color)
    if choices is None:
        raise ValueError(f"unknown colour: {color}")
    prices = {"r": r, "g": g, "b": b}
    return min(prices[name] for name in choices)


def _squared_distance(p, q):
    return (p[0] - q[0]) ** 2 + (p[1] - q[1]) ** 2


def is_right_triangle(a, b, c):
    """Tell whether the points a, b and c form a right triangle."""
    ab = _squared_distance(a, b)
    bc = _squared_distance(b, c)
    ca = _squared_distance(c, a)
    return ab + bc == ca or ab + ca == bc or bc + ca == ab


def min_path_weights(weights, edges):
    """Return the lightest path weight from vertex 1 to each of vertices 2..n.

    A path weighs the sum of its vertex weights and edge weights. ``weights``
    holds the vertex weights in order; ``edges`` holds ``(u, v, weight)``
    triples with 1-based vertices. Unreachable vertices give None.
    """
    weights = list(weights)
    n = len(weights)
    if n == 0:
        return []
    adjacency = [[] for _ in range(n)]
    for u, v, weight in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) out of range")
        adjacency[u - 1].append((v - 1, weight))
        adjacency[v - 1].append((u - 1, weight))

    dist = [math.inf] * n
    dist[0] = weights[0]
    heap = [(weights[0], 0)]
    while heap:
        current, u = heapq.heappop(heap)
        if current > dist[u]:
            continue
        for v, weight in adjacency[u]:
            candidate = current + weights[v] + weight
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return [None if d == math.inf else d for d in dist[1:]]


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        r, g, b = data.numbers(3)
        return f"{min_pen_cost(r, g, b, data.word())}\n"
    if problem == "B":
        xa, ya, xb, yb, xc, yc = data.numbers(6)
        right = is_right_triangle((xa, ya), (xb, yb), (xc, yc))
        return ("Yes" if right else "No") + "\n"
    if problem == "D":
        n, m = data.numbers(2)
        weights = data.numbers(n)
        edges = [tuple(data.numbers(3)) for _ in range(m)]
        distances = min_path_weights(weights, edges)
        return "".join(
            f"{UNREACHABLE if d is None else d} " for d in distances
        ) + "\n"
    raise ValueError(f"unknown problem: {problem}")
"""Solutions for contest 361: insertion, cuboid overlap, trimming, tree tours."""

from .abc341 import _Input, _spaced, _yes_no


def insert_at(values, k, x):
    """Return the values with x inserted right after the first k of them."""
    values = list(values)
    return values[:k] + [x] + values[k:]


def cuboids_intersect(first, second):
    """Tell whether two axis-aligned cuboids share a region of positive volume.

    Each cuboid is ``(x1, y1, z1, x2, y2, z2)`` with the low corner first.
    """
    low_a, high_a = first[:3], first[3:]
    low_b, high_b = second[:3], second[3:]
    return all(
        la < hb and ha > lb for la, ha, lb, hb in zip(low_a, high_a, low_b, high_b)
    )


def min_range_after_removal(values, k):
    """Return the smallest max - min left after removing exactly k of the values."""
    ordered = sorted(values)
    if not 0 <= k < len(ordered):
        raise ValueError("k must be at least 0 and less than the number of values")
    keep = len(ordered) - k
    return min(ordered[i + keep - 1] - ordered[i] for i in range(k + 1))


def _farthest(adjacency, start):
    best_node, best = start, -1
    stack = [(start, None, 0)]
    while stack:
        node, parent, distance = stack.pop()
        if distance > best:
            best, best_node = distance, node
        for neighbour, weight in adjacency[node]:
            if neighbour != parent:
                stack.append((neighbour, node, distance + weight))
    return best_node, best


def tour_length(n, edges):
    """Return the shortest walk from some vertex that visits every vertex of a weighted tree.

    ``edges`` holds ``(a, b, weight)`` triples with 1-based vertices.
    """
    adjacency = {vertex: [] for vertex in range(1, n + 1)}
    total = 0
    for a, b, weight in edges:
        if a not in adjacency or b not in adjacency:
            raise ValueError(f"edge ({a}, {b}) out of range")
        adjacency[a].append((b, weight))
        adjacency[b].append((a, weight))
        total += weight
    end, _ = _farthest(adjacency, 1)
    _, diameter = _farthest(adjacency, end)
    return 2 * total - diameter


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        n, k, x = data.numbers(3)
        return _spaced(insert_at(data.numbers(n), k, x))
    if problem == "B":
        first = data.numbers(6)
        second = data.numbers(6)
        return _yes_no(cuboids_intersect(first, second))
    if problem == "C":
        n, k = data.numbers(2)
        return f"{min_range_after_removal(data.numbers(n), k)}\n"
    if problem == "E":
        n = data.number()
        edges = [tuple(data.numbers(3)) for _ in range(n - 1)]
        return f"{tour_length(n, edges)}\n"
    raise ValueError(f"unknown problem: {problem}")
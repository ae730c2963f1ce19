"""Solutions for contest 441: squares, word owners, card picks, walks, A-majority ranges."""

from itertools import accumulate


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


def in_square(p, q, x, y):
    """Tell whether (x, y) lies in the 100 by 100 square whose low corner is (p, q)."""
    return p <= x <= p + 99 and q <= y <= q + 99


def classify_words(s, t, words):
    """Say for each word whose alphabet spells it: "Takahashi", "Aoki" or "Unknown"."""
    first, second = set(s), set(t)
    result = []
    for word in words:
        letters = set(word)
        by_first = letters <= first
        by_second = letters <= second
        if by_first and not by_second:
            result.append("Takahashi")
        elif by_second and not by_first:
            result.append("Aoki")
        else:
            result.append("Unknown")
    return result


def min_cards(values, k, x):
    """Return the fewest cards to pick so that, whichever k are real, their sum is at least x.

    None means no number of cards is enough.
    """
    ordered = sorted(values, reverse=True)
    n = len(ordered)
    if not 0 <= k <= n:
        raise ValueError("k must lie between 0 and the number of cards")
    prefix = list(accumulate(ordered, initial=0))
    for picked in range(n - k + 1, n + 1):
        if prefix[picked] - prefix[n - k] >= x:
            return picked
    return None


def reachable_ends(n, edges, length, low, high):
    """Return the vertices that end a walk from 1 of exactly ``length`` edges costing low..high.

    ``edges`` holds directed ``(u, v, cost)`` triples with 1-based vertices.
    """
    graph = [[] for _ in range(n + 1)]
    for u, v, cost in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) out of range")
        graph[u].append((v, cost))

    found = set()
    stack = [(1, 0, 0)]
    while stack:
        vertex, steps, cost = stack.pop()
        if cost > high:
            continue
        if steps == length:
            if low <= cost:
                found.add(vertex)
            continue
        stack.extend((nxt, steps + 1, cost + weight) for nxt, weight in graph[vertex])
    return sorted(found)


def _sort_counting_rises(values):
    if len(values) <= 1:
        return list(values), 0
    middle = len(values) // 2
    left, left_count = _sort_counting_rises(values[:middle])
    right, right_count = _sort_counting_rises(values[middle:])
    total = left_count + right_count
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            total += len(right) - j
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, total


def count_a_majority_ranges(s):
    """Count the non-empty substrings of s holding more 'A' than 'B' characters."""
    steps = (1 if ch == "A" else -1 if ch == "B" else 0 for ch in s)
    prefix = list(accumulate(steps, initial=0))
    return _sort_counting_rises(prefix)[1]


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        p, q, x, y = data.numbers(4)
        return "Yes" if in_square(p, q, x, y) else "No"
    if problem == "B":
        data.numbers(2)
        s, t = data.word(), data.word()
        words = [data.word() for _ in range(data.number())]
        return "".join(answer + "\n" for answer in classify_words(s, t, words))
    if problem == "C":
        n, k, x = data.numbers(3)
        picked = min_cards(data.numbers(n), k, x)
        return f"{-1 if picked is None else picked}"
    if problem == "D":
        n, m, length, low, high = data.numbers(5)
        edges = [tuple(data.numbers(3)) for _ in range(m)]
        return " ".join(str(v) for v in reachable_ends(n, edges, length, low, high))
    if problem == "E":
        data.number()
        return f"{count_a_majority_ranges(data.word())}"
    raise ValueError(f"unknown problem: {problem}")
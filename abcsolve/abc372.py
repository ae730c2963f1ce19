"""Solutions for contest 372: dots, powers of three, visible buildings, component queries."""

from itertools import accumulate

_TOP_LIMIT = 10
_MAX_TERMS = 20


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


def strip_dots(s):
    """Return s with every '.' removed."""
    return s.replace(".", "")


def ternary_terms(m):
    """Return exponents, largest first, whose powers of three add up to m (at most 20)."""
    terms = []
    remaining = m
    for exp in range(10, -1, -1):
        if remaining <= 0 or len(terms) >= _MAX_TERMS:
            break
        power = 3**exp
        while remaining >= power and len(terms) < _MAX_TERMS:
            terms.append(exp)
            remaining -= power
    while remaining > 0 and len(terms) < _MAX_TERMS:
        terms.append(0)
        remaining -= 1
    return terms


def visible_counts(heights):
    """For each building, count the buildings to its right that it can see.

    Building j is visible from i < j when no building strictly between them
    is taller than building j.
    """
    heights = list(heights)
    n = len(heights)
    delta = [0] * (n + 1)
    stack = []
    for j, height in enumerate(heights):
        while stack and heights[stack[-1]] <= height:
            stack.pop()
        left = stack[-1] if stack else 0
        if left <= j - 1:
            delta[left] += 1
            delta[j] -= 1
        stack.append(j)
    return list(accumulate(delta[:n]))


class ConnectedComponents:
    """Vertices 1..n joined by edges, answering k-th largest vertex queries per component."""

    def __init__(self, n):
        self._n = n
        self._parent = list(range(n + 1))
        self._top = [[v] for v in range(n + 1)]

    def _check(self, v):
        if not 1 <= v <= self._n:
            raise ValueError(f"vertex {v} out of range")

    def _find(self, x):
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def connect(self, u, v):
        """Add an edge between u and v."""
        self._check(u)
        self._check(v)
        pu, pv = self._find(u), self._find(v)
        if pu == pv:
            return
        if len(self._top[pu]) < len(self._top[pv]):
            pu, pv = pv, pu
        self._parent[pv] = pu
        merged = sorted(self._top[pu] + self._top[pv], reverse=True)
        self._top[pu] = merged[:_TOP_LIMIT]
        self._top[pv] = []

    def kth_largest(self, v, k):
        """Return the k-th largest vertex in v's component, or None (only k <= 10 is tracked)."""
        self._check(v)
        if k < 1:
            raise ValueError("k must be positive")
        top = self._top[self._find(v)]
        return top[k - 1] if k <= len(top) else None


def process_queries(n, queries):
    """Run ``(1, u, v)`` edge additions and ``(2, v, k)`` lookups; return the lookup answers."""
    components = ConnectedComponents(n)
    answers = []
    for kind, first, second in queries:
        if kind == 1:
            components.connect(first, second)
        elif kind == 2:
            answers.append(components.kth_largest(first, second))
        else:
            raise ValueError(f"unknown query type {kind}")
    return answers


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        return strip_dots(data.word()) + "\n"
    if problem == "B":
        terms = ternary_terms(data.number())
        return f"{len(terms)}\n" + "".join(f"{t} " for t in terms) + "\n"
    if problem in ("C", "D"):
        heights = data.numbers(data.number())
        return " ".join(str(c) for c in visible_counts(heights)) + "\n"
    if problem == "E":
        n, q = data.numbers(2)
        queries = [tuple(data.numbers(3)) for _ in range(q)]
        return "".join(
            f"{-1 if answer is None else answer}\n"
            for answer in process_queries(n, queries)
        )
    raise ValueError(f"unknown problem: {problem}")
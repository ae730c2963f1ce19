"""Solutions for contest 375: patterns, tours, rotations, triples, teams, roads."""

import heapq
import math
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


def count_patterns(s):
    """Count the (possibly overlapping) occurrences of "#.#" in s."""
    return sum(1 for i in range(len(s) - 2) if s[i : i + 3] == "#.#")


def tour_cost(points):
    """Return the length of the walk from the origin through the points and back."""
    cost = 0.0
    cx = cy = 0
    for x, y in points:
        cost += math.sqrt((cx - x) * (cx - x) + (cy - y) * (cy - y))
        cx, cy = x, y
    cost += math.sqrt(cx * cx + cy * cy)
    return cost


def rotate_grid(grid):
    """Rotate the l-th ring from the outside of a square grid clockwise l times."""
    grid = list(grid)
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("grid must be square")
    result = [list(row) for row in grid]
    for x, row in enumerate(grid):
        for y, cell in enumerate(row):
            turns = (min(x, y, n - 1 - x, n - 1 - y) + 1) % 4
            if turns == 1:
                result[y][n - 1 - x] = cell
            elif turns == 2:
                result[n - 1 - x][n - 1 - y] = cell
            elif turns == 3:
                result[n - 1 - y][x] = cell
    return ["".join(row) for row in result]


def count_palindromic_triples(s):
    """Count index triples i < j < k with s[i] == s[k]."""
    positions = {}
    for index, ch in enumerate(s, 1):
        positions.setdefault(ch, []).append(index)
    total = 0
    for spots in positions.values():
        m = len(spots)
        if m < 2:
            continue
        prefix = list(accumulate(spots))
        span = sum(j * spots[j] - prefix[j - 1] for j in range(1, m))
        total += span - m * (m - 1) // 2
    return total


def min_team_moves(members):
    """Return the fewest people to move so three teams have equal strength, or None.

    ``members`` holds ``(team, strength)`` pairs with teams numbered 1 to 3.
    """
    members = list(members)
    total = sum(strength for _, strength in members)
    if total % 3:
        return None
    target = total // 3
    sums = {1: 0, 2: 0, 3: 0}
    for team, strength in members:
        sums[team if team in (1, 2) else 3] += strength
    if all(value == target for value in sums.values()):
        return 0

    best = {(0, 0): 0}
    for team, strength in members:
        following = {}

        def offer(key, kept):
            if following.get(key, -1) < kept:
                following[key] = kept

        for (s1, s2), kept in best.items():
            if s1 + strength <= target:
                offer((s1 + strength, s2), kept + (team == 1))
            if s2 + strength <= target:
                offer((s1, s2 + strength), kept + (team == 2))
            offer((s1, s2), kept + (team == 3))
        best = following

    kept = best.get((target, target))
    return None if kept is None else len(members) - kept


def _relax_through(dist, a, b, weight):
    row_b = dist[b]
    for row in dist:
        to_a = row[a]
        if to_a == math.inf:
            continue
        for v, from_b in enumerate(row_b):
            if from_b == math.inf:
                continue
            candidate = to_a + weight + from_b
            if row[v] > candidate:
                row[v] = candidate


def road_queries(n, roads, queries):
    """Answer shortest-distance queries while roads get closed.

    ``roads`` holds ``(a, b, length)`` triples; queries are ``(1, road)`` to
    close a 1-based road or ``(2, x, y)`` to ask for the distance, which is
    None when y cannot be reached from x.
    """
    roads = list(roads)
    queries = [tuple(q) for q in queries]
    closed = set()
    for query in queries:
        if query[0] == 1:
            road = query[1]
            if not 1 <= road <= len(roads):
                raise ValueError(f"road {road} out of range")
            closed.add(road)
        elif query[0] != 2:
            raise ValueError(f"unknown query type {query[0]}")

    dist = [[math.inf] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0
    for road, (a, b, weight) in enumerate(roads, 1):
        if road not in closed and weight < dist[a - 1][b - 1]:
            dist[a - 1][b - 1] = dist[b - 1][a - 1] = weight

    for k in range(n):
        row_k = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k == math.inf:
                continue
            for j, from_k in enumerate(row_k):
                if from_k != math.inf and row[j] > to_k + from_k:
                    row[j] = to_k + from_k

    answers = []
    for query in reversed(queries):
        if query[0] == 2:
            found = dist[query[1] - 1][query[2] - 1]
            answers.append(None if found == math.inf else found)
            continue
        a, b, weight = roads[query[1] - 1]
        a, b = a - 1, b - 1
        if weight < dist[a][b]:
            dist[a][b] = dist[b][a] = weight
        _relax_through(dist, a, b, weight)
        _relax_through(dist, b, a, weight)
    return answers[::-1]


def _dijkstra(adjacency, source):
    dist = [math.inf] * len(adjacency)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        current, u = heapq.heappop(heap)
        if current > dist[u]:
            continue
        for v, weight in adjacency[u]:
            if dist[v] > current + weight:
                dist[v] = current + weight
                heapq.heappush(heap, (dist[v], v))
    return dist


def _bridges(n, graph, edge_count):
    order = [0] * (n + 1)
    low = [0] * (n + 1)
    is_bridge = [False] * (edge_count + 1)
    timer = 0
    for root in range(1, n + 1):
        if order[root]:
            continue
        timer += 1
        order[root] = low[root] = timer
        stack = [(root, iter(graph[root]), -1, -1)]
        while stack:
            node, edges, parent, parent_edge = stack[-1]
            for v, road in edges:
                if v == parent:
                    continue
                if not order[v]:
                    timer += 1
                    order[v] = low[v] = timer
                    stack.append((v, iter(graph[v]), node, road))
                    break
                low[node] = min(low[node], order[v])
            else:
                stack.pop()
                if parent != -1:
                    low[parent] = min(low[parent], low[node])
                    if low[node] > order[parent]:
                        is_bridge[parent_edge] = True
    return is_bridge


def essential_roads(n, roads):
    """For each road tell whether closing it lengthens the shortest route from 1 to n."""
    roads = list(roads)
    adjacency = [[] for _ in range(n + 1)]
    for a, b, weight in roads:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"road ({a}, {b}) out of range")
        adjacency[a].append((b, weight))
        adjacency[b].append((a, weight))

    from_start = _dijkstra(adjacency, 1)
    from_end = _dijkstra(adjacency, n)
    shortest = from_start[n]
    if shortest == math.inf:
        raise ValueError("vertex n cannot be reached from vertex 1")

    on_route = [False] * (len(roads) + 1)
    graph = [[] for _ in range(n + 1)]
    for road, (a, b, weight) in enumerate(roads, 1):
        if (
            from_start[a] + weight + from_end[b] == shortest
            or from_start[b] + weight + from_end[a] == shortest
        ):
            on_route[road] = True
            graph[a].append((b, road))
            graph[b].append((a, road))

    is_bridge = _bridges(n, graph, len(roads))
    return [on_route[road] and is_bridge[road] for road in range(1, len(roads) + 1)]


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        data.number()
        return f"{count_patterns(data.word())}\n"
    if problem == "B":
        n = data.number()
        points = [(data.number(), data.number()) for _ in range(n)]
        return f"{tour_cost(points):.15g}\n"
    if problem == "C":
        n = data.number()
        return "".join(row + "\n" for row in rotate_grid([data.word() for _ in range(n)]))
    if problem == "D":
        return f"{count_palindromic_triples(data.word())}"
    if problem == "E":
        n = data.number()
        members = [(data.number(), data.number()) for _ in range(n)]
        moves = min_team_moves(members)
        return f"{-1 if moves is None else moves}"
    if problem == "F":
        n, m, q = data.numbers(3)
        roads = [tuple(data.numbers(3)) for _ in range(m)]
        queries = []
        for _ in range(q):
            kind = data.number()
            queries.append((kind, data.number()) if kind == 1 else (kind, *data.numbers(2)))
        return "".join(
            f"{-1 if answer is None else answer}\n"
            for answer in road_queries(n, roads, queries)
        )
    if problem == "G":
        n, m = data.numbers(2)
        roads = [tuple(data.numbers(3)) for _ in range(m)]
        return "".join(("Yes" if e else "No") + "\n" for e in essential_roads(n, roads))
    raise ValueError(f"unknown problem: {problem}")
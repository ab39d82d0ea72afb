"""Graph problems: build scheduling, subtree sizes, spanning trees and orderings."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from itertools import pairwise


def _tokens(text: str) -> Iterator[str]:
    return iter(text.split())


def _take(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


class UnionFind:
    """Disjoint sets over the integers 0..size-1."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._size = [1] * size

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if already joined."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self._size[ra] < self._size[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        self._size[ra] += self._size[rb]
        return True


def construction_time(
    durations: Sequence[int], rules: Iterable[tuple[int, int]], target: int
) -> int:
    """Earliest finishing time of building ``target`` (1-based).

    ``rules`` holds pairs ``(x, y)`` meaning x must be finished before y starts.
    """
    n = len(durations)
    if not 1 <= target <= n:
        raise ValueError(f"building {target} out of range")
    parents: list[list[int]] = [[] for _ in range(n + 1)]
    for before, after in rules:
        parents[after].append(before)

    finish: dict[int, int] = {}
    expanded: set[int] = set()
    stack = [target]
    while stack:
        node = stack[-1]
        if node in finish:
            stack.pop()
            continue
        pending = [p for p in parents[node] if p not in finish]
        if pending:
            if node in expanded:
                raise ValueError("construction rules contain a cycle")
            expanded.add(node)
            for parent in pending:
                if parent in expanded:
                    raise ValueError("construction rules contain a cycle")
            stack.extend(pending)
            continue
        stack.pop()
        ready = max((finish[p] for p in parents[node]), default=0)
        finish[node] = ready + durations[node - 1]
    return finish[target]


def run_construction(text: str) -> str:
    """Answer every test case of the construction input."""
    tokens = _tokens(text)
    out = []
    for _ in range(_take(tokens)):
        n, k = _take(tokens), _take(tokens)
        durations = [_take(tokens) for _ in range(n)]
        rules = [(_take(tokens), _take(tokens)) for _ in range(k)]
        target = _take(tokens)
        out.append(f"{construction_time(durations, rules, target)}\n")
    return "".join(out)


def subtree_sizes(
    n: int, edges: Iterable[tuple[int, int]], root: int
) -> dict[int, int]:
    """Size of the subtree under each vertex 1..n when the tree hangs from ``root``."""
    if not 1 <= root <= n:
        raise ValueError(f"root {root} out of range")
    adjacent: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        adjacent[u].append(v)
        adjacent[v].append(u)

    sizes = [1] * (n + 1)
    parent = [0] * (n + 1)
    visited = [False] * (n + 1)
    visited[root] = True
    order = []
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        for nxt in adjacent[node]:
            if not visited[nxt]:
                visited[nxt] = True
                parent[nxt] = node
                stack.append(nxt)
    for node in reversed(order):
        if node != root:
            sizes[parent[node]] += sizes[node]
    return {v: sizes[v] for v in range(1, n + 1)}


def run_subtree_queries(text: str) -> str:
    """Answer the subtree-size queries of the input."""
    tokens = _tokens(text)
    n, root, q = _take(tokens), _take(tokens), _take(tokens)
    edges = [(_take(tokens), _take(tokens)) for _ in range(n - 1)]
    sizes = subtree_sizes(n, edges, root)
    return "".join(f"{sizes[_take(tokens)]}\n" for _ in range(q))


def partition_cost(n: int, roads: Iterable[tuple[int, int, int]]) -> int:
    """Cost of splitting the villages into two towns: MST minus its dearest road."""
    forest = UnionFind(n + 1)
    total = 0
    largest = 0
    for a, b, cost in sorted(roads, key=lambda road: road[2]):
        if forest.union(a, b):
            total += cost
            largest = max(largest, cost)
    return total - largest


def run_partition(text: str) -> str:
    tokens = _tokens(text)
    n, m = _take(tokens), _take(tokens)
    roads = [(_take(tokens), _take(tokens), _take(tokens)) for _ in range(m)]
    return str(partition_cost(n, roads))


def workbook_order(n: int, constraints: Iterable[tuple[int, int]]) -> list[int]:
    """Order problems 1..n so each ``(a, b)`` has a before b, easiest first."""
    children: list[list[int]] = [[] for _ in range(n + 1)]
    pointing = [0] * (n + 1)
    for a, b in constraints:
        children[a].append(b)
        pointing[b] += 1
    heap = [i for i in range(1, n + 1) if pointing[i] == 0]
    heapq.heapify(heap)
    order = []
    while heap:
        num = heapq.heappop(heap)
        order.append(num)
        for child in children[num]:
            pointing[child] -= 1
            if pointing[child] == 0:
                heapq.heappush(heap, child)
    return order


def run_workbook(text: str) -> str:
    tokens = _tokens(text)
    n, m = _take(tokens), _take(tokens)
    constraints = [(_take(tokens), _take(tokens)) for _ in range(m)]
    return "".join(f"{num} " for num in workbook_order(n, constraints)) + "\n"


def critical_path(
    n: int, roads: Iterable[tuple[int, int, int]], start: int, end: int
) -> tuple[int, int]:
    """Longest time from ``start`` to ``end`` and the number of roads on longest paths."""
    successors: list[list[tuple[int, int]]] = [[] for _ in range(n + 2)]
    pending = [0] * (n + 2)
    for a, b, weight in roads:
        successors[a].append((b, weight))
        pending[b] += 1

    best = [0] * (n + 2)
    predecessors: list[list[int]] = [[] for _ in range(n + 2)]
    stack = [start]
    while stack:
        a = stack.pop()
        for b, weight in successors[a]:
            time = best[a] + weight
            if time > best[b]:
                best[b] = time
                predecessors[b] = [a]
            elif time == best[b]:
                predecessors[b].append(a)
            pending[b] -= 1
            if pending[b] == 0:
                stack.append(b)

    seen = [False] * (n + 2)
    queue = deque([end])
    count = 0
    while queue:
        node = queue.popleft()
        for prev in predecessors[node]:
            if not seen[prev]:
                seen[prev] = True
                queue.append(prev)
            count += 1
    return best[end], count


def run_critical_path(text: str) -> str:
    tokens = _tokens(text)
    n, m = _take(tokens), _take(tokens)
    roads = [(_take(tokens), _take(tokens), _take(tokens)) for _ in range(m)]
    start, end = _take(tokens), _take(tokens)
    time, count = critical_path(n, roads, start, end)
    return f"{time}\n{count}"


def line_up(n: int, comparisons: Iterable[tuple[int, int]]) -> list[int]:
    """Order students 1..n so that each ``(a, b)`` puts a in front of b."""
    predecessors: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in comparisons:
        predecessors[b].append(a)
    visited = [False] * (n + 1)
    order: list[int] = []
    for first in range(1, n + 1):
        if visited[first]:
            continue
        stack = [(first, iter(predecessors[first]))]
        on_stack = {first}
        while stack:
            node, pending = stack[-1]
            for prev in pending:
                if not visited[prev]:
                    if prev in on_stack:
                        raise ValueError("comparisons contain a cycle")
                    stack.append((prev, iter(predecessors[prev])))
                    on_stack.add(prev)
                    break
            else:
                stack.pop()
                on_stack.discard(node)
                visited[node] = True
                order.append(node)
    return order


def run_line_up(text: str) -> str:
    tokens = _tokens(text)
    n, m = _take(tokens), _take(tokens)
    comparisons = [(_take(tokens), _take(tokens)) for _ in range(m)]
    return "".join(f"{num} " for num in line_up(n, comparisons))


def tunnel_cost(planets: Sequence[tuple[int, int, int]]) -> int:
    """Minimum cost to connect all planets, a tunnel costing the smallest axis gap."""
    n = len(planets)
    edges = []
    for axis in range(3):
        ordered = sorted(range(n), key=lambda i: planets[i][axis])
        for i, j in pairwise(ordered):
            edges.append((planets[j][axis] - planets[i][axis], i, j))
    edges.sort()
    forest = UnionFind(n)
    cost = 0
    joined = 0
    for distance, i, j in edges:
        if joined >= n - 1:
            break
        if forest.union(i, j):
            cost += distance
            joined += 1
    return cost


def run_tunnel(text: str) -> str:
    tokens = _tokens(text)
    n = _take(tokens)
    planets = [(_take(tokens), _take(tokens), _take(tokens)) for _ in range(n)]
    return str(tunnel_cost(planets))
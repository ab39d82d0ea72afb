"""Fully dynamic graph connectivity with encoded online queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Generator, Iterable, Iterator


def _tokens(text: str) -> Iterator[str]:
    return iter(text.split())


def _take(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


class DynamicGraph:
    """Undirected graph on vertices 0..size-1 supporting edge insertion and removal.

    ``components`` holds the current number of connected components.
    A vertex that has never had an edge is not reported as connected to itself.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("graph needs at least one vertex")
        self.size = size
        self.components = size
        self._adjacent: list[set[int]] = [set() for _ in range(size)]
        self._label = list(range(size))
        self._members: dict[int, set[int]] = {v: {v} for v in range(size)}
        self._next_label = size
        self._touched: set[int] = set()

    def _check(self, *vertices: int) -> None:
        for v in vertices:
            if not 0 <= v < self.size:
                raise ValueError(f"vertex {v} out of range")

    def contains(self, a: int, b: int) -> bool:
        """Whether the edge a-b is present."""
        self._check(a, b)
        return b in self._adjacent[a]

    def connected(self, a: int, b: int) -> bool:
        """Whether a path joins a and b."""
        self._check(a, b)
        if a == b:
            return a in self._touched
        return self._label[a] == self._label[b]

    def insert(self, a: int, b: int) -> None:
        """Add the edge a-b."""
        self._check(a, b)
        if a == b:
            raise ValueError("self-loops are not allowed")
        if self.contains(a, b):
            raise ValueError(f"edge {a}-{b} already present")
        self._adjacent[a].add(b)
        self._adjacent[b].add(a)
        self._touched.update((a, b))
        keep, drop = self._label[a], self._label[b]
        if keep == drop:
            return
        if len(self._members[keep]) < len(self._members[drop]):
            keep, drop = drop, keep
        moved = self._members.pop(drop)
        for v in moved:
            self._label[v] = keep
        self._members[keep] |= moved
        self.components -= 1

    def remove(self, a: int, b: int) -> None:
        """Delete the edge a-b."""
        if not self.contains(a, b):
            raise ValueError(f"edge {a}-{b} not present")
        self._adjacent[a].discard(b)
        self._adjacent[b].discard(a)
        side = self._detached_side(a, b)
        if side is None:
            return
        old = self._label[a]
        new = self._next_label
        self._next_label += 1
        self._members[old] -= side
        self._members[new] = side
        for v in side:
            self._label[v] = new
        self.components += 1

    def toggle(self, a: int, b: int) -> bool:
        """Insert the edge if absent, remove it if present; return True if inserted."""
        if self.contains(a, b):
            self.remove(a, b)
            return False
        self.insert(a, b)
        return True

    def _search(self, start: int, goal: int) -> Generator[None, None, set[int] | None]:
        seen = {start}
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for nxt in self._adjacent[node]:
                if nxt == goal:
                    return None
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
            yield
        return seen

    def _detached_side(self, a: int, b: int) -> set[int] | None:
        """Vertices of the smaller side if a and b fell apart, else None."""
        searches = (self._search(a, b), self._search(b, a))
        while True:
            for search in searches:
                try:
                    next(search)
                except StopIteration as stop:
                    return stop.value


def process_queries(n: int, queries: Iterable[tuple[int, int]]) -> list[bool]:
    """Run encoded queries: toggle an edge when x < y, otherwise ask whether connected."""
    graph = DynamicGraph(n)
    answers = []
    offset = 0
    for a, b in queries:
        x, y = (a ^ offset) % n, (b ^ offset) % n
        if x < y:
            graph.toggle(x, y)
        else:
            answers.append(graph.connected(y, x))
        offset += graph.components
    return answers


def run_dynamic_connectivity(text: str) -> str:
    tokens = _tokens(text)
    n, q = _take(tokens), _take(tokens)
    queries = [(_take(tokens), _take(tokens)) for _ in range(q)]
    return "".join(f"{int(answer)}\n" for answer in process_queries(n, queries))
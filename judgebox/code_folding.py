"""Fold and unfold indented blocks and count the visible lines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_HIDDEN = 1 << 60


class _CoverTree:
    """Range additions over line slots, counting the slots covered zero times."""

    def __init__(self, n: int) -> None:
        size = 1
        while size < n:
            size *= 2
        self._size = size
        self._low = [_HIDDEN] * (2 * size)
        self._count = [0] * (2 * size)
        self._lazy = [0] * (2 * size)
        for i in range(n):
            self._low[size + i] = 0
            self._count[size + i] = 1
        for node in range(size - 1, 0, -1):
            self._pull(node)

    def _pull(self, node: int) -> None:
        left, right = 2 * node, 2 * node + 1
        low = min(self._low[left], self._low[right])
        self._count[node] = (self._count[left] if self._low[left] == low else 0) + (
            self._count[right] if self._low[right] == low else 0
        )
        self._low[node] = low + self._lazy[node]

    def add(self, lo: int, hi: int, delta: int, node: int = 1, nl: int = 0, nr: int | None = None) -> None:
        if nr is None:
            nr = self._size
        if hi <= nl or nr <= lo:
            return
        if lo <= nl and nr <= hi:
            self._low[node] += delta
            self._lazy[node] += delta
            return
        mid = (nl + nr) // 2
        self.add(lo, hi, delta, 2 * node, nl, mid)
        self.add(lo, hi, delta, 2 * node + 1, mid, nr)
        self._pull(node)

    def zeros(self) -> int:
        return self._count[1] if self._low[1] == 0 else 0


class FoldingEditor:
    """Lines given as ``(indent level, kind)``; kind ``"h"`` opens a block.

    A block runs from its header up to the next line whose level is not
    deeper; blocks are numbered from 1 in the order of their headers.
    """

    def __init__(self, lines: Iterable[tuple[int, str]]) -> None:
        entries = list(lines)
        self.size = len(entries)
        starts: list[int] = []
        ends: list[int] = []
        open_blocks: list[tuple[int, int]] = []
        for number, (level, kind) in enumerate(entries, 1):
            while open_blocks and open_blocks[-1][0] >= level:
                ends[open_blocks.pop()[1]] = number
            if kind == "h":
                starts.append(number)
                ends.append(number)
                open_blocks.append((level, len(starts) - 1))
        for _, block in open_blocks:
            ends[block] = self.size + 1
        self.blocks: list[tuple[int, int]] = list(zip(starts, ends))
        self.folded = [False] * len(self.blocks)
        self._cover = _CoverTree(self.size)

    @property
    def visible(self) -> int:
        """Number of lines not hidden inside a folded block."""
        return self._cover.zeros()

    def toggle(self, block: int) -> int:
        """Fold or unfold block ``block`` (1-based); return the visible line count."""
        if not 1 <= block <= len(self.blocks):
            raise ValueError(f"block {block} does not exist")
        header, end = self.blocks[block - 1]
        delta = -1 if self.folded[block - 1] else 1
        self.folded[block - 1] = not self.folded[block - 1]
        if header + 1 < end:
            self._cover.add(header, end - 1, delta)
        return self.visible


def process(lines: Iterable[tuple[int, str]], queries: Iterable[Sequence]) -> list[int]:
    """Run queries: ``("t", block)`` toggles a block, any other command reports the count."""
    editor = FoldingEditor(lines)
    answers = []
    for query in queries:
        command, *args = query
        if command == "t":
            if len(args) != 1:
                raise ValueError("toggle needs exactly one block number")
            editor.toggle(int(args[0]))
        else:
            answers.append(editor.visible)
    return answers


def run_code_folding(text: str) -> str:
    tokens = iter(text.split())

    def take() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    n, q = int(take()), int(take())
    lines = [(int(take()), take()) for _ in range(n)]
    queries: list[tuple] = []
    for _ in range(q):
        command = take()
        queries.append((command, int(take())) if command == "t" else (command,))
    return "".join(f"{count}\n" for count in process(lines, queries))
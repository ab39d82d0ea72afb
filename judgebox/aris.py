"""Count the moves of a cleaning robot walking a grid of turn instructions."""

from __future__ import annotations

from collections.abc import Sequence

_DR = (-1, 0, 1, 0)
_DC = (0, 1, 0, -1)

Grid = Sequence[Sequence[int]]


def _prepare(
    start: tuple[int, int, int], clean_turns: Grid, dirty_turns: Grid
) -> tuple[int, int, list[list[int]], list[list[int]]]:
    clean = [list(row) for row in clean_turns]
    dirty = [list(row) for row in dirty_turns]
    height = len(dirty)
    if height == 0 or len(clean) != height:
        raise ValueError("turn grids must be non-empty and of equal height")
    width = len(dirty[0])
    if width == 0 or any(len(row) != width for row in (*clean, *dirty)):
        raise ValueError("turn grids must have rows of equal, non-zero width")
    row, col, direction = start
    if not (0 <= row < height and 0 <= col < width):
        raise ValueError(f"start ({row}, {col}) is off the grid")
    if not 0 <= direction < 4:
        raise ValueError(f"direction {direction} must be 0..3")
    return height, width, clean, dirty


def simulate_moves(
    start: tuple[int, int, int], clean_turns: Grid, dirty_turns: Grid
) -> int:
    """Count moves step by step until the robot stops cleaning.

    ``start`` is ``(row, col, direction)`` with direction 0..3 for up, right,
    down, left. On a dirty cell the robot cleans it and turns by
    ``dirty_turns``; on a clean cell it turns by ``clean_turns``. Moves made
    after the last cleaning are not counted.
    """
    height, width, clean, dirty = _prepare(start, clean_turns, dirty_turns)
    row, col, direction = start
    cleaned = [[False] * width for _ in range(height)]
    count = pending = 0
    cleaning = False
    mark: tuple[int, int, int] | None = None
    while True:
        if cleaned[row][col]:
            state = (row, col, direction)
            if cleaning:
                cleaning = False
                mark = state
            elif state == mark:
                break
            direction = (direction + clean[row][col]) % 4
            pending += 1
        else:
            cleaning = True
            cleaned[row][col] = True
            direction = (direction + dirty[row][col]) % 4
            count += pending + 1
            pending = 0
        row += _DR[direction]
        col += _DC[direction]
        if not (0 <= row < height and 0 <= col < width):
            break
    return count


def count_moves(
    start: tuple[int, int, int], clean_turns: Grid, dirty_turns: Grid
) -> int:
    """Same count as :func:`simulate_moves`, jumping over runs of clean cells."""
    height, width, clean, dirty = _prepare(start, clean_turns, dirty_turns)
    total = height * width * 4
    off = total
    parent = list(range(total + 1))
    dist = [0] * (total + 1)
    dead = [False] * (total + 1)

    def inside(r: int, c: int) -> bool:
        return 0 <= r < height and 0 <= c < width

    def index(r: int, c: int, d: int) -> int:
        return (r * width + c) * 4 + d

    def find(state: int) -> tuple[int, int]:
        path = []
        node = state
        while parent[node] != node:
            path.append(node)
            node = parent[node]
        walked = 0
        for step in reversed(path):
            walked += dist[step]
            dist[step] = walked
            parent[step] = node
        return node, (dist[state] if path else 0)

    def link_cell(r: int, c: int) -> None:
        for d in range(4):
            state = index(r, c, d)
            nd = (d + clean[r][c]) % 4
            nr, nc = r + _DR[nd], c + _DC[nd]
            if not inside(nr, nc):
                parent[state] = off
                dist[state] = 1
                continue
            following = index(nr, nc, nd)
            root, _ = find(following)
            if root == state:
                dead[state] = True
            else:
                parent[state] = following
                dist[state] = 1

    row, col, direction = start
    count = 0
    while True:
        root, distance = find(index(row, col, direction))
        if root == off or dead[root]:
            break
        if distance:
            count += distance
            row, rest = divmod(root, 4 * width)
            col, direction = divmod(rest, 4)
            continue
        link_cell(row, col)
        direction = (direction + dirty[row][col]) % 4
        row += _DR[direction]
        col += _DC[direction]
        count += 1
        if not inside(row, col):
            break
    return count


def run_aris(text: str) -> str:
    """Read H W, R C D, then the dirty-cell and clean-cell digit grids."""
    tokens = text.split()
    if len(tokens) < 5:
        raise ValueError("unexpected end of input")
    height, width, row, col, direction = (int(t) for t in tokens[:5])
    digits = "".join(tokens[5:])
    cells = height * width
    if len(digits) < 2 * cells:
        raise ValueError("unexpected end of input")
    values = [int(ch) for ch in digits[: 2 * cells]]
    dirty = [values[r * width : (r + 1) * width] for r in range(height)]
    clean = [values[cells + r * width : cells + (r + 1) * width] for r in range(height)]
    return str(count_moves((row, col, direction), clean, dirty))
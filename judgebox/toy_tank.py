"""Spread toy tanks so that every row and every column holds exactly one."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

Move = tuple[int, str]

_STEPS = {"U": (-1, 0), "L": (0, -1), "D": (1, 0), "R": (0, 1)}


def _tokens(text: str) -> Iterator[str]:
    return iter(text.split())


def _take(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


class TankBoard:
    """A square board of numbered tanks, 0-based coordinates, 0 marking an empty cell."""

    def __init__(self, size: int) -> None:
        self.size = size
        self._grid = [[0] * size for _ in range(size)]
        self._where: dict[int, tuple[int, int]] = {}

    def _inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def place(self, tank: int, row: int, col: int) -> None:
        """Put ``tank`` (a positive number) on an empty cell."""
        if tank <= 0 or tank in self._where:
            raise ValueError(f"invalid or duplicate tank {tank}")
        if not self._inside(row, col):
            raise ValueError(f"cell ({row}, {col}) is off the board")
        if self._grid[row][col]:
            raise ValueError(f"cell ({row}, {col}) is occupied")
        self._grid[row][col] = tank
        self._where[tank] = (row, col)

    def move(self, tank: int, direction: str) -> bool:
        """Step ``tank`` one cell; return False if the target cell is occupied."""
        try:
            dr, dc = _STEPS[direction]
        except KeyError:
            raise ValueError(f"unknown direction {direction!r}") from None
        if tank not in self._where:
            raise ValueError(f"tank {tank} is not on the board")
        row, col = self._where[tank]
        nr, nc = row + dr, col + dc
        if not self._inside(nr, nc):
            raise ValueError(f"tank {tank} would leave the board")
        if self._grid[nr][nc]:
            return False
        self._grid[row][col], self._grid[nr][nc] = 0, tank
        self._where[tank] = (nr, nc)
        return True

    def apply(self, moves: Iterable[Move]) -> int:
        """Carry out the moves in order; return how many succeeded."""
        return sum(self.move(tank, direction) for tank, direction in moves)

    def render(self) -> str:
        return "".join("".join(f"{v} " for v in row) + "\n" for row in self._grid)


def _pull_forward(lines: list[list[int]], k: int, direction: str, moves: list[Move]) -> None:
    j = k + 1
    while j < len(lines) and not lines[j]:
        j += 1
    if j == len(lines):
        raise ValueError("no tank left to move")
    tank = lines[j].pop()
    moves.extend([(tank, direction)] * (j - k))
    lines[k].append(tank)


def _pull_back(lines: list[list[int]], k: int, direction: str, moves: list[Move]) -> None:
    j = k
    while True:
        if j == 0:
            raise ValueError("no tank left to move")
        tank = lines[j - 1].pop()
        lines[j].append(tank)
        moves.append((tank, direction))
        if lines[j - 1]:
            return
        j -= 1


def _spread(lines: list[list[int]], forward: str, backward: str, moves: list[Move]) -> None:
    stock = 0
    for i, line in enumerate(lines):
        if len(line) == 1:
            continue
        if not line:
            if stock > 0:
                _pull_back(lines, i, backward, moves)
                stock -= 1
            else:
                _pull_forward(lines, i, forward, moves)
        else:
            stock += len(line) - 1


def plan_moves(n: int, positions: Sequence[tuple[int, int]]) -> list[Move]:
    """Moves for tanks 1..n at 1-based ``positions`` to reach one per row and column."""
    if len(positions) != n:
        raise ValueError("need one position per tank")
    rows: list[list[int]] = [[] for _ in range(n)]
    cols: list[list[int]] = [[] for _ in range(n)]
    for tank, (r, c) in enumerate(positions, 1):
        if not (1 <= r <= n and 1 <= c <= n):
            raise ValueError(f"tank {tank} is off the board")
        rows[r - 1].append(tank)
        cols[c - 1].append(tank)
    moves: list[Move] = []
    _spread(rows, "U", "D", moves)
    _spread(cols, "L", "R", moves)
    return moves


def run_toy_tank(text: str) -> str:
    tokens = _tokens(text)
    n = _take(tokens)
    positions = [(_take(tokens), _take(tokens)) for _ in range(n)]
    moves = plan_moves(n, positions)
    body = "".join(f"{tank} {direction}\n" for tank, direction in moves)
    return f"{len(moves)}\n{body}\n"
"""Dynamic programming and backtracking problems."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import lru_cache


def _tokens(text: str) -> Iterator[str]:
    return iter(text.split())


def _take_str(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _take(tokens: Iterator[str]) -> int:
    return int(_take_str(tokens))


def _raider_pass(top: list[int], bottom: list[int], capacity: int, use_top: bool) -> int:
    n = len(top)
    s0, s1, s2 = [0] * n, [0] * n, [0] * n
    for i in range(n):
        if i == 0:
            s0[0] = s1[0] = 1
            s2[0] = 1 if top[0] + bottom[0] <= capacity else 2
            continue
        merge_top = top[i - 1] + top[i] <= capacity
        merge_bottom = bottom[i - 1] + bottom[i] <= capacity
        s0[i] = (min(s1[i - 1], s2[i - 1]) if merge_top else s2[i - 1]) + 1
        s1[i] = (min(s0[i - 1], s2[i - 1]) if merge_bottom else s2[i - 1]) + 1
        vertical = 1 if top[i] + bottom[i] <= capacity else 2
        s2[i] = min(s0[i] + 1, s1[i] + 1, s2[i - 1] + vertical)
        if merge_top and merge_bottom:
            s2[i] = 2 if i == 1 else min(s2[i], s2[i - 2] + 2)
    return s1[-1] if use_top else s2[-1]


def _rotate(rows: list[list[int]], shift: int) -> list[list[int]]:
    return [row[shift:] + row[:shift] for row in rows]


def _prepare(rows: list[list[int]], capacity: int) -> tuple[int, list[list[int]]]:
    top, bottom = rows
    n = len(top)
    if n <= 1:
        return 0, rows
    pairs = [
        (top[i] + top[(i + 1) % n] <= capacity, bottom[i] + bottom[(i + 1) % n] <= capacity)
        for i in range(n)
    ]
    for i, (a, b) in enumerate(pairs):
        if a or b:
            continue
        if i == n - 1:
            return 0, rows
        return 0, _rotate(rows, i + 1)
    for i, (a, b) in enumerate(pairs):
        if a and b:
            continue
        if i != n - 1:
            rows = _rotate(rows, i + 1)
        if rows[1][0] + rows[1][n - 1] <= capacity:
            rows = [rows[1], rows[0]]
        return 1, rows
    return 2, rows


def raider_minimum(capacity: int, rows: Sequence[Sequence[int]]) -> int:
    """Fewest squads to cover a ring of two rows of zones, each squad holding ``capacity``."""
    if len(rows) != 2 or len(rows[0]) != len(rows[1]) or not rows[0]:
        raise ValueError("need two non-empty rows of equal length")
    state, prepared = _prepare([list(rows[0]), list(rows[1])], capacity)
    n = len(prepared[0])
    if state == 2:
        return n
    result = _raider_pass(prepared[0], prepared[1], capacity, False)
    if state == 1:
        top = list(prepared[0])
        top[0] = top[n - 1] = capacity
        result = min(result, _raider_pass(top, prepared[1], capacity, True))
    return result


def run_raider(text: str) -> str:
    tokens = _tokens(text)
    out = []
    for _ in range(_take(tokens)):
        n, capacity = _take(tokens), _take(tokens)
        rows = [[_take(tokens) for _ in range(n)] for _ in range(2)]
        out.append(f"{raider_minimum(capacity, rows)}\n")
    return "".join(out)


def max_cheating_students(grid: Sequence[str]) -> int:
    """Most students seatable so none can copy diagonally or sideways; 'x' seats are broken."""
    rows = len(grid)
    if rows == 0:
        return 0
    cols = len(grid[0])
    if cols == 0 or any(len(row) != cols for row in grid):
        raise ValueError("grid rows must be non-empty and equal length")
    masks = [sum(1 << i for i in range(rows) if grid[i][j] == "x") for j in range(cols)]
    full = (1 << rows) - 1
    states = range(1 << rows)
    best = [0 if s & masks[-1] else bin(s).count("1") for s in states]
    for column in range(cols - 2, -1, -1):
        current = []
        for value in states:
            if value & masks[column]:
                current.append(0)
                continue
            blocked = (value | value << 1 | value >> 1) & full
            following = max(best[s] for s in states if not s & blocked)
            current.append(following + bin(value).count("1"))
        best = current
    return max(best)


def run_cheating(text: str) -> str:
    tokens = _tokens(text)
    out = []
    for _ in range(_take(tokens)):
        n, _m = _take(tokens), _take(tokens)
        grid = [_take_str(tokens) for _ in range(n)]
        out.append(f"{max_cheating_students(grid)}\n")
    return "".join(out)


def min_palindrome_partition(word: str) -> int:
    """Fewest palindromes the word splits into."""
    n = len(word)
    if n == 0:
        raise ValueError("word must not be empty")
    pal = [[False] * n for _ in range(n)]
    for right in range(n):
        for left in range(right, -1, -1):
            pal[left][right] = word[left] == word[right] and (
                right - left < 2 or pal[left + 1][right - 1]
            )
    count = [1] * n
    for right in range(1, n):
        if pal[0][right]:
            count[right] = 1
            continue
        count[right] = min(
            [count[right - 1] + 1]
            + [count[left - 1] + 1 for left in range(1, right) if pal[left][right]]
        )
    return count[-1]


def run_palindrome(text: str) -> str:
    return str(min_palindrome_partition(_take_str(_tokens(text))))


def tsp_cost(matrix: Sequence[Sequence[int]]) -> int:
    """Cheapest tour visiting every city once; a zero entry means no road."""
    n = len(matrix)
    if n < 2 or any(len(row) != n for row in matrix):
        raise ValueError("need a square matrix of at least two cities")
    home = n - 1
    road = [[None if c == 0 else c for c in row] for row in matrix]

    @lru_cache(maxsize=None)
    def path(visited: int, city: int) -> int | None:
        rest = visited & ~(1 << city)
        if rest == 0:
            return road[city][home]
        best = None
        for nxt in range(home):
            if rest >> nxt & 1 and road[city][nxt] is not None:
                tail = path(rest, nxt)
                if tail is not None:
                    total = road[city][nxt] + tail
                    best = total if best is None else min(best, total)
        return best

    full = (1 << home) - 1
    costs = [
        road[home][i] + tail
        for i in range(home)
        if road[home][i] is not None and (tail := path(full, i)) is not None
    ]
    path.cache_clear()
    if not costs:
        raise ValueError("no tour exists")
    return min(costs)


def run_tsp(text: str) -> str:
    tokens = _tokens(text)
    n = _take(tokens)
    return str(tsp_cost([[_take(tokens) for _ in range(n)] for _ in range(n)]))


def _place_bishops(cells: list[tuple[int, int]], size: int) -> int:
    diag: set[int] = set()
    anti: set[int] = set()

    def step(index: int) -> int:
        if index >= len(cells):
            return 0
        r, c = cells[index]
        best = 0
        d, a = r + c, c - r + size - 1
        if d not in diag and a not in anti:
            diag.add(d)
            anti.add(a)
            best = step(index + 1) + 1
            diag.discard(d)
            anti.discard(a)
        return max(best, step(index + 1))

    return step(0)


def max_bishops(board: Sequence[Sequence[int]]) -> int:
    """Most non-attacking bishops on the cells marked 1."""
    size = len(board)
    cells = [(r, c) for r, row in enumerate(board) for c, v in enumerate(row) if v]
    black = [p for p in cells if sum(p) % 2 == 0]
    white = [p for p in cells if sum(p) % 2 == 1]
    return _place_bishops(black, size) + _place_bishops(white, size)


def run_bishops(text: str) -> str:
    tokens = _tokens(text)
    n = _take(tokens)
    return str(max_bishops([[_take(tokens) for _ in range(n)] for _ in range(n)]))


def solve_sudoku(board: Sequence[Sequence[int]]) -> list[list[int]]:
    """Fill the zeros of a 9x9 board, trying digits in ascending order."""
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("board must be 9x9")
    empty = [(r, c) for r in range(9) for c in range(9) if grid[r][c] == 0]

    def fits(r: int, c: int, v: int) -> bool:
        if v in grid[r] or any(grid[i][c] == v for i in range(9)):
            return False
        sr, sc = r // 3 * 3, c // 3 * 3
        return all(grid[sr + i][sc + j] != v for i in range(3) for j in range(3))

    def fill(index: int) -> bool:
        if index >= len(empty):
            return True
        r, c = empty[index]
        for v in range(1, 10):
            if fits(r, c, v):
                grid[r][c] = v
                if fill(index + 1):
                    return True
                grid[r][c] = 0
        return False

    if not fill(0):
        raise ValueError("board has no solution")
    return grid


def run_sudoku(text: str) -> str:
    chars = [c for c in text if not c.isspace()]
    if len(chars) < 81:
        raise ValueError("unexpected end of input")
    board = [[int(chars[r * 9 + c]) for c in range(9)] for r in range(9)]
    return "".join("".join(map(str, row)) + "\n" for row in solve_sudoku(board))
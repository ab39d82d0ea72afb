"""Generate reference data for the dynamic connectivity queries."""

from __future__ import annotations

import argparse
import random
import sys
from collections import deque
from dataclasses import dataclass
from pathlib import Path

_LOG_HEADER = "#i\tF\tnC\ta\tb\tx\ty\tout\n"
_WORD = 0xFFFFFFFF


@dataclass
class GeneratedCase:
    """Encoded queries with the expected answers and a per-query log."""

    n: int
    queries: list[tuple[int, int]]
    answers: list[bool]
    log: list[str]
    components: list[int]


def _reachable(adjacent: list[set[int]], start: int, goal: int) -> bool:
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        if node == goal:
            return True
        for nxt in adjacent[node] - seen:
            seen.add(nxt)
            queue.append(nxt)
    return False


def generate_case(n: int, count: int, seed: int | None = 1) -> GeneratedCase:
    """Random queries on n vertices, answered by plain graph search."""
    if n < 2:
        raise ValueError("need at least two vertices")
    rng = random.Random(seed)
    adjacent: list[set[int]] = [set() for _ in range(n)]
    components = n
    offset = 0
    queries: list[tuple[int, int]] = []
    answers: list[bool] = []
    log: list[str] = []
    counts: list[int] = []
    while len(queries) < count:
        a, b = rng.getrandbits(31), rng.getrandbits(31)
        x, y = (a ^ offset) % n, (b ^ offset) % n
        if x == y:
            continue
        entry = f"{len(queries)}\t{offset}\t{components}\t{a}\t{b}\t{x}\t{y}\t"
        queries.append((a, b))
        if x < y:
            if y in adjacent[x]:
                adjacent[x].discard(y)
                adjacent[y].discard(x)
                if not _reachable(adjacent, x, y):
                    components += 1
            else:
                if not _reachable(adjacent, x, y):
                    components -= 1
                adjacent[x].add(y)
                adjacent[y].add(x)
        else:
            result = _reachable(adjacent, x, y)
            answers.append(result)
            entry += str(int(result))
        log.append(entry)
        offset = (offset + components) & _WORD
        counts.append(components)
    return GeneratedCase(n, queries, answers, log, counts)


def write_case(case: GeneratedCase, directory: str | Path) -> list[Path]:
    """Write input.txt, output.txt, log.txt and fs.txt into ``directory``."""
    target = Path(directory)
    target.mkdir(parents=True, exist_ok=True)
    header = f"{case.n} {len(case.queries)}\n"
    contents = {
        "input.txt": header + "".join(f"{a} {b}\n" for a, b in case.queries),
        "log.txt": header + _LOG_HEADER + "".join(f"{line}\n" for line in case.log),
        "output.txt": "".join(f"{int(v)}\n" for v in case.answers),
        "fs.txt": "".join(str(c) for c in case.components),
    }
    paths = []
    for name, body in contents.items():
        path = target / name
        path.write_text(body)
        paths.append(path)
    return paths


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate dynamic connectivity test data.")
    parser.add_argument("n", type=int, help="number of vertices")
    parser.add_argument("count", type=int, help="number of queries")
    parser.add_argument("--seed", type=int, default=1)
    parser.add_argument("--directory", default=".")
    args = parser.parse_args(argv)
    case = generate_case(args.n, args.count, args.seed)
    write_case(case, args.directory)
    sys.stdout.write("".join(f"{int(v)}\n" for v in case.answers))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
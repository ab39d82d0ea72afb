"""Greedy problems: refuelling stops and balloon delivery."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator


def _tokens(text: str) -> Iterator[str]:
    return iter(text.split())


def _take(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def refuel_stops(stations: Iterable[tuple[int, int]], distance: int, fuel: int) -> int:
    """Fewest stops to travel ``distance``; -1 if it cannot be reached."""
    pending = sorted(stations)
    reachable: list[int] = []
    stops = 0
    index = 0
    while fuel < distance:
        while index < len(pending) and pending[index][0] <= fuel:
            heapq.heappush(reachable, -pending[index][1])
            index += 1
        if not reachable:
            return -1
        fuel -= heapq.heappop(reachable)
        stops += 1
    return stops


def run_fuel(text: str) -> str:
    tokens = _tokens(text)
    n = _take(tokens)
    stations = [(_take(tokens), _take(tokens)) for _ in range(n)]
    distance, fuel = _take(tokens), _take(tokens)
    return str(refuel_stops(stations, distance, fuel))


def balloon_distance(teams: Iterable[tuple[int, int, int]], stock_a: int, stock_b: int) -> int:
    """Least total distance carrying balloons from rooms A and B to the teams."""
    near_a: list[tuple[int, int]] = []
    near_b: list[tuple[int, int]] = []
    total = 0
    for count, da, db in teams:
        if da < db:
            near_a.append((abs(da - db), count))
            stock_a -= count
            total += count * da
        else:
            near_b.append((abs(da - db), count))
            stock_b -= count
            total += count * db
    if stock_a >= 0 and stock_b >= 0:
        return total
    moved = near_a if stock_a < 0 else near_b
    shortage = -min(stock_a, stock_b)
    for extra, count in sorted(moved, key=lambda team: team[0]):
        if shortage <= 0:
            break
        taken = min(shortage, count)
        shortage -= taken
        total += extra * taken
    if shortage > 0:
        raise ValueError("not enough balloons")
    return total


def run_balloon(text: str) -> str:
    tokens = _tokens(text)
    out = []
    while True:
        n, a, b = _take(tokens), _take(tokens), _take(tokens)
        if n == 0:
            break
        teams = [(_take(tokens), _take(tokens), _take(tokens)) for _ in range(n)]
        out.append(f"{balloon_distance(teams, a, b)}\n")
    return "".join(out)
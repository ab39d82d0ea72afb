"""Search problems: log cutting, subset sums, referee placement, windows, pair sums."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter, deque
from collections.abc import Iterable, Iterator, Sequence
from itertools import accumulate, combinations


def _tokens(text: str) -> Iterator[str]:
    return iter(text.split())


def _take(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def cut_log(length: int, positions: Iterable[int], cuts: int) -> tuple[int, int]:
    """Smallest possible longest piece and the first cut that achieves it."""
    marks = sorted([0, *positions, length])

    def attempt(piece: int) -> tuple[int, int] | None:
        made, first = 0, length
        while True:
            index = bisect_left(marks, first - piece)
            if index == 0:
                if made < cuts:
                    first = marks[1]
                return made, first
            if index >= len(marks) or marks[index] == first:
                return None
            made += 1
            first = marks[index]

    low, high = 0, length
    best_first = 0
    while low < high:
        mid = (low + high) // 2
        result = attempt(mid)
        if result is not None and result[0] <= cuts:
            high = mid
            best_first = result[1]
        else:
            low = mid + 1
    return high, best_first


def run_cut_log(text: str) -> str:
    tokens = _tokens(text)
    length, k, cuts = _take(tokens), _take(tokens), _take(tokens)
    positions = [_take(tokens) for _ in range(k)]
    piece, first = cut_log(length, positions, cuts)
    return f"{piece} {first}"


def _subset_sums(values: Iterable[int]) -> Counter[int]:
    counts: Counter[int] = Counter()
    for value in values:
        counts.update({total + value: count for total, count in counts.items()})
        counts[value] += 1
    return counts


def count_subsequence_sums(values: Sequence[int], target: int) -> int:
    """Number of non-empty subsequences whose sum equals ``target``."""
    if not values:
        raise ValueError("values must not be empty")
    if len(values) == 1:
        return int(values[0] == target)
    mid = (len(values) - 1) // 2
    left = _subset_sums(values[: mid + 1])
    right = _subset_sums(values[mid + 1 :])
    combined = sum(count * right[target - total] for total, count in left.items())
    return left[target] + right[target] + combined


def run_subsequence_sums(text: str) -> str:
    tokens = _tokens(text)
    n, target = _take(tokens), _take(tokens)
    return str(count_subsequence_sums([_take(tokens) for _ in range(n)], target))


def race_assignment(length: int, referees: int, locations: Sequence[int]) -> str:
    """Mark which locations get referees so the closest pair is as far apart as possible."""
    if not locations:
        raise ValueError("locations must not be empty")

    def placed(gap: int) -> int:
        count = 1
        last = locations[0]
        for location in locations[1:]:
            if location - last >= gap:
                last = location
                count += 1
        return count

    low, high = 0, length
    while high >= low:
        mid = (low + high) // 2
        if placed(mid) < referees:
            high = mid - 1
        else:
            low = mid + 1

    marks = ["1"]
    last = locations[0]
    count = 1
    for location in locations[1:]:
        if location - last >= high and count < referees:
            marks.append("1")
            last = location
            count += 1
        else:
            marks.append("0")
    return "".join(marks)


def run_race(text: str) -> str:
    tokens = _tokens(text)
    length, referees, k = _take(tokens), _take(tokens), _take(tokens)
    return race_assignment(length, referees, [_take(tokens) for _ in range(k)])


def shortest_subarray(values: Iterable[int], target: int) -> int:
    """Length of the shortest run of non-negative values summing to at least ``target``; 0 if none."""
    best: int | None = None
    window: deque[int] = deque()
    total = 0
    for value in values:
        window.append(value)
        total += value
        while window and total >= target:
            best = len(window) if best is None else min(best, len(window))
            total -= window.popleft()
    return best or 0


def run_shortest_subarray(text: str) -> str:
    tokens = _tokens(text)
    n, target = _take(tokens), _take(tokens)
    return str(shortest_subarray([_take(tokens) for _ in range(n)], target))


def _subarray_sums(values: Iterable[int]) -> Counter[int]:
    prefixes = [0, *accumulate(values)]
    return Counter(end - start for start, end in combinations(prefixes, 2))


def count_pair_sums(target: int, first: Iterable[int], second: Iterable[int]) -> int:
    """Pairs of subarrays, one from each sequence, whose sums add up to ``target``."""
    sums_first = _subarray_sums(first)
    sums_second = _subarray_sums(second)
    return sum(count * sums_second[target - total] for total, count in sums_first.items())


def run_pair_sums(text: str) -> str:
    tokens = _tokens(text)
    target = _take(tokens)
    first = [_take(tokens) for _ in range(_take(tokens))]
    second = [_take(tokens) for _ in range(_take(tokens))]
    return str(count_pair_sums(target, first, second))
"""Number problems: totients, prime sums, walking, change, rankings, stair numbers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from math import isqrt

_COINS = (500, 100, 50, 10, 5, 1)
_STAIR_MODULUS = 1_000_000_000


def _tokens(text: str) -> Iterator[str]:
    return iter(text.split())


def _take(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def euler_phi(n: int) -> int:
    """Count of integers in 1..n coprime with n (n itself for n <= 1)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    result = n
    remaining = n
    factor = 2
    while factor * factor <= remaining:
        if remaining % factor == 0:
            result -= result // factor
            while remaining % factor == 0:
                remaining //= factor
        factor += 1
    if remaining > 1:
        result -= result // remaining
    return result


def run_euler_phi(text: str) -> str:
    return str(euler_phi(_take(_tokens(text))))


def _primes_up_to(n: int) -> list[int]:
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, isqrt(n) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n + 1, i)))
    return [i for i, flag in enumerate(sieve) if flag]


def prime_sum_count(n: int) -> int:
    """Number of ways to write n as a sum of consecutive primes."""
    if n < 2:
        return 0
    if n == 2:
        return 1
    count = 0
    total = 0
    window: deque[int] = deque()
    for prime in _primes_up_to(n):
        window.append(prime)
        total += prime
        while total > n:
            total -= window.popleft()
        if total == n:
            count += 1
    return count


def run_prime_sum(text: str) -> str:
    return str(prime_sum_count(_take(_tokens(text))))


def walking_time(x: int, y: int, walk: int, diagonal: int) -> int:
    """Shortest time to reach (x, y) moving straight for ``walk`` or diagonally."""
    if min(x, y, walk, diagonal) < 0:
        raise ValueError("arguments must be non-negative")
    x, y = sorted((x, y))
    if diagonal < walk:
        rest = y - x
        return diagonal * (x + rest // 2 * 2) + (walk if rest % 2 else 0)
    if diagonal < 2 * walk:
        return diagonal * x + walk * (y - x)
    return walk * (x + y)


def run_walking(text: str) -> str:
    tokens = _tokens(text)
    x, y, walk, diagonal = (_take(tokens) for _ in range(4))
    return str(walking_time(x, y, walk, diagonal))


def change_coins(price: int) -> int:
    """Fewest coins returned when paying 1000 for ``price``."""
    change = 1000 - price
    sign = -1 if change < 0 else 1
    remaining = abs(change)
    coins = 0
    for coin in _COINS:
        used, remaining = divmod(remaining, coin)
        coins += used
    return sign * coins


def run_change(text: str) -> str:
    return str(change_coins(_take(_tokens(text))))


def ranking_dissatisfaction(expected: Iterable[int]) -> int:
    """Least total |expected - actual| over all ways of assigning ranks."""
    ordered = sorted([0, *expected])
    return sum(abs(value - rank) for rank, value in enumerate(ordered))


def run_ranking(text: str) -> str:
    tokens = _tokens(text)
    n = _take(tokens)
    return str(ranking_dissatisfaction([_take(tokens) for _ in range(n)]))


def _empty_layer() -> list[list[list[int]]]:
    return [[[0] * 10 for _ in range(10)] for _ in range(10)]


def stair_numbers(n: int) -> int:
    """Count of n-digit stair numbers using every digit, modulo 10**9."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    # layer[end][low][high]: numbers ending in `end` whose digits span low..high
    layer = _empty_layer()
    for digit in range(1, 10):
        layer[digit][digit][digit] = 1
    for _ in range(2, n + 1):
        prev, layer = layer, _empty_layer()
        for end in range(10):
            for low in range(end + 1):
                for high in range(end, 10):
                    if low == high:
                        continue
                    if end == 0:
                        value = prev[1][1][high] + prev[1][0][high]
                    elif end == 9:
                        value = prev[8][low][9] + prev[8][low][8]
                    else:
                        value = (prev[end - 1][low][high] + prev[end + 1][low][high]) % _STAIR_MODULUS
                        if end == low:
                            value += prev[end + 1][end + 1][high]
                        elif end == high:
                            value += prev[end - 1][low][end - 1]
                    layer[end][low][high] = value % _STAIR_MODULUS
    return sum(layer[end][0][9] for end in range(10)) % _STAIR_MODULUS


def run_stair_numbers(text: str) -> str:
    return f"{stair_numbers(_take(_tokens(text)))}\n"
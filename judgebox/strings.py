"""String problems: decoration, digit erasing, folding, notes, keyboard autocompletion."""

from __future__ import annotations

import heapq
from collections import defaultdict
from collections.abc import Iterator, Sequence


def _tokens(text: str) -> Iterator[str]:
    return iter(text.split())


def _take_str(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _take(tokens: Iterator[str]) -> int:
    return int(_take_str(tokens))


def decorate(words: Sequence[str]) -> str:
    """Lexicographically smallest string from taking first letters of the words."""
    heap = [word + "{" for word in words]
    heapq.heapify(heap)
    out = []
    while heap:
        first = heapq.heappop(heap)
        out.append(first[0])
        rest = first[1:]
        if len(rest) > 1:
            heapq.heappush(heap, rest)
    return "".join(out)


def run_decorate(text: str) -> str:
    tokens = _tokens(text)
    n = _take(tokens)
    return decorate([_take_str(tokens) for _ in range(n)])


def erase_digits(number: str, digits: str) -> str:
    """Largest number left after erasing exactly the given multiset of digits."""
    count = [0] * 10
    to_erase = [0] * 10
    for ch in number:
        count[int(ch)] += 1
    for ch in digits:
        to_erase[int(ch)] += 1

    def largest(start: int) -> int:
        cnt, erase = count[:], to_erase[:]
        best = 0
        for ch in number[start:]:
            val = int(ch)
            if cnt[val] != erase[val]:
                best = max(best, val)
            if erase[val] > 0 and best < 9:
                cnt[val] -= 1
                erase[val] -= 1
            else:
                return best
        return -1

    out = []
    wanted = largest(0)
    for i, ch in enumerate(number):
        val = int(ch)
        count[val] -= 1
        if val != wanted:
            to_erase[val] -= 1
        else:
            out.append(ch)
            wanted = largest(i + 1)
            if wanted == -1:
                break
    return "".join(out)


def run_erase(text: str) -> str:
    tokens = _tokens(text)
    number = _take_str(tokens)
    digits = next(tokens, "")
    return erase_digits(number, digits)


def can_fold(pattern: str) -> bool:
    """Whether a strip with this crease pattern can come from repeated halving folds."""
    n = len(pattern) + 1
    while n >= 2:
        for i in range(n // 2 - 1):
            if pattern[i] == pattern[n - 2 - i]:
                return False
        n //= 2
    return True


def run_origami(text: str) -> str:
    lines = text.splitlines()
    if not lines:
        raise ValueError("unexpected end of input")
    count = int(lines[0])
    patterns = lines[1 : count + 1]
    if len(patterns) < count:
        raise ValueError("unexpected end of input")
    return "".join(("YES" if can_fold(p.strip()) else "NO") + "\n" for p in patterns)


def recover_note(n: int, width: int, rows: Sequence[str]) -> str:
    """Recover n characters each drawn ``width`` wide; '?' marks unreadable cells."""
    result = ["?"] * n
    for row in rows:
        if len(row) != n * width:
            raise ValueError("row length does not match n * width")
        for j in range(n):
            for c in row[j * width : (j + 1) * width]:
                if c != "?":
                    result[j] = c
    return "".join(result)


def run_note(text: str) -> str:
    tokens = _tokens(text)
    n, h, w = _take(tokens), _take(tokens), _take(tokens)
    rows = [_take_str(tokens) for _ in range(h)]
    return recover_note(n, w, rows) + "\n"


def average_keystrokes(words: Sequence[str]) -> str:
    """Average keystrokes per word with trie autocompletion, formatted to two places."""
    if not words:
        raise ValueError("words must not be empty")

    def group(indices, cursor):
        groups: dict[str, list[int]] = defaultdict(list)
        ended = False
        for index in indices:
            if len(words[index]) <= cursor:
                ended = True
            else:
                groups[words[index][cursor]].append(index)
        return ended, groups

    def distribute(indices: list[int], depth: int, cursor: int) -> int:
        if len(indices) == 1:
            return depth
        total = 0
        while True:
            ended, groups = group(indices, cursor)
            ended_count = len(indices) - sum(len(g) for g in groups.values())
            total += depth * ended_count
            if ended or len(groups) > 1:
                for members in groups.values():
                    total += distribute(members, depth + 1, cursor + 1)
                return total
            cursor += 1

    if len(words) == 1:
        total = 1
    else:
        _, groups = group(range(len(words)), 0)
        total = sum(distribute(members, 1, 1) for members in groups.values())
    scaled = total * 1000 // len(words)
    fraction = (scaled % 1000) // 10 + (1 if scaled % 10 >= 5 else 0)
    return f"{scaled // 1000}.{fraction:02d}"


def run_keyboard(text: str) -> str:
    tokens = _tokens(text)
    out = []
    for first in tokens:
        n = int(first)
        words = [_take_str(tokens) for _ in range(n)]
        out.append(average_keystrokes(words) + "\n")
    return "".join(out)
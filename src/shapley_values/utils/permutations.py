from __future__ import annotations

from typing import Iterator, List, Sequence, TypeVar

T = TypeVar("T")


def generate_permutations(items: Sequence[T]) -> Iterator[List[T]]:
    """Yield every ordering of ``items`` exactly once (Heap's algorithm).

    Each yielded list is a fresh copy, so callers may keep it. An empty input
    yields a single empty permutation.
    """
    arr = list(items)
    n = len(arr)

    yield arr[:]
    if n < 2:
        return

    # c[i] counts the swaps already done at level i.
    c = [0] * n
    i = 0
    while i < n:
        if c[i] < i:
            if i % 2 == 0:
                arr[0], arr[i] = arr[i], arr[0]
            else:
                arr[c[i]], arr[i] = arr[i], arr[c[i]]
            yield arr[:]
            c[i] += 1
            i = 0
        else:
            c[i] = 0
            i += 1

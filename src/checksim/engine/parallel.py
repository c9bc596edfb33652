"""Process-pool fan-out for independent permutation slices."""
from __future__ import annotations
from multiprocessing import Pool
from typing import Any, Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")


def chunked(items: Sequence[T], size: int) -> list[Sequence[T]]:
    if size <= 0:
        raise ValueError("chunk size must be positive")
    return [items[i : i + size] for i in range(0, len(items), size)]


def parallel_map(fn: Callable[[Any], T], items: Iterable[Any], workers: int) -> list[T]:
    """Ordered map over ``items``; runs inline for a single worker.

    ``fn`` and the items must be picklable when ``workers > 1``.
    """

    items = list(items)
    if workers <= 1 or len(items) <= 1:
        return [fn(item) for item in items]
    with Pool(processes=min(workers, len(items))) as pool:
        return pool.map(fn, items)

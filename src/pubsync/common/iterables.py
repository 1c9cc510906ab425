"""Small iteration helpers."""

from __future__ import annotations

from itertools import batched
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


def chunked[T](items: Iterable[T], size: int) -> Iterator[tuple[T, ...]]:
    """Yield consecutive groups of at most ``size`` items, preserving order."""

    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return batched(items, size)

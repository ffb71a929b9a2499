"""Short-circuiting helpers for ordered fallbacks."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def first_successful(suppliers: Iterable[Callable[[], T | None]]) -> T | None:
    """Call suppliers in order and return the first result that is not None.

    Suppliers after the first success are never called, so a lazy iterable
    keeps any work behind them (fetches, decodes) from happening at all.
    """
    for supplier in suppliers:
        result = supplier()
        if result is not None:
            return result
    return None

"""Lower and upper bounds, and binary search over the answer."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from typing import Any


def lower_bound(
    values: Sequence[Any],
    target: Any,
    less: Callable[[Any, Any], bool] | None = None,
) -> int:
    """First index whose value is not less than ``target``."""
    less = operator.lt if less is None else less
    first, count = 0, len(values)
    while count > 0:
        step = count // 2
        it = first + step
        if less(values[it], target):
            first = it + 1
            count -= step + 1
        else:
            count = step
    return first


def upper_bound(values: Sequence[Any], target: Any) -> int:
    """First index whose value is greater than ``target``."""
    first, count = 0, len(values)
    while count > 0:
        step = count // 2
        it = first + step
        if not target < values[it]:
            first = it + 1
            count -= step + 1
        else:
            count = step
    return first


def search_answer(low: int, high: int, check: Callable[[int], bool]) -> int | None:
    """Largest ``x`` in ``low .. high`` with ``check(x)`` true, or None.

    ``check`` must hold for a prefix of the range and fail for the rest.
    """
    result = None
    while low <= high:
        mid = low + (high - low) // 2
        if check(mid):
            result = mid
            low = mid + 1
        else:
            high = mid - 1
    return result
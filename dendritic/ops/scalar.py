"""Element-wise arithmetic between an array and a single number."""

from __future__ import annotations

import math
from typing import Any, Callable

from dendritic.ndarray import NDArray


def _map(array: NDArray, func: Callable[[Any], Any]) -> NDArray:
    return NDArray(array.shape, [func(value) for value in array.values])


def _divide(value: float, scalar: float) -> float:
    """IEEE division: a zero divisor gives an infinity or NaN instead of raising."""
    try:
        return value / scalar
    except ZeroDivisionError:
        if value == 0 or math.isnan(value):
            return math.nan
        return math.copysign(math.inf, value) * math.copysign(1.0, scalar)


def scalar_subtract(array: NDArray, scalar: float) -> NDArray:
    """Subtract ``scalar`` from every element."""
    return _map(array, lambda value: value - scalar)


def scalar_add(array: NDArray, scalar: float) -> NDArray:
    """Add ``scalar`` to every element."""
    return _map(array, lambda value: value + scalar)


def scalar_mult(array: NDArray, scalar: float) -> NDArray:
    """Multiply every element by ``scalar``."""
    return _map(array, lambda value: value * scalar)


def scalar_div(array: NDArray, scalar: float) -> NDArray:
    """Divide every element by ``scalar``."""
    return _map(array, lambda value: _divide(value, scalar))
"""Reductions and statistics over arrays."""

from __future__ import annotations

import math
from itertools import groupby
from typing import Iterable

from dendritic.ndarray import NDArray, NDArrayError
from dendritic.ops.scalar import scalar_subtract
from dendritic.ops.unary import norm


def _running_sum(values: Iterable[float]) -> float:
    total = 0.0
    for value in values:
        total += value
    return total


def avg(array: NDArray) -> float:
    """Mean of every element."""
    return _running_sum(array.values) / array.size


def length(array: NDArray) -> float:
    """Euclidean length of the array taken as one vector."""
    return math.sqrt(_running_sum(float(value) ** 2.0 for value in array.values))


def square(array: NDArray) -> NDArray:
    """Every element squared."""
    return NDArray(array.shape, [float(value) ** 2.0 for value in array.values])


def total(array: NDArray) -> NDArray:
    """Sum of every element, as a 1x1 array."""
    return NDArray([1, 1], [_running_sum(array.values)])


def absolute(array: NDArray) -> NDArray:
    """Absolute value of every element."""
    return NDArray(array.shape, [abs(value) for value in array.values])


def sorted_values(array: NDArray) -> list[float]:
    """All elements in ascending order."""
    if any(isinstance(value, float) and math.isnan(value) for value in array.values):
        raise NDArrayError("Sort: NaN values cannot be ordered")
    return sorted(array.values)


def unique(array: NDArray) -> list[float]:
    """Distinct elements in ascending order."""
    return [value for value, _ in groupby(sorted_values(array))]


def mean(array: NDArray, axis: int) -> list[float]:
    """Mean of each slice along ``axis``."""
    results = []
    for position in range(array.shape.dim(axis)):
        part = array.axis(axis, position).values
        results.append(_running_sum(part) / len(part))
    return results


def _deviation(array: NDArray, axis: int, correction: int) -> list[float]:
    means = mean(array, axis)
    results = []
    for position, centre in enumerate(means):
        part = array.axis(axis, position)
        squared = norm(scalar_subtract(part, centre), 2)
        divisor = part.size - correction
        spread = _running_sum(squared.values)
        if divisor == 0:
            results.append(math.nan)
        else:
            results.append(math.sqrt(spread / divisor))
    return results


def stdev(array: NDArray, axis: int) -> list[float]:
    """Population standard deviation of each slice along ``axis``."""
    if axis < 0 or axis >= array.rank:
        raise NDArrayError("stdev: Axis too large for current array")
    return _deviation(array, axis, 0)


def stdev_sample(array: NDArray, axis: int) -> list[float]:
    """Sample standard deviation of each slice along ``axis``."""
    if axis < 0 or axis >= array.rank:
        raise NDArrayError("stdev sample: Axis too large for current array")
    return _deviation(array, axis, 1)
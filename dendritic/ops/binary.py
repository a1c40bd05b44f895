"""Element-wise and matrix operations between two arrays."""

from __future__ import annotations

from typing import Callable, Iterable

from dendritic.ndarray import NDArray, NDArrayError


def _running_sum(values: Iterable[float]) -> float:
    total = 0.0
    for value in values:
        total += value
    return total


def _elementwise(
    name: str,
    array: NDArray,
    other: NDArray,
    func: Callable[[float, float], float],
) -> NDArray:
    if array.rank != other.rank:
        raise NDArrayError(f"{name}: Rank Mismatch")
    if array.size != len(other.values):
        raise NDArrayError(f"{name}: Size mismatch for arrays")
    return NDArray(array.shape, [func(a, b) for a, b in zip(array.values, other.values)])


def _broadcast_row(
    array: NDArray,
    other: NDArray,
    func: Callable[[float, float], float],
) -> NDArray:
    if other.shape.dim(0) != 1:
        raise NDArrayError("Scale add must have a vector dimension (1, N)")
    row = other.values
    width = len(row)
    return NDArray(
        array.shape,
        [func(value, row[position % width]) for position, value in enumerate(array.values)],
    )


def mult(array: NDArray, other: NDArray) -> NDArray:
    """Element-wise product of two arrays of equal rank and size."""
    return _elementwise("Mult", array, other, lambda a, b: a * b)


def add(array: NDArray, other: NDArray) -> NDArray:
    """Element-wise sum of two arrays of equal rank and size."""
    return _elementwise("Add", array, other, lambda a, b: a + b)


def subtract(array: NDArray, other: NDArray) -> NDArray:
    """Element-wise difference of two arrays of equal rank and size."""
    return _elementwise("Subtract", array, other, lambda a, b: a - b)


def dot(array: NDArray, other: NDArray) -> NDArray:
    """Matrix product of two rank 2 arrays."""
    if array.rank != other.rank:
        raise NDArrayError("Dot: Rank Mismatch")
    if array.rank != 2:
        raise NDArrayError("Dot: Requires rank 2 values")
    rows, inner = array.shape.values
    if inner != other.shape.dim(0):
        raise NDArrayError("Dot: Rows must equal columns")

    cols = other.shape.dim(1)
    left_rows = [array.values[r * inner:(r + 1) * inner] for r in range(rows)]
    right_cols = [other.values[c::cols] for c in range(cols)]
    values = [
        _running_sum(a * b for a, b in zip(left, right))
        for left in left_rows
        for right in right_cols
    ]
    return NDArray([rows, cols], values)


def scale_add(array: NDArray, other: NDArray) -> NDArray:
    """Add a ``(1, N)`` row to every row of ``array``."""
    return _broadcast_row(array, other, lambda a, b: a + b)


def scale_mult(array: NDArray, other: NDArray) -> NDArray:
    """Multiply every row of ``array`` element-wise by a ``(1, N)`` row."""
    return _broadcast_row(array, other, lambda a, b: a * b)
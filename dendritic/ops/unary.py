"""Operations that transform a single array."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

from dendritic.ndarray import NDArray, NDArrayError


def _running_sum(values: Iterable[float]) -> float:
    total = 0.0
    for value in values:
        total += value
    return total


def transpose(array: NDArray) -> NDArray:
    """Swap rows and columns of a rank 2 array."""
    if array.rank != 2:
        raise NDArrayError("Transpose must contain on rank 2 values")
    rows, cols = array.shape.values
    values = [array.values[row * cols + col] for col in range(cols) for row in range(rows)]
    return NDArray(array.shape.reverse(), values)


def permute(array: NDArray, indice_order: Sequence[int]) -> NDArray:
    """Reorder the dimensions of an array into ``indice_order``."""
    order = list(indice_order)
    if len(order) != array.rank:
        raise NDArrayError("Indice order must be same length as rank")
    result = NDArray.new(array.shape.permute(order))
    for flat, value in enumerate(array.values):
        coords = array.indices(flat)
        result.set([coords[item] for item in order], value)
    return result


def norm(array: NDArray, p: int) -> NDArray:
    """Raise every element to the power ``p``."""
    exponent = float(p)
    return NDArray(array.shape, [float(value) ** exponent for value in array.values])


def signum(array: NDArray) -> NDArray:
    """Sign of every element: -1.0, 0.0 or 1.0."""

    def sign(value: float) -> float:
        if value < 0.0:
            return -1.0
        if value > 0.0:
            return 1.0
        return 0.0

    return NDArray(array.shape, [sign(value) for value in array.values])


def sum_axis(array: NDArray, axis: int) -> NDArray:
    """Sum values along ``axis`` of an array of rank 2 or lower.

    Axis 0 sums everything into a 1x1 array; axis 1 sums consecutive
    runs of ``size / dim(1)`` elements into a ``(1, dim(1))`` array.
    """
    if axis < 0 or axis > array.rank - 1:
        raise NDArrayError("Sum Axis: Axis greater than rank")
    if array.rank > 2:
        raise NDArrayError("Sum Axis: Not supported for rank 2 or higher values yet")

    if axis == 0:
        return NDArray([1, 1], [_running_sum(array.values)])

    count = array.shape.dim(axis)
    chunk = array.size // count
    sums = [_running_sum(array.values[i * chunk:(i + 1) * chunk]) for i in range(count)]
    return NDArray([axis, count], sums)


def select_axis(array: NDArray, axis: int, indices: Sequence[int]) -> NDArray:
    """Gather the slices at ``indices`` of dimension ``axis``, in that order."""
    if axis < 0 or axis > array.rank - 1:
        raise NDArrayError("Axis Indices: Selected axis larger than rank")
    if array.rank > 2:
        raise NDArrayError("Select Axis: Only works on rank 2 values and lower")

    dims = array.shape.values
    dims[axis] = len(indices)
    result = NDArray.new(dims)
    other = array.rank - 1 - axis
    for position, chosen in enumerate(indices):
        for offset, value in enumerate(array.axis(axis, chosen).values):
            coords = [0] * array.rank
            coords[axis] = position
            coords[other] = offset
            result.set(coords, value)
    return result


def apply(array: NDArray, func: Callable[[Any], Any]) -> NDArray:
    """Apply ``func`` to every element."""
    return NDArray(array.shape, [func(value) for value in array.values])


def argmax(array: NDArray, axis: int) -> NDArray:
    """Position of the largest positive value in each slice along ``axis``.

    Slices with no value above zero report position 0.
    """
    count = array.shape.dim(axis)
    results = []
    for position in range(count):
        best = 0.0
        best_index = 0
        for index, value in enumerate(array.axis(axis, position).values):
            if value > best:
                best = value
                best_index = index
        results.append(float(best_index))
    return NDArray([count, 1], results)


def argmin(array: NDArray, axis: int) -> NDArray:
    """Position of the smallest value in each slice along ``axis``."""
    if axis < 0 or axis > array.rank - 1:
        raise NDArrayError("Argmin: Selected axis larger than rank")
    count = array.shape.dim(axis)
    results = []
    for position in range(count):
        smallest = float("inf")
        smallest_index = 0
        for index, value in enumerate(array.axis(axis, position).values):
            if value < smallest:
                smallest = value
                smallest_index = index
        results.append(float(smallest_index))
    return NDArray([count, 1], results)


def nonzero(array: NDArray) -> NDArray:
    """Column array of every non-zero element, in order."""
    kept = [value for value in array.values if value != 0.0]
    return NDArray([len(kept), 1], kept)
"""Column-wise normalisation of rank 2 data."""

from __future__ import annotations

from dendritic.ndarray import NDArray, NDArrayError
from dendritic.ops.aggregate import mean, stdev
from dendritic.ops.scalar import scalar_div, scalar_subtract
from dendritic.ops.unary import transpose


def _stack_columns(columns: list[NDArray], rows: int) -> NDArray:
    flat = [value for column in columns for value in column.values]
    return transpose(NDArray([len(columns), rows], flat))


def standard_scalar(array: NDArray) -> NDArray:
    """Scale each column to zero mean and unit population standard deviation."""
    if array.rank < 2:
        raise NDArrayError("Standard Scalar: Must be with rank 2 or higher")
    means = mean(array, 1)
    deviations = stdev(array, 1)
    columns = [
        scalar_div(scalar_subtract(array.axis(1, position), centre), spread)
        for position, (centre, spread) in enumerate(zip(means, deviations))
    ]
    return _stack_columns(columns, array.shape.dim(0))


def min_max_scalar(array: NDArray) -> NDArray:
    """Scale each column linearly onto the range 0 to 1."""
    if array.rank < 2:
        raise NDArrayError("MinMax Scalar: Must be with rank 2 or higher")
    columns = []
    for position in range(array.shape.dim(1)):
        column = array.axis(1, position)
        low = min(column.values)
        high = max(column.values)
        columns.append(scalar_div(scalar_subtract(column, low), high - low))
    return _stack_columns(columns, array.shape.dim(0))
"""One-hot encoding of integer class labels."""

from __future__ import annotations

from dendritic.ndarray import NDArray, NDArrayError


class OneHotEncoding:
    """Encodes an ``(N, 1)`` column of class labels as an ``(N, classes)`` array."""

    def __init__(self, input_column: NDArray) -> None:
        if input_column.shape.dim(1) != 1:
            raise NDArrayError("Input col must be of size (N, 1)")
        if input_column.rank > 2:
            raise NDArrayError("Input col must be less than rank 2")
        if not input_column.values:
            raise NDArrayError("Input col must not be empty")

        self._input_column = NDArray(input_column.shape, input_column.values)
        self._max_value = max(input_column.values) + 1.0
        rows = input_column.shape.dim(0)
        self._encoded = NDArray.new([rows, int(self._max_value)])
        self._num_samples = float(rows)

    def max_value(self) -> float:
        """Number of classes: the largest label plus one."""
        return self._max_value

    def num_samples(self) -> float:
        """Number of labels in the input column."""
        return self._num_samples

    def transform(self) -> NDArray:
        """Set the encoded array's entry for each label and return it."""
        width = self._encoded.shape.dim(1)
        for row, label in enumerate(self._input_column.values):
            index = max(0, int(label + row * width))
            if index < self._encoded.size:
                self._encoded.set_idx(index, 1.0)
        return self._encoded
"""N-dimensional arrays stored as flat row-major lists."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Iterable, Sequence

from dendritic.shape import Shape


class NDArrayError(ValueError):
    """Raised when an array operation receives invalid arguments."""


class NDArray:
    """An N-dimensional array of values held in row-major order."""

    __slots__ = ("shape", "values")

    def __init__(self, shape: Shape | Iterable[int], values: Iterable[Any]) -> None:
        self.shape = Shape(shape.values if isinstance(shape, Shape) else shape)
        self.values = list(values)
        if len(self.values) != self.shape.size():
            raise NDArrayError("Values don't match size based on dimensions")

    @property
    def size(self) -> int:
        """Number of elements."""
        return self.shape.size()

    @property
    def rank(self) -> int:
        """Number of dimensions."""
        return len(self.shape)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NDArray):
            return NotImplemented
        return self.shape == other.shape and self.values == other.values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"NDArray(shape={self.shape.values!r}, values={self.values!r})"

    @classmethod
    def new(cls, shape: Iterable[int]) -> NDArray:
        """Array of the given shape filled with zeros."""
        dims = list(shape)
        return cls(dims, [0.0] * math.prod(dims))

    @classmethod
    def array(cls, shape: Iterable[int], values: Iterable[Any]) -> NDArray:
        """Array of the given shape holding ``values``."""
        return cls(shape, values)

    @classmethod
    def fill(cls, shape: Iterable[int], value: Any) -> NDArray:
        """Array of the given shape with every element set to ``value``."""
        dims = list(shape)
        return cls(dims, [value] * math.prod(dims))

    @classmethod
    def load(cls, filepath: str | Path) -> NDArray:
        """Read an array saved with :meth:`save` from ``<filepath>.json``."""
        path = Path(f"{filepath}.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(data["shape"]["values"], data["values"])

    def save(self, filepath: str | Path) -> None:
        """Write the array as JSON to ``<filepath>.json``."""
        document = {
            "shape": {"values": self.shape.values},
            "size": self.size,
            "rank": self.rank,
            "values": self.values,
        }
        path = Path(f"{filepath}.json")
        path.write_text(json.dumps(document, indent=2), encoding="utf-8")

    def get(self, indices: Sequence[int]) -> Any:
        """Value at the given coordinates."""
        return self.values[self.index(indices)]

    def idx(self, index: int) -> Any:
        """Value at a flat offset."""
        return self.values[index]

    def reshape(self, shape: Iterable[int]) -> None:
        """Change the dimensions in place, keeping rank and size."""
        dims = list(shape)
        if len(dims) != self.rank:
            raise NDArrayError("New Shape values don't match rank of array")
        if math.prod(dims) != self.size:
            raise NDArrayError("New Shape values don't match size of array")
        self.shape = Shape(dims)

    def index(self, indices: Sequence[int]) -> int:
        """Flat offset of the given coordinates."""
        coords = list(indices)
        if len(coords) != self.rank:
            raise NDArrayError("Indexing doesn't match rank of ndarray")
        flat = self.shape.idx(coords)
        if flat < 0 or flat > self.size - 1:
            raise NDArrayError("Index out of bounds")
        return flat

    def indices(self, index: int) -> list[int]:
        """Coordinates of a flat offset."""
        if index < 0 or index > self.size - 1:
            raise NDArrayError("Index out of bounds")
        return self.shape.indices(index, self.rank)

    def set_idx(self, idx: int, value: Any) -> None:
        """Set the value at a flat offset."""
        if idx < 0 or idx >= self.size:
            raise NDArrayError("Index out of bounds")
        self.values[idx] = value

    def set(self, indices: Sequence[int], value: Any) -> None:
        """Set the value at the given coordinates."""
        if len(indices) != self.rank:
            raise NDArrayError("Indices length don't match rank of ndarray")
        self.values[self.index(indices)] = value

    def rows(self, index: int) -> list[Any]:
        """Values of row ``index`` along the first dimension."""
        count = self.shape.dim(0)
        if not 0 <= index < count:
            raise NDArrayError("Rows: Index out of bounds")
        length = self.size // count
        start = index * length
        return self.values[start:start + length]

    def cols(self, index: int) -> list[Any]:
        """Values of column ``index`` along the second dimension."""
        stride = self.shape.dim(1)
        if not 0 <= index < stride:
            raise NDArrayError("Cols: Index out of bounds")
        return self.values[index::stride][: self.size // stride]

    def axis(self, axis: int, index: int) -> NDArray:
        """Slice at position ``index`` of dimension ``axis``."""
        if not 0 <= axis < self.rank:
            raise NDArrayError("Axis: Selected axis larger than rank")
        if not 0 <= index < self.shape.dim(axis):
            raise NDArrayError("Axis: Index for value is too large")

        outer = Shape(self.shape.values)
        outer.remove(axis)
        picked = []
        for flat in range(outer.size()):
            coords = outer.multi_index(flat)
            coords.insert(axis, index)
            picked.append(self.values[self.index(coords)])

        if len(outer) == 1:
            outer.push(1)
        return NDArray(outer, picked)

    def axis_indices(self, axis: int, indices: Sequence[int]) -> NDArray:
        """Slices at several positions of dimension ``axis``, stacked in order."""
        if not 0 <= axis < self.rank:
            raise NDArrayError("Axis Indices: Selected axis larger than rank")
        gathered = [value for position in indices for value in self.axis(axis, position).values]
        dims = self.shape.values
        dims[axis] = len(indices)
        return NDArray(dims, gathered)

    def drop_axis(self, axis: int, index: int) -> NDArray:
        """Copy of a rank 2 array without slice ``index`` of dimension ``axis``."""
        if not 0 <= axis < self.rank:
            raise NDArrayError("Drop Axis: Selected axis larger than rank")
        if index < 0 or index > self.shape.dim(axis):
            raise NDArrayError("Drop Axis: Selected indice too large for axis")
        if self.rank > 2:
            raise NDArrayError("Drop Axis: Only supported for rank 2 values")

        dims = self.shape.values
        dims[axis] -= 1
        result = NDArray.new(dims)
        kept = (self.axis(axis, i) for i in range(self.shape.dim(axis)) if i != index)
        for position, part in enumerate(kept):
            for offset, value in enumerate(part.values):
                coords = [position, offset] if axis == 0 else [offset, position]
                result.set(coords, value)
        return result

    def batch(self, batch_size: int) -> list[NDArray]:
        """Overlapping windows of ``batch_size`` rows, advancing one row at a time."""
        if batch_size <= 0 or batch_size >= self.size:
            raise NDArrayError("Batch size out of bounds")
        if self.rank != 2:
            raise NDArrayError("NDArray must be of rank 2")

        width = self.shape.dim(1)
        window = batch_size * width
        return [
            NDArray([batch_size, width], self.values[start:start + window])
            for start in range(0, self.size - window + 1, width)
        ]

    def value_indices(self, value: Any) -> list[int]:
        """Flat offsets of every element equal to ``value``."""
        return [i for i, item in enumerate(self.values) if item == value]

    def indice_query(self, indices: Sequence[int]) -> NDArray:
        """Column array of the values at the given flat offsets."""
        if len(indices) > self.size:
            raise NDArrayError("Indices length is greater than array size")
        picked = []
        for position in indices:
            if position < 0 or position >= self.size:
                raise NDArrayError("Specified index greater than array size")
            picked.append(self.values[position])
        return NDArray([len(picked), 1], picked)

    def split(self, axis: int, percentage: float) -> tuple[NDArray, NDArray]:
        """Split along ``axis``; the first part takes ``percentage`` of it, rounded up."""
        if not 0 <= axis < self.rank:
            raise NDArrayError("AXIS greater than current NDArray shape")

        count = self.shape.dim(axis)
        split_at = math.ceil(percentage * count)
        remainder = math.ceil(count - split_at)

        first_dims = self.shape.values
        second_dims = self.shape.values
        first_dims[axis] = split_at
        second_dims[axis] = remainder

        first: list[Any] = []
        second: list[Any] = []
        for position in range(count):
            target = first if position < split_at else second
            target.extend(self.axis(axis, position).values)

        return NDArray(first_dims, first), NDArray(second_dims, second)
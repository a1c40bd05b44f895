"""Shape descriptor for N-dimensional arrays."""

from __future__ import annotations

import math
from typing import Iterable, Iterator


class Shape:
    """Dimensions of an array, with helpers for row-major index arithmetic."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)

    @property
    def values(self) -> list[int]:
        """A copy of the dimension sizes."""
        return list(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._values))

    def __repr__(self) -> str:
        return f"Shape({self._values!r})"

    def dim(self, index: int) -> int:
        """Size of the dimension at ``index``."""
        return self._values[index]

    def reverse(self) -> list[int]:
        """Dimension sizes in reverse order."""
        return self._values[::-1]

    def remove(self, index: int) -> int:
        """Remove the dimension at ``index`` and return its size."""
        return self._values.pop(index)

    def push(self, value: int) -> None:
        """Append a dimension of size ``value``."""
        self._values.append(value)

    def permute(self, indice_order: Iterable[int]) -> list[int]:
        """Dimension sizes rearranged into ``indice_order``."""
        return [self._values[item] for item in indice_order]

    def idx(self, indices: Iterable[int]) -> int:
        """Flat row-major offset of the given coordinates."""
        coords = list(indices)
        if len(coords) > len(self._values):
            raise IndexError("more coordinates than dimensions")
        index = 0
        stride = 1
        for coord, size in reversed(list(zip(coords, self._values))):
            index += stride * coord
            stride *= size
        return index

    def indices(self, index: int, rank: int) -> list[int]:
        """Coordinates of a flat row-major offset, for ``rank`` dimensions."""
        coords = [0] * rank
        remaining = index
        for position in range(rank - 1, 0, -1):
            size = self._values[position]
            coords[position] = remaining % size
            remaining //= size
        coords[0] = remaining
        return coords

    def multi_index(self, flat_index: int) -> list[int]:
        """Coordinates of a flat offset across every dimension."""
        coords = []
        remaining = flat_index
        for size in reversed(self._values):
            coords.append(remaining % size)
            remaining //= size
        coords.reverse()
        return coords

    def strides(self) -> list[int]:
        """Element strides, starting from the last dimension."""
        result = []
        stride = 1
        for size in reversed(self._values):
            result.append(stride)
            stride *= size
        return result

    def size(self) -> int:
        """Number of elements the shape describes."""
        return math.prod(self._values)
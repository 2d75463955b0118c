"""A flat, row-major multi-dimensional array of numbers."""

from __future__ import annotations

from typing import Iterator

from heatgrid.shape import MultiArrayShape, check_and_cast


class MultiArray:
    """Multi-dimensional array stored as one flat row-major sequence.

    Elements start at zero. They are addressed either by a flat index,
    ``a[5]``, or by one index per dimension, ``a[1, 2]``.
    """

    def __init__(self, shape) -> None:
        self._shape = MultiArrayShape(shape)
        self._data: list = [0.0] * self._shape.size()

    @property
    def shape(self) -> MultiArrayShape:
        """The shape of the array."""
        return self._shape

    @property
    def ndim(self) -> int:
        """Number of dimensions."""
        return len(self._shape)

    def _resolve(self, index) -> int:
        if isinstance(index, tuple):
            if len(index) != len(self._shape):
                raise IndexError("Number of Arguments must Match the dimension.")
            flat = sum(
                stride * check_and_cast(i)
                for stride, i in zip(self._shape.strides, index)
            )
        else:
            flat = check_and_cast(index)
        if flat >= len(self._data):
            raise IndexError("Index is out of range.")
        return flat

    def __getitem__(self, index):
        return self._data[self._resolve(index)]

    def __setitem__(self, index, value) -> None:
        self._data[self._resolve(index)] = value

    def flat_index(self, indexes) -> int:
        """Flat position of the element at ``indexes``, one per dimension."""
        indexes = tuple(indexes)
        if len(indexes) != len(self._shape):
            raise IndexError("Number of Arguments must Match the dimension.")
        total = 0
        for stride, i in zip(self._shape.strides, indexes):
            if i < 0:
                raise ValueError("Indexing must be none-negative number.")
            total += stride * i
        return total

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def fill(self, value) -> None:
        """Set every element to ``value``."""
        self._data = [value] * len(self._data)

    def assign(self, value) -> None:
        """Set every element to ``value``."""
        self.fill(value)

    def swap(self, other: "MultiArray") -> None:
        """Exchange contents and shape with ``other``."""
        self._data, other._data = other._data, self._data
        self._shape.swap(other._shape)

    def copy(self) -> "MultiArray":
        """Return an independent copy of this array."""
        duplicate = MultiArray(self._shape)
        duplicate._data = list(self._data)
        return duplicate

    def __str__(self) -> str:
        if not len(self._shape):
            return ""
        parts: list[str] = []
        self._render(parts, 0, 0)
        return "".join(parts)

    def _render(self, parts: list[str], dim: int, offset: int) -> None:
        extent = self._shape[dim]
        if dim == len(self._shape) - 1:
            row = self._data[offset:offset + extent]
            parts.append("|" + "".join(f"{value:12.5f}" for value in row) + " |\n")
            return
        stride = self._shape.strides[dim]
        for i in range(extent):
            self._render(parts, dim + 1, offset + i * stride)
        parts.append("\n")

    def __repr__(self) -> str:
        return f"MultiArray({self._shape.dims!r})"
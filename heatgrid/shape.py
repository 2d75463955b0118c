"""Shape descriptor for row-major multi-dimensional arrays."""

from __future__ import annotations

import operator
from itertools import accumulate
from math import prod
from typing import Iterable, Iterator


def check_and_cast(value) -> int:
    """Return ``value`` as a non-negative ``int``; raise if it is negative."""
    try:
        number = operator.index(value)
    except TypeError as exc:
        raise TypeError(
            f"extent must be an integer, got {type(value).__name__}"
        ) from exc
    if number < 0:
        raise ValueError("Negative value provided for an unsigned type.")
    return number


def _row_major_strides(dims: list[int]) -> list[int]:
    if not dims:
        return []
    strides = list(accumulate(reversed(dims[1:]), operator.mul, initial=1))
    strides.reverse()
    return strides


class MultiArrayShape:
    """Extents of a multi-dimensional array together with its row-major strides.

    Built either from the extents as separate arguments,
    ``MultiArrayShape(2, 3, 4)``, or from one iterable of extents,
    ``MultiArrayShape([2, 3, 4])``. With no arguments the shape is empty.
    """

    __hash__ = None  # mutable

    def __init__(self, *args) -> None:
        if len(args) == 1 and not _is_integer(args[0]):
            extents: Iterable = args[0]
        else:
            extents = args
        self._dims: list[int] = [check_and_cast(extent) for extent in extents]
        self._strides: list[int] = _row_major_strides(self._dims)

    @property
    def dims(self) -> tuple[int, ...]:
        """The extent along each dimension."""
        return tuple(self._dims)

    @property
    def strides(self) -> tuple[int, ...]:
        """The flat-index step along each dimension."""
        return tuple(self._strides)

    def size(self) -> int:
        """Total number of elements described by the shape."""
        return prod(self._dims)

    def swap(self, other: "MultiArrayShape") -> None:
        """Exchange extents and strides with ``other``."""
        self._dims, other._dims = other._dims, self._dims
        self._strides, other._strides = other._strides, self._strides

    def __getitem__(self, index):
        return self._dims[index]

    def __setitem__(self, index, value) -> None:
        self._dims[index] = check_and_cast(value)
        self._strides = _row_major_strides(self._dims)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MultiArrayShape):
            return NotImplemented
        return self._dims == other._dims and self._strides == other._strides

    def __len__(self) -> int:
        return len(self._dims)

    def __iter__(self) -> Iterator[int]:
        return iter(self._dims)

    def __repr__(self) -> str:
        return f"MultiArrayShape({', '.join(map(str, self._dims))})"


def _is_integer(value) -> bool:
    try:
        operator.index(value)
    except TypeError:
        return False
    return True
"""Dense 1D, 2D and 3D grids of floating-point values stored row-major."""

from __future__ import annotations

import operator
from typing import Iterator

import numpy as np

from heatgrid.shape import check_and_cast


def decomp1d(n: int, nprocs: int, rank: int) -> tuple[int, int]:
    """Split the interior points ``1..n`` among ``nprocs`` workers.

    Returns the inclusive ``(start, end)`` range owned by ``rank``. The first
    ``n % nprocs`` workers receive one extra point, and the last worker always
    ends at ``n``.
    """
    if nprocs <= 0:
        raise ValueError("number of processes must be positive")
    if not 0 <= rank < nprocs:
        raise ValueError(f"rank {rank} is outside 0..{nprocs - 1}")
    nlocal, deficit = divmod(n, nprocs)
    start = rank * nlocal + 1 + min(rank, deficit)
    if rank < deficit:
        nlocal += 1
    end = start + nlocal - 1
    if end > n or rank == nprocs - 1:
        end = n
    return start, end


def _as_index(value, extent: int) -> int:
    try:
        number = operator.index(value)
    except TypeError as exc:
        raise TypeError(
            f"index must be an integer, got {type(value).__name__}"
        ) from exc
    if not 0 <= number < extent:
        raise IndexError("out of range")
    return number


class Array1D:
    """A one-dimensional grid of floats, initialised to zero."""

    def __init__(self, n: int = 0) -> None:
        self._set_geometry((check_and_cast(n),))

    def _set_geometry(self, dims: tuple[int, ...]) -> None:
        self._dims = dims
        self._data = np.zeros(int(np.prod(dims, dtype=np.int64)), dtype=float)

    @property
    def n(self) -> int:
        """Total number of elements."""
        return self._data.size

    @property
    def shape(self) -> tuple[int, ...]:
        """Extent along each dimension."""
        return self._dims

    @property
    def data(self) -> np.ndarray:
        """A writable view of the values, shaped like the grid."""
        return self._data.reshape(self._dims)

    def _flat(self, index) -> int:
        if isinstance(index, tuple):
            if len(index) != len(self._dims):
                raise IndexError("Number of indices must match the dimension.")
            flat = 0
            for i, extent in zip(index, self._dims):
                flat = flat * extent + _as_index(i, extent)
            return flat
        return _as_index(index, self._data.size)

    def __len__(self) -> int:
        return self._data.size

    def __iter__(self) -> Iterator[float]:
        return (float(value) for value in self._data)

    def __getitem__(self, index) -> float:
        return float(self._data[self._flat(index)])

    def __setitem__(self, index, value) -> None:
        self._data[self._flat(index)] = value

    def fill(self, value) -> None:
        """Set every element to ``value``."""
        self._data.fill(value)

    def assign(self, value) -> None:
        """Set every element to ``value``."""
        self.fill(value)

    def swap(self, other: "Array1D") -> None:
        """Exchange values and extents with ``other``."""
        if type(other) is not type(self):
            raise TypeError("can only swap grids of the same kind")
        self._data, other._data = other._data, self._data
        self._dims, other._dims = other._dims, self._dims

    def resize(self, n: int) -> None:
        """Change the length to ``n``; all values are reset to zero."""
        self._set_geometry((check_and_cast(n),))

    def copy_from(self, other) -> None:
        """Copy the values of ``other``, in order, into the start of this grid."""
        values = np.fromiter(other, dtype=float)
        if values.size > self._data.size:
            raise ValueError("source holds more elements than the destination")
        self._data[: values.size] = values

    def __repr__(self) -> str:
        dims = ", ".join(map(str, self._dims))
        return f"{type(self).__name__}({dims})"


class Array2D(Array1D):
    """A two-dimensional grid addressed as ``a[i, j]`` or by flat index."""

    def __init__(self, rows: int = 0, cols: int = 0) -> None:
        self._set_geometry((check_and_cast(rows), check_and_cast(cols)))

    @property
    def rows(self) -> int:
        return self._dims[0]

    @property
    def cols(self) -> int:
        return self._dims[1]

    def resize(self, rows: int, cols: int) -> None:
        """Change the extents; all values are reset to zero."""
        self._set_geometry((check_and_cast(rows), check_and_cast(cols)))

    def __matmul__(self, other: "Array2D") -> "Array2D":
        if not isinstance(other, Array2D):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError("Invalid Size of Multiplication.")
        result = Array2D(self.rows, other.cols)
        result.data[...] = self.data @ other.data
        return result

    def __add__(self, other: "Array2D") -> "Array2D":
        if not isinstance(other, Array2D):
            return NotImplemented
        if self.shape != other.shape:
            raise ValueError("Invalid Size of Addition.")
        result = Array2D(self.rows, self.cols)
        result._data[:] = self._data + other._data
        return result

    def transpose(self) -> None:
        """Transpose the grid in place."""
        transposed = self.data.T.copy()
        self._dims = (self.cols, self.rows)
        self._data = transposed.ravel()

    def fill_random(self, rng: np.random.Generator | None = None) -> None:
        """Fill with samples from the standard normal distribution."""
        generator = rng if rng is not None else np.random.default_rng()
        self._data[:] = generator.standard_normal(self._data.size)


class Array3D(Array1D):
    """A three-dimensional grid addressed as ``a[i, j, k]`` or by flat index."""

    def __init__(self, rows: int = 0, cols: int = 0, height: int = 0) -> None:
        self._set_geometry(
            (check_and_cast(rows), check_and_cast(cols), check_and_cast(height))
        )

    @property
    def rows(self) -> int:
        return self._dims[0]

    @property
    def cols(self) -> int:
        return self._dims[1]

    @property
    def height(self) -> int:
        return self._dims[2]

    def resize(self, rows: int, cols: int, height: int) -> None:
        """Change the extents; all values are reset to zero."""
        self._set_geometry(
            (check_and_cast(rows), check_and_cast(cols), check_and_cast(height))
        )
"""Block decomposition of grids over a Cartesian grid of workers."""

from __future__ import annotations

from math import prod
from typing import Optional

import numpy as np

from heatgrid.grids import Array1D, Array2D, Array3D, decomp1d
from heatgrid.shape import check_and_cast


def _prime_factors(n: int) -> list[int]:
    factors: list[int] = []
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        divisor += 1
    if n > 1:
        factors.append(n)
    return sorted(factors, reverse=True)


def dims_create(nnodes: int, ndims: int) -> tuple[int, ...]:
    """Split ``nnodes`` workers into a balanced grid of ``ndims`` dimensions.

    The extents multiply to ``nnodes`` and come in non-increasing order.
    """
    nnodes = check_and_cast(nnodes)
    ndims = check_and_cast(ndims)
    if nnodes < 1:
        raise ValueError("number of nodes must be positive")
    if ndims < 1:
        raise ValueError("number of dimensions must be positive")
    dims = [1] * ndims
    for factor in _prime_factors(nnodes):
        smallest = min(range(ndims), key=dims.__getitem__)
        dims[smallest] *= factor
    return tuple(sorted(dims, reverse=True))


class CartesianTopology:
    """A non-periodic Cartesian grid of workers, ranked in row-major order."""

    def __init__(self, dims) -> None:
        self.dims: tuple[int, ...] = tuple(check_and_cast(d) for d in dims)
        if not self.dims:
            raise ValueError("a topology needs at least one dimension")
        if any(d == 0 for d in self.dims):
            raise ValueError("every extent of a topology must be positive")

    @property
    def ndim(self) -> int:
        """Number of dimensions of the worker grid."""
        return len(self.dims)

    def size(self) -> int:
        """Number of workers."""
        return prod(self.dims)

    def coords(self, rank: int) -> tuple[int, ...]:
        """Grid coordinates of the worker ``rank``."""
        if not 0 <= rank < self.size():
            raise ValueError(f"rank {rank} is outside 0..{self.size() - 1}")
        result = []
        for extent in reversed(self.dims):
            rank, coordinate = divmod(rank, extent)
            result.append(coordinate)
        return tuple(reversed(result))

    def rank_of(self, coords) -> int:
        """Rank of the worker at ``coords``."""
        coords = tuple(coords)
        if len(coords) != self.ndim:
            raise ValueError("number of coordinates must match the dimension")
        rank = 0
        for coordinate, extent in zip(coords, self.dims):
            if not 0 <= coordinate < extent:
                raise ValueError(f"coordinates {coords} are outside the grid")
            rank = rank * extent + coordinate
        return rank

    def _rank_or_none(self, coords: list[int]) -> Optional[int]:
        if all(0 <= c < e for c, e in zip(coords, self.dims)):
            return self.rank_of(coords)
        return None

    def shift(self, rank: int, direction: int, disp: int = 1):
        """Return ``(source, dest)``: the workers ``disp`` steps behind and ahead.

        A neighbour that falls off the grid is ``None``.
        """
        if not 0 <= direction < self.ndim:
            raise ValueError(f"direction {direction} is outside 0..{self.ndim - 1}")
        here = list(self.coords(rank))
        behind, ahead = list(here), list(here)
        behind[direction] -= disp
        ahead[direction] += disp
        return self._rank_or_none(behind), self._rank_or_none(ahead)

    def __repr__(self) -> str:
        return f"CartesianTopology({self.dims!r})"


def _decompose(global_dims, topology: CartesianTopology, rank: int, dimension: int):
    if topology.ndim != dimension:
        raise ValueError(
            f"a {dimension}D array needs a {dimension}D topology, "
            f"got {topology.ndim}D"
        )
    coords = topology.coords(rank)
    sizes = tuple(check_and_cast(g) for g in global_dims)
    if any(g < 2 for g in sizes):
        raise ValueError("every global extent must include two boundary points")
    ranges = [
        decomp1d(g - 2, nprocs, c)
        for g, nprocs, c in zip(sizes, topology.dims, coords)
    ]
    starts = tuple(s for s, _ in ranges)
    ends = tuple(e for _, e in ranges)
    local = tuple(e - s + 3 for s, e in ranges)
    return sizes, coords, starts, ends, local


class _DistributedMixin:
    dimension = 0

    def _reset_topology(self) -> None:
        self.topology: Optional[CartesianTopology] = None
        self.rank = 0
        self.num_proc = 0
        self.coordinates = (0,) * self.dimension
        self.starts = (0,) * self.dimension
        self.ends = (0,) * self.dimension

    def _attach(self, topology, rank, coords, starts, ends) -> None:
        self.topology = topology
        self.rank = rank
        self.num_proc = topology.size()
        self.coordinates = coords
        self.starts = starts
        self.ends = ends


class DistributedArray1D(_DistributedMixin, Array1D):
    """The local block, with one halo point at each end, of a distributed 1D grid."""

    dimension = 1

    def __init__(self) -> None:
        Array1D.__init__(self, 0)
        self.global_n = 0
        self.nbr_left: Optional[int] = None
        self.nbr_right: Optional[int] = None
        self._reset_topology()

    def distribute(self, global_n: int, topology: CartesianTopology, rank: int) -> None:
        """Take the block of a ``global_n`` grid that belongs to ``rank``."""
        sizes, coords, starts, ends, local = _decompose(
            (global_n,), topology, rank, self.dimension
        )
        (self.global_n,) = sizes
        self._attach(topology, rank, coords, starts, ends)
        self.nbr_left, self.nbr_right = topology.shift(rank, 0, 1)
        self.resize(*local)


class DistributedArray2D(_DistributedMixin, Array2D):
    """The local block, with a halo ring, of a distributed 2D grid."""

    dimension = 2

    def __init__(self) -> None:
        Array2D.__init__(self, 0, 0)
        self.global_rows = 0
        self.global_cols = 0
        self.nbr_up: Optional[int] = None
        self.nbr_down: Optional[int] = None
        self.nbr_left: Optional[int] = None
        self.nbr_right: Optional[int] = None
        self._reset_topology()

    def distribute(
        self, global_rows: int, global_cols: int, topology: CartesianTopology, rank: int
    ) -> None:
        """Take the block of a ``global_rows`` by ``global_cols`` grid owned by ``rank``."""
        sizes, coords, starts, ends, local = _decompose(
            (global_rows, global_cols), topology, rank, self.dimension
        )
        self.global_rows, self.global_cols = sizes
        self._attach(topology, rank, coords, starts, ends)
        self.nbr_up, self.nbr_down = topology.shift(rank, 0, 1)
        self.nbr_left, self.nbr_right = topology.shift(rank, 1, 1)
        self.resize(*local)


class DistributedArray3D(_DistributedMixin, Array3D):
    """The local block, with a halo shell, of a distributed 3D grid."""

    dimension = 3

    def __init__(self) -> None:
        Array3D.__init__(self, 0, 0, 0)
        self.global_rows = 0
        self.global_cols = 0
        self.global_heights = 0
        self.nbr_back: Optional[int] = None
        self.nbr_front: Optional[int] = None
        self.nbr_up: Optional[int] = None
        self.nbr_down: Optional[int] = None
        self.nbr_left: Optional[int] = None
        self.nbr_right: Optional[int] = None
        self._reset_topology()

    def distribute(
        self,
        global_rows: int,
        global_cols: int,
        global_heights: int,
        topology: CartesianTopology,
        rank: int,
    ) -> None:
        """Take the block of the global 3D grid owned by ``rank``."""
        sizes, coords, starts, ends, local = _decompose(
            (global_rows, global_cols, global_heights), topology, rank, self.dimension
        )
        self.global_rows, self.global_cols, self.global_heights = sizes
        self._attach(topology, rank, coords, starts, ends)
        self.nbr_back, self.nbr_front = topology.shift(rank, 0, 1)
        self.nbr_up, self.nbr_down = topology.shift(rank, 1, 1)
        self.nbr_left, self.nbr_right = topology.shift(rank, 2, 1)
        self.resize(*local)


def get_difference(ping: Array1D, pong: Array1D) -> float:
    """Sum of squared differences between two grids of the same shape."""
    if ping.shape != pong.shape:
        raise ValueError("Different Shape!")
    delta = ping.data - pong.data
    return float(np.sum(delta * delta))
"""Initial and boundary conditions for the heat problems."""

from __future__ import annotations

import math

import numpy as np

from heatgrid.grids import Array1D


def _require_grid(array: Array1D, ndim: int) -> None:
    if len(array.shape) != ndim:
        raise ValueError(f"expected a {ndim}D grid, got {len(array.shape)}D")
    if any(extent < 2 for extent in array.shape):
        raise ValueError("every extent must include two boundary points")


def _require_pair(ping, pong, ndim: int) -> None:
    for grid in (ping, pong):
        if getattr(grid, "topology", None) is None:
            raise ValueError("grid has not been distributed")
        _require_grid(grid, ndim)
    if ping.shape != pong.shape:
        raise ValueError("ping and pong must have the same shape")


def init_heat1d(array: Array1D) -> None:
    """Zero the grid, then set the left end to 1 and the right end to 0."""
    _require_grid(array, 1)
    array.fill(0.0)
    u = array.data
    u[0] = 1.0
    u[-1] = 0.0


def init_heat1d_distributed(ping, pong) -> None:
    """Zero both blocks, then set the global left end to 10 and the right end to 0."""
    _require_pair(ping, pong, 1)
    n = ping.global_n - 2
    for grid in (ping, pong):
        grid.fill(0.0)
        u = grid.data
        if ping.starts[0] == 1:
            u[0] = 10.0
        if ping.ends[0] == n:
            u[-1] = 0.0


def init_heat2d(array: Array1D) -> None:
    """Zero the grid and set its four edges: 1 top, 2 left, 3 bottom, a sine profile right."""
    _require_grid(array, 2)
    nx = array.rows - 2
    ny = array.cols - 2
    xx = math.pi / (nx + 3) * 2
    array.fill(0.0)
    u = array.data
    u[0, : ny + 1] = 1.0
    u[nx + 1, : ny + 1] = 3.0
    u[: nx + 1, 0] = 2.0
    u[:, ny + 1] = 10.0 * np.abs(np.sin(np.arange(nx + 2) * xx * 2))


def init_heat2d_distributed(ping, pong) -> None:
    """Zero both blocks and set the global edges that each block touches."""
    _require_pair(ping, pong, 2)
    nx = ping.global_rows - 2
    ny = ping.global_cols - 2
    nx_loc = ping.rows - 2
    xx = 2 * math.pi / (nx + 3)
    right = 10.0 * np.abs(np.sin((np.arange(nx_loc + 1) + ping.starts[0]) * xx * 2))
    for grid in (ping, pong):
        grid.fill(0.0)
        u = grid.data
        if ping.starts[0] == 1:
            u[0, 1:-1] = 1.0
        if ping.starts[1] == 1:
            u[:-1, 0] = 2.0
        if ping.ends[0] == nx:
            u[-1, :-1] = 3.0
        if ping.ends[1] == ny:
            u[:-1, -1] = right


def init_heat3d(array: Array1D) -> None:
    """Zero the grid and set every face to 10 except the far face along the first axis."""
    _require_grid(array, 3)
    array.fill(0.0)
    u = array.data
    inner = slice(1, -1)
    u[inner, inner, 0] = 10.0
    u[inner, inner, -1] = 10.0
    u[inner, 0, inner] = 10.0
    u[inner, -1, inner] = 10.0
    u[0, inner, inner] = 10.0
    u[-1, inner, inner] = 0.0


def init_heat3d_distributed(ping, pong) -> None:
    """Zero both blocks and give the global far face along the last axis a sine profile."""
    _require_pair(ping, pong, 3)
    nx = ping.global_rows - 2
    ny = ping.global_cols - 2
    nz = ping.global_heights - 2
    nx_loc = ping.rows - 2
    ny_loc = ping.cols - 2
    xx = 2 * math.pi / (nx + 3)
    yy = 2 * math.pi / (ny + 3)
    ii = (np.arange(1, nx_loc + 1) + ping.starts[0]) * xx
    jj = (np.arange(1, ny_loc + 1) + ping.starts[1]) * yy
    face = 10.0 * np.abs(np.sin(np.outer(ii, jj) / 4))
    for grid in (ping, pong):
        # The other global faces are held at zero, which the fill provides.
        grid.fill(0.0)
        if ping.ends[2] == nz:
            grid.data[1:-1, 1:-1, -1] = face
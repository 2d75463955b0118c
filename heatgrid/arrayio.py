"""Text rendering and binary storage of grids."""

from __future__ import annotations

import struct
from math import prod
from os import PathLike
from pathlib import Path
from typing import Iterable, Union

import numpy as np

from heatgrid.grids import Array1D, Array2D, Array3D

_EXTENT = struct.Struct("<Q")
_VALUE_DTYPE = np.dtype("<f8")
_GRID_TYPES = {1: Array1D, 2: Array2D, 3: Array3D}

PathType = Union[str, "PathLike[str]"]


def _cell(value: float) -> str:
    return f"{value:9.5f}"


def _line(values: Iterable[float]) -> str:
    return "".join(map(_cell, values)) + "\n"


def format_array(array: Array1D) -> str:
    """Render a 1D, 2D or 3D grid as fixed-width text.

    Each value takes nine characters with five decimals. A 1D grid is one
    line, a 2D grid one line per row, and a 3D grid one block of lines per
    row, each block followed by an empty line.
    """
    values = array.data.tolist()
    ndim = len(array.shape)
    if ndim == 1:
        return _line(values)
    if ndim == 2:
        return "".join(_line(row) for row in values)
    if ndim == 3:
        return "".join(
            "".join(_line(line) for line in plane) + "\n" for plane in values
        )
    raise ValueError(f"cannot format a grid with {ndim} dimensions")


def save_binary(array: Array1D, path: PathType) -> None:
    """Write the extents as unsigned 64-bit integers, then the values as doubles."""
    with open(path, "wb") as stream:
        for extent in array.shape:
            stream.write(_EXTENT.pack(extent))
        stream.write(np.ascontiguousarray(array.data, dtype=_VALUE_DTYPE).tobytes())


def load_binary(path: PathType, ndim: int) -> Array1D:
    """Read a grid of ``ndim`` dimensions written by :func:`save_binary`."""
    try:
        grid_type = _GRID_TYPES[ndim]
    except KeyError:
        raise ValueError(f"unsupported number of dimensions: {ndim}") from None
    raw = Path(path).read_bytes()
    header_size = _EXTENT.size * ndim
    if len(raw) < header_size:
        raise ValueError("file is too short to hold the grid extents")
    dims = struct.unpack_from(f"<{ndim}Q", raw)
    payload = raw[header_size:]
    expected = prod(dims) * _VALUE_DTYPE.itemsize
    if len(payload) != expected:
        raise ValueError(
            f"expected {expected} bytes of values, found {len(payload)}"
        )
    grid = grid_type(*dims)
    grid.data[...] = np.frombuffer(payload, dtype=_VALUE_DTYPE).reshape(dims)
    return grid


def format_in_order(blocks) -> str:
    """Render the local blocks of a distributed grid one after another by rank."""
    ordered = sorted(blocks, key=lambda block: block.rank)
    if not ordered:
        raise ValueError("no blocks to format")
    ndim = len(ordered[0].shape)
    parts = [f"Attempting to print {ndim}d array in order\n"]
    for block in ordered:
        coords = ", ".join(map(str, block.coordinates))
        parts.append(f"proc : {block.rank} at ( {coords} )\n{format_array(block)}\n")
    return "".join(parts)
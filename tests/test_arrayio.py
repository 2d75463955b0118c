import struct

import pytest

from heatgrid.arrayio import format_array, format_in_order, load_binary, save_binary
from heatgrid.distributed import CartesianTopology, DistributedArray2D
from heatgrid.grids import Array1D, Array2D, Array3D


def _filled(grid):
    for position in range(len(grid)):
        grid[position] = position * 0.25 - 1.0
    return grid


def test_format_1d_fixed_width():
    grid = Array1D(3)
    grid[0] = 0.5
    grid[1] = 1.25
    grid[2] = -2.0
    assert format_array(grid) == "  0.50000  1.25000 -2.00000\n"


def test_format_2d_one_line_per_row():
    grid = _filled(Array2D(3, 4))
    lines = format_array(grid).splitlines()
    assert len(lines) == 3
    assert all(len(line) == 9 * 4 for line in lines)


def test_format_3d_blocks_separated_by_blank_lines():
    grid = _filled(Array3D(2, 3, 4))
    lines = format_array(grid).split("\n")
    # trailing "" after the final newline
    assert lines[-1] == ""
    body = lines[:-1]
    assert len(body) == 2 * (3 + 1)
    assert body[3] == "" and body[7] == ""
    assert all(len(line) == 9 * 4 for line in body[:3] + body[4:7])


@pytest.mark.parametrize(
    "grid, ndim",
    [(Array1D(5), 1), (Array2D(3, 4), 2), (Array3D(2, 3, 2), 3)],
)
def test_binary_round_trip(tmp_path, grid, ndim):
    _filled(grid)
    path = tmp_path / "grid.bin"
    save_binary(grid, path)
    loaded = load_binary(path, ndim)
    assert loaded.shape == grid.shape
    assert list(loaded) == list(grid)
    assert type(loaded) is type(grid)


def test_binary_header_holds_extents(tmp_path):
    grid = Array2D(3, 2)
    path = tmp_path / "grid.bin"
    save_binary(grid, path)
    raw = path.read_bytes()
    assert raw[:16] == struct.pack("<QQ", 3, 2)
    assert len(raw) == 16 + 3 * 2 * 8


def test_load_rejects_truncated_payload(tmp_path):
    path = tmp_path / "bad.bin"
    path.write_bytes(struct.pack("<QQ", 2, 2) + b"\x00" * 8)
    with pytest.raises(ValueError):
        load_binary(path, 2)


def test_load_rejects_short_header(tmp_path):
    path = tmp_path / "bad.bin"
    path.write_bytes(b"\x01\x02")
    with pytest.raises(ValueError):
        load_binary(path, 1)


def test_load_rejects_unknown_dimension(tmp_path):
    path = tmp_path / "grid.bin"
    save_binary(Array1D(2), path)
    with pytest.raises(ValueError):
        load_binary(path, 4)


def test_format_in_order_sorts_by_rank():
    topology = CartesianTopology((2, 1))
    blocks = []
    for rank in range(topology.size()):
        block = DistributedArray2D()
        block.distribute(6, 4, topology, rank)
        block.fill(float(rank))
        blocks.append(block)
    text = format_in_order(reversed(blocks))
    assert text.startswith("Attempting to print 2d array in order\n")
    first = text.index("proc : 0 at ( 0, 0 )")
    second = text.index("proc : 1 at ( 1, 0 )")
    assert first < second
    assert format_array(blocks[1]) in text[second:]


def test_format_in_order_needs_blocks():
    with pytest.raises(ValueError):
        format_in_order([])
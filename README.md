# heatgrid

Building blocks for finite-difference heat equation problems in one, two and
three dimensions. The package provides dense grids, a virtual Cartesian grid
of processes, and the split of a global grid into per-process blocks that each
carry a one-cell halo. It also provides the initial and boundary conditions
for the heat problems, text rendering, and a binary file format for grids.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install .[test]
pytest
```

## Modules

- `heatgrid.shape`: `MultiArrayShape`, the extents of an array with their
  row-major strides, and `check_and_cast`, which accepts only non-negative
  integers.
- `heatgrid.multiarray`: `MultiArray`, an N-dimensional array in flat storage,
  indexed by a tuple or by a flat position, with `fill`, `assign`, `swap`,
  `copy` and `flat_index`.
- `heatgrid.grids`: `Array1D`, `Array2D` and `Array3D`, zero-initialised grids
  of floats backed by NumPy, and `decomp1d`, which splits the interior points
  `1..n` among a number of processes. `Array2D` supports `@`, `+`,
  `transpose` and `fill_random`.
- `heatgrid.arrayio`: `format_array`, `format_in_order`, `save_binary` and
  `load_binary`.
- `heatgrid.distributed`: `dims_create`, `CartesianTopology`,
  `DistributedArray1D`, `DistributedArray2D`, `DistributedArray3D` and
  `get_difference`, the sum of squared differences of two grids.
- `heatgrid.initialization`: `init_heat1d`, `init_heat2d`, `init_heat3d` for
  whole grids, and `init_heat1d_distributed`, `init_heat2d_distributed`,
  `init_heat3d_distributed` for a pair of blocks of a distributed grid.

## Example

```python
from heatgrid.distributed import CartesianTopology, DistributedArray2D, dims_create
from heatgrid.grids import Array2D
from heatgrid.initialization import init_heat2d, init_heat2d_distributed

grid = Array2D(22, 22)
init_heat2d(grid)

topology = CartesianTopology(dims_create(4, 2))   # a 2 x 2 process grid
ping, pong = DistributedArray2D(), DistributedArray2D()
ping.distribute(22, 22, topology, 0)
pong.distribute(22, 22, topology, 0)
init_heat2d_distributed(ping, pong)

print(ping.starts, ping.ends)   # (1, 1) (10, 10)
print(ping.shape)               # (12, 12), halo included

a = Array2D(2, 3)
a.fill(1.0)
b = Array2D(3, 2)
b.fill(2.0)
product = a @ b                 # every element is 6.0
```

Neighbouring blocks are found with `CartesianTopology.shift`; a neighbour that
falls off the process grid is `None`.

## Binary format

`save_binary` writes the extent of each dimension as an unsigned 64-bit
little-endian integer, followed by the values as little-endian 64-bit floats
in row-major order. `load_binary(path, ndim)` reads such a file back into an
`Array1D`, `Array2D` or `Array3D`.

## What the package does not do

There is no command-line program and no solver loop: the package does not
sweep a grid towards its steady state, does not swap halo cells between
neighbouring blocks, and does not gather blocks back into a global grid.
Those steps are left to the caller, working on the block data exposed by
each grid's `data` view.
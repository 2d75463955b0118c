"""Grids, block decomposition and boundary conditions for heat equation problems."""

__version__ = "0.1.0"
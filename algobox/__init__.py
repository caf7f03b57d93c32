"""Classic algorithms and data structures in plain Python: arrays, grids,
dynamic programming, number theory, graphs, trees, hashing and contest problems."""

__version__ = "0.1.0"
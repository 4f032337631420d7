"""Multigrid Gauss-Seidel solver for the two-dimensional Poisson equation."""

__version__ = "0.1.0"
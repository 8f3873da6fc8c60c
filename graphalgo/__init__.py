"""Weighted graph algorithms on adjacency matrices: shortest paths, spanning trees, TSP."""

__version__ = "1.0.0"
"""Undirected multigraphs read from adjacency-list files, with property reports."""

__version__ = "0.1.0"
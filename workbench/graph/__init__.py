"""Directed graph container and its demonstration command."""

__all__ = ["digraph", "graph_demo"]
"""Algorithms and data structures for competitive programming: strings, trees,
graphs, flows, linear programming, transforms, number theory and geometry."""

__version__ = "0.1.0"
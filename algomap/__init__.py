"""Classic algorithms: heaps, shortest paths, string matching and dynamic programming."""

__version__ = "0.1.0"
"""Classic algorithms and data structures: heaps, disjoint sets, segment trees,
array techniques, searching, selection, sorting, dynamic programming, primes,
graph algorithms, tries and binary-tree traversals."""

__version__ = "0.1.0"
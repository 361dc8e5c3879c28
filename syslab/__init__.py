"""Systems-programming exercises: a heap allocator, matrix loops, binary file tools and small number utilities."""

__version__ = "0.1.0"
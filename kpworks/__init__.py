"""Taylor series, root finding, sparse matrices, ring lists, keyed tables and hardware records, with console front ends."""

__version__ = "1.0.0"
"""
Core arithmetic, domain models and contracts.

Everything here is independent of I/O: no files, no stdin, no printing.
"""

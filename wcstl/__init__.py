"""Containers, iterators and algorithms modelled on the standard template library."""

__version__ = "0.1.0"
__all__ = ["algo", "demo", "iterator", "numbers", "source_location", "vector"]
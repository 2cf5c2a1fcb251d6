"""Polars boolean parsing utilities."""

from .parser import PolarsParser

__all__ = [
    "PolarsParser",
]

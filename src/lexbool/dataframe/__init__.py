"""DataFrame utilities for boolean column parsing.

This package applies the lexical boolean parser to columns of multiple
DataFrame libraries (Pandas, Polars, Spark).

Subpackages:
    - pandas: Pandas-specific implementations
    - polars: Polars-specific implementations
    - spark: Spark-specific implementations

Only the pandas implementations are re-exported here; polars and spark are
optional dependencies and must be imported from their subpackages.
"""

from .pandas.cleaner import Cleaner
from .pandas.parser import Parser

__all__ = [
    "Cleaner",
    "Parser",
]

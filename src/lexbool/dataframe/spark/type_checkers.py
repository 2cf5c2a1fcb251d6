# src/lexbool/dataframe/spark/type_checkers.py
"""Boolean predicate functions for Spark columns."""

import string

from pyspark.sql import functions as spark_functions
from pyspark.sql import Column

from ...config import BooleanTokens


def _is_null_or_empty(column: Column) -> Column:
    """Check if a column value is null or empty/whitespace-only string."""
    return column.isNull() | (spark_functions.trim(column) == '')


def _ascii_lowercase(column: Column) -> Column:
    """Lower-case only the ASCII letters of a string column, like the scalar parser."""
    return spark_functions.translate(column, string.ascii_uppercase, string.ascii_lowercase)


def is_boolean(column: Column, tokens: BooleanTokens | None = None) -> Column:
    """Native Spark SQL check if value can be parsed as boolean.

    Args:
        column: The string column to check
        tokens: The tokens to match. Defaults to the calling thread's tokens,
                captured when the expression is built.
    """
    tokens = tokens or BooleanTokens.current()
    return spark_functions.when(
        _is_null_or_empty(column), spark_functions.lit(True)
    ).otherwise(
        _ascii_lowercase(column).isin(list(tokens.all_values()))
    )

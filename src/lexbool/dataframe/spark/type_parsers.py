# src/lexbool/dataframe/spark/type_parsers.py
"""Boolean parsing/conversion functions for Spark columns."""

import logging

from pyspark.sql import functions as spark_functions
from pyspark.sql import Column
from pyspark.sql.types import BooleanType

from ...config import BooleanTokens
from .type_checkers import _ascii_lowercase, _is_null_or_empty

logger = logging.getLogger(__name__)


def parse_boolean(column: Column, tokens: BooleanTokens | None = None) -> Column:
    """Native Spark SQL boolean parser.

    Executors never see the driver's thread configuration, so the tokens are
    captured on the driver when the expression is built.

    Args:
        column: The string column to parse
        tokens: The tokens to match. Defaults to the calling thread's tokens.
                Null, blank and unrecognized values parse to null.
    """
    tokens = tokens or BooleanTokens.current()
    logger.debug(f'building boolean parser with {tokens}')
    lowercase_value = _ascii_lowercase(column)
    return spark_functions.when(
        _is_null_or_empty(column), spark_functions.lit(None).cast(BooleanType())
    ).when(
        lowercase_value.isin(list(tokens.truthy)), spark_functions.lit(True)
    ).when(
        lowercase_value.isin(list(tokens.falsey)), spark_functions.lit(False)
    ).otherwise(
        spark_functions.lit(None).cast(BooleanType())
    )

import logging
import string
from typing import Any, Optional

import polars as pl

from ...config import BooleanTokens
from ...lexical_bool import parse

# Set up logging
logger = logging.getLogger(__name__)


class PolarsParser:
    """
    Parser class with static methods for parsing boolean values in Polars.
    The expression builders are native Polars expressions; the tokens are
    captured from the building thread because Polars evaluates them on its
    own worker threads.
    """

    @staticmethod
    def _is_null_or_nan(value: Any) -> bool:
        """
        Check if a value is None or NaN.
        :param value: The value to check
        :return: True if value is None or NaN, False otherwise
        """
        return value is None or (isinstance(value, float) and str(value) == 'nan')

    @staticmethod
    def _ascii_lowercase(column: str) -> pl.Expr:
        """
        Lower-case only the ASCII letters of a string column, like the scalar parser.
        :param column: Name of the string column.
        """
        return pl.col(column).str.replace_many(list(string.ascii_uppercase), list(string.ascii_lowercase))

    @staticmethod
    def _is_null_or_blank(column: str) -> pl.Expr:
        """Check if a column value is null or an empty/whitespace-only string."""
        return pl.col(column).is_null() | (pl.col(column).str.strip_chars() == '')

    @staticmethod
    def parse_bool_value(value: Any) -> Optional[bool]:
        """
        Parse a single value with the calling thread's tokens.
        :param value: The value to be parsed as a boolean.
        :return: The parsed bool, or None for null values.
        :raises InvalidInput: If the value is not a recognized boolean string.
        """
        if PolarsParser._is_null_or_nan(value):
            return None
        return bool(parse(str(value)))

    @staticmethod
    def parse_boolean_expr(column: str, tokens: Optional[BooleanTokens] = None) -> pl.Expr:
        """
        Create a Polars expression for parsing boolean values.
        Null, blank and unrecognized strings become null.
        :param column: Name of the string column.
        :param tokens: Tokens to match, the current thread's tokens when None.
        """
        tokens = tokens or BooleanTokens.current()
        logger.debug(f'building boolean expression for {column} with {tokens}')
        lowercase_value = PolarsParser._ascii_lowercase(column)
        return (pl.when(PolarsParser._is_null_or_blank(column))
                .then(pl.lit(None, dtype=pl.Boolean))
                .when(lowercase_value.is_in(list(tokens.truthy)))
                .then(pl.lit(True))
                .when(lowercase_value.is_in(list(tokens.falsey)))
                .then(pl.lit(False))
                .otherwise(pl.lit(None, dtype=pl.Boolean))
                .alias(column))

    @staticmethod
    def is_boolean_expr(column: str, tokens: Optional[BooleanTokens] = None) -> pl.Expr:
        """
        Create a Polars expression that is true where a value is null, blank or a boolean token.
        """
        tokens = tokens or BooleanTokens.current()
        lowercase_value = PolarsParser._ascii_lowercase(column)
        return (PolarsParser._is_null_or_blank(column) | lowercase_value.is_in(list(tokens.all_values()))).alias(column)

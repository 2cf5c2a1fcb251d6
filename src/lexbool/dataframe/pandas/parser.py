# src/lexbool/dataframe/pandas/parser.py
"""Boolean parsing for Pandas values."""

import pandas as pd

from ...lexical_bool import parse


class Parser:
    """Parser class with static methods for parsing Pandas values."""

    @staticmethod
    def parse_boolean(value):
        """
        Parse a boolean value from a given input.

        Args:
            value: The value to be parsed as a boolean.

        Returns:
            The parsed boolean value, or None if the value is null or blank.

        Raises:
            InvalidInput: If the value is not a recognized boolean string.
        """
        if pd.isnull(value):
            return None
        value = str(value)
        if not value.strip():
            return None
        return bool(parse(value))

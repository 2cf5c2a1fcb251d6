# src/lexbool/dataframe/pandas/cleaner.py
"""Boolean column cleaning for Pandas DataFrames."""

import logging

import pandas as pd

from .parser import Parser
from ...lexical_bool import InvalidInput

logger = logging.getLogger(__name__)


class Cleaner:
    """
    Provides static methods for converting string columns of a pandas
    DataFrame to booleans.
    """

    @staticmethod
    def clean_series(series: pd.Series, clean_function) -> pd.Series:
        """
        Apply a cleaning function to a series.

        Args:
            series: The pandas Series to clean.
            clean_function: The function to apply to each element.

        Returns:
            The cleaned Series.

        Raises:
            InvalidInput: If an element is not a recognized boolean string.
        """
        return series.apply(clean_function)

    @staticmethod
    def clean_bools(df: pd.DataFrame, columns=None) -> pd.DataFrame:
        """
        Clean boolean columns by parsing boolean values.

        Args:
            df: The DataFrame to clean.
            columns: Names of the columns to clean, all columns when None.

        Returns:
            The DataFrame with cleaned boolean columns.

        Raises:
            InvalidInput: If any value in the cleaned columns is not a boolean string.
        """
        columns = df.columns if columns is None else columns
        for column in columns:
            df[column] = Cleaner.clean_series(df[column], Parser.parse_boolean)
            logger.info(f'{column} was cleaned with {Parser.parse_boolean.__name__}')
        return df

    @staticmethod
    def try_clean_bools(df: pd.DataFrame) -> list:
        """
        Clean every column that parses entirely as booleans, leaving the rest untouched.

        Args:
            df: The DataFrame to clean in place.

        Returns:
            The names of the columns that were converted.
        """
        cleaned_columns = []
        for column, series in df.items():
            if series.dropna().empty:
                logger.info(f'{column} is empty skipping cleaning')
                continue
            try:
                df[column] = Cleaner.clean_series(series, Parser.parse_boolean)
            except InvalidInput as error:
                logger.debug(f'{column} failed cleaning with {Parser.parse_boolean.__name__}: {error}')
                continue
            cleaned_columns.append(column)
            logger.info(f'{column} was cleaned with {Parser.parse_boolean.__name__}')
        return cleaned_columns

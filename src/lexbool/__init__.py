"""Parse truthy/falsey strings into booleans with per-thread configurable tokens.

Subpackages:
    - dataframe: Pandas, Polars and Spark boolean column parsing
"""

from .config import TRUTHY_VALUES, FALSEY_VALUES, ALL_BOOLEAN_VALUES, BooleanTokens
from .context import set_truthy_values, set_falsey_values, truthy_values, falsey_values
from .lexical_bool import LexicalBool, InvalidInput, parse

__all__ = [
    "TRUTHY_VALUES",
    "FALSEY_VALUES",
    "ALL_BOOLEAN_VALUES",
    "BooleanTokens",
    "set_truthy_values",
    "set_falsey_values",
    "truthy_values",
    "falsey_values",
    "LexicalBool",
    "InvalidInput",
    "parse",
]

"""Spark boolean parsing utilities."""

from .type_checkers import is_boolean
from .type_parsers import parse_boolean

__all__ = [
    "is_boolean",
    "parse_boolean",
]

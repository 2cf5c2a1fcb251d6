"""Pandas boolean parsing utilities."""

from .parser import Parser
from .cleaner import Cleaner

__all__ = [
    "Parser",
    "Cleaner",
]

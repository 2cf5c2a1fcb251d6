# src/lexbool/lexical_bool.py
"""Parse truthy/falsey strings into ``LexicalBool`` values."""

import dataclasses
import string

from .config import ALL_BOOLEAN_VALUES
from .context import truthy_values, falsey_values

_ASCII_LOWERCASE_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


@dataclasses.dataclass(slots=True, frozen=True, eq=False)
class LexicalBool:
    """
    A bool parsed from a string.

    Use ``bool(lexical_bool)`` or ``.value`` to get the plain bool, or compare it
    directly with a bool (``lexical_bool == False``) or another ``LexicalBool``.
    Instances are normally created by ``parse``; ``LexicalBool()`` is False.
    """
    value: bool = False

    def __bool__(self) -> bool:
        return self.value

    def __eq__(self, other):
        if isinstance(other, LexicalBool):
            return self.value == other.value
        if isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    @classmethod
    def from_str(cls, text: str) -> 'LexicalBool':
        return parse(text)


def parse(text: str) -> LexicalBool:
    """
    Parse a string as a boolean using the current thread's tokens.

    The input is lower-cased (ASCII only) and compared for exact equality with
    the truthy tokens, then with the falsey tokens. If a slot was never set,
    it is filled with the defaults for the rest of the thread's life.

    Args:
        text: The string to parse.

    Returns:
        LexicalBool(True) or LexicalBool(False).

    Raises:
        InvalidInput: If the string matches neither the truthy nor the falsey tokens.
        TypeError: If text is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f'expected a string, got {type(text).__name__}')
    lowercase_text = text.translate(_ASCII_LOWERCASE_TABLE)
    if lowercase_text in truthy_values():
        return LexicalBool(True)
    if lowercase_text in falsey_values():
        return LexicalBool(False)
    raise InvalidInput(text)


class InvalidInput(ValueError):
    """Raised when a string is neither a truthy nor a falsey token."""

    def __init__(self, text: str):
        # the message always lists the default tokens, even when custom ones are configured
        allowed = ', '.join(f"'{value}''" for value in ALL_BOOLEAN_VALUES)
        super().__init__(f'not a boolean: {text}. only {allowed} are allowed')
        self.input = text

    def __reduce__(self):
        return InvalidInput, (self.input,)

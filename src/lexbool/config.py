# src/lexbool/config.py
"""Default boolean tokens and the token snapshot used by the DataFrame parsers."""

import dataclasses

# Default truthy/falsey values (lowercase)
TRUTHY_VALUES = ('true', 't', '1', 'yes')
FALSEY_VALUES = ('false', 'f', '0', 'no')
ALL_BOOLEAN_VALUES = TRUTHY_VALUES + FALSEY_VALUES


@dataclasses.dataclass(slots=True, frozen=True)
class BooleanTokens:
    """Truthy and falsey tokens captured from one thread's configuration."""
    truthy: tuple[str, ...] = TRUTHY_VALUES
    falsey: tuple[str, ...] = FALSEY_VALUES

    @classmethod
    def current(cls) -> 'BooleanTokens':
        """
        Snapshot the tokens of the calling thread.

        Unset slots are filled with the defaults, exactly as a parse would do,
        so after this call neither slot can be reconfigured in this thread.
        """
        from .context import truthy_values, falsey_values

        return cls(truthy=truthy_values(), falsey=falsey_values())

    def all_values(self) -> tuple[str, ...]:
        return self.truthy + self.falsey

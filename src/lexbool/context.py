# src/lexbool/context.py
"""
Write-once truthy/falsey configuration, scoped to the current thread.

Each thread starts with both slots unset. A slot is filled either by an
explicit ``set_truthy_values``/``set_falsey_values`` call or, failing that,
with the defaults the first time a parse needs it. Whichever happens first
wins; the slot never changes again for the life of the thread.
"""

import logging
import threading
from typing import Any, Iterable

from .config import TRUTHY_VALUES, FALSEY_VALUES

logger = logging.getLogger(__name__)


class _TokenSlots(threading.local):
    """Per-thread slots. ``None`` marks a slot that was never set."""

    def __init__(self):
        self.truthy: tuple[str, ...] | None = None
        self.falsey: tuple[str, ...] | None = None


_slots = _TokenSlots()


def _set_once(slot_name: str, values: Iterable[Any]) -> bool:
    thread_name = threading.current_thread().name
    if getattr(_slots, slot_name) is not None:
        logger.debug(f'{slot_name} values already set in {thread_name}, ignoring new values')
        return False
    tokens = tuple(str(value) for value in values)
    setattr(_slots, slot_name, tokens)
    logger.debug(f'{slot_name} values set to {tokens} in {thread_name}')
    return True


def _get_or_default(slot_name: str, defaults: tuple[str, ...]) -> tuple[str, ...]:
    tokens = getattr(_slots, slot_name)
    if tokens is None:
        tokens = tuple(defaults)
        setattr(_slots, slot_name, tokens)
        logger.debug(f'{slot_name} values defaulted to {tokens} in {threading.current_thread().name}')
    return tokens


def set_truthy_values(values: Iterable[Any]) -> bool:
    """
    Set the truthy tokens for the current thread.

    Every item is converted with ``str()``. Items are stored as given, they are
    not lower-cased, so a token containing upper case letters never matches.

    Args:
        values: Iterable of items to use as truthy tokens.

    Returns:
        True if the tokens were stored, False if the slot was already set
        (explicitly or by a parse that fell back to the defaults).
    """
    return _set_once('truthy', values)


def set_falsey_values(values: Iterable[Any]) -> bool:
    """
    Set the falsey tokens for the current thread.

    Behaves like ``set_truthy_values`` and is independent of it.
    """
    return _set_once('falsey', values)


def truthy_values() -> tuple[str, ...]:
    """Return the truthy tokens of the current thread, defaulting the slot if unset."""
    return _get_or_default('truthy', TRUTHY_VALUES)


def falsey_values() -> tuple[str, ...]:
    """Return the falsey tokens of the current thread, defaulting the slot if unset."""
    return _get_or_default('falsey', FALSEY_VALUES)

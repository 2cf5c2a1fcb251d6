"""Shared test utilities for thread-scoped token configuration."""
import unittest
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable


class ContextTestCase(unittest.TestCase):
    """Base class for tests that need an unconfigured thread.

    Token slots are write-once per thread, so any test that configures tokens
    runs its body on a brand new thread instead of the test runner's thread.
    """

    def run_in_fresh_context(self, function: Callable[..., Any], *args) -> Any:
        """Run function on a new thread and return its result, re-raising its errors."""
        with ThreadPoolExecutor(max_workers=1) as executor:
            return executor.submit(function, *args).result()

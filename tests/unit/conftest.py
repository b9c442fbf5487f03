"""Unit test fixtures.

Most helpers are in tests/conftest.py.
"""

# Re-export commonly used helpers from root conftest
from tests.conftest import run_cmd

__all__ = ["run_cmd"]

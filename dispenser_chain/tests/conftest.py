"""
Pytest configuration for dispense chain tests.

This conftest.py adds the repository root to sys.path so that tests
can import the package without installing it, and provides shared
chain fixtures.
"""

import sys
from pathlib import Path

import pytest


# Add the repository root to sys.path for proper imports
repo_root = Path(__file__).parent.parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from dispenser_chain.application.dispense_service import DispenseService  # noqa: E402
from dispenser_chain.domain.chain import build_chain  # noqa: E402


@pytest.fixture
def default_chain():
    """Reference chain: 1000 -> 500 -> 100."""
    return build_chain((1000, 500, 100))


@pytest.fixture
def extended_chain():
    """Reference chain with the 20 handler appended."""
    return build_chain((1000, 500, 100, 20))


@pytest.fixture
def peso20_chain():
    """Chain holding only the 20 handler."""
    return build_chain((20,))


@pytest.fixture
def service(default_chain):
    """Dispense service over the reference chain, granularity 10."""
    return DispenseService(default_chain, granularity=10)

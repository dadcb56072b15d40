"""
This module contains shared fixtures for testing.
"""

from pathlib import Path

import pytest

from readdata.options import reset_readdata_options


@pytest.fixture
def test_data_path() -> Path:
    """Path to the test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture(autouse=True)
def _reset_options():
    """Restore package options after every test."""
    yield
    reset_readdata_options()


@pytest.fixture
def callback_calls() -> list[tuple]:
    """A list collecting the arguments of every callback invocation."""
    return []


@pytest.fixture
def callback(callback_calls):
    """A node-style callback recording how it was called."""

    def _callback(*args):
        callback_calls.append(args)

    return _callback

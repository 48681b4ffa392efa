"""Pytest configuration and fixtures for TMR voting tests."""

import random

import pytest


PAPER_RELIABILITIES = (0.9, 0.5, 0.2)


@pytest.fixture
def rng():
    """Fresh seeded generator per test."""
    return random.Random(1234)


@pytest.fixture
def reliabilities():
    """The reliability vector used by the CLI."""
    return PAPER_RELIABILITIES

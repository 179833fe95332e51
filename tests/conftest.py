"""Shared pytest fixtures for the complex value tests."""

from __future__ import annotations

import pytest

from complex import Complex
from id_counter import IdCounter


@pytest.fixture
def counter() -> IdCounter:
    """A private id sequence starting at 0, isolated from other tests."""
    return IdCounter()


@pytest.fixture
def make(counter: IdCounter):
    """Build values on the test's own counter."""

    def _make(re=0, im=0) -> Complex:
        return Complex(re, im, counter=counter)

    return _make

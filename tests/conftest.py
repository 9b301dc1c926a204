"""Shared fixtures for decimal-bigint tests."""
from __future__ import annotations

import pytest

from calculator import Calculator
from factory import ArithmeticFactory
from modes import FAITHFUL, FAST, TINY


@pytest.fixture
def calc() -> Calculator:
    return Calculator(FAST)


@pytest.fixture
def faithful_calc() -> Calculator:
    """A repeated-addition calculator that has passed every contract on TINY."""
    return ArithmeticFactory.create(FAITHFUL, bounds=TINY)

from __future__ import annotations

import pytest


class CountingFunction:
    """Wraps a scalar function and records every argument it is called with."""

    def __init__(self, func):
        self.func = func
        self.calls = []

    def __call__(self, x):
        self.calls.append(x)
        return self.func(x)


@pytest.fixture
def square():
    return CountingFunction(lambda x: x * x)


@pytest.fixture
def constant_five():
    return CountingFunction(lambda x: 5.0)

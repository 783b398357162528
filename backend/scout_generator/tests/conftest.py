from __future__ import annotations

from typing import Iterable, List

import pytest


class ScriptedRandomSource:
    """Returns the given values in order; fails loudly when it runs out."""

    def __init__(self, values: Iterable[float]) -> None:
        self.values: List[float] = list(values)
        self.calls = 0

    def random(self) -> float:
        if self.calls >= len(self.values):
            raise AssertionError(f"Random source exhausted after {self.calls} draws")
        value = self.values[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def scripted():
    return ScriptedRandomSource

# Project root on sys.path plus shared randomness helpers for tests
import random
import sys, pathlib
root = pathlib.Path(__file__).resolve().parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

import pytest


class ScriptedRandom(random.Random):
    """random.Random whose random()/choice() results can be queued up front.

    Once a queue runs dry the seeded generator takes over.
    """
    def __init__(self, rolls=(), picks=(), seed=0):
        super().__init__(seed)
        self.rolls = list(rolls)
        self.picks = list(picks)

    def random(self):
        if self.rolls:
            return self.rolls.pop(0)
        return super().random()

    def choice(self, seq):
        if self.picks:
            return seq[self.picks.pop(0)]
        return super().choice(seq)


class FakeClock:
    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, dt: float) -> float:
        self.now += dt
        return self.now


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def clock():
    return FakeClock()

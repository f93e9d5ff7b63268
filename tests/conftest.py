import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from labyrinth.dungeon import Dungeon, DungeonConfig  # noqa: E402
from labyrinth.session import Player, Session  # noqa: E402


class FirstChoiceRng:
    """Stand-in RNG: always the first candidate, never a secret door, stairs at (0,0)."""

    def choice(self, seq):
        return seq[0]

    def random(self):
        return 0.99

    def randrange(self, n):
        return 0


class LastChoiceRng(FirstChoiceRng):
    def choice(self, seq):
        return seq[-1]


@pytest.fixture
def first_choice_rng():
    return FirstChoiceRng()


@pytest.fixture
def last_choice_rng():
    return LastChoiceRng()


@pytest.fixture
def scripted_session():
    """3x3x3 dungeon carved with FirstChoiceRng; every staircase sits on (0,0)."""
    d = Dungeon(DungeonConfig(width=3, height=3, floors=3, view_radius=1), rng=FirstChoiceRng())
    return Session(dungeon=d, view_radius=1, player=Player(0, 0, 0))


@pytest.fixture
def seeded_session():
    def make(seed=1234, size=(8, 6, 3), radius=2, secret=0.10):
        cfg = DungeonConfig(
            width=size[0], height=size[1], floors=size[2], view_radius=radius, secret_door_chance=secret, seed=seed
        )
        return Session.start(cfg)

    return make


@pytest.fixture
def rng():
    return random.Random(20240917)


@pytest.fixture(autouse=True)
def _isolate_environ():
    """Undo env mutations (e.g. from .env loading in CLI tests) after each test."""
    saved = dict(os.environ)
    yield
    os.environ.clear()
    os.environ.update(saved)


def pytest_configure(config):  # register custom marker
    config.addinivalue_line("markers", "structure: structural invariant checks over generated dungeons")

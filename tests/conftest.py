import os
import sys
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from records import MemoryRecordStore
from game import GameStateMachine


@pytest.fixture
def store():
    return MemoryRecordStore()


@pytest.fixture
def game(store):
    return GameStateMachine(store, rng=random.Random(1234))

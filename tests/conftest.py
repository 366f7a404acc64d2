import os
import sys
from pathlib import Path

import pytest

# pygame surfaces without a real display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Ensure the repo root is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from stick_brawlers.ai.policy import OpponentPolicy  # noqa: E402
from stick_brawlers.core.match import MatchController, MatchView  # noqa: E402
from stick_brawlers.core.scheduler import Scheduler  # noqa: E402


class RecordingView(MatchView):
    """Keeps every projection the controller makes"""

    def __init__(self):
        self.frames = 0
        self.health = []
        self.times = []
        self.status = []
        self.status_visible = True

    def draw_frame(self, player, opponent):
        self.frames += 1

    def set_health(self, is_player, health):
        self.health.append((is_player, health))

    def set_time(self, seconds):
        self.times.append(seconds)

    def show_status(self, label):
        self.status.append(label)
        self.status_visible = True

    def hide_status(self):
        self.status_visible = False


class FixedRandom:
    """Stand-in for random.Random that always returns the same sample"""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def controller(scheduler, view):
    """Match controller whose opponent never attacks on its own"""
    return MatchController(scheduler, view=view, policy=OpponentPolicy(attack_chance=0.0))


@pytest.fixture
def aggressive_controller(scheduler, view):
    """Opponent attacks whenever it is not already mid-attack"""
    policy = OpponentPolicy(rng=FixedRandom(0.0))
    return MatchController(scheduler, view=view, policy=policy)

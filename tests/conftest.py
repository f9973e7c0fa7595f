import os
import random
import sys
from pathlib import Path

import pytest

# Headless Qt for widget tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import group_generator
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from group_generator.config import AppConfig  # noqa: E402


class IdentityShuffle(random.Random):
    """Random source whose shuffle leaves the order unchanged."""

    def shuffle(self, x):
        return None


class ReverseShuffle(random.Random):
    """Random source whose shuffle reverses the sequence."""

    def shuffle(self, x):
        x.reverse()


class FixedNamer:
    """Namer that labels groups "Team 1", "Team 2", ..."""

    def name_group(self, index: int) -> str:
        return f"Team {index + 1}"


# Common test fixtures
@pytest.fixture
def names() -> list[str]:
    """Five present students."""
    return ["A", "B", "C", "D", "E"]


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def identity_rng() -> IdentityShuffle:
    return IdentityShuffle()


@pytest.fixture
def reverse_rng() -> ReverseShuffle:
    return ReverseShuffle()


@pytest.fixture
def fixed_namer() -> FixedNamer:
    return FixedNamer()


@pytest.fixture
def config() -> AppConfig:
    """Small roster, no reveal delay."""
    return AppConfig(
        students=("Ana", "Ben", "Cy", "Dee", "Eli", "Fay", "Gus"),
        default_group_size=3,
        reveal_delay_ms=0,
        dark_mode=True,
    )

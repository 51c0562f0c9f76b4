"""Shared pytest fixtures and state factories for the rover tests."""

import random

import pytest

from rover.entities.rover import Rover
from rover.utils.enums import Heading
from rover.utils.types import RoverState


def make_state(x: int = 0, y: int = 0, heading: Heading = Heading.NORTH) -> RoverState:
    """Create a RoverState with sensible defaults."""
    return RoverState.at(x, y, heading)


@pytest.fixture
def origin() -> RoverState:
    """Rover at 0 0 N."""
    return make_state()


@pytest.fixture
def rover() -> Rover:
    """Stateful rover starting at 1 2 N."""
    return Rover("1 2 N")


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic RNG for placement tests."""
    return random.Random(1234)

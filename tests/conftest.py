"""Pytest fixtures for all tests."""

import io
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from config import Config, SimulationConfig
from game.ball import Ball
from game.logger import LogLevel, StructuredLogger
from game.paddle import Paddle, Side
from game.world import World


@pytest.fixture(autouse=True)
def log_stream():
    """Route structured logs into a buffer for every test."""
    stream = io.StringIO()
    StructuredLogger.configure(min_level=LogLevel.DEBUG, stream=stream)
    return stream


@pytest.fixture
def sim_config():
    """Single-paddle field matching the reference window."""
    return SimulationConfig(field_width=800, field_height=600, paddle_count=1)


@pytest.fixture
def duel_config():
    """Two paddles, opponent held still."""
    return SimulationConfig(paddle_count=2, opponent="idle")


@pytest.fixture
def world(sim_config):
    return World(sim_config)


@pytest.fixture
def duel_world(duel_config):
    return World(duel_config)


@pytest.fixture
def paddle():
    """Left paddle on a 400-high field."""
    return Paddle(x=0, y=100, width=32, height=128, side=Side.LEFT, speed=2, field_top=0, field_bottom=400)


@pytest.fixture
def ball():
    """Ball guarded by a left paddle at x=32, wall on the right."""
    return Ball(x=400, y=300, vx=-3, vy=2, radius=4, left_limit=32, right_limit=800,
                field_top=0, field_bottom=600, walls=[Side.RIGHT])


@pytest.fixture
def config():
    return Config(SimulationConfig(max_catch_up_steps=0))

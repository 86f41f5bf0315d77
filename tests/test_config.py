"""Tests for configuration defaults and validation."""

from dataclasses import replace

import pytest

from pong.config import DEFAULT_CONFIG, LAUNCH_RANDOM, GameConfig


def test_defaults():
    c = DEFAULT_CONFIG
    assert (c.width, c.height) == (1280, 720)
    assert (c.paddle_width, c.paddle_height, c.paddle_speed) == (20, 200, 1000)
    assert (c.ball_width, c.ball_height, c.ball_speed) == (20, 20, 200)
    assert c.launch == "fixed"


def test_derived_positions():
    c = DEFAULT_CONFIG
    assert c.paddle1_x == 30
    assert c.paddle2_x == 1230
    assert c.paddle1_y == 30
    assert c.paddle2_y == 490
    assert c.ball_center == (630, 350)


def test_config_is_frozen():
    with pytest.raises(Exception):
        DEFAULT_CONFIG.width = 10


def test_replace_variant():
    c = replace(DEFAULT_CONFIG, launch=LAUNCH_RANDOM)
    assert c.launch == "random"
    assert c.width == DEFAULT_CONFIG.width


@pytest.mark.parametrize("kwargs", [
    {"width": 0},
    {"paddle_height": -1},
    {"paddle_height": 800},
    {"ball_speed": -5},
    {"ball_speedup": 0},
    {"launch": "sideways"},
    {"width": 60},
    {"fps": 0},
])
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_full_height_paddles_allowed():
    c = GameConfig(paddle_height=720, paddle_offset=0)
    assert c.paddle1_y == 0
    assert c.paddle2_y == 0

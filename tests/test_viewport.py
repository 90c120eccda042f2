"""Tests for wheel-zoom arithmetic."""

import math
import random

import pytest

from config import ZOOM_PRESETS, ZoomConfig, ZoomProfile
from session import ViewportState
from viewer.viewport import ViewportController, clamp, damping, next_scale

DAMPED = ZOOM_PRESETS["damped"]
PROPORTIONAL = ZOOM_PRESETS["proportional"]


class TestNextScale:

    def test_wheel_up_from_one(self):
        # 1 + 100 * 0.04 * (1 - 0.3)
        assert next_scale(1.0, -100.0, DAMPED) == pytest.approx(3.8)

    def test_wheel_down_at_minimum(self):
        assert next_scale(1.0, 100.0, DAMPED) == 1.0

    def test_clamped_at_maximum(self):
        assert next_scale(15.0, -1000.0, DAMPED) == 16.0

    def test_zero_delta(self):
        assert next_scale(4.2, 0.0, DAMPED) == 4.2

    def test_damping_per_profile(self):
        assert damping(2.0, DAMPED) == pytest.approx(1.7)
        assert damping(2.0, PROPORTIONAL) == 2.0

    def test_proportional_step(self):
        # 5 + 100 * 0.001 * 5
        assert next_scale(5.0, -100.0, PROPORTIONAL) == pytest.approx(5.5)
        assert next_scale(5.0, 100.0, PROPORTIONAL) == pytest.approx(4.5)

    def test_non_finite_delta_ignored(self):
        for delta in (float("nan"), float("inf"), float("-inf")):
            assert next_scale(3.0, delta, DAMPED) == 3.0

    def test_direction(self):
        for scale in (1.0, 2.0, 8.0, 15.9):
            assert next_scale(scale, -1.0, DAMPED) >= scale
            assert next_scale(scale, 1.0, DAMPED) <= scale

    def test_stays_in_bounds_over_random_sequences(self):
        rng = random.Random(7)
        for zoom in (DAMPED, PROPORTIONAL):
            scale = zoom.initial_scale
            for _ in range(2000):
                scale = next_scale(scale, rng.uniform(-500.0, 500.0), zoom)
                assert zoom.min_scale <= scale <= zoom.max_scale
                assert math.isfinite(scale)

    def test_clamp(self):
        assert clamp(0.5, 1.0, 16.0) == 1.0
        assert clamp(20.0, 1.0, 16.0) == 16.0
        assert clamp(3.0, 1.0, 16.0) == 3.0


class TestViewportController:

    def setup_method(self):
        self.state = ViewportState(scale=1.0)
        self.viewport = ViewportController(self.state, DAMPED)

    def test_zoom_updates_state(self):
        new_scale = self.viewport.zoom(-100.0)
        assert new_scale == pytest.approx(3.8)
        assert self.state.scale == new_scale
        assert self.viewport.scale == new_scale

    def test_zoom_accumulates(self):
        self.viewport.zoom(-10.0)
        first = self.state.scale
        self.viewport.zoom(-10.0)
        assert self.state.scale > first

    def test_custom_config(self):
        zoom = ZoomConfig(
            profile=ZoomProfile.PROPORTIONAL,
            sensitivity=0.01,
            min_scale=0.5,
            max_scale=2.0,
            initial_scale=1.0,
        )
        viewport = ViewportController(ViewportState(scale=1.0), zoom)
        assert viewport.zoom(-1000.0) == 2.0
        assert viewport.zoom(1000.0) == 0.5

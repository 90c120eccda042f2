"""
Central configuration for the Rose tiling viewer.
All core constants and environment-driven settings live here.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings


class ZoomProfile(str, Enum):
    """How zoom velocity depends on the current scale."""
    DAMPED = "damped"              # velocity ∝ (scale - baseline)
    PROPORTIONAL = "proportional"  # velocity ∝ scale


class ColorMode(str, Enum):
    """Which engine call shape the controller uses."""
    NAMED_SCHEME = "named-scheme"
    TWO_COLOR_DIRECT = "two-color-direct"


class ZoomConfig(BaseModel):
    """Constants of the wheel-zoom formula."""
    profile: ZoomProfile = ZoomProfile.DAMPED
    sensitivity: float = 0.04
    baseline: float = 0.3
    min_scale: float = 1.0
    max_scale: float = 16.0
    initial_scale: float = 1.0

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_bounds(self) -> ZoomConfig:
        if self.sensitivity <= 0.0:
            raise ValueError("sensitivity must be positive")
        if not self.min_scale <= self.initial_scale <= self.max_scale:
            raise ValueError(
                f"initial_scale {self.initial_scale} outside "
                f"[{self.min_scale}, {self.max_scale}]"
            )
        if self.profile is ZoomProfile.DAMPED and self.min_scale <= self.baseline:
            # Below the baseline the damping factor flips sign and the
            # wheel direction would invert.
            raise ValueError("damped profile requires min_scale > baseline")
        if self.profile is ZoomProfile.PROPORTIONAL and self.min_scale <= 0.0:
            raise ValueError("proportional profile requires min_scale > 0")
        return self


# Presets observed in the two shipped controller variants
ZOOM_PRESETS: dict[str, ZoomConfig] = {
    "damped": ZoomConfig(
        profile=ZoomProfile.DAMPED,
        sensitivity=0.04,
        baseline=0.3,
        min_scale=1.0,
        max_scale=16.0,
        initial_scale=1.0,
    ),
    "proportional": ZoomConfig(
        profile=ZoomProfile.PROPORTIONAL,
        sensitivity=0.001,
        baseline=0.0,
        min_scale=1.0,
        max_scale=300.0,
        initial_scale=5.0,
    ),
}


class ViewerProfile(BaseModel):
    """Everything that used to differ between the forked controllers."""
    color_mode: ColorMode = ColorMode.NAMED_SCHEME
    zoom: ZoomConfig = ZOOM_PRESETS["damped"]

    model_config = {"frozen": True}


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    # ── Input defaults ──────────────────────────────────────────────
    DEFAULT_NUM_GENERATIONS: int = 5
    DEFAULT_SEED: str = "rose"
    DEFAULT_COLOR_SCHEME: str = "red"
    DEFAULT_STROKE_WIDTH: float = 2.0
    DEFAULT_DRAW_TRIANGLES: bool = False
    DEFAULT_DRAW_ARCS: bool = False

    # ── Viewer profile ──────────────────────────────────────────────
    COLOR_MODE: ColorMode = ColorMode.NAMED_SCHEME
    ZOOM_PRESET: str = "damped"  # "damped" | "proportional"
    ZOOM_SENSITIVITY: Optional[float] = None
    ZOOM_BASELINE: Optional[float] = None
    MIN_SCALE: Optional[float] = None
    MAX_SCALE: Optional[float] = None
    INITIAL_SCALE: Optional[float] = None

    # ── Engine ──────────────────────────────────────────────────────
    VIEW_BOX_WIDTH: int = 1000
    VIEW_BOX_HEIGHT: int = 1000
    SEED_SCALE: float = 100.0
    MAX_GENERATIONS: int = 10  # output grows ~2.6x per generation

    # ── UI ──────────────────────────────────────────────────────────
    VIEWPORT_HEIGHT: int = 640

    # ── Logging ─────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[Path] = None

    @model_validator(mode="after")
    def _check_preset(self) -> Settings:
        if self.ZOOM_PRESET not in ZOOM_PRESETS:
            raise ValueError(
                f"Unknown ZOOM_PRESET {self.ZOOM_PRESET!r}; "
                f"expected one of {sorted(ZOOM_PRESETS)}"
            )
        return self

    def zoom_config(self) -> ZoomConfig:
        """Preset with any explicit overrides applied (re-validated)."""
        preset = ZOOM_PRESETS[self.ZOOM_PRESET]
        overrides = {
            "sensitivity": self.ZOOM_SENSITIVITY,
            "baseline": self.ZOOM_BASELINE,
            "min_scale": self.MIN_SCALE,
            "max_scale": self.MAX_SCALE,
            "initial_scale": self.INITIAL_SCALE,
        }
        data = preset.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return ZoomConfig(**data)

    def viewer_profile(self) -> ViewerProfile:
        return ViewerProfile(color_mode=self.COLOR_MODE, zoom=self.zoom_config())

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


# Singleton instance
settings = Settings()

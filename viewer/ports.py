"""
Display port — the only way the controller touches the UI.

The controller reads input fields and writes markup / transforms through
this interface, so it can run against ``InMemoryDisplay`` in tests and
against the Streamlit adapter in the app.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

from errors import ViewerError


class FieldId:
    """Stable identifiers of the UI surface."""
    NUM_GENERATIONS = "input-num-generations"
    SEED = "input-seed"
    COLOR_SCHEME = "input-color-scheme"
    STROKE_WIDTH = "input-stroke-width"
    DRAW_TRIANGLES = "input-draw-triangles"
    DRAW_ARCS = "input-draw-arcs"
    GENERATE_BUTTON = "button-generate"
    SVG_CONTAINER = "svg-container"

    INPUTS = (
        NUM_GENERATIONS,
        SEED,
        COLOR_SCHEME,
        STROKE_WIDTH,
        DRAW_TRIANGLES,
        DRAW_ARCS,
    )


@dataclass
class WheelEvent:
    """A wheel tick over the display container."""
    delta_y: float
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class DisplayPort(Protocol):
    def get_value(self, field_id: str) -> Any: ...

    def set_markup(self, container_id: str, markup: str) -> None:
        """Replace the container's whole content; drops any transform."""

    def set_transform(self, container_id: str, scale: float) -> None:
        """Scale the container's root node."""

    def report(self, error: ViewerError) -> None:
        """Surface a failure to the user."""


@dataclass
class InMemoryDisplay:
    """Dictionary-backed display surface."""
    values: dict[str, Any] = field(default_factory=dict)
    markup: dict[str, str] = field(default_factory=dict)
    transforms: dict[str, float] = field(default_factory=dict)
    errors: list[ViewerError] = field(default_factory=list)
    markup_writes: int = 0

    def get_value(self, field_id: str) -> Any:
        return self.values.get(field_id)

    def set_markup(self, container_id: str, markup: str) -> None:
        self.markup[container_id] = markup
        # The old root node is gone, and its transform with it
        self.transforms.pop(container_id, None)
        self.markup_writes += 1

    def set_transform(self, container_id: str, scale: float) -> None:
        self.transforms[container_id] = scale

    def report(self, error: ViewerError) -> None:
        self.errors.append(error)

    def transform_of(self, container_id: str) -> Optional[float]:
        return self.transforms.get(container_id)

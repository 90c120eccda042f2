"""Viewer — input reading, zoom and render mounting behind a display port."""

from viewer.mount import RenderedArtifact, RenderMount
from viewer.ports import DisplayPort, FieldId, InMemoryDisplay, WheelEvent
from viewer.reader import ParameterReader, Parameters
from viewer.viewport import ViewportController, next_scale

__all__ = [
    "RenderedArtifact",
    "RenderMount",
    "DisplayPort",
    "FieldId",
    "InMemoryDisplay",
    "WheelEvent",
    "ParameterReader",
    "Parameters",
    "ViewportController",
    "next_scale",
]

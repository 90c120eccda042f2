"""
``svg_viewport`` — bidirectional Streamlit component for the display container.

Python → browser: the mounted markup, its mount id and the current scale.
The frontend swaps the container content only when the mount id changes,
and always re-applies ``transform: scale(...)`` to the root element.

Browser → Python: wheel events. The frontend suppresses default scrolling
and reports ``{"page": token, "events": [{"seq": n, "delta_y": dy}, ...]}``
holding the most recent events; ``pending_wheel_events`` picks out the ones
not yet applied.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Optional

import streamlit.components.v1 as components

_FRONTEND_DIR = Path(__file__).parent / "frontend"
_COMPONENT = None


def _ensure_component():
    global _COMPONENT
    if _COMPONENT is None:
        _COMPONENT = components.declare_component("svg_viewport", path=str(_FRONTEND_DIR))
    return _COMPONENT


def svg_viewport(
    markup: Optional[str],
    scale: float,
    mount_id: int,
    height: int,
    key: str,
) -> Optional[dict[str, Any]]:
    """Render the viewport; returns the latest wheel report (or None)."""
    component = _ensure_component()
    return component(
        markup=markup or "",
        scale=scale,
        mount_id=mount_id,
        height=height,
        key=key,
        default=None,
    )


def pending_wheel_events(
    report: Optional[dict[str, Any]],
    cursor: Optional[tuple[str, int]],
) -> tuple[list[float], Optional[tuple[str, int]]]:
    """
    Wheel deltas in ``report`` newer than ``cursor``, and the advanced cursor.

    The cursor is ``(page token, last applied seq)``. A new page token means
    the frontend was reloaded and its sequence numbers restarted.
    """
    if not report or not isinstance(report, dict):
        return [], cursor

    page = str(report.get("page", ""))
    last_seq = cursor[1] if cursor and cursor[0] == page else 0

    fresh: list[tuple[int, float]] = []
    for event in report.get("events") or []:
        try:
            seq = int(event["seq"])
            delta = float(event["delta_y"])
        except (KeyError, TypeError, ValueError):
            continue
        if seq > last_seq and math.isfinite(delta):
            fresh.append((seq, delta))

    if not fresh:
        return [], (page, last_seq)
    fresh.sort()
    return [delta for _, delta in fresh], (page, fresh[-1][0])

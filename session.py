"""
Viewer session state.

One ``ViewerSession`` per viewer instance: the zoom state, the in-flight
flag for generate requests and a few counters for the status line. Nothing
here is persisted.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Optional

from errors import ViewerError


@dataclass
class ViewportState:
    """Current zoom factor of the mounted artifact."""
    scale: float


@dataclass
class ViewerSession:
    """State shared by the generate and wheel flows of one viewer."""
    viewport: ViewportState
    session_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    started_at: float = field(default_factory=time.time)
    generating: bool = False
    generate_count: int = 0
    failure_count: int = 0
    last_error: Optional[ViewerError] = None
    last_params: dict[str, Any] = field(default_factory=dict)

    def record_success(self, params: dict[str, Any]) -> None:
        self.generate_count += 1
        self.last_params = params
        self.last_error = None

    def record_failure(self, error: ViewerError) -> None:
        self.failure_count += 1
        self.last_error = error

    def summary(self) -> dict[str, Any]:
        return {
            "session_id": self.session_id,
            "started_at": self.started_at,
            "scale": self.viewport.scale,
            "generate_count": self.generate_count,
            "failure_count": self.failure_count,
            "last_error": None if self.last_error is None else self.last_error.user_message,
            "last_params": self.last_params,
        }

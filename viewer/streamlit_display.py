"""
Streamlit implementation of the display port.

Input values are the widget values Streamlit keeps in ``st.session_state``
under the ``FieldId`` keys. Markup, transform and reported errors are
written back into session state, and the page renders them on each run.
"""

from __future__ import annotations

from typing import Any, MutableMapping, Optional

import streamlit as st

from errors import ViewerError

ERRORS_KEY = "viewer_errors"


def markup_key(container_id: str) -> str:
    return f"{container_id}:markup"


def scale_key(container_id: str) -> str:
    return f"{container_id}:scale"


class StreamlitDisplay:
    """Display port backed by Streamlit session state."""

    def __init__(self, state: Optional[MutableMapping[str, Any]] = None):
        self._state = st.session_state if state is None else state

    def get_value(self, field_id: str) -> Any:
        return self._state.get(field_id)

    def set_markup(self, container_id: str, markup: str) -> None:
        self._state[markup_key(container_id)] = markup
        self._state.pop(scale_key(container_id), None)

    def set_transform(self, container_id: str, scale: float) -> None:
        self._state[scale_key(container_id)] = scale

    def report(self, error: ViewerError) -> None:
        pending = list(self._state.get(ERRORS_KEY) or [])
        pending.append(error.user_message)
        self._state[ERRORS_KEY] = pending

    # ── Read side, used by the page ──────────────────────────────────

    def markup(self, container_id: str) -> Optional[str]:
        return self._state.get(markup_key(container_id))

    def scale(self, container_id: str) -> Optional[float]:
        return self._state.get(scale_key(container_id))

    def drain_errors(self) -> list[str]:
        """Messages reported since the last call."""
        pending = list(self._state.get(ERRORS_KEY) or [])
        self._state[ERRORS_KEY] = []
        return pending

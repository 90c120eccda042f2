"""
Failure types for the generate pipeline.

Each kind is raised where it is detected (reader, palette catalog, engine)
and caught at the controller boundary, which reports it and keeps the last
good artifact on screen.
"""

from __future__ import annotations

from typing import Any, Iterable


class ViewerError(Exception):
    """Base class for failures that are reported to the user."""

    kind: str = "error"

    @property
    def user_message(self) -> str:
        return str(self)


class InputCoercionError(ViewerError, ValueError):
    """A numeric input field holds text that does not parse as a number."""

    kind = "input"

    def __init__(self, field_id: str, raw_value: Any, reason: str = "is not a number"):
        self.field_id = field_id
        self.raw_value = raw_value
        self.reason = reason
        super().__init__(f"Field {field_id!r}: {raw_value!r} {reason}")


class UnknownPaletteError(ViewerError, KeyError):
    """A color-scheme key that is not in the static catalog."""

    kind = "palette"

    def __init__(self, key: str, known: Iterable[str] = ()):
        self.key = key
        self.known = tuple(known)
        super().__init__(key)

    def __str__(self) -> str:
        # KeyError would repr() the single argument
        msg = f"Unknown color scheme {self.key!r}"
        if self.known:
            msg += f" (available: {', '.join(self.known)})"
        return msg


class EngineFault(ViewerError):
    """The generation engine rejected its inputs or failed."""

    kind = "engine"

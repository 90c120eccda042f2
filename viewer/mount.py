"""Puts generated markup on screen and keeps its zoom transform current."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from viewer.ports import DisplayPort, FieldId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedArtifact:
    """The markup currently on screen."""
    markup: str
    mount_id: int  # 1 for the first mount of a session, then increasing

    @property
    def size(self) -> int:
        return len(self.markup)


class RenderMount:
    """
    Single owner of the display container's content.

    Mounting replaces the whole content in one ``set_markup`` call, which
    discards the old root and its transform, so the current scale is always
    applied again right after.
    """

    def __init__(self, display: DisplayPort, container_id: str = FieldId.SVG_CONTAINER):
        self.display = display
        self.container_id = container_id
        self._artifact: Optional[RenderedArtifact] = None
        self._mounts = 0

    @property
    def artifact(self) -> Optional[RenderedArtifact]:
        return self._artifact

    def mount(self, markup: str, scale: float) -> RenderedArtifact:
        self._mounts += 1
        artifact = RenderedArtifact(markup=markup, mount_id=self._mounts)
        self.display.set_markup(self.container_id, markup)
        self._artifact = artifact
        self.display.set_transform(self.container_id, scale)
        logger.debug("Mounted artifact #%d (%d chars) at scale %.4f",
                     artifact.mount_id, artifact.size, scale)
        return artifact

    def retransform(self, scale: float) -> None:
        if self._artifact is None:
            # Nothing mounted yet, so there is no root node to scale
            return
        self.display.set_transform(self.container_id, scale)

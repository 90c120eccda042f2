"""Tests for the render mount."""

from viewer.mount import RenderMount
from viewer.ports import FieldId, InMemoryDisplay

CONTAINER = FieldId.SVG_CONTAINER


class TestRenderMount:

    def setup_method(self):
        self.display = InMemoryDisplay()
        self.mount = RenderMount(self.display)

    def test_nothing_mounted_initially(self):
        assert self.mount.artifact is None
        assert CONTAINER not in self.display.markup

    def test_mount_writes_markup_and_transform(self):
        artifact = self.mount.mount("<svg>A</svg>", 2.5)
        assert self.display.markup[CONTAINER] == "<svg>A</svg>"
        assert self.display.transform_of(CONTAINER) == 2.5
        assert artifact.mount_id == 1
        assert artifact.size == len("<svg>A</svg>")
        assert self.mount.artifact is artifact

    def test_transform_reapplied_after_replacement(self):
        self.mount.mount("<svg>A</svg>", 3.0)
        self.mount.retransform(4.0)
        self.mount.mount("<svg>B</svg>", 4.0)
        assert self.display.markup[CONTAINER] == "<svg>B</svg>"
        assert self.display.transform_of(CONTAINER) == 4.0
        assert self.mount.artifact.mount_id == 2

    def test_single_markup_write_per_mount(self):
        self.mount.mount("<svg>A</svg>", 1.0)
        self.mount.mount("<svg>B</svg>", 1.0)
        assert self.display.markup_writes == 2

    def test_retransform_leaves_markup(self):
        self.mount.mount("<svg>A</svg>", 1.0)
        self.mount.retransform(6.0)
        assert self.display.markup_writes == 1
        assert self.display.transform_of(CONTAINER) == 6.0

    def test_retransform_before_mount_is_noop(self):
        self.mount.retransform(6.0)
        assert self.display.transform_of(CONTAINER) is None
        assert self.mount.artifact is None

    def test_custom_container(self):
        mount = RenderMount(self.display, container_id="other")
        mount.mount("<svg/>", 1.5)
        assert self.display.transform_of("other") == 1.5
        assert CONTAINER not in self.display.markup

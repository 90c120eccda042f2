"""Tests for the viewer session record."""

from errors import EngineFault
from session import ViewerSession, ViewportState


class TestViewerSession:

    def setup_method(self):
        self.session = ViewerSession(viewport=ViewportState(scale=1.0))

    def test_defaults(self):
        assert len(self.session.session_id) == 8
        assert self.session.generating is False
        assert self.session.generate_count == 0
        assert self.session.last_error is None

    def test_ids_are_unique(self):
        other = ViewerSession(viewport=ViewportState(scale=1.0))
        assert other.session_id != self.session.session_id

    def test_success_clears_last_error(self):
        self.session.record_failure(EngineFault("bad"))
        self.session.record_success({"seed": "rose"})
        assert self.session.generate_count == 1
        assert self.session.failure_count == 1
        assert self.session.last_error is None
        assert self.session.last_params == {"seed": "rose"}

    def test_summary(self):
        self.session.viewport.scale = 2.5
        self.session.record_failure(EngineFault("bad seed"))
        summary = self.session.summary()
        assert summary["scale"] == 2.5
        assert summary["failure_count"] == 1
        assert summary["last_error"] == "bad seed"

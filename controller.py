"""
Controller — the interactive session loop.

Connects the parameter reader, palette catalog, generation engine, viewport
and render mount.

Two independent flows:
1. generate: inputs → Parameters → Palette → engine → mount (markup + scale)
2. wheel: delta → viewport zoom → transform only (the engine is never called)

The generate decision is the pure function ``plan_generate``, which returns
effects; ``ViewerController`` runs them against its display port.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional, Union

from config import ColorMode, ViewerProfile, settings
from errors import EngineFault, ViewerError
from generator.engine import GenerationEngine, TilingEngine
from generator.palettes import Palette, PaletteResolver
from session import ViewerSession, ViewportState
from viewer.mount import RenderMount
from viewer.ports import DisplayPort, WheelEvent
from viewer.reader import ParameterReader, Parameters
from viewer.viewport import ViewportController

logger = logging.getLogger(__name__)


# ── Effects ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class MountArtifact:
    markup: str
    scale: float


@dataclass(frozen=True)
class ApplyTransform:
    scale: float


@dataclass(frozen=True)
class ReportFailure:
    error: ViewerError


Effect = Union[MountArtifact, ApplyTransform, ReportFailure]


# ── Pure planning ────────────────────────────────────────────────────

def invoke_engine(
    engine: GenerationEngine,
    params: Parameters,
    palette: Palette,
    color_mode: ColorMode,
) -> str:
    """
    Call the engine with the shape matching ``color_mode``.

    Anything other than a ViewerError escaping the engine is wrapped in an
    EngineFault so the caller only has one failure family to handle.
    """
    try:
        if color_mode is ColorMode.TWO_COLOR_DIRECT:
            first, second = palette.quad_colors
            markup = engine.get_svg_two_color(
                params.num_generations, first, second, params.stroke_width
            )
        else:
            markup = engine.get_svg(
                params.num_generations,
                params.seed,
                palette,
                params.stroke_width,
                params.draw_triangles,
                params.draw_arcs,
            )
    except ViewerError:
        raise
    except Exception as e:
        logger.exception("Engine raised %s", type(e).__name__)
        raise EngineFault(f"Generation failed: {type(e).__name__}: {e}") from e

    if not isinstance(markup, str):
        raise EngineFault(f"Engine returned {type(markup).__name__}, expected markup text")
    return markup


def plan_generate(
    params: Parameters,
    resolver: PaletteResolver,
    engine: GenerationEngine,
    color_mode: ColorMode,
    scale: float,
) -> list[Effect]:
    """Decide what one generate action does, without touching the display."""
    try:
        palette = resolver.resolve(params.color_scheme)
        markup = invoke_engine(engine, params, palette, color_mode)
    except ViewerError as e:
        return [ReportFailure(e)]
    return [MountArtifact(markup=markup, scale=scale)]


# ── Controller ───────────────────────────────────────────────────────

class ViewerController:
    """
    One viewer: its session state plus the components acting on it.

    Can be driven by the Streamlit page or programmatically (tests use an
    ``InMemoryDisplay``).
    """

    def __init__(
        self,
        display: DisplayPort,
        profile: Optional[ViewerProfile] = None,
        engine: Optional[GenerationEngine] = None,
        resolver: Optional[PaletteResolver] = None,
        session_id: Optional[str] = None,
    ):
        self.display = display
        self.profile = profile or settings.viewer_profile()
        self.engine = engine or TilingEngine.from_settings()
        self.resolver = resolver or PaletteResolver()

        viewport_state = ViewportState(scale=self.profile.zoom.initial_scale)
        if session_id:
            self.session = ViewerSession(viewport=viewport_state, session_id=session_id)
        else:
            self.session = ViewerSession(viewport=viewport_state)

        self.reader = ParameterReader(display)
        self.viewport = ViewportController(self.session.viewport, self.profile.zoom)
        self.mount = RenderMount(display)

    # ── Flows ────────────────────────────────────────────────────────

    def start(self) -> bool:
        """Eager first generate so there is always something on screen."""
        logger.info(
            "Session %s started (color_mode=%s, zoom=%s, scale=%.2f)",
            self.session.session_id,
            self.profile.color_mode.value,
            self.profile.zoom.profile.value,
            self.session.viewport.scale,
        )
        return self.generate()

    def generate(self) -> bool:
        """
        Read inputs, regenerate and mount.

        Returns True when a new artifact was mounted. On failure the error is
        reported and the previous artifact and scale stay as they were.
        """
        if self.session.generating:
            logger.warning("Generate requested while another is in flight; dropped")
            return False

        self.session.generating = True
        started = time.perf_counter()
        try:
            try:
                params = self.reader.read()
            except ViewerError as e:
                return self._apply([ReportFailure(e)])

            effects = plan_generate(
                params,
                self.resolver,
                self.engine,
                self.profile.color_mode,
                self.session.viewport.scale,
            )
            mounted = self._apply(effects)
            if mounted:
                self.session.record_success(params.to_dict())
                logger.info(
                    "Generated %d chars in %.3fs (%s)",
                    self.mount.artifact.size,
                    time.perf_counter() - started,
                    params.to_dict(),
                )
            return mounted
        finally:
            self.session.generating = False

    def on_wheel(self, event: WheelEvent) -> float:
        """Zoom by one wheel event; the artifact itself is left alone."""
        event.prevent_default()
        new_scale = self.viewport.zoom(event.delta_y)
        self._apply([ApplyTransform(scale=new_scale)])
        return new_scale

    # ── Effect execution ─────────────────────────────────────────────

    def _apply(self, effects: list[Effect]) -> bool:
        """Run effects in order; True if an artifact was mounted."""
        mounted = False
        for effect in effects:
            if isinstance(effect, MountArtifact):
                self.mount.mount(effect.markup, effect.scale)
                mounted = True
            elif isinstance(effect, ApplyTransform):
                self.mount.retransform(effect.scale)
            elif isinstance(effect, ReportFailure):
                self.session.record_failure(effect.error)
                logger.warning("%s failure: %s", effect.error.kind, effect.error.user_message)
                self.display.report(effect.error)
            else:
                raise TypeError(f"Unknown effect: {effect!r}")
        return mounted

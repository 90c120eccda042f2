"""
Streamlit Page — Rose Penrose Tiling Viewer

Layout:
  Sidebar) Generation inputs + Generate button
  Main)    Zoomable SVG viewport (mouse wheel) + status line

Run with:  streamlit run app.py
"""

from __future__ import annotations

import logging

import streamlit as st

from config import settings
from controller import ViewerController
from generator.palettes import PaletteResolver
from generator.seeds import seed_names
from logging_config import setup_logging
from viewer.component import pending_wheel_events, svg_viewport
from viewer.ports import FieldId, WheelEvent
from viewer.streamlit_display import StreamlitDisplay

setup_logging(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)
logger = logging.getLogger("app")


# ── Page Config ──────────────────────────────────────────────────────
st.set_page_config(
    page_title="Rose — Penrose Tiling Viewer",
    page_icon="🌹",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ── Custom CSS ───────────────────────────────────────────────────────
st.markdown("""
<style>
    .main-header {
        background: linear-gradient(135deg, #2b0f16, #63302b, #3e2424);
        padding: 1.2rem 2rem;
        border-radius: 12px;
        margin-bottom: 1rem;
        color: white;
    }

    .main-header h1 {
        margin: 0;
        font-size: 1.6rem;
        font-weight: 700;
    }

    .main-header p {
        margin: 0.3rem 0 0 0;
        color: #e0c8c4;
        font-size: 0.9rem;
    }

    .status-line {
        color: #94a3b8;
        font-family: monospace;
        font-size: 0.8rem;
    }
</style>
""", unsafe_allow_html=True)


# ── Session State Initialization ─────────────────────────────────────

def init_session_state():
    """Initialize widget defaults and this browser session's controller."""
    defaults = {
        FieldId.NUM_GENERATIONS: settings.DEFAULT_NUM_GENERATIONS,
        FieldId.SEED: settings.DEFAULT_SEED,
        FieldId.COLOR_SCHEME: settings.DEFAULT_COLOR_SCHEME,
        FieldId.STROKE_WIDTH: float(settings.DEFAULT_STROKE_WIDTH),
        FieldId.DRAW_TRIANGLES: settings.DEFAULT_DRAW_TRIANGLES,
        FieldId.DRAW_ARCS: settings.DEFAULT_DRAW_ARCS,
        "display": None,
        "controller": None,
        "wheel_cursor": None,
    }
    for key, val in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = val

    if st.session_state.controller is None:
        display = StreamlitDisplay()
        controller = ViewerController(display)
        st.session_state.display = display
        st.session_state.controller = controller
        # Eager first render so the viewport is never empty
        controller.start()


init_session_state()
controller: ViewerController = st.session_state.controller
display: StreamlitDisplay = st.session_state.display


# ── Header ───────────────────────────────────────────────────────────

st.markdown("""
<div class="main-header">
    <h1>🌹 Rose</h1>
    <p>Penrose rhombus tilings — scroll over the image to zoom</p>
</div>
""", unsafe_allow_html=True)


# ── Sidebar ──────────────────────────────────────────────────────────

with st.sidebar:
    st.markdown("### ⚙️ Generation")

    st.number_input(
        "Generations",
        min_value=1,
        max_value=settings.MAX_GENERATIONS,
        step=1,
        key=FieldId.NUM_GENERATIONS,
        help="Decomposition steps. Each step multiplies the tile count by about 2.6.",
    )
    st.text_input(
        "Seed",
        key=FieldId.SEED,
        help=f"Starting shape: {', '.join(seed_names())}",
    )
    st.selectbox(
        "Color scheme",
        PaletteResolver().keys(),
        key=FieldId.COLOR_SCHEME,
    )
    st.number_input(
        "Stroke width",
        min_value=0.0,
        step=0.5,
        format="%.1f",
        key=FieldId.STROKE_WIDTH,
    )
    st.checkbox("Draw triangles", key=FieldId.DRAW_TRIANGLES)
    st.checkbox("Draw arcs", key=FieldId.DRAW_ARCS)

    st.button(
        "✨ Generate",
        key=FieldId.GENERATE_BUTTON,
        on_click=controller.generate,
        use_container_width=True,
        type="primary",
    )

    st.divider()

    st.markdown("### 🔍 Viewer")
    st.caption(f"**Session:** `{controller.session.session_id}`")
    st.caption(f"**Color mode:** {controller.profile.color_mode.value}")
    st.caption(
        f"**Zoom:** {controller.profile.zoom.profile.value} · "
        f"[{controller.profile.zoom.min_scale:g}, {controller.profile.zoom.max_scale:g}]"
    )


# ── Viewport ─────────────────────────────────────────────────────────

artifact = controller.mount.artifact
scale = display.scale(FieldId.SVG_CONTAINER)
if scale is None:
    scale = controller.session.viewport.scale

wheel_report = svg_viewport(
    markup=display.markup(FieldId.SVG_CONTAINER),
    scale=scale,
    mount_id=artifact.mount_id if artifact else 0,
    height=settings.VIEWPORT_HEIGHT,
    key=FieldId.SVG_CONTAINER,
)

status = f"scale {controller.session.viewport.scale:.2f}×"
if artifact:
    status += f" · render #{artifact.mount_id} · {artifact.size / 1024:.0f} KiB"
st.markdown(f'<div class="status-line">{status}</div>', unsafe_allow_html=True)


# ── Errors ───────────────────────────────────────────────────────────

for message in display.drain_errors():
    st.error(f"⚠️ {message}")


# ── Wheel Events (after layout) ──────────────────────────────────────

deltas, cursor = pending_wheel_events(wheel_report, st.session_state.wheel_cursor)
st.session_state.wheel_cursor = cursor
if deltas:
    for delta_y in deltas:
        controller.on_wheel(WheelEvent(delta_y=delta_y))
    st.rerun()

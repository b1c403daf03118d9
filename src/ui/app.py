"""
Coral Streamlit UI — main entry point.

Run with: ``streamlit run src/ui/app.py``

One session at a time: home → recording → results → home.
"""

# ---------------------------------------------------------------------------
# Ensure project root is on sys.path so ``from src.xxx`` imports work.
# Streamlit replaces sys.path[0] with the script directory (src/ui/),
# which removes the project root needed for absolute ``src.*`` imports.
# ---------------------------------------------------------------------------
import sys  # noqa: E402
from pathlib import Path  # noqa: E402

_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402

from src.core.models import Screen  # noqa: E402
from src.ui.components.recorder import render_home, render_recording  # noqa: E402
from src.ui.components.results import render_results  # noqa: E402
from src.ui.session import get_ui_controller  # noqa: E402

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Coral",
    page_icon="\U0001f399️",
    layout="centered",
)

controller = get_ui_controller()
screen = controller.state.screen

if screen == Screen.home:
    render_home(controller)
elif screen == Screen.recording:
    render_recording(controller)
else:
    render_results(controller)

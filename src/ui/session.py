"""Per-browser-session controller and haptics for the Streamlit UI."""

import streamlit as st

from src.core.config import get_settings
from src.services.audio import RecordingStore
from src.services.haptics import BaseHaptics, ImpactStyle, NullHaptics
from src.services.session import SessionController
from src.services.transcription import create_stt

_CONTROLLER_KEY = "coral_controller"


class ToastHaptics(BaseHaptics):
    """Browsers cannot vibrate from Streamlit; show a short toast instead."""

    def pulse(self, style: ImpactStyle = ImpactStyle.light) -> None:
        st.toast("Question detected", icon="\U0001f4f3")


def get_ui_controller() -> SessionController:
    """Return this browser session's controller, creating it on first run."""
    if _CONTROLLER_KEY not in st.session_state:
        settings = get_settings()
        st.session_state[_CONTROLLER_KEY] = SessionController(
            stt=create_stt(settings.stt_provider, settings=settings),
            store=RecordingStore(settings.recordings_dir),
            haptics=ToastHaptics() if settings.haptics_enabled else NullHaptics(),
        )
    return st.session_state[_CONTROLLER_KEY]

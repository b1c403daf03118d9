"""
Recorder component — home and recording screens.

Audio is captured in the browser with ``st.audio_input()``; stopping hands
the bytes to the session controller, which transcribes and analyzes them.
"""

import asyncio
import logging

import streamlit as st

from src.core.exceptions import CoralError
from src.services.session import SessionController

logger = logging.getLogger(__name__)


def render_home(controller: SessionController) -> None:
    """Title and the Record button."""
    st.title("\U0001f399️ Coral Smartwatch")

    if controller.state.error:
        st.error(controller.state.error)

    if st.button("Record", type="primary", use_container_width=True):
        try:
            controller.start_recording()
        except CoralError as exc:
            st.error(exc.detail)
            return
        st.rerun()


def render_recording(controller: SessionController) -> None:
    """Capture widget and the Stop button."""
    st.title("\U0001f399️ Coral Smartwatch")
    st.caption("Recording. Speak, then press Stop.")

    audio = st.audio_input("Microphone", key="coral_audio_input")

    if st.button("Stop", type="primary", disabled=audio is None, use_container_width=True):
        audio_bytes = audio.getvalue()
        filename = getattr(audio, "name", None) or "recording.wav"
        with st.spinner("Transcribing..."):
            asyncio.run(controller.stop_recording(audio_bytes, filename=filename))
        st.session_state.pop("coral_audio_input", None)
        st.rerun()

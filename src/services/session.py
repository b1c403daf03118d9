"""Session controller for the record → transcribe → analyze flow.

The whole session lives in one immutable ``SessionState``; every action
returns the next snapshot. Only one recording/transcription is in flight
at a time.

Usage::

    from src.services.session import get_controller

    controller = get_controller()
    controller.start_recording()
    state = await controller.stop_recording(audio_bytes, filename="take.m4a")
    print(state.analysis.question_count)
"""

import asyncio
import logging
from pathlib import Path

from src.core.analysis import analyze
from src.core.config import get_settings
from src.core.exceptions import InvalidTransitionError, RecordingAlreadyActiveError
from src.core.models import AnalysisResult, FeedbackRating, Screen, SessionState
from src.services.audio import RecordingStore, content_type_for
from src.services.haptics import BaseHaptics, ImpactStyle, create_haptics
from src.services.transcription import BaseSTT, create_stt

logger = logging.getLogger(__name__)

PERMISSION_REQUIRED_MESSAGE = "Microphone permission is required!"
NO_TRANSCRIPT_MESSAGE = "Could not transcribe the audio."
TRANSCRIPTION_FAILED_MESSAGE = "Error occurred while transcribing."


def feedback_message(rating: FeedbackRating) -> str:
    return f"Thank you for your {rating} feedback!"


def feedback_explanation(state: SessionState) -> str:
    """Plain-language summary shown under the metrics."""
    return (
        f"Based on your session, you had a talking time of "
        f"{state.analysis.talking_time_percentage}%. "
        f"You asked {state.analysis.question_count} question statements. "
        "This helps us understand your engagement and areas to improve clarity."
    )


class SessionController:
    """Drives one session through home → recording → results → home.

    Args:
        stt: Speech-to-text provider.
        store: Scratch storage for the finished capture.
        haptics: Notified once per session when questions were detected.
        state: Starting snapshot (defaults to the home screen).
    """

    def __init__(
        self,
        stt: BaseSTT,
        store: RecordingStore,
        haptics: BaseHaptics,
        state: SessionState | None = None,
    ) -> None:
        self._stt = stt
        self._store = store
        self._haptics = haptics
        self._state = state or SessionState()
        self._lock = asyncio.Lock()

    @property
    def state(self) -> SessionState:
        return self._state

    def _require(self, screen: Screen, action: str) -> None:
        if self._state.screen != screen:
            raise InvalidTransitionError(action, self._state.screen)

    def start_recording(self, permission_granted: bool = True) -> SessionState:
        """Open a recording handle and move to the recording screen.

        A denied permission leaves the session on the home screen with
        ``error`` set; it is not raised.

        Raises:
            RecordingAlreadyActiveError: If a recording handle is already held.
            InvalidTransitionError: If not on the home screen.
        """
        if self._state.is_recording:
            raise RecordingAlreadyActiveError()
        self._require(Screen.home, "start recording")

        if not permission_granted:
            logger.warning("Microphone permission denied")
            self._state = self._state.model_copy(update={"error": PERMISSION_REQUIRED_MESSAGE})
            return self._state

        handle = self._store.start()
        self._state = self._state.model_copy(
            update={"screen": Screen.recording, "recording": handle, "error": None}
        )
        return self._state

    async def stop_recording(
        self, audio: bytes, filename: str = "recording.m4a"
    ) -> SessionState:
        """Finish the capture, transcribe it, analyze it, show results.

        Failures while saving, reading, or transcribing never propagate:
        the transcript becomes a fixed message and the metrics are zeroed.

        Raises:
            InvalidTransitionError: If no recording is in progress.
        """
        async with self._lock:
            self._require(Screen.recording, "stop recording")
            handle = self._state.recording
            if handle is None:
                raise InvalidTransitionError("stop recording", self._state.screen)
            suffix = Path(filename).suffix or ".m4a"
            error: str | None = None
            path = None

            try:
                path = self._store.save(handle, audio, suffix=suffix)
                data = self._store.read(path)
                result = await self._stt.transcribe(
                    data, content_type=content_type_for(filename)
                )
            except Exception as exc:
                logger.exception("Transcription failed for recording %s", handle.recording_id)
                transcript = TRANSCRIPTION_FAILED_MESSAGE
                analysis = AnalysisResult.empty()
                error = getattr(exc, "detail", None) or str(exc)
            else:
                if result.transcript is None:
                    transcript = NO_TRANSCRIPT_MESSAGE
                    analysis = AnalysisResult.empty()
                else:
                    transcript = result.transcript
                    analysis = analyze(transcript)
            finally:
                if path is not None:
                    self._store.discard(path)

            logger.info(
                "Recording %s analyzed: questions=%d talking_time=%d%%",
                handle.recording_id,
                analysis.question_count,
                analysis.talking_time_percentage,
            )
            self._state = SessionState(
                screen=Screen.results,
                recording=None,
                transcript=transcript,
                analysis=analysis,
                error=error,
            )

        if analysis.question_count > 0:
            self._pulse()
        return self._state

    def _pulse(self) -> None:
        try:
            self._haptics.pulse(ImpactStyle.light)
        except Exception:
            logger.warning("Haptic pulse failed (non-fatal)")

    def rate_feedback(self, rating: FeedbackRating) -> str:
        """Acknowledge a rating of the feedback explanation. Nothing is stored."""
        self._require(Screen.results, "rate feedback")
        logger.info("Feedback rated %s", rating)
        return feedback_message(rating)

    def reset(self) -> SessionState:
        """Clear transcript and metrics and return to the home screen.

        Raises:
            InvalidTransitionError: While a recording is in progress.
        """
        if self._state.screen == Screen.recording:
            raise InvalidTransitionError("reset", self._state.screen)
        self._state = SessionState()
        return self._state


def create_controller(settings=None) -> SessionController:
    """Build a controller wired from settings."""
    settings = settings or get_settings()
    return SessionController(
        stt=create_stt(settings.stt_provider, settings=settings),
        store=RecordingStore(settings.recordings_dir),
        haptics=create_haptics(settings.haptics_enabled),
    )


# ---------------------------------------------------------------------------
# Module-level singleton management
# ---------------------------------------------------------------------------

_controller: SessionController | None = None


def get_controller() -> SessionController:
    """Return the process-wide controller, creating it on first use."""
    global _controller
    if _controller is None:
        _controller = create_controller()
    return _controller


def reset_controller() -> None:
    """Drop the process-wide controller (next call builds a fresh one)."""
    global _controller
    _controller = None

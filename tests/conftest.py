"""Shared pytest fixtures for the Coral test suite.

Provides a mock STT provider, scratch recording storage, a recording
haptics notifier, and a controller wired from them.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from src.core.models import TranscriptionResult
from src.services.audio import RecordingStore
from src.services.haptics import LogHaptics
from src.services.session import SessionController

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


def make_settings(**overrides):
    """Return a fake Settings object with sensible defaults."""
    defaults = {
        "stt_provider": "deepgram",
        "deepgram_api_key": "test-key",
        "deepgram_base_url": "https://api.deepgram.test",
        "deepgram_punctuate": True,
        "deepgram_timeout": 5.0,
        "audio_content_type": "audio/m4a",
        "haptics_enabled": True,
        "recordings_dir": "data/recordings",
        "log_level": "INFO",
    }
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


@pytest.fixture
def settings(tmp_path):
    return make_settings(recordings_dir=str(tmp_path / "recordings"))


# ---------------------------------------------------------------------------
# STT Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_stt():
    """Create a mock STT provider for unit testing.

    Returns:
        AsyncMock: A mock implementing the BaseSTT interface with a
        default transcript containing two questions.
    """
    from src.services.transcription.base import BaseSTT

    stt = AsyncMock(spec=BaseSTT)
    stt.transcribe.return_value = TranscriptionResult(
        transcript="What is your name? I like cats. How are you?",
        confidence=0.97,
        duration=4.2,
    )
    return stt


@pytest.fixture
def deepgram_payload():
    """A trimmed Deepgram ``/v1/listen`` response body."""
    return {
        "metadata": {"request_id": "abc", "duration": 3.5, "channels": 1},
        "results": {
            "channels": [
                {
                    "alternatives": [
                        {
                            "transcript": "Who is there? It is me.",
                            "confidence": 0.93,
                            "words": [],
                        }
                    ]
                }
            ]
        },
    }


# ---------------------------------------------------------------------------
# Session Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_audio_bytes():
    """Opaque capture bytes; the controller never decodes them."""
    return b"\x00\x00\x00\x20ftypM4A " + b"\x01" * 256


@pytest.fixture
def recording_store(tmp_path):
    return RecordingStore(tmp_path / "recordings")


@pytest.fixture
def haptics():
    return LogHaptics()


@pytest.fixture
def controller(mock_stt, recording_store, haptics):
    return SessionController(stt=mock_stt, store=recording_store, haptics=haptics)

"""
Abstract base class for Speech-to-Text providers.

All STT implementations must implement this interface, enabling
provider-agnostic transcription in the session controller.
"""

from abc import ABC, abstractmethod

from src.core.models import TranscriptionResult


class BaseSTT(ABC):
    """Interface that every STT provider must implement."""

    @abstractmethod
    async def transcribe(self, audio: bytes, **kwargs) -> TranscriptionResult:
        """Transcribe a finished audio capture to text.

        Args:
            audio: Encoded audio bytes exactly as captured (m4a, wav, ...).
            **kwargs: Provider-specific options (content_type, etc.).

        Returns:
            TranscriptionResult whose ``transcript`` is ``None`` when the
            provider recognized nothing.

        Raises:
            TranscriptionError: If the request fails or the response is malformed.
        """

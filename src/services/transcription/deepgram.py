"""Deepgram STT implementation over the pre-recorded ``/v1/listen`` endpoint.

The raw capture is POSTed as the request body and the JSON response is
validated into ``DeepgramResponse`` before the transcript is extracted.
"""

import logging

import httpx
from pydantic import ValidationError

from src.core.config import get_settings
from src.core.exceptions import TranscriptionError
from src.core.models import DeepgramResponse, TranscriptionResult
from src.services.transcription.base import BaseSTT

logger = logging.getLogger(__name__)


class DeepgramSTT(BaseSTT):
    """Speech-to-text provider backed by the Deepgram REST API.

    Args:
        api_key: Deepgram API token (falls back to settings).
        base_url: API root, e.g. ``https://api.deepgram.com``.
        punctuate: Ask Deepgram to insert sentence punctuation.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (used by tests).
        settings: Optional Settings instance (defaults to get_settings()).
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        punctuate: bool | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        settings=None,
    ) -> None:
        self._settings = settings or get_settings()
        self._api_key = api_key if api_key is not None else self._settings.deepgram_api_key
        self._base_url = (base_url or self._settings.deepgram_base_url).rstrip("/")
        self._punctuate = self._settings.deepgram_punctuate if punctuate is None else punctuate
        self._timeout = timeout or self._settings.deepgram_timeout
        self._transport = transport

    def _headers(self, content_type: str) -> dict[str, str]:
        return {
            "Authorization": f"Token {self._api_key}",
            "Content-Type": content_type,
        }

    def _params(self) -> dict[str, str]:
        return {"punctuate": "true" if self._punctuate else "false"}

    async def _post(self, audio: bytes, content_type: str) -> httpx.Response:
        """POST the capture and return a successful response.

        Raises:
            TranscriptionError: On connection, timeout, HTTP status, or network errors.
        """
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                resp = await client.post(
                    "/v1/listen",
                    params=self._params(),
                    headers=self._headers(content_type),
                    content=audio,
                )
                resp.raise_for_status()
                return resp
        except httpx.TimeoutException as exc:
            raise TranscriptionError(f"Deepgram request timed out: {exc}") from exc
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Deepgram returned HTTP %s: %s",
                exc.response.status_code,
                exc.response.text[:200],
            )
            raise TranscriptionError(
                f"Deepgram returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TranscriptionError(f"Network error contacting Deepgram: {exc}") from exc

    async def transcribe(self, audio: bytes, **kwargs) -> TranscriptionResult:
        """Transcribe a finished capture.

        Args:
            audio: Encoded audio bytes.
            **kwargs: Optional key ``content_type`` (defaults to settings).

        Returns:
            TranscriptionResult; ``transcript`` is ``None`` when the response
            carries no channel alternative.
        """
        if not audio:
            raise TranscriptionError("No audio to transcribe")

        content_type = kwargs.get("content_type") or self._settings.audio_content_type
        logger.info("Sending %d bytes (%s) to Deepgram", len(audio), content_type)
        resp = await self._post(audio, content_type)

        try:
            body = DeepgramResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise TranscriptionError(f"Unexpected Deepgram response: {exc}") from exc

        alternative = body.first_alternative()
        if alternative is None or alternative.transcript is None:
            logger.warning("Deepgram response contained no transcript")
            return TranscriptionResult(transcript=None)

        return TranscriptionResult(
            transcript=alternative.transcript,
            confidence=alternative.confidence,
            duration=body.metadata.duration if body.metadata else None,
        )

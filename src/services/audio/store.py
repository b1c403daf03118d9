"""Scratch storage for finished captures.

A capture is written to disk when recording stops, read back for upload,
and discarded once transcription has finished. Nothing outlives a session.
"""

import logging
import uuid
from datetime import UTC, datetime
from pathlib import Path

from src.core.models import RecordingHandle

logger = logging.getLogger(__name__)

_CONTENT_TYPES = {
    ".m4a": "audio/m4a",
    ".wav": "audio/wav",
    ".mp3": "audio/mpeg",
    ".webm": "audio/webm",
    ".ogg": "audio/ogg",
    ".flac": "audio/flac",
}
DEFAULT_CONTENT_TYPE = "audio/m4a"


def content_type_for(filename: str | None) -> str:
    """Guess the upload MIME type from a capture's file name."""
    if not filename:
        return DEFAULT_CONTENT_TYPE
    return _CONTENT_TYPES.get(Path(filename).suffix.lower(), DEFAULT_CONTENT_TYPE)


class RecordingStore:
    """Creates recording handles and holds their audio between stop and upload.

    Args:
        recordings_dir: Directory for capture files (created on demand).
    """

    def __init__(self, recordings_dir: str | Path) -> None:
        self._dir = Path(recordings_dir)

    def start(self) -> RecordingHandle:
        """Open a new recording handle."""
        handle = RecordingHandle(
            recording_id=uuid.uuid4().hex,
            started_at=datetime.now(UTC),
        )
        logger.info("Recording %s started", handle.recording_id)
        return handle

    def save(self, handle: RecordingHandle, audio: bytes, suffix: str = ".m4a") -> Path:
        """Write a finished capture to disk.

        Returns:
            Absolute path of the written file.

        Raises:
            ValueError: If ``audio`` is empty.
        """
        if not audio:
            raise ValueError("Cannot save an empty recording")
        self._dir.mkdir(parents=True, exist_ok=True)
        path = (self._dir / f"{handle.recording_id}{suffix}").resolve()
        path.write_bytes(audio)
        logger.debug("Saved %d bytes to %s", len(audio), path)
        return path

    def read(self, path: str | Path) -> bytes:
        return Path(path).read_bytes()

    def discard(self, path: str | Path) -> None:
        """Delete a capture file; a missing file is not an error."""
        Path(path).unlink(missing_ok=True)

"""
Coral exception hierarchy.

All application-specific exceptions inherit from CoralError,
enabling centralized error handling in the API middleware layer.
"""

from datetime import UTC, datetime


class CoralError(Exception):
    """Base exception for all Coral errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        code: str = "CORAL_ERROR",
        status_code: int = 500,
    ) -> None:
        self.detail = detail
        self.code = code
        self.status_code = status_code
        self.timestamp = datetime.now(UTC).isoformat()
        super().__init__(detail)


class RecordingAlreadyActiveError(CoralError):
    """Raised when trying to start a recording while one is already active."""

    def __init__(self) -> None:
        super().__init__(
            detail="A recording is already active",
            code="RECORDING_ALREADY_ACTIVE",
            status_code=409,
        )


class InvalidTransitionError(CoralError):
    """Raised when a session action is not allowed from the current screen."""

    def __init__(self, action: str, screen: str) -> None:
        super().__init__(
            detail=f"Cannot {action} from the '{screen}' screen",
            code="INVALID_TRANSITION",
            status_code=409,
        )


class TranscriptionError(CoralError):
    """Raised when the speech-to-text request fails."""

    def __init__(self, detail: str = "Transcription failed") -> None:
        super().__init__(
            detail=detail,
            code="TRANSCRIPTION_ERROR",
            status_code=502,
        )

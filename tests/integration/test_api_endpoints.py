"""Tests for the health, analysis, and session endpoints.

Exercises the FastAPI app through an async HTTP client, including the
error envelope for invalid transitions and malformed bodies.
"""

import logging

from httpx import ASGITransport, AsyncClient

from src.core.exceptions import TranscriptionError
from src.core.models import TranscriptionResult
from src.services.session import NO_TRANSCRIPT_MESSAGE, TRANSCRIPTION_FAILED_MESSAGE

# ---------------------------------------------------------------------------
# Health / CORS
# ---------------------------------------------------------------------------


async def test_health_returns_200(async_client):
    """GET /health returns 200 with status, version, and timestamp."""
    resp = await async_client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["version"] == "0.1.0"
    assert "timestamp" in body


async def test_cors_allows_streamlit_origin(async_client):
    """Streamlit's default origin (localhost:8501) is in the CORS allow-list."""
    resp = await async_client.options(
        "/health",
        headers={
            "Origin": "http://localhost:8501",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert resp.headers.get("access-control-allow-origin") == "http://localhost:8501"


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------


async def test_analysis_endpoint(async_client):
    resp = await async_client.post(
        "/api/v1/analysis",
        json={"transcript": "What is your name? I like cats. How are you?"},
    )
    assert resp.status_code == 200
    assert resp.json() == {
        "question_count": 2,
        "talking_time_percentage": 7,
        "check_understanding_count": 0,
    }


async def test_analysis_empty_transcript(async_client):
    resp = await async_client.post("/api/v1/analysis", json={"transcript": ""})
    assert resp.status_code == 200
    assert resp.json()["talking_time_percentage"] == 0


async def test_analysis_rejects_non_string(async_client):
    resp = await async_client.post("/api/v1/analysis", json={"transcript": ["a"]})
    assert resp.status_code == 422
    assert resp.json()["code"] == "VALIDATION_ERROR"


# ---------------------------------------------------------------------------
# Session flow
# ---------------------------------------------------------------------------


async def test_initial_state_is_home(async_client):
    resp = await async_client.get("/api/v1/session")
    assert resp.status_code == 200
    body = resp.json()
    assert body["screen"] == "home"
    assert body["recording"] is None
    assert body["analysis"]["question_count"] == 0


async def test_full_session_flow(async_client, haptics, sample_audio_bytes):
    resp = await async_client.post("/api/v1/session/start")
    assert resp.status_code == 200
    assert resp.json()["screen"] == "recording"
    assert resp.json()["recording"]["recording_id"]

    resp = await async_client.post(
        "/api/v1/session/stop",
        files={"file": ("take.m4a", sample_audio_bytes, "audio/m4a")},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["screen"] == "results"
    assert body["transcript"] == "What is your name? I like cats. How are you?"
    assert body["analysis"]["question_count"] == 2
    assert haptics.pulses == ["light"]

    resp = await async_client.post("/api/v1/session/feedback", json={"rating": "positive"})
    assert resp.status_code == 200
    assert resp.json() == {
        "rating": "positive",
        "message": "Thank you for your positive feedback!",
    }

    resp = await async_client.post("/api/v1/session/reset")
    assert resp.status_code == 200
    assert resp.json()["screen"] == "home"
    assert resp.json()["transcript"] == ""


async def test_stop_with_failed_transcription(async_client, mock_stt, sample_audio_bytes):
    mock_stt.transcribe.side_effect = TranscriptionError("Deepgram returned HTTP 503")
    await async_client.post("/api/v1/session/start")

    resp = await async_client.post(
        "/api/v1/session/stop",
        files={"file": ("take.m4a", sample_audio_bytes, "audio/m4a")},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["transcript"] == TRANSCRIPTION_FAILED_MESSAGE
    assert body["analysis"]["question_count"] == 0
    assert body["error"] == "Deepgram returned HTTP 503"


async def test_stop_without_transcript(async_client, mock_stt, sample_audio_bytes):
    mock_stt.transcribe.return_value = TranscriptionResult(transcript=None)
    await async_client.post("/api/v1/session/start")

    resp = await async_client.post(
        "/api/v1/session/stop",
        files={"file": ("take.m4a", sample_audio_bytes, "audio/m4a")},
    )
    assert resp.json()["transcript"] == NO_TRANSCRIPT_MESSAGE


async def test_double_start_returns_409(async_client):
    await async_client.post("/api/v1/session/start")
    resp = await async_client.post("/api/v1/session/start")
    assert resp.status_code == 409
    body = resp.json()
    assert body["code"] == "RECORDING_ALREADY_ACTIVE"
    assert "timestamp" in body


async def test_stop_from_home_returns_409(async_client, sample_audio_bytes):
    resp = await async_client.post(
        "/api/v1/session/stop",
        files={"file": ("take.m4a", sample_audio_bytes, "audio/m4a")},
    )
    assert resp.status_code == 409
    assert resp.json()["code"] == "INVALID_TRANSITION"


async def test_feedback_rejects_unknown_rating(async_client):
    resp = await async_client.post("/api/v1/session/feedback", json={"rating": "meh"})
    assert resp.status_code == 422


async def test_feedback_before_results_returns_409(async_client):
    resp = await async_client.post("/api/v1/session/feedback", json={"rating": "negative"})
    assert resp.status_code == 409


# ---------------------------------------------------------------------------
# Unhandled errors
# ---------------------------------------------------------------------------


async def test_unhandled_error_returns_500_and_logs_traceback(app, caplog):
    """Unexpected exceptions become a 500 envelope; the traceback is logged."""

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    with caplog.at_level(logging.ERROR, logger="src.api.middleware.error_handler"):
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            resp = await c.get("/boom")

    assert resp.status_code == 500
    assert resp.json()["code"] == "INTERNAL_ERROR"
    assert resp.json()["detail"] == "Internal server error"
    records = [r for r in caplog.records if r.name == "src.api.middleware.error_handler"]
    assert records
    assert records[0].exc_info is not None
    assert isinstance(records[0].exc_info[1], RuntimeError)

"""
Session REST endpoints.

Thin wrappers over the process-wide ``SessionController``; the controller
owns every state transition and the transcription fallbacks.
"""

import logging

from fastapi import APIRouter, File, UploadFile

from src.core.models import FeedbackRequest, FeedbackResponse, SessionState
from src.services import session as session_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["session"])


@router.get("", response_model=SessionState)
async def get_session_state():
    """Return the current session snapshot."""
    return session_service.get_controller().state


@router.post("/start", response_model=SessionState)
async def start_recording():
    """Open a recording handle and move to the recording screen."""
    return session_service.get_controller().start_recording()


@router.post("/stop", response_model=SessionState)
async def stop_recording(file: UploadFile = File(...)):
    """Upload the finished capture; returns the results snapshot."""
    audio = await file.read()
    logger.info("Received capture %s (%d bytes)", file.filename, len(audio))
    controller = session_service.get_controller()
    return await controller.stop_recording(audio, filename=file.filename or "recording.m4a")


@router.post("/feedback", response_model=FeedbackResponse)
async def rate_feedback(body: FeedbackRequest):
    """Acknowledge a rating of the feedback explanation."""
    message = session_service.get_controller().rate_feedback(body.rating)
    return FeedbackResponse(rating=body.rating, message=message)


@router.post("/reset", response_model=SessionState)
async def reset_session():
    """Clear the results and return to the home screen."""
    return session_service.get_controller().reset()

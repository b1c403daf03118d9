"""
Transcript analysis endpoint.

Runs the analyzer on caller-supplied text; no audio or session involved.
"""

from fastapi import APIRouter

from src.core.analysis import analyze
from src.core.models import AnalysisResult, AnalyzeRequest

router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.post("", response_model=AnalysisResult)
async def analyze_transcript(body: AnalyzeRequest) -> AnalysisResult:
    """Compute question count, talking time, and check-for-understanding count."""
    return analyze(body.transcript)

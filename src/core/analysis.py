"""Transcript analysis heuristics.

Pure functions mapping a transcript to the metrics shown after a session.
Talking time is inferred from word count at an assumed speaking rate, not
measured from audio duration.
"""

import math
import re

from src.core.models import AnalysisResult

QUESTION_WORDS: tuple[str, ...] = (
    "who",
    "what",
    "when",
    "where",
    "why",
    "how",
    "is",
    "are",
    "do",
    "does",
    "can",
    "could",
    "should",
    "would",
)

WORDS_PER_SECOND = 2.5  # ~150 words per minute
REFERENCE_WINDOW_SECONDS = 60

_SENTENCE_DELIMITERS = re.compile(r"[.?!]")
# Negative contractions ("isn't", "couldn't") keep the question word
_QUESTION_PREFIX = re.compile(r"(?:" + "|".join(QUESTION_WORDS) + r")(?:n['’]t)?\b")


def split_sentences(transcript: str) -> list[str]:
    """Split on ``.``, ``?`` and ``!``; strip, lower-case, drop empty pieces."""
    pieces = (piece.strip().lower() for piece in _SENTENCE_DELIMITERS.split(transcript))
    return [piece for piece in pieces if piece]


def is_question_sentence(sentence: str) -> bool:
    """True when the sentence's first token is a question word."""
    return _QUESTION_PREFIX.match(sentence.strip().lower()) is not None


def count_question_sentences(transcript: str) -> int:
    return sum(1 for sentence in split_sentences(transcript) if is_question_sentence(sentence))


def count_words(transcript: str) -> int:
    """Whitespace-separated word count; empty or blank input has no words."""
    return len(transcript.split())


def estimate_talking_time_percentage(transcript: str) -> int:
    """Estimate talking time as a percentage of a one-minute window.

    Returns:
        Integer in [0, 100].
    """
    estimated_seconds = count_words(transcript) / WORDS_PER_SECOND
    percentage = min(100.0, (estimated_seconds / REFERENCE_WINDOW_SECONDS) * 100)
    # Half-up rounding; built-in round() would round half to even
    return max(0, min(100, math.floor(percentage + 0.5)))


def count_check_for_understanding(transcript: str) -> int:
    """No heuristic is defined yet; always 0."""
    return 0


def analyze(transcript: str) -> AnalysisResult:
    """Compute every metric for a transcript. Never raises for a ``str``."""
    return AnalysisResult(
        question_count=count_question_sentences(transcript),
        talking_time_percentage=estimate_talking_time_percentage(transcript),
        check_understanding_count=count_check_for_understanding(transcript),
    )

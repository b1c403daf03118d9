"""
Audio module - Capture storage utilities.
"""

from .store import RecordingStore, content_type_for

__all__ = ["RecordingStore", "content_type_for"]

"""Haptic feedback notifiers.

A pulse is fire-and-forget: notifiers never raise into the caller.
"""

import logging
from abc import ABC, abstractmethod
from enum import StrEnum

logger = logging.getLogger(__name__)


class ImpactStyle(StrEnum):
    """Strength of a tactile impact."""

    light = "light"
    medium = "medium"
    heavy = "heavy"


class BaseHaptics(ABC):
    """Interface for anything that can deliver a tactile pulse."""

    @abstractmethod
    def pulse(self, style: ImpactStyle = ImpactStyle.light) -> None:
        """Deliver one impact pulse."""


class LogHaptics(BaseHaptics):
    """Records pulses in the log; used where no hardware is attached."""

    def __init__(self) -> None:
        self.pulses: list[ImpactStyle] = []

    def pulse(self, style: ImpactStyle = ImpactStyle.light) -> None:
        self.pulses.append(style)
        logger.info("Haptic pulse (%s)", style)


class NullHaptics(BaseHaptics):
    """Discards pulses (haptics disabled)."""

    def pulse(self, style: ImpactStyle = ImpactStyle.light) -> None:
        return None


def create_haptics(enabled: bool) -> BaseHaptics:
    return LogHaptics() if enabled else NullHaptics()

"""Animation state for the Sunflower view.

Holds the four stage start instants and turns a single clock sample into the
progress of every stage. All instants are milliseconds on a monotonic clock.
"""

from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass
from typing import Optional

from .constants import (
    LEAF_ANIMATION_DURATION,
    PETAL_TOTAL_DURATION,
    PHOTO_ANIMATION_DURATION,
    STEM_ANIMATION_DURATION,
)

logger = logging.getLogger(__name__)


def now_ms() -> float:
    """Return the current monotonic time in milliseconds."""

    return time.monotonic() * 1000.0


def elapsed(start: Optional[float], now: float) -> float:
    """Milliseconds since `start`, floored at zero (0 when unset)."""

    if start is None:
        return 0.0
    return max(0.0, now - start)


def progress(start: Optional[float], duration: float, now: float) -> float:
    """Fraction of `duration` elapsed since `start`, clamped to [0, 1]."""

    if start is None:
        return 0.0
    return min(1.0, elapsed(start, now) / duration)


class Phase(enum.Enum):
    GROWING = "growing"
    BLOOMING = "blooming"
    REVEALING = "revealing"
    IDLE = "idle"


@dataclass(frozen=True)
class Frame:
    """Everything the compositor needs to know about one tick."""

    stem_progress: float = 0.0
    leaf_progress: float = 0.0
    petal_elapsed: float = 0.0
    photo_progress: float = 0.0
    leaves_active: bool = False
    petals_active: bool = False
    photo_active: bool = False
    is_idle: bool = False

    @property
    def stem_complete(self) -> bool:
        return self.stem_progress >= 1.0

    @property
    def phase(self) -> Phase:
        if self.is_idle:
            return Phase.IDLE
        if self.photo_active:
            return Phase.REVEALING
        if self.stem_complete:
            return Phase.BLOOMING
        return Phase.GROWING

    @property
    def needs_another_tick(self) -> bool:
        return not self.is_idle


@dataclass
class AnimationState:
    """Stage start instants; unset (None) until the stage becomes eligible."""

    stem_start: Optional[float] = None
    leaves_start: Optional[float] = None
    petals_start: Optional[float] = None
    photo_start: Optional[float] = None
    restart_requested: bool = False

    def reset(self) -> None:
        """Clear every stage start at once."""

        self.stem_start = None
        self.leaves_start = None
        self.petals_start = None
        self.photo_start = None
        self.restart_requested = False
        logger.debug("Animation reset")

    def request_restart(self) -> None:
        """Ask for a reset; applied at the start of the next `evaluate`."""

        self.restart_requested = True

    def evaluate(self, now: float) -> Frame:
        """Advance the stages for instant `now` and report their progress."""

        if self.restart_requested:
            self.reset()

        # Stem starts on the very first evaluation.
        if self.stem_start is None:
            self.stem_start = now
            logger.debug("Stem started at %.1f", now)

        stem_progress = progress(self.stem_start, STEM_ANIMATION_DURATION, now)
        # A grown stem stays grown, even if the clock steps back.
        if self.leaves_start is not None:
            stem_progress = 1.0

        # Leaves and petals start together once the stem is fully grown.
        if stem_progress >= 1.0:
            if self.leaves_start is None:
                self.leaves_start = now
                logger.debug("Leaves started at %.1f", now)
            if self.petals_start is None:
                self.petals_start = now
                logger.debug("Petals started at %.1f", now)

        leaf_elapsed = elapsed(self.leaves_start, now)
        petal_elapsed = elapsed(self.petals_start, now)

        # Photo waits for the whole petal sequence.
        if (
            self.petals_start is not None
            and petal_elapsed >= PETAL_TOTAL_DURATION
            and self.photo_start is None
        ):
            self.photo_start = now
            logger.debug("Photo started at %.1f", now)

        photo_elapsed = elapsed(self.photo_start, now)

        is_idle = (
            stem_progress >= 1.0
            and self.leaves_start is not None
            and leaf_elapsed >= LEAF_ANIMATION_DURATION
            and self.petals_start is not None
            and petal_elapsed >= PETAL_TOTAL_DURATION
            # Idle needs the photo to have started AND finished.
            and self.photo_start is not None
            and photo_elapsed >= PHOTO_ANIMATION_DURATION
        )

        return Frame(
            stem_progress=stem_progress,
            leaf_progress=progress(self.leaves_start, LEAF_ANIMATION_DURATION, now),
            petal_elapsed=petal_elapsed,
            photo_progress=progress(self.photo_start, PHOTO_ANIMATION_DURATION, now),
            leaves_active=self.leaves_start is not None,
            petals_active=self.petals_start is not None,
            photo_active=self.photo_start is not None,
            is_idle=is_idle,
        )

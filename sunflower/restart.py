"""The "start again" button shown once the flower is complete."""

from __future__ import annotations

import logging
from typing import Optional

from .constants import BUTTON_COLOR, TEXT_COLOR, TEXT_SIZE
from .geometry import Rect, button_rect, greeting_rect
from .state import AnimationState
from .surface import DrawSurface

logger = logging.getLogger(__name__)


class RestartControl:
    """Clickable rectangle plus caption and greeting line.

    The rectangle is written on every idle tick and read by the next
    pointer-down; outside idle the control is hidden and ignores input.
    """

    def __init__(self, state: AnimationState, caption: str, greeting: str) -> None:
        self.state = state
        self.caption = caption
        self.greeting = greeting
        self.visible = False
        self.rect: Optional[Rect] = None

    def draw(self, surface: DrawSurface, canvas_width: float, canvas_height: float) -> None:
        """Draw button, caption and greeting, and arm the hit test."""

        self.rect = button_rect()
        self.visible = True
        surface.fill_rect(self.rect, BUTTON_COLOR)
        surface.draw_text(self.caption, self.rect, TEXT_SIZE, TEXT_COLOR, wrap=False)
        surface.draw_text(
            self.greeting,
            greeting_rect(canvas_width, canvas_height, self.rect),
            TEXT_SIZE,
            TEXT_COLOR,
            wrap=True,
        )

    def hide(self) -> None:
        self.visible = False

    def hit_test(self, x: float, y: float) -> bool:
        return self.visible and self.rect is not None and self.rect.contains(x, y)

    def handle_pointer_down(self, x: float, y: float) -> bool:
        """Restart the animation if (x, y) is on the visible button.

        Returns True when the event was consumed.
        """

        if not self.hit_test(x, y):
            return False
        logger.debug("Restart requested at (%.0f, %.0f)", x, y)
        self.state.request_restart()
        self.visible = False
        return True

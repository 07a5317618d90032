"""Per-tick compositing of the sunflower.

One call to `Compositor.render` is one full pass: evaluate the state for a
single clock sample, lay out every element and draw back to front.
"""

from __future__ import annotations

import logging
from typing import Optional

from .assets import AssetSet
from .constants import BACKGROUND_COLOR
from .geometry import (
    PETAL_SEQUENCE,
    Rect,
    check_canvas,
    circle_rect,
    left_leaf_transform,
    petal_alpha,
    petal_image,
    petal_transform,
    photo_transform,
    right_leaf_transform,
    stem_layout,
)
from .restart import RestartControl
from .state import AnimationState, Frame
from .surface import DrawSurface

logger = logging.getLogger(__name__)


class Compositor:
    """Draws the flower for a given instant and says whether to keep ticking."""

    def __init__(
        self, assets: AssetSet, state: AnimationState, restart: RestartControl
    ) -> None:
        self.assets = assets
        self.state = state
        self.restart = restart
        self.last_frame: Optional[Frame] = None
        self._was_idle = False

    def render(
        self, surface: DrawSurface, now: float, canvas_width: float, canvas_height: float
    ) -> bool:
        """Draw one frame at instant `now` (ms).

        Returns True while another tick is needed. Raises `CanvasError` before
        touching the state when the canvas cannot hold the flower.
        """

        check_canvas(canvas_width, canvas_height, self.assets)

        frame = self.state.evaluate(now)
        self.last_frame = frame
        assets = self.assets

        surface.clear(BACKGROUND_COLOR)

        stem = stem_layout(canvas_width, canvas_height, assets, frame.stem_progress)
        surface.draw_image_region(assets.stem, stem.source, stem.dest)

        if frame.stem_complete:
            circle = circle_rect(canvas_width, stem.dest.top, assets)
            surface.draw_image_region(
                assets.circle,
                _full_source(assets.circle),
                circle,
            )

            surface.draw_image(
                assets.left_leaf,
                left_leaf_transform(stem.dest, assets, frame.leaf_progress),
            )
            surface.draw_image(
                assets.right_leaf,
                right_leaf_transform(canvas_width, stem.dest, assets, frame.leaf_progress),
            )

            center = circle.center
            for spec in PETAL_SEQUENCE:
                alpha = petal_alpha(spec.sequence_index, frame.petal_elapsed)
                if alpha > 0:
                    surface.draw_image(
                        petal_image(assets, spec),
                        petal_transform(center, assets, spec),
                        alpha,
                    )

            if frame.photo_active:
                surface.draw_image(
                    assets.photo,
                    photo_transform(canvas_width, center, assets, frame.photo_progress),
                )

        if frame.is_idle:
            self.restart.draw(surface, canvas_width, canvas_height)
            if not self._was_idle:
                logger.debug("Animation idle")
        else:
            self.restart.hide()
        self._was_idle = frame.is_idle

        return frame.needs_another_tick


def _full_source(image) -> Rect:
    return Rect(0.0, 0.0, float(image.width()), float(image.height()))

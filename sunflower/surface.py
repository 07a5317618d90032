"""Drawing contract between the compositor and the host toolkit."""

from __future__ import annotations

from typing import Any, Protocol, Tuple

from .geometry import Affine, Rect

Color = Tuple[int, int, int]


class DrawSurface(Protocol):
    """Immediate-mode 2D drawing context."""

    def clear(self, color: Color) -> None:
        ...

    def draw_image_region(self, image: Any, source: Rect, dest: Rect) -> None:
        """Draw the `source` part of `image` stretched into `dest`."""
        ...

    def draw_image(self, image: Any, transform: Affine, alpha: int = 255) -> None:
        """Draw `image` through `transform` with opacity `alpha` (0..255)."""
        ...

    def fill_rect(self, rect: Rect, color: Color) -> None:
        ...

    def draw_text(
        self, text: str, rect: Rect, size: int, color: Color, wrap: bool = False
    ) -> None:
        """Draw `text` horizontally centred in `rect`.

        Without `wrap` the single line is also centred vertically; with it the
        text is word-wrapped to the rect width starting at the top.
        """
        ...

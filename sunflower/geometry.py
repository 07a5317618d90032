"""Placement of every sunflower element.

Pure functions of the canvas size, the asset sizes and the stage progress.
Matrices follow post-concatenation: each operation is applied after the ones
already in the matrix, like `QTransform` built with `*` on the right.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import List, Tuple

from .assets import AssetSet
from .constants import (
    BUTTON_HEIGHT,
    BUTTON_MARGIN,
    BUTTON_WIDTH,
    LEAF_OFFSET_DIVISOR,
    LEAF_START_SCALE,
    MAX_ALPHA,
    PETAL_ANGLE_STEP,
    PETAL_APPEAR_DURATION,
    PETAL_BACK_OFFSET,
    PETAL_INSET,
    PETAL_PAIRS,
)
from .errors import CanvasError


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Tuple[float, float]:
        return (self.left + self.right) / 2, (self.top + self.bottom) / 2

    def contains(self, x: float, y: float) -> bool:
        """Half-open containment: left/top inclusive, right/bottom exclusive."""
        return self.left <= x < self.right and self.top <= y < self.bottom


@dataclass(frozen=True)
class Affine:
    """2x3 affine matrix mapping (x, y) to (a*x + c*y + tx, b*x + d*y + ty)."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    def then(self, other: "Affine") -> "Affine":
        """Return the matrix that applies `self` first, then `other`."""
        return Affine(
            a=other.a * self.a + other.c * self.b,
            b=other.b * self.a + other.d * self.b,
            c=other.a * self.c + other.c * self.d,
            d=other.b * self.c + other.d * self.d,
            tx=other.a * self.tx + other.c * self.ty + other.tx,
            ty=other.b * self.tx + other.d * self.ty + other.ty,
        )

    def translate(self, dx: float, dy: float) -> "Affine":
        return self.then(Affine(tx=dx, ty=dy))

    def scale(self, sx: float, sy: float, px: float = 0.0, py: float = 0.0) -> "Affine":
        """Scale about the pivot (px, py)."""
        return self.then(Affine(a=sx, d=sy, tx=px - sx * px, ty=py - sy * py))

    def rotate(self, degrees: float) -> "Affine":
        """Rotate about the origin; positive angles turn clockwise on screen."""
        rad = math.radians(degrees)
        cos, sin = math.cos(rad), math.sin(rad)
        return self.then(Affine(a=cos, b=sin, c=-sin, d=cos))

    def map(self, x: float, y: float) -> Tuple[float, float]:
        return self.a * x + self.c * y + self.tx, self.b * x + self.d * y + self.ty


IDENTITY = Affine()


# ----------------------------------------------------------------------
# Stem and circle
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class StemLayout:
    """Bottom-anchored crop of the stem bitmap and where it lands."""

    source: Rect
    dest: Rect
    scale: float
    final_height: float


def check_canvas(width: float, height: float, assets: AssetSet) -> None:
    """Raise `CanvasError` when geometry would be meaningless."""

    if width <= 0 or height <= 0:
        raise CanvasError(f"canvas must have a positive size, got {width}x{height}")
    if final_stem_height(height, assets) <= 0:
        raise CanvasError(
            f"canvas height {height} cannot hold a flower head of height "
            f"{assets.circle.height()}"
        )


def final_stem_height(canvas_height: float, assets: AssetSet) -> float:
    """Stem height that puts the circle centre at half the canvas height."""

    return canvas_height / 2 - assets.circle.height() / 2


def stem_layout(
    canvas_width: float, canvas_height: float, assets: AssetSet, stem_progress: float
) -> StemLayout:
    stem_w = assets.stem.width()
    stem_h = assets.stem.height()
    final_height = final_stem_height(canvas_height, assets)
    scale = final_height / stem_h

    visible_source = stem_h * stem_progress
    source = Rect(0.0, stem_h - visible_source, float(stem_w), float(stem_h))

    scaled_width = stem_w * scale
    left = (canvas_width - scaled_width) / 2
    dest = Rect(
        left,
        canvas_height - final_height * stem_progress,
        left + scaled_width,
        float(canvas_height),
    )
    return StemLayout(source=source, dest=dest, scale=scale, final_height=final_height)


def circle_rect(canvas_width: float, stem_top: float, assets: AssetSet) -> Rect:
    """Unscaled circle sitting on top of the stem."""

    w = assets.circle.width()
    h = assets.circle.height()
    left = (canvas_width - w) / 2
    return Rect(left, stem_top - h, left + w, stem_top)


# ----------------------------------------------------------------------
# Leaves
# ----------------------------------------------------------------------
def leaf_scale(leaf_progress: float, max_scale: float) -> float:
    """Grow from half to full size, never past `max_scale` (floored at 0)."""

    grown = LEAF_START_SCALE + (1.0 - LEAF_START_SCALE) * leaf_progress
    return min(grown, max(0.0, max_scale))


def leaf_top(stem_top: float, assets: AssetSet) -> float:
    return stem_top + assets.stem.height() / LEAF_OFFSET_DIVISOR


def left_leaf_transform(
    stem: Rect, assets: AssetSet, leaf_progress: float
) -> Affine:
    """Left leaf with its right edge pinned to the stem's right edge."""

    w = assets.left_leaf.width()
    h = assets.left_leaf.height()
    anchor = stem.right
    s = leaf_scale(leaf_progress, anchor / w)
    top = leaf_top(stem.top, assets)
    return IDENTITY.scale(s, s, w, h / 2).translate(anchor - w, top - h * (s - 1) / 2)


def right_leaf_transform(
    canvas_width: float, stem: Rect, assets: AssetSet, leaf_progress: float
) -> Affine:
    """Right leaf with its left edge pinned to the stem's left edge."""

    w = assets.right_leaf.width()
    h = assets.right_leaf.height()
    anchor = stem.left
    s = leaf_scale(leaf_progress, (canvas_width - anchor) / w)
    top = leaf_top(stem.top, assets)
    return IDENTITY.scale(s, s, 0.0, h / 2).translate(anchor, top - h * (s - 1) / 2)


# ----------------------------------------------------------------------
# Petals
# ----------------------------------------------------------------------
class PetalImage(enum.Enum):
    FRONT = "front_petal"
    BACK = "back_petal"


@dataclass(frozen=True)
class PetalSpec:
    image: PetalImage
    angle_degrees: float
    sequence_index: int


def build_petal_sequence() -> List[PetalSpec]:
    """Sixteen petals, alternating back/front, back first.

    Front petals sit at multiples of 45 degrees; each back petal is offset by
    22.5 degrees from the front petal it is paired with.
    """

    petals: List[PetalSpec] = []
    for i in range(PETAL_PAIRS):
        angle_front = i * PETAL_ANGLE_STEP
        angle_back = angle_front + PETAL_BACK_OFFSET
        petals.append(PetalSpec(PetalImage.BACK, angle_back, 2 * i))
        petals.append(PetalSpec(PetalImage.FRONT, angle_front, 2 * i + 1))
    return petals


PETAL_SEQUENCE: Tuple[PetalSpec, ...] = tuple(build_petal_sequence())


def petal_alpha(index: int, petal_elapsed: float) -> int:
    """Opacity (0..255) of petal `index` after `petal_elapsed` ms."""

    start_fade = index * PETAL_APPEAR_DURATION
    end_fade = start_fade + PETAL_APPEAR_DURATION
    if petal_elapsed < start_fade:
        return 0
    if petal_elapsed >= end_fade:
        return MAX_ALPHA
    fraction = (petal_elapsed - start_fade) / PETAL_APPEAR_DURATION
    return int(fraction * MAX_ALPHA)


def petal_image(assets: AssetSet, spec: PetalSpec):
    return getattr(assets, spec.image.value)


def petal_radius(assets: AssetSet, petal_height: float) -> float:
    # Petal base tucks slightly under the circle edge.
    return assets.circle.width() / 2 - PETAL_INSET + petal_height / 2


def petal_transform(
    center: Tuple[float, float], assets: AssetSet, spec: PetalSpec
) -> Affine:
    image = petal_image(assets, spec)
    w = image.width()
    h = image.height()
    radius = petal_radius(assets, h)
    rad = math.radians(spec.angle_degrees)
    x = center[0] + radius * math.cos(rad)
    y = center[1] + radius * math.sin(rad)
    # +90 so the bitmap's "up" points radially outward.
    return IDENTITY.translate(-w / 2, -h / 2).rotate(spec.angle_degrees + 90).translate(x, y)


# ----------------------------------------------------------------------
# Photo and restart button
# ----------------------------------------------------------------------
def photo_scale(canvas_width: float, assets: AssetSet, photo_progress: float) -> float:
    return canvas_width / assets.photo.width() * photo_progress


def photo_transform(
    canvas_width: float,
    center: Tuple[float, float],
    assets: AssetSet,
    photo_progress: float,
) -> Affine:
    w = assets.photo.width()
    h = assets.photo.height()
    s = photo_scale(canvas_width, assets, photo_progress)
    return IDENTITY.translate(-w / 2, -h / 2).scale(s, s).translate(center[0], center[1])


def button_rect() -> Rect:
    left = top = float(BUTTON_MARGIN)
    return Rect(left, top, left + BUTTON_WIDTH, top + BUTTON_HEIGHT)


def greeting_rect(canvas_width: float, canvas_height: float, button: Rect) -> Rect:
    """Text box below the button, full width minus margins."""

    top = button.bottom + BUTTON_MARGIN
    return Rect(
        float(BUTTON_MARGIN),
        top,
        canvas_width - BUTTON_MARGIN,
        max(top, float(canvas_height)),
    )

"""Default sunflower artwork painted with QPainter.

Used when no asset directory is configured, so the animation runs without
any image files. Requires a running QGuiApplication (QPixmap needs one).
"""

from __future__ import annotations

import logging
import math

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import (
    QColor,
    QLinearGradient,
    QPainter,
    QPainterPath,
    QPen,
    QPixmap,
    QRadialGradient,
)

from .assets import AssetSet

logger = logging.getLogger(__name__)

CIRCLE_SIZE = 160
PETAL_WIDTH = 56
PETAL_HEIGHT = 110
STEM_WIDTH = 36
STEM_HEIGHT = 640
LEAF_WIDTH = 150
LEAF_HEIGHT = 70
PHOTO_SIZE = 256

GOLDEN_ANGLE = math.pi * (3 - math.sqrt(5))


def _blank(width: int, height: int) -> QPixmap:
    pixmap = QPixmap(width, height)
    pixmap.fill(Qt.GlobalColor.transparent)
    return pixmap


def _begin(pixmap: QPixmap) -> QPainter:
    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
    painter.setPen(Qt.PenStyle.NoPen)
    return painter


def paint_circle(size: int = CIRCLE_SIZE) -> QPixmap:
    """Brown seed head with a golden-angle seed pattern."""

    pixmap = _blank(size, size)
    painter = _begin(pixmap)
    center = QPointF(size / 2, size / 2)
    radius = size / 2

    gradient = QRadialGradient(center, radius)
    gradient.setColorAt(0, QColor(139, 90, 43))
    gradient.setColorAt(1, QColor(92, 51, 23))
    painter.setBrush(gradient)
    painter.drawEllipse(center, radius, radius)

    # Seeds: Vogel's spiral
    painter.setBrush(QColor(60, 35, 15))
    seed_count = 140
    seed_radius = size * 0.018
    for n in range(seed_count):
        r = (radius - seed_radius * 2) * math.sqrt(n / seed_count)
        theta = n * GOLDEN_ANGLE
        painter.drawEllipse(
            QPointF(center.x() + r * math.cos(theta), center.y() + r * math.sin(theta)),
            seed_radius,
            seed_radius,
        )
    painter.end()
    return pixmap


def paint_petal(color: QColor, width: int = PETAL_WIDTH, height: int = PETAL_HEIGHT) -> QPixmap:
    """Petal with its tip at the top edge and its base at the bottom."""

    pixmap = _blank(width, height)
    painter = _begin(pixmap)

    path = QPainterPath()
    path.moveTo(width / 2, 0)
    path.cubicTo(width, height * 0.3, width, height * 0.8, width / 2, height)
    path.cubicTo(0, height * 0.8, 0, height * 0.3, width / 2, 0)

    gradient = QLinearGradient(QPointF(0, 0), QPointF(0, height))
    gradient.setColorAt(0, color.lighter(120))
    gradient.setColorAt(1, color.darker(115))
    painter.setBrush(gradient)
    painter.setPen(QPen(color.darker(140), 1))
    painter.drawPath(path)

    # Midrib
    painter.setPen(QPen(color.darker(125), 1.5))
    painter.drawLine(QPointF(width / 2, height * 0.15), QPointF(width / 2, height * 0.9))
    painter.end()
    return pixmap


def paint_stem(width: int = STEM_WIDTH, height: int = STEM_HEIGHT) -> QPixmap:
    pixmap = _blank(width, height)
    painter = _begin(pixmap)
    gradient = QLinearGradient(QPointF(0, 0), QPointF(width, 0))
    gradient.setColorAt(0, QColor(50, 205, 50))
    gradient.setColorAt(1, QColor(34, 120, 34))
    painter.setBrush(gradient)
    painter.drawRoundedRect(QRectF(width * 0.2, 0, width * 0.6, height), 4, 4)
    painter.end()
    return pixmap


def paint_leaf(pointing_left: bool, width: int = LEAF_WIDTH, height: int = LEAF_HEIGHT) -> QPixmap:
    """Leaf whose tip points away from the stem."""

    pixmap = _blank(width, height)
    painter = _begin(pixmap)

    tip_x, base_x = (0.0, float(width)) if pointing_left else (float(width), 0.0)
    mid_y = height / 2
    path = QPainterPath()
    path.moveTo(base_x, mid_y)
    path.quadTo(width / 2, -height * 0.35, tip_x, mid_y)
    path.quadTo(width / 2, height * 1.35, base_x, mid_y)

    gradient = QRadialGradient(QPointF(width / 2, mid_y), width / 2)
    gradient.setColorAt(0, QColor(50, 205, 50))
    gradient.setColorAt(1, QColor(34, 139, 34))
    painter.setBrush(gradient)
    painter.setPen(QPen(QColor(34, 139, 34).darker(120), 1))
    painter.drawPath(path)

    painter.setPen(QPen(QColor(25, 100, 25), 1.5))
    painter.drawLine(QPointF(base_x, mid_y), QPointF(tip_x, mid_y))
    painter.end()
    return pixmap


def paint_photo(size: int = PHOTO_SIZE) -> QPixmap:
    """Round smiling badge revealed at the end."""

    pixmap = _blank(size, size)
    painter = _begin(pixmap)
    center = QPointF(size / 2, size / 2)
    radius = size / 2 - 2

    gradient = QRadialGradient(QPointF(size * 0.4, size * 0.4), radius)
    gradient.setColorAt(0, QColor(255, 241, 118))
    gradient.setColorAt(1, QColor(255, 193, 7))
    painter.setBrush(gradient)
    painter.setPen(QPen(QColor(230, 160, 0), 3))
    painter.drawEllipse(center, radius, radius)

    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(QColor(60, 40, 20))
    eye = size * 0.05
    painter.drawEllipse(QPointF(size * 0.37, size * 0.4), eye, eye * 1.4)
    painter.drawEllipse(QPointF(size * 0.63, size * 0.4), eye, eye * 1.4)

    painter.setPen(QPen(QColor(60, 40, 20), size * 0.035, Qt.PenStyle.SolidLine, Qt.PenCapStyle.RoundCap))
    painter.setBrush(Qt.BrushStyle.NoBrush)
    smile = QRectF(size * 0.3, size * 0.35, size * 0.4, size * 0.35)
    # Angles in 1/16th degree; lower half of the ellipse.
    painter.drawArc(smile, 200 * 16, 140 * 16)
    painter.end()
    return pixmap


def paint_default_assets() -> AssetSet:
    """Paint all seven images."""

    assets = AssetSet(
        circle=paint_circle(),
        front_petal=paint_petal(QColor(255, 140, 0)),
        back_petal=paint_petal(QColor(255, 215, 0)),
        stem=paint_stem(),
        left_leaf=paint_leaf(pointing_left=True),
        right_leaf=paint_leaf(pointing_left=False),
        photo=paint_photo(),
    )
    logger.info("Using painted default artwork")
    return assets

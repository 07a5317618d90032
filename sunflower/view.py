"""Qt host for the sunflower.

Each paint takes one clock reading and draws the flower through a
`QPainterSurface`. A frame timer keeps repainting until the flower is idle,
and left clicks go to the restart button.
"""

from __future__ import annotations

import logging
import time
from typing import Dict

from PyQt6.QtCore import QPointF, QRectF, Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QColor, QImage, QKeySequence, QPainter, QShortcut, QTransform
from PyQt6.QtWidgets import QMainWindow, QWidget

from .assets import AssetSet
from .compositor import Compositor
from .config import SunflowerConfig
from .constants import BACKGROUND_COLOR
from .geometry import Affine, Rect
from .restart import RestartControl
from .state import AnimationState, now_ms
from .surface import Color

logger = logging.getLogger(__name__)


def to_qrect(rect: Rect) -> QRectF:
    return QRectF(rect.left, rect.top, rect.width, rect.height)


def to_qtransform(t: Affine) -> QTransform:
    return QTransform(t.a, t.b, t.c, t.d, t.tx, t.ty)


class QPainterSurface:
    """`DrawSurface` backed by an active `QPainter`."""

    def __init__(self, painter: QPainter, width: float, height: float) -> None:
        self.painter = painter
        self.width = width
        self.height = height

    def clear(self, color: Color) -> None:
        self.painter.fillRect(QRectF(0, 0, self.width, self.height), QColor(*color))

    def draw_image_region(self, image, source: Rect, dest: Rect) -> None:
        if isinstance(image, QImage):
            self.painter.drawImage(to_qrect(dest), image, to_qrect(source))
        else:
            self.painter.drawPixmap(to_qrect(dest), image, to_qrect(source))

    def draw_image(self, image, transform: Affine, alpha: int = 255) -> None:
        painter = self.painter
        painter.save()
        painter.setTransform(to_qtransform(transform), True)
        painter.setOpacity(alpha / 255.0)
        if isinstance(image, QImage):
            painter.drawImage(QPointF(0, 0), image)
        else:
            painter.drawPixmap(QPointF(0, 0), image)
        painter.restore()

    def fill_rect(self, rect: Rect, color: Color) -> None:
        self.painter.fillRect(to_qrect(rect), QColor(*color))

    def draw_text(
        self, text: str, rect: Rect, size: int, color: Color, wrap: bool = False
    ) -> None:
        painter = self.painter
        painter.save()
        font = painter.font()
        font.setPixelSize(size)
        painter.setFont(font)
        painter.setPen(QColor(*color))
        if wrap:
            flags = (
                Qt.AlignmentFlag.AlignHCenter.value
                | Qt.AlignmentFlag.AlignTop.value
                | Qt.TextFlag.TextWordWrap.value
            )
        else:
            flags = Qt.AlignmentFlag.AlignCenter.value
        painter.drawText(to_qrect(rect), int(flags), text)
        painter.restore()


class _ErrorThrottle:
    """Decides when a render failure is worth another status-bar message.

    A canvas too small for the flower fails on every resize repaint. Each
    failure is logged, but `errorReported` fires at most once per
    `cooldown_s` for each key.
    """

    def __init__(self, cooldown_s: float = 6.0) -> None:
        self.cooldown_s = float(cooldown_s)
        self._last_by_key: Dict[str, float] = {}

    def should_show(self, key: str) -> bool:
        now = time.monotonic()
        last = self._last_by_key.get(key)
        if last is not None and (now - last) < self.cooldown_s:
            return False
        self._last_by_key[key] = now
        return True


class SunflowerWidget(QWidget):
    """Paints the animation and keeps a frame timer alive until idle."""

    errorReported = pyqtSignal(str)

    def __init__(self, assets: AssetSet, config: SunflowerConfig, parent=None) -> None:
        super().__init__(parent)
        self.state = AnimationState()
        self.restart = RestartControl(self.state, config.caption, config.greeting)
        self.compositor = Compositor(assets, self.state, self.restart)
        self._err_throttle = _ErrorThrottle(cooldown_s=6.0)
        self._timer = QTimer(self)
        self._timer.setInterval(config.frame_interval_ms)
        self._timer.timeout.connect(self.update)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent, True)

    @property
    def is_ticking(self) -> bool:
        return self._timer.isActive()

    def _set_ticking(self, enabled: bool) -> None:
        if enabled and not self._timer.isActive():
            self._timer.start()
        elif not enabled and self._timer.isActive():
            self._timer.stop()

    def _report_nonfatal(self, key: str, msg: str, *, exc_info: bool = False) -> None:
        """Log an error and (rate-limited) tell the window about it."""

        if exc_info:
            logger.exception(msg)
        else:
            logger.warning(msg)
        if self._err_throttle.should_show(key):
            self.errorReported.emit(msg)

    def restart_animation(self) -> None:
        """Start over from the bare stem, regardless of the current stage."""

        self.state.request_restart()
        self.restart.hide()
        self._set_ticking(True)
        self.update()

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        animating = False
        try:
            painter.setRenderHints(
                QPainter.RenderHint.Antialiasing | QPainter.RenderHint.SmoothPixmapTransform
            )
            surface = QPainterSurface(painter, self.width(), self.height())
            try:
                # One clock sample per pass.
                animating = self.compositor.render(
                    surface, now_ms(), self.width(), self.height()
                )
            except Exception:
                # Draw nothing but the background; resizing retries.
                surface.clear(BACKGROUND_COLOR)
                self._report_nonfatal(
                    "render", "Sunflower: cannot draw the flower (see log).", exc_info=True
                )
        finally:
            painter.end()
        self._set_ticking(animating)

    def mousePressEvent(self, event) -> None:  # noqa: N802
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            if self.restart.handle_pointer_down(pos.x(), pos.y()):
                self._set_ticking(True)
                self.update()
                event.accept()
                return
        super().mousePressEvent(event)


class SunflowerWindow(QMainWindow):
    """Main window hosting the sunflower widget."""

    def __init__(self, assets: AssetSet, config: SunflowerConfig, parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Sunflower")
        self.sunflower = SunflowerWidget(assets, config, self)
        self.sunflower.errorReported.connect(self._show_error)
        self.setCentralWidget(self.sunflower)
        self.resize(config.window_width, config.window_height)

        restart_shortcut = QShortcut(QKeySequence("Ctrl+R"), self)
        restart_shortcut.activated.connect(self.sunflower.restart_animation)

    def _show_error(self, msg: str) -> None:
        self.statusBar().showMessage(msg, 5000)

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

from PyQt6.QtCore import QEvent, QPointF, Qt  # noqa: E402
from PyQt6.QtGui import QColor, QImage, QMouseEvent, QPainter  # noqa: E402

from sunflower.artwork import (  # noqa: E402
    CIRCLE_SIZE,
    STEM_HEIGHT,
    paint_default_assets,
)
from sunflower.compositor import Compositor  # noqa: E402
from sunflower.config import SunflowerConfig  # noqa: E402
from sunflower.constants import BUTTON_COLOR  # noqa: E402
from sunflower.geometry import IDENTITY  # noqa: E402
from sunflower.restart import RestartControl  # noqa: E402
from sunflower.state import AnimationState, now_ms  # noqa: E402
from sunflower.view import (  # noqa: E402
    QPainterSurface,
    SunflowerWidget,
    SunflowerWindow,
    _ErrorThrottle,
    to_qtransform,
)
from tests.fakes import advance_to_idle  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def painted(qapp):
    return paint_default_assets()


def test_default_artwork_sizes(painted):
    assert painted.circle.width() == CIRCLE_SIZE
    assert painted.stem.height() == STEM_HEIGHT
    assert painted.left_leaf.width() == painted.right_leaf.width()


def test_to_qtransform_matches_affine():
    m = IDENTITY.translate(-10, -20).rotate(30).scale(2, 2).translate(100, 50)
    mapped = to_qtransform(m).map(QPointF(7, 3))
    assert (mapped.x(), mapped.y()) == pytest.approx(m.map(7, 3))


def test_idle_frame_renders_to_image(painted):
    state = AnimationState()
    restart = RestartControl(state, "Start again", "Hi")
    compositor = Compositor(painted, state, restart)
    now = advance_to_idle(state)

    image = QImage(540, 960, QImage.Format.Format_ARGB32)
    painter = QPainter(image)
    try:
        animating = compositor.render(QPainterSurface(painter, 540, 960), now, 540, 960)
    finally:
        painter.end()

    assert animating is False
    assert image.pixelColor(25, 25) == QColor(*BUTTON_COLOR)
    # Bottom corner is only ever background.
    assert image.pixelColor(2, 957) == QColor(255, 255, 255)


def test_error_throttle():
    throttle = _ErrorThrottle(cooldown_s=60)
    assert throttle.should_show("render")
    assert not throttle.should_show("render")
    assert throttle.should_show("other")


def test_widget_restart_animation(painted):
    widget = SunflowerWidget(painted, SunflowerConfig())
    _idle_before_now(widget.state)
    widget.restart_animation()
    assert widget.state.restart_requested
    assert widget.is_ticking
    assert not widget.restart.visible


def test_window_hosts_widget(painted):
    window = SunflowerWindow(painted, SunflowerConfig(window_width=400, window_height=800))
    assert window.centralWidget() is window.sunflower
    assert window.width() == 400


def _left_press(x, y):
    pos = QPointF(x, y)
    return QMouseEvent(
        QEvent.Type.MouseButtonPress,
        pos,
        pos,
        Qt.MouseButton.LeftButton,
        Qt.MouseButton.LeftButton,
        Qt.KeyboardModifier.NoModifier,
    )


@pytest.fixture
def widget(painted):
    w = SunflowerWidget(painted, SunflowerConfig())
    w.resize(540, 960)
    w.show()
    yield w
    w.deleteLater()


def _idle_before_now(state):
    advance_to_idle(state, t0=now_ms() - 60000)


def test_paint_keeps_ticking_while_growing(widget):
    widget.grab()
    assert widget.state.stem_start is not None
    assert widget.is_ticking


def test_paint_stops_ticking_once_idle(widget):
    _idle_before_now(widget.state)
    widget._set_ticking(True)

    widget.grab()

    assert widget.compositor.last_frame.is_idle
    assert widget.restart.visible
    assert not widget.is_ticking


def test_paint_error_reported_once_and_ticking_stops(widget, caplog):
    messages = []
    widget.errorReported.connect(messages.append)
    # Too short for the 160 px flower head.
    widget.resize(100, 100)
    widget._set_ticking(True)

    widget.grab()
    widget.grab()

    assert messages == ["Sunflower: cannot draw the flower (see log)."]
    assert not widget.is_ticking
    assert widget.state.stem_start is None
    assert "cannot draw the flower" in caplog.text


def test_left_click_on_button_restarts(widget):
    _idle_before_now(widget.state)
    widget.grab()
    assert not widget.is_ticking

    event = _left_press(100, 60)
    widget.mousePressEvent(event)

    assert event.isAccepted()
    assert widget.state.restart_requested
    assert not widget.restart.visible
    assert widget.is_ticking

    widget.grab()
    assert widget.compositor.last_frame.stem_progress == 0.0
    assert not widget.compositor.last_frame.leaves_active


def test_click_off_button_changes_nothing(widget):
    _idle_before_now(widget.state)
    widget.grab()

    widget.mousePressEvent(_left_press(400, 600))

    assert not widget.state.restart_requested
    assert widget.restart.visible
    assert not widget.is_ticking

import pytest

from sunflower.state import AnimationState
from tests.fakes import RecordingSurface, make_assets


@pytest.fixture
def assets():
    return make_assets()


@pytest.fixture
def state():
    return AnimationState()


@pytest.fixture
def surface():
    return RecordingSurface()

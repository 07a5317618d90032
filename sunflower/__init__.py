"""Sunflower - a stem grows, leaves sprout, sixteen petals open and a photo appears.

The engine is toolkit-free:
- `state`: stage start instants and per-tick progress
- `geometry`: placement of every element
- `compositor`: one draw pass against a `DrawSurface`
- `restart`: the "start again" button

`view` and `app` host it in a PyQt6 window.
"""

from __future__ import annotations

from .assets import AssetSet, load_assets
from .compositor import Compositor
from .errors import AssetError, CanvasError, ConfigError, SunflowerError
from .restart import RestartControl
from .state import AnimationState, Frame, Phase, now_ms

__version__ = "1.0.0"

__all__ = [
    "AnimationState",
    "AssetError",
    "AssetSet",
    "CanvasError",
    "Compositor",
    "ConfigError",
    "Frame",
    "Phase",
    "RestartControl",
    "SunflowerError",
    "load_assets",
    "now_ms",
]

"""The seven bitmaps that make up the sunflower.

Images only need `width()` and `height()` methods (the `QPixmap` API), which
keeps everything above the Qt layer testable with plain fakes.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Optional

from .constants import ASSET_EXTENSION, ASSET_NAMES
from .errors import AssetError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssetSet:
    """Decoded images keyed by role. Validated on construction."""

    circle: Any
    front_petal: Any
    back_petal: Any
    stem: Any
    left_leaf: Any
    right_leaf: Any
    photo: Any

    def __post_init__(self) -> None:
        for f in fields(self):
            image = getattr(self, f.name)
            if image is None:
                raise AssetError(f"asset {f.name!r} is missing")
            if image.width() <= 0 or image.height() <= 0:
                raise AssetError(
                    f"asset {f.name!r} has no pixels ({image.width()}x{image.height()})"
                )

    @classmethod
    def from_mapping(cls, images: Dict[str, Any]) -> "AssetSet":
        missing = [name for name in ASSET_NAMES if images.get(name) is None]
        if missing:
            raise AssetError(f"missing assets: {', '.join(missing)}")
        return cls(**{name: images[name] for name in ASSET_NAMES})


def asset_path(directory: str, name: str) -> str:
    return os.path.join(directory, name + ASSET_EXTENSION)


def load_assets(
    directory: str, loader: Optional[Callable[[str], Any]] = None
) -> AssetSet:
    """Load all seven assets from `directory`.

    `loader` turns a file path into an image; it defaults to `QPixmap`.
    Any missing file or image that fails to decode raises `AssetError`.
    """

    if loader is None:
        from PyQt6.QtGui import QPixmap

        loader = QPixmap

    if not os.path.isdir(directory):
        raise AssetError(f"asset directory not found: {directory}")

    images: Dict[str, Any] = {}
    for name in ASSET_NAMES:
        path = asset_path(directory, name)
        if not os.path.isfile(path):
            raise AssetError(f"asset {name!r} not found at {path}")
        image = loader(path)
        # A failed decode yields a null (0x0) pixmap; AssetSet rejects it.
        images[name] = image
        logger.debug("Loaded %s (%dx%d)", path, image.width(), image.height())

    assets = AssetSet.from_mapping(images)
    logger.info("Loaded %d assets from %s", len(images), directory)
    return assets

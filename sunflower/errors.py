"""Exceptions raised by the Sunflower engine."""

from __future__ import annotations


class SunflowerError(Exception):
    """Base class for all Sunflower errors."""


class AssetError(SunflowerError):
    """An image asset is missing or has no pixels."""


class CanvasError(SunflowerError):
    """The canvas cannot hold the flower (non-positive or too small)."""


class ConfigError(SunflowerError):
    """An explicitly requested configuration file could not be read."""

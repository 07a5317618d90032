"""Entry point for the Sunflower app.

Wires up:
- Settings (JSON file plus command-line overrides)
- Logging
- Assets (loaded from disk, or painted when no directory is given)
- The main window
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import SunflowerConfig, apply_overrides, load_config
from .errors import SunflowerError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sunflower", description="Grow a sunflower, one petal at a time."
    )
    parser.add_argument("--config", help="path to a JSON settings file")
    parser.add_argument("--assets", dest="asset_dir", help="directory with the seven PNG assets")
    parser.add_argument("--caption", help="restart button caption")
    parser.add_argument("--greeting", help="greeting shown once the flower is complete")
    parser.add_argument("--width", dest="window_width", type=int, help="window width in pixels")
    parser.add_argument("--height", dest="window_height", type=int, help="window height in pixels")
    parser.add_argument("--log-level", dest="log_level", help="DEBUG, INFO, WARNING or ERROR")
    return parser


def resolve_config(args: argparse.Namespace) -> SunflowerConfig:
    config = load_config(args.config)
    return apply_overrides(
        config,
        asset_dir=args.asset_dir,
        caption=args.caption,
        greeting=args.greeting,
        window_width=args.window_width,
        window_height=args.window_height,
        log_level=args.log_level,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run the app; returns the process exit code."""

    args = build_parser().parse_args(argv)
    try:
        config = resolve_config(args)
    except SunflowerError as exc:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error("%s", exc)
        return 2

    logging.basicConfig(level=getattr(logging, config.log_level), format=LOG_FORMAT)

    # Qt is only needed from here on.
    from PyQt6.QtWidgets import QApplication

    from .artwork import paint_default_assets
    from .assets import load_assets
    from .view import SunflowerWindow

    app = QApplication(sys.argv[:1])
    try:
        if config.asset_dir:
            assets = load_assets(config.asset_dir)
        else:
            assets = paint_default_assets()
    except SunflowerError as exc:
        logger.error("Cannot start: %s", exc)
        return 1

    window = SunflowerWindow(assets, config)
    window.show()
    logger.info("Sunflower window shown (%dx%d)", config.window_width, config.window_height)
    return app.exec()

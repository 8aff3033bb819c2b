#!/usr/bin/env python3

# script:tile_info.py

# MIT License
#
# Copyright (c) 2025 Jonas Waldeck
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND.

# -*- coding: utf-8 -*-

"""
Print the slippy tile for a lon/lat (or describe a tile directly).

  tile_info.py --lon 12.30 --lat 45.46 [--zoom 13]
  tile_info.py --x 4376 --y 2932 [--zoom 13]
"""

from __future__ import annotations

import sys
from pathlib import Path

# --- make repo root importable ---
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))
# --------------------------------

from slippy_tiles.config import Config
from slippy_tiles.logging_utils import setup_logger
from slippy_tiles.tiles import (
    lonlat_to_tile,
    tile_bbox_latlon,
    tile_center_lonlat,
    tile_to_lonlat,
    zoom_in,
    zoom_out,
)


def _get_arg(name: str, default: str | None = None) -> str | None:
    if name in sys.argv:
        i = sys.argv.index(name) + 1
        if i >= len(sys.argv):
            raise ValueError(f"{name} needs a value")
        return sys.argv[i]
    return default


def resolve_tile(zoom: int) -> tuple[int, int]:
    lon = _get_arg("--lon")
    lat = _get_arg("--lat")
    if lon is not None and lat is not None:
        return lonlat_to_tile(float(lon), float(lat), zoom)

    x = _get_arg("--x")
    y = _get_arg("--y")
    if x is not None and y is not None:
        return int(x), int(y)

    raise ValueError("either --lon/--lat or --x/--y is required")


def main() -> int:
    cfg = Config(repo_root=REPO_ROOT)
    logger = setup_logger("tile_info", cfg.logs_dir, level=cfg.log_level)

    try:
        zoom = int(_get_arg("--zoom", str(cfg.zoom)))
        x, y = resolve_tile(zoom)
    except ValueError as e:
        logger.error("Bad arguments: %s", e)
        return 2

    lon, lat = tile_to_lonlat(x, y, zoom)
    c_lon, c_lat = tile_center_lonlat(x, y, zoom)
    top_lat, left_lon, bottom_lat, right_lon = tile_bbox_latlon(x, y, zoom)

    logger.info("Zoom: %d", zoom)
    logger.info("tile=(%d, %d) corner=(%.7f, %.7f) center=(%.7f, %.7f)", x, y, lon, lat, c_lon, c_lat)
    logger.info(
        "bbox=[(%.5f,%.5f)->(%.5f,%.5f)]",
        top_lat, left_lon, bottom_lat, right_lon,
    )

    px, py = zoom_out(x, y)
    logger.info("parent z=%d: (%d, %d)", max(zoom - 1, 0), px, py)

    children = ", ".join(f"({cx}, {cy})" for cx, cy in zoom_in(x, y))
    logger.info("children z=%d: %s", zoom + 1, children)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

# slippy_tiles:tiles.py

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

"""
Slippy map tile math (Web Mercator, EPSG:3857).

See https://wiki.openstreetmap.org/wiki/Slippy_map_tilenames

None of these functions validate their input. Out-of-range coordinates,
tiles or zoom levels still produce a deterministic (if meaningless) result.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

logger = logging.getLogger(__name__)

# Tile coordinates are unsigned 32-bit values.
MAX_TILE_INDEX = 2 ** 32 - 1

LonLat = Tuple[float, float]
TileXY = Tuple[int, int]


def tile_count(zoom: int) -> int:
    """Number of tiles per axis at the given zoom."""
    return 2 ** zoom


def to_tile_index(value: float) -> int:
    """
    Float -> tile index conversion used by lonlat_to_tile.

    NaN and +/-inf map to 0. Finite values are truncated toward zero and
    clamped into [0, MAX_TILE_INDEX].
    """
    if not math.isfinite(value):
        logger.debug("Non-finite tile coordinate %r mapped to 0", value)
        return 0

    idx = int(value)
    if idx < 0:
        logger.debug("Negative tile coordinate %r clamped to 0", value)
        return 0
    if idx > MAX_TILE_INDEX:
        logger.debug("Tile coordinate %r saturated to %d", value, MAX_TILE_INDEX)
        return MAX_TILE_INDEX
    return idx


def _ln(v: float) -> float:
    # math.log raises for v <= 0
    if v > 0:
        return math.log(v)
    if v == 0:
        return -math.inf
    return math.nan


def _sinh(v: float) -> float:
    try:
        return math.sinh(v)
    except OverflowError:
        return math.copysign(math.inf, v)


def _lon_to_xtile(lon: float, n: int) -> float:
    return (lon + 180.0) / 360.0 * n


def _lat_to_ytile(lat: float, n: int) -> float:
    lat_rad = math.radians(lat)
    if not math.isfinite(lat_rad):
        return math.nan
    merc = _ln(math.tan(lat_rad) + 1.0 / math.cos(lat_rad))
    return (1.0 - merc / math.pi) / 2.0 * n


def _xtile_to_lon(x: float, n: int) -> float:
    return x / n * 360.0 - 180.0


def _ytile_to_lat(y: float, n: int) -> float:
    lat_rad = math.atan(_sinh(math.pi * (1 - 2 * y / n)))
    return math.degrees(lat_rad)


def lonlat_to_tile(lon: float, lat: float, zoom: int) -> TileXY:
    """
    Convert lon/lat (degrees) to the slippy tile (x, y) containing it at zoom.

    >>> lonlat_to_tile(12.3046875, 45.460130637921, 13)
    (4376, 2932)
    """
    n = tile_count(zoom)
    x = to_tile_index(_lon_to_xtile(lon, n))
    y = to_tile_index(_lat_to_ytile(lat, n))
    return x, y


def tile_to_lonlat(x: int, y: int, zoom: int) -> LonLat:
    """
    Returns (lon, lat) of the top-left (NW) corner of tile x,y at zoom.
    """
    n = tile_count(zoom)
    return _xtile_to_lon(x, n), _ytile_to_lat(y, n)


def tile_center_lonlat(x: int, y: int, zoom: int) -> LonLat:
    n = tile_count(zoom)
    return _xtile_to_lon(x + 0.5, n), _ytile_to_lat(y + 0.5, n)


def tile_bbox_latlon(x: int, y: int, zoom: int) -> Tuple[float, float, float, float]:
    """
    Returns (top_lat, left_lon, bottom_lat, right_lon) for slippy tiles (Web Mercator).
    """
    left_lon, top_lat = tile_to_lonlat(x, y, zoom)
    right_lon, bottom_lat = tile_to_lonlat(x + 1, y + 1, zoom)
    return top_lat, left_lon, bottom_lat, right_lon


def zoom_in(x: int, y: int) -> Tuple[TileXY, TileXY, TileXY, TileXY]:
    """
    Split tile x,y into its 4 children at the next zoom level.

    Order is top-left, top-right, bottom-left, bottom-right:

        +--------+--------+
        | x1, y1 | x2, y1 |
        +--------+--------+
        | x1, y2 | x2, y2 |
        +--------+--------+

    The zoom of the input tile does not matter.
    """
    x1 = 2 * x
    y1 = 2 * y
    return (x1, y1), (x1 + 1, y1), (x1, y1 + 1), (x1 + 1, y1 + 1)


def zoom_out(x: int, y: int) -> TileXY:
    """Parent of tile x,y at the previous zoom level. (0, 0) is its own parent."""
    return x // 2, y // 2


def zoom_out_to(x: int, y: int, src_zoom: int, dst_zoom: int) -> TileXY:
    """
    Ancestor of tile x,y (at src_zoom) at the coarser dst_zoom.
    """
    shift = src_zoom - dst_zoom
    if shift < 0:
        raise ValueError(f"dst_zoom must be <= src_zoom (got src={src_zoom} dst={dst_zoom})")
    return x >> shift, y >> shift

"""
slippy_tiles package

Conversions between lon/lat and slippy map tiles, plus quad-tree navigation.
"""
import logging

from slippy_tiles.tiles import (
    MAX_TILE_INDEX,
    lonlat_to_tile,
    tile_bbox_latlon,
    tile_center_lonlat,
    tile_count,
    tile_to_lonlat,
    to_tile_index,
    zoom_in,
    zoom_out,
    zoom_out_to,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "config",
    "logging_utils",
    "tiles",
    "MAX_TILE_INDEX",
    "lonlat_to_tile",
    "tile_bbox_latlon",
    "tile_center_lonlat",
    "tile_count",
    "tile_to_lonlat",
    "to_tile_index",
    "zoom_in",
    "zoom_out",
    "zoom_out_to",
]

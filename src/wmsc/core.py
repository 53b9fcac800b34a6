"""
Web Mercator resolution math and fixed world extents.
"""

import logging
import math
from typing import List, Sequence, Union

import numpy as np
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError
from .types import BBoxTuple, BoundingBox, CRS, TileFormat
from .utils import arange

logger = logging.getLogger(__name__)

TILE_SIZE = 256
EARTH_RADIUS = 6378137
WORLD_CIRCUMFERENCE = 2 * math.pi * EARTH_RADIUS
MAX_LATITUDE = 85.0511287798

# [west, south, east, north]
WORLD_BBOX: BBoxTuple = (-180.0, -MAX_LATITUDE, 180.0, MAX_LATITUDE)
WORLD_BBOX_METERS: BBoxTuple = (-20037508.3428, -20037508.3428, 20037508.3428, 20037508.3428)


def resolution(zoom: int) -> float:
    """Meters per pixel of a 256x256 Web Mercator tile at ``zoom``."""
    return WORLD_CIRCUMFERENCE / (TILE_SIZE * 2.0 ** zoom)


def resolutions(minzoom: int, maxzoom: int) -> List[float]:
    """
    Resolutions for every zoom level from ``minzoom`` to ``maxzoom`` inclusive.

    Args:
        minzoom: First zoom level
        maxzoom: Last zoom level

    Returns:
        Resolutions in meters per pixel, empty when ``maxzoom < minzoom``
    """
    zooms = np.asarray(arange(minzoom, maxzoom + 1, 1), dtype=np.float64)
    return (WORLD_CIRCUMFERENCE / (TILE_SIZE * np.power(2.0, zooms))).tolist()


def bbox_to_meters(bbox: Sequence[float]) -> BBoxTuple:
    """
    Transform a (west, south, east, north) bbox in degrees to Web Mercator meters.

    Latitudes are clamped to the Web Mercator limit before projecting.

    Raises:
        ValidationError: If the bbox is not a valid extent
    """
    west, south, east, north = bbox
    south = max(south, -MAX_LATITUDE)
    north = min(north, MAX_LATITUDE)
    try:
        degrees = BoundingBox.from_tuple((west, south, east, north), CRS.EPSG_4326)
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid bbox {list(bbox)}: {exc}", cause=exc) from exc
    meters = degrees.to_crs(CRS.EPSG_3857)
    logger.debug("Projected bbox %s to %s", degrees.to_tuple(), meters.to_tuple())
    return meters.to_tuple()


def mime_type(fmt: Union[TileFormat, str]) -> str:
    """Image MIME type for a tile format, ``jpg`` becoming ``image/jpeg``."""
    return f"image/{TileFormat(fmt).subtype}"

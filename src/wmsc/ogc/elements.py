"""
Element tree builders for the parts of a WMS-C capabilities document.

Each builder takes service options (a ``ServiceOptions``, a mapping or
``None``), checks the fields it needs in order and raises ``ValidationError``
naming the first missing one. On success it returns a ``{tag: node}``
fragment in the compact tree form understood by ``wmsc.serializer``.
"""

from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple, Union

from ..config import BuilderConfig
from ..core import WORLD_BBOX, WORLD_BBOX_METERS, bbox_to_meters, mime_type, resolutions
from ..errors import ValidationError
from ..types import BBoxTuple, CRS, ServiceOptions
from ..typing import ATTRIBUTES, TEXT, Fragment, Node
from ..utils import clean, format_value

OptionsLike = Union[ServiceOptions, Mapping[str, Any], None]
ConfigLike = Union[BuilderConfig, Mapping[str, Any], None]

XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"


def require(value: Any, name: str) -> Any:
    if value is None:
        raise ValidationError(f"{name} is required")
    return value


def require_text(value: Any, name: str) -> Any:
    if not value:
        raise ValidationError(f"{name} is required")
    return value


def _online_resource(url: str) -> Node:
    return {
        ATTRIBUTES: {
            "xmlns:xlink": XLINK_NAMESPACE,
            "xlink:type": "simple",
            "xlink:href": url,
        }
    }


def _extents(options: ServiceOptions, config: BuilderConfig) -> Tuple[BBoxTuple, BBoxTuple]:
    """(degrees, meters) extents for the layer and tile set."""
    if config.uses_input_bbox and options.bbox is not None:
        return tuple(options.bbox), bbox_to_meters(options.bbox)
    # Caller bbox is ignored unless explicitly enabled.
    return WORLD_BBOX, WORLD_BBOX_METERS


def build_service(options: OptionsLike = None) -> Fragment:
    """
    Service block: name, title, abstract, keywords, endpoint and terms.

    Raises:
        ValidationError: If ``title`` or ``url`` is missing
    """
    options = ServiceOptions.coerce(options)
    title = require_text(options.title, "title")
    url = require_text(options.url, "url")
    keywords = options.keywords

    return clean({
        "Service": {
            "Name": {TEXT: "OGC:WMS"},
            "Title": {TEXT: title},
            "Abstract": {TEXT: options.abstract},
            "KeywordList": build_keywords(keywords)["KeywordList"] if keywords else None,
            "OnlineResource": _online_resource(url),
            "Fees": {TEXT: options.fees or "none"},
            "AccessConstraints": {TEXT: options.access_constraints or "none"},
        }
    })


def build_keywords(keywords: Optional[Iterable[Any]] = None) -> Fragment:
    """KeywordList with one Keyword per entry, in input order."""
    return {
        "KeywordList": {
            "Keyword": [{TEXT: format_value(keyword)} for keyword in keywords or []]
        }
    }


def build_dcp_type(url: Optional[str]) -> Node:
    """HTTP GET transport binding pointing at ``url``."""
    url = require_text(url, "url")
    return {"HTTP": {"Get": {"OnlineResource": _online_resource(url)}}}


def build_request(options: OptionsLike = None) -> Fragment:
    """
    Request block declaring GetCapabilities, GetMap and GetFeatureInfo.

    Raises:
        ValidationError: If ``url`` or ``format`` is missing
    """
    options = ServiceOptions.coerce(options)
    url = require_text(options.url, "url")
    fmt = require_text(options.format, "format")

    return {
        "Request": {
            "GetCapabilities": {
                "Format": {TEXT: "application/vnd.ogc.wms_xml"},
                "DCPType": build_dcp_type(url),
            },
            "GetMap": {
                "Format": {TEXT: mime_type(fmt)},
                "DCPType": build_dcp_type(url),
            },
            # Declared for WMS compliance; feature info is not served.
            "GetFeatureInfo": {
                "Format": [
                    {TEXT: "application/vnd.ogc.gml"},
                    {TEXT: "text/plain"},
                    {TEXT: "text/html"},
                ],
                "DCPType": build_dcp_type(url),
            },
        }
    }


def build_tile_set(options: OptionsLike = None, config: ConfigLike = None) -> Fragment:
    """
    WMS-C TileSet vendor capability for the Web Mercator tile grid.

    Raises:
        ValidationError: If ``format``, ``identifier``, ``minzoom`` or ``maxzoom`` is missing
    """
    options = ServiceOptions.coerce(options)
    config = BuilderConfig.coerce(config)
    fmt = require_text(options.format, "format")
    identifier = require(options.identifier, "identifier")
    minzoom = require(options.minzoom, "minzoom")
    maxzoom = require(options.maxzoom, "maxzoom")

    _, meters = _extents(options, config)

    return {
        "TileSet": {
            "SRS": {TEXT: CRS.EPSG_3857.value},
            "BoundingBox": build_bounding_box(meters, CRS.EPSG_3857),
            "Resolutions": {TEXT: " ".join(format_value(res) for res in resolutions(minzoom, maxzoom))},
            "Width": {TEXT: "256"},
            "Height": {TEXT: "256"},
            "Format": {TEXT: mime_type(fmt)},
            "Layers": {TEXT: identifier},
        }
    }


def build_layer(options: OptionsLike = None, config: ConfigLike = None) -> Fragment:
    """
    Layer block with its single named sub-layer.

    The Web Mercator extent is listed under both EPSG:900913 and EPSG:3857
    for clients that only know one of the two codes.

    Raises:
        ValidationError: If ``identifier``, ``title`` or ``url`` is missing
    """
    options = ServiceOptions.coerce(options)
    config = BuilderConfig.coerce(config)
    identifier = require(options.identifier, "identifier")
    title = require(options.title, "title")
    require(options.url, "url")

    degrees, meters = _extents(options, config)
    bounding_boxes = [
        build_bounding_box(meters, CRS.EPSG_900913),
        build_bounding_box(degrees, CRS.EPSG_4326),
        build_bounding_box(meters, CRS.EPSG_3857),
    ]

    return {
        "Layer": {
            "Title": {TEXT: title},
            "SRS": [{TEXT: crs.value} for crs in (CRS.EPSG_900913, CRS.EPSG_4326, CRS.CRS_84, CRS.EPSG_3857)],
            "LatLonBoundingBox": build_bounding_box(degrees),
            "BoundingBox": bounding_boxes,
            "Layer": {
                "Name": {TEXT: identifier},
                "Title": {TEXT: title},
                "LatLonBoundingBox": build_bounding_box(degrees),
                "BoundingBox": bounding_boxes,
            },
        }
    }


def build_bounding_box(bbox: Optional[Sequence[float]], srs: Optional[Union[CRS, str]] = None) -> Node:
    """
    Attribute-only bounding box node.

    Args:
        bbox: (west, south, east, north)
        srs: Optional SRS label; omitted from the output when ``None``

    Raises:
        ValidationError: If ``bbox`` is missing or does not have four values
    """
    require(bbox, "bbox")
    if len(bbox) != 4:
        raise ValidationError(f"bbox must have four values [west, south, east, north], got {len(bbox)}")
    west, south, east, north = bbox

    return clean({
        ATTRIBUTES: {
            "SRS": srs.value if isinstance(srs, CRS) else srs,
            "minx": west,
            "miny": south,
            "maxx": east,
            "maxy": north,
        }
    })

"""wmsc - WMS-C GetCapabilities and ServiceExceptionReport documents."""

from ._version import __version__

from .api import exception, get_capabilities
from .config import BBoxSource, BuilderConfig
from .core import WORLD_BBOX, WORLD_BBOX_METERS, resolution, resolutions
from .errors import ConfigurationError, SerializationError, ValidationError, WMSCError
from .ogc import (
    build_bounding_box,
    build_capabilities,
    build_capability,
    build_dcp_type,
    build_exception_report,
    build_keywords,
    build_layer,
    build_request,
    build_service,
    build_tile_set,
)
from .serializer import to_xml
from .types import CRS, BBoxTuple, ExceptionOptions, ServiceOptions, TileFormat
from .utils import arange, clean, format_value, normalize

__all__ = [
    "__version__",
    "get_capabilities",
    "exception",
    "BBoxSource",
    "BuilderConfig",
    "WORLD_BBOX",
    "WORLD_BBOX_METERS",
    "resolution",
    "resolutions",
    "ConfigurationError",
    "SerializationError",
    "ValidationError",
    "WMSCError",
    "build_bounding_box",
    "build_capabilities",
    "build_capability",
    "build_dcp_type",
    "build_exception_report",
    "build_keywords",
    "build_layer",
    "build_request",
    "build_service",
    "build_tile_set",
    "to_xml",
    "CRS",
    "BBoxTuple",
    "ExceptionOptions",
    "ServiceOptions",
    "TileFormat",
    "arange",
    "clean",
    "format_value",
    "normalize",
]

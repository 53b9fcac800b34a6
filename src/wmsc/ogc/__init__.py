"""
OGC WMS-C document builders.

This module contains the element tree builders for the parts of a WMS 1.1.x
capabilities document and the assembler that composes them.
"""

from .capabilities import build_capabilities, build_capability, build_exception_report
from .elements import (
    build_bounding_box,
    build_dcp_type,
    build_keywords,
    build_layer,
    build_request,
    build_service,
    build_tile_set,
)

__all__ = [
    "build_capabilities",
    "build_capability",
    "build_exception_report",
    "build_bounding_box",
    "build_dcp_type",
    "build_keywords",
    "build_layer",
    "build_request",
    "build_service",
    "build_tile_set",
]

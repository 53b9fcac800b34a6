"""
High-level entry points for wmsc.

This module builds the WMS-C documents and serializes them to XML strings
without requiring knowledge of the element tree or the individual builders.
"""

import logging
from typing import Any, Mapping, Optional, Union

from .errors import ValidationError
from .ogc import build_capabilities, build_exception_report
from .ogc.elements import ConfigLike, OptionsLike
from .serializer import XML_DECLARATION, to_xml
from .types import ExceptionOptions, ServiceOptions
from .typing import DECLARATION

logger = logging.getLogger(__name__)

PLACEHOLDER_MESSAGE = "foo"


def get_capabilities(options: OptionsLike, config: ConfigLike = None) -> str:
    """
    Build a WMS-C GetCapabilities document.
    
    Args:
        options: Service options; ``title``, ``url``, ``format``, ``identifier``,
            ``minzoom`` and ``maxzoom`` are required
        config: Optional builder behaviour switches
        
    Returns:
        XML string starting with the XML declaration
        
    Raises:
        ValidationError: If a required option is missing or an option is invalid
        
    Example:
        >>> xml = get_capabilities({
        ...     "url": "http://localhost:5000/WMTS",
        ...     "title": "Tile Service XYZ",
        ...     "identifier": "service-123",
        ...     "format": "png",
        ...     "minzoom": 10,
        ...     "maxzoom": 18,
        ... })
    """
    options = ServiceOptions.coerce(options)
    tree = {DECLARATION: XML_DECLARATION}
    tree.update(build_capabilities(options, config))
    logger.debug("Built capabilities for layer %s (zoom %s-%s)", options.identifier, options.minzoom, options.maxzoom)
    return to_xml(tree, spaces=options.spaces)


def exception(
    message: Optional[str] = None,
    options: Union[ExceptionOptions, Mapping[str, Any], None] = None,
) -> str:
    """
    Build a WMS 1.1.1 ServiceExceptionReport document.

    Invalid options fall back to the defaults with a warning; this path
    does not raise on caller input.
    
    Args:
        message: Exception text; a missing or empty message falls back to a placeholder
        options: Optional ``spaces`` indentation width
        
    Returns:
        XML string starting with the XML declaration
    """
    try:
        options = ExceptionOptions.coerce(options)
    except ValidationError as exc:
        logger.warning("Ignoring invalid exception options, using defaults: %s", exc)
        options = ExceptionOptions()
    if not message:
        logger.warning("No exception message given, using placeholder %r", PLACEHOLDER_MESSAGE)
        message = PLACEHOLDER_MESSAGE
    tree = {DECLARATION: XML_DECLARATION}
    tree.update(build_exception_report(message))
    return to_xml(tree, spaces=options.spaces)

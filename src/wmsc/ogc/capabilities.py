"""Assemble the full capabilities document and the exception report."""

import logging

from ..config import BuilderConfig
from ..types import ServiceOptions
from ..typing import ATTRIBUTES, TEXT, Fragment
from ..utils import normalize
from .elements import (
    ConfigLike,
    OptionsLike,
    build_layer,
    build_request,
    build_service,
    build_tile_set,
    require_text,
)

logger = logging.getLogger(__name__)

WMS_VERSION = "1.1.0"
EXCEPTION_REPORT_VERSION = "1.1.1"

EXCEPTION_FORMATS = (
    "application/vnd.ogc.se_xml",
    "application/vnd.ogc.se_inimage",
    "application/vnd.ogc.se_blank",
)


def build_capability(options: OptionsLike = None, config: ConfigLike = None) -> Fragment:
    """Capability block: Request, Exception, VendorSpecificCapabilities and Layer."""

    options = ServiceOptions.coerce(options)
    config = BuilderConfig.coerce(config)

    return {
        "Capability": {
            "Request": build_request(options)["Request"],
            "Exception": {"Format": [{TEXT: fmt} for fmt in EXCEPTION_FORMATS]},
            "VendorSpecificCapabilities": build_tile_set(options, config),
            "Layer": build_layer(options, config)["Layer"],
        }
    }


def build_capabilities(options: OptionsLike = None, config: ConfigLike = None) -> Fragment:
    """
    Root ``WMT_MS_Capabilities`` element holding the Service and Capability blocks.

    Raises:
        ValidationError: For the first required option found missing
    """
    options = ServiceOptions.coerce(options)
    config = BuilderConfig.coerce(config)

    url = require_text(normalize(options.url, config.strip_trailing_slash), "url")
    if url != options.url:
        logger.debug("Normalized service URL %s to %s", options.url, url)
        options = options.model_copy(update={"url": url})

    root = {ATTRIBUTES: {"version": WMS_VERSION}}
    root.update(build_service(options))
    root.update(build_capability(options, config))
    return {"WMT_MS_Capabilities": root}


def build_exception_report(message: str) -> Fragment:
    """``ServiceExceptionReport`` with a single ``ServiceException``."""

    return {
        "ServiceExceptionReport": {
            ATTRIBUTES: {"version": EXCEPTION_REPORT_VERSION},
            "ServiceException": {TEXT: message},
        }
    }

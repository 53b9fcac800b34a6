"""
Small helpers shared by the document builders.
"""

import math
from collections.abc import Mapping
from decimal import Decimal
from numbers import Real
from typing import Any, List, Optional

import numpy as np

# Floats inside this magnitude range print in positional notation.
PLAIN_DECIMAL_MIN = 1e-6
PLAIN_DECIMAL_MAX = 1e21


def _format_float(value: float) -> str:
    if not math.isfinite(value):
        return repr(value)
    magnitude = abs(value)
    if PLAIN_DECIMAL_MIN <= magnitude < PLAIN_DECIMAL_MAX:
        if value.is_integer():
            return str(int(value))
        # repr holds the shortest round-trip digits; Decimal lays them out positionally.
        return format(Decimal(repr(value)), "f")
    if value == 0:
        return "0"
    mantissa, _, exponent = repr(value).partition("e")
    exponent = int(exponent)
    return f"{mantissa.removesuffix('.0')}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


def format_value(value: Any) -> str:
    """
    Stringify an attribute or text value.

    Integral floats drop their fractional part (``-180.0`` -> ``-180``) and
    booleans are lowercase. Floats between 1e-6 and 1e21 in magnitude are
    written in plain decimal form (``7.29e-05`` -> ``0.0000729``); outside
    that range the exponent form is ``1e-7`` / ``1e+21``.

    Example:
        >>> format_value(-180.0)
        '-180'
        >>> format_value(0.0000729)
        '0.0000729'
        >>> format_value(True)
        'true'
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Real) and not isinstance(value, int):
        return _format_float(float(value))
    return str(value)


def arange(start: int, stop: Optional[int] = None, step: Optional[int] = None) -> List[int]:
    """
    Generate an integer list containing an arithmetic progression.

    Args:
        start: First value, or the exclusive upper bound when ``stop`` is omitted
        stop: Exclusive upper bound
        step: Increment; defaults to -1 when ``stop < start``, else 1

    Returns:
        List of integers, empty when the progression has no terms

    Example:
        >>> arange(3)
        [0, 1, 2]
        >>> arange(3, 6)
        [3, 4, 5]
        >>> arange(6, 3, -1)
        [6, 5, 4]
    """
    if stop is None:
        stop = start or 0
        start = 0
    if not step:
        step = -1 if stop < start else 1
    return np.arange(start, stop, step, dtype=np.int64).tolist()


def clean(node: Any) -> Any:
    """
    Remove absent (``None``) values from an element tree.

    Falsy values that are present, such as ``0`` or ``""``, are kept. A child
    mapping that only held absent values is dropped with them, so optional
    elements never render as empty tags.

    Example:
        >>> clean({"foo": 10, "bar": None})
        {'foo': 10}
        >>> clean({"foo": 0})
        {'foo': 0}
    """
    if isinstance(node, Mapping):
        cleaned = {}
        for key, value in node.items():
            if value is None:
                continue
            pruned = clean(value)
            if isinstance(value, Mapping) and value and not pruned:
                continue
            cleaned[key] = pruned
        return cleaned
    if isinstance(node, list):
        return [clean(item) for item in node if item is not None]
    return node


def normalize(url: Optional[str], strip_trailing_slash: bool = False) -> Optional[str]:
    """
    Normalize a service URL.

    The historical pattern never matched, so by default the URL is returned
    unchanged. ``strip_trailing_slash`` removes exactly one trailing slash.
    """
    if not url or not strip_trailing_slash:
        return url
    return url[:-1] if url.endswith("/") else url

"""
Render generic element trees as XML text.

Trees use the compact form produced by the builders: ``_attributes`` and
``_text`` entries plus child tags, with a list value for repeated siblings.
A top-level ``_declaration`` entry becomes the XML declaration.
"""

import logging
from collections.abc import Mapping
from typing import Any, List

import xml.etree.ElementTree as ET

from .errors import SerializationError, ValidationError
from .typing import ATTRIBUTES, DECLARATION, TEXT, Node
from .utils import format_value

logger = logging.getLogger(__name__)

XML_DECLARATION = {ATTRIBUTES: {"version": "1.0", "encoding": "utf-8"}}

# ElementTree writes empty elements as ``<Tag />``; the documents use ``<Tag/>``.
# Markup characters are escaped in text and attribute values, so this
# sequence only ever closes a tag.
ET_EMPTY_CLOSE = " />"
EMPTY_CLOSE = "/>"


def _declaration(node: Node) -> str:
    attributes = node.get(ATTRIBUTES) or {}
    rendered = "".join(f' {name}="{format_value(value)}"' for name, value in attributes.items())
    return f"<?xml{rendered}?>"


def _populate(element: ET.Element, node: Any) -> None:
    if not isinstance(node, Mapping):
        raise SerializationError(f"Element <{element.tag}> must be a mapping, got {type(node).__name__}")

    for key, value in node.items():
        if value is None:
            continue
        if key == ATTRIBUTES:
            for name, attr in value.items():
                if attr is not None:
                    element.set(name, format_value(attr))
        elif key == TEXT:
            element.text = format_value(value)
        else:
            for child in value if isinstance(value, list) else [value]:
                _populate(ET.SubElement(element, key), child)


def to_elements(tree: Node) -> List[ET.Element]:
    """Build one ElementTree element per top-level tag of ``tree``."""

    elements = []
    for tag, value in tree.items():
        if tag == DECLARATION or value is None:
            continue
        if tag in (ATTRIBUTES, TEXT):
            raise SerializationError(f"Top level of a tree cannot hold {tag}")
        for node in value if isinstance(value, list) else [value]:
            element = ET.Element(tag)
            _populate(element, node)
            elements.append(element)
    return elements


def to_xml(tree: Node, spaces: int = 2) -> str:
    """
    Serialize an element tree to an XML string.

    Args:
        tree: Mapping of top-level tag to node, optionally with ``_declaration``
        spaces: Indentation width; 0 adds no whitespace at all

    Returns:
        XML text without a trailing newline

    Raises:
        ValidationError: If ``spaces`` is negative
        SerializationError: If the tree is malformed
    """
    if spaces < 0:
        raise ValidationError(f"spaces must be a non-negative integer, got {spaces}")
    if not isinstance(tree, Mapping):
        raise SerializationError(f"Tree must be a mapping, got {type(tree).__name__}")

    parts = []
    if tree.get(DECLARATION) is not None:
        parts.append(_declaration(tree[DECLARATION]))

    for element in to_elements(tree):
        if spaces:
            ET.indent(element, space=" " * spaces)
        parts.append(ET.tostring(element, encoding="unicode").replace(ET_EMPTY_CLOSE, EMPTY_CLOSE))

    logger.debug("Serialized %d top-level part(s) with %d space indent", len(parts), spaces)
    return ("\n" if spaces else "").join(parts)

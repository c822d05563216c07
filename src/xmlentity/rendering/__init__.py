"""
Rendering of xmlentity trees to XML text.

This package provides the pretty printer, its options object and the
whitespace normaliser used to compare rendered documents.
"""

from xmlentity.rendering.options import (
    DEFAULT_RENDER_OPTIONS,
    XML_DECLARATION,
    RenderOptions,
)
from xmlentity.rendering.printer import (
    format_attributes,
    normalize_xml,
    pretty_print,
    render_entity,
)

__all__ = [
    "RenderOptions",
    "DEFAULT_RENDER_OPTIONS",
    "XML_DECLARATION",
    "format_attributes",
    "render_entity",
    "pretty_print",
    "normalize_xml",
]

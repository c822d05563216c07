"""Rendering parameters for the pretty printer."""

from attrs import field, frozen

XML_DECLARATION = '<?xml version = "1.0" encoding = "UTF-8"?>'


def _non_negative(instance, attribute, value):
    if value < 0:
        raise ValueError(f"{attribute.name} must be >= 0, got {value}")


@frozen
class RenderOptions:
    indent: int = field(default=4, validator=_non_negative)
    declaration: str = XML_DECLARATION


DEFAULT_RENDER_OPTIONS = RenderOptions()

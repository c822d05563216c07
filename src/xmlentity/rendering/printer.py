"""
Text rendering of entity trees.

Produces indented XML text from an entity tree. Output is deterministic for
a given tree; values are written verbatim (no escaping).
"""

import re
from typing import TYPE_CHECKING

from xmlentity.rendering.options import DEFAULT_RENDER_OPTIONS, RenderOptions

if TYPE_CHECKING:
    from xmlentity.core.entity import Entity

_WHITESPACE_RUN = re.compile(r"\s+")


def format_attributes(entity: "Entity") -> str:
    """Return ` key="value"` pairs for every attribute, in insertion order."""
    return "".join(f' {name}="{value}"' for name, value in entity.attributes.items())


def render_entity(
    entity: "Entity", depth: int = 0, options: RenderOptions | None = None
) -> str:
    """
    Render `entity` and its subtree at the given depth.

    Leaf rules: with no attributes, an empty-text leaf self-closes and a
    text leaf renders `<name>text</name>`; a leaf with attributes always
    self-closes and its text is not written.

    Params:
        entity: Root of the subtree to render
        depth: Nesting level used for indentation
        options: Rendering parameters; defaults to `DEFAULT_RENDER_OPTIONS`

    Returns:
        Rendered text, every element terminated by a newline
    """
    options = options or DEFAULT_RENDER_OPTIONS
    indent = " " * (depth * options.indent)
    parts = [f"{indent}<{entity.name}", format_attributes(entity)]

    if not entity.children:
        if not entity.attributes and entity.text:
            parts.append(f">{entity.text}</{entity.name}>")
        else:
            parts.append("/>")
    else:
        parts.append(">\n")
        for child in entity.children:
            parts.append(render_entity(child, depth + 1, options))
        parts.append(f"{indent}</{entity.name}>")

    parts.append("\n")
    return "".join(parts)


def pretty_print(root: "Entity", options: RenderOptions | None = None) -> str:
    """Render a whole tree, preceded by the XML declaration line."""
    options = options or DEFAULT_RENDER_OPTIONS
    return f"{options.declaration}\n" + render_entity(root, 0, options)


def normalize_xml(xml: str) -> str:
    """Collapse whitespace runs to single spaces and trim, for comparisons."""
    return _WHITESPACE_RUN.sub(" ", xml).strip()

"""
Slash-delimited path queries over entity trees.

A path such as `fuc/avaliacao/componente` is resolved segment by segment.
Each segment is matched with a full visitor walk from the current entity
(the entity itself included), so a match may sit at any depth below the
previous one. Every fully resolved entity is rendered as a single tag.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xmlentity.core.entity import Entity

PATH_SEPARATOR = "/"


def render_tag(entity: "Entity") -> str:
    """Render `entity` as one self-closing tag with its attributes only."""
    if entity.attributes:
        pairs = " ".join(f'{name}="{value}"' for name, value in entity.attributes.items())
        return f"<{entity.name} {pairs}/>\n"
    return f"<{entity.name}/>\n"


def evaluate_segments(entity: "Entity", segments: list[str]) -> str:
    """
    Resolve `segments` starting from `entity`.

    Params:
        entity: Entity the remaining segments are resolved against
        segments: Remaining path segment names

    Returns:
        Concatenated renderings of the resolved entities, in document order
    """
    if not segments:
        return render_tag(entity)

    current, remaining = segments[0], segments[1:]
    matches: list[str] = []

    def collect(candidate: "Entity") -> bool:
        if candidate.name == current:
            matches.append(evaluate_segments(candidate, remaining))
        return True

    entity.accept(collect)
    return "".join(matches)


def check_xpath(root: "Entity", xpath_expression: str) -> str:
    """Evaluate `xpath_expression` against the tree rooted at `root`.

    Empty segments (from leading, trailing or doubled separators) are kept
    and match nothing.
    """
    return evaluate_segments(root, xpath_expression.split(PATH_SEPARATOR))

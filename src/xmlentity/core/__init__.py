"""
Core xmlentity components.

This package provides the entity tree node, the document container and
the visitor type shared by both.
"""

from xmlentity.core.document import Document
from xmlentity.core.entity import Entity
from xmlentity.core.types import ENTITY_NAME_PATTERN, Visitor, is_valid_name

__all__ = [
    "Entity",
    "Document",
    "Visitor",
    "ENTITY_NAME_PATTERN",
    "is_valid_name",
]

"""
Core type definitions for xmlentity.

This module contains the visitor callback type shared by entities and
documents and the naming rule applied when entities join a tree.
"""

import re
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xmlentity.core.entity import Entity

# Returning False prunes the visited node's subtree; siblings are still visited.
Visitor = Callable[["Entity"], bool]

ENTITY_NAME_PATTERN = re.compile(r"[A-Za-z]+")


def is_valid_name(name: str) -> bool:
    """Check whether `name` consists only of ASCII letters (and is non-empty)."""
    return ENTITY_NAME_PATTERN.fullmatch(name) is not None

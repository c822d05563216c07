"""
Document container for the xmlentity model.

A document owns one implicit root entity and exposes whole-tree operations
(rename, removal, path queries, rendering) built on the visitor walk.
"""

import logging
from pathlib import Path

from xmlentity.core.entity import Entity
from xmlentity.core.types import Visitor, is_valid_name
from xmlentity.exceptions import ValidationError
from xmlentity.output import write_xml_file
from xmlentity.query import check_xpath
from xmlentity.rendering import RenderOptions, normalize_xml, pretty_print

logger = logging.getLogger(__name__)


class Document:
    """XML document wrapping a single root entity.

    Entities added with `add_entity` become direct children of the root,
    whose name is `root_name` and which never carries text.

    Params:
        root_name: Tag name of the root wrapper element
    """

    def __init__(self, root_name: str):
        self.root_name = root_name
        self._root = Entity(root_name, "")

    @property
    def root(self) -> Entity:
        return self._root

    def __repr__(self) -> str:
        return f"Document(root_name={self.root_name!r}, entities={len(self._root.children)})"

    def accept(self, visitor: Visitor) -> None:
        """Walk the whole tree in pre-order, starting at the root."""
        self._root.accept(visitor)

    def add_entity(self, entity: Entity) -> None:
        """Add `entity` as a direct child of the root.

        Raises:
            ValidationError: If the entity's name contains non-letter characters.
        """
        if not is_valid_name(entity.name):
            raise ValidationError(
                entity.name, "The name of the entity must contain only letters."
            )
        self._root.add_child(entity)

    def remove_entity(self, entity: Entity) -> None:
        self._root.remove_child(entity)

    def rename_entities(self, old_name: str, new_name: str) -> None:
        """Rename every entity named `old_name`, at any depth."""
        logger.debug("Renaming entities %r -> %r", old_name, new_name)

        def rename(entity: Entity) -> bool:
            if entity.name == old_name:
                entity.name = new_name
            return True

        self.accept(rename)

    def rename_attributes(
        self, entity_name: str, old_attribute_name: str, new_attribute_name: str
    ) -> None:
        """Rename one attribute on every entity named `entity_name`.

        Params:
            entity_name: Name of the entities whose attribute is renamed
            old_attribute_name: Current attribute name
            new_attribute_name: Replacement attribute name
        """

        def rename(entity: Entity) -> bool:
            if entity.name == entity_name:
                entity.rename_attribute(old_attribute_name, new_attribute_name)
            return True

        self.accept(rename)

    def remove_entities(self, entity_name: str) -> None:
        """Remove every entity named `entity_name`, at any depth.

        Each visited entity drops its own direct children with that name
        before the walk descends into the remaining ones.
        """
        logger.debug("Removing entities named %r", entity_name)

        def remove(entity: Entity) -> bool:
            entity.remove_child_by_name(entity_name)
            return True

        self.accept(remove)

    def remove_attributes(self, entity_name: str, attribute_name: str) -> None:
        """Drop `attribute_name` from every entity named `entity_name`."""

        def remove(entity: Entity) -> bool:
            if entity.name == entity_name:
                entity.remove_attribute(attribute_name)
            return True

        self.accept(remove)

    def pretty_print(self, options: RenderOptions | None = None) -> str:
        """Render the document as indented XML text, declaration included."""
        return pretty_print(self._root, options)

    def check_xpath(self, xpath_expression: str) -> str:
        """Evaluate a slash-delimited path against the tree.

        Returns:
            The concatenated single-tag renderings of every matched entity
        """
        return check_xpath(self._root, xpath_expression)

    def create_xml_file(self, directory: str | Path, file_name: str) -> Path:
        """Render the document and write it to `directory/file_name`.

        Raises:
            XMLFileError: If the directory cannot be created or is not a directory.
        """
        return write_xml_file(directory, file_name, self.pretty_print())

    @staticmethod
    def normalize_xml(xml: str) -> str:
        return normalize_xml(xml)

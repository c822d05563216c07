"""
Entity tree node for the xmlentity document model.

An entity is a named node holding either text or child entities, plus an
insertion-ordered attribute mapping. Structural operations validate before
they mutate, so a rejected call leaves the node untouched.
"""

from dataclasses import dataclass, field

from xmlentity.core.types import Visitor, is_valid_name
from xmlentity.exceptions import ValidationError


@dataclass
class Entity:
    """Single node of the XML entity tree.

    `text` is fixed at construction; a node with text can never receive
    children. `attributes` and `children` are populated only through the
    structural operations below. Equality is structural (name, text,
    attributes and children).

    Params:
        name: Tag name. Validated only when the entity is added to a tree.
        text: Leaf text content; empty string means no text.
    """

    name: str
    text: str = ""
    attributes: dict[str, str] = field(default_factory=dict, init=False)
    children: list["Entity"] = field(default_factory=list, init=False)

    def __setattr__(self, key: str, value) -> None:
        if key == "text" and "text" in self.__dict__:
            raise AttributeError("Entity text is read-only once constructed")
        super().__setattr__(key, value)

    @property
    def has_text(self) -> bool:
        return self.text != ""

    def add_child(self, child: "Entity") -> None:
        """Append `child` to this entity's children.

        Params:
            child: Entity to append. Its name must consist only of letters.

        Raises:
            ValidationError: If the child's name contains non-letter characters,
                or if this entity already holds text.
        """
        if not is_valid_name(child.name):
            raise ValidationError(
                child.name, "The name of the child must contain only letters."
            )
        if self.has_text:
            raise ValidationError(
                self.name,
                "Cannot add a child because the entity already contains text.",
            )
        self.children.append(child)

    def remove_child(self, child: "Entity") -> None:
        """Remove the first child equal to `child`; does nothing if absent."""
        if child in self.children:
            self.children.remove(child)

    def remove_child_by_name(self, name: str) -> None:
        """Remove every direct child named `name`."""
        matches = [child for child in self.children if child.name == name]
        for child in matches:
            self.remove_child(child)

    def add_attribute(self, name: str, value: str) -> None:
        # Overwriting an existing key keeps its position.
        self.attributes[name] = value

    def remove_attribute(self, name: str) -> None:
        self.attributes.pop(name, None)

    def rename_child(self, old_name: str, new_name: str) -> None:
        """Rename every entity in this subtree currently named `old_name`.

        The walk includes this entity itself and nodes at any depth. Names are
        compared at visit time, so a node renamed earlier in the same pass is
        matched against its new name.

        Params:
            old_name: Current name to look for
            new_name: Replacement name (not validated)
        """

        def rename(entity: "Entity") -> bool:
            if entity.name == old_name:
                entity.name = new_name
            return True

        self.accept(rename)

    def rename_attribute(self, old_name: str, new_name: str) -> None:
        """Rename one attribute of this entity, keeping its value.

        The renamed attribute moves to the end of the attribute order. Does
        nothing if `old_name` is not present.
        """
        if old_name in self.attributes:
            value = self.attributes.pop(old_name)
            self.attributes[new_name] = value

    def accept(self, visitor: Visitor) -> None:
        """Walk this subtree in pre-order.

        `visitor` is called with each entity; when it returns False the
        entity's children are skipped. The child list is copied after the
        visitor returns, so the visitor may edit the visited entity's own
        children.

        Params:
            visitor: Callback deciding whether to descend into each entity
        """
        if visitor(self):
            for child in list(self.children):
                child.accept(visitor)

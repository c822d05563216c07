"""
Declarative markers recognised by the entity mapper.

Field-level markers go inside `typing.Annotated`:

    class Componente(BaseModel):
        nome: Annotated[str, XmlAttribute()]
        peso: Annotated[int, XmlAttribute(), XmlString(AddPercentage)]

Type-level markers (`XmlElement`, `XmlAdapter`) are applied as class
decorators and are stored on the decorated class only, so subclasses do not
inherit them.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from attrs import frozen

if TYPE_CHECKING:
    from xmlentity.core.entity import Entity

TYPE_ELEMENT_ATTR = "__xml_element__"
TYPE_ADAPTER_ATTR = "__xml_adapter__"


class StringTransformer(ABC):
    """Rewrites an attribute value before it is stored on an entity."""

    @abstractmethod
    def transform(self, value: str) -> str:
        """Return the transformed form of `value`."""
        pass


class EntityAdapter(ABC):
    """Rewrites a freshly mapped entity subtree."""

    @abstractmethod
    def adapt(self, entity: "Entity") -> "Entity":
        """Return the entity that replaces `entity` in the mapping result."""
        pass


def _mark_type(cls: type, attribute: str, marker: Any) -> type:
    if not isinstance(cls, type):
        raise TypeError(f"{type(marker).__name__} can only decorate classes")
    setattr(cls, attribute, marker)
    return cls


def get_type_marker(cls: type, attribute: str) -> Any:
    """Return the marker stored directly on `cls` (not inherited), or None."""
    return vars(cls).get(attribute)


def resolve_xml_name(marker_name: str, fallback: str) -> str:
    """Use the marker's name when it is not blank, else `fallback` lower-cased."""
    return marker_name if marker_name.strip() else fallback.lower()


@frozen
class XmlElement:
    """Marks a class, or a field, as an XML element with an optional name."""

    name: str = ""

    def __call__(self, cls: type) -> type:
        return _mark_type(cls, TYPE_ELEMENT_ATTR, self)


@frozen
class XmlAttribute:
    """Marks a field as an XML attribute with an optional name."""

    name: str = ""


@frozen
class XmlExclude:
    """Marks a field to be left out of the mapping."""


@frozen
class XmlString:
    """Attaches a `StringTransformer` (class or instance) to an attribute field."""

    transformer: "type[StringTransformer] | StringTransformer"


@frozen
class XmlAdapter:
    """Attaches an `EntityAdapter` (class or instance) to a class."""

    adapter: "type[EntityAdapter] | EntityAdapter"

    def __call__(self, cls: type) -> type:
        return _mark_type(cls, TYPE_ADAPTER_ATTR, self)

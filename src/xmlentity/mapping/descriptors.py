"""
Per-type descriptor tables for the entity mapper.

A `TypeDescriptor` records, once per class, the type-level markers and the
role of each primary field in declaration order. Descriptors are immutable
and cached by `DescriptorRegistry`, so a class is inspected only once per
registry.
"""

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, get_args, get_origin, get_type_hints

from pydantic import BaseModel

from xmlentity.exceptions import MappingError
from xmlentity.mapping.markers import (
    TYPE_ADAPTER_ATTR,
    TYPE_ELEMENT_ATTR,
    XmlAdapter,
    XmlAttribute,
    XmlElement,
    XmlExclude,
    XmlString,
    get_type_marker,
    resolve_xml_name,
)

logger = logging.getLogger(__name__)


class FieldRole(Enum):
    """How a field takes part in the mapping."""

    ELEMENT = "element"
    ATTRIBUTE = "attribute"
    EXCLUDED = "excluded"
    UNMARKED = "unmarked"


@dataclass(frozen=True)
class FieldDescriptor:
    """Resolved mapping information for one field."""

    name: str
    role: FieldRole
    xml_name: str
    transformer: XmlString | None = None


@dataclass(frozen=True)
class TypeDescriptor:
    """Resolved mapping information for one class."""

    type_: type
    element: XmlElement | None
    adapter: XmlAdapter | None
    fields: tuple[FieldDescriptor, ...]

    @property
    def is_element(self) -> bool:
        return self.element is not None

    @property
    def entity_name(self) -> str | None:
        """XML name for instances of the type, or None when it is not marked."""
        if self.element is None:
            return None
        return resolve_xml_name(self.element.name, self.type_.__name__)


def _find_marker(metadata: tuple[Any, ...], marker_type: type) -> Any:
    for item in metadata:
        if isinstance(item, marker_type):
            return item
    return None


def describe_field(name: str, metadata: tuple[Any, ...]) -> FieldDescriptor:
    """
    Classify one field from its annotation metadata.

    Precedence is exclude, then element, then attribute; anything else is
    unmarked.

    Params:
        name: Python field name
        metadata: Objects attached to the field's annotation

    Returns:
        Descriptor with the field's role and computed XML name
    """
    if _find_marker(metadata, XmlExclude) is not None:
        return FieldDescriptor(name, FieldRole.EXCLUDED, name)

    element = _find_marker(metadata, XmlElement)
    if element is not None:
        return FieldDescriptor(
            name, FieldRole.ELEMENT, resolve_xml_name(element.name, name)
        )

    attribute = _find_marker(metadata, XmlAttribute)
    if attribute is not None:
        return FieldDescriptor(
            name,
            FieldRole.ATTRIBUTE,
            resolve_xml_name(attribute.name, name),
            _find_marker(metadata, XmlString),
        )

    return FieldDescriptor(name, FieldRole.UNMARKED, name)


def primary_field_metadata(cls: type) -> list[tuple[str, tuple[Any, ...]]]:
    """
    List `(field name, annotation metadata)` for the primary fields of `cls`.

    Pydantic models contribute `model_fields`; dataclasses contribute their
    `__init__` fields. Declaration order is preserved.

    Raises:
        MappingError: If `cls` is neither a pydantic model nor a dataclass
    """
    if issubclass(cls, BaseModel):
        return [
            (name, tuple(info.metadata)) for name, info in cls.model_fields.items()
        ]

    if dataclasses.is_dataclass(cls):
        try:
            hints = get_type_hints(cls, include_extras=True)
        except Exception as e:
            raise MappingError(
                cls.__name__, f"Cannot resolve field annotations: {e}"
            ) from e
        result = []
        for f in dataclasses.fields(cls):
            if not f.init:
                continue
            hint = hints.get(f.name)
            metadata = get_args(hint)[1:] if get_origin(hint) is Annotated else ()
            result.append((f.name, tuple(metadata)))
        return result

    raise MappingError(
        cls.__name__, "Only pydantic models and dataclasses can be mapped."
    )


class DescriptorRegistry:
    """Lazily built cache of `TypeDescriptor` objects keyed by class."""

    def __init__(self):
        self._descriptors: dict[type, TypeDescriptor] = {}

    def __contains__(self, cls: type) -> bool:
        return cls in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    def describe(self, cls: type) -> TypeDescriptor:
        """
        Return the descriptor for `cls`, building it on first use.

        Classes without a type-level `XmlElement` get a descriptor with no
        fields; callers decide whether that is an error.

        Params:
            cls: Class to describe

        Returns:
            Cached, immutable descriptor

        Raises:
            MappingError: If a marked class is neither a pydantic model nor a dataclass
        """
        descriptor = self._descriptors.get(cls)
        if descriptor is not None:
            return descriptor

        element = get_type_marker(cls, TYPE_ELEMENT_ATTR)
        adapter = get_type_marker(cls, TYPE_ADAPTER_ATTR)
        if element is None:
            fields: tuple[FieldDescriptor, ...] = ()
        else:
            fields = tuple(
                describe_field(name, metadata)
                for name, metadata in primary_field_metadata(cls)
            )

        descriptor = TypeDescriptor(
            type_=cls, element=element, adapter=adapter, fields=fields
        )
        self._descriptors[cls] = descriptor
        logger.debug(
            "Built descriptor for %s (%d fields)", cls.__qualname__, len(fields)
        )
        return descriptor

    def clear(self) -> None:
        self._descriptors.clear()

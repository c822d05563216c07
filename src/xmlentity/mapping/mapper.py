"""
Marker-driven conversion of object instances into entity trees.

The mapper reads each class's `TypeDescriptor`, turns element fields into
child entities (lists and tuples become a wrapper entity holding one mapped
child per item), attribute fields into attributes, and finally hands the
result to the class's adapter, if any.
"""

import logging
from typing import Any

from xmlentity.core.entity import Entity
from xmlentity.exceptions import MappingError, ValidationError
from xmlentity.mapping.descriptors import (
    DescriptorRegistry,
    FieldDescriptor,
    FieldRole,
    TypeDescriptor,
)

logger = logging.getLogger(__name__)


def _instantiate(declared: Any, method: str, type_name: str, field_name: str | None):
    """Instantiate a transformer/adapter class, or pass an instance through."""
    try:
        instance = declared() if isinstance(declared, type) else declared
    except Exception as e:
        raise MappingError(
            type_name, f"Cannot instantiate {declared!r}: {e}", field_name
        ) from e
    if not callable(getattr(instance, method, None)):
        raise MappingError(
            type_name, f"{declared!r} does not provide a {method}() method", field_name
        )
    return instance


class EntityMapper:
    """Converts instances of marked classes into `Entity` trees.

    Params:
        registry: Descriptor cache to use; a private one is created if omitted
    """

    def __init__(self, registry: DescriptorRegistry | None = None):
        self.registry = registry if registry is not None else DescriptorRegistry()

    def map(self, instance: Any) -> Entity:
        """
        Build the entity for `instance`.

        Params:
            instance: Object whose class carries a type-level `XmlElement`

        Returns:
            The mapped entity, or whatever the class's adapter returned for it

        Raises:
            MappingError: If the class is not marked, or a field, transformer
                or adapter fails
            ValidationError: If a mapped name is not a valid entity name
        """
        descriptor = self.registry.describe(type(instance))
        if not descriptor.is_element:
            raise MappingError(
                type(instance).__name__,
                "The provided class does not have the required XmlElement annotation.",
            )

        entity = Entity(descriptor.entity_name, "")
        for field in descriptor.fields:
            if field.role is FieldRole.ELEMENT:
                self._map_element(instance, descriptor, field, entity)
            elif field.role is FieldRole.ATTRIBUTE:
                self._map_attribute(instance, descriptor, field, entity)

        if descriptor.adapter is not None:
            entity = self._adapt(descriptor, entity)

        logger.debug("Mapped %s to <%s>", descriptor.type_.__name__, entity.name)
        return entity

    def _read(self, instance: Any, descriptor: TypeDescriptor, field: FieldDescriptor):
        try:
            return getattr(instance, field.name)
        except Exception as e:
            raise MappingError(
                descriptor.type_.__name__, f"Cannot read field: {e}", field.name
            ) from e

    def _map_element(
        self,
        instance: Any,
        descriptor: TypeDescriptor,
        field: FieldDescriptor,
        entity: Entity,
    ) -> None:
        value = self._read(instance, descriptor, field)
        if isinstance(value, (list, tuple)):
            # Wrapper takes the field's own name, not the computed XML name.
            wrapper = Entity(field.name, "")
            for item in value:
                if item is not None:
                    wrapper.add_child(self.map(item))
            entity.add_child(wrapper)
        else:
            entity.add_child(Entity(field.xml_name, str(value)))

    def _map_attribute(
        self,
        instance: Any,
        descriptor: TypeDescriptor,
        field: FieldDescriptor,
        entity: Entity,
    ) -> None:
        value = str(self._read(instance, descriptor, field))
        if field.transformer is not None:
            type_name = descriptor.type_.__name__
            transformer = _instantiate(
                field.transformer.transformer, "transform", type_name, field.name
            )
            try:
                value = transformer.transform(value)
            except Exception as e:
                raise MappingError(
                    type_name, f"Transformer failed: {e}", field.name
                ) from e
        entity.add_attribute(field.xml_name, value)

    def _adapt(self, descriptor: TypeDescriptor, entity: Entity) -> Entity:
        type_name = descriptor.type_.__name__
        adapter = _instantiate(descriptor.adapter.adapter, "adapt", type_name, None)
        try:
            adapted = adapter.adapt(entity)
        except (MappingError, ValidationError):
            raise
        except Exception as e:
            raise MappingError(type_name, f"Adapter failed: {e}") from e
        if not isinstance(adapted, Entity):
            raise MappingError(
                type_name, f"Adapter returned {type(adapted).__name__}, not Entity"
            )
        return adapted


_default_mapper = EntityMapper()


def create_xml_entity_from_class(
    instance: Any, mapper: EntityMapper | None = None
) -> Entity:
    """Map `instance` with `mapper`, or with the module's shared mapper."""
    return (mapper or _default_mapper).map(instance)

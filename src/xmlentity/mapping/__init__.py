"""
Marker-driven mapping from objects to xmlentity trees.

This package provides the declarative markers, the transformer and adapter
capabilities, the per-type descriptor registry and the mapper itself.
"""

from xmlentity.mapping.descriptors import (
    DescriptorRegistry,
    FieldDescriptor,
    FieldRole,
    TypeDescriptor,
    describe_field,
)
from xmlentity.mapping.mapper import EntityMapper, create_xml_entity_from_class
from xmlentity.mapping.markers import (
    EntityAdapter,
    StringTransformer,
    XmlAdapter,
    XmlAttribute,
    XmlElement,
    XmlExclude,
    XmlString,
)

__all__ = [
    "XmlElement",
    "XmlAttribute",
    "XmlExclude",
    "XmlString",
    "XmlAdapter",
    "StringTransformer",
    "EntityAdapter",
    "FieldRole",
    "FieldDescriptor",
    "TypeDescriptor",
    "DescriptorRegistry",
    "describe_field",
    "EntityMapper",
    "create_xml_entity_from_class",
]

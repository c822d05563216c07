"""
xmlentity - an in-memory XML entity model with a marker-driven object mapper.

Entities are assembled under a Document either by hand or by mapping
annotated pydantic models and dataclasses, then rendered as indented XML.
"""

from importlib.metadata import version

from xmlentity.core import Document, Entity
from xmlentity.exceptions import (
    MappingError,
    ValidationError,
    XMLEntityError,
    XMLFileError,
)
from xmlentity.mapping import (
    EntityAdapter,
    EntityMapper,
    StringTransformer,
    XmlAdapter,
    XmlAttribute,
    XmlElement,
    XmlExclude,
    XmlString,
    create_xml_entity_from_class,
)
from xmlentity.rendering import RenderOptions, normalize_xml

__version__ = version("xmlentity")

__all__ = [
    "__version__",
    "Entity",
    "Document",
    "RenderOptions",
    "normalize_xml",
    "XmlElement",
    "XmlAttribute",
    "XmlExclude",
    "XmlString",
    "XmlAdapter",
    "StringTransformer",
    "EntityAdapter",
    "EntityMapper",
    "create_xml_entity_from_class",
    "XMLEntityError",
    "ValidationError",
    "MappingError",
    "XMLFileError",
]

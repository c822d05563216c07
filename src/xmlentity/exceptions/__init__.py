"""
xmlentity exception classes.

This package provides all exception types used throughout xmlentity for
consistent error handling and reporting.
"""

from xmlentity.exceptions.core import (
    MappingError,
    ValidationError,
    XMLEntityError,
    XMLFileError,
)

__all__ = [
    "XMLEntityError",
    "ValidationError",
    "MappingError",
    "XMLFileError",
]

"""
Exception classes for the xmlentity document model and mapper.

This module defines the error types raised when the entity tree is
structurally violated, when an object cannot be mapped to entities, and
when rendered output cannot be written.
"""


class XMLEntityError(Exception):
    """Base exception for all xmlentity errors."""

    pass


class ValidationError(XMLEntityError):
    """Raised when a structural operation would break the entity tree rules."""

    def __init__(self, entity_name: str, reason: str):
        """
        Initialize the exception.

        Params:
            entity_name: Name of the entity involved in the rejected operation
            reason: Human readable description of the violated rule
        """
        self.entity_name = entity_name
        self.reason = reason
        super().__init__(reason)


class MappingError(XMLEntityError):
    """Raised when an object instance cannot be converted into an entity."""

    def __init__(self, type_name: str, reason: str, field_name: str | None = None):
        """
        Initialize the exception.

        Params:
            type_name: Name of the class being mapped
            reason: Why the mapping failed
            field_name: Field being processed when the failure happened, if any
        """
        self.type_name = type_name
        self.reason = reason
        self.field_name = field_name
        super().__init__(reason)

    @property
    def location(self) -> str:
        """Return `Type.field` (or just `Type`) for diagnostics."""
        if self.field_name:
            return f"{self.type_name}.{self.field_name}"
        return self.type_name


class XMLFileError(XMLEntityError, OSError):
    """Raised when rendered XML cannot be written to the requested location."""

    def __init__(self, path: str, reason: str):
        """
        Initialize the exception.

        Params:
            path: Directory or file path that could not be used
            reason: Description of the failure
        """
        self.path = path
        self.reason = reason
        super().__init__(reason)

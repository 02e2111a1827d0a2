"""Errors raised by geometric value objects."""


class GeometryError(Exception):
    """Base class for all errors raised by the library."""


class NotFoundError(GeometryError, AttributeError):
    """Raised when a named attribute or operation does not exist.

    Subclasses AttributeError so that ``getattr(obj, name, default)`` and
    ``hasattr`` keep their usual behavior.
    """


class ImmutabilityError(GeometryError, AttributeError):
    """Raised when assigning to or deleting an attribute of a value object."""

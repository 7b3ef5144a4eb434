"""Custom exception classes for the file registry."""


class RegistryException(Exception):
    """
    Base exception class for all registry errors.
    """
    pass


class IdSpaceExhaustedError(RegistryException):
    """
    Raised when the identifier counter cannot advance any further.

    Fatal: the create in progress is aborted before any state changes.
    """
    pass


class InvalidFieldError(RegistryException, ValueError):
    """
    Raised when a field value falls outside its declared domain.
    """
    pass


class SnapshotError(RegistryException):
    """
    Raised when a registry snapshot cannot be read, validated or restored.
    """
    pass


class IdCollisionError(RegistryException):
    """
    Raised when a new record would land on an id that is already stored.
    """
    pass

"""
Exception hierarchy for the gateway.

Hierarchy:
    DocsGatewayError (base)
    ├── ConfigurationError    startup only, aborts the process
    ├── InvalidPathError      400
    ├── InvalidPayloadError   400
    ├── DocumentNotFoundError 404
    ├── FileConflictError     409
    └── StorageError          500, wraps the underlying OSError
"""

from typing import Optional


class DocsGatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {type(self.cause).__name__}: {self.cause})"
        return self.message


class ConfigurationError(DocsGatewayError):
    """Settings could not be loaded or point at a missing documents root."""
    pass


class InvalidPathError(DocsGatewayError):
    """A client-supplied path was empty, contained `..`, or escaped the root."""
    pass


class InvalidPayloadError(DocsGatewayError):
    """Request body or one of its fields failed validation."""
    pass


class DocumentNotFoundError(DocsGatewayError):
    """The requested document or rename source does not exist."""
    pass


class FileConflictError(DocsGatewayError):
    """The rename destination already exists."""
    pass


class StorageError(DocsGatewayError):
    """
    Filesystem operation failed for a reason other than "not found".

    `message` is safe to return to clients; the cause is only logged.
    """

    def __init__(self, message: str, operation: str, path: str, cause: Optional[Exception] = None):
        super().__init__(message, cause)
        self.operation = operation
        self.path = path

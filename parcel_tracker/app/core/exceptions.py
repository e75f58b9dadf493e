"""
Custom exceptions for the parcel persistence layer.

Provides standardized error codes so callers can branch on
"does not exist" versus "storage failure".
"""

from typing import Any, Dict


class AppException(Exception):
    """Base application exception."""
    
    def __init__(self, message: str, error_code: str, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class NotFoundError(AppException):
    """Raised when a single-record lookup matches no row."""
    
    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found"
        super().__init__(
            message=message,
            error_code="ERR_NOT_FOUND_001",
            details={"resource": resource, "id": resource_id}
        )


class PersistenceError(AppException):
    """Raised when the underlying database call fails."""
    
    def __init__(self, operation: str, message: str = "Database operation failed"):
        self.operation = operation
        super().__init__(
            message=f"{operation}: {message}",
            error_code="ERR_PERSISTENCE_001",
            details={"operation": operation}
        )

"""Domain exceptions for the portal.

Defines domain-level exceptions independent of infrastructure concerns.
The presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class PortalException(Exception):
    """Base exception for all portal application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body sent to clients."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ResourceNotFoundException(PortalException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'product', 'subcategory').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class SqlNotConfiguredException(PortalException):
    """Raised when an operation requires the SQL database but no URL is configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


class SearchFailedException(PortalException):
    """Raised when the search aggregate fails outside every per-source boundary.

    Serialized as the search error envelope rather than the generic error body,
    so clients always find ``results`` and ``total`` in a search response.
    """

    def __init__(self, message: str = "Failed to perform search") -> None:
        super().__init__(message, "SEARCH_FAILED")

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, "results": [], "total": 0}

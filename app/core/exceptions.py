"""
Base exception classes for application-wide error handling.

This module provides a standardized exception hierarchy that enables:
- Consistent error responses across the application
- Machine-readable error codes for client handling
- Detailed error information for debugging

Exception Hierarchy:
    BaseApplicationError (base)
    ├── NotFoundError - Resource not found
    └── ExternalServiceError - Third-party service failures

Usage:
    from core.exceptions import ExternalServiceError, NotFoundError

    # Raise with message only
    raise ExternalServiceError("Payment provider unreachable")

    # Raise with error code for client handling
    raise NotFoundError("Invoice not found", error_code="INVOICE_NOT_FOUND")

    # Convert to dict for API response
    try:
        ...
    except BaseApplicationError as e:
        return JsonResponse(e.to_dict(), status=e.http_status)

Note:
    Uncaught BaseApplicationError instances are rendered by
    core.middleware.ApplicationErrorMiddleware using http_status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class BaseApplicationError(Exception):
    """
    Base exception for all application-specific errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable code for client-side handling
        details: Additional error context (field errors, metadata, etc.)
        http_status: Status code used when the error reaches the HTTP layer

    Example:
        try:
            invoice = InvoiceService.get(invoice_id)
        except NotFoundError as e:
            logger.warning(f"Invoice not found: {e.error_code}")
            return JsonResponse(e.to_dict(), status=e.http_status)
    """

    default_error_code: str = "APPLICATION_ERROR"
    http_status: int = 400

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description
            error_code: Machine-readable error code (defaults to class default)
            details: Additional error context
        """
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dict with error, error_code, and details keys

        Example:
            {
                "error": "Invalid request",
                "error_code": "INVALID_GATEWAY_REQUEST",
                "details": {"gateway": "AliPay"}
            }
        """
        result: dict[str, Any] = {
            "error": self.message,
            "error_code": self.error_code,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


class NotFoundError(BaseApplicationError):
    """
    Raised when a requested resource is not found.

    Example:
        invoice = Invoice.objects.filter(id=invoice_id).first()
        if not invoice:
            raise NotFoundError(
                f"Invoice {invoice_id} not found",
                error_code="INVOICE_NOT_FOUND",
                details={"invoice_id": invoice_id}
            )
    """

    default_error_code: str = "NOT_FOUND"
    http_status: int = 404


class ExternalServiceError(BaseApplicationError):
    """
    Raised when an external service call fails.

    Use for:
    - Payment provider API failures
    - Network timeouts
    - Unexpected external service responses

    Note:
        Log the original error for debugging but don't expose
        internal details to clients in production.
    """

    default_error_code: str = "EXTERNAL_SERVICE_ERROR"
    http_status: int = 502

"""
Billing-specific exceptions.
"""

from __future__ import annotations

from core.exceptions import NotFoundError


class InvoiceNotFoundError(NotFoundError):
    """Raised when an invoice lookup fails."""

    default_error_code: str = "INVOICE_NOT_FOUND"

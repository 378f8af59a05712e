"""
Generic error handling middleware.

Renders domain errors that escape a view as JSON responses so gateway
extensions can raise BaseApplicationError subclasses (for example an
invalid browser return) without each view catching them.

Usage:
    # settings.py
    MIDDLEWARE = [
        ...
        "core.middleware.ApplicationErrorMiddleware",
    ]
"""

from __future__ import annotations

import logging

from django.http import HttpRequest, JsonResponse

from core.exceptions import BaseApplicationError

logger = logging.getLogger(__name__)


class ApplicationErrorMiddleware:
    """Convert uncaught BaseApplicationError into a JSON error response."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request: HttpRequest):
        return self.get_response(request)

    def process_exception(
        self, request: HttpRequest, exception: Exception
    ) -> JsonResponse | None:
        """
        Handle domain errors raised by views.

        Returns:
            JsonResponse for BaseApplicationError, None otherwise so Django's
            default handling applies to unexpected exceptions.
        """
        if not isinstance(exception, BaseApplicationError):
            return None

        logger.warning(
            f"{type(exception).__name__} on {request.method} {request.path}: "
            f"{exception.message}",
            extra={
                "error_code": exception.error_code,
                "path": request.path,
                "method": request.method,
            },
        )
        return JsonResponse(exception.to_dict(), status=exception.http_status)

"""
Custom decorators for views and functions.

Usage:
    from core.decorators import log_request

    @log_request()
    def debug_view(request):
        ...
"""

from __future__ import annotations

import functools
import logging
from typing import Callable


def log_request(logger_name: str | None = None):
    """
    Log request/response for debugging.

    Logs request method, path and response status.

    Args:
        logger_name: Optional logger name (defaults to view module)

    Returns:
        Decorator function

    Example:
        @log_request()
        def my_view(request):
            ...

        @log_request(logger_name="extensions.gateways")
        def webhook_view(request):
            ...
    """

    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(request, *args, **kwargs):
            log = logging.getLogger(logger_name or func.__module__)

            log.debug(
                f"Request: {request.method} {request.path}",
                extra={
                    "method": request.method,
                    "path": request.path,
                },
            )

            response = func(request, *args, **kwargs)

            status_code = getattr(response, "status_code", "unknown")
            log.debug(
                f"Response: {status_code} for {request.method} {request.path}",
                extra={
                    "status_code": status_code,
                    "method": request.method,
                    "path": request.path,
                },
            )

            return response

        return wrapper

    return decorator

"""
Core Application - Infrastructure & Base Classes

Generic, reusable building blocks shared by the billing host and its
gateway extensions. No domain-specific logic lives here.

Models (import from core.models):
    - BaseModel: Abstract model with timestamps (created_at, updated_at)

Exceptions (import from core.exceptions):
    - BaseApplicationError: Base exception with error codes and HTTP status
    - NotFoundError: Resource not found
    - ExternalServiceError: Third-party service failures

Middleware (import from core.middleware):
    - ApplicationErrorMiddleware: Renders uncaught domain errors as JSON

Decorators (import from core.decorators):
    - log_request: Request/response logging decorator

Note:
    Django models are NOT imported here to avoid AppRegistryNotReady
    errors. Import them directly from their modules.
"""

from .exceptions import (
    BaseApplicationError,
    ExternalServiceError,
    NotFoundError,
)
from .decorators import log_request

__all__ = [
    # Exceptions
    "BaseApplicationError",
    "NotFoundError",
    "ExternalServiceError",
    # Decorators
    "log_request",
]

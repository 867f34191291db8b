"""API middleware."""

from buildops.api.middleware.error_handler import ErrorHandlerMiddleware, failure_response
from buildops.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware", "failure_response"]

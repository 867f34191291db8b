"""
Error handling middleware.

Standardizes all API error responses to include:
- error_code: failure kind (e.g. InvalidTransition, RecordNotFound)
- message: human-readable description
- hint: suggested recovery action

Workflow operations return failures as values rather than raising; routes
turn those into the same response shape through ``failure_response``.
"""

import traceback
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from buildops.application.dto.responses import ErrorResponse
from buildops.config import get_logger
from buildops.core.exceptions import (
    AccountInUseError,
    BuildOpsError,
    ConfigurationError,
    ConflictError,
    InvalidTransitionError,
    NegativeStockError,
    NoAccountConfiguredError,
    RecordNotFoundError,
    StorageError,
    UnlinkedItemError,
    ValidationError,
)
from buildops.core.services.results import WorkflowFailure

logger = get_logger(__name__)


# Map exceptions to HTTP status codes (first match wins)
EXCEPTION_STATUS_MAP: dict[type[Exception], int] = {
    InvalidTransitionError: status.HTTP_409_CONFLICT,
    ConflictError: status.HTTP_409_CONFLICT,
    AccountInUseError: status.HTTP_409_CONFLICT,
    NoAccountConfiguredError: 422,
    UnlinkedItemError: 422,
    NegativeStockError: 422,
    RecordNotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ValueError: status.HTTP_400_BAD_REQUEST,
    KeyError: status.HTTP_404_NOT_FOUND,
}

# Same mapping keyed by failure kind, for workflow results
FAILURE_STATUS_MAP: dict[str, int] = {
    "InvalidTransition": status.HTTP_409_CONFLICT,
    "Conflict": status.HTTP_409_CONFLICT,
    "AccountInUse": status.HTTP_409_CONFLICT,
    "NoAccountConfigured": 422,
    "UnlinkedItem": 422,
    "NegativeStock": 422,
    "RecordNotFound": status.HTTP_404_NOT_FOUND,
    "ValidationError": status.HTTP_400_BAD_REQUEST,
    "StorageFailure": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Hint messages per error code / failure kind
HINT_MAP: dict[str, str] = {
    "PURCHASE_ORDER_NOT_FOUND": "Check the order ID and try GET /api/procurement to list orders.",
    "INVENTORY_ITEM_NOT_FOUND": "Check the item ID and try GET /api/inventory to list items.",
    "ACCOUNT_NOT_FOUND": "Check the account ID and try GET /api/financials/accounts.",
    "INVALID_TRANSITION": "Pending orders can be Approved or Rejected; Approved orders can be Ordered.",
    "NO_ACCOUNT_CONFIGURED": "Add an account with POST /api/financials/accounts, then retry.",
    "UNLINKED_ITEM": "Edit the order to link an inventory item, or adjust stock manually.",
    "NEGATIVE_STOCK": "Reduce the adjustment so the quantity stays at or above zero.",
    "CONFLICT": "Another request changed this record. Reload it and retry.",
    "ACCOUNT_IN_USE": "Delete or re-assign the account's transactions first.",
    "VALIDATION_ERROR": "Check the request body against the API schema.",
    "DATABASE_ERROR": "A database operation failed. Check server logs.",
    "ValueError": "A parameter value is invalid. Check the request.",
    "KeyError": "The requested key was not found.",
}

# Default hints by HTTP status code
STATUS_HINTS: dict[int, str] = {
    400: "Check the request parameters and body.",
    404: "The requested resource was not found. Verify the ID.",
    409: "The request conflicts with the record's current state.",
    422: "The request could not be processed. Check the input format.",
    500: "An internal error occurred. Check server logs.",
}


def _get_hint(error_code: str, status_code: int) -> str:
    """Resolve hint from error code, falling back to status-based hint."""
    return HINT_MAP.get(error_code) or STATUS_HINTS.get(status_code, "")


def failure_response(request: Request, failure: WorkflowFailure) -> JSONResponse:
    """Render a workflow failure as a standardized error response."""
    status_code = FAILURE_STATUS_MAP.get(failure.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info(
        "workflow_failure_response",
        request_id=getattr(request.state, "request_id", None),
        path=request.url.path,
        kind=failure.kind,
        status=status_code,
    )

    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error_code=failure.kind,
            message=failure.message,
            hint=_get_hint(failure.code, status_code),
            detail=failure.code or None,
            details=failure.details,
            path=request.url.path,
        ).model_dump(mode="json"),
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware.

    Converts exceptions to standardized JSON error responses.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Handle request with error catching."""
        try:
            return await call_next(request)

        except Exception as e:
            return self._handle_exception(request, e)

    def _handle_exception(
        self,
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Convert exception to standardized JSON response."""
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

        for exc_type, code in EXCEPTION_STATUS_MAP.items():
            if isinstance(exc, exc_type):
                status_code = code
                break

        # Domain errors report their kind; anything else its class name
        if isinstance(exc, BuildOpsError):
            error_code = exc.kind
            specific_code = exc.code
            details = exc.details
            message = exc.message
        else:
            error_code = exc.__class__.__name__
            specific_code = error_code
            details = {}
            message = str(exc)

        request_id = getattr(request.state, "request_id", None)

        log = logger.error if status_code >= 500 else logger.warning
        log(
            "request_exception",
            request_id=request_id,
            path=request.url.path,
            error_type=error_code,
            error=str(exc),
            traceback=traceback.format_exc() if status_code >= 500 else None,
        )

        error_response = ErrorResponse(
            error_code=error_code,
            message=message,
            hint=_get_hint(specific_code, status_code),
            detail=specific_code,
            details=details,
            path=request.url.path,
        )

        return JSONResponse(
            status_code=status_code,
            content=error_response.model_dump(mode="json"),
        )


def setup_exception_handlers(app: FastAPI) -> None:
    """Set up FastAPI exception handlers."""
    from fastapi.exceptions import RequestValidationError
    from starlette.exceptions import HTTPException

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle Pydantic validation errors."""
        errors = []
        for error in exc.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            errors.append(f"{loc}: {error['msg']}")

        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error_code="VALIDATION_ERROR",
                message="Request validation failed",
                hint="Check the request body fields and types.",
                detail="; ".join(errors),
                path=request.url.path,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request,
        exc: HTTPException,
    ) -> JSONResponse:
        """Handle HTTP exceptions with standardized format."""
        error_code = "NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR"
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error_code=error_code,
                message=exc.detail or "An error occurred",
                hint=STATUS_HINTS.get(exc.status_code, ""),
                path=request.url.path,
            ).model_dump(mode="json"),
        )

"""
Domain exceptions for the BuildOps application.

Provides specific exception types for different error scenarios. Each
exception carries a ``kind`` naming its place in the procurement error
taxonomy, which is what workflow results report to callers.
"""

from typing import Any


class BuildOpsError(Exception):
    """Base exception for all BuildOps errors."""

    kind = "Error"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "kind": self.kind,
            "message": self.message,
            "details": self.details,
        }


# Procurement workflow exceptions
class ProcurementError(BuildOpsError):
    """Base exception for workflow failures reported as structured results."""

    pass


class InvalidTransitionError(ProcurementError):
    """Requested status is not reachable from the current status."""

    kind = "InvalidTransition"

    def __init__(self, current: str, requested: str):
        super().__init__(
            f"Cannot change status from '{current}' to '{requested}'.",
            code="INVALID_TRANSITION",
            details={"current": current, "requested": requested},
        )


class NoAccountConfiguredError(ProcurementError):
    """No payment account exists to book an order expense against."""

    kind = "NoAccountConfigured"

    def __init__(self) -> None:
        super().__init__(
            "No bank accounts found. Add an account before ordering.",
            code="NO_ACCOUNT_CONFIGURED",
        )


class UnlinkedItemError(ProcurementError):
    """Purchase order is not tied to a stocked inventory item."""

    kind = "UnlinkedItem"

    def __init__(self, order_id: str):
        super().__init__(
            f"Purchase order {order_id} is not linked to an inventory item "
            "and cannot be received automatically.",
            code="UNLINKED_ITEM",
            details={"order_id": order_id},
        )


class RecordNotFoundError(ProcurementError):
    """Referenced record no longer exists."""

    kind = "RecordNotFound"

    def __init__(self, record_type: str, record_id: str):
        super().__init__(
            f"{record_type.replace('_', ' ').capitalize()} not found: {record_id}",
            code=f"{record_type.upper()}_NOT_FOUND",
            details={"record_type": record_type, "record_id": record_id},
        )


class NegativeStockError(ProcurementError):
    """Adjustment would drive stock quantity below zero."""

    kind = "NegativeStock"

    def __init__(self, item_id: str, current: int, delta: int):
        super().__init__(
            f"Stock quantity cannot be negative: {current} {delta:+d} for item {item_id}",
            code="NEGATIVE_STOCK",
            details={"item_id": item_id, "current": current, "delta": delta},
        )


class ConflictError(ProcurementError):
    """Concurrent write lost a race; re-read and retry the whole operation."""

    kind = "Conflict"

    def __init__(self, record_type: str, record_id: str | None = None, reason: str | None = None):
        message = f"Concurrent modification of {record_type}"
        if record_id:
            message += f" {record_id}"
        if reason:
            message += f": {reason}"
        super().__init__(
            message,
            code="CONFLICT",
            details={"record_type": record_type, "record_id": record_id, "reason": reason},
        )


class AccountInUseError(ProcurementError):
    """Account still has ledger entries booked against it."""

    kind = "AccountInUse"

    def __init__(self, account_id: str):
        super().__init__(
            "Cannot delete account with existing transactions. Re-assign them first.",
            code="ACCOUNT_IN_USE",
            details={"account_id": account_id},
        )


# Validation Exceptions
class ValidationError(ProcurementError):
    """Input validation failed."""

    kind = "ValidationError"

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


# Storage Exceptions
class StorageError(ProcurementError):
    """Base exception for storage operations."""

    kind = "StorageFailure"


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


class ConfigurationError(BuildOpsError):
    """Configuration error."""

    pass

"""Structured results returned by workflow services."""

from dataclasses import dataclass, field
from typing import Any

from buildops.core.entities.inventory import InventoryItem
from buildops.core.entities.ledger import FinancialTransaction
from buildops.core.entities.purchase_order import PurchaseOrder
from buildops.core.exceptions import BuildOpsError


@dataclass
class WorkflowFailure:
    """Failure payload: taxonomy kind plus a user-facing message."""

    kind: str
    message: str
    code: str = ""
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_error(cls, error: BuildOpsError) -> "WorkflowFailure":
        return cls(
            kind=error.kind,
            message=error.message,
            code=error.code,
            details=dict(error.details),
        )


@dataclass
class WorkflowResult:
    """Outcome of a workflow operation. Exactly one of status/error is meaningful."""

    success: bool
    message: str
    status: str | None = None
    order: PurchaseOrder | None = None
    item: InventoryItem | None = None
    transaction: FinancialTransaction | None = None
    error: WorkflowFailure | None = None

    @classmethod
    def failure(cls, error: BuildOpsError) -> "WorkflowResult":
        return cls(
            success=False,
            message=error.message,
            error=WorkflowFailure.from_error(error),
        )

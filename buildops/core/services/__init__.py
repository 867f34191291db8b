"""Core domain services."""

from buildops.core.services.procurement_workflow import ProcurementWorkflowService
from buildops.core.services.results import WorkflowFailure, WorkflowResult
from buildops.core.services.stock_adjustment import StockAdjustmentService

__all__ = [
    "ProcurementWorkflowService",
    "StockAdjustmentService",
    "WorkflowResult",
    "WorkflowFailure",
]

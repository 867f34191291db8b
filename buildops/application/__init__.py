"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases for the CRUD paths around the workflow
3. Providing factory functions for dependency injection

Use cases and workflow services are the only entry points for API handlers.
"""

from buildops.application.services import (
    get_procurement_workflow_service,
    get_stock_adjustment_service,
    reset_services,
)

__all__ = [
    "get_procurement_workflow_service",
    "get_stock_adjustment_service",
    "reset_services",
]

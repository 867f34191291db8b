"""Purchase order endpoints: CRUD plus the status workflow."""

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from buildops.api.dependencies import (
    get_app_settings,
    get_create_po_use_case,
    get_delete_po_use_case,
    get_order_store,
    get_update_po_use_case,
    get_workflow,
)
from buildops.api.middleware.error_handler import failure_response
from buildops.application.dto.mappers import order_to_response, workflow_result_to_response
from buildops.application.dto.requests import (
    CreatePurchaseOrderRequest,
    TransitionStatusRequest,
    UpdatePurchaseOrderRequest,
)
from buildops.application.dto.responses import (
    DeleteResponse,
    ErrorResponse,
    PurchaseOrderListResponse,
    PurchaseOrderResponse,
    WorkflowResultResponse,
)
from buildops.application.use_cases import (
    CreatePurchaseOrderUseCase,
    DeletePurchaseOrderUseCase,
    UpdatePurchaseOrderUseCase,
)
from buildops.config import Settings
from buildops.core.entities import PurchaseOrderStatus
from buildops.core.exceptions import RecordNotFoundError
from buildops.core.interfaces import IPurchaseOrderStore
from buildops.core.services import ProcurementWorkflowService

router = APIRouter(prefix="/api/procurement", tags=["procurement"])

WORKFLOW_ERRORS = {
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
}


@router.post(
    "",
    response_model=PurchaseOrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}},
)
async def create_purchase_order(
    request: CreatePurchaseOrderRequest,
    use_case: CreatePurchaseOrderUseCase = Depends(get_create_po_use_case),
) -> PurchaseOrderResponse:
    """Raise a new Pending purchase order."""
    order = await use_case.execute(request)
    return use_case.to_response(order)


@router.get("", response_model=PurchaseOrderListResponse)
async def list_purchase_orders(
    status_filter: PurchaseOrderStatus | None = Query(default=None, alias="status"),
    limit: int | None = Query(default=None, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    store: IPurchaseOrderStore = Depends(get_order_store),
    settings: Settings = Depends(get_app_settings),
) -> PurchaseOrderListResponse:
    """List purchase orders, newest first."""
    orders = await store.list_orders(
        status=status_filter,
        limit=limit or settings.api.page_size,
        offset=offset,
    )
    return PurchaseOrderListResponse(
        items=[order_to_response(o) for o in orders],
        total=len(orders),
    )


@router.get(
    "/{order_id}",
    response_model=PurchaseOrderResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_purchase_order(
    order_id: str,
    store: IPurchaseOrderStore = Depends(get_order_store),
) -> PurchaseOrderResponse:
    """Get a purchase order by ID."""
    order = await store.get_order(order_id)
    if order is None:
        raise RecordNotFoundError("purchase_order", order_id)
    return order_to_response(order)


@router.put(
    "/{order_id}",
    response_model=PurchaseOrderResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_purchase_order(
    order_id: str,
    request: UpdatePurchaseOrderRequest,
    use_case: UpdatePurchaseOrderUseCase = Depends(get_update_po_use_case),
) -> PurchaseOrderResponse:
    """Edit a purchase order. Total cost is recomputed; status is untouched."""
    order = await use_case.execute(order_id, request)
    return use_case.to_response(order)


@router.delete(
    "/{order_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_purchase_order(
    order_id: str,
    use_case: DeletePurchaseOrderUseCase = Depends(get_delete_po_use_case),
) -> DeleteResponse:
    """Delete a purchase order."""
    return await use_case.execute(order_id)


@router.post(
    "/{order_id}/status",
    response_model=WorkflowResultResponse,
    responses=WORKFLOW_ERRORS,
)
async def transition_status(
    order_id: str,
    body: TransitionStatusRequest,
    request: Request,
    workflow: ProcurementWorkflowService = Depends(get_workflow),
) -> WorkflowResultResponse | JSONResponse:
    """
    Move an order to Approved, Rejected or Ordered.

    Ordering books one Expense transaction for the order's total against the
    default account.
    """
    result = await workflow.transition_status(order_id, body.status)
    if not result.success:
        return failure_response(request, result.error)
    return workflow_result_to_response(result)


@router.post(
    "/{order_id}/receive",
    response_model=WorkflowResultResponse,
    responses=WORKFLOW_ERRORS,
)
async def receive_purchase_order(
    order_id: str,
    request: Request,
    workflow: ProcurementWorkflowService = Depends(get_workflow),
) -> WorkflowResultResponse | JSONResponse:
    """Receive an Ordered purchase order into its linked inventory item."""
    result = await workflow.receive_purchase_order(order_id)
    if not result.success:
        return failure_response(request, result.error)
    return workflow_result_to_response(result)

"""Inventory management endpoints."""

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from buildops.api.dependencies import (
    get_add_item_use_case,
    get_app_settings,
    get_delete_item_use_case,
    get_item_store,
    get_stock_adjustment,
    get_update_item_use_case,
)
from buildops.api.middleware.error_handler import failure_response
from buildops.application.dto.mappers import item_to_response, workflow_result_to_response
from buildops.application.dto.requests import (
    AdjustStockRequest,
    CreateInventoryItemRequest,
    UpdateInventoryItemRequest,
)
from buildops.application.dto.responses import (
    DeleteResponse,
    ErrorResponse,
    InventoryItemResponse,
    InventoryListResponse,
    WorkflowResultResponse,
)
from buildops.application.use_cases import (
    AddInventoryItemUseCase,
    DeleteInventoryItemUseCase,
    UpdateInventoryItemUseCase,
)
from buildops.config import Settings
from buildops.core.entities import StockStatus
from buildops.core.exceptions import RecordNotFoundError
from buildops.core.interfaces import IInventoryStore
from buildops.core.services import StockAdjustmentService

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@router.post(
    "",
    response_model=InventoryItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_inventory_item(
    request: CreateInventoryItemRequest,
    use_case: AddInventoryItemUseCase = Depends(get_add_item_use_case),
) -> InventoryItemResponse:
    """Add an item. Stock status is derived from the quantity."""
    item = await use_case.execute(request)
    return use_case.to_response(item)


@router.get("", response_model=InventoryListResponse)
async def list_inventory_items(
    status_filter: StockStatus | None = Query(default=None, alias="status"),
    limit: int | None = Query(default=None, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    store: IInventoryStore = Depends(get_item_store),
    settings: Settings = Depends(get_app_settings),
) -> InventoryListResponse:
    """List inventory items by name."""
    items = await store.list_items(
        status=status_filter,
        limit=limit or settings.api.page_size,
        offset=offset,
    )
    return InventoryListResponse(
        items=[item_to_response(i) for i in items],
        total=len(items),
    )


@router.get("/low-stock", response_model=InventoryListResponse)
async def list_low_stock(
    limit: int | None = Query(default=None, ge=1, le=1000),
    store: IInventoryStore = Depends(get_item_store),
    settings: Settings = Depends(get_app_settings),
) -> InventoryListResponse:
    """Items that are Low Stock or Out of Stock, emptiest first."""
    items = await store.list_low_stock(limit=limit or settings.api.page_size)
    return InventoryListResponse(
        items=[item_to_response(i) for i in items],
        total=len(items),
    )


@router.get(
    "/{item_id}",
    response_model=InventoryItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_inventory_item(
    item_id: str,
    store: IInventoryStore = Depends(get_item_store),
) -> InventoryItemResponse:
    """Get an inventory item by ID."""
    item = await store.get_item(item_id)
    if item is None:
        raise RecordNotFoundError("inventory_item", item_id)
    return item_to_response(item)


@router.put(
    "/{item_id}",
    response_model=InventoryItemResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_inventory_item(
    item_id: str,
    request: UpdateInventoryItemRequest,
    use_case: UpdateInventoryItemUseCase = Depends(get_update_item_use_case),
) -> InventoryItemResponse:
    """Edit an inventory item."""
    item = await use_case.execute(item_id, request)
    return use_case.to_response(item)


@router.delete(
    "/{item_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_inventory_item(
    item_id: str,
    use_case: DeleteInventoryItemUseCase = Depends(get_delete_item_use_case),
) -> DeleteResponse:
    """Delete an inventory item."""
    return await use_case.execute(item_id)


@router.post(
    "/{item_id}/adjust",
    response_model=WorkflowResultResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
async def adjust_stock(
    item_id: str,
    body: AdjustStockRequest,
    request: Request,
    service: StockAdjustmentService = Depends(get_stock_adjustment),
) -> WorkflowResultResponse | JSONResponse:
    """Apply a signed quantity change; the result may not go below zero."""
    result = await service.adjust_stock(item_id, body.delta)
    if not result.success:
        return failure_response(request, result.error)
    return workflow_result_to_response(result)

"""API route modules."""

from buildops.api.routes.activity import router as activity_router
from buildops.api.routes.financials import router as financials_router
from buildops.api.routes.health import router as health_router
from buildops.api.routes.inventory import router as inventory_router
from buildops.api.routes.procurement import router as procurement_router

__all__ = [
    "health_router",
    "procurement_router",
    "inventory_router",
    "financials_router",
    "activity_router",
]

"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from prms.presentation.api.v1.endpoints.health import router as health_router
from prms.presentation.api.v1.endpoints.auth import router as auth_router
from prms.presentation.api.v1.endpoints.rooms import router as rooms_router
from prms.presentation.api.v1.endpoints.tenants import router as tenants_router
from prms.presentation.api.v1.endpoints.payments import router as payments_router
from prms.presentation.api.v1.endpoints.expenses import router as expenses_router
from prms.presentation.api.v1.endpoints.employees import router as employees_router
from prms.presentation.api.v1.endpoints.notifications import router as notifications_router
from prms.presentation.api.v1.endpoints.reports import router as reports_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(rooms_router)
router.include_router(tenants_router)
router.include_router(payments_router)
router.include_router(expenses_router)
router.include_router(employees_router)
router.include_router(notifications_router)
router.include_router(reports_router)

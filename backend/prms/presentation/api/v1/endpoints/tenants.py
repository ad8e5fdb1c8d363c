"""Tenant endpoints, including search and bulk operations."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from prms.application.schemas import (
    BulkIds,
    BulkResult,
    TenantBulkStatus,
    TenantResponse,
    TenantWrite,
)
from prms.application.services import ApplicationState
from prms.application.services.views import search_tenants
from prms.domain.entities import Action, Actor, Module
from prms.domain.exceptions import EntityNotFoundError
from prms.infrastructure.dependencies import get_app_state, permission_required

router = APIRouter(prefix="/tenants", tags=["Tenants"])


@router.get("", response_model=list[TenantResponse])
async def list_tenants(
    search: str = Query("", description="Match on tenant name or room label"),
    _: Actor = Depends(permission_required(Module.TENANTS, Action.VIEW)),
    state: ApplicationState = Depends(get_app_state),
) -> list[TenantResponse]:
    tenants = search_tenants(state.store.tenants, search)
    return [TenantResponse.model_validate(t, from_attributes=True) for t in tenants]


@router.post("", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
async def create_tenant(
    data: TenantWrite,
    _: Actor = Depends(permission_required(Module.TENANTS, Action.ADD)),
    state: ApplicationState = Depends(get_app_state),
) -> TenantResponse:
    tenant = state.store.add_tenant(data.to_entity())
    return TenantResponse.model_validate(tenant, from_attributes=True)


@router.put("/{tenant_id}", response_model=TenantResponse)
async def update_tenant(
    tenant_id: str,
    data: TenantWrite,
    _: Actor = Depends(permission_required(Module.TENANTS, Action.EDIT)),
    state: ApplicationState = Depends(get_app_state),
) -> TenantResponse:
    if not state.store.update_tenant(data.to_entity(tenant_id)):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Tenant", tenant_id)),
        )
    return TenantResponse.model_validate(state.store.get_tenant(tenant_id), from_attributes=True)


@router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tenant(
    tenant_id: str,
    _: Actor = Depends(permission_required(Module.TENANTS, Action.DELETE)),
    state: ApplicationState = Depends(get_app_state),
) -> None:
    if not state.store.delete_tenant(tenant_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Tenant", tenant_id)),
        )


@router.post("/bulk-delete", response_model=BulkResult)
async def bulk_delete_tenants(
    data: BulkIds,
    _: Actor = Depends(permission_required(Module.TENANTS, Action.DELETE)),
    state: ApplicationState = Depends(get_app_state),
) -> BulkResult:
    return BulkResult(affected=state.store.bulk_delete_tenants(data.ids))


@router.post("/bulk-status", response_model=BulkResult)
async def bulk_set_tenant_status(
    data: TenantBulkStatus,
    _: Actor = Depends(permission_required(Module.TENANTS, Action.EDIT)),
    state: ApplicationState = Depends(get_app_state),
) -> BulkResult:
    return BulkResult(affected=state.store.bulk_set_tenant_status(data.ids, data.status))

"""Pydantic DTOs for the Tenant feature."""

from datetime import date

from pydantic import BaseModel, Field

from prms.domain.entities import Tenant, TenantStatus


class TenantWrite(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    room: str = Field(..., min_length=1, max_length=50, description="Room number label")
    phone: str = Field("", max_length=50)
    move_in_date: date | None = None
    status: TenantStatus = TenantStatus.ACTIVE

    def to_entity(self, tenant_id: str = "") -> Tenant:
        return Tenant(
            id=tenant_id,
            name=self.name,
            room=self.room,
            phone=self.phone,
            move_in_date=self.move_in_date,
            status=self.status,
        )


class TenantResponse(BaseModel):
    id: str
    name: str
    room: str
    phone: str
    move_in_date: date | None
    status: TenantStatus

    model_config = {"from_attributes": True}


class TenantBulkStatus(BaseModel):
    ids: list[str] = Field(..., min_length=1)
    status: TenantStatus

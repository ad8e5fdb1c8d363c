"""Pydantic DTOs for the Room feature."""

import datetime as dt

from pydantic import BaseModel, Field

from prms.domain.entities import MaintenanceDetails, Occupancy, PreBooking, Room, RoomStatus


class OccupancySchema(BaseModel):
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    is_open_ended: bool = False

    model_config = {"from_attributes": True}


class MaintenanceSchema(BaseModel):
    cost: float = Field(0, ge=0)
    date: dt.date | None = None

    model_config = {"from_attributes": True}


class PreBookingSchema(BaseModel):
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    tenant_name: str | None = None
    tenant_phone: str | None = None
    is_open_ended: bool = False

    model_config = {"from_attributes": True}


class RoomWrite(BaseModel):
    """Full room payload for create and replace.

    Detail blocks that do not match ``status`` are accepted and dropped.
    """

    room_number: str = Field(..., min_length=1, max_length=50, examples=["101"])
    rent: float = Field(0, ge=0)
    monthly_expenses: float = Field(0, ge=0)
    status: RoomStatus = RoomStatus.AVAILABLE
    building: str | None = Field(None, max_length=100)
    floor: str | None = Field(None, max_length=50)
    images: list[str] = Field(default_factory=list)
    occupancy: OccupancySchema | None = None
    maintenance: MaintenanceSchema | None = None
    pre_booking: PreBookingSchema | None = None

    def to_entity(self, room_id: str = "") -> Room:
        return Room(
            id=room_id,
            room_number=self.room_number,
            rent=self.rent,
            monthly_expenses=self.monthly_expenses,
            status=self.status,
            building=self.building,
            floor=self.floor,
            images=list(self.images),
            occupancy=Occupancy(**self.occupancy.model_dump()) if self.occupancy else None,
            maintenance=MaintenanceDetails(**self.maintenance.model_dump()) if self.maintenance else None,
            pre_booking=PreBooking(**self.pre_booking.model_dump()) if self.pre_booking else None,
        )


class RoomResponse(BaseModel):
    id: str
    room_number: str
    rent: float
    monthly_expenses: float
    projected_profit: float
    status: RoomStatus
    building: str | None
    floor: str | None
    images: list[str]
    occupancy: OccupancySchema | None
    maintenance: MaintenanceSchema | None
    pre_booking: PreBookingSchema | None

    model_config = {"from_attributes": True}
